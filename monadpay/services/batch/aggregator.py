"""
Batch payment aggregator.

Turns the rows of a batch form (parallel recipient and amount columns)
into a validated BatchPaymentRequest and then into the exact integer
payload of a single on-chain batch call.
"""

from decimal import Decimal
from itertools import zip_longest

from loguru import logger

from monadpay.config.constants import (
    DEFAULT_BATCH_LABEL,
    MIN_BATCH_RECIPIENTS,
    NATIVE_DECIMALS,
)
from monadpay.models import BatchPayload, BatchPaymentRequest
from monadpay.utils.exceptions import ValidationError
from monadpay.utils.security import mask_address
from monadpay.utils.units import to_smallest_unit
from monadpay.validators import is_valid_address, is_valid_amount


class BatchAggregator:
    """
    Validate and aggregate batch payment rows.

    Amounts are converted to smallest units one element at a time; the
    call value is the sum of those integers, never a re-converted float
    or decimal total.
    """

    def __init__(
        self,
        decimals: int = NATIVE_DECIMALS,
        default_label: str = DEFAULT_BATCH_LABEL,
    ) -> None:
        self.decimals = decimals
        self.default_label = default_label

    def validate(
        self,
        recipients: list[str],
        amounts: list[str],
        label: str | None = None,
        token: str | None = None,
    ) -> BatchPaymentRequest:
        """
        Validate batch rows.

        Rows are paired by index. A row blank on both sides is ignored;
        a row filled on only one side (or with a non-positive amount) is a
        length mismatch.

        Args:
            recipients: Recipient address column
            amounts: Amount column (decimal strings)
            label: Optional batch label
            token: Optional ERC-20 address; None pays native MON

        Returns:
            Validated BatchPaymentRequest

        Raises:
            ValidationError: LENGTH_MISMATCH, EMPTY_BATCH,
                INSUFFICIENT_RECIPIENTS or INVALID_ADDRESS
        """
        kept_recipients: list[str] = []
        kept_amounts: list[str] = []
        first_bad_row: int | None = None

        for position, (recipient, amount) in enumerate(
            zip_longest(recipients, amounts, fillvalue=""), start=1
        ):
            recipient = (recipient or "").strip()
            amount = (amount or "").strip()
            if not recipient and not amount:
                continue

            if recipient:
                kept_recipients.append(recipient)
            if amount and is_valid_amount(amount):
                kept_amounts.append(amount)
            elif first_bad_row is None:
                first_bad_row = position

            if not recipient and first_bad_row is None:
                first_bad_row = position

        if len(kept_recipients) != len(kept_amounts) or first_bad_row is not None:
            raise ValidationError(
                f"Recipients and amounts do not line up "
                f"({len(kept_recipients)} recipients, {len(kept_amounts)} amounts)",
                code="LENGTH_MISMATCH",
                position=first_bad_row,
            )

        if not kept_recipients:
            raise ValidationError("Batch has no recipients", code="EMPTY_BATCH")

        if len(kept_recipients) < MIN_BATCH_RECIPIENTS:
            raise ValidationError(
                f"Batch needs at least {MIN_BATCH_RECIPIENTS} recipients",
                code="INSUFFICIENT_RECIPIENTS",
            )

        for position, recipient in enumerate(kept_recipients, start=1):
            if not is_valid_address(recipient):
                raise ValidationError(
                    f"Invalid recipient address at row {position}: {recipient}",
                    code="INVALID_ADDRESS",
                    position=position,
                )

        if token is not None and token != "" and not is_valid_address(token):
            raise ValidationError(f"Invalid token address: {token}", code="INVALID_ADDRESS")

        return BatchPaymentRequest(
            recipients=tuple(kept_recipients),
            amounts=tuple(kept_amounts),
            label=label or None,
            token=token or None,
        )

    @staticmethod
    def total(amounts: list[str]) -> Decimal:
        """
        Display total of the positive amounts in a column.

        Blank and invalid cells are skipped.
        """
        return sum(
            (Decimal(a.strip()) for a in amounts if a and is_valid_amount(a.strip())),
            Decimal(0),
        )

    def build_payload(self, batch: BatchPaymentRequest) -> BatchPayload:
        """
        Convert a validated batch into on-chain call arguments.

        Args:
            batch: Validated batch

        Returns:
            BatchPayload with per-element smallest-unit amounts

        Raises:
            ValidationError: If an amount exceeds the token's precision
        """
        amounts = tuple(to_smallest_unit(a, self.decimals) for a in batch.amounts)
        payload = BatchPayload(
            recipients=batch.recipients,
            amounts=amounts,
            label=batch.label or self.default_label,
            token=batch.token,
        )

        logger.info(
            f"Batch payload built: {len(payload.recipients)} recipients, "
            f"total={batch.total_amount}, token={mask_address(payload.token) if payload.token else 'MON'}"
        )
        return payload

    def aggregate(
        self,
        recipients: list[str],
        amounts: list[str],
        label: str | None = None,
        token: str | None = None,
    ) -> BatchPayload:
        """Validate rows and build the on-chain payload in one step."""
        return self.build_payload(self.validate(recipients, amounts, label, token))
