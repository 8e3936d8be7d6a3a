"""
Contract Manager - builds payment processor and ERC-20 calls.

Every method returns a ContractCall; nothing here talks to the network.
Amounts are already in smallest units.
"""

import re
from typing import Any

from eth_utils import to_checksum_address
from loguru import logger

from monadpay.config.constants import ZERO_ADDRESS
from monadpay.models import (
    ContractCall,
    OnChainBatchPayment,
    OnChainPayment,
    OnChainPaymentRequest,
)
from monadpay.utils.exceptions import ValidationError

from .core_constants import ERC20_ABI, PROCESSOR_ABI


_BYTES32_RE = re.compile(r"^0x[a-fA-F0-9]{64}$")


def _bytes32(value: str, what: str) -> str:
    if not isinstance(value, str) or not _BYTES32_RE.match(value):
        raise ValidationError(f"Invalid {what}: {value!r}", code="INVALID_ID")
    return value


def _positive(amount: int, what: str = "amount") -> int:
    if amount <= 0:
        raise ValidationError(f"{what} must be greater than 0: {amount}", code="INVALID_AMOUNT")
    return amount


class ContractManager:
    """
    Builds calls against the MonadPay payment processor.

    Addresses are checksummed when calls are built; labels and memos are
    passed as empty strings when absent.
    """

    def __init__(self, processor_address: str) -> None:
        """
        Initialize contract manager.

        Args:
            processor_address: Payment processor contract address
        """
        self.processor_address = to_checksum_address(processor_address)
        logger.debug(f"ContractManager initialized: processor={self.processor_address}")

    def _processor_call(self, function_name: str, *args: Any, value: int = 0) -> ContractCall:
        return ContractCall(
            address=self.processor_address,
            abi=PROCESSOR_ABI,
            function_name=function_name,
            args=args,
            value=value,
        )

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def process_payment(
        self,
        to: str,
        amount: int,
        label: str | None = None,
        memo: str | None = None,
    ) -> ContractCall:
        """Native MON payment; the amount travels as the call value."""
        return self._processor_call(
            "processPayment",
            to_checksum_address(to),
            label or "",
            memo or "",
            value=_positive(amount),
        )

    def process_token_payment(
        self,
        to: str,
        token: str,
        amount: int,
        label: str | None = None,
        memo: str | None = None,
    ) -> ContractCall:
        """ERC-20 payment; requires a prior approve() for the processor."""
        return self._processor_call(
            "processTokenPayment",
            to_checksum_address(to),
            to_checksum_address(token),
            _positive(amount),
            label or "",
            memo or "",
        )

    def process_batch_payment(
        self,
        recipients: tuple[str, ...],
        amounts: tuple[int, ...],
        label: str,
    ) -> ContractCall:
        """
        Native batch payment.

        The call value is the exact sum of the per-recipient amounts.
        """
        return self._processor_call(
            "processBatchPayment",
            [to_checksum_address(r) for r in recipients],
            [_positive(a) for a in amounts],
            label,
            value=sum(amounts),
        )

    def process_batch_token_payment(
        self,
        recipients: tuple[str, ...],
        amounts: tuple[int, ...],
        token: str,
        label: str,
    ) -> ContractCall:
        """ERC-20 batch payment; no native value attached."""
        return self._processor_call(
            "processBatchTokenPayment",
            [to_checksum_address(r) for r in recipients],
            [_positive(a) for a in amounts],
            to_checksum_address(token),
            label,
        )

    # ------------------------------------------------------------------
    # Payment requests
    # ------------------------------------------------------------------

    def create_payment_request(
        self,
        amount: int,
        token: str | None,
        label: str | None,
        memo: str | None,
        expiry_seconds: int,
    ) -> ContractCall:
        """
        Payee-initiated invoice with an expiry.

        Args:
            amount: Requested amount in smallest units
            token: ERC-20 address, or None for native MON
            label: Optional label
            memo: Optional memo
            expiry_seconds: Lifetime of the request

        Returns:
            ContractCall for createPaymentRequest
        """
        if expiry_seconds <= 0:
            raise ValidationError(
                f"Expiry must be positive: {expiry_seconds}", code="INVALID_EXPIRY"
            )
        return self._processor_call(
            "createPaymentRequest",
            _positive(amount),
            to_checksum_address(token or ZERO_ADDRESS),
            label or "",
            memo or "",
            expiry_seconds,
        )

    def pay_payment_request(self, request_id: str, value: int = 0) -> ContractCall:
        """Pay an open request; value is the requested amount for native requests."""
        return self._processor_call(
            "payPaymentRequest", _bytes32(request_id, "request id"), value=value
        )

    # ------------------------------------------------------------------
    # ERC-20
    # ------------------------------------------------------------------

    def approve_token(self, token: str, amount: int) -> ContractCall:
        """Allow the processor to pull `amount` of `token` from the signer."""
        return ContractCall(
            address=to_checksum_address(token),
            abi=ERC20_ABI,
            function_name="approve",
            args=(self.processor_address, _positive(amount)),
        )

    def token_allowance(self, token: str, owner: str) -> ContractCall:
        return ContractCall(
            address=to_checksum_address(token),
            abi=ERC20_ABI,
            function_name="allowance",
            args=(to_checksum_address(owner), self.processor_address),
        )

    def token_balance(self, token: str, account: str) -> ContractCall:
        return ContractCall(
            address=to_checksum_address(token),
            abi=ERC20_ABI,
            function_name="balanceOf",
            args=(to_checksum_address(account),),
        )

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def get_payment_request(self, request_id: str) -> ContractCall:
        return self._processor_call("getPaymentRequest", _bytes32(request_id, "request id"))

    def get_payment_details(self, payment_id: str) -> ContractCall:
        return self._processor_call("getPaymentDetails", _bytes32(payment_id, "payment id"))

    def get_batch_payment(self, batch_id: str) -> ContractCall:
        return self._processor_call("getBatchPayment", _bytes32(batch_id, "batch id"))

    def get_total_payments(self) -> ContractCall:
        return self._processor_call("getTotalPayments")

    def get_total_payment_requests(self) -> ContractCall:
        return self._processor_call("getTotalPaymentRequests")

    def get_total_batch_payments(self) -> ContractCall:
        return self._processor_call("getTotalBatchPayments")

    @staticmethod
    def decode_payment_request(request_id: str, result: Any) -> OnChainPaymentRequest:
        """
        Decode the getPaymentRequest tuple.

        Args:
            request_id: Request id that was queried
            result: Decoded tuple (payee, amount, token, label, memo,
                createdAt, expiresAt, completed, expired)

        Returns:
            OnChainPaymentRequest
        """
        payee, amount, token, label, memo, created_at, expires_at, completed, expired = result
        return OnChainPaymentRequest(
            request_id=request_id,
            payee=payee,
            amount=amount,
            token=token,
            label=label,
            memo=memo,
            created_at=created_at,
            expires_at=expires_at,
            completed=completed,
            expired=expired,
        )

    @staticmethod
    def decode_payment_details(payment_id: str, result: Any) -> OnChainPayment:
        """Decode the getPaymentDetails tuple (from, to, amount, token, label, memo, timestamp, processed)."""
        sender, recipient, amount, token, label, memo, timestamp, processed = result
        return OnChainPayment(
            payment_id=payment_id,
            sender=sender,
            recipient=recipient,
            amount=amount,
            token=token,
            label=label,
            memo=memo,
            timestamp=timestamp,
            processed=processed,
        )

    @staticmethod
    def decode_batch_payment(batch_id: str, result: Any) -> OnChainBatchPayment:
        sender, recipients, amounts, token, label, timestamp, processed = result
        return OnChainBatchPayment(
            batch_id=batch_id,
            sender=sender,
            recipients=tuple(recipients),
            amounts=tuple(amounts),
            token=token,
            label=label,
            timestamp=timestamp,
            processed=processed,
        )
