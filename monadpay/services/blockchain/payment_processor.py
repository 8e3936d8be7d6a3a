"""
Payment processor.

Orchestrates a payment end to end: validate input, build the contract
call, then drive a TransactionTracker through submission and
confirmation using the chain collaborator.

Validation errors, and a tracker that is not idle, are raised to the
caller before anything is submitted.
Submission errors never escape: they land on the tracker as a failed
state.
"""

from loguru import logger

from monadpay.config.constants import DEFAULT_REQUEST_EXPIRY, MAX_REQUEST_EXPIRY
from monadpay.config.settings import settings
from monadpay.config.tokens import get_token_decimals
from monadpay.models import (
    ContractCall,
    OnChainBatchPayment,
    OnChainPayment,
    OnChainPaymentRequest,
    PaymentRequest,
    ProcessorTotals,
    TransactionStatus,
)
from monadpay.services.batch import BatchAggregator
from monadpay.services.lifecycle import TransactionTracker
from monadpay.utils.exceptions import (
    ReceiptTimeoutError,
    SubmissionError,
    TransactionStateError,
    ValidationError,
)
from monadpay.utils.security import mask_address
from monadpay.utils.units import to_smallest_unit
from monadpay.validators import is_valid_address

from .chain_client import ChainClient
from .contract_manager import ContractManager


class PaymentProcessor:
    """
    High-level payment operations.

    Each transacting operation returns the TransactionTracker that
    followed the submission. Pass an idle tracker to subscribe to its
    transitions before submission starts.
    """

    def __init__(
        self,
        client: ChainClient,
        contracts: ContractManager,
        aggregator: BatchAggregator | None = None,
    ) -> None:
        self.client = client
        self.contracts = contracts
        self.aggregator = aggregator or BatchAggregator()

    @classmethod
    def from_settings(cls, client: ChainClient) -> "PaymentProcessor":
        return cls(client, ContractManager(settings.processor_contract_address))

    async def _execute(
        self, call: ContractCall, tracker: TransactionTracker | None = None
    ) -> TransactionTracker:
        tracker = tracker if tracker is not None else TransactionTracker()
        if tracker.status != TransactionStatus.IDLE:
            raise TransactionStateError(
                f"Tracker already follows a transaction ({tracker.status})",
                code="TRACKER_IN_USE",
            )
        tracker.begin()

        try:
            tx_hash = await self.client.submit(call)
        except SubmissionError as e:
            tracker.on_error(e.message)
            return tracker

        tracker.on_hash(tx_hash)
        tracker.on_confirming()

        try:
            receipt = await self.client.wait_for_receipt(tx_hash)
        except ReceiptTimeoutError:
            # Still pending on chain; the tracker stays confirming
            return tracker
        except SubmissionError as e:
            tracker.on_error(e.message)
            return tracker

        tracker.on_receipt(receipt)
        return tracker

    async def send_payment(
        self, request: PaymentRequest, tracker: TransactionTracker | None = None
    ) -> TransactionTracker:
        """
        Send a single payment.

        Args:
            request: Validated payment request (e.g. decoded from a link)
            tracker: Optional idle tracker to drive

        Returns:
            Tracker in its final observed state

        Raises:
            ValidationError: If the amount does not fit the token's precision
        """
        decimals = get_token_decimals(request.token)
        amount = request.amount_in_smallest_unit(decimals)

        if request.chain_id is not None and request.chain_id != settings.chain_id:
            logger.warning(
                f"Payment request targets chain {request.chain_id}, "
                f"configured chain is {settings.chain_id}"
            )

        if request.is_native:
            call = self.contracts.process_payment(request.to, amount, request.label, request.memo)
        else:
            call = self.contracts.process_token_payment(
                request.to, request.token, amount, request.label, request.memo
            )

        logger.info(
            f"Sending {request.amount} "
            f"{'MON' if request.is_native else mask_address(request.token)} "
            f"to {mask_address(request.to)}"
        )
        return await self._execute(call, tracker)

    async def send_batch_payment(
        self,
        recipients: list[str],
        amounts: list[str],
        label: str | None = None,
        token: str | None = None,
        tracker: TransactionTracker | None = None,
    ) -> TransactionTracker:
        """
        Pay several recipients in one transaction.

        Raises:
            ValidationError: If the rows do not form a valid batch
        """
        payload = self.aggregator.aggregate(recipients, amounts, label, token)

        if payload.is_native:
            call = self.contracts.process_batch_payment(
                payload.recipients, payload.amounts, payload.label
            )
        else:
            call = self.contracts.process_batch_token_payment(
                payload.recipients, payload.amounts, payload.token, payload.label
            )
        return await self._execute(call, tracker)

    async def create_payment_request(
        self,
        amount: str,
        token: str | None = None,
        label: str | None = None,
        memo: str | None = None,
        expiry_seconds: int = DEFAULT_REQUEST_EXPIRY,
        tracker: TransactionTracker | None = None,
    ) -> TransactionTracker:
        """
        Register an invoice on chain.

        Args:
            amount: Requested amount (decimal string)
            token: ERC-20 address, or None for native MON
            label: Optional label
            memo: Optional memo
            expiry_seconds: Lifetime, at most 30 days

        Raises:
            ValidationError: On bad amount, token or expiry
        """
        if token and not is_valid_address(token):
            raise ValidationError(f"Invalid token address: {token}", code="INVALID_ADDRESS")
        if not 0 < expiry_seconds <= MAX_REQUEST_EXPIRY:
            raise ValidationError(
                f"Expiry must be between 1 and {MAX_REQUEST_EXPIRY} seconds",
                code="INVALID_EXPIRY",
            )

        amount_units = to_smallest_unit(amount, get_token_decimals(token))
        call = self.contracts.create_payment_request(
            amount_units, token, label, memo, expiry_seconds
        )
        return await self._execute(call, tracker)

    async def pay_payment_request(
        self,
        request_id: str,
        amount_wei: int = 0,
        tracker: TransactionTracker | None = None,
    ) -> TransactionTracker:
        """
        Pay an open request.

        Args:
            request_id: bytes32 request id (0x-prefixed hex)
            amount_wei: Native value to attach (0 for token requests)
        """
        if amount_wei < 0:
            raise ValidationError(f"Value must not be negative: {amount_wei}", code="INVALID_AMOUNT")
        call = self.contracts.pay_payment_request(request_id, amount_wei)
        return await self._execute(call, tracker)

    async def approve_token(
        self,
        token: str,
        amount: str,
        tracker: TransactionTracker | None = None,
    ) -> TransactionTracker:
        """Approve the processor to spend `amount` of `token`."""
        if not is_valid_address(token):
            raise ValidationError(f"Invalid token address: {token}", code="INVALID_ADDRESS")
        call = self.contracts.approve_token(token, to_smallest_unit(amount, get_token_decimals(token)))
        return await self._execute(call, tracker)

    async def fetch_payment_request(self, request_id: str) -> OnChainPaymentRequest:
        """
        Read a payment request from the processor.

        Raises:
            SubmissionError: If the view call fails
        """
        result = await self.client.call(self.contracts.get_payment_request(request_id))
        return self.contracts.decode_payment_request(request_id, result)

    async def fetch_payment_details(self, payment_id: str) -> OnChainPayment:
        """Read a processed single payment."""
        result = await self.client.call(self.contracts.get_payment_details(payment_id))
        return self.contracts.decode_payment_details(payment_id, result)

    async def fetch_batch_payment(self, batch_id: str) -> OnChainBatchPayment:
        """Read a processed batch payment."""
        result = await self.client.call(self.contracts.get_batch_payment(batch_id))
        return self.contracts.decode_batch_payment(batch_id, result)

    async def fetch_totals(self) -> ProcessorTotals:
        """Read the processor's payment, request and batch counters."""
        return ProcessorTotals(
            payments=await self.client.call(self.contracts.get_total_payments()),
            payment_requests=await self.client.call(self.contracts.get_total_payment_requests()),
            batch_payments=await self.client.call(self.contracts.get_total_batch_payments()),
        )

    async def token_balance(self, token: str, account: str) -> int:
        """ERC-20 balance of `account`, in smallest units."""
        if not is_valid_address(token) or not is_valid_address(account):
            raise ValidationError(
                f"Invalid token or account address: {token}, {account}", code="INVALID_ADDRESS"
            )
        return await self.client.call(self.contracts.token_balance(token, account))

    async def token_allowance(self, token: str, owner: str) -> int:
        """
        Amount of `token` the processor may still spend for `owner`.

        Token payments revert when this is below the amount being paid;
        see approve_token.
        """
        if not is_valid_address(token) or not is_valid_address(owner):
            raise ValidationError(
                f"Invalid token or owner address: {token}, {owner}", code="INVALID_ADDRESS"
            )
        return await self.client.call(self.contracts.token_allowance(token, owner))
