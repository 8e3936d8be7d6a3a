"""Transaction lifecycle and contract call models."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransactionStatus(StrEnum):
    """Lifecycle of a single submitted transaction."""

    IDLE = "idle"
    AWAITING_WALLET_APPROVAL = "awaiting_wallet_approval"
    BROADCAST = "broadcast"  # hash assigned
    CONFIRMING = "confirming"  # waiting for a receipt
    CONFIRMED = "confirmed"
    FAILED = "failed"


TERMINAL_STATUSES = frozenset({TransactionStatus.CONFIRMED, TransactionStatus.FAILED})
PENDING_STATUSES = frozenset(
    {
        TransactionStatus.AWAITING_WALLET_APPROVAL,
        TransactionStatus.BROADCAST,
        TransactionStatus.CONFIRMING,
    }
)


class TransactionState(BaseModel):
    """Immutable snapshot of a tracker, handed to listeners for display."""

    model_config = ConfigDict(frozen=True)

    status: TransactionStatus = TransactionStatus.IDLE
    hash: str | None = None
    error: str | None = None
    block_number: int | None = None
    gas_used: int | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_STATUSES

    @property
    def is_confirming(self) -> bool:
        """Broadcast and confirming are the same observable state."""
        return self.status in (TransactionStatus.BROADCAST, TransactionStatus.CONFIRMING)


class TransactionReceipt(BaseModel):
    """Outcome of a mined transaction as reported by the chain collaborator."""

    model_config = ConfigDict(frozen=True)

    tx_hash: str
    success: bool
    block_number: int | None = None
    gas_used: int | None = None


class ContractCall(BaseModel):
    """A contract call ready to be signed and submitted."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    address: str
    abi: list[dict[str, Any]]
    function_name: str
    args: tuple[Any, ...] = ()
    value: int = Field(default=0, ge=0, description="Native value in wei")


class OnChainPaymentRequest(BaseModel):
    """Payee-initiated invoice as stored by the payment processor."""

    model_config = ConfigDict(frozen=True)

    request_id: str
    payee: str
    amount: int
    token: str
    label: str
    memo: str
    created_at: int
    expires_at: int
    completed: bool
    expired: bool

    def is_payable(self, now: int) -> bool:
        """True while the request is open and not past its expiry."""
        return not self.completed and not self.expired and now < self.expires_at


class OnChainPayment(BaseModel):
    """Processed single payment as recorded by the payment processor."""

    model_config = ConfigDict(frozen=True)

    payment_id: str
    sender: str
    recipient: str
    amount: int
    token: str
    label: str
    memo: str
    timestamp: int
    processed: bool


class OnChainBatchPayment(BaseModel):
    """Processed batch payment as recorded by the payment processor."""

    model_config = ConfigDict(frozen=True)

    batch_id: str
    sender: str
    recipients: tuple[str, ...]
    amounts: tuple[int, ...]
    token: str
    label: str
    timestamp: int
    processed: bool

    @property
    def total(self) -> int:
        return sum(self.amounts)


class ProcessorTotals(BaseModel):
    """Counters kept by the payment processor."""

    model_config = ConfigDict(frozen=True)

    payments: int
    payment_requests: int
    batch_payments: int
