"""Payment intent value objects."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from monadpay.config.constants import MIN_BATCH_RECIPIENTS, NATIVE_DECIMALS, ZERO_ADDRESS
from monadpay.utils.units import to_smallest_unit
from monadpay.validators import is_valid_address, is_valid_amount


class PaymentRequest(BaseModel):
    """
    Canonical single payment intent.

    The amount stays a decimal string in the token's human-readable unit
    and is converted to smallest units only when a contract call is built.
    Empty optional fields are normalized to None.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    to: str = Field(..., description="Recipient address")
    amount: str = Field(..., description="Positive decimal amount, e.g. '1.5'")
    token: str | None = Field(default=None, description="ERC-20 address; None = native MON")
    label: str | None = None
    memo: str | None = None
    chain_id: int | None = Field(default=None, alias="chainId", gt=0)

    @field_validator("token", "label", "memo", mode="before")
    @classmethod
    def empty_to_none(cls, v: object) -> object:
        if v == "":
            return None
        return v

    @field_validator("to")
    @classmethod
    def validate_to(cls, v: str) -> str:
        if not is_valid_address(v):
            raise ValueError(f"Invalid recipient address: {v}")
        return v

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str | None) -> str | None:
        if v is not None and not is_valid_address(v):
            raise ValueError(f"Invalid token address: {v}")
        return v

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: str) -> str:
        if not is_valid_amount(v):
            raise ValueError(f"Amount must be a positive number: {v!r}")
        return v

    @property
    def is_native(self) -> bool:
        """True when paying in the chain's native currency."""
        return self.token is None or self.token.lower() == ZERO_ADDRESS

    def amount_in_smallest_unit(self, decimals: int = NATIVE_DECIMALS) -> int:
        return to_smallest_unit(self.amount, decimals)


class DeepLinkSchema(BaseModel):
    """Parsed view of a native-scheme payment link."""

    model_config = ConfigDict(frozen=True)

    protocol: str
    action: str
    params: PaymentRequest


class BatchPaymentRequest(BaseModel):
    """
    Validated list of (recipient, amount) pairs.

    Built by the batch aggregator once every row passed validation.
    """

    model_config = ConfigDict(frozen=True)

    recipients: tuple[str, ...]
    amounts: tuple[str, ...]
    label: str | None = None
    token: str | None = None

    @model_validator(mode="after")
    def check_rows(self) -> "BatchPaymentRequest":
        if len(self.recipients) != len(self.amounts):
            raise ValueError("Recipients and amounts must have the same length")
        if len(self.recipients) < MIN_BATCH_RECIPIENTS:
            raise ValueError(
                f"Batch needs at least {MIN_BATCH_RECIPIENTS} recipients"
            )
        for address in self.recipients:
            if not is_valid_address(address):
                raise ValueError(f"Invalid recipient address: {address}")
        for amount in self.amounts:
            if not is_valid_amount(amount):
                raise ValueError(f"Amount must be a positive number: {amount!r}")
        return self

    @property
    def total_amount(self) -> Decimal:
        """Display total; never converted back down for the on-chain call."""
        return sum((Decimal(a) for a in self.amounts), Decimal(0))

    def total_smallest_unit(self, decimals: int = NATIVE_DECIMALS) -> int:
        """Exact on-chain total: sum of per-element smallest-unit values."""
        return sum(to_smallest_unit(a, decimals) for a in self.amounts)


class BatchPayload(BaseModel):
    """Arguments of a single on-chain batch call."""

    model_config = ConfigDict(frozen=True)

    recipients: tuple[str, ...]
    amounts: tuple[int, ...]
    label: str
    token: str | None = None

    @property
    def total(self) -> int:
        """Sum of all amounts in smallest units."""
        return sum(self.amounts)

    @property
    def is_native(self) -> bool:
        return self.token is None or self.token.lower() == ZERO_ADDRESS

    @property
    def value(self) -> int:
        """Native value attached to the call (zero for token batches)."""
        return self.total if self.is_native else 0
