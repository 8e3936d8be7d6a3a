"""
Supported token metadata.

MON is the native currency and lives at the zero address; USDC and USDT are
the ERC-20 mocks deployed next to the payment processor.
"""

from pydantic import BaseModel, ConfigDict, Field

from monadpay.config.constants import NATIVE_DECIMALS, ZERO_ADDRESS
from monadpay.config.settings import settings


class TokenInfo(BaseModel):
    """Token metadata used for unit conversion and display."""

    model_config = ConfigDict(frozen=True)

    address: str
    symbol: str
    name: str
    decimals: int = Field(default=NATIVE_DECIMALS, ge=0, le=36)

    @property
    def is_native(self) -> bool:
        return self.address.lower() == ZERO_ADDRESS


SUPPORTED_TOKENS: dict[str, TokenInfo] = {
    "MON": TokenInfo(
        address=ZERO_ADDRESS,
        symbol="MON",
        name="Monad",
        decimals=NATIVE_DECIMALS,
    ),
    "USDC": TokenInfo(
        address=settings.usdc_token_address,
        symbol="USDC",
        name="USD Coin (Mock)",
        decimals=18,
    ),
    "USDT": TokenInfo(
        address=settings.usdt_token_address,
        symbol="USDT",
        name="Tether USD (Mock)",
        decimals=18,
    ),
}


def get_token_by_symbol(symbol: str) -> TokenInfo | None:
    """
    Look up a supported token by symbol (case-insensitive).

    Args:
        symbol: Token symbol, e.g. "usdc"

    Returns:
        TokenInfo or None if the symbol is unknown
    """
    if not symbol:
        return None
    return SUPPORTED_TOKENS.get(symbol.upper())


def get_token_by_address(address: str) -> TokenInfo | None:
    """
    Look up a supported token by contract address (case-insensitive).

    Args:
        address: Token contract address

    Returns:
        TokenInfo or None if the address is unknown
    """
    if not address:
        return None
    address_lower = address.lower()
    for token in SUPPORTED_TOKENS.values():
        if token.address.lower() == address_lower:
            return token
    return None


def get_token_decimals(address: str | None) -> int:
    """Decimals for a token address; native and unknown tokens use 18."""
    if not address:
        return NATIVE_DECIMALS
    token = get_token_by_address(address)
    return token.decimals if token else NATIVE_DECIMALS
