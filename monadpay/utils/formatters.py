"""
Formatters utility.

Display helpers for addresses and amounts.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from monadpay.config.constants import NATIVE_DECIMALS
from monadpay.utils.units import from_smallest_unit
from monadpay.validators import is_valid_address


_TWO_PLACES = Decimal("0.01")


def shorten_address(address: str, chars: int = 4) -> str:
    """
    Shorten address for display.

    Args:
        address: Full address
        chars: Number of hex chars to keep on each side

    Returns:
        Shortened address like "0x92F6...F840", or the input unchanged
        if it is not a valid address

    Examples:
        >>> shorten_address("0x92F6D61C4D88F6Df0dBC260a594681F82347F840")
        '0x92F6...F840'
    """
    if not is_valid_address(address):
        return address
    return f"{address[:chars + 2]}...{address[-chars:]}"


def format_amount(amount: str | int, decimals: int = NATIVE_DECIMALS) -> str:
    """
    Format amount for display with K/M suffixes.

    Args:
        amount: Human amount string ("1.5") or integer smallest units
        decimals: Token decimals, used for integer input only

    Returns:
        Formatted string: "1.50", "1.50K", "1.50M"
    """
    if isinstance(amount, int):
        value = from_smallest_unit(amount, decimals)
    else:
        try:
            value = Decimal(amount.strip())
        except (InvalidOperation, AttributeError):
            return "0.00"
        if not value.is_finite():
            return "0.00"

    if value >= 1_000_000:
        return f"{_two_places(value / 1_000_000)}M"
    if value >= 1_000:
        return f"{_two_places(value / 1_000)}K"
    return str(_two_places(value))


def _two_places(value: Decimal) -> Decimal:
    return value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
