"""
Token unit conversion.

Human amounts stay decimal strings until they are converted here, one
element at a time, into the token's integer smallest unit.
"""

from decimal import Decimal, InvalidOperation, localcontext

from monadpay.config.constants import NATIVE_DECIMALS
from monadpay.utils.exceptions import ValidationError
from monadpay.validators.unified import AMOUNT_REGEX


# Wide enough for uint256 values at 18 decimals
_UNIT_PRECISION = 100


def to_smallest_unit(amount: str | Decimal, decimals: int = NATIVE_DECIMALS) -> int:
    """
    Convert a human-readable amount to the token's smallest unit.

    Args:
        amount: Positive decimal amount, e.g. "1.5"
        decimals: Token decimals

    Returns:
        Integer amount in smallest units (e.g. wei)

    Raises:
        ValidationError: If the amount is not a positive finite decimal or
            carries more fractional digits than the token supports
    """
    if not isinstance(amount, Decimal) and AMOUNT_REGEX.fullmatch(str(amount)) is None:
        raise ValidationError(f"Invalid amount: {amount!r}", code="INVALID_AMOUNT")

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as e:
        raise ValidationError(
            f"Invalid amount: {amount!r}", code="INVALID_AMOUNT"
        ) from e

    if not value.is_finite() or value <= 0:
        raise ValidationError(
            f"Amount must be greater than 0: {amount!r}", code="INVALID_AMOUNT"
        )

    with localcontext() as ctx:
        ctx.prec = _UNIT_PRECISION
        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValidationError(
                f"Amount {amount} has more than {decimals} decimal places",
                code="PRECISION",
            )
        return int(scaled)


def from_smallest_unit(value: int, decimals: int = NATIVE_DECIMALS) -> Decimal:
    """
    Convert smallest units back to a human-readable Decimal.

    Args:
        value: Integer amount in smallest units
        decimals: Token decimals

    Returns:
        Decimal amount, normalized (no trailing zeros)
    """
    with localcontext() as ctx:
        ctx.prec = _UNIT_PRECISION
        result = Decimal(value).scaleb(-decimals).normalize()
    # normalize() turns 100 into 1E+2
    if result == result.to_integral_value():
        return result.quantize(Decimal(1))
    return result
