"""Unified validators for addresses and amounts."""

import re
from decimal import Decimal, InvalidOperation

from eth_utils import is_checksum_address as _eth_is_checksum_address
from loguru import logger


ADDRESS_REGEX = re.compile(r"^0x[a-fA-F0-9]{40}$")

# Plain ASCII decimal, optional exponent; no sign, underscores or other digits
AMOUNT_REGEX = re.compile(r"^[0-9]*\.?[0-9]+([eE][+-]?[0-9]+)?$")


def is_valid_address(address: str) -> bool:
    """
    Check address shape: 0x followed by 40 hex characters.

    Case-insensitive, no checksum verification.

    Examples:
        >>> is_valid_address("0x92F6D61C4D88F6Df0dBC260a594681F82347F840")
        True
        >>> is_valid_address("0x123")
        False
    """
    if not isinstance(address, str):
        return False
    return ADDRESS_REGEX.fullmatch(address) is not None


def is_checksum_address(address: str) -> bool:
    """
    Stricter address check with EIP-55 checksum validation.

    Every checksummed address is also accepted by is_valid_address.
    """
    if not is_valid_address(address):
        return False
    try:
        return _eth_is_checksum_address(address)
    except (ValueError, TypeError) as e:
        logger.debug(f"Checksum validation failed for {address}: {e}")
        return False


def is_valid_amount(amount: str) -> bool:
    """
    Check that a string parses to a finite decimal strictly above zero.

    Only plain ASCII decimals are accepted: no sign, no surrounding
    whitespace, no underscores or non-ASCII digits.

    Examples:
        >>> is_valid_amount("1.5")
        True
        >>> is_valid_amount("0")
        False
        >>> is_valid_amount(" 1")
        False
        >>> is_valid_amount("1_000")
        False
    """
    if not isinstance(amount, str) or not amount:
        return False

    if AMOUNT_REGEX.fullmatch(amount) is None:
        return False

    try:
        value = Decimal(amount)
    except InvalidOperation:
        return False

    return value > 0


def validate_wallet_address(address: str) -> tuple[bool, str | None]:
    """
    Validate a wallet address typed by a user.

    Args:
        address: Wallet address to validate (trimmed before checking)

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if valid
        - (False, error_message) if invalid

    Examples:
        >>> validate_wallet_address("0x1234567890123456789012345678901234567890")
        (True, None)
        >>> validate_wallet_address("invalid")
        (False, 'Address must start with 0x')
    """
    if not address or not isinstance(address, str):
        return False, "Address is empty"

    address = address.strip()

    if not address:
        return False, "Address is empty"

    if not address.startswith("0x"):
        return False, "Address must start with 0x"

    if len(address) != 42:
        return False, "Address must be 42 characters"

    if not is_valid_address(address):
        return False, "Invalid address format"

    return True, None


def validate_amount(amount: str) -> tuple[bool, Decimal | None, str | None]:
    """
    Validate an amount typed by a user.

    Args:
        amount: Amount string to validate (trimmed before checking)

    Returns:
        Tuple of (is_valid, parsed_value, error_message)
        - (True, value, None) if valid
        - (False, None, error_message) if invalid

    Examples:
        >>> validate_amount("100.50")
        (True, Decimal('100.50'), None)
        >>> validate_amount("-10")
        (False, None, 'Amount must be greater than 0')
    """
    if not amount or not isinstance(amount, str):
        return False, None, "Amount is empty"

    amount = amount.strip()

    if not amount:
        return False, None, "Amount is empty"

    if amount.startswith("-") and AMOUNT_REGEX.fullmatch(amount[1:]):
        return False, None, "Amount must be greater than 0"

    if AMOUNT_REGEX.fullmatch(amount) is None:
        return False, None, "Invalid amount format"

    try:
        value = Decimal(amount)
    except InvalidOperation:
        return False, None, "Invalid amount format"

    if value <= 0:
        return False, None, "Amount must be greater than 0"

    return True, value, None
