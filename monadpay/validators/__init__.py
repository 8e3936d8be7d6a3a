"""
Validators package.

Provides address and amount predicates used by the payment link codec,
the batch aggregator and the data model.
"""

from monadpay.validators.unified import (
    is_checksum_address,
    is_valid_address,
    is_valid_amount,
    validate_amount,
    validate_wallet_address,
)


__all__ = [
    "is_valid_address",
    "is_checksum_address",
    "is_valid_amount",
    "validate_wallet_address",
    "validate_amount",
]
