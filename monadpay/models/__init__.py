"""Protocol value objects."""

from monadpay.models.payment import (
    BatchPayload,
    BatchPaymentRequest,
    DeepLinkSchema,
    PaymentRequest,
)
from monadpay.models.transaction import (
    ContractCall,
    OnChainBatchPayment,
    OnChainPayment,
    OnChainPaymentRequest,
    ProcessorTotals,
    TransactionReceipt,
    TransactionState,
    TransactionStatus,
)


__all__ = [
    "PaymentRequest",
    "DeepLinkSchema",
    "BatchPaymentRequest",
    "BatchPayload",
    "TransactionStatus",
    "TransactionState",
    "TransactionReceipt",
    "ContractCall",
    "OnChainPaymentRequest",
    "OnChainPayment",
    "OnChainBatchPayment",
    "ProcessorTotals",
]
