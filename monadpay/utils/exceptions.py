"""
Exception handling utilities.

Defines categorized exception types for payment links, batches and
transaction submission.
"""


class MonadPayError(Exception):
    """Base class for all MonadPay errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class ValidationError(MonadPayError, ValueError):
    """
    Raised when user input fails validation.

    Always raised before any chain interaction is attempted.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message, code)
        # 1-based batch row, when the error refers to a single row
        self.position = position


class DecodeError(MonadPayError):
    """
    Reason a payment link could not be decoded.

    Never raised by the codec's public decode functions; it is returned
    alongside an absent request by the verbose decoder.
    """


class SubmissionError(MonadPayError):
    """Raised when the wallet rejects a transaction or the RPC call fails."""


class ReceiptTimeoutError(SubmissionError):
    """Raised when the collaborator stopped waiting for a receipt."""

    def __init__(self, tx_hash: str, timeout: float) -> None:
        super().__init__(
            f"No receipt for {tx_hash} after {timeout}s", "RECEIPT_TIMEOUT"
        )
        self.tx_hash = tx_hash
        self.timeout = timeout


class TransactionStateError(MonadPayError):
    """Raised on an illegal lifecycle transition of a live tracker."""
