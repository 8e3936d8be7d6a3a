"""Transaction lifecycle tracking."""

from monadpay.services.lifecycle.tracker import REVERTED_ERROR, TransactionTracker


__all__ = ["TransactionTracker", "REVERTED_ERROR"]
