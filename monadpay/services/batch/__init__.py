"""Batch payment aggregation."""

from monadpay.services.batch.aggregator import BatchAggregator


__all__ = ["BatchAggregator"]
