"""Candidate filters"""

from .batch import distinct_batches, filter_by_batch

__all__ = ["filter_by_batch", "distinct_batches"]
