"""Batch filter"""

from collections.abc import Sequence

from roster.domain.models import Candidate
from roster.shared.constants import ALL_BATCHES


def filter_by_batch(
    candidates: Sequence[Candidate], selection: str
) -> list[Candidate]:
    """Candidates belonging to the selected batch, in store order

    Args:
        candidates: Full candidate store
        selection: ``ALL_BATCHES`` or a batch label

    Returns:
        Every candidate for ``ALL_BATCHES``, otherwise exact label matches
    """
    if selection == ALL_BATCHES:
        return list(candidates)
    return [c for c in candidates if c.batch == selection]


def distinct_batches(candidates: Sequence[Candidate]) -> list[str]:
    """Distinct non-empty batch labels in first-seen order"""
    seen: dict[str, None] = {}
    for candidate in candidates:
        if candidate.batch:
            seen.setdefault(candidate.batch, None)
    return list(seen)
