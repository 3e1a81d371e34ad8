"""Statistics engine

Derives the dashboard figures from a filtered candidate sequence. Pure
in-memory iteration, no I/O.
"""

from collections import Counter
from collections.abc import Sequence

from roster.domain.models import Candidate, Statistics, StatusField, YearCount

TOP_YEARS_LIMIT = 3


def count_with_status(
    candidates: Sequence[Candidate], status_field: StatusField, value: str
) -> int:
    """Number of candidates whose ``status_field`` equals ``value``"""
    return sum(1 for c in candidates if c.status(status_field) == value)


def top_completion_years(
    candidates: Sequence[Candidate], limit: int = TOP_YEARS_LIMIT
) -> tuple[YearCount, ...]:
    """Most common completion years, descending by count

    Years are keyed exactly as received. Ties keep first-seen order.
    """
    histogram = Counter(
        c.year_of_completion for c in candidates if c.year_of_completion
    )
    return tuple(
        YearCount(year=year, count=count)
        for year, count in histogram.most_common(limit)
    )


def attendance_rate(candidates: Sequence[Candidate]) -> float:
    """Percentage of attended over attended+ghosted program outcomes

    Candidates with any other program value are left out of both sides.
    Returns 0.0 when no candidate has an outcome.
    """
    program = StatusField.PROGRAM
    attended = count_with_status(candidates, program, program.positive)
    total = attended + count_with_status(candidates, program, program.negative)
    if total == 0:
        return 0.0
    return attended / total * 100


def compute_statistics(candidates: Sequence[Candidate]) -> Statistics:
    """Compute every dashboard figure for ``candidates``

    Args:
        candidates: Filtered candidate sequence

    Returns:
        Statistics snapshot (all zero for an empty sequence)
    """
    return Statistics(
        candidate_count=len(candidates),
        whatsapp_sent=count_with_status(
            candidates, StatusField.WHATSAPP_MSG, "sent"
        ),
        phone_enquiry_done=count_with_status(
            candidates, StatusField.PHONE_ENQUIRY, "done"
        ),
        online_attended=count_with_status(
            candidates, StatusField.ONLINE, "attended"
        ),
        top_years=top_completion_years(candidates),
        attendance_rate=attendance_rate(candidates),
    )
