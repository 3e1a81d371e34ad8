"""Domain models"""

from .candidate import Candidate
from .statistics import Statistics, YearCount
from .status import StatusField

__all__ = [
    "Candidate",
    "StatusField",
    "Statistics",
    "YearCount",
]
