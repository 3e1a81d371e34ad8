"""Domain layer for the roster dashboard

Pure Python models, the batch filter and the statistics engine.
No infrastructure dependencies - domain layer only.
"""

from . import filters, models, statistics

__all__ = ["models", "filters", "statistics"]
