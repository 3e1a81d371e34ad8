"""Terminal presentation layer"""

from .console import DashboardRenderer

__all__ = ["DashboardRenderer"]
