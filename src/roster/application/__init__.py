"""Application layer: session state, operator actions and commands"""

from roster.application.services import DashboardSession
from roster.application.store import CandidateStore

__all__ = ["CandidateStore", "DashboardSession"]
