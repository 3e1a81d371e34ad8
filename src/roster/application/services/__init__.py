"""Services module for application layer"""

from roster.application.services.command_dispatcher import CommandDispatcher
from roster.application.services.dashboard import DashboardSession, Notice
from roster.application.services.reminders import ReminderDispatcher, ReminderReceipt
from roster.application.services.toggle import StatusToggleController, ToggleResult

__all__ = [
    "CommandDispatcher",
    "DashboardSession",
    "Notice",
    "ReminderDispatcher",
    "ReminderReceipt",
    "StatusToggleController",
    "ToggleResult",
]
