"""Command objects and handlers for the roster CLI"""

from roster.application.commands.base import (
    BatchesCommand,
    Command,
    RemindCommand,
    ShellCommand,
    ShowCommand,
    ToggleCommand,
)

__all__ = [
    "Command",
    "ShowCommand",
    "BatchesCommand",
    "ToggleCommand",
    "RemindCommand",
    "ShellCommand",
]
