from dataclasses import dataclass


@dataclass
class Command:
    """Base command class"""

    name: str


@dataclass
class ShowCommand(Command):
    """Render the dashboard, optionally for one batch"""

    batch: str | None = None


@dataclass
class BatchesCommand(Command):
    """List batch labels"""

    pass


@dataclass
class ToggleCommand(Command):
    """Toggle one status field on one candidate"""

    candidate_id: str = ""
    field: str = ""


@dataclass
class RemindCommand(Command):
    """Send reminder emails to a batch"""

    days: int = 0
    batch: str = ""


@dataclass
class ShellCommand(Command):
    """Start the interactive operator console"""

    pass
