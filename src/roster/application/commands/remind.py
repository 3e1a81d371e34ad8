from loguru import logger

from roster.application.commands.base import RemindCommand
from roster.application.commands.load import ensure_loaded
from roster.shared.exceptions import ReminderFailure


async def handle_remind(session, renderer, command: RemindCommand) -> int:
    """Send reminder emails to one batch

    Args:
        session: DashboardSession instance
        renderer: DashboardRenderer instance
        command: RemindCommand with days and batch label

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if not await ensure_loaded(session, renderer):
        return 1
    try:
        session.select(command.batch)
        await session.send_reminders(command.days)
    except ValueError as e:
        logger.error(f"Reminder error: {e}")
        renderer.render_error(str(e))
        return 1
    except ReminderFailure:
        renderer.render_notices(session.drain_notices())
        return 1
    renderer.render_notices(session.drain_notices())
    return 0
