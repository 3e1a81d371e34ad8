from loguru import logger

from roster.application.commands.base import BatchesCommand, ShowCommand
from roster.application.commands.load import ensure_loaded
from roster.shared.constants import ALL_BATCHES


async def handle_show(session, renderer, command: ShowCommand) -> int:
    """Render the dashboard

    Args:
        session: DashboardSession instance
        renderer: DashboardRenderer instance
        command: ShowCommand with optional batch

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if not await ensure_loaded(session, renderer):
        return 1
    try:
        session.select(command.batch or ALL_BATCHES)
    except ValueError as e:
        logger.error(f"Selection error: {e}")
        renderer.render_error(str(e))
        return 1
    renderer.render_dashboard(session)
    return 0


async def handle_batches(session, renderer, command: BatchesCommand) -> int:
    """List batch labels

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if not await ensure_loaded(session, renderer):
        return 1
    renderer.render_batches(session)
    return 0
