from loguru import logger

from roster.application.commands.base import ToggleCommand
from roster.application.commands.load import ensure_loaded
from roster.shared.exceptions import UpdateFailure


async def handle_toggle(session, renderer, command: ToggleCommand) -> int:
    """Toggle one status field and report the outcome

    Args:
        session: DashboardSession instance
        renderer: DashboardRenderer instance
        command: ToggleCommand with candidate id and field wire name

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if not await ensure_loaded(session, renderer):
        return 1
    try:
        candidate_id = session.store.resolve_id(command.candidate_id)
        result = await session.toggle(candidate_id, command.field)
    except (KeyError, ValueError) as e:
        message = e.args[0] if e.args else str(e)
        logger.error(f"Toggle error: {message}")
        renderer.render_error(str(message))
        return 1
    except UpdateFailure:
        renderer.render_notices(session.drain_notices())
        return 1
    renderer.render_toggle(result)
    return 0
