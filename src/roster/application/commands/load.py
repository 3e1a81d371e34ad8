from loguru import logger

from roster.shared.exceptions import LoadFailure


async def ensure_loaded(session, renderer) -> bool:
    """Load the session roster, rendering the terminal error on failure

    Args:
        session: DashboardSession instance
        renderer: DashboardRenderer instance

    Returns:
        True if candidates are available
    """
    if session.store.loaded:
        return True
    if session.error:
        renderer.render_load_error(session.error)
        return False
    try:
        await session.load()
        return True
    except LoadFailure as e:
        logger.error(f"Load failed: {e}")
        renderer.render_load_error(str(e))
        return False
