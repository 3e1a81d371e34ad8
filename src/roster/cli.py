import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from roster.application.services import CommandDispatcher, DashboardSession
from roster.core.config import Config
from roster.infrastructure.api import RemoteDataService, RosterRequestClient
from roster.presentation import DashboardRenderer
from roster.shared.exceptions import ConfigurationError


def main() -> int:
    """CLI entry point for the candidate dashboard

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    load_dotenv()

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    logger.add(
        str(Path(config.log_dir) / "roster_{time}.log"),
        rotation="1 day",
        retention="30 days",
        compression="gz",
        level="INFO",
    )

    request_client = RosterRequestClient(
        config.api_base_url, timeout=config.http_timeout
    )
    session = DashboardSession(RemoteDataService(request_client))
    dispatcher = CommandDispatcher(session, DashboardRenderer())

    async def run():
        async with request_client:
            return await dispatcher.dispatch(sys.argv)

    try:
        return asyncio.run(run())
    except KeyboardInterrupt:
        logger.warning("Dashboard stopped manually.")
        return 1
    except Exception as e:
        logger.exception(f"Unhandled exception in dashboard: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
