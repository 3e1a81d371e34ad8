"""Configuration management for the roster dashboard"""

import os
from dataclasses import dataclass

from loguru import logger

from roster.shared.exceptions import ConfigurationError

DEFAULT_API_BASE_URL = "https://api-for-gsheet.onrender.com"


def _parse_timeout(raw: str) -> float:
    """Parse the HTTP timeout setting

    Args:
        raw: Raw environment value (seconds)

    Returns:
        Timeout in seconds

    Raises:
        ConfigurationError: If the value is not a positive number
    """
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"ROSTER_HTTP_TIMEOUT must be a number, got {raw!r}"
        ) from e
    if timeout <= 0:
        raise ConfigurationError(
            f"ROSTER_HTTP_TIMEOUT must be positive, got {raw!r}"
        )
    return timeout


@dataclass
class Config:
    """Configuration for the roster dashboard loaded from environment variables"""

    # Remote data service root (endpoints live under /api)
    api_base_url: str = DEFAULT_API_BASE_URL

    # Per-request timeout enforced by the HTTP transport (seconds)
    http_timeout: float = 30.0

    # Directory for rotated log files
    log_dir: str = "logs"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If an environment variable is invalid
        """
        base_url = os.getenv("ROSTER_API_BASE_URL", cls.api_base_url).strip()
        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"ROSTER_API_BASE_URL must be an http(s) URL, got {base_url!r}"
            )

        config = cls(
            api_base_url=base_url.rstrip("/"),
            http_timeout=_parse_timeout(
                os.getenv("ROSTER_HTTP_TIMEOUT", str(cls.http_timeout))
            ),
            log_dir=os.getenv("ROSTER_LOG_DIR", cls.log_dir),
        )

        logger.info("Configuration loaded:")
        logger.info(f"  API Base URL: {config.api_base_url}")
        logger.info(f"  HTTP Timeout: {config.http_timeout}s")
        logger.info(f"  Log Directory: {config.log_dir}")

        return config
