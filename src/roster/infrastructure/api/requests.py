"""RosterRequestClient - JSON requests against the remote data service"""

import logging
from typing import Any

import httpx
from loguru import logger

from roster.shared.exceptions import RemoteServiceError


class _LoguruHandler(logging.Handler):
    """Bridge stdlib logging into loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(
            level, record.getMessage()
        )


class RosterRequestClient:
    """Low-level HTTP request client

    Responsibilities:
    - HTTP request execution
    - Request/response logging
    - Collapsing transport errors and non-2xx responses into one error

    There is no retry: every failure is reported to the caller as-is.
    """

    USER_AGENT = "roster-dashboard/0.1"
    _logging_bridge_installed = False

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        """Initialize request client

        Args:
            base_url: Service root, e.g. "https://api-for-gsheet.onrender.com"
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client: httpx.AsyncClient | None = None
        self.install_logging_bridge()

    @classmethod
    def install_logging_bridge(cls) -> None:
        """Bridge stdlib logging used by httpx into loguru once."""
        if cls._logging_bridge_installed:
            return

        handler = _LoguruHandler()
        for name in ("httpx", "httpcore"):
            std_logger = logging.getLogger(name)
            std_logger.setLevel(logging.WARNING)
            std_logger.addHandler(handler)
            std_logger.propagate = False

        cls._logging_bridge_installed = True

    def _build_http_client(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> httpx.AsyncClient:
        """Create an AsyncClient with httpx request/response logging hooks."""
        self.install_logging_bridge()
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            headers={"User-Agent": self.USER_AGENT},
            event_hooks={
                "request": [self._log_httpx_request],
                "response": [self._log_httpx_response],
            },
        )

    async def _log_httpx_request(self, request: httpx.Request) -> None:
        """Log outbound httpx requests."""
        logger.debug(f"HTTPX request: {request.method} {request.url}")

    async def _log_httpx_response(self, response: httpx.Response) -> None:
        """Log httpx responses with status."""
        logger.debug(
            f"HTTPX response: status={response.status_code} url={response.url}"
        )

    def set_http_client(self, client: httpx.AsyncClient) -> None:
        """Set the HTTP client (for testing or external management)"""
        self._http_client = client

    async def open(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Create the underlying AsyncClient if none is set"""
        if self._http_client is None:
            self._http_client = self._build_http_client(transport)

    async def close(self) -> None:
        """Close the underlying AsyncClient"""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "RosterRequestClient":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        endpoint: str,
        data: dict | None = None,
    ) -> Any:
        """Make a JSON request

        Args:
            method: HTTP method (GET or POST)
            endpoint: API endpoint path (e.g., "/api/candidates")
            data: JSON payload for POST requests

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            RemoteServiceError: On transport failure or any non-2xx status
        """
        if self._http_client is None:
            raise RemoteServiceError("HTTP client not initialized")

        url = f"{self.base_url}{endpoint}"
        headers = {"Content-Type": "application/json"}
        logger.debug(f"{method.upper()} {url}")

        try:
            if method.upper() == "GET":
                response = await self._http_client.get(url, headers=headers)
            elif method.upper() == "POST":
                response = await self._http_client.post(
                    url, headers=headers, json=data
                )
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")
        except httpx.RequestError as e:
            logger.warning(f"Network error: {e}")
            raise RemoteServiceError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(
                f"Request failed {response.status_code}: {response.text}"
            )
            raise RemoteServiceError(
                self._format_error(response), status_code=response.status_code
            )

        logger.debug(f"Request successful: {response.status_code}")
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RemoteServiceError(
                f"Invalid JSON in response from {endpoint}: {e}",
                status_code=response.status_code,
            ) from e

    def _format_error(self, response: httpx.Response) -> str:
        """Return a safe string describing an HTTP error without assuming keys."""
        body: str
        try:
            parsed = response.json()
            body = str(parsed)
        except Exception:
            body = response.text
        return f"Request failed: {response.status_code} - {body}"
