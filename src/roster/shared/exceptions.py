"""Consolidated exceptions for the roster dashboard.

All custom exceptions are defined here to provide a single source of truth
for error handling across the application.
"""


class RosterError(Exception):
    """Base exception for roster errors"""

    pass


class RemoteServiceError(RosterError):
    """Raised when a request to the remote data service fails

    Transport errors and non-2xx responses both collapse into this error.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LoadFailure(RemoteServiceError):
    """Raised when the initial candidate fetch fails (terminal for a session)"""

    pass


class UpdateFailure(RemoteServiceError):
    """Raised when a status toggle could not be written to the remote service"""

    pass


class ReminderFailure(RemoteServiceError):
    """Raised when reminder dispatch fails"""

    pass


class ConfigurationError(RosterError, ValueError):
    """Raised when configuration is invalid or missing"""

    pass
