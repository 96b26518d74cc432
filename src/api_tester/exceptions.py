"""Custom exceptions for the API tester."""
from typing import Optional


class ApiTesterError(Exception):
    """Base class for API tester errors."""
    pass


class UsageError(ApiTesterError):
    """Raised when the command line asks for help or cannot name a target.

    The runner prints the message, if any, followed by the help text and
    exits normally.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "")
        self.message = message


class ConfigParseError(ApiTesterError, ValueError):
    """Raised when a numeric flag value is malformed. Never caught."""
    pass


class ClientConstructionError(ApiTesterError):
    """Raised when the shared HTTP client cannot be built."""
    pass
