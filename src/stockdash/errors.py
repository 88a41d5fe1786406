"""Dashboard error types."""

from __future__ import annotations

from enum import Enum


class DashboardErrorCode(Enum):
    """Error classification codes."""

    HTTP_ERROR = "http_error"
    NO_DATA = "no_data"
    PARSE_ERROR = "parse_error"
    NETWORK_ERROR = "network_error"
    AUTH_FAILED = "auth_failed"
    PROVIDER_ERROR = "provider_error"


class DashboardError(Exception):
    """Data-source exception with a structured error code.

    The message is what the dashboard shows to the user, so providers
    phrase it as ``"<SYMBOL>: <reason>"`` where a symbol is involved.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        status_code: HTTP status of the failing response, if any.
    """

    def __init__(
        self,
        message: str,
        code: DashboardErrorCode = DashboardErrorCode.PROVIDER_ERROR,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class ConfigError(ValueError):
    """Invalid dashboard configuration value."""
