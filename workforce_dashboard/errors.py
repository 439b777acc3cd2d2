"""
Exception hierarchy shared by the gateway client, the data helpers and the pages.
"""

from __future__ import annotations

from typing import Dict, Optional


class DashboardError(Exception):
    """Base for all application exceptions."""


class ConfigurationError(DashboardError):
    """Required configuration is missing or malformed."""


class TransportError(DashboardError):
    """Network failure, timeout or non-2xx response from the backend."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.cause = cause
        self.status_code = status_code
        super().__init__(message)


class ValidationError(DashboardError):
    """Employee draft failed one or more field rules."""

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid fields: {fields}")


class MutationError(DashboardError):
    """Create/update/delete/mark-attendance call failed.

    `message` is the text shown to the user; the transport failure is
    chained as `__cause__`.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
