"""
Exception hierarchy for FootyStats.

Only the data loading path and the request validator raise these; the
filter/statistics/prediction engines degrade to exclusion or zero values
instead.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class FootballAPIError(Exception):
    """Base class for errors that map onto a client-visible HTTP status."""

    status_code: int = 500
    default_message: str = "An error occurred while processing your request"

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @property
    def user_message(self) -> str:
        """Message that is safe to show to API clients."""
        return self.message or self.default_message

    def to_dict(self) -> Dict[str, Any]:
        """Fields of the ``error`` object in the response envelope."""
        return {"message": self.user_message, "code": self.status_code}


class DataUnavailableError(FootballAPIError):
    """The match dataset is missing, unreadable or structurally invalid."""

    status_code = 404
    default_message = "Requested data not found"

    @property
    def user_message(self) -> str:
        # The raw message names file paths; keep those in the logs only.
        return (
            "The requested data could not be found. "
            "Please check your parameters and try again."
        )


class ValidationFailureError(FootballAPIError):
    """One or more request parameters failed validation."""

    status_code = 422
    default_message = "Validation failed"

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message)
        self.errors: Dict[str, str] = dict(errors or {})

    def add_error(self, field: str, message: str) -> None:
        self.errors[field] = message

    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def user_message(self) -> str:
        if self.errors:
            return "Validation failed: " + ", ".join(self.errors.values())
        return super().user_message

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["validation_errors"] = dict(self.errors)
        return payload
