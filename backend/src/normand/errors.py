"""Error taxonomy for admin operations.

Every handler lets these propagate to the application boundary, where a
single exception handler turns them into a ``{"error", "details"}`` JSON
body with the matching status code.
"""

from typing import Any, Optional


class AdminError(Exception):
    """Base class for errors surfaced to admin API clients."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class NotFoundError(AdminError):
    """Missing HTML or JSON file, or unknown page, section or menu id."""

    status_code = 404


class ValidationError(AdminError):
    """Malformed request body or request parameters."""

    status_code = 400


class SyncError(AdminError):
    """Menu extraction or comparison failed."""

    status_code = 422


class StorageError(AdminError):
    """Filesystem read or write failure."""

    status_code = 500


class AuthError(AdminError):
    """Missing, invalid or expired admin credentials."""

    status_code = 401
