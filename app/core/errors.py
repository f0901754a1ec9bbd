"""
Error types for the content proxy.

Every error raised while building the content document derives from
ContentError, so the HTTP layer can turn any of them into one JSON
error response without leaking internals.
"""

from typing import Any, Dict, Optional


class ContentError(Exception):
    """Base exception for all content aggregation errors."""

    def __init__(self, message: str, table: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.table = table

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "table": self.table,
        }

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ContentError):
    """Raised when the Airtable credential or base id is missing."""


class FetchError(ContentError):
    """
    Raised when reading one table fails.

    Covers non-success statuses, transport failures and success bodies
    that do not carry a `records` list.
    """

    def __init__(self, table: str, reason: str, status_code: Optional[int] = None) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch '{table}'. Reason: {reason}", table=table)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"reason": self.reason, "status_code": self.status_code})
        return data


class ShapeError(ContentError):
    """
    Raised when a table's rows cannot be reshaped into the content document.

    Usually a single-row table (SiteSettings, PageContent, Contact) that came
    back empty, which points at a misconfigured base rather than an outage.
    """

    def __init__(self, table: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid content in '{table}'. Reason: {reason}", table=table)
