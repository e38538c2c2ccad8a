"""Store-specific errors.

Storage-engine failures (SQLAlchemy/driver exceptions) are never wrapped in
these; they propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


def build_error_payload(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    return payload


class RecruiterStoreError(Exception):
    """Base error raised by the store itself."""

    code = "store_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.payload = build_error_payload(self.code, message, details)


class DatabaseNotInitializedError(RecruiterStoreError):
    """A session was requested before Database.init() ran."""

    code = "database_not_initialized"


class SchemaVersionError(RecruiterStoreError):
    """The persisted schema version does not match the code's version."""

    code = "schema_version_mismatch"
