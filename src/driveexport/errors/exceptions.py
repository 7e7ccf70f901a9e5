"""Exception hierarchy and Drive error-body parsing for driveexport."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional


class DriveExportError(Exception):
    """
    Base exception for driveexport.

    Attributes:
        details: Optional structured information (e.g., HTTP status, file id).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class AuthorizationError(DriveExportError):
    """Raised when the authorizer fails or returns no usable token."""


class ArgumentError(DriveExportError):
    """Raised when the caller supplies an empty or invalid argument."""


class SessionInitError(DriveExportError):
    """Raised when the upload session request returns HTTP status >= 400."""


class MissingLocationError(DriveExportError):
    """Raised when the upload session succeeds without a Location header."""


class UploadError(DriveExportError):
    """Raised when the content PUT fails in transport or returns non-JSON."""


class FolderApiError(DriveExportError):
    """Raised when Drive reports an error for folder create/list."""


class DownloadError(DriveExportError):
    """Raised when a file content download returns a non-2xx status."""


class NetworkError(DriveExportError):
    """Raised when a transport failure prevents a request outside the upload phase."""


class OperationFailedError(DriveExportError):
    """Raised on the requesting side when the remote operation reports an error."""


@dataclass(frozen=True)
class DriveErrorInfo:
    """Error information extracted from a Drive `{error: {code, message}}` body."""

    code: int | str | None = None
    message: str | None = None

    def describe(self) -> str | None:
        """Return `"<code>: <message>"` (or just the message), None without a message."""
        if not self.message:
            return None
        if self.code is not None and self.code != "":
            return f"{self.code}: {self.message}"
        return self.message


def parse_drive_error(body: str | bytes | None) -> Optional[DriveErrorInfo]:
    """
    Parse a Drive error response body.

    Accepts both `{"error": {"code": .., "message": ..}}` and a bare
    `{"code": .., "message": ..}` object. Returns None when the body is not JSON
    or carries no message.
    """
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")

    try:
        payload = json.loads(body)
    except ValueError:
        return None

    if not isinstance(payload, dict):
        return None

    err = payload.get("error", payload)
    if not isinstance(err, dict):
        return None

    message = err.get("message")
    if not isinstance(message, str) or not message:
        return None

    return DriveErrorInfo(code=err.get("code"), message=message)


def to_error_payload(exc: BaseException) -> dict[str, str]:
    """Normalize an exception to the `{message}` form sent across the process boundary."""
    message = str(exc)
    if not message:
        message = exc.__class__.__name__
    return {"message": message}
