"""Public error exports for driveexport."""

from __future__ import annotations

from .exceptions import (
    ArgumentError,
    AuthorizationError,
    DownloadError,
    DriveErrorInfo,
    DriveExportError,
    FolderApiError,
    MissingLocationError,
    NetworkError,
    OperationFailedError,
    SessionInitError,
    UploadError,
    parse_drive_error,
    to_error_payload,
)

__all__ = [
    "DriveExportError",
    "AuthorizationError",
    "ArgumentError",
    "SessionInitError",
    "MissingLocationError",
    "UploadError",
    "FolderApiError",
    "DownloadError",
    "NetworkError",
    "OperationFailedError",
    "DriveErrorInfo",
    "parse_drive_error",
    "to_error_payload",
]
