"""driveexport public API."""

from __future__ import annotations

from driveexport.auth import AuthConfig, Authorizer, GoogleAuthorizer
from driveexport.drive import FolderCache, FolderResolver, UploadSession
from driveexport.errors import (
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
from driveexport.ipc import (
    DriveMessageHandler,
    DriveRequestClient,
    MessageSender,
    RequestCorrelator,
)
from driveexport.models import FileResource, MediaPayload, ParentRef, SaveRequest
from driveexport.service import DriveExportService
from driveexport.settings import DriveExportSettings

__all__ = [
    # High-level
    "DriveExportService",
    "DriveExportSettings",
    # Drive
    "UploadSession",
    "FolderResolver",
    "FolderCache",
    # Cross-process
    "RequestCorrelator",
    "DriveMessageHandler",
    "DriveRequestClient",
    "MessageSender",
    # Auth
    "AuthConfig",
    "Authorizer",
    "GoogleAuthorizer",
    # Models
    "FileResource",
    "MediaPayload",
    "ParentRef",
    "SaveRequest",
    # Errors
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
