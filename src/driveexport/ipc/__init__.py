"""Cross-process request/response exports for driveexport."""

from __future__ import annotations

from .channels import (
    GET_FILE,
    LIST_APP_FOLDERS,
    OPERATION_ERROR,
    OPERATION_RESULT,
    REQUEST_CHANNELS,
    SAVE_FILE,
    MessageSender,
)
from .client import DriveRequestClient
from .correlator import PendingOperation, RequestCorrelator
from .handler import DriveMessageHandler

__all__ = [
    "SAVE_FILE",
    "LIST_APP_FOLDERS",
    "GET_FILE",
    "OPERATION_RESULT",
    "OPERATION_ERROR",
    "REQUEST_CHANNELS",
    "MessageSender",
    "PendingOperation",
    "RequestCorrelator",
    "DriveMessageHandler",
    "DriveRequestClient",
]
