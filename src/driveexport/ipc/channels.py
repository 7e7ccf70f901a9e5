"""Cross-process channel names and the outbound message primitive."""

from __future__ import annotations

from typing import Any, Protocol

SAVE_FILE: str = "save-file"
LIST_APP_FOLDERS: str = "list-app-folders"
GET_FILE: str = "get-file"

OPERATION_RESULT: str = "operation-result"
OPERATION_ERROR: str = "operation-error"

REQUEST_CHANNELS: tuple[str, ...] = (SAVE_FILE, LIST_APP_FOLDERS, GET_FILE)


class MessageSender(Protocol):
    """Sends one message across the process boundary (fire-and-forget)."""

    def send(self, channel: str, request_id: int, payload: Any) -> None:
        ...
