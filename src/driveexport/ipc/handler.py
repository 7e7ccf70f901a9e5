"""Serves drive requests arriving over the process boundary."""

from __future__ import annotations

from typing import Any

from driveexport.errors import ArgumentError, to_error_payload
from driveexport.models import SaveRequest
from driveexport.service import DriveExportService
from driveexport.util.log import get_logger

from .channels import (
    GET_FILE,
    LIST_APP_FOLDERS,
    OPERATION_ERROR,
    OPERATION_RESULT,
    SAVE_FILE,
    MessageSender,
)

logger = get_logger(__name__)


class DriveMessageHandler:
    """
    Runs service operations for inbound messages and replies with
    `operation-result` or `operation-error` under the same request id.

    Failures are always sent as `{"message": str}`; exception objects never
    cross the boundary.
    """

    def __init__(self, service: DriveExportService, sender: MessageSender) -> None:
        self._service = service
        self._sender = sender

    async def handle(self, channel: str, request_id: int, payload: Any = None) -> None:
        if channel == SAVE_FILE:
            op = self._save_file
        elif channel == LIST_APP_FOLDERS:
            op = self._list_app_folders
        elif channel == GET_FILE:
            op = self._get_file
        else:
            raise ArgumentError("Unsupported channel", details={"channel": channel})

        try:
            result = await op(payload)
        except Exception as exc:
            logger.warning(f"{channel} request {request_id} failed: {exc}")
            self._sender.send(OPERATION_ERROR, request_id, to_error_payload(exc))
            return

        self._sender.send(OPERATION_RESULT, request_id, result)

    async def _save_file(self, payload: Any) -> Any:
        return await self._service.save(SaveRequest.from_payload(payload))

    async def _list_app_folders(self, payload: Any) -> Any:
        opts = payload or {}
        interactive = opts.get("interactive")
        if interactive is None:
            interactive = True
        return await self._service.list_app_folders(bool(interactive))

    async def _get_file(self, payload: Any) -> Any:
        if not payload or not isinstance(payload, str):
            raise ArgumentError("get-file requires a file id")
        return await self._service.get_file(payload)
