"""Requesting side: sends drive requests and awaits their results."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from driveexport.util.mime import is_root_name

from .channels import GET_FILE, LIST_APP_FOLDERS, SAVE_FILE, MessageSender
from .correlator import RequestCorrelator


class DriveRequestClient:
    """
    Issues drive requests across the process boundary.

    Wire `on_result` / `on_error` to the inbound `operation-result` and
    `operation-error` messages.
    """

    def __init__(self, sender: MessageSender) -> None:
        self._correlator = RequestCorrelator(sender)

    @property
    def correlator(self) -> RequestCorrelator:
        return self._correlator

    async def save_file(
        self,
        content: Any,
        file_name: str,
        *,
        content_type: Optional[str] = None,
        parents: Optional[Sequence[Any]] = None,
        file_id: Optional[str] = None,
    ) -> Any:
        """
        Save `content` as `file_name`.

        "My Drive" parents are left out, so a file without other parents is
        stored in the root folder.
        """
        meta: dict[str, Any] = {"name": file_name}
        folders = _filter_parents(parents)
        if folders:
            meta["parents"] = folders

        payload: dict[str, Any] = {"meta": meta, "body": content, "type": content_type}
        if file_id:
            payload["id"] = file_id
        return await self._correlator.request(SAVE_FILE, payload)

    async def list_app_folders(self, interactive: Optional[bool] = None) -> Any:
        payload = {} if interactive is None else {"interactive": interactive}
        return await self._correlator.request(LIST_APP_FOLDERS, payload)

    async def get_file(self, file_id: str) -> Any:
        return await self._correlator.request(GET_FILE, file_id)

    def on_result(self, request_id: int, result: Any) -> None:
        self._correlator.on_result(request_id, result)

    def on_error(self, request_id: int, cause: Any) -> None:
        self._correlator.on_error(request_id, cause)


def _filter_parents(parents: Optional[Sequence[Any]]) -> list[Any]:
    if not parents:
        return []

    result: list[Any] = []
    for item in parents:
        if not item:
            continue
        if isinstance(item, str):
            if not is_root_name(item):
                result.append(item)
        elif isinstance(item, dict):
            if item.get("id") or (item.get("name") and not is_root_name(item["name"])):
                result.append(item)
    return result
