"""Folder resolution, creation and listing."""

from __future__ import annotations

import json
from collections import deque
from typing import Any, Iterable, Optional

import httpx

from driveexport.auth import AuthConfig, Authorizer, obtain_token
from driveexport.errors import ArgumentError, FolderApiError, NetworkError
from driveexport.models import ParentRef
from driveexport.util.log import get_logger
from driveexport.util.mime import FOLDER_MIME

from .endpoints import (
    FOLDER_LIST_FIELDS,
    FOLDER_ORDER_BY,
    FOLDER_QUERY,
    bearer_headers,
)

logger = get_logger(__name__)


class FolderCache:
    """
    Folders this service has listed or created, as `{id, name}` dicts.

    `folders` is None until the cache is first populated. Entries are only
    appended; `clear()` is the sole way back to the empty state.
    """

    def __init__(self) -> None:
        self._folders: Optional[list[dict[str, str]]] = None

    @property
    def folders(self) -> Optional[list[dict[str, str]]]:
        return self._folders

    @property
    def populated(self) -> bool:
        return self._folders is not None

    def append(self, parent: ParentRef) -> None:
        if self._folders is None:
            self._folders = []
        self._folders.append({"id": parent.id or "", "name": parent.name or ""})

    def replace(self, folders: list[dict[str, str]]) -> None:
        self._folders = folders

    def clear(self) -> None:
        self._folders = None


def normalize_parents(raw_parents: Iterable[Any]) -> list[ParentRef]:
    """
    Convert raw parent references into ParentRef objects.

    Order is preserved. Falsy entries, entries without `name` and `id`, and
    values of any other type are skipped; "My Drive" (any case) becomes the
    root folder id.
    """
    result: list[ParentRef] = []
    for item in raw_parents:
        parent = ParentRef.parse(item)
        if parent is not None:
            result.append(parent)
    return result


class FolderResolver:
    """Turns parent references into folder ids, creating missing folders."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        authorizer: Authorizer,
        cache: FolderCache,
        *,
        files_url: str,
        folder_create_url: str,
    ) -> None:
        self._client = client
        self._authorizer = authorizer
        self._cache = cache
        self._files_url = files_url
        self._folder_create_url = folder_create_url

    @property
    def cache(self) -> FolderCache:
        return self._cache

    def normalize(self, raw_parents: Iterable[Any]) -> list[ParentRef]:
        return normalize_parents(raw_parents)

    async def resolve_all(self, parents: list[Any], token: str) -> list[ParentRef]:
        """
        Resolve every parent to a folder id.

        Id-bearing entries are accepted as they are. Name-only entries are
        created one at a time, in input order, and each created folder is added
        to the cache right away. The cache is not searched before creating, so
        resolving the same name twice creates two folders.

        Raises:
            ArgumentError: if `parents` is empty.
            FolderApiError / NetworkError: if a folder cannot be created.
        """
        if not parents:
            raise ArgumentError("The parents argument not set.")
        if isinstance(parents, (str, dict, ParentRef)):
            parents = [parents]

        queue = deque(self.normalize(parents))
        resolved: list[ParentRef] = []
        while queue:
            parent = queue.popleft()
            if parent.id:
                resolved.append(parent)
                continue

            parent.id = await self.create_folder(parent.name or "", token)
            resolved.append(parent)
            self._cache.append(parent)

        return resolved

    async def create_folder(self, name: str, token: str) -> str:
        """Create a folder named `name` and return its id."""
        headers = bearer_headers(token)
        headers["content-type"] = "application/json"
        body = {"name": name, "mimeType": FOLDER_MIME}

        try:
            response = await self._client.post(
                self._folder_create_url,
                params={"alt": "json"},
                headers=headers,
                content=json.dumps(body),
            )
        except httpx.TransportError as exc:
            raise NetworkError(
                "Network error while creating folder",
                details={"name": name},
                cause=exc,
            ) from exc

        data = _parse_folder_response(response)
        folder_id = data.get("id")
        if not isinstance(folder_id, str) or not folder_id:
            raise FolderApiError(
                "Drive did not return an id for the created folder",
                details={"name": name},
            )

        logger.info(f"Created Drive folder {name!r} ({folder_id})")
        return folder_id

    async def list_app_folders(
        self,
        interactive: bool = True,
        auth: Optional[AuthConfig] = None,
    ) -> list[dict[str, str]]:
        """
        List non-trashed folders, most recently modified first.

        Once the cache is populated it is returned without authorizing or
        touching the network, whatever `interactive` is.
        """
        cached = self._cache.folders
        if cached is not None:
            return cached

        token = await obtain_token(self._authorizer, auth, interactive=interactive)

        folders: list[dict[str, str]] = []
        page_token: Optional[str] = None
        while True:
            params = {
                "q": FOLDER_QUERY,
                "orderBy": FOLDER_ORDER_BY,
                "fields": FOLDER_LIST_FIELDS,
            }
            if page_token:
                params["pageToken"] = page_token

            headers = bearer_headers(token)
            headers["accept"] = "application/json"
            try:
                response = await self._client.get(self._files_url, params=params, headers=headers)
            except httpx.TransportError as exc:
                raise NetworkError("Network error while listing folders", cause=exc) from exc

            data = _parse_folder_response(response)
            for item in data.get("files") or []:
                folders.append({"id": item.get("id"), "name": item.get("name")})

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        self._cache.replace(folders)
        return folders


def _parse_folder_response(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as exc:
        raise FolderApiError(
            "Drive folder response is not valid JSON",
            details={"status_code": response.status_code},
            cause=exc,
        ) from exc

    if not isinstance(data, dict):
        raise FolderApiError(
            "Unexpected Drive folder response",
            details={"status_code": response.status_code},
        )

    err = data.get("error")
    if err:
        message = err.get("message") if isinstance(err, dict) else str(err)
        code = err.get("code") if isinstance(err, dict) else None
        raise FolderApiError(
            message or "Drive folder request failed",
            details={"status_code": response.status_code, "code": code},
        )
    return data
