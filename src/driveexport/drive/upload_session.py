"""Drive resumable upload protocol (session init + content PUT)."""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx

from driveexport.errors import (
    MissingLocationError,
    NetworkError,
    SessionInitError,
    UploadError,
)
from driveexport.models import FileResource
from driveexport.util.log import get_logger

from .endpoints import (
    SESSION_CONTENT_TYPE,
    UPLOAD_TYPE_RESUMABLE,
    bearer_headers,
    file_url,
)

logger = get_logger(__name__)

SESSION_INIT_FAILED: str = "Could not initialize Drive upload session."


class UploadSession:
    """
    Two-phase resumable upload.

    Both phases are single-shot: there is no retry and no chunking. The
    session URL returned by `initialize` is meant for one `upload` call.
    """

    def __init__(self, client: httpx.AsyncClient, upload_url: str) -> None:
        self._client = client
        self._upload_url = upload_url

    async def initialize(
        self,
        token: str,
        resource: Optional[FileResource],
        existing_file_id: Optional[str] = None,
    ) -> str:
        """
        Open an upload session and return its URL.

        Creates a new file (POST) or targets `existing_file_id` (PATCH).

        Raises:
            SessionInitError: HTTP status >= 400 (message carries the body).
            MissingLocationError: success status without a Location header.
            NetworkError: transport failure.
        """
        if existing_file_id:
            method = "PATCH"
            url = file_url(self._upload_url, existing_file_id)
        else:
            method = "POST"
            url = self._upload_url

        headers = bearer_headers(token)
        headers["content-type"] = SESSION_CONTENT_TYPE
        content = json.dumps(resource) if resource is not None else None

        logger.debug(f"{method} {url} (resumable session)")
        try:
            response = await self._client.request(
                method,
                url,
                params={"uploadType": UPLOAD_TYPE_RESUMABLE},
                headers=headers,
                content=content,
            )
        except httpx.TransportError as exc:
            raise NetworkError(
                "Network error while initializing upload session",
                details={"url": url},
                cause=exc,
            ) from exc

        if response.status_code >= 400:
            body = response.text
            raise SessionInitError(
                f"{SESSION_INIT_FAILED} Reason: {body}",
                details={"status_code": response.status_code, "file_id": existing_file_id},
            )

        locations = response.headers.get_list("location")
        if not locations or not locations[0]:
            raise MissingLocationError(
                SESSION_INIT_FAILED,
                details={"status_code": response.status_code},
            )
        return locations[0]

    async def upload(
        self,
        token: str,
        session_url: str,
        body: str,
        mime_type: str,
    ) -> FileResource:
        """
        PUT the content to `session_url` and return the resulting file resource.

        The JSON response is returned as-is.

        Raises:
            UploadError: transport failure or a response body that is not JSON.
        """
        headers = bearer_headers(token)
        headers["content-type"] = mime_type

        logger.debug(f"PUT upload session ({len(body)} chars, {mime_type})")
        try:
            response = await self._client.put(
                session_url,
                headers=headers,
                content=body.encode("utf-8"),
            )
        except httpx.TransportError as exc:
            raise UploadError("Network error while uploading file content", cause=exc) from exc

        try:
            result: Any = response.json()
        except ValueError as exc:
            raise UploadError(
                "Drive upload response is not valid JSON",
                details={"status_code": response.status_code, "body": response.text[:500]},
                cause=exc,
            ) from exc

        if response.status_code >= 400:
            logger.warning(f"Upload returned HTTP {response.status_code}: {response.text[:200]}")
        return result
