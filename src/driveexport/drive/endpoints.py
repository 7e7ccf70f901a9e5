"""Drive v3 request constants and helpers."""

from __future__ import annotations

from urllib.parse import quote

from driveexport.util.mime import FOLDER_MIME

UPLOAD_TYPE_RESUMABLE: str = "resumable"

SESSION_CONTENT_TYPE: str = "application/json; charset=UTF-8"

FOLDER_QUERY: str = f'trashed = false and mimeType="{FOLDER_MIME}"'

FOLDER_ORDER_BY: str = "modifiedTime desc"

FOLDER_LIST_FIELDS: str = "nextPageToken,files(id,name)"


def bearer_headers(token: str) -> dict[str, str]:
    return {"authorization": f"Bearer {token}"}


def file_url(base_url: str, file_id: str) -> str:
    """Return `{base_url}/{file_id}` with the id path-escaped."""
    return f"{base_url.rstrip('/')}/{quote(file_id, safe='')}"
