"""Request-side models: save requests and media payloads."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from driveexport.auth.auth_config import AuthConfig

# Drive file metadata as sent to / returned by the API.
FileResource = dict[str, Any]


@dataclass(slots=True, frozen=True)
class MediaPayload:
    """File content and its content type. `body` is always text."""

    mime_type: str
    body: str

    @classmethod
    def build(cls, body: Any, mime_type: str) -> MediaPayload:
        if not isinstance(body, str):
            body = json.dumps(body)
        return cls(mime_type=mime_type, body=body)


@dataclass(slots=True)
class SaveRequest:
    """
    A request to save content to Drive.

    Attributes:
        meta: Drive file resource values (name, description, parents, ...).
        body: File content. Non-string values are serialized to JSON.
        type: Content type of `body`.
        id: Existing Drive file id. When set the file is updated.
        auth: Authorization to use (access token or consent flow config).
    """

    meta: Optional[dict[str, Any]] = None
    body: Any = None
    type: Optional[str] = None
    id: Optional[str] = None
    auth: Optional[AuthConfig] = None

    @classmethod
    def from_payload(cls, payload: Any) -> SaveRequest:
        """Build a request from a `save-file` message payload."""
        if isinstance(payload, SaveRequest):
            return payload
        if not isinstance(payload, dict):
            raise TypeError("save-file payload must be a dict")

        meta = payload.get("meta")
        if meta is not None and not isinstance(meta, dict):
            raise TypeError("save-file payload 'meta' must be a dict")

        return cls(
            meta=meta,
            body=payload.get("body"),
            type=payload.get("type") or None,
            id=payload.get("id") or None,
            auth=AuthConfig.from_payload(payload.get("auth")),
        )
