"""Public model exports for driveexport."""

from __future__ import annotations

from .parent_ref import ParentRef
from .requests import FileResource, MediaPayload, SaveRequest

__all__ = [
    "FileResource",
    "MediaPayload",
    "ParentRef",
    "SaveRequest",
]
