"""Drive HTTP layer exports for driveexport."""

from __future__ import annotations

from .folders import FolderCache, FolderResolver, normalize_parents
from .upload_session import UploadSession

__all__ = ["FolderCache", "FolderResolver", "UploadSession", "normalize_parents"]
