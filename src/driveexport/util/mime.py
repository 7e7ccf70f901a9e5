from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"

ROOT_FOLDER_ID: str = "root"

# Parent name that stands for the Drive root folder.
ROOT_FOLDER_NAME: str = "my drive"


def is_root_name(name: object) -> bool:
    """Return True if `name` is the "My Drive" sentinel (case-insensitive)."""
    return isinstance(name, str) and name.strip().lower() == ROOT_FOLDER_NAME
