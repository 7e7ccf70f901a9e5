"""Folder references used as file parents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from driveexport.util.mime import ROOT_FOLDER_ID, is_root_name


@dataclass(slots=True)
class ParentRef:
    """
    A folder a file should live in.

    Notes:
        - `id` set: the folder exists and no lookup is needed.
        - only `name` set: the folder is created during resolution.
    """

    name: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def parse(cls, item: Any) -> Optional[ParentRef]:
        """
        Build a reference from a raw string, a mapping or a ParentRef.

        Always returns a new object. Returns None for falsy items, for
        references that carry neither `name` nor `id`, and for any other type.
        """
        if not item:
            return None
        if isinstance(item, ParentRef):
            if not item.name and not item.id:
                return None
            return cls(name=item.name, id=item.id)
        if isinstance(item, str):
            if is_root_name(item):
                return cls(id=ROOT_FOLDER_ID)
            return cls(name=item)
        if isinstance(item, Mapping):
            name = item.get("name") or None
            folder_id = item.get("id") or None
            if not name and not folder_id:
                return None
            return cls(name=name, id=folder_id)
        return None

    @property
    def resolved(self) -> bool:
        return bool(self.id)

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {}
        if self.name is not None:
            data["name"] = self.name
        if self.id is not None:
            data["id"] = self.id
        return data
