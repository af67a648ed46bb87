"""Data models for the GitLab compare API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _bool_field(data: Mapping[str, Any], key: str) -> bool:
    return data.get(key) is True


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One file's change record within a comparison result."""

    old_path: str = ""
    new_path: str = ""
    is_new: bool = False
    is_deleted: bool = False
    is_renamed: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "DiffEntry":
        """Build from one element of the compare response's ``diffs`` array.

        Missing, null, or mistyped fields become empty paths / false flags.
        Only a JSON ``true`` sets a flag.
        """
        return cls(
            old_path=_str_field(data, "old_path"),
            new_path=_str_field(data, "new_path"),
            is_new=_bool_field(data, "new_file"),
            is_deleted=_bool_field(data, "deleted_file"),
            is_renamed=_bool_field(data, "renamed_file"),
        )
