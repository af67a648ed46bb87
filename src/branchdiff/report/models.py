"""Classification report model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ClassificationReport:
    """Aggregate view of one branch comparison.

    Every path tuple is an ordered subsequence of ``all_files``.
    """

    all_files: Tuple[str, ...] = ()
    added_and_changed_files: Tuple[str, ...] = ()
    added_files: Tuple[str, ...] = ()
    changed_files: Tuple[str, ...] = ()
    deleted_files: Tuple[str, ...] = ()
    renamed_files: Tuple[str, ...] = ()
    any_added: bool = False
    any_changed: bool = False
    any_deleted: bool = False
    any_renamed: bool = False
    only_added: bool = True
    only_changed: bool = True
    only_deleted: bool = True
    only_renamed: bool = True
    type_changed_files: Tuple[str, ...] = ()

    @property
    def total_files(self) -> int:
        return len(self.all_files)
