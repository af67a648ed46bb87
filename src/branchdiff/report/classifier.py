"""Diff classifier — map raw diff entries onto a ClassificationReport."""

from __future__ import annotations

from typing import Iterable, List

from branchdiff.gitlab.models import DiffEntry
from branchdiff.report.models import ClassificationReport


def extension(path: str) -> str:
    """Return the suffix from the last ``.`` of the final path segment.

    Empty when that segment has no dot. Unlike ``os.path.splitext`` a
    leading dot counts, so ``.bashrc`` is its own extension.
    """
    idx = path.rfind(".")
    if idx == -1 or "/" in path[idx:]:
        return ""
    return path[idx:]


def is_type_change(entry: DiffEntry) -> bool:
    """True when the file extension differs between old and new path."""
    return extension(entry.old_path) != extension(entry.new_path)


def classify(entries: Iterable[DiffEntry]) -> ClassificationReport:
    """Classify *entries* in a single pass.

    Output order mirrors input order; nothing is skipped or deduplicated.
    The ``only_*`` flags start true, so an empty input yields all four true.
    """
    all_files: List[str] = []
    added_and_changed: List[str] = []
    added: List[str] = []
    changed: List[str] = []
    deleted: List[str] = []
    renamed: List[str] = []
    type_changed: List[str] = []

    any_added = any_changed = any_deleted = any_renamed = False
    only_added = only_changed = only_deleted = only_renamed = True

    for entry in entries:
        is_changed = not entry.is_deleted and not entry.is_new and not entry.is_renamed
        path = entry.new_path

        all_files.append(path)
        if is_changed or entry.is_new:
            added_and_changed.append(path)
        if entry.is_new:
            added.append(path)
        if is_changed:
            changed.append(path)
        if entry.is_deleted:
            deleted.append(path)
        if entry.is_renamed:
            renamed.append(path)

        any_added = any_added or entry.is_new
        any_changed = any_changed or is_changed
        any_deleted = any_deleted or entry.is_deleted
        any_renamed = any_renamed or entry.is_renamed

        only_added = only_added and entry.is_new
        only_changed = only_changed and is_changed
        only_deleted = only_deleted and entry.is_deleted
        only_renamed = only_renamed and entry.is_renamed

        if is_type_change(entry):
            type_changed.append(path)

    return ClassificationReport(
        all_files=tuple(all_files),
        added_and_changed_files=tuple(added_and_changed),
        added_files=tuple(added),
        changed_files=tuple(changed),
        deleted_files=tuple(deleted),
        renamed_files=tuple(renamed),
        any_added=any_added,
        any_changed=any_changed,
        any_deleted=any_deleted,
        any_renamed=any_renamed,
        only_added=only_added,
        only_changed=only_changed,
        only_deleted=only_deleted,
        only_renamed=only_renamed,
        type_changed_files=tuple(type_changed),
    )
