"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict

from branchdiff.report.models import ClassificationReport


class SerializationError(Exception):
    """Raised when the report cannot be encoded to JSON."""


def to_dict(report: ClassificationReport) -> Dict[str, Any]:
    """Convert a ClassificationReport to a JSON-serialisable dict."""
    return {
        "all_files": list(report.all_files),
        "added_and_changed_files": list(report.added_and_changed_files),
        "added_files": list(report.added_files),
        "changed_files": list(report.changed_files),
        "deleted_files": list(report.deleted_files),
        "renamed_files": list(report.renamed_files),
        "any_added": report.any_added,
        "any_changed": report.any_changed,
        "any_deleted": report.any_deleted,
        "any_renamed": report.any_renamed,
        "only_added": report.only_added,
        "only_changed": report.only_changed,
        "only_deleted": report.only_deleted,
        "only_renamed": report.only_renamed,
        "type_changed_files": list(report.type_changed_files),
    }


def render(report: ClassificationReport) -> str:
    """Return the report as 2-space indented JSON."""
    try:
        return json.dumps(to_dict(report), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to encode report: {exc}") from exc
