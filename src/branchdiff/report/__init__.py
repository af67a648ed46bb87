"""Diff classification and the report model."""

from branchdiff.report.classifier import classify, extension
from branchdiff.report.models import ClassificationReport

__all__ = ["ClassificationReport", "classify", "extension"]
