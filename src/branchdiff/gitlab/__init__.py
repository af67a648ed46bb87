"""GitLab interface layer — compare client and models."""

from branchdiff.gitlab.client import (
    ClientInitializationError,
    ComparisonClient,
    ComparisonError,
)
from branchdiff.gitlab.models import DiffEntry

__all__ = [
    "ClientInitializationError",
    "ComparisonClient",
    "ComparisonError",
    "DiffEntry",
]
