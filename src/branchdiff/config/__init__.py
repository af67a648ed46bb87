"""Configuration loading and schema."""

from branchdiff.config.loader import ConfigurationError, load_config
from branchdiff.config.schema import BranchDiffConfig, GitLabConfig, OutputConfig

__all__ = [
    "BranchDiffConfig",
    "ConfigurationError",
    "GitLabConfig",
    "OutputConfig",
    "load_config",
]
