"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

OutputFormat = Literal["json", "terminal"]

OUTPUT_FORMATS: tuple[str, ...] = ("json", "terminal")

DEFAULT_GITLAB_URL = "https://gitlab.com"
DEFAULT_TOKEN_VARIABLE = "GITLAB_API_TOKEN"


@dataclass
class GitLabConfig:
    url: str = DEFAULT_GITLAB_URL
    token_variable: str = DEFAULT_TOKEN_VARIABLE
    token: Optional[str] = field(default=None, repr=False)  # never read from file


@dataclass
class OutputConfig:
    format: OutputFormat = "json"


@dataclass
class BranchDiffConfig:
    gitlab: GitLabConfig = field(default_factory=GitLabConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
