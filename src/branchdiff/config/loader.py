"""Load and merge configuration from .branchdiff.toml, env vars, and CLI flags."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from branchdiff.config.schema import (
    OUTPUT_FORMATS,
    BranchDiffConfig,
    GitLabConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".branchdiff.toml"

# Fields that may only come from the environment.
_SECRET_FIELDS = {"token"}


class ConfigurationError(Exception):
    """Raised when config is malformed or a required value is missing."""


def find_config_file(cwd: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigurationError(f"Config file not found: {override}")
        return p
    candidate = cwd / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigurationError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)} - _SECRET_FIELDS
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: BranchDiffConfig) -> None:
    """Apply GITLAB_URL / CI_SERVER_URL and BRANCHDIFF_FORMAT overrides."""
    if val := os.environ.get("GITLAB_URL") or os.environ.get("CI_SERVER_URL"):
        cfg.gitlab.url = val
    if val := os.environ.get("BRANCHDIFF_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def _load_token(cfg: BranchDiffConfig) -> None:
    name = cfg.gitlab.token_variable
    token = os.environ.get(name, "")
    if not token:
        raise ConfigurationError(f"Variable '{name}' must be set.")
    cfg.gitlab.token = token


def load_config(
    cwd: Path,
    config_override: Optional[str] = None,
) -> BranchDiffConfig:
    """Load, validate, and return a BranchDiffConfig with the token resolved."""
    config_path = find_config_file(cwd, config_override)

    if config_path is None:
        cfg = BranchDiffConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = BranchDiffConfig(
            gitlab=_build_section(raw, GitLabConfig, "gitlab"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Invalid output format in {config_path}: {cfg.output.format!r}"
            )
        for key in ("url", "token_variable"):
            value = getattr(cfg.gitlab, key)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(
                    f"Invalid gitlab.{key} in {config_path}: expected a non-empty string, got {value!r}"
                )

    _merge_env_overrides(cfg)
    _load_token(cfg)
    return cfg
