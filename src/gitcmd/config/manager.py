# Author: PB
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Final, Mapping, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from gitcmd.system.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "gitcmd.yml"


def _get_config_search_paths(environ: Mapping[str, str]) -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Empty environment variables produce no candidate.
    """
    candidates = [
        Path("/etc/gitcmd") / USER_CFG,  # System defaults
    ]
    home = environ.get("HOME")
    if home:
        candidates.append(Path(home) / ".config" / "gitcmd" / USER_CFG)
    if environ.get("XDG_CONFIG_HOME"):
        candidates.append(Path(environ["XDG_CONFIG_HOME"]) / "gitcmd" / USER_CFG)
    if environ.get("GIT_CMD_CONFIG_HOME"):
        candidates.append(Path(environ["GIT_CMD_CONFIG_HOME"]) / USER_CFG)
    return tuple(candidates)


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Later files override earlier ones key by key. Unreadable files are
    logged and skipped.
    """
    merged_data: dict = {}
    found_configs = []

    for candidate in candidates:
        if not candidate.is_file():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {candidate}: {e}")
            continue
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {candidate}: top level must be a mapping")
            continue

        merged_data.update(data)
        found_configs.append(str(candidate))
        logger.debug(f"Loaded config from {candidate}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    return merged_data


class DispatcherConfig(BaseModel):
    """Settings for resolving and running subcommands."""

    # Directories searched for git-cmd-<verb> before PATH
    exec_path: list[Path] = Field(default_factory=list)

    # alias name -> replacement command line
    aliases: dict[str, str] = Field(default_factory=dict)

    # Extra variables exported to every subcommand
    env: dict[str, str] = Field(default_factory=dict)

    local_log: Optional[Path] = None

    # Offer "did you mean" suggestions for unknown verbs
    suggestions: bool = True

    @field_validator("aliases")
    @classmethod
    def check_aliases(cls, aliases: dict[str, str]) -> dict[str, str]:
        for name, value in aliases.items():
            if not name or name.startswith("-") or any(c.isspace() for c in name):
                raise ValueError(f"invalid alias name: {name!r}")
            if not value.strip():
                raise ValueError(f"alias '{name}' is empty")
            if value.lstrip().startswith("!"):
                raise ValueError(f"alias '{name}': shell aliases are not supported")
        return aliases


def load_merged_config(environ: Optional[Mapping[str, str]] = None) -> DispatcherConfig:
    """Load and merge config from all locations (system defaults + user overrides).

    No config file at all yields the defaults.

    Raises:
        ConfigError: If the merged settings fail validation
    """
    environ = os.environ if environ is None else environ
    merged_data = _load_merged_config_data(_get_config_search_paths(environ))
    try:
        return DispatcherConfig.model_validate(merged_data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
