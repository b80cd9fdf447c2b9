"""Symlinker run configuration and entry objects."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_CONFIG_NAME = "symlinker.conf"

# Shown in the dry-run banner when set
DIAGNOSTIC_ENV_VARS = ("HOME", "USER", "XDG_CONFIG_HOME", "DOTFILES_HOME", "TOOLS_DIR", "NOTES_DIR")


@dataclass(frozen=True)
class RunConfig:
    """Run mode fixed for the lifetime of one invocation.

    Args:
        config_path: Path of the configuration file to apply
        dry_run: Report intended actions without touching the filesystem
        print_entries: Dump the expanded entries as YAML instead of applying them
        debug: Enable verbose logging
    """

    config_path: str
    dry_run: bool = False
    print_entries: bool = False
    debug: bool = False


@dataclass(frozen=True)
class ConfigEntry:
    """One data line of the configuration file, as written."""

    link_path: str
    target_path: str
    line_number: int
    line: str


@dataclass(frozen=True)
class ExpandedEntry:
    """A config entry after environment variable substitution."""

    link_path: str
    target_path: str
    raw: ConfigEntry

    @property
    def line_number(self) -> int:
        return self.raw.line_number

    @property
    def link_dir(self) -> str:
        """Parent directory of the link path ("." for a bare file name)."""
        return os.path.dirname(os.path.normpath(self.link_path)) or "."

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict for serialization.

        Returns:
            Mapping of the expanded and raw fields  # (YAML-friendly primitives only)
        """
        return {
            "line": self.line_number,
            "link": self.link_path,
            "target": self.target_path,
            "raw": {"link": self.raw.link_path, "target": self.raw.target_path},
        }
