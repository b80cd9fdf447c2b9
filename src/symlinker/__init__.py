"""Symlinker - Declarative Symlink Management.

Creates symbolic links described by a line-oriented config file, expanding
environment variables in paths, with a dry-run preview mode.
"""
# ruff: noqa: F401

from .config import ConfigEntry, ExpandedEntry, RunConfig
from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigOpenError,
    ConfigReadError,
    DirectoryCreationError,
    EntryError,
    ExecutablePathError,
    LinkCreationError,
    LinkRemovalError,
    SymlinkerError,
)
from .parser import SymlinkerParser, main
from .pipeline import SetupResult, SymlinkSetup

__version__ = "0.1.0"
