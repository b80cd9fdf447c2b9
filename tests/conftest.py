"""Pytest configuration and shared fixtures for Symlinker tests."""

import os
import tempfile
from pathlib import Path
from textwrap import dedent
from typing import Dict, Iterator, Tuple

import pytest

from symlinker import RunConfig
from symlinker.linker import SymlinkApplier


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def applier() -> SymlinkApplier:
    """Create a SymlinkApplier that mutates the filesystem."""
    return SymlinkApplier(RunConfig(config_path="unused.conf"))


@pytest.fixture
def dry_run_applier() -> SymlinkApplier:
    """Create a SymlinkApplier in dry-run mode."""
    return SymlinkApplier(RunConfig(config_path="unused.conf", dry_run=True))


def write_config_file(file_path: Path, content: str) -> Path:
    """Write a symlinker config file.

    Args:
        file_path: Path to write file
        content: Config text  # (dedented before writing)

    Returns:
        The written path
    """
    file_path.write_text(dedent(content), encoding="utf-8")
    return file_path


def set_env_vars(**env_vars: str) -> None:
    """Set environment variables.

    Args:
        **env_vars: Environment variables to set
    """
    for key, value in env_vars.items():
        os.environ[key] = value


def cleanup_env_vars(*var_names: str) -> None:
    """Clean up environment variables.

    Args:
        *var_names: Variable names to remove
    """
    for var_name in var_names:
        os.environ.pop(var_name, None)


def snapshot_tree(root: Path) -> Dict[str, Tuple[str, str]]:
    """Capture every filesystem entry under a directory.

    Args:
        root: Directory to walk  # (symlinks are recorded, never followed)

    Returns:
        Mapping of relative path to (kind, payload)  # (link target, file content, or "" for dirs)
    """
    tree = {}
    for dir_path, dir_names, file_names in os.walk(root):
        for name in dir_names + file_names:
            path = Path(dir_path) / name
            rel = str(path.relative_to(root))
            if path.is_symlink():
                tree[rel] = ("link", os.readlink(path))
            elif path.is_dir():
                tree[rel] = ("dir", "")
            else:
                tree[rel] = ("file", path.read_text())
    return tree
