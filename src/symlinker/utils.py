"""Utility functions for Symlinker."""

import logging
import os
import sys
from typing import Any

import yaml

from .exceptions import ExecutablePathError


def setup_logging(debug: bool = False) -> None:
    """Initialize logging.

    Args:
        debug: Log debug traces to stderr instead of warnings only
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def get_executable_path() -> str:
    """Get the path of the running executable.

    Returns:
        sys.executable for frozen builds, otherwise the invoked script path
    """
    if getattr(sys, "frozen", False):
        return sys.executable
    return sys.argv[0] if sys.argv else ""


def get_executable_dir(executable: str | None = None) -> str:
    """Get the directory containing the running executable, symlinks resolved.

    Args:
        executable: Executable path to resolve  # (defaults to the running one)

    Returns:
        Absolute directory path

    Raises:
        ExecutablePathError: If the executable path is unknown or cannot be resolved
    """
    if executable is None:
        executable = get_executable_path()
    if not executable or executable in ("-c", "-m"):
        raise ExecutablePathError(executable, "running executable is unknown")

    try:
        real_path = os.path.realpath(executable, strict=True)
    except (OSError, RuntimeError) as e:
        raise ExecutablePathError(executable, e) from e

    return os.path.dirname(real_path)


def dump_yaml(data: Any) -> str:
    """Dump data to a YAML string.

    Args:
        data: Data to dump  # (plain dicts, lists and scalars)

    Returns:
        YAML document
    """
    return yaml.safe_dump(data, default_flow_style=False, indent=2, sort_keys=False, allow_unicode=True)
