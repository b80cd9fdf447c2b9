"""Custom exceptions for Symlinker."""

from typing import Optional


class SymlinkerError(Exception):
    """Base exception for Symlinker errors."""

    pass


class ExecutablePathError(SymlinkerError):
    """Raised when the directory of the running executable cannot be determined."""

    def __init__(self, executable: str, reason: Exception | str):
        self.executable = executable
        super().__init__(f"error getting executable path {executable!r}: {reason}")


class ConfigError(SymlinkerError):
    """Base exception for errors reading the configuration file."""

    def __init__(self, config_path: str, message: str):
        self.config_path = config_path
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""

    def __init__(self, config_path: str):
        super().__init__(config_path, f"Config file not found: {config_path}")


class ConfigOpenError(ConfigError):
    """Raised when the configuration file exists but cannot be opened."""

    def __init__(self, config_path: str, reason: Exception):
        super().__init__(config_path, f"error opening config file {config_path}: {reason}")


class ConfigReadError(ConfigError):
    """Raised when scanning the configuration file fails part way through."""

    def __init__(self, config_path: str, reason: Exception, line_number: Optional[int] = None):
        self.line_number = line_number
        location = f" after line {line_number}" if line_number else ""
        super().__init__(config_path, f"error reading config file {config_path}{location}: {reason}")


class EntryError(SymlinkerError):
    """Base exception for filesystem failures while applying one config entry.

    The line number is unknown where the filesystem call fails, so the driver
    fills it in before the error propagates.
    """

    operation = "error applying entry"

    def __init__(self, path: str, reason: Exception, line_number: Optional[int] = None):
        self.path = path
        self.reason = reason
        self.line_number = line_number
        super().__init__(path, reason)

    def __str__(self) -> str:
        location = f"at line {self.line_number}: " if self.line_number is not None else ""
        return f"{location}{self.operation} {self.path}: {self.reason}"


class DirectoryCreationError(EntryError):
    """Raised when the parent directory of a link cannot be created."""

    operation = "error creating directory"


class LinkRemovalError(EntryError):
    """Raised when an existing path blocking a link cannot be removed."""

    operation = "error removing existing path"


class LinkCreationError(EntryError):
    """Raised when the symbolic link itself cannot be created."""

    operation = "error creating symlink"
