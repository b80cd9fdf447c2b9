"""Config file reading and line parsing for Symlinker."""

import logging
import re
from typing import Iterator, Optional, Tuple

from .config import ConfigEntry
from .exceptions import ConfigNotFoundError, ConfigOpenError, ConfigReadError

logger = logging.getLogger(__name__)

_COMMENT_PATTERN = re.compile(r"^\s*#")


class ConfigReader:
    """Line-oriented reader for `<link_path> <target_path>` config files."""

    def __init__(self, config_path: str, encoding: str = "utf-8"):
        """Initialize config reader.

        Args:
            config_path: Path to the configuration file
            encoding: Text encoding of the configuration file
        """
        self.config_path = config_path
        self.encoding = encoding

    def open(self):
        """Open the configuration file for reading.

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigOpenError: If the file exists but cannot be opened
        """
        try:
            return open(self.config_path, "r", encoding=self.encoding, newline="", errors="strict")
        except FileNotFoundError as e:
            raise ConfigNotFoundError(self.config_path) from e
        except OSError as e:
            raise ConfigOpenError(self.config_path, e) from e

    def iter_lines(self) -> Iterator[Tuple[int, str]]:
        """Lazily scan the file one line at a time.

        Yields:
            (line number, line) pairs  # (1-based numbers, line terminator stripped)

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigOpenError: If the file cannot be opened
            ConfigReadError: If reading fails part way through the file
        """
        line_number = 0
        with self.open() as f:
            while True:
                try:
                    line = f.readline()
                except (OSError, UnicodeDecodeError) as e:
                    raise ConfigReadError(self.config_path, e, line_number) from e
                if not line:
                    return
                line_number += 1
                # Only "\n" ends a line; one "\r" before it is dropped
                if line.endswith("\n"):
                    line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
                yield line_number, line


def is_comment_or_blank(line: str) -> bool:
    """Check whether a line is empty or a full-line comment."""
    return line == "" or bool(_COMMENT_PATTERN.match(line))


def parse_line(line: str, line_number: int) -> Optional[ConfigEntry]:
    """Parse one line of the configuration file.

    Only full-line comments are recognised; a trailing "#" after the fields is
    treated as an extra token and ignored along with anything after it.

    Args:
        line: Line content without its terminator
        line_number: 1-based line number for diagnostics

    Returns:
        Parsed entry, or None for blank, comment and malformed lines
    """
    if is_comment_or_blank(line):
        return None

    fields = line.split()
    if len(fields) < 2:
        print(f"Warning: Invalid line {line_number} in config file: {line}")
        return None

    if len(fields) > 2:
        logger.debug("Ignoring %d extra field(s) at line %d", len(fields) - 2, line_number)

    return ConfigEntry(link_path=fields[0], target_path=fields[1], line_number=line_number, line=line)
