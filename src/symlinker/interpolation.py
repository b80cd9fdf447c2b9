"""Environment variable interpolation for Symlinker config entries."""

import os
import re
from typing import Mapping, Optional

from .config import ConfigEntry, ExpandedEntry

# ${NAME} (anything up to the first "}"), a bare "${" with no closing brace,
# a single-character special such as $1 or $?, or $NAME
_VARIABLE_PATTERN = re.compile(r"\$(?:\{([^}]*)\}|(\{)|([*#$@!?\-0-9])|([A-Za-z_][A-Za-z0-9_]*))")


def expand_env_vars(value: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Replace every environment variable reference in a string.

    Args:
        value: String possibly containing $NAME or ${NAME} references
        environ: Variables to expand against  # (defaults to os.environ)

    Returns:
        String with references replaced  # (unset variables expand to "")
    """
    if environ is None:
        environ = os.environ

    def replace_var(m):
        # "${}" and an unterminated "${" are consumed and expand to nothing
        name = m.group(1) or m.group(3) or m.group(4)
        if not name:
            return ""
        return environ.get(name, "")

    # A "$" with no name after it is kept as written
    return _VARIABLE_PATTERN.sub(replace_var, value)


def has_unexpanded_variable(value: str) -> bool:
    """Heuristic check for a "$" left behind after expansion.

    A literal "$" in a path, or a variable whose value contains one, also
    triggers it.
    """
    return "$" in value


class EnvExpander:
    """Expands config entries against a process environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """Initialize the expander.

        Args:
            environ: Variables to expand against  # (read from os.environ at call time when omitted)
        """
        self.environ = environ

    def expand(self, entry: ConfigEntry) -> ExpandedEntry:
        """Expand both path fields of an entry.

        Args:
            entry: Raw entry as parsed from the config file

        Returns:
            Entry with both fields expanded  # (fields may be empty, callers validate)
        """
        return ExpandedEntry(
            link_path=expand_env_vars(entry.link_path, self.environ),
            target_path=expand_env_vars(entry.target_path, self.environ),
            raw=entry,
        )
