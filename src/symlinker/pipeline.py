"""Symlinker setup pipeline: read, expand, validate and apply config entries."""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional

from .config import DIAGNOSTIC_ENV_VARS, ExpandedEntry, RunConfig
from .exceptions import ConfigNotFoundError, EntryError
from .interpolation import EnvExpander, has_unexpanded_variable
from .linker import SymlinkApplier
from .reader import ConfigReader, is_comment_or_blank, parse_line
from .utils import dump_yaml

logger = logging.getLogger(__name__)

RULE = "=" * 51


@dataclass
class SetupResult:
    """Outcome of a completed run."""

    applied: List[ExpandedEntry] = field(default_factory=list)
    skipped: int = 0


class SymlinkSetup:
    """Reads a config file and creates the symlinks it describes."""

    def __init__(self, run_config: RunConfig, environ: Optional[Mapping[str, str]] = None):
        """Initialize setup.

        Args:
            run_config: Run mode and config path
            environ: Variables for path expansion  # (defaults to os.environ)
        """
        self.run_config = run_config
        self.environ = environ
        self.reader = ConfigReader(run_config.config_path)
        self.expander = EnvExpander(environ)
        self.applier = SymlinkApplier(run_config)

    def run(self) -> SetupResult:
        """Apply every entry of the config file in order.

        Returns:
            Applied entries and the number of skipped ones

        Raises:
            SymlinkerError: On the first fatal error  # (missing config, I/O failure, filesystem failure)
        """
        config_path = self.run_config.config_path
        dry_run = self.run_config.dry_run

        # Checked up front so a missing config is the first and only output
        try:
            os.stat(config_path)
        except FileNotFoundError as e:
            raise ConfigNotFoundError(config_path) from e
        except OSError:
            pass  # reported by the reader when it tries to open the file

        if self.run_config.print_entries:
            return self._print_entries()

        if dry_run:
            self._print_environment_info()
            print(f"[DRY RUN] Would set up symlinks from config: {config_path}")
        else:
            print(f"Setting up symlinks from config: {config_path}")

        result = SetupResult()
        for entry in self.iter_expanded_entries(result):
            if dry_run:
                print()
                print(f"[DRY RUN] Line {entry.line_number}: {entry.raw.link_path} -> {entry.raw.target_path}")
                print(f"[DRY RUN] Expanded: {entry.link_path} -> {entry.target_path} (dir: {entry.link_dir})")

            self.apply_entry(entry)
            result.applied.append(entry)

        if dry_run:
            print("[DRY RUN] Symlink setup complete! (No changes made)")
        else:
            print("Symlink setup complete!")
        return result

    def iter_expanded_entries(self, result: Optional[SetupResult] = None) -> Iterator[ExpandedEntry]:
        """Yield expanded entries that passed validation, warning about the rest.

        Args:
            result: Run result whose skipped counter is updated  # (optional)
        """
        for line_number, line in self.reader.iter_lines():
            if is_comment_or_blank(line):
                continue

            raw = parse_line(line, line_number)
            if raw is None:
                if result is not None:
                    result.skipped += 1
                continue

            entry = self.expander.expand(raw)
            if not entry.link_path or not entry.target_path:
                print(f"Warning: Invalid paths at line {line_number} in config file: {line}")
                if result is not None:
                    result.skipped += 1
                continue

            if has_unexpanded_variable(entry.link_path) or has_unexpanded_variable(entry.target_path):
                print(f"Warning: Unexpanded environment variables at line {line_number}: {line}")

            yield entry

    def apply_entry(self, entry: ExpandedEntry) -> None:
        """Ensure the link's parent directory exists, then create the link.

        Raises:
            EntryError: If a filesystem operation fails  # (line number filled in)
        """
        logger.debug("Applying line %d: %s -> %s", entry.line_number, entry.link_path, entry.target_path)
        try:
            self.applier.ensure_directory(entry.link_dir)
            self.applier.create_symlink(entry.target_path, entry.link_path)
        except EntryError as e:
            e.line_number = entry.line_number
            raise

    def _print_environment_info(self) -> None:
        """Print the dry-run banner with the commonly used environment variables."""
        environ = os.environ if self.environ is None else self.environ
        print("DRY RUN MODE - No changes will be made")
        print(RULE)
        print("Current environment variables:")
        for name in DIAGNOSTIC_ENV_VARS:
            value = environ.get(name)
            if value:
                print(f"  {name}: {value}")
        print(RULE)

    def _print_entries(self) -> SetupResult:
        """Print the expanded entries as YAML without touching the filesystem."""
        result = SetupResult()
        for entry in self.iter_expanded_entries(result):
            result.applied.append(entry)

        print("Expanded Entries:")
        print(RULE)
        print(dump_yaml({"config": self.run_config.config_path, "entries": [e.to_dict() for e in result.applied]}))
        return result
