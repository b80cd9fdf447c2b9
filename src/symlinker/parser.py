"""Symlinker command line parser module."""

import argparse
import logging
import os
import sys
import textwrap
from typing import List, Optional

from .config import DEFAULT_CONFIG_NAME, RunConfig
from .exceptions import SymlinkerError
from .pipeline import SymlinkSetup
from .utils import get_executable_dir, setup_logging

logger = logging.getLogger(__name__)

HELP_EPILOG = textwrap.dedent("""\
    Environment Variable Expansion:
      Supports all environment variables in format $VAR or ${VAR}
      Examples: $HOME, $USER, $DOTFILES_HOME, ${XDG_CONFIG_HOME}

    Required Environment Variables:
      Make sure to set the environment variables used in your config file
      Example: export DOTFILES_HOME="$HOME/dotfiles"

    Examples:
      symlinker                    # Use default config file
      symlinker custom.conf        # Use custom config file
      symlinker --dry-run          # Preview changes without applying
      symlinker --dry-run my.conf  # Preview with custom config
    """)


class SymlinkerParser:
    """Main Symlinker command line parser class."""

    def __init__(self, prog: str = "symlinker"):
        """Initialize Symlinker parser.

        Args:
            prog: Program name shown in usage text
        """
        self.prog = prog

    def parse_args(self, args: Optional[List[str]] = None) -> RunConfig:
        """Parse arguments and return the run configuration.

        Args:
            args: Command line arguments (defaults to sys.argv[1:])

        Returns:
            Immutable run configuration

        Raises:
            ExecutablePathError: If no config file is given and the executable directory cannot be resolved
        """
        if args is None:
            args = sys.argv[1:]

        arg_parser = self._build_argument_parser()
        parsed_args = arg_parser.parse_args(args)

        # Help overrides every other flag
        if parsed_args.help:
            self._show_help(arg_parser)
            sys.exit(0)

        return RunConfig(
            config_path=self._resolve_config_path(parsed_args.config),
            dry_run=parsed_args.dry_run,
            print_entries=parsed_args.print_entries,
            debug=parsed_args.debug,
        )

    def _build_argument_parser(self) -> argparse.ArgumentParser:
        """Build the argparse parser.

        Returns:
            Parser with --help handled by SymlinkerParser instead of argparse
        """
        parser = argparse.ArgumentParser(
            prog=self.prog,
            description="Symlink Manager - Create and manage symlinks from configuration files",
            usage="%(prog)s [flags] [config-file]",
            epilog=HELP_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
        )
        parser.add_argument(
            "config",
            nargs="?",
            help=f"Configuration file (default: {DEFAULT_CONFIG_NAME} next to the executable)",
        )
        parser.add_argument(
            "--dry-run", dest="dry_run", action="store_true", help="Show what would be done without making changes"
        )
        parser.add_argument("--help", "-h", dest="help", action="store_true", help="Show help message")
        parser.add_argument(
            "--print", dest="print_entries", action="store_true", help="Print the expanded entries as YAML and exit"
        )
        parser.add_argument("--debug", action="store_true", help="Enable verbose logging")
        return parser

    def _resolve_config_path(self, config: Optional[str]) -> str:
        """Resolve the config file path.

        Args:
            config: Positional config argument, used verbatim when given

        Returns:
            Config file path  # (default file next to the executable otherwise)
        """
        if config is not None:
            return config
        return os.path.join(get_executable_dir(), DEFAULT_CONFIG_NAME)

    def _show_help(self, arg_parser: argparse.ArgumentParser) -> None:
        """Print usage text."""
        arg_parser.print_help(sys.stdout)


def main(args: Optional[List[str]] = None) -> int:
    """Console entry point.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    try:
        run_config = SymlinkerParser().parse_args(args)
        setup_logging(run_config.debug)
        logger.debug("Run configuration: %s", run_config)
        SymlinkSetup(run_config).run()
    except SymlinkerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
