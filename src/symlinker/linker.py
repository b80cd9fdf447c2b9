"""Filesystem operations: parent directory creation and symlink replacement."""

import logging
import os
import shutil
import stat

from .config import RunConfig
from .exceptions import DirectoryCreationError, LinkCreationError, LinkRemovalError

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755


class SymlinkApplier:
    """Applies (or, in dry-run mode, reports) the filesystem changes for links."""

    def __init__(self, run_config: RunConfig):
        """Initialize applier.

        Args:
            run_config: Run mode  # (only dry_run is read)
        """
        self.dry_run = run_config.dry_run

    def ensure_directory(self, path: str) -> None:
        """Create a directory and its missing ancestors if it does not exist.

        An existing non-directory at the path is left alone.

        Args:
            path: Directory that must exist before a link is created in it

        Raises:
            DirectoryCreationError: If the directory cannot be created
        """
        try:
            os.stat(path)
            return
        except FileNotFoundError:
            pass
        except OSError as e:
            # Only a missing path triggers creation
            logger.debug("stat %s failed (%s), leaving it alone", path, e)
            return

        if self.dry_run:
            print(f"[DRY RUN] Would create directory: {path}")
            return

        print(f"Creating directory: {path}")
        try:
            os.makedirs(path, mode=DIRECTORY_MODE, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(path, e) from e

    def create_symlink(self, target_path: str, link_path: str) -> None:
        """Replace whatever is at the link path with a symlink to the target.

        The target is not required to exist.

        Args:
            target_path: Path the new link points to
            link_path: Where the link is created

        Raises:
            LinkRemovalError: If an existing file, link or directory cannot be removed
            LinkCreationError: If the symlink cannot be created
        """
        # "nvim/" would resolve through an existing link and recurse into its target
        link_path = link_path.rstrip(os.sep) or os.sep

        if os.path.lexists(link_path):
            if self.dry_run:
                print(f"[DRY RUN] Would remove existing: {link_path}")
            else:
                print(f"Removing existing: {link_path}")
                self._remove(link_path)

        if self.dry_run:
            print(f"[DRY RUN] Would create symlink: {link_path} -> {target_path}")
            return

        print(f"Creating symlink: {link_path} -> {target_path}")
        try:
            os.symlink(target_path, link_path)
        except OSError as e:
            raise LinkCreationError(link_path, e) from e

    def _remove(self, path: str) -> None:
        """Remove a path recursively without following a symlink at the path itself."""
        try:
            if stat.S_ISDIR(os.lstat(path).st_mode):
                shutil.rmtree(path)
            else:
                os.unlink(path)
        except FileNotFoundError:
            logger.debug("%s disappeared before removal", path)
        except OSError as e:
            raise LinkRemovalError(path, e) from e
