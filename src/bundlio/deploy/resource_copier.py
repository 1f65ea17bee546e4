"""
Resource copying into the deploy directory.

Each resource rule names a source directory, a destination directory under
the deploy path and a filename filter (regular expression, case-insensitive).
Matching files are copied recursively, keeping their relative layout.
Hidden files and directories are skipped.
"""

import logging
import os
import re
import shutil
from pathlib import Path
from typing import List, Sequence

from ..config.project_model import Resource
from ..errors import BuildIOError, ConfigurationError, MissingInputError

logger = logging.getLogger(__name__)


class ResourceCopier:
    """Copies project resources matching filename filters."""

    def __init__(self, verbose: bool = False):
        """Initialize resource copier.

        Args:
            verbose: Whether to show verbose output
        """
        self.verbose = verbose

    def copy(
        self,
        resources: Sequence[Resource],
        source_path: Path,
        deploy_path: Path,
    ) -> List[Path]:
        """Copy all resources.

        Args:
            resources: Resource rules, applied in order
            source_path: Root that resource sources are resolved against
            deploy_path: Root that resource destinations are resolved against

        Returns:
            Destination paths of every copied file

        Raises:
            MissingInputError: If a resource source directory doesn't exist
            ConfigurationError: If a filter is not a valid regular expression
            BuildIOError: If a file cannot be copied
        """
        copied: List[Path] = []
        if not resources:
            return copied

        if self.verbose:
            print("Copying project resources.")

        for resource in resources:
            copied.extend(self._copy_resource(resource, Path(source_path), Path(deploy_path)))

        return copied

    def _copy_resource(
        self,
        resource: Resource,
        source_path: Path,
        deploy_path: Path,
    ) -> List[Path]:
        try:
            pattern = re.compile(resource.filter, re.IGNORECASE)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid resource filter '{resource.filter}': {e}"
            ) from e

        source_root = Path(os.path.abspath(source_path / resource.source))
        destination_root = Path(os.path.abspath(deploy_path / resource.destination))

        if not source_root.is_dir():
            raise MissingInputError(
                f"Resource source directory not found: {source_root}",
                path=source_root
            )

        if self.verbose:
            print(f"- Searching for files to copy using filter: '{resource.filter}'.")

        files = self.find_files(source_root, pattern)

        if self.verbose:
            print(f"- Copying {len(files)} files to '{destination_root}'.")

        copied = []
        for file in files:
            destination = destination_root / file.relative_to(source_root)
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(file, destination)
            except OSError as e:
                raise BuildIOError(
                    f"Failed to copy '{file}' to '{destination}': {e}",
                    path=destination
                ) from e
            logger.debug("Copied %s -> %s", file, destination)
            copied.append(destination)

        logger.info("Copied %d file(s) to %s", len(copied), destination_root)
        return copied

    @staticmethod
    def find_files(source_root: Path, pattern: "re.Pattern[str]") -> List[Path]:
        """Find files under a directory whose name matches a pattern.

        Args:
            source_root: Directory to search recursively
            pattern: Compiled filename pattern (matched anywhere in the name)

        Returns:
            Sorted list of matching, non-hidden files
        """
        matches = []
        for path in sorted(source_root.rglob("*")):
            if not path.is_file():
                continue
            relative_parts = path.relative_to(source_root).parts
            if any(part.startswith(".") for part in relative_parts):
                continue
            if pattern.search(path.name):
                matches.append(path)
        return matches
