"""CLI utility functions for Bundlio.

This module provides common utilities used by the CLI including:
- Logging setup
- Error handling and formatting
- Project file validation
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from bundlio.errors import BundlerError

CONSOLE_HANDLER_NAME = "bundlio-console"


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger for console output.

    Calling this again only updates the level of the console handler
    installed by the first call.

    Args:
        verbose: Log INFO and above when set, WARNING and above otherwise
    """
    level = logging.INFO if verbose else logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in logger.handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            handler.setLevel(level)
            return

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)


class ErrorFormatter:
    """Prints build outcomes with ANSI color codes."""

    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(
        title: str,
        message: str,
        context: Optional[List[Tuple[str, object]]] = None
    ) -> None:
        """Print an error block.

        Args:
            title: Error title (e.g., "Build failed (io error)")
            message: Error message details
            context: Optional (label, value) lines shown under the message
        """
        print()
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}")
        print()
        print(message)
        for label, value in context or []:
            print(f"  {label + ':':<9} {value}")
        print()

    @staticmethod
    def print_success(message: str) -> None:
        """Print a success line."""
        print()
        print(f"{ErrorFormatter.GREEN}✓ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def handle_build_error(error: BundlerError) -> None:
        """Report a build failure with its package/path context and exit with status 1.

        Args:
            error: The BundlerError that stopped the build
        """
        context: List[Tuple[str, object]] = []
        if error.file:
            context.append(("Package", error.file))
        if error.path is not None:
            context.append(("Path", error.path))
        ErrorFormatter.print_error(
            f"Build failed ({error.kind.value} error)", error.message, context
        )
        sys.exit(1)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Report an interrupted build and exit with the SIGINT status."""
        print()
        print(f"{ErrorFormatter.YELLOW}✗ Build interrupted{ErrorFormatter.RESET}")
        sys.exit(130)

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Report an exception outside the build error taxonomy and exit with status 1.

        Args:
            error: The exception to handle
            verbose: Whether to print the traceback
        """
        ErrorFormatter.print_error("Unexpected error", f"{type(error).__name__}: {error}")

        if verbose:
            import traceback

            print("Traceback:")
            print(traceback.format_exc())

        sys.exit(1)


class PathValidator:
    """Validates paths given on the command line."""

    @staticmethod
    def validate_project_file(project_file: Path) -> None:
        """Validate that the project file exists and is a file.

        Args:
            project_file: Path to validate

        Raises:
            SystemExit: If path doesn't exist or isn't a file
        """
        if not project_file.exists():
            print(
                f"{ErrorFormatter.RED}✗ Error: Project file does not exist: {project_file}{ErrorFormatter.RESET}"
            )
            sys.exit(2)
        if not project_file.is_file():
            print(
                f"{ErrorFormatter.RED}✗ Error: Project path is not a file: {project_file}{ErrorFormatter.RESET}"
            )
            sys.exit(2)
