"""
Build error taxonomy for Bundlio.

Every failure raised by the resolver, assembler, minifier, project loader or
resource copier is a BundlerError carrying an ErrorKind, so callers can match
on the kind instead of the message text:
- CONFIGURATION: unknown dependency, dependency cycle, malformed project file
- MISSING_INPUT: include file, dependency artifact or resource root missing
- IO: directory creation or file write failed
- MINIFICATION: the minifier rejected its input
"""

from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(Enum):
    """Kind of a build failure."""

    CONFIGURATION = "configuration"
    MISSING_INPUT = "missing-input"
    IO = "io"
    MINIFICATION = "minification"


class BundlerError(Exception):
    """Base exception for all build failures."""

    kind: ErrorKind = ErrorKind.CONFIGURATION

    def __init__(
        self,
        message: str,
        file: Optional[str] = None,
        path: Optional[Path] = None
    ):
        """
        Initialize build error.

        Args:
            message: Human readable description
            file: File identifier of the package involved (if any)
            path: Filesystem path involved (if any)
        """
        super().__init__(message)
        self.message = message
        self.file = file
        self.path = path


class ConfigurationError(BundlerError):
    """Raised for invalid project configuration (unknown references, cycles)."""

    kind = ErrorKind.CONFIGURATION

    def __init__(
        self,
        message: str,
        file: Optional[str] = None,
        path: Optional[Path] = None,
        dependency: Optional[str] = None
    ):
        super().__init__(message, file=file, path=path)
        self.dependency = dependency


class MissingInputError(BundlerError):
    """Raised when a file the build reads does not exist."""

    kind = ErrorKind.MISSING_INPUT


class BuildIOError(BundlerError):
    """Raised when creating directories or writing outputs fails."""

    kind = ErrorKind.IO


class MinificationError(BundlerError):
    """Raised when the minifier rejects its input."""

    kind = ErrorKind.MINIFICATION
