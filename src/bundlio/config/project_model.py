"""
In-memory project model.

A project names a deploy directory, an optional license header and an ordered
set of packages. Each package is keyed by its output file identifier (its path
relative to the deploy directory) and lists the source files it concatenates
and the packages it depends on.

The model is immutable: it is constructed once (usually by ProjectLoader) and
only read by the build.
"""

import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Include:
    """One source file appended verbatim to a package."""

    path: str
    filename: str

    @property
    def relative_path(self) -> str:
        """Path of the file relative to the source root."""
        return posixpath.join(self.path, self.filename) if self.path else self.filename


@dataclass(frozen=True)
class Package:
    """An output bundle (script or stylesheet)."""

    name: str
    file: str
    include_dependencies: bool = False
    includes: Tuple[Include, ...] = ()
    dependencies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Resource:
    """Rule for copying files matching a filename pattern into the deploy tree."""

    source: str
    destination: str
    filter: str


@dataclass(frozen=True)
class Project:
    """A parsed project description."""

    name: str
    deploy_dir: str
    packages: Tuple[Package, ...] = ()
    license: Optional[str] = None
    resources: Tuple[Resource, ...] = ()
    path: Optional[Path] = None  # project file location, if loaded from disk

    def package_files(self) -> List[str]:
        """Get file identifiers of all packages in declaration order."""
        return [package.file for package in self.packages]
