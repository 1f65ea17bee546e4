"""
Package assembly.

For one package this module builds the debug content:
1. License header as a comment block (if the project has one)
2. Debug artifacts of the package's dependencies (if it includes them)
3. The package's own include files, in declared order

It then minifies the result and writes both artifacts. The minified artifact
lives at <deploy>/<file>; the debug artifact sits next to it with "-debug"
inserted before the extension (app.js -> app-debug.js).

Dependency content is read back from the dependency's debug artifact on disk,
so packages must be built in resolved order.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..config.project_model import Package
from ..errors import BuildIOError, MissingInputError
from .minifier import (
    ContentKind,
    Minifier,
    ScriptSettings,
    StyleSheetSettings,
    content_kind_for,
)

logger = logging.getLogger(__name__)

DEBUG_SUFFIX = "-debug"


@dataclass(frozen=True)
class PackagePaths:
    """Output locations of one package."""

    minified: Path
    debug: Path


@dataclass
class PackageBuildResult:
    """Result of building one package."""

    package: Package
    paths: PackagePaths
    kind: ContentKind
    debug_content: str
    minified_content: str


def package_output_paths(deploy_path: Path, file: str) -> PackagePaths:
    """
    Derive the output paths of a package.

    Args:
        deploy_path: Deploy directory
        file: Package file identifier, relative to the deploy directory

    Returns:
        PackagePaths with the minified and debug artifact locations
    """
    minified = Path(deploy_path) / file
    debug = minified.with_name(f"{minified.stem}{DEBUG_SUFFIX}{minified.suffix}")
    return PackagePaths(minified=minified, debug=debug)


def format_license(license: str) -> str:
    """
    Wrap license text in a comment block.

    Args:
        license: License text, possibly multi-line

    Returns:
        Comment block, one " *" prefixed line per license line
    """
    lines = ["/*"]
    for line in license.split("\n"):
        lines.append(" *" + line.rstrip("\r"))
    lines.append("*/")
    return "\n".join(lines) + "\n"


class PackageAssembler:
    """
    Assembles, minifies and writes packages.

    Example usage:
        assembler = PackageAssembler(
            source_path=Path("web"),
            deploy_path=Path("out/deploy"),
            license="Copyright (c) Demo"
        )
        for package in resolve_build_order(project.packages):
            assembler.build(package)
    """

    def __init__(
        self,
        source_path: Path,
        deploy_path: Path,
        license: Optional[str] = None,
        minifier: Optional[Minifier] = None,
        script_settings: Optional[ScriptSettings] = None,
        stylesheet_settings: Optional[StyleSheetSettings] = None,
        encoding: str = "utf-8",
        verbose: bool = False
    ):
        """
        Initialize package assembler.

        Args:
            source_path: Root that include paths are resolved against
            deploy_path: Deploy directory for package outputs
            license: Project license text (None or empty for no header)
            minifier: Minifier to use (defaults to Minifier())
            script_settings: Settings for script minification
            stylesheet_settings: Settings for stylesheet minification
            encoding: Text encoding for reading sources and writing outputs
            verbose: Enable verbose output
        """
        self.source_path = Path(source_path)
        self.deploy_path = Path(deploy_path)
        self.license = license
        self.minifier = minifier if minifier is not None else Minifier()
        self.script_settings = script_settings or ScriptSettings()
        self.stylesheet_settings = stylesheet_settings or StyleSheetSettings()
        self.encoding = encoding
        self.verbose = verbose

    def assemble(self, package: Package) -> str:
        """
        Build the debug content of a package.

        Args:
            package: Package to assemble

        Returns:
            Concatenated debug content

        Raises:
            MissingInputError: If a dependency artifact or include file is missing
            BuildIOError: If a file cannot be read or decoded
        """
        segments: List[str] = []

        if self.license:
            segments.append(format_license(self.license))

        if package.include_dependencies and package.dependencies:
            if self.verbose:
                print(f"      {len(package.dependencies)} dependency include(s)")
            for dependency in package.dependencies:
                # The debug artifact, not the minified one
                dependency_path = package_output_paths(self.deploy_path, dependency).debug
                if not dependency_path.is_file():
                    raise MissingInputError(
                        f"Unable to read dependency file '{dependency_path}' for '{package.file}'.",
                        file=package.file,
                        path=dependency_path
                    )
                logger.debug("Including dependency %s from %s", dependency, dependency_path)
                segments.append(self._read(dependency_path) + "\n")

        if self.verbose:
            print(f"      {len(package.includes)} file include(s)")
        for include in package.includes:
            include_path = self.source_path / include.relative_path
            if not include_path.is_file():
                raise MissingInputError(
                    f"Unable to read include file '{include_path}' for '{package.file}'.",
                    file=package.file,
                    path=include_path
                )
            logger.debug("Including %s", include_path)
            segments.append(self._read(include_path) + "\n")

        return "".join(segments)

    def build(self, package: Package) -> PackageBuildResult:
        """
        Assemble, minify and write one package.

        Both artifacts are written only after assembly, minification and
        encoding succeeded.

        Args:
            package: Package to build

        Returns:
            PackageBuildResult with output paths and contents

        Raises:
            MissingInputError: If an input file is missing
            MinificationError: If minification fails
            BuildIOError: If inputs cannot be decoded or outputs cannot be
                encoded or written
        """
        paths = package_output_paths(self.deploy_path, package.file)
        kind = content_kind_for(package.file)

        debug_content = self.assemble(package)

        if self.verbose:
            print(f"      Minifying as {kind.value}")
        settings = (
            self.script_settings if kind is ContentKind.SCRIPT
            else self.stylesheet_settings
        )
        minified_content = self.minifier.minify(debug_content, kind, settings)

        debug_bytes = self._encode(paths.debug, debug_content)
        minified_bytes = self._encode(paths.minified, minified_content)

        self._write(paths.debug, debug_bytes)
        self._write(paths.minified, minified_bytes)
        logger.info("Built package '%s' -> %s", package.name, paths.minified)

        if self.verbose:
            print(f"      Debug:    {paths.debug}")
            print(f"      Minified: {paths.minified}")

        return PackageBuildResult(
            package=package,
            paths=paths,
            kind=kind,
            debug_content=debug_content,
            minified_content=minified_content,
        )

    def _read(self, path: Path) -> str:
        # Drop a leading BOM when reading UTF-8; newline="" keeps line endings verbatim
        encoding = self.encoding
        if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
            encoding = "utf-8-sig"
        try:
            with open(path, "r", encoding=encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeError, LookupError) as e:
            raise BuildIOError(f"Failed to read '{path}': {e}", path=path) from e

    def _encode(self, path: Path, content: str) -> bytes:
        try:
            return content.encode(self.encoding)
        except (UnicodeError, LookupError) as e:
            raise BuildIOError(
                f"Failed to encode '{path}' as {self.encoding}: {e}", path=path
            ) from e

    def _write(self, path: Path, content: bytes) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise BuildIOError(f"Failed to write '{path}': {e}", path=path) from e
