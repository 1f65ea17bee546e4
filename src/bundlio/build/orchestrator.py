"""
Build orchestration for Bundlio projects.

This module coordinates a complete build of a project:
- Path defaults (source, destination and deploy directories)
- Build order resolution over package dependencies
- Package assembly and minification, one package at a time
- Resource copying into the deploy directory
"""

import logging
import os
import time
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

from ..config.project_model import Project
from ..deploy.resource_copier import ResourceCopier
from ..errors import BuildIOError, BundlerError
from .dependency_resolver import resolve_build_order
from .minifier import Minifier, ScriptSettings, StyleSheetSettings
from .package_assembler import PackageAssembler, PackageBuildResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildOptions:
    """Options for one build invocation. Unset paths are derived from the project."""

    source_path: Optional[Path] = None
    deploy_path: Optional[Path] = None
    destination_path: Optional[Path] = None
    encoding: str = "utf-8"
    script_settings: ScriptSettings = field(default_factory=ScriptSettings)
    stylesheet_settings: StyleSheetSettings = field(default_factory=StyleSheetSettings)
    copy_resources: bool = True


@dataclass
class BuildResult:
    """Result of a complete build operation."""

    success: bool
    packages: List[PackageBuildResult]
    copied_resources: List[Path]
    build_time: float
    message: str
    options: Optional[BuildOptions] = None
    error: Optional[BundlerError] = None

    def raise_for_error(self) -> None:
        """Re-raise the error that stopped the build, if any."""
        if self.error is not None:
            raise self.error


def apply_project_defaults(project: Project, options: BuildOptions) -> BuildOptions:
    """
    Fill in unset paths of the build options.

    - destination defaults to the current working directory
    - source defaults to the directory containing the project file
      (current working directory for projects built in memory)
    - deploy defaults to <destination>/<project deploy dir>

    Args:
        project: Project being built
        options: Options as given by the caller

    Returns:
        New BuildOptions with all paths set
    """
    destination_path = Path(options.destination_path) if options.destination_path else Path.cwd()

    if options.source_path:
        source_path = Path(options.source_path)
    elif project.path is not None:
        source_path = Path(project.path).parent
    else:
        source_path = Path.cwd()

    if options.deploy_path:
        deploy_path = Path(options.deploy_path)
    else:
        deploy_path = destination_path / project.deploy_dir

    return replace(
        options,
        source_path=source_path,
        deploy_path=deploy_path,
        destination_path=destination_path,
    )


class BuildOrchestrator:
    """
    Orchestrates the complete build of a project.

    Phases:
    1. Apply path defaults
    2. Create destination and deploy directories
    3. Resolve the package build order
    4. Build each package (assemble, minify, write) in that order
    5. Copy project resources

    The first failure stops the build. Outputs of packages built before the
    failure stay on disk.

    Example usage:
        orchestrator = BuildOrchestrator(verbose=True)
        result = orchestrator.build(project, BuildOptions(destination_path=Path("out")))
        if result.success:
            for built in result.packages:
                print(built.paths.minified)
    """

    def __init__(
        self,
        minifier: Optional[Minifier] = None,
        resource_copier: Optional[ResourceCopier] = None,
        verbose: bool = False
    ):
        """
        Initialize build orchestrator.

        Args:
            minifier: Minifier used for every package (defaults to Minifier())
            resource_copier: Resource copier (defaults to ResourceCopier())
            verbose: Enable verbose output
        """
        self.minifier = minifier if minifier is not None else Minifier()
        self.resource_copier = (
            resource_copier if resource_copier is not None
            else ResourceCopier(verbose=verbose)
        )
        self.verbose = verbose

    def build(
        self,
        project: Project,
        options: Optional[BuildOptions] = None
    ) -> BuildResult:
        """
        Execute a complete build.

        Args:
            project: Project to build
            options: Build options (defaults to BuildOptions())

        Returns:
            BuildResult. On failure, success is False and error holds the
            BundlerError that stopped the build.
        """
        start_time = time.time()
        built: List[PackageBuildResult] = []
        copied: List[Path] = []
        resolved_options = apply_project_defaults(project, options or BuildOptions())

        try:
            # Phase 1: Paths
            if self.verbose:
                print("[1/4] Preparing output directories...")
                print(f"      Source:      {resolved_options.source_path}")
                print(f"      Destination: {resolved_options.destination_path}")
                print(f"      Deploy:      {resolved_options.deploy_path}")

            self._ensure_directory(resolved_options.destination_path)
            self._ensure_directory(resolved_options.deploy_path)

            # Phase 2: Build order
            if self.verbose:
                print("[2/4] Resolving build order...")

            packages = resolve_build_order(project.packages)

            if self.verbose:
                print(f"      {len(packages)} package(s): {', '.join(p.file for p in packages)}")

            # Phase 3: Packages
            if self.verbose:
                print("[3/4] Building packages...")

            assembler = PackageAssembler(
                source_path=resolved_options.source_path,
                deploy_path=resolved_options.deploy_path,
                license=project.license,
                minifier=self.minifier,
                script_settings=resolved_options.script_settings,
                stylesheet_settings=resolved_options.stylesheet_settings,
                encoding=resolved_options.encoding,
                verbose=self.verbose,
            )

            for package in packages:
                if self.verbose:
                    print(f"      Building package '{package.name}' as '{package.file}'")
                built.append(assembler.build(package))

            # Phase 4: Resources
            if self.verbose:
                print("[4/4] Copying resources...")

            if resolved_options.copy_resources and project.resources:
                copied = self.resource_copier.copy(
                    project.resources,
                    resolved_options.source_path,
                    resolved_options.deploy_path,
                )
            elif self.verbose:
                print("      No resources to copy")

        except BundlerError as e:
            logger.error("Build of '%s' failed: %s", project.name, e)
            return BuildResult(
                success=False,
                packages=built,
                copied_resources=copied,
                build_time=time.time() - start_time,
                message=str(e),
                options=resolved_options,
                error=e,
            )

        build_time = time.time() - start_time
        logger.info(
            "Built %d package(s) for '%s' in %.2fs", len(built), project.name, build_time
        )
        return BuildResult(
            success=True,
            packages=built,
            copied_resources=copied,
            build_time=build_time,
            message=f"Built {len(built)} package(s)",
            options=resolved_options,
        )

    def _ensure_directory(self, path: Optional[Path]) -> None:
        if path is None:
            return
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise BuildIOError(f"Failed to create directory '{path}': {e}", path=path) from e
