"""
Build system components for Bundlio.

This module provides the build pipeline including:
- Build order resolution over package dependencies
- Package assembly (license header, dependency artifacts, includes)
- Script and stylesheet minification
- Build orchestration
"""

from .dependency_resolver import DependencyResolver, resolve_build_order
from .minifier import (
    ContentKind,
    Minifier,
    ScriptSettings,
    StyleSheetSettings,
    content_kind_for,
)
from .orchestrator import (
    BuildOptions,
    BuildOrchestrator,
    BuildResult,
    apply_project_defaults,
)
from .package_assembler import (
    PackageAssembler,
    PackageBuildResult,
    PackagePaths,
    format_license,
    package_output_paths,
)

__all__ = [
    "DependencyResolver",
    "resolve_build_order",
    "ContentKind",
    "Minifier",
    "ScriptSettings",
    "StyleSheetSettings",
    "content_kind_for",
    "BuildOptions",
    "BuildOrchestrator",
    "BuildResult",
    "apply_project_defaults",
    "PackageAssembler",
    "PackageBuildResult",
    "PackagePaths",
    "format_license",
    "package_output_paths",
]
