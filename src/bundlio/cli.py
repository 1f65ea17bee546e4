"""
Command-line interface for Bundlio.

This module provides the `bundlio` CLI tool for building script and
stylesheet packages from a project file.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from bundlio import __version__
from bundlio.build import (
    BuildOptions,
    BuildOrchestrator,
    ScriptSettings,
    StyleSheetSettings,
)
from bundlio.cli_utils import ErrorFormatter, PathValidator, setup_logging
from bundlio.config import load_project
from bundlio.errors import BundlerError


@dataclass
class BuildArgs:
    """Arguments for a build."""

    project_file: Path
    destination: Path
    encoding: str = "utf-8"
    keep_comments: bool = False
    copy_resources: bool = True
    verbose: bool = False


def build_command(args: BuildArgs) -> None:
    """Build all packages of a project.

    Examples:
        bundlio -p site.jsb -d out                 # Build into ./out
        bundlio -p site.jsb -d out --verbose       # Verbose output
        bundlio -p site.jsb -d out --keep-comments # Keep /*! */ comments
    """
    print(f"Bundlio v{__version__}")
    print()

    try:
        project = load_project(args.project_file)

        if args.verbose:
            print(f"Project: {project.name} ({args.project_file})")
            print(f"Destination: {args.destination}")
            print(f"Packages: {', '.join(project.package_files()) or '(none)'}")
            print()
        else:
            print(f"Building project: {project.name}...")

        orchestrator = BuildOrchestrator(verbose=args.verbose)
        result = orchestrator.build(
            project,
            BuildOptions(
                destination_path=args.destination,
                encoding=args.encoding,
                script_settings=ScriptSettings(keep_bang_comments=args.keep_comments),
                stylesheet_settings=StyleSheetSettings(keep_bang_comments=args.keep_comments),
                copy_resources=args.copy_resources,
            ),
        )

        if result.success:
            ErrorFormatter.print_success("Build successful!")
            print()
            print(f"Packages: {len(result.packages)}")
            for built in result.packages:
                print(f"  {built.paths.minified}")
            if result.copied_resources:
                print(f"Resources: {len(result.copied_resources)} file(s) copied")
            print()
            print(f"Build time: {result.build_time:.2f}s")
            sys.exit(0)
        else:
            result.raise_for_error()

    except BundlerError as e:
        ErrorFormatter.handle_build_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def main(argv: Optional[List[str]] = None) -> None:
    """Bundlio - static asset bundler."""
    parser = argparse.ArgumentParser(
        prog="bundlio",
        description="Bundlio - build script and stylesheet packages from a project file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bundlio {__version__}",
    )
    parser.add_argument(
        "-p",
        "--project",
        type=Path,
        default=None,
        help="The path to the project file",
    )
    parser.add_argument(
        "-d",
        "--destination",
        type=Path,
        default=None,
        help="The destination path",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of sources and outputs (default: utf-8)",
    )
    parser.add_argument(
        "--keep-comments",
        action="store_true",
        help="Keep /*! ... */ comments in minified output",
    )
    parser.add_argument(
        "--no-resources",
        action="store_true",
        help="Skip copying project resources",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose build output",
    )

    parsed_args = parser.parse_args(argv)

    # Both paths are required; show help otherwise
    if parsed_args.project is None or parsed_args.destination is None:
        parser.print_help()
        sys.exit(0)

    PathValidator.validate_project_file(parsed_args.project)
    setup_logging(parsed_args.verbose)

    build_args = BuildArgs(
        project_file=parsed_args.project,
        destination=parsed_args.destination,
        encoding=parsed_args.encoding,
        keep_comments=parsed_args.keep_comments,
        copy_resources=not parsed_args.no_resources,
        verbose=parsed_args.verbose,
    )
    build_command(build_args)


if __name__ == "__main__":
    main()
