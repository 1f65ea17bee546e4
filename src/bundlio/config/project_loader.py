"""
Project file parser.

This module reads JSON project files and turns them into the immutable
project model used by the build.

Example project file:
    {
        "projectName": "Demo",
        "licenseText": "Copyright (c) Demo",
        "deployDir": "deploy",
        "pkgs": [
            {
                "name": "Core",
                "file": "core.js",
                "includeDeps": false,
                "fileIncludes": [{"text": "base.js", "path": "src/"}],
                "pkgDeps": []
            }
        ],
        "resources": [{"src": "images", "dest": "img", "filters": ".*\\\\.png"}]
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from ..errors import ConfigurationError, MissingInputError
from .project_model import Include, Package, Project, Resource


class ProjectLoader:
    """
    Loader for JSON project files.

    Usage:
        project = ProjectLoader(Path("demo.jsb")).load()
        for package in project.packages:
            print(package.file)
    """

    def __init__(self, project_path: Path):
        """
        Initialize the loader.

        Args:
            project_path: Path to the project file
        """
        self.project_path = Path(project_path)

    def load(self) -> Project:
        """
        Read and validate the project file.

        Returns:
            Parsed Project

        Raises:
            MissingInputError: If the project file doesn't exist
            ConfigurationError: If the file is not valid JSON or has the wrong shape
        """
        if not self.project_path.is_file():
            raise MissingInputError(
                f"Project file not found: {self.project_path}",
                path=self.project_path
            )

        try:
            # utf-8-sig tolerates a leading byte order mark
            data = json.loads(self.project_path.read_text(encoding="utf-8-sig"))
        except json.JSONDecodeError as e:
            raise self._error(f"invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise self._error(f"not valid UTF-8: {e}") from e

        if not isinstance(data, dict):
            raise self._error("top-level value must be an object")

        deploy_dir = data.get("deployDir")
        if not isinstance(deploy_dir, str) or not deploy_dir:
            raise self._error("'deployDir' is required")

        return Project(
            name=self._optional_str(data, "projectName", "") or self.project_path.stem,
            deploy_dir=deploy_dir,
            packages=tuple(
                self._parse_package(entry, index)
                for index, entry in enumerate(self._list(data, "pkgs"))
            ),
            license=self._optional_str(data, "licenseText", None),
            resources=tuple(
                self._parse_resource(entry, index)
                for index, entry in enumerate(self._list(data, "resources"))
            ),
            path=self.project_path.resolve(),
        )

    def _parse_package(self, entry: Any, index: int) -> Package:
        where = f"pkgs[{index}]"
        if not isinstance(entry, dict):
            raise self._error(f"{where} must be an object")

        file = entry.get("file")
        if not isinstance(file, str) or not file:
            raise self._error(f"{where} is missing 'file'")

        includes = []
        for i, include in enumerate(self._list(entry, "fileIncludes", where)):
            if not isinstance(include, dict):
                raise self._error(f"{where}.fileIncludes[{i}] must be an object")
            filename = include.get("text")
            if not isinstance(filename, str) or not filename:
                raise self._error(f"{where}.fileIncludes[{i}] is missing 'text'")
            includes.append(Include(
                path=self._optional_str(include, "path", "", where) or "",
                filename=filename,
            ))

        dependencies = self._list(entry, "pkgDeps", where)
        if not all(isinstance(dep, str) for dep in dependencies):
            raise self._error(f"{where}.pkgDeps must contain only strings")

        return Package(
            name=self._optional_str(entry, "name", None, where) or file,
            file=file,
            include_dependencies=bool(entry.get("includeDeps", False)),
            includes=tuple(includes),
            dependencies=tuple(dependencies),
        )

    def _parse_resource(self, entry: Any, index: int) -> Resource:
        where = f"resources[{index}]"
        if not isinstance(entry, dict):
            raise self._error(f"{where} must be an object")

        fields: Dict[str, str] = {}
        for key in ("src", "dest", "filters"):
            value = entry.get(key, "")
            if not isinstance(value, str):
                raise self._error(f"{where}.{key} must be a string")
            fields[key] = value

        return Resource(
            source=fields["src"],
            destination=fields["dest"],
            filter=fields["filters"] or ".*",
        )

    def _list(self, data: Dict[str, Any], key: str, where: str = "") -> List[Any]:
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            prefix = f"{where}." if where else ""
            raise self._error(f"{prefix}{key} must be a list")
        return value

    def _optional_str(self, data: Dict[str, Any], key: str, default: Any, where: str = "") -> Any:
        value = data.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            prefix = f"{where}." if where else ""
            raise self._error(f"{prefix}{key} must be a string")
        return value

    def _error(self, detail: str) -> ConfigurationError:
        return ConfigurationError(
            f"Invalid project file {self.project_path}: {detail}",
            path=self.project_path
        )


def load_project(project_path: Path) -> Project:
    """Load a project file. Shorthand for ProjectLoader(path).load()."""
    return ProjectLoader(project_path).load()
