"""
Unit tests for the JSON project file loader.
"""

import json

import pytest

from bundlio.config import Include, Package, Project, Resource, load_project
from bundlio.config.project_loader import ProjectLoader
from bundlio.errors import ConfigurationError, ErrorKind, MissingInputError


class TestProjectLoader:
    """Test suite for ProjectLoader."""

    @pytest.fixture
    def tmp_project_path(self, tmp_path):
        """Fixture to provide a temporary project file path."""
        return tmp_path / "demo.jsb"

    @pytest.fixture
    def full_project(self, tmp_project_path):
        """Create a project file using every supported key."""
        content = {
            "projectName": "Demo",
            "licenseText": "Copyright (c) Demo\nAll rights reserved.",
            "deployDir": "deploy",
            "isDebug": False,
            "pkgs": [
                {
                    "name": "Core",
                    "file": "core.js",
                    "isDebug": False,
                    "includeDeps": False,
                    "fileIncludes": [
                        {"text": "base.js", "path": "src/"},
                        {"text": "events.js", "path": "src/"},
                    ],
                },
                {
                    "name": "All",
                    "file": "all.js",
                    "includeDeps": True,
                    "fileIncludes": [{"text": "app.js", "path": "src/"}],
                    "pkgDeps": ["core.js"],
                },
            ],
            "resources": [
                {"src": "images", "dest": "img", "filters": ".*\\.png"},
            ],
        }
        tmp_project_path.write_text(json.dumps(content))
        return tmp_project_path

    def test_load_full_project(self, full_project):
        """Test parsing of a complete project file."""
        project = ProjectLoader(full_project).load()

        assert isinstance(project, Project)
        assert project.name == "Demo"
        assert project.deploy_dir == "deploy"
        assert project.license == "Copyright (c) Demo\nAll rights reserved."
        assert project.path == full_project.resolve()
        assert project.package_files() == ["core.js", "all.js"]

        core = project.packages[0]
        assert core == Package(
            name="Core",
            file="core.js",
            include_dependencies=False,
            includes=(Include("src/", "base.js"), Include("src/", "events.js")),
            dependencies=(),
        )

        everything = project.packages[1]
        assert everything.file == "all.js"
        assert everything.include_dependencies is True
        assert everything.dependencies == ("core.js",)

        assert project.resources == (Resource(source="images", destination="img", filter=".*\\.png"),)

    def test_load_project_function(self, full_project):
        """Test the load_project shorthand."""
        assert load_project(full_project) == ProjectLoader(full_project).load()

    def test_defaults_for_optional_keys(self, tmp_project_path):
        """Test minimal project file."""
        tmp_project_path.write_text(json.dumps({
            "deployDir": "out",
            "pkgs": [{"file": "a.css"}],
        }))

        project = load_project(tmp_project_path)

        assert project.name == "demo"
        assert project.license is None
        assert project.resources == ()
        package = project.packages[0]
        assert package.name == "a.css"
        assert package.includes == ()
        assert package.dependencies == ()
        assert package.include_dependencies is False

    def test_include_without_path(self, tmp_project_path):
        """Test an include with no directory."""
        tmp_project_path.write_text(json.dumps({
            "deployDir": "out",
            "pkgs": [{"file": "a.js", "fileIncludes": [{"text": "a.js"}]}],
        }))

        include = load_project(tmp_project_path).packages[0].includes[0]

        assert include == Include("", "a.js")
        assert include.relative_path == "a.js"

    def test_bom_is_tolerated(self, tmp_project_path):
        """Test a UTF-8 byte order mark at the start of the file."""
        tmp_project_path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"deployDir": "d"}).encode())
        assert load_project(tmp_project_path).deploy_dir == "d"

    def test_missing_file(self, tmp_path):
        """Test missing project file."""
        with pytest.raises(MissingInputError) as exc_info:
            load_project(tmp_path / "nope.jsb")
        assert exc_info.value.kind is ErrorKind.MISSING_INPUT

    def test_invalid_json(self, tmp_project_path):
        """Test malformed JSON."""
        tmp_project_path.write_text("{ not json")
        with pytest.raises(ConfigurationError, match="invalid JSON"):
            load_project(tmp_project_path)

    @pytest.mark.parametrize("content, message", [
        ([], "top-level value must be an object"),
        ({}, "'deployDir' is required"),
        ({"deployDir": "d", "pkgs": {}}, "pkgs must be a list"),
        ({"deployDir": "d", "pkgs": [{"name": "x"}]}, r"pkgs\[0\] is missing 'file'"),
        ({"deployDir": "d", "pkgs": ["x.js"]}, r"pkgs\[0\] must be an object"),
        ({"deployDir": "d", "pkgs": [{"file": "x.js", "pkgDeps": [1]}]}, "pkgDeps must contain only strings"),
        ({"deployDir": "d", "pkgs": [{"file": "x.js", "fileIncludes": [{"path": "a"}]}]}, "missing 'text'"),
        ({"deployDir": "d", "licenseText": 5}, "licenseText must be a string"),
        ({"deployDir": "d", "resources": [{"src": 1}]}, r"resources\[0\].src must be a string"),
    ])
    def test_wrong_shapes(self, tmp_project_path, content, message):
        """Test shape validation errors name the offending entry."""
        tmp_project_path.write_text(json.dumps(content))

        with pytest.raises(ConfigurationError, match=message) as exc_info:
            load_project(tmp_project_path)

        assert exc_info.value.path == tmp_project_path

    def test_dependencies_not_validated_at_load(self, tmp_project_path):
        """Test dangling references are left for the resolver."""
        tmp_project_path.write_text(json.dumps({
            "deployDir": "d",
            "pkgs": [{"file": "z.js", "pkgDeps": ["missing.js"]}],
        }))
        assert load_project(tmp_project_path).packages[0].dependencies == ("missing.js",)

    def test_model_is_immutable(self, full_project):
        """Test the loaded model cannot be modified."""
        project = load_project(full_project)
        with pytest.raises(AttributeError):
            project.packages[0].file = "other.js"
