"""Tests for content kind selection and minification."""

from unittest.mock import patch

import pytest

from bundlio.build.minifier import (
    ContentKind,
    Minifier,
    ScriptSettings,
    StyleSheetSettings,
    content_kind_for,
)
from bundlio.errors import ErrorKind, MinificationError


class TestContentKindFor:
    """Test extension-based content kind selection."""

    @pytest.mark.parametrize("file", ["app.js", "lib/app.js", "APP.JS", "a.min.js"])
    def test_script_extensions(self, file):
        """Test script file identifiers."""
        assert content_kind_for(file) is ContentKind.SCRIPT

    @pytest.mark.parametrize("file", ["site.css", "theme/site.css", "README", "app.jsx", "data.json"])
    def test_everything_else_is_stylesheet(self, file):
        """Test non-script file identifiers fall back to stylesheet."""
        assert content_kind_for(file) is ContentKind.STYLESHEET

    def test_directory_with_dot_does_not_count(self):
        """Test only the file name's extension is considered."""
        assert content_kind_for("scripts.js/site") is ContentKind.STYLESHEET


class TestMinifier:
    """Test the rjsmin/rcssmin backed minifier."""

    def test_minify_script(self):
        """Test script minification removes whitespace."""
        result = Minifier().minify("var x = 1;\n", ContentKind.SCRIPT, ScriptSettings())
        assert result == "var x=1;"

    def test_minify_script_strips_comments(self):
        """Test regular comments are dropped."""
        text = "/*\n *MIT\n*/\nvar x = 1;\n"
        result = Minifier().minify(text, ContentKind.SCRIPT, ScriptSettings())
        assert "MIT" not in result
        assert "var x=1;" in result

    def test_minify_script_keeps_bang_comments(self):
        """Test /*! */ comments survive when requested."""
        text = "/*! keep me */\nvar x = 1;\n"
        result = Minifier().minify(
            text, ContentKind.SCRIPT, ScriptSettings(keep_bang_comments=True)
        )
        assert "/*! keep me */" in result

    def test_minify_stylesheet(self):
        """Test stylesheet minification."""
        text = "body {\n    color: red;\n}\n"
        result = Minifier().minify(text, ContentKind.STYLESHEET, StyleSheetSettings())
        assert "color:red" in result
        assert " " not in result
        assert "\n" not in result

    def test_backend_selected_by_kind(self):
        """Test each kind dispatches to its backend with its settings."""
        with patch("bundlio.build.minifier.rjsmin.jsmin", return_value="js") as jsmin, \
                patch("bundlio.build.minifier.rcssmin.cssmin", return_value="css") as cssmin:
            minifier = Minifier()
            assert minifier.minify("a", ContentKind.SCRIPT, ScriptSettings(True)) == "js"
            assert minifier.minify("b", ContentKind.STYLESHEET, StyleSheetSettings()) == "css"

        jsmin.assert_called_once_with("a", keep_bang_comments=True)
        cssmin.assert_called_once_with("b", keep_bang_comments=False)

    def test_backend_failure_raises_minification_error(self):
        """Test backend errors are reported as minification errors."""
        with patch("bundlio.build.minifier.rcssmin.cssmin", side_effect=ValueError("bad input")):
            with pytest.raises(MinificationError) as exc_info:
                Minifier().minify("}", ContentKind.STYLESHEET, StyleSheetSettings())

        assert exc_info.value.kind is ErrorKind.MINIFICATION
        assert "bad input" in str(exc_info.value)
