"""
Minification of assembled package content.

The content kind of a package is chosen from the extension of its output
file: script files go through rjsmin, everything else is treated as a
stylesheet and goes through rcssmin.
"""

import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import Union

import rcssmin
import rjsmin

from ..errors import MinificationError

SCRIPT_EXTENSIONS = frozenset({".js"})


class ContentKind(Enum):
    """Kind of content a package holds."""

    SCRIPT = "script"
    STYLESHEET = "stylesheet"


@dataclass(frozen=True)
class ScriptSettings:
    """Settings passed to the script minifier."""

    keep_bang_comments: bool = False


@dataclass(frozen=True)
class StyleSheetSettings:
    """Settings passed to the stylesheet minifier."""

    keep_bang_comments: bool = False


MinifierSettings = Union[ScriptSettings, StyleSheetSettings]


def content_kind_for(file: str) -> ContentKind:
    """
    Select the content kind from a package file identifier.

    Args:
        file: Package file identifier (e.g., 'lib/app.js')

    Returns:
        ContentKind.SCRIPT for script extensions, ContentKind.STYLESHEET otherwise
    """
    extension = posixpath.splitext(file.replace("\\", "/"))[1].lower()
    if extension in SCRIPT_EXTENSIONS:
        return ContentKind.SCRIPT
    return ContentKind.STYLESHEET


class Minifier:
    """Minifies script and stylesheet text."""

    def minify(
        self,
        text: str,
        kind: ContentKind,
        settings: MinifierSettings
    ) -> str:
        """
        Minify text of the given content kind.

        Args:
            text: Assembled debug content
            kind: Content kind selecting the minifier
            settings: Settings for that kind

        Returns:
            Minified text

        Raises:
            MinificationError: If the backend rejects the input
        """
        try:
            if kind is ContentKind.SCRIPT:
                return rjsmin.jsmin(text, keep_bang_comments=settings.keep_bang_comments)
            return rcssmin.cssmin(text, keep_bang_comments=settings.keep_bang_comments)
        except (TypeError, ValueError, RuntimeError) as e:
            raise MinificationError(f"{kind.value} minification failed: {e}") from e
