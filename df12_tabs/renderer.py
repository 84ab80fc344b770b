"""Render markdown with syntax-highlighted code for tab block content."""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCE_PATTERN = re.compile(r"^\s*(`{3,}|~{3,})(.*)$")


class HtmlContentRenderer:
    """Render markdown with consistent code highlighting and extensions."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        extensions: typ.Sequence[Extension] = (),
    ) -> None:
        """Initialize a renderer with a pygments style and extra extensions.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        extensions : Sequence[Extension], optional
            Additional Markdown extensions, such as
            :class:`~df12_tabs.markdown_ext.TabBlockExtension`.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._extensions = list(extensions)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions.

        Fenced code is handled by ``pymdownx.superfences`` so fences nested in
        list items, which is how tab bodies are usually written, are
        highlighted as well.
        """
        if not text.strip():
            return ""
        extensions: list[Extension | str] = [
            "pymdownx.superfences",
            "pymdownx.highlight",
            "tables",
            "sane_lists",
            "md_in_html",
            *self._extensions,
        ]
        md = Markdown(
            extensions=extensions,
            output_format="xhtml",
            extension_configs={
                "pymdownx.highlight": {
                    "use_pygments": True,
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(text)


__all__ = ["FENCE_PATTERN", "HtmlContentRenderer"]
