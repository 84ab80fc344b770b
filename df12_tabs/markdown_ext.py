"""Markdown extension expanding ``TabBlock`` shortcodes into tab blocks.

Authors wrap the tabs in shortcode markers on their own lines::

    <?# TabBlock ?>
    - Python

        ```python
        print("hi")
        ```

    - Shell

        ```sh
        echo hi
        ```
    <?#/ TabBlock ?>

The body is rendered to XHTML first. Each child element of the rendered root
becomes a tab (for a list, each ``li``), with its first child node as the
label. When the body renders to several top-level elements they are wrapped
in a ``div`` so each of them becomes a tab. Any arguments written after the
shortcode name are ignored. Markers inside fenced code blocks are left alone so
pages can document the shortcode itself.
"""

from __future__ import annotations

import logging
import re
import typing as typ

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from ._constants import DEFAULT_NAMESPACE, SHORTCODE_NAME
from .renderer import FENCE_PATTERN, HtmlContentRenderer
from .shortcode import MalformedInputError, parse_content, render_tab_block
from .tabs import child_nodes

if typ.TYPE_CHECKING:
    from markdown import Markdown

    from .ids import TokenSource
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any

logger = logging.getLogger(__name__)


def _open_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"^\s*<\?#\s*{re.escape(name)}(?:\s[^?]*)?\s*\?>\s*$")


def _close_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"^\s*<\?#/\s*{re.escape(name)}\s*\?>\s*$")


def _next_fence(line: str, fence: str | None) -> str | None:
    """Return the fence marker still open after ``line``, or ``None``."""
    match = FENCE_PATTERN.match(line)
    if fence is None:
        return match.group(1) if match else None
    if (
        match
        and match.group(1)[0] == fence[0]
        and len(match.group(1)) >= len(fence)
        and not match.group(2).strip()
    ):
        return None
    return fence


class TabBlockExtension(Extension):
    """Register the tab block preprocessor on a ``markdown.Markdown`` instance."""

    def __init__(
        self,
        *,
        token_source: TokenSource | None = None,
        namespace: str = DEFAULT_NAMESPACE,
        method: str = "xml",
        pygments_style: str = "monokai",
        shortcode: str = SHORTCODE_NAME,
    ) -> None:
        super().__init__()
        self.token_source = token_source
        self.namespace = namespace
        self.method = method
        self.pygments_style = pygments_style
        self.shortcode = shortcode

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the shortcode preprocessor ahead of fenced code and raw HTML."""
        processor = TabBlockPreprocessor(md, self)
        md.preprocessors.register(processor, "df12_tab_block", 28)


class TabBlockPreprocessor(Preprocessor):
    """Replace shortcode regions with stashed tab block markup."""

    def __init__(self, md: Markdown, extension: TabBlockExtension) -> None:
        super().__init__(md)
        self.extension = extension
        self._open = _open_pattern(extension.shortcode)
        self._close = _close_pattern(extension.shortcode)
        self._renderer = HtmlContentRenderer(extension.pygments_style)

    def run(self, lines: list[str]) -> list[str]:
        """Return ``lines`` with every shortcode region replaced by a placeholder."""
        output: list[str] = []
        body: list[str] | None = None
        start = 0
        fence: str | None = None
        for number, line in enumerate(lines, start=1):
            in_fence = fence is not None
            fence = _next_fence(line, fence)
            if in_fence or fence is not None:
                (output if body is None else body).append(line)
                continue
            if body is None:
                if self._open.match(line):
                    body = []
                    start = number
                else:
                    output.append(line)
                continue
            if self._close.match(line):
                placeholder = self.md.htmlStash.store(self._render("\n".join(body)))
                output.extend(["", placeholder, ""])
                body = None
            elif self._open.match(line):
                msg = (
                    f"{self.extension.shortcode} shortcode opened on line {number} "
                    f"inside the block opened on line {start}; nested tab blocks "
                    "are not supported."
                )
                raise MalformedInputError(msg, shortcode=self.extension.shortcode)
            else:
                body.append(line)
        if body is not None:
            msg = f"{self.extension.shortcode} shortcode opened on line {start} is never closed."
            raise MalformedInputError(msg, shortcode=self.extension.shortcode)
        return output

    def _render(self, markdown_text: str) -> str:
        """Render one shortcode body into tab block markup."""
        content = self._renderer.markdown(markdown_text)
        wrapper = parse_content(f"<div>{content}</div>", shortcode=self.extension.shortcode)
        nodes = child_nodes(wrapper)
        if len(nodes) == 1 and not isinstance(nodes[0], str):
            content = content.strip()
        else:
            content = f"<div>{content}</div>"
        logger.debug("expanding %s shortcode", self.extension.shortcode)
        return render_tab_block(
            content,
            token_source=self.extension.token_source,
            namespace=self.extension.namespace,
            method=self.extension.method,
        )


__all__ = ["TabBlockExtension", "TabBlockPreprocessor"]
