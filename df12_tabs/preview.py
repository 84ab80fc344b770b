"""Render markdown with tab block shortcodes into a standalone preview page.

The preview pulls Bootstrap from a CDN so the generated tabs can be clicked
through in a browser without the host site around them.

>>> from pathlib import Path
>>> from df12_tabs.config import TabsConfig
>>> from df12_tabs.preview import PreviewPageBuilder
>>> builder = PreviewPageBuilder(TabsConfig())  # doctest: +SKIP
>>> builder.run(Path("tabs.md"), Path("public/tabs.html"))  # doctest: +SKIP
PosixPath('public/tabs.html')
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .ids import ShortIdTokenSource
from .markdown_ext import TabBlockExtension
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import TabsConfig
    from .ids import TokenSource


class PreviewPageBuilder:
    """Render a markdown document into a themed HTML page."""

    def __init__(
        self,
        config: TabsConfig,
        *,
        templates_dir: Path | None = None,
        token_source: TokenSource | None = None,
    ) -> None:
        """Initialize the preview builder.

        Parameters
        ----------
        config : TabsConfig
            Options for id generation, serialization, and page assets.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``df12_tabs/templates`` directory when ``None``.
        token_source : TokenSource, optional
            Overrides the token source derived from ``config.token_length``.

        Notes
        -----
        Tab blocks are always serialized with the ``html`` method here because
        the preview is an HTML5 document; ``config.output_method`` only applies
        to ``tabs transform``.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("preview.jinja")
        extension = TabBlockExtension(
            token_source=token_source or ShortIdTokenSource(config.token_length),
            namespace=config.namespace,
            method="html",
            pygments_style=config.pygments_style,
        )
        self.renderer = HtmlContentRenderer(config.pygments_style, [extension])

    def render(self, markdown_text: str) -> str:
        """Return the full preview page for ``markdown_text``."""
        return self.template.render(
            title=self.config.page_title,
            bootstrap_css_url=self.config.bootstrap_css_url,
            bootstrap_js_url=self.config.bootstrap_js_url,
            jquery_url=self.config.jquery_url,
            stylesheet=self.renderer.stylesheet,
            body=self.renderer.markdown(markdown_text),
        )

    def run(self, source: Path, output_path: Path) -> Path:
        """Render ``source`` and write the page to ``output_path``."""
        html = self.render(source.read_text(encoding="utf-8"))
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["PreviewPageBuilder"]
