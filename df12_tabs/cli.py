"""Cyclopts CLI entrypoint for rendering df12 tab blocks.

The ``tabs`` console script turns tab block shortcode content into Bootstrap
markup, either directly from XHTML (``tabs transform``) or by rendering a
markdown document containing ``TabBlock`` shortcodes into a preview page
(``tabs render``).

Examples
--------
Transform XHTML read from a file:

>>> from df12_tabs.cli import app
>>> app(["transform", "--source", "tabs.xhtml"])  # doctest: +SKIP

Render a markdown document into ``public/tabs.html``:

>>> app(["render", "tabs.md", "--output", "public/tabs.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import TabsConfig, load_tabs_config
from .ids import ShortIdTokenSource
from .preview import PreviewPageBuilder
from .shortcode import render_tab_block

DEFAULT_CONFIG = Path("config/tabs.yaml")

app = App(name="tabs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(path: Path) -> TabsConfig:
    """Load ``path`` when it exists, otherwise fall back to defaults."""
    if path.exists():
        return load_tabs_config(path)
    if path != DEFAULT_CONFIG:
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)
    return TabsConfig()


@app.command(help="Transform tab block XHTML into Bootstrap tab markup.")
def transform(
    *,
    source: typ.Annotated[
        Path | None,
        Parameter(help="XHTML file to read (defaults to stdin)", env_var="INPUT_SOURCE"),
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to tabs config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    method: typ.Annotated[
        str | None,
        Parameter(help="Serialization method: xml or html", env_var="INPUT_METHOD"),
    ] = None,
) -> None:
    """Print the tab block generated from XHTML shortcode content.

    Parameters
    ----------
    source : Path or None, optional
        File holding the XHTML content; when ``None`` the content is read from
        standard input.
    config : Path, optional
        Path to the ``tabs.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``). A missing default config falls back to defaults.
    method : str or None, optional
        Overrides the configured serialization method.

    Raises
    ------
    MalformedInputError
        If the content is not a well-formed XHTML element.
    """
    tabs_config = _load_config(config)
    content = source.read_text(encoding="utf-8") if source else sys.stdin.read()
    html = render_tab_block(
        content,
        token_source=ShortIdTokenSource(tabs_config.token_length),
        namespace=tabs_config.namespace,
        method=method or tabs_config.output_method,
    )
    print(html)


@app.command(help="Render markdown with TabBlock shortcodes into a preview page.")
def render(
    source: typ.Annotated[Path, Parameter(help="Markdown file to render")],
    *,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the HTML page", env_var="INPUT_OUTPUT")
    ] = Path("public/tabs.html"),
    config: typ.Annotated[
        Path, Parameter(help="Path to tabs config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Render ``source`` into a standalone page and log the written path.

    Parameters
    ----------
    source : Path
        Markdown document that may contain ``TabBlock`` shortcodes.
    output : Path, optional
        Destination of the rendered page; defaults to ``public/tabs.html``.
    config : Path, optional
        Path to the ``tabs.yaml`` configuration file.
    """
    tabs_config = _load_config(config)
    written = PreviewPageBuilder(tabs_config).run(source, output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `tabs` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
