"""Tests for the ``tabs`` CLI commands and the preview page builder."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from df12_tabs import cli
from df12_tabs.config import TabsConfig
from df12_tabs.preview import PreviewPageBuilder
from df12_tabs.shortcode import MalformedInputError

TWO_TABS = "<div><div>One<p>First body</p></div><div>Two<p>Second body</p></div></div>"


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "tabs.yaml"
    path.write_text(
        "tabs:\n  namespace: Guide\n  token_length: 8\n  page_title: Fixture tabs\n",
        encoding="utf-8",
    )
    return path


def test_transform_reads_source_file(
    tmp_path: Path, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "tabs.xhtml"
    source.write_text(TWO_TABS, encoding="utf-8")
    cli.transform(source=source, config=config_path)

    html = capsys.readouterr().out.strip()
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.tab-block")
    assert block["id"].startswith("Guide__")
    assert len(block["id"]) == len("Guide__") + 8
    assert [a.get_text() for a in block.select("a.nav-link")] == ["One", "Two"]


def test_transform_reads_stdin(
    config_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("<div><p>Only</p></div>"))
    cli.transform(config=config_path, method="html")
    html = capsys.readouterr().out.strip()
    assert html.endswith("-0-pane\"></div></div></div>")


def test_transform_surfaces_malformed_input(tmp_path: Path, config_path: Path) -> None:
    source = tmp_path / "broken.xhtml"
    source.write_text("<div><p>unclosed</div>", encoding="utf-8")
    with pytest.raises(MalformedInputError):
        cli.transform(source=source, config=config_path)


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        cli.transform(source=tmp_path / "unused.xhtml", config=tmp_path / "absent.yaml")


def test_default_config_is_optional(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "tabs.xhtml"
    source.write_text(TWO_TABS, encoding="utf-8")
    cli.transform(source=source)
    assert 'id="TabBlock__' in capsys.readouterr().out


def test_render_writes_preview_page(
    tmp_path: Path, config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "tabs.md"
    source.write_text(
        "<?# TabBlock ?>\n- One\n\n    First body\n\n- Two\n\n    Second body\n<?#/ TabBlock ?>\n",
        encoding="utf-8",
    )
    output = tmp_path / "public" / "tabs.html"
    cli.render(source, output=output, config=config_path)

    assert capsys.readouterr().out.strip().endswith("tabs.html")
    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    assert soup.title.get_text() == "Fixture tabs"
    assert soup.select_one('link[rel="stylesheet"]')["href"].endswith("bootstrap.min.css")
    assert [a.get_text(strip=True) for a in soup.select("main a.nav-link")] == ["One", "Two"]


def test_preview_includes_highlight_styles(fixed_tokens) -> None:
    builder = PreviewPageBuilder(TabsConfig(), token_source=fixed_tokens)
    html = builder.render("<?# TabBlock ?>\n- One\n<?#/ TabBlock ?>\n")
    soup = BeautifulSoup(html, "html.parser")
    assert ".codehilite" in soup.style.get_text()
    assert soup.select_one("div.tab-block")["id"] == "TabBlock__fixed00"
    assert [s["src"].rsplit("/", 1)[-1] for s in soup.find_all("script")] == [
        "jquery.slim.min.js",
        "bootstrap.bundle.min.js",
    ]


def test_preview_serializes_tab_blocks_as_html(fixed_tokens) -> None:
    config = TabsConfig(output_method="xml")
    builder = PreviewPageBuilder(config, token_source=fixed_tokens)
    html = builder.render("<?# TabBlock ?>\n- One\n<?#/ TabBlock ?>\n")
    assert 'id="TabBlock__fixed00-0-pane"></div>' in html
    assert 'id="TabBlock__fixed00-0-pane" />' not in html
