"""Tests for loading tabs configuration YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from df12_tabs.config import TabsConfig, TabsConfigError, load_tabs_config


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "tabs.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_missing_section_uses_defaults(tmp_path: Path) -> None:
    config = load_tabs_config(_write(tmp_path, "other: 1"))
    assert config == TabsConfig()


def test_overrides_are_applied(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
tabs:
  namespace: Guide
  token_length: 14
  output_method: HTML
  pygments_style: friendly
  page_title: Install guide
        """,
    )
    config = load_tabs_config(path)
    assert config.namespace == "Guide"
    assert config.token_length == 14
    assert config.output_method == "html"
    assert config.pygments_style == "friendly"
    assert config.page_title == "Install guide"
    assert config.bootstrap_css_url == TabsConfig().bootstrap_css_url


@pytest.mark.parametrize(
    "body",
    [
        "tabs:\n  namespace: 9lives",
        "tabs:\n  token_length: 3",
        "tabs:\n  token_length: yes",
        "tabs:\n  token_length: ten",
        "tabs:\n  output_method: json",
        "tabs:\n  - namespace",
    ],
)
def test_invalid_values_raise(tmp_path: Path, body: str) -> None:
    with pytest.raises(TabsConfigError):
        load_tabs_config(_write(tmp_path, body))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(TypeError, match="mapping"):
        load_tabs_config(_write(tmp_path, "- tabs"))


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_tabs_config(tmp_path / "absent.yaml")
