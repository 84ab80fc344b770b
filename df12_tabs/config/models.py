"""Typed dataclasses describing df12_tabs configuration."""

from __future__ import annotations

import dataclasses as dc

from df12_tabs._constants import DEFAULT_NAMESPACE


class TabsConfigError(ValueError):
    """Raised when the tabs configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class TabsConfig:
    """Options shared by the shortcode transform and the preview renderer."""

    namespace: str = DEFAULT_NAMESPACE
    token_length: int = 10
    output_method: str = "xml"
    pygments_style: str = "monokai"
    page_title: str = "Tab block preview"
    bootstrap_css_url: str = (
        "https://cdn.jsdelivr.net/npm/bootstrap@4.6.2/dist/css/bootstrap.min.css"
    )
    bootstrap_js_url: str = (
        "https://cdn.jsdelivr.net/npm/bootstrap@4.6.2/dist/js/bootstrap.bundle.min.js"
    )
    jquery_url: str = "https://cdn.jsdelivr.net/npm/jquery@3.7.1/dist/jquery.slim.min.js"


__all__ = ["TabsConfig", "TabsConfigError"]
