"""Render Bootstrap tab blocks from shortcode content.

This package turns a small XHTML fragment, one child element per tab, into a
``div.tab-block`` holding a ``nav-tabs`` list and the matching ``tab-content``
panes. It also ships a python-markdown extension for ``TabBlock`` shortcodes
and the ``tabs`` CLI.

Exports
-------
- ``render_tab_block``: Boundary transform from XHTML string to markup.
- ``create_tab_block``: Build the tab block element tree directly.
- ``MalformedInputError``: Raised for content that is not well-formed.
- ``TabBlockExtension``: Markdown extension expanding shortcodes.
- ``app`` / ``main``: Cyclopts application entry points.

Examples
--------
>>> from df12_tabs import render_tab_block
>>> class FixedTokens:
...     def generate(self, url_safe=True):
...         return "abc1234"
>>> render_tab_block("<div><p>One</p></div>", token_source=FixedTokens())
'<div class="tab-block" id="TabBlock__abc1234"><ul class="nav nav-tabs" role="tablist"><li class="nav-item"><a class="nav-link active" data-toggle="tab" aria-selected="true" aria-controls="TabBlock__abc1234-0-pane" href="#TabBlock__abc1234-0-pane" id="TabBlock__abc1234-0-link">One</a></li></ul><div class="tab-content"><div class="tab-pane show active" role="tabpanel" aria-labelledby="TabBlock__abc1234-0-link" id="TabBlock__abc1234-0-pane" /></div></div>'
"""

from __future__ import annotations

from .cli import app, main
from .markdown_ext import TabBlockExtension
from .shortcode import MalformedInputError, render_tab_block
from .tabs import create_tab_block

__all__ = [
    "MalformedInputError",
    "TabBlockExtension",
    "app",
    "create_tab_block",
    "main",
    "render_tab_block",
]
