"""Assemble the tab list and pane container into one tab block."""

from __future__ import annotations

import typing as typ
from xml.etree.ElementTree import Element

from df12_tabs._constants import DEFAULT_NAMESPACE, TAB_BLOCK_CLASS
from df12_tabs.ids import TokenSource, create_base_id

from .models import ContentSelector, LabelSelector, enumerate_tabs
from .tab_list import create_tab_list
from .tab_panes import create_tab_pane_container


def create_tab_block(
    elements: typ.Iterable[Element],
    label_selector: LabelSelector,
    content_selector: ContentSelector,
    *,
    token_source: TokenSource | None = None,
    namespace: str = DEFAULT_NAMESPACE,
) -> Element:
    """Create Bootstrap-compatible tabs and panes wrapped in a ``div``.

    Parameters
    ----------
    elements : Iterable[Element]
        Source elements; each becomes one tab and one pane, in order.
    label_selector : Callable[[Element], Node | None]
        Picks the node used as a tab's label.
    content_selector : Callable[[Element], Iterable[Node]]
        Picks the nodes placed in a tab's pane.
    token_source : TokenSource, optional
        Random token capability for the base id; defaults to the shared
        short-id source.
    namespace : str, optional
        Prefix of the base id. Defaults to ``"TabBlock"``.

    Returns
    -------
    Element
        ``div.tab-block`` whose ``id`` is the freshly generated base id.

    Examples
    --------
    >>> from xml.etree.ElementTree import fromstring
    >>> from df12_tabs.tabs.nodes import first_child, remaining_children
    >>> root = fromstring("<div><section>One<p>Body</p></section></div>")
    >>> block = create_tab_block(list(root), first_child, remaining_children)
    >>> [child.tag for child in block]
    ['ul', 'div']
    """
    base_id = create_base_id(token_source, namespace)
    tabs = enumerate_tabs(elements, label_selector, content_selector, base_id)

    block = Element("div")
    block.append(create_tab_list(tabs))
    block.append(create_tab_pane_container(tabs))
    block.set("class", TAB_BLOCK_CLASS)
    block.set("id", base_id)
    return block


__all__ = ["create_tab_block"]
