"""Build the Bootstrap ``nav-tabs`` list that selects between tab panes."""

from __future__ import annotations

import typing as typ
from xml.etree.ElementTree import Element

from df12_tabs._constants import (
    TAB_ITEM_CLASS,
    TAB_LINK_ACTIVE_CLASS,
    TAB_LINK_CLASS,
    TAB_LIST_CLASS,
)
from df12_tabs.ids import create_tab_link_id, create_tab_pane_id

from .models import LabelSelector, TabSpec, enumerate_tabs
from .nodes import Node, append_nodes


def create_tab_link(label: Node | None, active: bool, tab_id: str) -> Element:  # noqa: FBT001
    """Create the ``a`` element that toggles the pane for ``tab_id``.

    Parameters
    ----------
    label : Node or None
        Node placed inside the link; ``None`` leaves the link empty.
    active : bool
        Whether the tab is marked as selected.
    tab_id : str
        Id prefix from :func:`df12_tabs.ids.create_tab_id`.

    Returns
    -------
    Element
        Link carrying the ``nav-link`` class, toggle marker, ARIA state, and a
        fragment ``href`` pointing at the pane.
    """
    pane_id = create_tab_pane_id(tab_id)
    link = append_nodes(Element("a"), [label])
    css_class = f"{TAB_LINK_CLASS} {TAB_LINK_ACTIVE_CLASS}" if active else TAB_LINK_CLASS
    link.set("class", css_class)
    link.set("data-toggle", "tab")
    link.set("aria-selected", "true" if active else "false")
    link.set("aria-controls", pane_id)
    link.set("href", f"#{pane_id}")
    link.set("id", create_tab_link_id(tab_id))
    return link


def create_tab(label: Node | None, active: bool, tab_id: str) -> Element:  # noqa: FBT001
    """Wrap a tab link in its ``li.nav-item`` element."""
    item = Element("li")
    item.append(create_tab_link(label, active, tab_id))
    item.set("class", TAB_ITEM_CLASS)
    return item


def create_tab_list(tabs: typ.Iterable[TabSpec]) -> Element:
    """Create the ``ul`` tab list for already-enumerated tabs."""
    tab_list = Element("ul")
    for tab in tabs:
        tab_list.append(create_tab(tab.label, tab.active, tab.tab_id))
    tab_list.set("class", TAB_LIST_CLASS)
    tab_list.set("role", "tablist")
    return tab_list


def build_tab_list(
    elements: typ.Iterable[Element], label_selector: LabelSelector, base_id: str
) -> Element:
    """Create the tab list straight from source elements.

    Content is not needed for the list, so every element contributes an empty
    pane body to the enumeration.
    """
    tabs = enumerate_tabs(elements, label_selector, lambda _element: (), base_id)
    return create_tab_list(tabs)


__all__ = ["build_tab_list", "create_tab", "create_tab_link", "create_tab_list"]
