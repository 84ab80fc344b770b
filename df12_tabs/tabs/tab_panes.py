"""Build the ``tab-content`` container holding one pane per tab."""

from __future__ import annotations

import typing as typ
from xml.etree.ElementTree import Element

from df12_tabs._constants import TAB_CONTENT_CLASS, TAB_PANE_ACTIVE_CLASSES, TAB_PANE_CLASS
from df12_tabs.ids import create_tab_link_id, create_tab_pane_id

from .models import ContentSelector, TabSpec, enumerate_tabs
from .nodes import Node, append_nodes


def create_tab_pane(content: typ.Iterable[Node], active: bool, tab_id: str) -> Element:  # noqa: FBT001
    """Create the pane ``div`` labelled by the link of ``tab_id``.

    Parameters
    ----------
    content : Iterable[Node]
        Nodes copied into the pane in order.
    active : bool
        Whether the pane is visible initially.
    tab_id : str
        Id prefix from :func:`df12_tabs.ids.create_tab_id`.

    Returns
    -------
    Element
        ``div`` with the ``tab-pane`` class (plus ``show active`` when
        selected), ``tabpanel`` role, and ids matching its tab link.
    """
    pane = append_nodes(Element("div"), content)
    css_class = f"{TAB_PANE_CLASS} {TAB_PANE_ACTIVE_CLASSES}" if active else TAB_PANE_CLASS
    pane.set("class", css_class)
    pane.set("role", "tabpanel")
    pane.set("aria-labelledby", create_tab_link_id(tab_id))
    pane.set("id", create_tab_pane_id(tab_id))
    return pane


def create_tab_pane_container(tabs: typ.Iterable[TabSpec]) -> Element:
    """Create the ``div.tab-content`` container for already-enumerated tabs."""
    container = Element("div")
    for tab in tabs:
        container.append(create_tab_pane(tab.content, tab.active, tab.tab_id))
    container.set("class", TAB_CONTENT_CLASS)
    return container


def build_tab_pane_container(
    elements: typ.Iterable[Element], content_selector: ContentSelector, base_id: str
) -> Element:
    """Create the pane container straight from source elements."""
    tabs = enumerate_tabs(elements, lambda _element: None, content_selector, base_id)
    return create_tab_pane_container(tabs)


__all__ = [
    "build_tab_pane_container",
    "create_tab_pane",
    "create_tab_pane_container",
]
