"""Shared records used while building a tab block."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from df12_tabs.ids import create_tab_id

from .nodes import Node

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

LabelSelector: typ.TypeAlias = "typ.Callable[[Element], Node | None]"
ContentSelector: typ.TypeAlias = "typ.Callable[[Element], typ.Iterable[Node]]"


@dc.dataclass(frozen=True, slots=True)
class TabSpec:
    """Everything both builders need to know about one tab.

    Attributes
    ----------
    index : int
        Zero-based position of the source element.
    tab_id : str
        Id prefix produced by :func:`df12_tabs.ids.create_tab_id`.
    label : Node or None
        Node placed inside the tab link; ``None`` yields an empty label.
    content : tuple[Node, ...]
        Nodes placed inside the tab pane, in source order.
    active : bool
        Whether the tab and its pane start out selected.
    """

    index: int
    tab_id: str
    label: Node | None
    content: tuple[Node, ...]
    active: bool


def enumerate_tabs(
    elements: typ.Iterable[Element],
    label_selector: LabelSelector,
    content_selector: ContentSelector,
    base_id: str,
) -> list[TabSpec]:
    """Resolve labels, content, and ids for every element in a single pass.

    The tab list and pane container are both built from the returned list, so
    the index-to-id mapping is computed exactly once. Only the first tab is
    active.
    """
    return [
        TabSpec(
            index=index,
            tab_id=create_tab_id(base_id, index),
            label=label_selector(element),
            content=tuple(content_selector(element)),
            active=index == 0,
        )
        for index, element in enumerate(elements)
    ]


__all__ = ["ContentSelector", "LabelSelector", "TabSpec", "enumerate_tabs"]
