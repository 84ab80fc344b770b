"""Treat ElementTree content as an ordered list of child nodes.

``xml.etree.ElementTree`` stores character data on ``text`` and ``tail``
attributes instead of as separate nodes. The tab builders want the DOM view,
where a label can be a bare text run or an element, so this module converts
between the two. Text nodes are plain ``str`` values.
"""

from __future__ import annotations

import copy
import typing as typ
from xml.etree.ElementTree import Element

Node: typ.TypeAlias = "str | Element"


def _is_significant(text: str | None) -> bool:
    return bool(text and text.strip())


def child_nodes(element: Element) -> list[Node]:
    """Return the child nodes of ``element`` in document order.

    Whitespace-only text runs are skipped, the same way an XML parser that
    ignores insignificant whitespace would. The returned elements belong to
    ``element``; callers must not mutate them.
    """
    nodes: list[Node] = []
    if _is_significant(element.text):
        nodes.append(typ.cast("str", element.text))
    for child in element:
        nodes.append(child)
        if _is_significant(child.tail):
            nodes.append(typ.cast("str", child.tail))
    return nodes


def first_child(element: Element) -> Node | None:
    """Select the first child node of ``element``, or ``None`` when empty."""
    nodes = child_nodes(element)
    return nodes[0] if nodes else None


def remaining_children(element: Element) -> list[Node]:
    """Select every child node of ``element`` except the first."""
    return child_nodes(element)[1:]


def append_nodes(parent: Element, nodes: typ.Iterable[Node | None]) -> Element:
    """Append ``nodes`` to ``parent`` and return ``parent``.

    Elements are deep-copied without their tail so the source tree is left
    untouched; text is merged into ``parent.text`` or the previous child's
    ``tail``. ``None`` entries are ignored.
    """
    for node in nodes:
        match node:
            case None:
                continue
            case str() as text:
                if len(parent):
                    last = parent[-1]
                    last.tail = (last.tail or "") + text
                else:
                    parent.text = (parent.text or "") + text
            case _:
                clone = copy.deepcopy(node)
                clone.tail = None
                parent.append(clone)
    return parent


__all__ = ["Node", "append_nodes", "child_nodes", "first_child", "remaining_children"]
