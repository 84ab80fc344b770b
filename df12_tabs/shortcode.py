"""Host-facing entry point turning shortcode content into tab block markup.

The content handed to a ``TabBlock`` shortcode is XHTML with a single root
element. Each child element of that root becomes a tab: its first child node
is the tab label and the remaining nodes fill the tab pane. The resulting tree
is serialized compactly so it can be spliced into a larger document.

Example
-------
>>> from df12_tabs.shortcode import render_tab_block
>>> html = render_tab_block("<div><p>One<b>Body</b></p></div>")  # doctest: +SKIP
>>> html.startswith('<div class="tab-block" id="TabBlock__')  # doctest: +SKIP
True
"""

from __future__ import annotations

import logging
import typing as typ
from xml.etree.ElementTree import Element, ParseError, fromstring, tostring

from ._constants import DEFAULT_NAMESPACE, SHORTCODE_NAME
from .tabs import create_tab_block, first_child, remaining_children

if typ.TYPE_CHECKING:
    from .ids import TokenSource

logger = logging.getLogger(__name__)

OUTPUT_METHODS = ("xml", "html")
XHTML_NAMESPACE = "{http://www.w3.org/1999/xhtml}"


class MalformedInputError(ValueError):
    """Raised when shortcode content is not a well-formed markup element."""

    def __init__(self, message: str, *, shortcode: str = SHORTCODE_NAME) -> None:
        super().__init__(message)
        self.shortcode = shortcode


def parse_content(content: str, *, shortcode: str = SHORTCODE_NAME) -> Element:
    """Parse shortcode ``content`` into its root element.

    Elements in the XHTML namespace get plain tag names so the serialized
    block does not carry ``html:`` prefixes.

    Raises
    ------
    MalformedInputError
        If ``content`` is not a single well-formed XHTML element. The parser
        error is chained as ``__cause__``.
    """
    try:
        root = fromstring(content)
    except ParseError as exc:
        msg = (
            f"{shortcode} shortcode requires Markdown content that can be rendered "
            f"into a valid XHTML element: {exc}"
        )
        raise MalformedInputError(msg, shortcode=shortcode) from exc
    for element in root.iter():
        if element.tag.startswith(XHTML_NAMESPACE):
            element.tag = element.tag[len(XHTML_NAMESPACE) :]
    return root


def _check_method(method: str) -> None:
    if method not in OUTPUT_METHODS:
        msg = f"Unsupported output method {method!r}; expected one of {OUTPUT_METHODS}."
        raise ValueError(msg)


def serialize(element: Element, method: str = "xml") -> str:
    """Serialize ``element`` without any pretty-printing whitespace.

    ``"xml"`` self-closes empty elements; ``"html"`` writes explicit end tags
    for non-void elements so the fragment can be embedded in HTML documents.
    """
    _check_method(method)
    return tostring(element, encoding="unicode", method=method)


def render_tab_block(
    content: str,
    *,
    token_source: TokenSource | None = None,
    namespace: str = DEFAULT_NAMESPACE,
    method: str = "xml",
) -> str:
    """Render Bootstrap tab block markup from shortcode content.

    Parameters
    ----------
    content : str
        XHTML produced from the shortcode body. Every child element of the
        root becomes a tab; its first child node is the label and the
        remaining nodes become the pane content.
    token_source : TokenSource, optional
        Random token capability used for the block's base id.
    namespace : str, optional
        Prefix of the generated base id. Defaults to ``"TabBlock"``.
    method : str, optional
        Serialization method, ``"xml"`` (default) or ``"html"``.

    Returns
    -------
    str
        Compact markup for the complete tab block.

    Raises
    ------
    MalformedInputError
        If ``content`` cannot be parsed into a well-formed element.
    ValueError
        If ``method`` or ``namespace`` is invalid.
    """
    _check_method(method)
    root = parse_content(content)
    block = create_tab_block(
        list(root),
        first_child,
        remaining_children,
        token_source=token_source,
        namespace=namespace,
    )
    logger.debug("rendered tab block %s with %d tabs", block.get("id"), len(root))
    return serialize(block, method)


__all__ = [
    "OUTPUT_METHODS",
    "MalformedInputError",
    "parse_content",
    "render_tab_block",
    "serialize",
]
