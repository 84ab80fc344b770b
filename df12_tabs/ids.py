"""Derive the id attribute values that tie tabs to their panes.

One base id is created per tab block from a namespace prefix and a random
token. Every other id is derived from it positionally, so the tab list and the
pane container only ever agree when both go through these helpers.

Example
-------
>>> from df12_tabs.ids import create_tab_id, create_tab_link_id, create_tab_pane_id
>>> tab_id = create_tab_id("TabBlock__abc1234", 0)
>>> tab_id
'TabBlock__abc1234-0'
>>> create_tab_link_id(tab_id), create_tab_pane_id(tab_id)
('TabBlock__abc1234-0-link', 'TabBlock__abc1234-0-pane')
"""

from __future__ import annotations

import logging
import re
import secrets
import string
import typing as typ

from ._constants import DEFAULT_NAMESPACE

logger = logging.getLogger(__name__)

TOKEN_ALPHABET = string.ascii_letters + string.digits
MIN_TOKEN_LENGTH = 7
NAMESPACE_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


class TokenSource(typ.Protocol):
    """Capability producing unguessable tokens safe for ``id`` attributes."""

    def generate(self, url_safe: bool = True) -> str:  # pragma: no cover - protocol
        """Return a fresh token."""
        ...


class ShortIdTokenSource:
    """Generate short alphanumeric tokens from the ``secrets`` CSPRNG.

    Tokens never contain characters that need escaping in an HTML ``id`` or a
    URL fragment, so ``url_safe`` only exists for interface parity. The source
    holds no mutable state and can be shared across threads.
    """

    def __init__(self, length: int = 10) -> None:
        if length < MIN_TOKEN_LENGTH:
            msg = f"Token length must be at least {MIN_TOKEN_LENGTH}, got {length}."
            raise ValueError(msg)
        self.length = length

    def generate(self, url_safe: bool = True) -> str:  # noqa: ARG002, FBT001, FBT002
        """Return ``length`` random alphanumeric characters."""
        return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(self.length))


DEFAULT_TOKEN_SOURCE = ShortIdTokenSource()


def create_base_id(
    token_source: TokenSource | None = None, namespace: str = DEFAULT_NAMESPACE
) -> str:
    """Create a unique id attribute value for one tab block instance.

    Parameters
    ----------
    token_source : TokenSource, optional
        Capability used to draw the random suffix. Defaults to a shared
        :class:`ShortIdTokenSource`.
    namespace : str, optional
        Prefix placed before the token; must start with a letter so the id is
        valid in HTML and CSS selectors. Defaults to ``"TabBlock"``.

    Returns
    -------
    str
        Identifier of the form ``"<namespace>__<token>"``.

    Raises
    ------
    ValueError
        If ``namespace`` is empty or contains characters unsafe for ids.
    """
    if not NAMESPACE_PATTERN.match(namespace):
        msg = f"Invalid tab block namespace {namespace!r}."
        raise ValueError(msg)
    source = token_source or DEFAULT_TOKEN_SOURCE
    base_id = f"{namespace}__{source.generate(url_safe=True)}"
    logger.debug("created tab block base id %s", base_id)
    return base_id


def create_tab_id(base_id: str, index: int) -> str:
    """Return the id prefix shared by the link and pane of tab ``index``."""
    return f"{base_id}-{index}"


def create_tab_link_id(tab_id: str) -> str:
    """Return the id attribute value for a tab's link element."""
    return tab_id + "-link"


def create_tab_pane_id(tab_id: str) -> str:
    """Return the id attribute value for a tab pane."""
    return tab_id + "-pane"


__all__ = [
    "DEFAULT_TOKEN_SOURCE",
    "MIN_TOKEN_LENGTH",
    "TOKEN_ALPHABET",
    "ShortIdTokenSource",
    "TokenSource",
    "create_base_id",
    "create_tab_id",
    "create_tab_link_id",
    "create_tab_pane_id",
]
