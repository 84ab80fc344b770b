"""Utility helpers shared by the df12_tabs configuration loader."""

from __future__ import annotations

import typing as typ

from df12_tabs.ids import MIN_TOKEN_LENGTH, NAMESPACE_PATTERN
from df12_tabs.shortcode import OUTPUT_METHODS

from .models import TabsConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_namespace(value: object | None, default: str) -> str:
    """Return a namespace usable as an id prefix."""
    namespace = _optional_str(value) or default
    if not NAMESPACE_PATTERN.match(namespace):
        msg = f"tabs.namespace {namespace!r} must start with a letter and hold only letters, digits, '_' or '-'."
        raise TabsConfigError(msg)
    return namespace


def _require_token_length(value: object | None, default: int) -> int:
    """Return a token length no shorter than the short-id minimum."""
    match value:
        case None:
            return default
        case bool():
            pass
        case int() if value >= MIN_TOKEN_LENGTH:
            return value
    msg = f"tabs.token_length must be an integer >= {MIN_TOKEN_LENGTH}, got {value!r}."
    raise TabsConfigError(msg)


def _require_output_method(value: object | None, default: str) -> str:
    """Return a supported serialization method."""
    method = (_optional_str(value) or default).lower()
    if method not in OUTPUT_METHODS:
        msg = f"tabs.output_method must be one of {OUTPUT_METHODS}, got {value!r}."
        raise TabsConfigError(msg)
    return method


def _string_options(
    payload: typ.Mapping[str, typ.Any], defaults: typ.Mapping[str, str]
) -> dict[str, str]:
    """Pick plain string options from ``payload``, falling back to ``defaults``."""
    return {
        key: _optional_str(payload.get(key)) or default
        for key, default in defaults.items()
    }


__all__ = [
    "_optional_str",
    "_require_namespace",
    "_require_output_method",
    "_require_token_length",
    "_string_options",
]
