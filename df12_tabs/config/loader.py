"""Load tabs configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _require_namespace,
    _require_output_method,
    _require_token_length,
    _string_options,
)
from .models import TabsConfig, TabsConfigError

STRING_FIELDS = (
    "pygments_style",
    "page_title",
    "bootstrap_css_url",
    "bootstrap_js_url",
    "jquery_url",
)


def load_tabs_config(path: Path) -> TabsConfig:
    """Load the YAML configuration for tab block rendering.

    Parameters
    ----------
    path : Path
        Filesystem path to a YAML file with an optional top-level ``tabs``
        mapping.

    Returns
    -------
    TabsConfig
        Parsed configuration; options missing from the file keep their
        defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    TabsConfigError
        If the ``tabs`` section is not a mapping or holds invalid values.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from df12_tabs.config import load_tabs_config
    >>> config = load_tabs_config(Path("tabs.yaml"))  # doctest: +SKIP
    >>> config.namespace  # doctest: +SKIP
    'TabBlock'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_tabs_config(loaded.get("tabs") or {})


def build_tabs_config(payload: typ.Mapping[str, typ.Any]) -> TabsConfig:
    """Build a :class:`TabsConfig` from the ``tabs`` mapping of a config file."""
    if not isinstance(payload, dict):
        msg = "The 'tabs' section must be a mapping."
        raise TabsConfigError(msg)
    base = TabsConfig()
    strings = _string_options(
        payload, {name: getattr(base, name) for name in STRING_FIELDS}
    )
    return dc.replace(
        base,
        namespace=_require_namespace(payload.get("namespace"), base.namespace),
        token_length=_require_token_length(payload.get("token_length"), base.token_length),
        output_method=_require_output_method(
            payload.get("output_method"), base.output_method
        ),
        **strings,
    )


__all__ = ["build_tabs_config", "load_tabs_config"]
