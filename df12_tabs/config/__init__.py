"""Load and validate configuration YAML for df12 tab block rendering.

The configuration file carries a single ``tabs`` mapping whose options tune
base id generation, serialization, and the preview page. The primary entry
point is :func:`load_tabs_config`, which applies defaults for anything left
out and returns a :class:`TabsConfig`.

Examples
--------
>>> from pathlib import Path
>>> from df12_tabs.config import load_tabs_config
>>> config = load_tabs_config(Path("config/tabs.yaml"))  # doctest: +SKIP
>>> config.output_method  # doctest: +SKIP
'xml'
"""

from .loader import build_tabs_config, load_tabs_config
from .models import TabsConfig, TabsConfigError

__all__ = ["TabsConfig", "TabsConfigError", "build_tabs_config", "load_tabs_config"]
