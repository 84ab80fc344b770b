"""Build Bootstrap tab blocks from ElementTree content."""

from .block import create_tab_block
from .models import TabSpec, enumerate_tabs
from .nodes import Node, append_nodes, child_nodes, first_child, remaining_children
from .tab_list import build_tab_list, create_tab, create_tab_link, create_tab_list
from .tab_panes import build_tab_pane_container, create_tab_pane, create_tab_pane_container

__all__ = [
    "Node",
    "TabSpec",
    "append_nodes",
    "build_tab_list",
    "build_tab_pane_container",
    "child_nodes",
    "create_tab",
    "create_tab_block",
    "create_tab_link",
    "create_tab_list",
    "create_tab_pane",
    "create_tab_pane_container",
    "enumerate_tabs",
    "first_child",
    "remaining_children",
]
