"""Common literal values used across df12_tabs.

These constants keep the Bootstrap class names and shortcode markers
centralized so the builders, the markdown extension, and tests can import the
same values without drifting. Intended for internal use within the df12_tabs
package.

Examples
--------
>>> from df12_tabs import _constants
>>> _constants.SHORTCODE_OPEN_TEMPLATE.format(name="TabBlock")
'<?# TabBlock ?>'
>>> _constants.TAB_PANE_ACTIVE_CLASSES
'show active'
"""

SHORTCODE_NAME = "TabBlock"
DEFAULT_NAMESPACE = SHORTCODE_NAME
SHORTCODE_OPEN_TEMPLATE = "<?# {name} ?>"
SHORTCODE_CLOSE_TEMPLATE = "<?#/ {name} ?>"

TAB_BLOCK_CLASS = "tab-block"
TAB_LIST_CLASS = "nav nav-tabs"
TAB_ITEM_CLASS = "nav-item"
TAB_LINK_CLASS = "nav-link"
TAB_LINK_ACTIVE_CLASS = "active"
TAB_CONTENT_CLASS = "tab-content"
TAB_PANE_CLASS = "tab-pane"
TAB_PANE_ACTIVE_CLASSES = "show active"
