"""Navigation markup constants.

These describe the WordPress-derived markup the static pages were exported
with. The extractor reads it and the renderer writes it back, so both sides
must agree on the same shapes.
"""

# =============================================================================
# Identifiers
# =============================================================================
# List items without an id attribute get a positional id so they can still
# be matched between the HTML and JSON sides. Top-level items use
# "generated-{index}", nested items "child-{index}-{child_index}" (both
# zero-based, matching the position in their sibling list).

GENERATED_ID_PREFIX = "generated"
GENERATED_CHILD_ID_PREFIX = "child"

# =============================================================================
# Rendering
# =============================================================================
# Classes every rendered menu item carries. The item's own id is appended as
# an extra class, and items with children get MENU_ITEM_PARENT_CLASS.

MENU_ITEM_CLASSES = "menu-item menu-item-type-post_type menu-item-object-page"
MENU_ITEM_PARENT_CLASS = "menu-item-has-children"
MENU_LIST_CLASS = "menu"

# Directory-style urls are rendered as links to the directory's index file.
INDEX_FILE = "index.html"
