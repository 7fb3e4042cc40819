"""Site constants.

Re-exports all constants for convenient importing:
    from normand.constants import MENU_ITEM_CLASSES, LANGUAGE_NAMES
"""

from normand.constants.menu import *  # noqa: F403
from normand.constants.pages import *  # noqa: F403
