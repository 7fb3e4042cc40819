"""Menu document, navigation extraction and HTML/JSON reconciliation."""

from normand.menu.models import (
    DiscrepancyType,
    MenuDiscrepancy,
    MenuDocument,
    MenuEntry,
    Severity,
    SyncReport,
)
from normand.menu.reconciler import AutoSyncResult, auto_sync_menus, compare_menus
from normand.menu.service import MenuService
from normand.menu.urls import normalize_url

__all__ = [
    "AutoSyncResult",
    "DiscrepancyType",
    "MenuDiscrepancy",
    "MenuDocument",
    "MenuEntry",
    "MenuService",
    "Severity",
    "SyncReport",
    "auto_sync_menus",
    "compare_menus",
    "normalize_url",
]
