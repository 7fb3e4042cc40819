"""Extract the live navigation tree from a page's HTML."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup, Tag

from normand.constants import GENERATED_CHILD_ID_PREFIX, GENERATED_ID_PREFIX
from normand.menu.models import MenuEntry
from normand.menu.tree import find_duplicate_ids
from normand.menu.urls import normalize_url

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Outcome of reading the navigation markup.

    Exactly one of ``items`` (possibly empty) and ``error`` is meaningful:
    when ``error`` is set, ``items`` is empty.
    """

    items: list[MenuEntry] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _entry_from_item(item: Tag, entry_id: str, order: int) -> MenuEntry:
    link = item.find("a", recursive=False)
    title = link.get_text().strip() if link else ""
    href = link.get("href") if link else None
    if isinstance(href, list):
        href = " ".join(href)
    return MenuEntry(id=entry_id, title=title, url=normalize_url(href or "#"), order=order)


def _direct_items(container: Tag) -> list[Tag]:
    return container.find_all("li", recursive=False)


def _extract_children(item: Tag, parent_index: int, submenu_class: str) -> list[MenuEntry]:
    children: list[MenuEntry] = []
    for submenu in item.find_all(class_=submenu_class, recursive=False):
        for child in _direct_items(submenu):
            child_index = len(children)
            child_id = child.get("id") or (
                f"{GENERATED_CHILD_ID_PREFIX}-{parent_index}-{child_index}"
            )
            children.append(_entry_from_item(child, child_id, child_index + 1))
    return children


def extract_menu(
    html: str, nav_selector: str = "#primary-menu", submenu_class: str = "sub-menu"
) -> ExtractionResult:
    """Build the menu tree from an HTML document.

    Top-level entries are the direct ``li`` children of the list matched by
    ``nav_selector``; each may contribute one level of children from its
    direct ``submenu_class`` lists.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
        nav = soup.select_one(nav_selector)
    except Exception as e:
        return ExtractionResult(error=f"Failed to extract menu from HTML: {e}")

    if nav is None:
        return ExtractionResult(error=f"Navigation list {nav_selector!r} not found in HTML")

    items: list[MenuEntry] = []
    for index, item in enumerate(_direct_items(nav)):
        entry_id = item.get("id") or f"{GENERATED_ID_PREFIX}-{index}"
        entry = _entry_from_item(item, entry_id, index + 1)
        entry.children = _extract_children(item, index, submenu_class)
        items.append(entry)

    duplicates = find_duplicate_ids(items)
    if duplicates:
        logger.warning(f"Navigation markup reuses menu ids: {', '.join(duplicates)}")

    return ExtractionResult(items=items)


def extract_menu_from_html(
    html_path: Path, nav_selector: str = "#primary-menu", submenu_class: str = "sub-menu"
) -> ExtractionResult:
    """Read ``html_path`` and extract its navigation tree.

    A missing or unreadable file is reported through ``error``, never raised.
    """
    if not html_path.exists():
        return ExtractionResult(error=f"HTML file not found: {html_path}")

    try:
        html = html_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return ExtractionResult(error=f"Failed to read HTML file {html_path}: {e}")

    return extract_menu(html, nav_selector, submenu_class)
