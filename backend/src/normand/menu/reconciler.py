"""Compare and merge the HTML navigation with the JSON menu document.

The HTML side is what visitors see; the JSON side is what the admin panel
edits. Either can drift. Title and url differences are errors because the
two sides disagree on visible content or routing. Presence and child-count
differences are warnings: usually one side has not caught up yet, and
``auto_sync_menus`` can fix the presence ones.

Only top-level entries are compared field by field. Children are compared
by count, not content.
"""

import logging
from dataclasses import dataclass, field

from normand.menu.models import DiscrepancyType, MenuDiscrepancy, MenuEntry, Severity, SyncReport
from normand.menu.tree import collect_ids, renumber
from normand.menu.urls import normalize_url

logger = logging.getLogger(__name__)


def _index(entries: list[MenuEntry]) -> dict[str, MenuEntry]:
    return {entry.id: entry for entry in entries}


def compare_menus(html_menu: list[MenuEntry], json_menu: list[MenuEntry]) -> SyncReport:
    """Report every discrepancy between the two top-level menus."""
    issues: list[MenuDiscrepancy] = []
    html_items = _index(html_menu)
    json_items = _index(json_menu)

    for entry_id, html_item in html_items.items():
        if entry_id not in json_items:
            issues.append(
                MenuDiscrepancy(
                    type=DiscrepancyType.MISSING_IN_JSON,
                    id=entry_id,
                    title=html_item.title,
                    description=f'Menu item "{html_item.title}" exists in HTML but not in JSON',
                    severity=Severity.WARNING,
                )
            )

    for entry_id, json_item in json_items.items():
        if entry_id not in html_items:
            issues.append(
                MenuDiscrepancy(
                    type=DiscrepancyType.MISSING_IN_HTML,
                    id=entry_id,
                    title=json_item.title,
                    description=f'Menu item "{json_item.title}" exists in JSON but not in HTML',
                    severity=Severity.WARNING,
                )
            )

    for entry_id, html_item in html_items.items():
        json_item = json_items.get(entry_id)
        if json_item is None:
            continue

        if html_item.title != json_item.title:
            issues.append(
                MenuDiscrepancy(
                    type=DiscrepancyType.TITLE_MISMATCH,
                    id=entry_id,
                    description=(
                        f'Title mismatch for {entry_id}: '
                        f'HTML="{html_item.title}", JSON="{json_item.title}"'
                    ),
                    severity=Severity.ERROR,
                    html_value=html_item.title,
                    json_value=json_item.title,
                )
            )

        html_url = normalize_url(html_item.url)
        json_url = normalize_url(json_item.url)
        if html_url != json_url:
            issues.append(
                MenuDiscrepancy(
                    type=DiscrepancyType.URL_MISMATCH,
                    id=entry_id,
                    description=f'URL mismatch for {entry_id}: HTML="{html_url}", JSON="{json_url}"',
                    severity=Severity.ERROR,
                    html_value=html_url,
                    json_value=json_url,
                )
            )

        html_count = len(html_item.children)
        json_count = len(json_item.children)
        if html_count != json_count:
            issues.append(
                MenuDiscrepancy(
                    type=DiscrepancyType.CHILDREN_COUNT_MISMATCH,
                    id=entry_id,
                    description=(
                        f"Children count mismatch for {entry_id}: "
                        f"HTML={html_count}, JSON={json_count}"
                    ),
                    severity=Severity.WARNING,
                    html_value=html_count,
                    json_value=json_count,
                )
            )

    return SyncReport.from_issues(issues)


@dataclass
class AutoSyncResult:
    """Merged menu plus the entries that were added from HTML.

    ``skipped_ids`` lists HTML ids that were not carried over because the
    merged tree already uses them somewhere.
    """

    synced_menu: list[MenuEntry]
    added_items: list[MenuEntry] = field(default_factory=list)
    skipped_ids: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Successfully synced menu. Added {len(self.added_items)} items."


def auto_sync_menus(html_menu: list[MenuEntry], json_menu: list[MenuEntry]) -> AutoSyncResult:
    """Merge HTML-only entries into a copy of the JSON menu.

    The JSON side stays authoritative for entries it already knows: their
    titles, urls and children are left alone. New entries are inserted where
    their HTML position puts them, then the whole list is ordered the way the
    HTML orders it, with JSON-only entries kept after them in their own
    order. Nothing is ever removed. Running the merge again on its own output
    gives the same tree.

    Ids stay unique across the whole merged tree: an HTML entry, or a child
    it brings along, whose id is already used at any depth is skipped.
    """
    synced = [entry.model_copy(deep=True) for entry in json_menu]
    known_ids = collect_ids(synced)
    added: list[MenuEntry] = []
    skipped: list[str] = []

    for html_item in html_menu:
        if html_item.id in known_ids:
            if not any(entry.id == html_item.id for entry in synced):
                skipped.append(html_item.id)
            continue
        known_ids.add(html_item.id)

        children: list[MenuEntry] = []
        for child in html_item.children:
            if child.id in known_ids:
                skipped.append(child.id)
                continue
            known_ids.add(child.id)
            children.append(child.model_copy(deep=True))

        new_entry = MenuEntry(
            id=html_item.id,
            title=html_item.title,
            url=normalize_url(html_item.url),
            order=html_item.order,
            children=children,
        )
        synced.insert(max(html_item.order - 1, 0), new_entry)
        added.append(new_entry)

    if skipped:
        logger.warning(f"Auto-sync skipped ids already used in the menu: {', '.join(skipped)}")

    html_positions = {entry.id: entry.order for entry in html_menu}

    def sort_key(entry: MenuEntry) -> tuple[int, int]:
        if entry.id in html_positions:
            return (0, html_positions[entry.id])
        return (1, entry.order)

    synced.sort(key=sort_key)
    renumber(synced)

    return AutoSyncResult(synced_menu=synced, added_items=added, skipped_ids=skipped)
