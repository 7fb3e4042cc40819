"""Helpers for walking and editing menu trees."""

from collections import Counter
from typing import Iterator

from normand.menu.models import MenuEntry


def iter_entries(entries: list[MenuEntry]) -> Iterator[MenuEntry]:
    """Yield every entry in the tree, parents before their children."""
    for entry in entries:
        yield entry
        yield from iter_entries(entry.children)


def collect_ids(entries: list[MenuEntry]) -> set[str]:
    """Return the ids used anywhere in the tree."""
    return {entry.id for entry in iter_entries(entries)}


def find_duplicate_ids(entries: list[MenuEntry]) -> list[str]:
    """Return ids that occur more than once at any depth, in first-seen order."""
    counts = Counter(entry.id for entry in iter_entries(entries))
    return [entry_id for entry_id, count in counts.items() if count > 1]


def renumber(entries: list[MenuEntry]) -> list[MenuEntry]:
    """Set ``order`` to 1, 2, 3, ... in every sibling list, in place."""
    for index, entry in enumerate(entries, start=1):
        entry.order = index
        renumber(entry.children)
    return entries


def remove_entry(entries: list[MenuEntry], entry_id: str) -> tuple[list[MenuEntry], bool]:
    """Remove the node with ``entry_id`` from the tree, wherever it sits.

    The node's subtree goes with it. The sibling list it was removed from is
    renumbered; other lists keep their order values.

    Returns:
        Tuple of (remaining top-level entries, whether anything was removed).
    """
    kept = [entry for entry in entries if entry.id != entry_id]
    if len(kept) != len(entries):
        return renumber_siblings(kept), True

    for entry in entries:
        children, removed = remove_entry(entry.children, entry_id)
        if removed:
            entry.children = children
            return entries, True
    return entries, False


def renumber_siblings(entries: list[MenuEntry]) -> list[MenuEntry]:
    """Renumber a single sibling list without touching nested lists."""
    for index, entry in enumerate(entries, start=1):
        entry.order = index
    return entries
