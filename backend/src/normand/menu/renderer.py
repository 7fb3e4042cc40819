"""Render the JSON menu back into the page navigation markup."""

import re
from html import escape
from typing import Optional

from normand.constants import (
    INDEX_FILE,
    MENU_ITEM_CLASSES,
    MENU_ITEM_PARENT_CLASS,
    MENU_LIST_CLASS,
)
from normand.menu.models import MenuEntry


def menu_href(url: str) -> str:
    """Turn a normalized menu url into the href the static site links to."""
    if url == "/":
        return INDEX_FILE
    if url.endswith("/"):
        return url + INDEX_FILE
    return url


def _render_item(entry: MenuEntry, nested: bool) -> str:
    has_children = bool(entry.children) and not nested
    classes = f"{MENU_ITEM_CLASSES} {entry.id}"
    if has_children:
        classes += f" {MENU_ITEM_PARENT_CLASS}"

    parts = [
        f'<li id="{escape(entry.id)}" class="{escape(classes)}">',
        f'<a href="{escape(menu_href(entry.url))}">{escape(entry.title, quote=False)}</a>',
    ]
    if has_children:
        parts.append('<ul class="sub-menu">')
        parts.extend(_render_item(child, nested=True) for child in entry.children)
        parts.append("</ul>")
    parts.append("</li>")
    return "".join(parts)


def render_menu_html(entries: list[MenuEntry], list_id: str = "primary-menu") -> str:
    """Render the full navigation list for ``entries``.

    Only one level of children is rendered; deeper nesting is not part of the
    site's navigation.
    """
    items = "".join(_render_item(entry, nested=False) for entry in entries)
    return f'<ul id="{escape(list_id)}" class="{MENU_LIST_CLASS}">{items}</ul>'


def replace_menu_block(
    document: str, menu_html: str, anchor: str, list_id: str = "primary-menu"
) -> Optional[str]:
    """Swap the existing navigation block in ``document`` for ``menu_html``.

    The block runs from ``<ul id="{list_id}"`` to the ``</ul>`` that is
    directly followed by ``anchor``; sub-menu closing tags inside it are
    skipped because they are not followed by the anchor.

    Returns:
        The updated document, or None if no block was found.
    """
    pattern = re.compile(
        rf'<ul id="{re.escape(list_id)}"[^>]*>[\s\S]*?</ul>(?=\s*{re.escape(anchor)})'
    )
    if not pattern.search(document):
        return None
    return pattern.sub(lambda _: menu_html, document, count=1)
