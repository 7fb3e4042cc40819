"""Read and update the editable regions of a page."""

from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Tag

# Main content lives in the first of these that the page has.
MAIN_CONTENT_SELECTORS = (".entry-content", "main")


@dataclass
class PageContent:
    """The page-level fields the admin panel edits."""

    title: str
    h1: str
    meta_description: Optional[str]
    main_content: str


@dataclass
class PageUpdate:
    """Requested page changes. Empty or missing fields are left untouched."""

    title: Optional[str] = None
    h1: Optional[str] = None
    meta_description: Optional[str] = None
    main_content: Optional[str] = None


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def set_inner_html(tag: Tag, markup: str) -> None:
    """Replace the children of ``tag`` with parsed ``markup``."""
    tag.clear()
    fragment = BeautifulSoup(markup, "html.parser")
    for node in list(fragment.contents):
        tag.append(node.extract())


def _main_content_tag(soup: BeautifulSoup) -> Optional[Tag]:
    for selector in MAIN_CONTENT_SELECTORS:
        tag = soup.select_one(selector)
        if tag is not None:
            return tag
    return None


def extract_page_content(html: str) -> PageContent:
    soup = parse_html(html)
    h1 = soup.find("h1")
    meta = soup.find("meta", attrs={"name": "description"})
    main = _main_content_tag(soup)
    return PageContent(
        title=soup.title.get_text() if soup.title else "",
        h1=h1.get_text() if h1 else "",
        meta_description=meta.get("content") if meta else None,
        main_content=main.decode_contents() if main else "No content found",
    )


def _ensure_head(soup: BeautifulSoup) -> Tag:
    head = soup.find("head")
    if head is None:
        head = soup.new_tag("head")
        root = soup.find("html") or soup
        root.insert(0, head)
    return head


def apply_page_update(html: str, update: PageUpdate, lang: str, rtl: bool) -> str:
    """Apply ``update`` to the page markup and stamp its language.

    The ``<html>`` element gets ``lang`` and, for right-to-left languages,
    ``dir="rtl"``; the attribute is removed otherwise.
    """
    soup = parse_html(html)

    if update.title:
        if soup.title is None:
            title = soup.new_tag("title")
            _ensure_head(soup).append(title)
        soup.title.string = update.title

    if update.h1:
        h1 = soup.find("h1")
        if h1 is not None:
            h1.string = update.h1

    if update.meta_description:
        meta = soup.find("meta", attrs={"name": "description"})
        if meta is None:
            meta = soup.new_tag("meta", attrs={"name": "description"})
            _ensure_head(soup).append(meta)
        meta["content"] = update.meta_description

    if update.main_content:
        main = _main_content_tag(soup)
        if main is not None:
            set_inner_html(main, update.main_content)

    root = soup.find("html")
    if root is not None:
        root["lang"] = lang
        if rtl:
            root["dir"] = "rtl"
        elif "dir" in root.attrs:
            del root["dir"]

    return str(soup)
