"""Flat, per-language HTML page storage in the site root."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup

from normand.constants import ADMIN_FILE_PREFIXES, LANGUAGE_NAMES
from normand.errors import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

# Page names are single path segments: no dots, slashes or traversal.
PAGE_NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")


@dataclass
class PageInfo:
    """A page file as listed by the admin panel."""

    filename: str
    page_name: str
    language: str
    language_name: str
    title: str
    path: str


class PageStore:
    """Resolves, reads and writes the site's HTML pages.

    Pages live directly in ``site_root``: ``{name}.html`` for the default
    language and ``{name}.{lang}.html`` for the others.
    """

    def __init__(self, site_root: Path, languages: list[str], default_language: str) -> None:
        self._root = site_root
        self._languages = languages
        self._default_language = default_language

    @property
    def languages(self) -> list[str]:
        return self._languages

    @property
    def default_language(self) -> str:
        return self._default_language

    def filename(self, lang: str, name: str) -> str:
        """File name of page ``name`` in ``lang``."""
        name = name or "index"
        if lang == self._default_language:
            return f"{name}.html"
        return f"{name}.{lang}.html"

    def resolve(self, lang: str, name: str) -> Path:
        """Path of an existing page file.

        Raises:
            ValidationError: If the language is unsupported or the name is not a plain page name.
            NotFoundError: If the page file does not exist.
        """
        if lang not in self._languages:
            raise ValidationError(f"Unsupported language: {lang}")
        if name and not PAGE_NAME_PATTERN.fullmatch(name):
            raise ValidationError(f"Invalid page name: {name}")
        if name and name.lower().startswith(ADMIN_FILE_PREFIXES):
            raise NotFoundError("Page not found")

        path = self._root / self.filename(lang, name)
        if not path.is_file():
            raise NotFoundError("Page not found")
        return path

    def read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read page {path}: {e}")
            raise StorageError("Failed to load page", details=str(e)) from e

    def write(self, path: Path, html: str) -> None:
        try:
            path.write_text(html, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write page {path}: {e}")
            raise StorageError("Failed to update page", details=str(e)) from e
        logger.info(f"Updated page {path.name}")

    def _split_filename(self, filename: str) -> tuple[str, str]:
        stem = filename[: -len(".html")]
        page_name, _, suffix = stem.rpartition(".")
        if page_name and suffix in self._languages:
            return page_name, suffix
        return stem, self._default_language

    def list_pages(self) -> dict[str, dict[str, PageInfo]]:
        """All site pages grouped by page name, then language."""
        grouped: dict[str, dict[str, PageInfo]] = {}
        for path in sorted(self._root.glob("*.html")):
            if path.name.lower().startswith(ADMIN_FILE_PREFIXES):
                continue

            page_name, lang = self._split_filename(path.name)
            try:
                soup = BeautifulSoup(self.read(path), "html.parser")
            except StorageError:
                logger.warning(f"Skipping unreadable page {path.name}")
                continue
            title = soup.title.get_text().strip() if soup.title else ""

            grouped.setdefault(page_name, {})[lang] = PageInfo(
                filename=path.name,
                page_name=page_name,
                language=lang,
                language_name=LANGUAGE_NAMES.get(lang, lang),
                title=title or path.name,
                path=path.name[: -len(".html")].replace(".", "/"),
            )
        return grouped
