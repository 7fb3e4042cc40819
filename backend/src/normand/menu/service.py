"""Menu sync service: validation, auto-sync and edits of the menu document."""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, UTC
from pathlib import Path

from normand.config import Config
from normand.errors import NotFoundError, StorageError, SyncError, ValidationError
from normand.menu.extractor import extract_menu_from_html
from normand.menu.models import MenuDocument, MenuEntry, SyncReport
from normand.menu.reconciler import auto_sync_menus, compare_menus
from normand.menu.renderer import render_menu_html, replace_menu_block
from normand.menu.store import FileStatus, MenuStore, file_status, stage_text
from normand.menu.tree import find_duplicate_ids, remove_entry, renumber

logger = logging.getLogger(__name__)


@dataclass
class MenuValidation:
    """A fresh comparison of both menu sources."""

    report: SyncReport
    html_menu: list[MenuEntry]
    document: MenuDocument
    last_checked: datetime

    @property
    def json_menu(self) -> list[MenuEntry]:
        return self.document.main_menu


@dataclass
class SyncStatusSummary:
    """Lightweight sync state attached to plain menu reads."""

    is_in_sync: bool
    issue_count: int
    last_checked: datetime


@dataclass
class AutoSyncOutcome:
    """Result of an auto-sync request."""

    message: str
    added_items: list[MenuEntry]
    was_already_in_sync: bool
    synced_menu: list[MenuEntry]
    skipped_ids: list[str] = field(default_factory=list)


@dataclass
class MenuWriteOutcome:
    """Result of replacing or editing the menu document."""

    document: MenuDocument
    updated_html_files: list[str]


class MenuService:
    """Keeps the JSON menu document and the page navigation markup aligned.

    Each call reads what it needs, computes, and writes at most once. Errors
    are raised as ``AdminError`` subclasses for the HTTP layer to translate.
    """

    def __init__(self, config: Config) -> None:
        self._config = config
        self._store = MenuStore(config.menu_json_path)

    @property
    def store(self) -> MenuStore:
        return self._store

    def _extract_html_menu(self) -> list[MenuEntry]:
        html_path = self._config.menu_source_html_path
        result = extract_menu_from_html(
            html_path, self._config.menu.nav_selector, self._config.menu.submenu_class
        )
        if not result.ok:
            if not html_path.exists():
                raise NotFoundError(result.error or "HTML file not found")
            raise SyncError(result.error or "Failed to extract menu from HTML")
        return result.items

    def load_document(self) -> MenuDocument:
        """Load the stored document.

        Raises:
            NotFoundError: If the document does not exist.
            SyncError: If the document cannot be parsed.
        """
        result = self._store.load()
        if result.document is None:
            message = result.error or "Failed to read menu data"
            if result.missing:
                raise NotFoundError(message)
            raise SyncError(message)
        return result.document

    def validate(self) -> MenuValidation:
        """Compare the live navigation with the stored document."""
        html_menu = self._extract_html_menu()
        document = self.load_document()
        report = compare_menus(html_menu, document.main_menu)
        return MenuValidation(
            report=report,
            html_menu=html_menu,
            document=document,
            last_checked=datetime.now(UTC),
        )

    def summary(self) -> tuple[MenuDocument, SyncStatusSummary]:
        """Current document plus a sync check that never fails the read.

        Raises:
            NotFoundError: If the document does not exist.
            SyncError: If the document cannot be parsed.
        """
        document = self.load_document()
        try:
            validation = self.validate()
        except (NotFoundError, SyncError) as e:
            logger.warning(f"Menu sync check failed: {e}")
            return document, SyncStatusSummary(False, 0, datetime.now(UTC))
        return document, SyncStatusSummary(
            is_in_sync=validation.report.is_in_sync,
            issue_count=validation.report.total_issues,
            last_checked=validation.last_checked,
        )

    def auto_sync(self) -> AutoSyncOutcome:
        """Merge HTML-only entries into the document and persist it.

        Either the whole merged document is written or nothing is.
        """
        validation = self.validate()
        if validation.report.is_in_sync:
            return AutoSyncOutcome(
                message="Menus are already in sync",
                added_items=[],
                was_already_in_sync=True,
                synced_menu=validation.json_menu,
            )

        result = auto_sync_menus(validation.html_menu, validation.json_menu)
        document = validation.document
        document.main_menu = result.synced_menu
        self._store.save(document, synced=True)

        logger.info(f"Menu auto-sync added {len(result.added_items)} item(s)")
        return AutoSyncOutcome(
            message=f"Auto-sync completed. {len(result.added_items)} items added.",
            added_items=result.added_items,
            was_already_in_sync=False,
            synced_menu=result.synced_menu,
            skipped_ids=result.skipped_ids,
        )

    def detailed_status(self) -> tuple[MenuValidation, FileStatus, FileStatus]:
        """Validation plus file facts for the HTML source and the JSON document."""
        validation = self.validate()
        html_status = file_status(
            self._config.menu_source_html_path, len(validation.html_menu)
        )
        json_status = file_status(self._store.path, len(validation.json_menu))
        return validation, html_status, json_status

    def replace_menu(self, entries: list[MenuEntry]) -> MenuWriteOutcome:
        """Replace the whole menu and regenerate the navigation markup.

        Raises:
            ValidationError: If an id is used more than once in the tree.
        """
        duplicates = find_duplicate_ids(entries)
        if duplicates:
            raise ValidationError("Menu ids must be unique", details={"duplicateIds": duplicates})

        result = self._store.load()
        document = result.document if result.document is not None else MenuDocument()
        document.main_menu = renumber(entries)
        return self._write(document)

    def delete_entry(self, entry_id: str) -> MenuWriteOutcome:
        """Remove a top-level or nested entry and regenerate the markup.

        Raises:
            NotFoundError: If no entry has ``entry_id``.
        """
        document = self.load_document()
        remaining, removed = remove_entry(document.main_menu, entry_id)
        if not removed:
            raise NotFoundError(f"Menu item not found: {entry_id}")
        document.main_menu = remaining
        return self._write(document)

    def _write(self, document: MenuDocument) -> MenuWriteOutcome:
        """Persist ``document`` and regenerate the navigation markup together.

        Every HTML file is read and its new content written to a temp file
        before the document is saved. A failure up to and including the save
        leaves the document and every HTML file as they were. Once the save
        succeeds the staged files are swapped in; a file that cannot be
        swapped is logged and left out of ``updated_html_files``.

        Raises:
            StorageError: If an HTML file or the document cannot be read or written.
        """
        menu_html = render_menu_html(document.main_menu, self._config.menu_list_id)
        staged = self._stage_rewrites(self._plan_rewrites(menu_html))
        try:
            saved = self._store.save(document)
        except BaseException:
            _discard(staged)
            raise
        return MenuWriteOutcome(document=saved, updated_html_files=self._commit_rewrites(staged))

    def _plan_rewrites(self, menu_html: str) -> list[tuple[Path, str]]:
        """New content for every configured HTML file whose navigation changes.

        Files that are missing or have no recognizable block are skipped with
        a warning; the menu document stays the source of truth.
        """
        rewrites: list[tuple[Path, str]] = []
        for html_path in self._config.menu_html_paths:
            if not html_path.exists():
                logger.warning(f"Skipping menu update, file not found: {html_path}")
                continue

            try:
                content = html_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to read {html_path}: {e}")
                raise StorageError(
                    f"Failed to update menu in {html_path.name}", details=str(e)
                ) from e

            replaced = replace_menu_block(
                content, menu_html, self._config.menu.block_anchor, self._config.menu_list_id
            )
            if replaced is None:
                logger.warning(f"Could not find menu structure in {html_path}")
                continue
            if replaced != content:
                rewrites.append((html_path, replaced))
        return rewrites

    def _stage_rewrites(self, rewrites: list[tuple[Path, str]]) -> list[tuple[Path, Path]]:
        staged: list[tuple[Path, Path]] = []
        for html_path, content in rewrites:
            try:
                staged.append((html_path, stage_text(html_path, content)))
            except OSError as e:
                logger.error(f"Failed to update menu in {html_path}: {e}")
                _discard(staged)
                raise StorageError(
                    f"Failed to update menu in {html_path.name}", details=str(e)
                ) from e
        return staged

    def _commit_rewrites(self, staged: list[tuple[Path, Path]]) -> list[str]:
        updated: list[str] = []
        for html_path, staged_path in staged:
            try:
                os.replace(staged_path, html_path)
            except OSError as e:
                logger.error(f"Menu saved but {html_path} could not be replaced: {e}")
                staged_path.unlink(missing_ok=True)
                continue
            logger.info(f"Updated menu in {html_path}")
            updated.append(html_path.name)
        return updated


def _discard(staged: list[tuple[Path, Path]]) -> None:
    for _, staged_path in staged:
        staged_path.unlink(missing_ok=True)
