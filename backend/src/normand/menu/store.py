"""JSON-backed menu document storage."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime, UTC
from pathlib import Path
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from normand.errors import StorageError
from normand.menu.models import MenuDocument

logger = logging.getLogger(__name__)


@dataclass
class MenuLoadResult:
    """Outcome of reading the menu document.

    ``missing`` distinguishes an absent file from a malformed one.
    """

    document: Optional[MenuDocument] = None
    error: Optional[str] = None
    missing: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class FileStatus:
    """Filesystem facts about a menu source, for status reporting."""

    path: str
    exists: bool
    last_modified: Optional[datetime]
    item_count: int


def file_status(path: Path, item_count: int) -> FileStatus:
    """Describe ``path`` without failing when it does not exist."""
    try:
        mtime = datetime.fromtimestamp(path.stat().st_mtime, UTC)
        exists = True
    except OSError:
        mtime = None
        exists = False
    return FileStatus(path=str(path), exists=exists, last_modified=mtime, item_count=item_count)


def stage_text(path: Path, text: str) -> Path:
    """Write ``text`` to a temp file beside ``path`` and return the temp file.

    The caller swaps it in with ``os.replace(staged, path)``, or unlinks it to
    abandon the write.

    Raises:
        OSError: If the temp file cannot be written.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return Path(tmp_name)


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class MenuStore:
    """Reads and replaces the menu document at ``json_path``.

    Writes replace the whole document; there is no locking, so concurrent
    writers race and the last one wins.
    """

    def __init__(self, json_path: Path) -> None:
        self._path = json_path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> MenuLoadResult:
        """Load the document, reporting problems instead of raising."""
        if not self._path.exists():
            return MenuLoadResult(error="Menu JSON file not found", missing=True)

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            return MenuLoadResult(error=f"Failed to load menu JSON: {e}")

        if not isinstance(data, dict):
            return MenuLoadResult(error="Failed to load menu JSON: top level is not an object")

        try:
            document = MenuDocument.model_validate(data)
        except PydanticValidationError as e:
            return MenuLoadResult(
                error=f"Failed to load menu JSON: {e.error_count()} invalid field(s)"
            )
        return MenuLoadResult(document=document)

    def save(self, document: MenuDocument, synced: bool = False) -> MenuDocument:
        """Replace the stored document with ``document``.

        Stamps ``lastUpdated`` (and ``lastSyncedAt`` when ``synced``) and writes
        pretty-printed UTF-8 JSON through a temp file, so readers never see a
        half-written document.

        Returns:
            The document as written, timestamps included.

        Raises:
            StorageError: If the file cannot be written.
        """
        now = _now_iso()
        document.last_updated = now
        if synced:
            document.last_synced_at = now

        payload = json.dumps(document.to_json_dict(), indent=2, ensure_ascii=False) + "\n"

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            staged = stage_text(self._path, payload)
            try:
                os.replace(staged, self._path)
            except BaseException:
                staged.unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Failed to save menu to {self._path}: {e}")
            raise StorageError("Failed to save menu data", details=str(e)) from e

        logger.info(
            f"Saved menu with {len(document.main_menu)} top-level item(s) to {self._path}"
        )
        return document

    def status(self) -> FileStatus:
        """File facts for the stored document."""
        result = self.load()
        count = len(result.document.main_menu) if result.document else 0
        return file_status(self._path, count)
