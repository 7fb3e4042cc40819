"""Menu document storage tests."""

import json

import pytest

from helpers import menu_document
from normand.errors import StorageError
from normand.menu.models import MenuDocument, MenuEntry
from normand.menu.store import MenuStore, file_status


@pytest.fixture
def json_path(tmp_path):
    path = tmp_path / "data" / "menu.json"
    path.parent.mkdir()
    path.write_text(json.dumps(menu_document()), encoding="utf-8")
    return path


class TestLoad:
    def test_loads_document(self, json_path):
        result = MenuStore(json_path).load()

        assert result.ok
        assert [e.id for e in result.document.main_menu] == ["menu-item-home", "menu-item-about"]
        assert result.document.main_menu[1].children[0].id == "menu-item-team"
        assert result.document.last_updated == "2024-01-01T00:00:00+00:00"

    def test_missing_file(self, tmp_path):
        result = MenuStore(tmp_path / "menu.json").load()

        assert not result.ok
        assert result.missing
        assert result.document is None

    def test_invalid_json(self, json_path):
        json_path.write_text("{not json", encoding="utf-8")

        result = MenuStore(json_path).load()

        assert not result.ok
        assert not result.missing
        assert result.error.startswith("Failed to load menu JSON")

    def test_top_level_must_be_object(self, json_path):
        json_path.write_text("[]", encoding="utf-8")
        assert not MenuStore(json_path).load().ok

    def test_invalid_entries(self, json_path):
        json_path.write_text(json.dumps({"mainMenu": [{"id": ""}]}), encoding="utf-8")

        result = MenuStore(json_path).load()

        assert not result.ok
        assert "invalid field" in result.error

    def test_missing_main_menu_is_empty(self, json_path):
        json_path.write_text("{}", encoding="utf-8")
        assert MenuStore(json_path).load().document.main_menu == []


class TestSave:
    def test_save_stamps_last_updated(self, json_path):
        store = MenuStore(json_path)
        document = store.load().document

        saved = store.save(document)

        data = json.loads(json_path.read_text(encoding="utf-8"))
        assert data["lastUpdated"] == saved.last_updated
        assert data["lastUpdated"] != "2024-01-01T00:00:00+00:00"
        assert "lastSyncedAt" not in data

    def test_synced_save_stamps_both(self, json_path):
        store = MenuStore(json_path)

        saved = store.save(store.load().document, synced=True)

        data = json.loads(json_path.read_text(encoding="utf-8"))
        assert data["lastSyncedAt"] == saved.last_synced_at == saved.last_updated

    def test_unknown_fields_survive(self, json_path):
        data = menu_document()
        data["footerMenu"] = [{"id": "privacy"}]
        data["mainMenu"][0]["icon"] = "house"
        json_path.write_text(json.dumps(data), encoding="utf-8")
        store = MenuStore(json_path)

        store.save(store.load().document)

        written = json.loads(json_path.read_text(encoding="utf-8"))
        assert written["footerMenu"] == [{"id": "privacy"}]
        assert written["mainMenu"][0]["icon"] == "house"

    def test_writes_utf8_and_indents(self, tmp_path):
        path = tmp_path / "menu.json"
        document = MenuDocument(main_menu=[MenuEntry(id="home", title="בית", url="/", order=1)])

        MenuStore(path).save(document)

        text = path.read_text(encoding="utf-8")
        assert "בית" in text
        assert '\n  "mainMenu"' in text

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "menu.json"
        MenuStore(path).save(MenuDocument())
        assert path.exists()

    def test_leaves_no_temp_files(self, json_path):
        store = MenuStore(json_path)
        store.save(store.load().document)
        assert [p.name for p in json_path.parent.iterdir()] == ["menu.json"]

    def test_write_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "data"
        blocker.write_text("not a directory")

        with pytest.raises(StorageError) as exc_info:
            MenuStore(blocker / "menu.json").save(MenuDocument())

        assert exc_info.value.status_code == 500


def test_status_reports_file_facts(json_path):
    status = MenuStore(json_path).status()

    assert status.exists
    assert status.item_count == 2
    assert status.last_modified is not None
    assert status.path == str(json_path)


def test_file_status_for_missing_file(tmp_path):
    status = file_status(tmp_path / "missing.html", 0)

    assert not status.exists
    assert status.last_modified is None
