"""Page store tests."""

import pytest

from normand.errors import NotFoundError, StorageError, ValidationError
from normand.pages.store import PageStore


@pytest.fixture
def store(site_root):
    return PageStore(site_root, ["en", "he"], "en")


def test_filename_per_language(store):
    assert store.filename("en", "about") == "about.html"
    assert store.filename("he", "about") == "about.he.html"
    assert store.filename("en", "") == "index.html"


def test_resolve_existing_pages(store, site_root):
    assert store.resolve("en", "index") == site_root / "index.html"
    assert store.resolve("he", "index") == site_root / "index.he.html"


def test_resolve_unsupported_language(store):
    with pytest.raises(ValidationError):
        store.resolve("fr", "index")


@pytest.mark.parametrize("name", ["../secret", "index.he", ".hidden", "a/b", "-dash"])
def test_resolve_rejects_non_page_names(store, name):
    with pytest.raises(ValidationError):
        store.resolve("en", name)


def test_resolve_hides_admin_files(store):
    with pytest.raises(NotFoundError):
        store.resolve("en", "admin")


def test_resolve_missing_page(store):
    with pytest.raises(NotFoundError):
        store.resolve("he", "about")


def test_read_and_write(store, site_root):
    path = site_root / "index.html"
    store.write(path, "<html><body>שלום</body></html>")
    assert store.read(path) == "<html><body>שלום</body></html>"


def test_read_failure_is_storage_error(store, site_root):
    with pytest.raises(StorageError):
        store.read(site_root / "data")


def test_list_pages_groups_languages(store, site_root):
    (site_root / "about.html").write_text("<html><head><title> About </title></head></html>")
    (site_root / "privacy.html").write_text("<html><body>No title</body></html>")

    pages = store.list_pages()

    assert sorted(pages) == ["about", "index", "privacy"]
    assert sorted(pages["index"]) == ["en", "he"]
    home_he = pages["index"]["he"]
    assert home_he.filename == "index.he.html"
    assert home_he.language_name == "עברית"
    assert home_he.title == "נורמנד"
    assert pages["about"]["en"].title == "About"
    assert pages["privacy"]["en"].title == "privacy.html"


def test_list_pages_skips_admin_files(store):
    assert "admin" not in store.list_pages()


def test_unknown_language_suffix_belongs_to_default_language(store, site_root):
    (site_root / "report.2024.html").write_text("<title>Report</title>")

    pages = store.list_pages()

    assert pages["report.2024"]["en"].filename == "report.2024.html"
