"""Shared pytest fixtures for all tests.

Every test gets its own throwaway site root with a home page in both
languages and a menu document that matches the home page navigation.
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient
from werkzeug.security import generate_password_hash

from helpers import ADMIN_PASSWORD, TOKEN_SECRET, menu_document, render_page
from normand.api.deps import get_settings
from normand.auth import issue_token
from normand.config import Config, load_settings
from normand.main import app


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Clear cached settings around each test."""
    load_settings.cache_clear()
    get_settings.cache_clear()
    yield
    load_settings.cache_clear()
    get_settings.cache_clear()


@pytest.fixture
def site_root(tmp_path):
    """Create a site root with English and Hebrew home pages and a menu document."""
    root = tmp_path / "site"
    (root / "data").mkdir(parents=True)
    (root / "index.html").write_text(render_page(), encoding="utf-8")
    (root / "index.he.html").write_text(
        render_page(lang="he", title="נורמנד", heading="ברוכים הבאים"), encoding="utf-8"
    )
    (root / "admin.html").write_text("<html><head><title>Admin</title></head></html>")
    (root / "data" / "menu.json").write_text(json.dumps(menu_document(), indent=2))
    return root


@pytest.fixture
def config(site_root):
    """Explicit configuration for the temporary site."""
    return Config(
        site_root=site_root,
        admin_password_hash=generate_password_hash(ADMIN_PASSWORD),
        admin_token_secret=TOKEN_SECRET,
    )


@pytest.fixture
def auth_headers():
    """Authorization header carrying a valid admin token."""
    token, _ = issue_token(TOKEN_SECRET, 3600)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(config):
    """Async test client bound to the temporary site."""
    app.dependency_overrides[get_settings] = lambda: config
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
