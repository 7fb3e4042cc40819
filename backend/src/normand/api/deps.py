"""FastAPI dependency injection functions."""

from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from normand.auth import verify_token
from normand.config import Config, load_settings
from normand.errors import AuthError
from normand.menu.service import MenuService
from normand.pages.store import PageStore

_bearer = HTTPBearer(auto_error=False)


@lru_cache
def get_settings() -> Config:
    """Get cached application settings."""
    return load_settings()


def get_menu_service(settings: Config = Depends(get_settings)) -> MenuService:
    """Get a MenuService bound to the configured site."""
    return MenuService(settings)


def get_page_store(settings: Config = Depends(get_settings)) -> PageStore:
    """Get a PageStore bound to the configured site."""
    return PageStore(settings.site_root, settings.languages, settings.pages.default_language)


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    settings: Config = Depends(get_settings),
) -> dict:
    """Require a valid admin token in the Authorization header.

    Returns:
        The token claims.

    Raises:
        AuthError: If the token is missing, invalid or expired.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("No token provided")
    if not settings.admin_token_secret:
        raise AuthError("Admin login is not configured")
    return verify_token(credentials.credentials, settings.admin_token_secret)
