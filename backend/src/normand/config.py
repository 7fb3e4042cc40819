# backend/src/normand/config.py
"""Configuration system for the Normand site admin backend.

This module handles loading settings from environment variables and an INI
file in the site root, providing sensible defaults, and computing derived
paths for the menu document and the HTML pages that carry the navigation.
"""

from configparser import ConfigParser
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional
import os
import re


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# Schema: section -> key -> (type, default, min, max, description)
CONFIG_SCHEMA: dict[str, dict[str, tuple[type, Any, Any, Any, str]]] = {
    "menu": {
        "json_file": (str, "data/menu.json", None, None, "Menu document, relative to site root"),
        "html_files": (
            str,
            "index.html",
            None,
            None,
            "Comma separated HTML files carrying the navigation; first is the sync source",
        ),
        "nav_selector": (str, "#primary-menu", None, None, "CSS selector of the top-level nav list"),
        "submenu_class": (str, "sub-menu", None, None, "Class of nested sub-menu lists"),
        "block_anchor": (
            str,
            '<div class="contact-links">',
            None,
            None,
            "Markup that follows the nav block in the page",
        ),
    },
    "auth": {
        "token_ttl_hours": (int, 24, 1, 720, "Lifetime of admin tokens"),
    },
    "pages": {
        "default_language": (str, "en", None, None, "Language served from name.html"),
        "languages": (str, "en,he", None, None, "Comma separated supported languages"),
        "rtl_languages": (str, "he", None, None, "Languages rendered right-to-left"),
    },
}


@dataclass(frozen=True)
class MenuConfig:
    """Menu storage and markup configuration."""

    json_file: str
    html_files: str
    nav_selector: str
    submenu_class: str
    block_anchor: str


@dataclass(frozen=True)
class AuthConfig:
    """Admin authentication configuration."""

    token_ttl_hours: int


@dataclass(frozen=True)
class PagesConfig:
    """Page store configuration."""

    default_language: str
    languages: str
    rtl_languages: str


def _split_list(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _load_section(
    parser: ConfigParser, section: str, schema: dict[str, tuple[type, Any, Any, Any, str]]
) -> dict[str, Any]:
    """Load and validate a configuration section.

    Args:
        parser: ConfigParser instance with loaded config
        section: Section name to load
        schema: Schema definition for the section

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If validation fails
    """
    result = {}

    for key, (typ, default, min_val, max_val, _) in schema.items():
        if parser.has_option(section, key):
            raw_value = parser.get(section, key)
            value: bool | int | float | str
            try:
                if typ is bool:
                    value = raw_value.lower() in ("true", "1", "yes", "on")
                elif typ is int:
                    value = int(raw_value)
                elif typ is float:
                    value = float(raw_value)
                else:
                    value = raw_value
            except ValueError as e:
                raise ConfigError(
                    f"Invalid value for [{section}].{key}: {raw_value!r} (expected {typ.__name__})"
                ) from e
        else:
            value = default

        if typ in (int, float) and value is not None:
            if min_val is not None and value < min_val:
                raise ConfigError(
                    f"Value for [{section}].{key} is {value}, but minimum is {min_val}"
                )
            if max_val is not None and value > max_val:
                raise ConfigError(
                    f"Value for [{section}].{key} is {value}, but maximum is {max_val}"
                )

        result[key] = value

    return result


def _load_config(config_path: Optional[Path] = None) -> "Config":
    """Load configuration from an INI file (internal use only).

    Returns a Config with a placeholder site_root that load_settings()
    replaces with the SITE_ROOT environment variable.

    Raises:
        ConfigError: If validation fails
    """
    parser = ConfigParser(interpolation=None)

    if config_path and config_path.exists():
        parser.read(config_path, encoding="utf-8")

    menu_values = _load_section(parser, "menu", CONFIG_SCHEMA["menu"])
    auth_values = _load_section(parser, "auth", CONFIG_SCHEMA["auth"])
    pages_values = _load_section(parser, "pages", CONFIG_SCHEMA["pages"])

    pages = PagesConfig(**pages_values)
    if pages.default_language not in _split_list(pages.languages):
        raise ConfigError(
            f"[pages].default_language {pages.default_language!r} "
            f"is not listed in [pages].languages"
        )
    if not re.fullmatch(r"#[\w-]+", menu_values["nav_selector"]):
        raise ConfigError(
            f"[menu].nav_selector must be an id selector, got {menu_values['nav_selector']!r}"
        )
    if not _split_list(menu_values["html_files"]):
        raise ConfigError("[menu].html_files must name at least one file")

    return Config(
        site_root=Path("."),  # Placeholder, will be overwritten
        menu=MenuConfig(**menu_values),
        auth=AuthConfig(**auth_values),
        pages=pages,
    )


@dataclass(frozen=True)
class Config:
    """Complete application configuration.

    Passed explicitly into services and request dependencies; nothing reads
    credentials or paths from module-level globals.
    """

    site_root: Path
    admin_password_hash: Optional[str] = None
    admin_token_secret: Optional[str] = None
    cors_origins: tuple[str, ...] = ("http://localhost:7001",)

    # Section configs - defaults set in __post_init__
    menu: MenuConfig = None  # type: ignore[assignment]
    auth: AuthConfig = None  # type: ignore[assignment]
    pages: PagesConfig = None  # type: ignore[assignment]

    def __post_init__(self):
        """Initialize section configs with defaults if not provided."""
        if self.menu is None:
            values = {key: default for key, (_, default, _, _, _) in CONFIG_SCHEMA["menu"].items()}
            object.__setattr__(self, "menu", MenuConfig(**values))
        if self.auth is None:
            values = {key: default for key, (_, default, _, _, _) in CONFIG_SCHEMA["auth"].items()}
            object.__setattr__(self, "auth", AuthConfig(**values))
        if self.pages is None:
            values = {key: default for key, (_, default, _, _, _) in CONFIG_SCHEMA["pages"].items()}
            object.__setattr__(self, "pages", PagesConfig(**values))

    @property
    def menu_json_path(self) -> Path:
        """Path to the JSON menu document."""
        return self.site_root / self.menu.json_file

    @property
    def menu_html_paths(self) -> list[Path]:
        """HTML files whose navigation block is regenerated from the menu document."""
        return [self.site_root / name for name in _split_list(self.menu.html_files)]

    @property
    def menu_source_html_path(self) -> Path:
        """HTML file the live navigation is extracted from."""
        return self.menu_html_paths[0]

    @property
    def menu_list_id(self) -> str:
        """Element id of the navigation list (the selector without its leading #)."""
        return self.menu.nav_selector.lstrip("#")

    @property
    def languages(self) -> list[str]:
        """Supported page languages."""
        return _split_list(self.pages.languages)

    @property
    def rtl_languages(self) -> list[str]:
        """Languages rendered right-to-left."""
        return _split_list(self.pages.rtl_languages)

    @property
    def token_ttl_seconds(self) -> int:
        """Admin token lifetime in seconds."""
        return self.auth.token_ttl_hours * 3600


@lru_cache(maxsize=1)
def load_settings() -> Config:
    """Load settings from environment variables and config file.

    Settings are cached for the lifetime of the application.
    Use load_settings.cache_clear() to reload settings.

    Raises:
        ValueError: If SITE_ROOT is not set.
        ConfigError: If site.ini contains invalid values.
    """
    site_root_str = os.getenv("SITE_ROOT")
    if not site_root_str:
        raise ValueError("SITE_ROOT environment variable must be set")

    site_root = Path(site_root_str)

    config_file = site_root / "site.ini"
    try:
        config_exists = config_file.exists()
    except PermissionError:
        config_exists = False
    base_config = _load_config(config_file if config_exists else None)

    cors_env = os.getenv("NORMAND_CORS_ORIGINS")
    cors_origins = tuple(_split_list(cors_env)) if cors_env else Config.cors_origins

    return Config(
        site_root=site_root,
        admin_password_hash=os.getenv("ADMIN_PASSWORD_HASH"),
        admin_token_secret=os.getenv("ADMIN_TOKEN_SECRET"),
        cors_origins=cors_origins,
        menu=base_config.menu,
        auth=base_config.auth,
        pages=base_config.pages,
    )
