"""Pydantic schemas for API requests and responses.

Wire names are camelCase to match the menu document and the admin panel.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from normand.menu.models import MenuDocument, MenuEntry, SyncReport


class ApiModel(BaseModel):
    """Base for API models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(ApiModel):
    """Body of every error response."""

    error: str
    details: Optional[Any] = None


# =============================================================================
# Auth
# =============================================================================


class LoginRequest(ApiModel):
    """Admin login request."""

    password: str = Field(..., min_length=1)


class LoginResponse(ApiModel):
    """Issued admin token."""

    success: bool = True
    token: str
    expires_at: datetime


# =============================================================================
# Menu
# =============================================================================


class SyncStatus(ApiModel):
    """Lightweight sync state attached to plain menu reads."""

    is_in_sync: bool
    issue_count: int
    last_checked: datetime


class MenuResponse(MenuDocument):
    """The stored menu document plus its sync state."""

    sync_status: SyncStatus = Field(..., alias="syncStatus")


class MenuValidationResponse(ApiModel):
    """Full comparison of the HTML navigation and the JSON document."""

    type: Literal["sync_validation"] = "sync_validation"
    success: bool = True
    sync: SyncReport
    html_menu: list[MenuEntry]
    json_menu: list[MenuEntry]
    can_sync: bool = True
    last_checked: datetime


class FileStatusModel(ApiModel):
    """Filesystem facts about one menu source."""

    path: str
    exists: bool
    last_modified: Optional[datetime] = None
    item_count: int


class DetailedStatusResponse(ApiModel):
    """Validation plus file facts for both menu sources."""

    type: Literal["detailed_status"] = "detailed_status"
    success: bool = True
    sync: SyncReport
    html_menu: list[MenuEntry]
    json_menu: list[MenuEntry]
    can_sync: bool = True
    last_checked: datetime
    files: dict[str, FileStatusModel]


class AutoSyncResponse(ApiModel):
    """Outcome of an auto-sync."""

    type: Literal["auto_sync"] = "auto_sync"
    success: bool = True
    message: str
    added_items: list[MenuEntry] = Field(default_factory=list)
    was_already_in_sync: bool
    synced_menu: list[MenuEntry] = Field(default_factory=list)
    skipped_ids: list[str] = Field(default_factory=list)


class MenuUpdate(ApiModel):
    """Request to replace the whole menu."""

    main_menu: list[MenuEntry]


class MenuWriteResponse(ApiModel):
    """Outcome of replacing the menu or deleting an entry."""

    success: bool = True
    message: str
    data: MenuDocument
    updated_html_files: list[str] = Field(default_factory=list)


# =============================================================================
# Pages
# =============================================================================


class LanguageInfo(ApiModel):
    """A supported site language."""

    name: str
    default: bool = False
    rtl: bool = False


class PageInfoModel(ApiModel):
    """A page file in one language."""

    filename: str
    page_name: str
    language: str
    language_name: str
    title: str
    path: str


class PagesResponse(ApiModel):
    """All pages grouped by page name and language."""

    pages: dict[str, dict[str, PageInfoModel]]
    languages: dict[str, LanguageInfo]


class PageContentResponse(ApiModel):
    """Editable page-level fields."""

    title: str
    h1: str
    meta_description: Optional[str] = None
    main_content: str
    language: str
    filename: str


class PageUpdateRequest(ApiModel):
    """Page-level changes; empty or missing fields are left untouched."""

    title: Optional[str] = None
    h1: Optional[str] = None
    meta_description: Optional[str] = None
    main_content: Optional[str] = None


class UpdateResponse(ApiModel):
    """Outcome of a page or section update."""

    success: bool = True
    message: str
    filename: str


class SectionModel(ApiModel):
    """A page section and the current value of each region."""

    id: str
    name: str
    type: str
    visible: bool
    content: dict[str, str]


class SectionsResponse(ApiModel):
    """Sections found in a page."""

    schema_version: int
    sections: list[SectionModel]
    language: str
    filename: str


class SectionUpdateRequest(ApiModel):
    """New region values and/or visibility for one section."""

    content: Optional[dict[str, str]] = None
    visible: Optional[bool] = None


class TranslationSummaryModel(ApiModel):
    status: str
    message: str
    missing_count: int
    recommendation: str


class TranslationGapModel(ApiModel):
    """A page missing in one language."""

    page_name: str
    language: str
    source_file: str
    missing_file: str
    critical: bool
    urgency: Literal["HIGH", "MEDIUM"]


class PageTranslationModel(ApiModel):
    page_name: str
    language: str
    source_file: str
    translated_file: str
    has_translation: bool
    priority: Literal["CRITICAL", "NORMAL"]
    status: Literal["COMPLETE", "MISSING"]


class LanguageCoverageModel(ApiModel):
    language_name: str
    expected_pages: int
    translated_pages: int
    page_files: int
    completion_percentage: int
    summary: TranslationSummaryModel


class TranslationStatusResponse(ApiModel):
    """Translation coverage of the default-language pages."""

    default_language: str
    source_pages: int
    expected_translations: int
    translated_pages: int
    completion_percentage: int
    summary: TranslationSummaryModel
    languages: dict[str, LanguageCoverageModel]
    pages: list[PageTranslationModel]
    gaps: list[TranslationGapModel]
    timestamp: datetime
