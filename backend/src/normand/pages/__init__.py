"""Per-language HTML pages and their editable regions."""

from normand.pages.content import PageContent, PageUpdate, apply_page_update, extract_page_content
from normand.pages.sections import (
    SECTION_CATALOG,
    SECTION_SCHEMA_VERSION,
    read_sections,
    update_section,
)
from normand.pages.store import PageInfo, PageStore
from normand.pages.translations import (
    LanguageCoverage,
    PageTranslation,
    TranslationGap,
    TranslationStatus,
    TranslationSummary,
    translation_status,
)

__all__ = [
    "LanguageCoverage",
    "PageContent",
    "PageInfo",
    "PageStore",
    "PageTranslation",
    "PageUpdate",
    "SECTION_CATALOG",
    "SECTION_SCHEMA_VERSION",
    "TranslationGap",
    "TranslationStatus",
    "TranslationSummary",
    "apply_page_update",
    "extract_page_content",
    "read_sections",
    "translation_status",
    "update_section",
]
