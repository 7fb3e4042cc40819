"""Page and section editing endpoints."""

from datetime import datetime, UTC

from fastapi import APIRouter, Depends

from normand.api.deps import get_page_store, get_settings, require_admin
from normand.api.schemas import (
    LanguageCoverageModel,
    LanguageInfo,
    PageContentResponse,
    PageInfoModel,
    PagesResponse,
    PageTranslationModel,
    PageUpdateRequest,
    SectionModel,
    SectionsResponse,
    SectionUpdateRequest,
    TranslationGapModel,
    TranslationStatusResponse,
    TranslationSummaryModel,
    UpdateResponse,
)
from normand.config import Config
from normand.constants import LANGUAGE_NAMES
from normand.pages.content import PageUpdate, apply_page_update, extract_page_content
from normand.pages.sections import SECTION_SCHEMA_VERSION, read_sections, update_section
from normand.pages.store import PageStore
from normand.pages.translations import TranslationSummary, translation_status

router = APIRouter(prefix="/api/admin", tags=["pages"], dependencies=[Depends(require_admin)])


def _languages(settings: Config) -> dict[str, LanguageInfo]:
    return {
        lang: LanguageInfo(
            name=LANGUAGE_NAMES.get(lang, lang),
            default=lang == settings.pages.default_language,
            rtl=lang in settings.rtl_languages,
        )
        for lang in settings.languages
    }


@router.get("/languages", response_model=dict[str, LanguageInfo])
async def get_languages(settings: Config = Depends(get_settings)) -> dict[str, LanguageInfo]:
    """Get the supported site languages."""
    return _languages(settings)


@router.get("/pages", response_model=PagesResponse)
async def list_pages(
    store: PageStore = Depends(get_page_store),
    settings: Config = Depends(get_settings),
) -> PagesResponse:
    """List page files grouped by page name and language."""
    pages = {
        page_name: {
            lang: PageInfoModel(
                filename=info.filename,
                page_name=info.page_name,
                language=info.language,
                language_name=info.language_name,
                title=info.title,
                path=info.path,
            )
            for lang, info in by_lang.items()
        }
        for page_name, by_lang in store.list_pages().items()
    }
    return PagesResponse(pages=pages, languages=_languages(settings))


@router.get("/page/{lang}/{name}", response_model=PageContentResponse)
async def get_page(
    lang: str,
    name: str,
    store: PageStore = Depends(get_page_store),
) -> PageContentResponse:
    """Get the editable fields of a page."""
    path = store.resolve(lang, name)
    content = extract_page_content(store.read(path))
    return PageContentResponse(
        title=content.title,
        h1=content.h1,
        meta_description=content.meta_description,
        main_content=content.main_content,
        language=lang,
        filename=path.name,
    )


@router.post("/page/{lang}/{name}", response_model=UpdateResponse)
async def update_page(
    lang: str,
    name: str,
    data: PageUpdateRequest,
    store: PageStore = Depends(get_page_store),
    settings: Config = Depends(get_settings),
) -> UpdateResponse:
    """Update the editable fields of a page and stamp its language."""
    path = store.resolve(lang, name)
    update = PageUpdate(
        title=data.title,
        h1=data.h1,
        meta_description=data.meta_description,
        main_content=data.main_content,
    )
    html = apply_page_update(store.read(path), update, lang, rtl=lang in settings.rtl_languages)
    store.write(path, html)
    return UpdateResponse(
        message=f"Content updated for {LANGUAGE_NAMES.get(lang, lang)}",
        filename=path.name,
    )


@router.get("/sections/{lang}/{name}", response_model=SectionsResponse)
async def get_sections(
    lang: str,
    name: str,
    store: PageStore = Depends(get_page_store),
) -> SectionsResponse:
    """Get the catalog sections present in a page."""
    path = store.resolve(lang, name)
    sections = [
        SectionModel(
            id=section.id,
            name=section.name,
            type=section.type,
            visible=section.visible,
            content=section.content,
        )
        for section in read_sections(store.read(path))
    ]
    return SectionsResponse(
        schema_version=SECTION_SCHEMA_VERSION,
        sections=sections,
        language=lang,
        filename=path.name,
    )


@router.post("/section/{lang}/{name}/{section_id}", response_model=UpdateResponse)
async def update_page_section(
    lang: str,
    name: str,
    section_id: str,
    data: SectionUpdateRequest,
    store: PageStore = Depends(get_page_store),
) -> UpdateResponse:
    """Update regions and/or visibility of one section."""
    path = store.resolve(lang, name)
    html = update_section(store.read(path), section_id, data.content, data.visible)
    store.write(path, html)
    return UpdateResponse(
        message=f'Section "{section_id}" updated successfully',
        filename=path.name,
    )


def _summary(summary: TranslationSummary) -> TranslationSummaryModel:
    return TranslationSummaryModel(
        status=summary.status,
        message=summary.message,
        missing_count=summary.missing_count,
        recommendation=summary.recommendation,
    )


@router.get("/translation-status", response_model=TranslationStatusResponse)
async def get_translation_status(
    store: PageStore = Depends(get_page_store),
) -> TranslationStatusResponse:
    """Report which default-language pages lack translations."""
    status = translation_status(store)
    return TranslationStatusResponse(
        default_language=status.default_language,
        source_pages=status.source_pages,
        expected_translations=status.expected_translations,
        translated_pages=status.translated_pages,
        completion_percentage=status.completion_percentage,
        summary=_summary(status.summary),
        languages={
            lang: LanguageCoverageModel(
                language_name=coverage.language_name,
                expected_pages=coverage.expected_pages,
                translated_pages=coverage.translated_pages,
                page_files=coverage.page_files,
                completion_percentage=coverage.completion_percentage,
                summary=_summary(coverage.summary),
            )
            for lang, coverage in status.languages.items()
        },
        pages=[
            PageTranslationModel(
                page_name=page.page_name,
                language=page.language,
                source_file=page.source_file,
                translated_file=page.translated_file,
                has_translation=page.has_translation,
                priority=page.priority,
                status=page.status,
            )
            for page in status.pages
        ],
        gaps=[
            TranslationGapModel(
                page_name=gap.page_name,
                language=gap.language,
                source_file=gap.source_file,
                missing_file=gap.missing_file,
                critical=gap.critical,
                urgency=gap.urgency,
            )
            for gap in status.gaps
        ],
        timestamp=datetime.now(UTC),
    )
