"""Translation coverage of the site pages.

Every page that exists in the default language is expected in each other
supported language. Pages found only in a translation are not counted.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from normand.constants import CRITICAL_PAGES, LANGUAGE_NAMES
from normand.pages.store import PageStore

logger = logging.getLogger(__name__)


@dataclass
class TranslationGap:
    """A default-language page with no counterpart in one language."""

    page_name: str
    language: str
    source_file: str
    missing_file: str
    critical: bool

    @property
    def urgency(self) -> str:
        return "HIGH" if self.critical else "MEDIUM"


@dataclass
class PageTranslation:
    """Translation state of one page in one language."""

    page_name: str
    language: str
    source_file: str
    translated_file: str
    has_translation: bool
    critical: bool

    @property
    def priority(self) -> str:
        return "CRITICAL" if self.critical else "NORMAL"

    @property
    def status(self) -> str:
        return "COMPLETE" if self.has_translation else "MISSING"


@dataclass
class TranslationSummary:
    status: str
    message: str
    missing_count: int
    recommendation: str


@dataclass
class LanguageCoverage:
    """How many default-language pages one language covers."""

    language: str
    language_name: str
    expected_pages: int
    translated_pages: int
    page_files: int
    completion_percentage: int
    summary: TranslationSummary


@dataclass
class TranslationStatus:
    """Site-wide translation report."""

    default_language: str
    source_pages: int
    expected_translations: int
    translated_pages: int
    completion_percentage: int
    summary: TranslationSummary
    languages: dict[str, LanguageCoverage] = field(default_factory=dict)
    pages: list[PageTranslation] = field(default_factory=list)
    gaps: list[TranslationGap] = field(default_factory=list)


def completion_percentage(translated: int, expected: int) -> int:
    """Share of ``expected`` that is ``translated``, rounded half up.

    Nothing expected counts as 0%.
    """
    if expected <= 0:
        return 0
    return (200 * translated + expected) // (2 * expected)


def summarize(
    percentage: int, missing_count: int, language_name: Optional[str] = None
) -> TranslationSummary:
    """Status label, message and next step for a completion percentage."""
    if percentage == 100:
        status = "COMPLETE"
    elif percentage >= 80:
        status = "MOSTLY COMPLETE"
    elif percentage >= 50:
        status = "IN PROGRESS"
    else:
        status = "NEEDS ATTENTION"

    translations = f"{language_name} translations" if language_name else "translations"
    if missing_count > 0:
        plural = "s" if missing_count > 1 else ""
        noun = f"{language_name} translation" if language_name else "translation"
        recommendation = f"Create {missing_count} missing {noun}{plural}"
    else:
        recommendation = f"All pages have {translations}"

    return TranslationSummary(
        status=status,
        message=f"{percentage}% of pages have {translations}",
        missing_count=missing_count,
        recommendation=recommendation,
    )


def translation_status(store: PageStore) -> TranslationStatus:
    """Compare every default-language page against the other languages."""
    default = store.default_language
    targets = [lang for lang in store.languages if lang != default]
    grouped = store.list_pages()
    sources = {name: by_lang[default] for name, by_lang in grouped.items() if default in by_lang}

    pages: list[PageTranslation] = []
    gaps: list[TranslationGap] = []
    coverage: dict[str, LanguageCoverage] = {}

    for lang in targets:
        translated = 0
        for page_name, source in sources.items():
            critical = page_name in CRITICAL_PAGES
            translation = grouped[page_name].get(lang)
            if translation:
                translated_file = translation.filename
            else:
                translated_file = store.filename(lang, page_name)
            pages.append(
                PageTranslation(
                    page_name=page_name,
                    language=lang,
                    source_file=source.filename,
                    translated_file=translated_file,
                    has_translation=translation is not None,
                    critical=critical,
                )
            )
            if translation:
                translated += 1
            else:
                gaps.append(
                    TranslationGap(
                        page_name=page_name,
                        language=lang,
                        source_file=source.filename,
                        missing_file=translated_file,
                        critical=critical,
                    )
                )

        name = LANGUAGE_NAMES.get(lang, lang)
        percentage = completion_percentage(translated, len(sources))
        coverage[lang] = LanguageCoverage(
            language=lang,
            language_name=name,
            expected_pages=len(sources),
            translated_pages=translated,
            page_files=sum(1 for by_lang in grouped.values() if lang in by_lang),
            completion_percentage=percentage,
            summary=summarize(percentage, len(sources) - translated, name),
        )

    expected = len(sources) * len(targets)
    translated_total = sum(c.translated_pages for c in coverage.values())
    percentage = completion_percentage(translated_total, expected)
    if gaps:
        logger.info(f"{len(gaps)} page translation(s) missing")

    return TranslationStatus(
        default_language=default,
        source_pages=len(sources),
        expected_translations=expected,
        translated_pages=translated_total,
        completion_percentage=percentage,
        summary=summarize(percentage, expected - translated_total),
        languages=coverage,
        pages=pages,
        gaps=gaps,
    )
