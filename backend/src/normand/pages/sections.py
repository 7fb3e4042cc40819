"""Named content sections of the home page.

Sections and their editable regions form a fixed, versioned schema: clients
address a region by its stable section id and region name, never by CSS
selector. Bump SECTION_SCHEMA_VERSION whenever an id or region is renamed or
removed so stale clients can tell.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup, Tag

from normand.constants import HIDDEN_SECTION_CLASS
from normand.errors import NotFoundError, ValidationError
from normand.pages.content import parse_html, set_inner_html

logger = logging.getLogger(__name__)

SECTION_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class SectionDefinition:
    """A page section and the regions inside it that may be edited."""

    id: str
    name: str
    type: str
    selector: str
    regions: dict[str, str] = field(default_factory=dict)


SECTION_CATALOG: dict[str, SectionDefinition] = {
    definition.id: definition
    for definition in (
        SectionDefinition(
            id="banner",
            name="Hero Banner",
            type="banner",
            selector=".wp-block-normand-banner",
            regions={
                "subtitle": ".banner-subtitle",
                "title": ".banner-title .rotation-text-1",
                "scrollText": ".scroll-indicator span",
            },
        ),
        SectionDefinition(
            id="services",
            name="Services Section",
            type="services",
            selector=".wp-block-normand-services",
            regions={
                "subtitle": ".normand-services--subtitle",
                "title": ".normand-services--title",
                "content": ".normand-services--content",
                "privacyTitle": ".service-top--title",
                "privacyContent": ".service-top--content",
                "consumerTitle": ".service-middle--title",
                "consumerContent": ".service-middle--content",
                "insuranceTitle": ".service-bottom--title",
                "insuranceContent": ".service-bottom--content",
            },
        ),
        SectionDefinition(
            id="casestudies",
            name="Case Studies Section",
            type="heading",
            selector=".wp-block-normand-heading",
            regions={
                "subtitle": ".normand-heading--subtitle",
                "title": ".normand-heading--title",
            },
        ),
        SectionDefinition(
            id="testimonials",
            name="Testimonials Section",
            type="testimonials",
            selector=".wp-block-normand-testimonials",
            regions={
                "subtitle": ".normand-testimonials--subtitle",
                "title": ".normand-testimonials--title",
                "content": ".normand-testimonials--content",
            },
        ),
        SectionDefinition(
            id="team",
            name="Team Section",
            type="team",
            selector=".wp-block-normand-team",
            regions={
                "subtitle": ".normand-team--subtitle",
                "title": ".normand-team--title",
                "founderRole": ".first-team-role",
                "founderName": ".first-team-name",
                "founderBio": ".first-team-body",
            },
        ),
        SectionDefinition(
            id="contact",
            name="Contact Section",
            type="contact",
            selector=".wp-block-normand-contact",
            regions={
                "subtitle": ".normand-contact--subtitle",
                "title": ".normand-contact--title",
                "formNote": ".normand-contact--form-note",
            },
        ),
    )
}


@dataclass
class SectionContent:
    """A section as found in a page."""

    id: str
    name: str
    type: str
    visible: bool
    content: dict[str, str]


def _is_hidden(element: Tag) -> bool:
    return HIDDEN_SECTION_CLASS in (element.get("class") or [])


def _region_value(region: Tag) -> str:
    return region.decode_contents() or region.get_text()


def read_sections(html: str) -> list[SectionContent]:
    """Every catalog section present in the page, in catalog order."""
    soup = parse_html(html)
    sections: list[SectionContent] = []
    for definition in SECTION_CATALOG.values():
        element = soup.select_one(definition.selector)
        if element is None:
            continue

        content: dict[str, str] = {}
        for region_name, region_selector in definition.regions.items():
            region = element.select_one(region_selector)
            if region is not None:
                content[region_name] = _region_value(region)

        sections.append(
            SectionContent(
                id=definition.id,
                name=definition.name,
                type=definition.type,
                visible=not _is_hidden(element),
                content=content,
            )
        )
    return sections


def _set_display(element: Tag, hidden: bool) -> None:
    declarations = [
        part.strip()
        for part in (element.get("style") or "").split(";")
        if part.strip() and not re.match(r"display\s*:", part.strip())
    ]
    if hidden:
        declarations.append("display: none")
    if declarations:
        element["style"] = "; ".join(declarations)
    elif "style" in element.attrs:
        del element["style"]


def _set_visibility(element: Tag, visible: bool) -> None:
    classes = [c for c in (element.get("class") or []) if c != HIDDEN_SECTION_CLASS]
    if not visible:
        classes.append(HIDDEN_SECTION_CLASS)
    element["class"] = classes
    _set_display(element, hidden=not visible)


def _write_region(region: Tag, value: str) -> None:
    if region.name == "input":
        region["value"] = value
    elif region.name == "textarea":
        region.string = value
    else:
        set_inner_html(region, value)


def update_section(
    html: str,
    section_id: str,
    content: Optional[dict[str, str]] = None,
    visible: Optional[bool] = None,
) -> str:
    """Rewrite regions of one section and optionally toggle its visibility.

    Regions listed in the schema but absent from the page are skipped.

    Raises:
        NotFoundError: If the section id is unknown or the page lacks the section.
        ValidationError: If ``content`` names a region the section does not have.
    """
    definition = SECTION_CATALOG.get(section_id)
    if definition is None:
        raise NotFoundError("Section not found")

    unknown = sorted(set(content or {}) - set(definition.regions))
    if unknown:
        raise ValidationError(
            f"Unknown regions for section {section_id}",
            details={"regions": unknown, "allowed": list(definition.regions)},
        )

    soup: BeautifulSoup = parse_html(html)
    element = soup.select_one(definition.selector)
    if element is None:
        raise NotFoundError("Section element not found")

    for region_name, value in (content or {}).items():
        region = element.select_one(definition.regions[region_name])
        if region is None:
            logger.debug(f"Region {section_id}.{region_name} not present in page")
            continue
        _write_region(region, value)

    if visible is not None:
        _set_visibility(element, visible)

    return str(soup)
