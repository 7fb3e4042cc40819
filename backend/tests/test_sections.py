"""Page section catalog tests."""

import pytest

from helpers import render_page
from normand.errors import NotFoundError, ValidationError
from normand.pages.content import parse_html
from normand.pages.sections import SECTION_CATALOG, read_sections, update_section


def _sections_by_id(html):
    return {section.id: section for section in read_sections(html)}


def test_catalog_ids():
    assert list(SECTION_CATALOG) == [
        "banner",
        "services",
        "casestudies",
        "testimonials",
        "team",
        "contact",
    ]


def test_reads_sections_present_in_page():
    sections = read_sections(render_page())

    assert [s.id for s in sections] == ["banner", "contact"]
    banner = sections[0]
    assert banner.name == "Hero Banner"
    assert banner.visible
    assert banner.content == {
        "subtitle": "Normand PLLC",
        "title": "Fighting for you",
        "scrollText": "Scroll",
    }


def test_update_region_content():
    html = update_section(render_page(), "banner", {"title": "We <em>win</em>"})

    assert _sections_by_id(html)["banner"].content["title"] == "We <em>win</em>"


def test_update_leaves_other_regions():
    html = update_section(render_page(), "contact", {"formNote": "Reply in 24h"})

    content = _sections_by_id(html)["contact"].content
    assert content["formNote"] == "Reply in 24h"
    assert content["title"] == "Contact us"


def test_hide_and_show_section():
    hidden = update_section(render_page(), "contact", visible=False)

    element = parse_html(hidden).select_one(".wp-block-normand-contact")
    assert "admin-hidden" in element["class"]
    assert element["style"] == "margin: 0; display: none"
    assert not _sections_by_id(hidden)["contact"].visible

    shown = update_section(hidden, "contact", visible=True)

    element = parse_html(shown).select_one(".wp-block-normand-contact")
    assert "admin-hidden" not in element["class"]
    assert element["style"] == "margin: 0"
    assert _sections_by_id(shown)["contact"].visible


def test_hiding_twice_does_not_duplicate():
    html = update_section(render_page(), "banner", visible=False)
    html = update_section(html, "banner", visible=False)

    element = parse_html(html).select_one(".wp-block-normand-banner")
    assert element["class"].count("admin-hidden") == 1
    assert element["style"] == "display: none"


def test_unknown_section():
    with pytest.raises(NotFoundError):
        update_section(render_page(), "pricing", {"title": "x"})


def test_section_missing_from_page():
    with pytest.raises(NotFoundError) as exc_info:
        update_section(render_page(), "team", {"title": "x"})
    assert exc_info.value.message == "Section element not found"


def test_unknown_region_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        update_section(render_page(), "banner", {"headline": "x"})

    assert exc_info.value.details["regions"] == ["headline"]
    assert "subtitle" in exc_info.value.details["allowed"]
