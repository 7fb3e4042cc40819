"""Navigation extraction tests."""

from helpers import NAV_HTML, render_page
from normand.menu.extractor import extract_menu, extract_menu_from_html


def test_extracts_top_level_items_in_order():
    result = extract_menu(render_page())

    assert result.ok
    assert [(e.id, e.title, e.url, e.order) for e in result.items] == [
        ("menu-item-home", "Home", "/", 1),
        ("menu-item-about", "About Us", "/about/", 2),
    ]


def test_extracts_one_level_of_children():
    result = extract_menu(render_page())

    about = result.items[1]
    assert [(c.id, c.title, c.url, c.order) for c in about.children] == [
        ("menu-item-team", "Our Team", "/our-team/", 1),
    ]
    assert result.items[0].children == []


def test_title_is_trimmed_anchor_text():
    nav = '<ul id="primary-menu"><li id="x"><a href="/x/">\n   Practice Areas \n</a></li></ul>'
    result = extract_menu(render_page(nav=nav))
    assert result.items[0].title == "Practice Areas"


def test_missing_ids_are_generated_from_position():
    nav = (
        '<ul id="primary-menu">'
        '<li><a href="/">Home</a></li>'
        '<li><a href="/services/">Services</a>'
        '<ul class="sub-menu"><li><a href="/privacy/">Privacy</a></li>'
        '<li><a href="/consumer/">Consumer</a></li></ul></li>'
        "</ul>"
    )
    result = extract_menu(nav)

    assert [e.id for e in result.items] == ["generated-0", "generated-1"]
    assert [c.id for c in result.items[1].children] == ["child-1-0", "child-1-1"]


def test_missing_href_becomes_hash():
    nav = '<ul id="primary-menu"><li id="x"><a>Placeholder</a></li></ul>'
    result = extract_menu(nav)
    assert result.items[0].url == "#"


def test_item_without_anchor_has_empty_title():
    nav = '<ul id="primary-menu"><li id="x"><span>Label</span></li></ul>'
    result = extract_menu(nav)
    assert result.items[0].title == ""
    assert result.items[0].url == "#"


def test_nested_sub_menu_lists_are_not_top_level_items():
    result = extract_menu(NAV_HTML)
    assert len(result.items) == 2


def test_custom_selector_and_submenu_class():
    nav = (
        '<ul id="main-nav"><li id="a"><a href="/a/">A</a>'
        '<ul class="dropdown"><li id="b"><a href="b.html">B</a></li></ul></li></ul>'
    )
    result = extract_menu(nav, nav_selector="#main-nav", submenu_class="dropdown")
    assert result.items[0].children[0].url == "/b/"


def test_missing_nav_list_is_an_error():
    result = extract_menu("<html><body><p>No menu here</p></body></html>")
    assert not result.ok
    assert "not found" in result.error
    assert result.items == []


def test_empty_nav_list_is_not_an_error():
    result = extract_menu('<ul id="primary-menu"></ul>')
    assert result.ok
    assert result.items == []


def test_missing_file_is_reported_not_raised(tmp_path):
    result = extract_menu_from_html(tmp_path / "missing.html")
    assert not result.ok
    assert "not found" in result.error


def test_undecodable_file_is_reported_not_raised(tmp_path):
    path = tmp_path / "index.html"
    path.write_bytes(b"\xff\xfe\xfa not utf-8")
    result = extract_menu_from_html(path)
    assert not result.ok
    assert "Failed to read" in result.error


def test_reads_file(tmp_path):
    path = tmp_path / "index.html"
    path.write_text(render_page(), encoding="utf-8")
    result = extract_menu_from_html(path)
    assert result.ok
    assert len(result.items) == 2
