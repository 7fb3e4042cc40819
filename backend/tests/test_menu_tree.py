"""Menu tree helper tests."""

from normand.menu.models import MenuEntry
from normand.menu.tree import collect_ids, find_duplicate_ids, remove_entry, renumber


def _entry(entry_id, order=0, children=None):
    return MenuEntry(
        id=entry_id, title=entry_id.title(), url=f"/{entry_id}/", order=order, children=children or []
    )


def _tree():
    return [
        _entry("home", 1),
        _entry(
            "services",
            2,
            [_entry("privacy", 1), _entry("consumer", 2), _entry("insurance", 3)],
        ),
        _entry("contact", 3),
    ]


def test_collect_ids_includes_nested_entries():
    assert collect_ids(_tree()) == {"home", "services", "privacy", "consumer", "insurance", "contact"}


def test_find_duplicate_ids_across_depths():
    tree = _tree()
    tree[2].children.append(_entry("privacy"))
    assert find_duplicate_ids(tree) == ["privacy"]


def test_find_duplicate_ids_none():
    assert find_duplicate_ids(_tree()) == []


def test_renumber_every_sibling_list():
    tree = [_entry("a", 7, [_entry("b", 4), _entry("c", 9)]), _entry("d", 2)]
    renumber(tree)
    assert [e.order for e in tree] == [1, 2]
    assert [c.order for c in tree[0].children] == [1, 2]


def test_remove_top_level_entry_renumbers_top_level():
    remaining, removed = remove_entry(_tree(), "home")
    assert removed is True
    assert [(e.id, e.order) for e in remaining] == [("services", 1), ("contact", 2)]


def test_remove_nested_entry_only_touches_its_siblings():
    tree = _tree()
    remaining, removed = remove_entry(tree, "privacy")
    assert removed is True
    services = remaining[1]
    assert [(c.id, c.order) for c in services.children] == [("consumer", 1), ("insurance", 2)]
    assert [(e.id, e.order) for e in remaining] == [("home", 1), ("services", 2), ("contact", 3)]


def test_remove_parent_removes_subtree():
    remaining, removed = remove_entry(_tree(), "services")
    assert removed is True
    assert collect_ids(remaining) == {"home", "contact"}


def test_remove_unknown_id():
    tree = _tree()
    remaining, removed = remove_entry(tree, "missing")
    assert removed is False
    assert collect_ids(remaining) == collect_ids(_tree())
