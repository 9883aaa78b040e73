import re

import pytest

from dungeonescape.inventory import Inventory


@pytest.fixture
def inventory():
    inv = Inventory()
    for item in ("Healing Amulet", "Goblin Key", "Orc Key"):
        inv.add(item)
    return inv


def test_starts_empty():
    inv = Inventory()
    assert len(inv) == 0
    assert list(inv) == []


def test_add_puts_newest_first(inventory):
    assert list(inventory) == ["Orc Key", "Goblin Key", "Healing Amulet"]
    assert len(inventory) == 3


def test_sort_is_alphabetical(inventory):
    inventory.sort()
    assert list(inventory) == sorted(["Orc Key", "Goblin Key", "Healing Amulet"])


def test_sort_keeps_duplicates():
    inv = Inventory()
    for item in ("b", "a", "b"):
        inv.add(item)
    inv.sort()
    assert list(inv) == ["a", "b", "b"]


def test_search_ignores_case(inventory):
    assert inventory.search("key") == ["Orc Key", "Goblin Key"]


def test_search_with_regex(inventory):
    assert inventory.search("^heal") == ["Healing Amulet"]


def test_search_no_match(inventory):
    assert inventory.search("sword") == []


def test_search_invalid_pattern(inventory):
    with pytest.raises(re.error):
        inventory.search("(")


def test_render_lists_items(inventory):
    text = inventory.render()
    assert "Your Inventory" in text
    assert text.endswith("- Orc Key\n- Goblin Key\n- Healing Amulet\n")


def test_render_search_matches(inventory):
    text = inventory.render_search("goblin")
    assert text == "\nMatching items:\n- Goblin Key\n"


def test_render_search_no_match(inventory):
    text = inventory.render_search("sword")
    assert text == "\nMatching items:\nNo items matched your search.\n"