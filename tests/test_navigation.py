"""Tests for tab selection."""

import pytest

from gamify.core.exceptions import InvalidTabError
from gamify.core.navigation import NavigationController, Tab, resolve_tab


def test_initial_tab_is_daily():
    nav = NavigationController()
    assert nav.selected_index == 0
    assert nav.selected_tab is Tab.DAILY
    assert nav.title == "Daily Quests"


@pytest.mark.parametrize("value, expected", [
    (2, Tab.MAP),
    ("3", Tab.COUNTER),
    ("q", Tab.QUESTS),
    ("P", Tab.PERSONALIZE),
    ("map", Tab.MAP),
    ("Daily Quests", Tab.DAILY),
    (Tab.COUNTER, Tab.COUNTER),
])
def test_resolve_tab(value, expected):
    assert resolve_tab(value) is expected


@pytest.mark.parametrize("value", [5, -1, "9", "-1", "²", "settings", True])
def test_out_of_range_tab_rejected(value):
    nav = NavigationController()
    with pytest.raises(InvalidTabError):
        nav.select(value)
    assert nav.selected_tab is Tab.DAILY


def test_select_notifies_listeners_every_time():
    nav = NavigationController()
    seen = []
    unsubscribe = nav.subscribe(seen.append)

    nav.select(2)
    nav.select(2)
    assert seen == [Tab.MAP, Tab.MAP]

    unsubscribe()
    nav.select(0)
    assert len(seen) == 2


def test_tab_titles_and_labels():
    assert [t.title for t in Tab] == ["Daily Quests", "Quests", "Map", "Counter", "Personalize"]
    assert [t.label for t in Tab] == ["D", "Q", "M", "C", "P"]


def test_error_keeps_typed_value():
    with pytest.raises(InvalidTabError) as excinfo:
        resolve_tab("9")
    assert excinfo.value.tab == "9"
    assert str(excinfo.value) == "Tab '9' does not exist"
