"""Tests for GamifyService intents and accessors."""

from datetime import timedelta

import pytest

from gamify.core.config import Settings
from gamify.core.exceptions import InvalidInputError, InvalidTabError
from gamify.core.navigation import Tab
from gamify.core.service import GamifyService, normalize_category


def test_fresh_service_state(service):
    assert service.score == 0
    assert service.active_view is Tab.DAILY
    for category in ("daily", "special", "high-level"):
        assert service.tasks(category) == []
    assert service.list_counters() == []


@pytest.mark.parametrize("category, points", [
    ("daily", 2),
    ("special", 5),
    ("high-level", 10),
])
def test_reward_per_category(service, category, points):
    task = service.on_add_task(category, "Quest")
    assert service.on_complete_task(category, task) == points
    assert service.score == points


def test_score_is_sum_of_awards_and_never_decreases(service):
    history = []
    for category in ("daily", "special", "high-level", "special", "daily"):
        task = service.on_add_task(category, f"{category} quest {len(history)}")
        service.on_complete_task(category, task)
        history.append(service.score)

    assert history == sorted(history)
    assert service.score == 2 + 5 + 10 + 5 + 2


def test_read_scenario(service):
    read = service.on_add_task("daily", "Read")
    service.on_complete_task("daily", read)

    assert service.score == 2
    assert read not in service.pending("daily")
    assert read in service.tasks("daily")


def test_special_completion_is_permanent(service, clock):
    quest = service.on_add_task("special", "Learn guitar")
    service.on_complete_task("special", quest)

    clock.today = clock.today + timedelta(days=1)
    service.reset_daily()
    assert service.pending("special") == []
    assert quest.done is True


def test_collections_are_independent(service):
    daily = service.on_add_task("daily", "Same name")
    special = service.on_add_task("special", "Same name")

    assert daily is not special
    service.on_delete_task("special", daily)
    assert service.tasks("daily") == [daily]
    assert service.tasks("special") == [special]


def test_blank_add_changes_nothing(service):
    assert service.on_add_task("special", "   ") is None
    assert service.on_add_counter("") is None
    assert service.tasks("special") == []
    assert service.list_counters() == []


def test_category_aliases_and_unknown():
    assert normalize_category("High") == "high-level"
    assert normalize_category("s") == "special"
    with pytest.raises(InvalidInputError):
        normalize_category("weekly")


def test_unknown_category_intent_raises(service):
    with pytest.raises(InvalidInputError):
        service.on_add_task("epic", "Nope")


def test_counter_intents(service):
    pushups = service.on_add_counter("Pushups")
    for _ in range(3):
        service.on_increment(pushups)
    assert service.on_decrement(pushups) == 2

    assert service.on_delete_counter(pushups) is True
    assert service.on_delete_counter(pushups) is False
    assert service.score == 0


def test_select_map_shows_map_regardless_of_state(service):
    task = service.on_add_task("high-level", "Boss")
    service.on_complete_task("high-level", task)

    assert service.on_select_tab(2) is Tab.MAP
    assert service.active_view is Tab.MAP
    assert service.score == 10

    with pytest.raises(InvalidTabError):
        service.on_select_tab(7)
    assert service.active_view is Tab.MAP


def test_custom_rewards_from_settings(clock):
    service = GamifyService(Settings(daily_reward=3, high_level_reward=20), clock=clock)
    boss = service.on_add_task("high-level", "Boss")
    assert service.on_complete_task("high-level", boss) == 20
    assert service.reward_for("daily") == 3


def test_snapshot(service):
    read = service.on_add_task("daily", "Read")
    service.on_add_task("daily", "Walk")
    service.on_complete_task("daily", read)
    service.on_add_counter("Water")

    snap = service.snapshot()
    assert snap["score"] == 2
    assert snap["tab"] == 0
    assert snap["tasks"]["daily"] == [
        {"name": "Read", "done": False, "pending": False},
        {"name": "Walk", "done": False, "pending": True},
    ]
    assert snap["counters"] == [{"name": "Water", "count": 0}]
