"""Tests for daily quests: name-based completion and the daily cycle."""

from datetime import date, timedelta

import pytest

from gamify.core.daily import DailyResetTracker, DailyTask, DailyTaskCollection
from gamify.core.exceptions import InvalidInputError
from gamify.core.ledger import ScoringLedger
from gamify.core.models import CompletableTask


@pytest.fixture
def ledger():
    return ScoringLedger()


@pytest.fixture
def tracker(clock):
    return DailyResetTracker("midnight", clock)


@pytest.fixture
def daily(ledger, tracker):
    return DailyTaskCollection(ledger, tracker)


def test_complete_today_scores_and_hides_without_setting_done(daily, ledger):
    read = daily.add("Read")

    assert daily.complete_today(read) == 2
    assert ledger.score == 2
    assert read.done is False
    assert list(daily.list_pending_today()) == []
    assert read in daily.items()
    print("✓ Read scenario works")


def test_complete_today_twice_awards_once(daily, ledger):
    walk = daily.add("Walk")
    daily.complete_today(walk)
    assert daily.complete_today(walk) == 0
    assert ledger.score == 2


def test_same_name_hides_every_entry(daily):
    daily.add("Stretch")
    second = daily.add("Stretch")
    other = daily.add("Meditate")

    daily.complete_today(second)
    assert list(daily.list_pending_today()) == [other]


def test_removed_name_stays_done_until_reset(daily, tracker):
    read = daily.add("Read")
    daily.complete_today(read)
    daily.remove(read)

    again = daily.add("Read")
    assert list(daily.list_pending_today()) == []

    tracker.reset()
    assert list(daily.list_pending_today()) == [again]


def test_midnight_rollover_clears_completions(daily, clock, ledger):
    read = daily.add("Read")
    daily.complete_today(read)
    assert list(daily.list_pending_today()) == []

    clock.today = clock.today + timedelta(days=1)
    assert list(daily.list_pending_today()) == [read]
    assert ledger.score == 2

    # Completable again in the new cycle
    assert daily.complete_today(read) == 2
    assert ledger.score == 4


def test_session_policy_ignores_date_change(clock, ledger):
    tracker = DailyResetTracker("session", clock)
    daily = DailyTaskCollection(ledger, tracker)
    read = daily.add("Read")
    daily.complete_today(read)

    clock.today = clock.today + timedelta(days=3)
    assert list(daily.list_pending_today()) == []

    tracker.reset()
    assert list(daily.list_pending_today()) == [read]


def test_reset_moves_cycle_date(clock, tracker):
    tracker.mark_done("Read")
    clock.today = date(2026, 3, 5)
    tracker.reset()
    assert tracker.cycle_date == date(2026, 3, 5)
    assert tracker.completed_names() == set()


def test_invalid_policy_rejected(clock):
    with pytest.raises(InvalidInputError):
        DailyResetTracker("weekly", clock)


def test_generic_api_routes_to_daily_track(daily, ledger):
    task = daily.add("Journal")
    assert daily.complete(task) == 2
    assert task.done is False
    assert list(daily.list_pending()) == []


def test_daily_task_view(daily, ledger, tracker):
    task = daily.add("Floss")
    view = next(daily.entries())

    assert isinstance(view, DailyTask)
    assert isinstance(view, CompletableTask)
    assert view.name == "Floss"
    assert view.is_pending()
    assert view.complete(ledger, 2) == 2
    assert not view.is_pending()
    assert daily.completed_today() == [task]


def test_blank_daily_name_ignored(daily):
    assert daily.add(" ") is None
    assert len(daily) == 0
