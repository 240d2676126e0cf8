"""Tests for REPL command handling against a recording console."""

import pytest

from gamify.core.navigation import Tab
from gamify.repl.main import create_context, execute_command
from gamify.repl.parser import parse_command


@pytest.fixture
def ctx(service, console):
    return create_context(service, console, interactive=False)


def run(ctx, *lines):
    for line in lines:
        assert execute_command(parse_command(line), ctx) is True
    return ctx.console.export_text()


def test_daily_flow(ctx):
    output = run(ctx, "add Read", "done read")

    assert ctx.service.score == 2
    assert [t.name for t in ctx.service.pending("daily")] == []
    assert "Added daily quest: Read" in output
    assert "Completed: Read" in output
    assert "(score: 2)" in output


def test_quests_tab_defaults_and_categories(ctx):
    output = run(
        ctx,
        "q",
        "add Learn guitar",
        'add "Run a marathon" -c high',
        "done Run a marathon",
        "done Learn guitar",
    )

    assert ctx.service.active_view is Tab.QUESTS
    assert ctx.service.score == 15
    assert "Special" in output and "High Level" in output


def test_counter_tab(ctx):
    output = run(ctx, "tab counter", "add Pushups", "inc Pushups", "+ pushups", "inc Pushups", "dec Pushups")

    pushups = ctx.service.counters.find("Pushups")
    assert pushups.count == 2
    assert "Count: 2" in output
    assert ctx.service.score == 0


def test_tab_switch_renders_view(ctx):
    ctx.service.on_add_task("special", "Sail")
    output = run(ctx, "tab 2")

    assert ctx.service.active_view is Tab.MAP
    assert "Map screen" in output
    assert "Score: 0" in output


def test_personalize_view(ctx):
    assert "Personalize screen" in run(ctx, "p")


def test_add_on_map_tab_needs_category(ctx):
    output = run(ctx, "m", "add Something")
    assert "Error:" in output
    assert ctx.service.tasks("daily") == []

    run(ctx, "add Something --category special")
    assert [t.name for t in ctx.service.tasks("special")] == ["Something"]


def test_blank_add_is_ignored(ctx):
    output = run(ctx, 'add "   "')
    assert "Nothing added" in output
    assert ctx.service.tasks("daily") == []


def test_errors_do_not_change_state(ctx):
    output = run(ctx, "done Ghost", "tab 9", "inc Nothing", "add x --category weekly")

    assert "Quest 'Ghost' not found" in output
    assert "Tab '9' does not exist" in output
    assert "Counter 'Nothing' not found" in output
    assert "Invalid category" in output
    assert ctx.service.active_view is Tab.DAILY
    assert ctx.service.score == 0


def test_rm_without_args_lists_items(ctx):
    output = run(ctx, "rm")
    assert "No tasks to delete." in output

    output = run(ctx, "add Read", "rm")
    assert "1: Read" in output

    run(ctx, "rm Read")
    assert ctx.service.tasks("daily") == []


def test_rm_counter(ctx):
    output = run(ctx, "c", "rm")
    assert "No counters to delete." in output
    run(ctx, "add Water", "rm Water")
    assert ctx.service.list_counters() == []


def test_reset_brings_daily_back(ctx):
    run(ctx, "add Read", "done Read", "reset")
    assert [t.name for t in ctx.service.pending("daily")] == ["Read"]
    assert ctx.service.score == 2


def test_score_help_and_unknown(ctx):
    output = run(ctx, "score", "help", "fly")
    assert "Score: 0" in output
    assert "Gamify commands" in output
    assert "Unknown command: fly" in output


def test_names_with_markup_are_printed_literally(ctx):
    output = run(ctx, "add [bold]Brackets[/bold]")
    assert "[bold]Brackets[/bold]" in output


def test_exit_stops_loop(ctx):
    assert execute_command(parse_command("exit"), ctx) is False
    assert execute_command(parse_command("quit"), ctx) is False


def test_tab_errors_stay_in_error_model(ctx):
    output = run(ctx, "tab ²", "tab -3")
    assert "Tab '²' does not exist" in output
    assert "Tab '-3' does not exist" in output
    assert ctx.service.active_view is Tab.DAILY


def test_quoted_name_keeps_spacing(ctx):
    output = run(ctx, 'add "Read   a book"', "add Read   a book", "help")
    names = [t.name for t in ctx.service.tasks("daily")]
    assert names == ["Read   a book", "Read a book"]
    assert "quote a name" in output
