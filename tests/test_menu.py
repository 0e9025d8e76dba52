"""Tests for the reusable menu controller."""

from activitybox.menu import Menu, MenuController, MenuOption, MenuState, run_menu


def _recording_menu(calls, **kwargs):
    return Menu(
        options=(
            MenuOption("Alpha", lambda: calls.append("alpha")),
            MenuOption("Beta", lambda: calls.append("beta")),
        ),
        **kwargs,
    )


def test_size_and_labels_include_exit():
    menu = _recording_menu([], exit_label="Leave")
    assert menu.size == 3
    assert menu.labels == ["Alpha", "Beta", "Leave"]


def test_last_index_exits_without_dispatch(scripted):
    calls = []
    s = scripted("3")
    menu = _recording_menu(calls, exit_messages=("Bye", "See you"))
    assert run_menu(s.terminal, menu) == 0
    assert calls == []
    # Scripted input is not echoed, so the first message follows the prompt.
    assert s.text.endswith("Enter choice (1-3): Bye\nSee you\n")


def test_each_choice_dispatches_one_handler_and_redisplays(scripted):
    calls = []
    s = scripted("1", "2", "1", "3")
    menu = _recording_menu(calls, heading="Options:")
    assert run_menu(s.terminal, menu) == 3
    assert calls == ["alpha", "beta", "alpha"]
    assert s.text.count("Options:") == 4


def test_invalid_choices_never_dispatch(scripted):
    calls = []
    s = scripted("0", "4", "x", "", "1.0", "3")
    assert run_menu(s.terminal, _recording_menu(calls)) == 0
    assert calls == []
    assert s.text.count("Choice must be 1-3") == 2
    assert s.text.count("Invalid input!") == 3


def test_render_uses_numbering_format(scripted):
    s = scripted("3")
    run_menu(s.terminal, _recording_menu([], title="MAIN", numbering="[{index}] {label}"))
    assert ">>> ===== MAIN ===== <<<" in s.lines
    assert "[1] Alpha" in s.lines
    assert "[2] Beta" in s.lines
    assert "[3] Exit" in s.lines
    assert "Enter choice (1-3): " in s.text


def test_default_numbering(scripted):
    s = scripted("3")
    run_menu(s.terminal, _recording_menu([]))
    assert "1. Alpha" in s.lines
    assert "3. Exit" in s.lines


def test_state_transitions(scripted):
    seen = []
    s = scripted("1", "2")
    holder = {}
    menu = Menu(options=(MenuOption("Look", lambda: seen.append(holder["c"].state)),))
    controller = MenuController(s.terminal, menu)
    holder["c"] = controller
    assert controller.state is MenuState.DISPLAYING
    controller.run()
    assert seen == [MenuState.DISPATCHING]
    assert controller.state is MenuState.DISPLAYING


def test_nested_menus_are_independent(scripted):
    calls = []
    s = scripted("1", "1", "2", "2")
    inner = Menu(options=(MenuOption("Inner", lambda: calls.append("inner")),), exit_messages=("inner done",))
    outer = Menu(options=(MenuOption("Open", lambda: run_menu(s.terminal, inner)),), exit_messages=("outer done",))
    assert run_menu(s.terminal, outer) == 1
    assert calls == ["inner"]
    assert s.text.endswith("outer done\n")
    assert "inner done" in s.text
