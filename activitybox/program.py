"""Top-level program: welcome banner and the main activity menu."""

from __future__ import annotations

from activitybox import ui
from activitybox.activities import ActivityInfo, list_activities
from activitybox.config import AppConfig
from activitybox.menu import Menu, MenuOption, run_menu
from activitybox.ui import Terminal


def _launcher(activity: ActivityInfo, terminal: Terminal, config: AppConfig):
    def _run() -> None:
        activity.run(terminal, config)
    return _run


def build_main_menu(terminal: Terminal, config: AppConfig) -> Menu:
    options = tuple(
        MenuOption(a.title, _launcher(a, terminal, config))
        for a in list_activities()
    )
    return Menu(
        options=options,
        exit_label="Exit Program",
        title=config.menu_title,
        numbering="[{index}] {label}",
        exit_messages=("Exiting program... Goodbye!",),
    )


def run_program(terminal: Terminal, config: AppConfig) -> int:
    """Show the banner and run the main menu until Exit Program.

    Returns the number of activities launched.
    """
    ui.banner(terminal, config.welcome_text, config.rule_width)
    return run_menu(terminal, build_main_menu(terminal, config), config.rule_width)
