"""Menu controller: one numbered menu loop for every screen.

The main menu and each activity sub-menu are instances of the same
two-state machine:

    DISPLAYING  --valid choice k-->  DISPATCHING (handler k runs)
    DISPATCHING --handler returns--> DISPLAYING
    DISPLAYING  --last index------>  loop ends

The choice is read through read_int_in_range, so the controller never sees
an out-of-range or non-numeric value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from activitybox import ui
from activitybox.prompts import read_int_in_range
from activitybox.ui import Terminal

logger = logging.getLogger(__name__)


class MenuState(str, Enum):
    DISPLAYING = "displaying"
    DISPATCHING = "dispatching"


@dataclass(frozen=True)
class MenuOption:
    label: str
    handler: Callable[[], None]


@dataclass(frozen=True)
class Menu:
    """A fixed list of options plus a reserved trailing exit entry.

    numbering is a format string with {index} and {label} fields.
    """

    options: tuple[MenuOption, ...]
    exit_label: str = "Exit"
    title: Optional[str] = None
    heading: Optional[str] = None
    numbering: str = "{index}. {label}"
    exit_messages: tuple[str, ...] = ()

    @property
    def size(self) -> int:
        """Number of displayed entries, exit included."""
        return len(self.options) + 1

    @property
    def labels(self) -> list[str]:
        return [o.label for o in self.options] + [self.exit_label]


class MenuController:
    """Runs a Menu until its exit entry is chosen."""

    def __init__(
        self,
        terminal: Terminal,
        menu: Menu,
        rule_width: int = ui.DEFAULT_RULE_WIDTH,
    ) -> None:
        self._terminal = terminal
        self._menu = menu
        self._rule_width = rule_width
        self.state = MenuState.DISPLAYING

    def render(self) -> None:
        """Print the title, heading and numbered entries."""
        menu = self._menu
        if menu.title:
            ui.header(self._terminal, menu.title)
            ui.line(self._terminal, self._rule_width)
        if menu.heading:
            ui.message(self._terminal, menu.heading)
        for index, label in enumerate(menu.labels, 1):
            ui.message(self._terminal, menu.numbering.format(index=index, label=label))
        ui.line(self._terminal, self._rule_width)

    def choose(self) -> int:
        size = self._menu.size
        return read_int_in_range(self._terminal, f"Enter choice (1-{size}): ", 1, size)

    def run(self) -> int:
        """Loop until exit. Returns how many handlers were dispatched."""
        dispatched = 0
        while True:
            self.state = MenuState.DISPLAYING
            self.render()
            choice = self.choose()

            if choice == self._menu.size:
                logger.debug("Menu exit chosen (%s)", self._menu.title or self._menu.heading)
                for text in self._menu.exit_messages:
                    ui.message(self._terminal, text)
                return dispatched

            option = self._menu.options[choice - 1]
            self.state = MenuState.DISPATCHING
            logger.debug("Dispatching option %d: %s", choice, option.label)
            option.handler()
            dispatched += 1


def run_menu(
    terminal: Terminal,
    menu: Menu,
    rule_width: int = ui.DEFAULT_RULE_WIDTH,
) -> int:
    """Run a labeled menu until its exit entry is chosen."""
    return MenuController(terminal, menu, rule_width).run()
