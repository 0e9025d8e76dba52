"""Pytest configuration and fixtures."""

import io

import pytest
from rich.console import Console

from activitybox.ui import Terminal


class ScriptedTerminal:
    """A Terminal fed from canned input lines, capturing everything printed."""

    def __init__(self, *lines: str) -> None:
        self.output = io.StringIO()
        console = Console(
            file=self.output,
            width=100,
            highlight=False,
            color_system=None,
            force_terminal=False,
        )
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        self.terminal = Terminal(console=console, stream=stream)

    @property
    def text(self) -> str:
        return self.output.getvalue()

    @property
    def lines(self) -> list:
        return self.text.splitlines()


@pytest.fixture
def scripted():
    """Factory: scripted("1", "abc", "3") -> ScriptedTerminal."""
    return ScriptedTerminal
