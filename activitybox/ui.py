"""Console presentation helpers.

Stateless rendering primitives (header, rule, banner, pause, message) shared
by every screen. A Terminal bundles the Rich console used for output with
the stream used for input so tests can script both ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text, TextType

DEFAULT_RULE_WIDTH = 45


@dataclass
class Terminal:
    """Output console plus input source.

    stream=None reads from standard input through Console.input().
    """

    console: Console = field(default_factory=lambda: Console(highlight=False))
    stream: Optional[TextIO] = None

    def read_line(self, prompt: TextType = "") -> str:
        return read_line(self.console, prompt, self.stream)


def read_line(console: Console, prompt: TextType = "", stream: Optional[TextIO] = None) -> str:
    """Read one line of input without its trailing newline.

    Raises EOFError once the input is exhausted. Console.input() returns an
    empty string forever on a closed stream, so that case is detected here.
    """
    value = console.input(prompt, stream=stream)
    if stream is not None and not value:
        raise EOFError("input stream closed")
    return value.rstrip("\r\n")


def header(terminal: Terminal, title: str) -> None:
    """Print a bordered section title."""
    terminal.console.print(
        Text(f"\n>>> ===== {title} ===== <<<", style="bold")
    )


def line(terminal: Terminal, width: int = DEFAULT_RULE_WIDTH) -> None:
    """Print a horizontal rule."""
    terminal.console.print("-" * width, markup=False)


def banner(terminal: Terminal, text: str, width: int = DEFAULT_RULE_WIDTH) -> None:
    """Welcome banner: starred rule, centered-ish text, starred rule."""
    stars = "*" * width
    terminal.console.print(f"\n{stars}", markup=False)
    terminal.console.print(Text(f"   {text}", style="bold cyan"))
    terminal.console.print(stars, markup=False)


def message(terminal: Terminal, text: str) -> None:
    """Echo literal text: no markup, and long lines are never wrapped."""
    terminal.console.print(text, markup=False, emoji=False, soft_wrap=True)


def pause(terminal: Terminal) -> None:
    """Block until the user presses Enter (consumes exactly one line)."""
    terminal.read_line(Text("\n>>> Press Enter to continue..."))
