"""Validated input reader.

Every read loops until the answer parses and fits its bounds. Rejected
input is reported with a one-line [ERROR] message and discarded; nothing
here ever hands an invalid value back to the caller.

The prompt classes are Rich PromptBase subclasses: process_response raises
InvalidResponse, and PromptBase.__call__ prints it and asks again.
"""

from __future__ import annotations

import math
import re
from typing import Optional, TextIO, TypeVar, Union

from rich.console import Console
from rich.prompt import InvalidResponse, PromptBase
from rich.text import Text

from activitybox.ui import Terminal, read_line

T = TypeVar("T")
Number = Union[int, float]

# One token of ASCII digits, nothing else: no underscores, no nan/inf, no
# trailing garbage. int() and float() would also accept other Unicode digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

PARSE_ERROR = "\n[ERROR] Invalid input! Try again."


def _invalid(text: str) -> InvalidResponse:
    return InvalidResponse(Text(text, style="red"))


class ValidatedPrompt(PromptBase[T]):
    """PromptBase with plain-text prompts and EOF detection."""

    prompt_suffix = ""

    def __init__(self, prompt: str, *, console: Optional[Console] = None) -> None:
        # Text, not markup: prompts like "(y/n)" must print verbatim.
        super().__init__(Text(prompt), console=console)

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: Text,
        password: bool,
        stream: Optional[TextIO] = None,
    ) -> str:
        return read_line(console, prompt, stream)


class NumberPrompt(ValidatedPrompt[T]):
    """Single numeric token, optionally bounded to [minimum, maximum]."""

    pattern: re.Pattern = _INT_RE

    def __init__(
        self,
        prompt: str,
        *,
        minimum: Optional[Number] = None,
        maximum: Optional[Number] = None,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(prompt, console=console)
        self.minimum = minimum
        self.maximum = maximum

    def range_message(self) -> str:
        raise NotImplementedError

    def in_range(self, value: Number) -> bool:
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True

    def process_response(self, value: str) -> T:
        token = value.strip()
        if not self.pattern.fullmatch(token):
            raise _invalid(PARSE_ERROR)
        number = self.response_type(token)
        if isinstance(number, float) and not math.isfinite(number):
            raise _invalid(PARSE_ERROR)
        if not self.in_range(number):
            raise _invalid(f"[ERROR] {self.range_message()}")
        return number


class IntegerPrompt(NumberPrompt[int]):
    response_type = int
    pattern = _INT_RE

    def range_message(self) -> str:
        return f"Choice must be {self.minimum}-{self.maximum}. Try again."


class DecimalPrompt(NumberPrompt[float]):
    response_type = float
    pattern = _FLOAT_RE

    def range_message(self) -> str:
        return f"Value must be between {self.minimum:g} and {self.maximum:g}. Try again."


class YesNoPrompt(ValidatedPrompt[bool]):
    """Accepts y/yes or n/no in any case; nothing else, no default."""

    response_type = bool
    prompt_suffix = " (y/n): "

    _ANSWERS = {"y": True, "yes": True, "n": False, "no": False}

    def process_response(self, value: str) -> bool:
        answer = value.strip().casefold()
        if answer not in self._ANSWERS:
            raise _invalid("[ERROR] Please type 'y' or 'n'.")
        return self._ANSWERS[answer]


_PROMPTS = {int: IntegerPrompt, float: DecimalPrompt}


def read_typed(terminal: Terminal, prompt: str, kind: type) -> Number:
    """Read one value of ``kind`` (int or float), retrying on parse failure."""
    try:
        prompt_cls = _PROMPTS[kind]
    except KeyError:
        raise TypeError(f"Unsupported input type: {kind!r}") from None
    return prompt_cls(prompt, console=terminal.console)(stream=terminal.stream)


def read_int(terminal: Terminal, prompt: str) -> int:
    return read_typed(terminal, prompt, int)


def read_float(terminal: Terminal, prompt: str) -> float:
    return read_typed(terminal, prompt, float)


def read_int_in_range(terminal: Terminal, prompt: str, minimum: int, maximum: int) -> int:
    """Read an integer in [minimum, maximum] (used for menu choices and heights)."""
    return IntegerPrompt(
        prompt, minimum=minimum, maximum=maximum, console=terminal.console
    )(stream=terminal.stream)


def read_float_in_range(
    terminal: Terminal, prompt: str, minimum: float, maximum: float
) -> float:
    """Read a real number in [minimum, maximum] (grades, money amounts)."""
    return DecimalPrompt(
        prompt, minimum=minimum, maximum=maximum, console=terminal.console
    )(stream=terminal.stream)


def read_yes_no(terminal: Terminal, prompt: str) -> bool:
    """Ask a yes/no question; the prompt is suffixed with ' (y/n): '."""
    return YesNoPrompt(prompt, console=terminal.console)(stream=terminal.stream)
