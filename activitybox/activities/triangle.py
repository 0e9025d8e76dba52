"""Triangle Loop Activity: right and inverted triangles of a chosen height.

Example (height = 3):

    right      inverted
    *          ***
    **         **
    ***        *
"""

from __future__ import annotations

from activitybox import ui
from activitybox.config import AppConfig, TrianglePolicy
from activitybox.menu import Menu, MenuOption, run_menu
from activitybox.models import TriangleShape
from activitybox.prompts import read_int_in_range
from activitybox.ui import Terminal

NAME = "triangle"
TITLE = "Triangle Loop Activity"
DESCRIPTION = "Draw right, inverted or both triangles of a chosen height"

_SHAPE_LABELS = {
    TriangleShape.RIGHT: "Right Triangle",
    TriangleShape.INVERTED: "Inverted Triangle",
    TriangleShape.BOTH: "Both",
}


def right_triangle(height: int, marker: str = "*") -> list[str]:
    """Line i (1-based) holds i markers."""
    return [marker * i for i in range(1, height + 1)]


def inverted_triangle(height: int, marker: str = "*") -> list[str]:
    """Line i (1-based) holds height - i + 1 markers."""
    return [marker * i for i in range(height, 0, -1)]


def triangle_lines(shape: TriangleShape, height: int, marker: str = "*") -> list[str]:
    """Rows for a shape; BOTH is the right rows followed by the inverted rows."""
    if shape is TriangleShape.RIGHT:
        return right_triangle(height, marker)
    if shape is TriangleShape.INVERTED:
        return inverted_triangle(height, marker)
    return right_triangle(height, marker) + inverted_triangle(height, marker)


def render_shape(terminal: Terminal, shape: TriangleShape, height: int, marker: str = "*") -> None:
    """Print one or both triangles, each under its label."""
    if shape is TriangleShape.BOTH:
        shapes = (TriangleShape.RIGHT, TriangleShape.INVERTED)
    else:
        shapes = (shape,)
    for i, s in enumerate(shapes):
        if i:
            ui.message(terminal, "")
        ui.message(terminal, f"{_SHAPE_LABELS[s]}:")
        for row in triangle_lines(s, height, marker):
            ui.message(terminal, row)


def read_height(terminal: Terminal, policy: TrianglePolicy) -> int:
    return read_int_in_range(
        terminal,
        f"Enter height ({policy.min_height}-{policy.max_height}): ",
        policy.min_height,
        policy.max_height,
    )


def _draw(terminal: Terminal, policy: TrianglePolicy, shape: TriangleShape) -> None:
    height = read_height(terminal, policy)
    ui.message(terminal, "")
    render_shape(terminal, shape, height, policy.marker)
    ui.pause(terminal)
    ui.message(terminal, "")


def build_menu(terminal: Terminal, policy: TrianglePolicy) -> Menu:
    options = tuple(
        MenuOption(label, lambda shape=shape: _draw(terminal, policy, shape))
        for shape, label in _SHAPE_LABELS.items()
    )
    return Menu(
        options=options,
        exit_label="Exit",
        heading="Triangle Options:",
        exit_messages=(
            "Exiting Triangle Activity...",
            "Successfully Navigated to Main Menu\n",
        ),
    )


def run(terminal: Terminal, config: AppConfig) -> None:
    ui.header(terminal, TITLE)
    run_menu(terminal, build_menu(terminal, config.triangle), config.rule_width)
