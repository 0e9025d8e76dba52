"""Tests for the Triangle Loop activity."""

from dataclasses import replace

import pytest

from activitybox.activities import triangle
from activitybox.activities.triangle import inverted_triangle, right_triangle, triangle_lines
from activitybox.config import DEFAULT_CONFIG
from activitybox.models import TriangleShape


# --- Shape generation ---

def test_right_triangle_height_3():
    assert [len(row) for row in right_triangle(3)] == [1, 2, 3]


def test_inverted_triangle_height_3():
    assert [len(row) for row in inverted_triangle(3)] == [3, 2, 1]


@pytest.mark.parametrize("height", [1, 7, 20])
def test_row_counts_match_height(height):
    assert len(right_triangle(height)) == height
    assert len(inverted_triangle(height)) == height
    assert right_triangle(height) == list(reversed(inverted_triangle(height)))


def test_custom_marker():
    assert right_triangle(2, "#") == ["#", "##"]


def test_triangle_lines_by_shape():
    assert triangle_lines(TriangleShape.RIGHT, 2) == ["*", "**"]
    assert triangle_lines(TriangleShape.INVERTED, 2) == ["**", "*"]
    assert triangle_lines(TriangleShape.BOTH, 2) == ["*", "**", "**", "*"]


def _rows_after(lines, label, count):
    start = lines.index(label) + 1
    return lines[start:start + count]


# --- Sub-menu ---

def test_run_right_then_exit(scripted):
    s = scripted("1", "3", "", "4")
    triangle.run(s.terminal, DEFAULT_CONFIG)
    assert ">>> ===== Triangle Loop Activity ===== <<<" in s.lines
    assert _rows_after(s.lines, "Right Triangle:", 3) == ["*", "**", "***"]
    assert "Inverted Triangle:" not in s.lines
    assert "Exiting Triangle Activity..." in s.text
    assert "Successfully Navigated to Main Menu" in s.text


def test_run_inverted(scripted):
    s = scripted("2", "3", "", "4")
    triangle.run(s.terminal, DEFAULT_CONFIG)
    assert _rows_after(s.lines, "Inverted Triangle:", 3) == ["***", "**", "*"]


def test_run_both_draws_right_before_inverted(scripted):
    s = scripted("3", "2", "", "4")
    triangle.run(s.terminal, DEFAULT_CONFIG)
    assert s.lines.index("Right Triangle:") < s.lines.index("Inverted Triangle:")
    assert _rows_after(s.lines, "Right Triangle:", 2) == ["*", "**"]
    assert _rows_after(s.lines, "Inverted Triangle:", 2) == ["**", "*"]


def test_menu_lists_options(scripted):
    s = scripted("4")
    triangle.run(s.terminal, DEFAULT_CONFIG)
    for entry in ("Triangle Options:", "1. Right Triangle", "2. Inverted Triangle", "3. Both", "4. Exit"):
        assert entry in s.lines


def test_height_out_of_range_reprompts(scripted):
    s = scripted("1", "21", "0", "2", "", "4")
    triangle.run(s.terminal, DEFAULT_CONFIG)
    assert s.text.count("Choice must be 1-20") == 2
    assert _rows_after(s.lines, "Right Triangle:", 2) == ["*", "**"]


def test_height_cap_is_configurable(scripted):
    config = replace(DEFAULT_CONFIG, triangle=replace(DEFAULT_CONFIG.triangle, max_height=5))
    s = scripted("1", "6", "5", "", "4")
    triangle.run(s.terminal, config)
    assert "Enter height (1-5): " in s.text
    assert "Choice must be 1-5" in s.text
    assert _rows_after(s.lines, "Right Triangle:", 5)[-1] == "*****"


def test_repeated_draws_return_to_sub_menu(scripted):
    s = scripted("1", "1", "", "2", "1", "", "4")
    triangle.run(s.terminal, DEFAULT_CONFIG)
    assert s.text.count("Triangle Options:") == 3


def test_rows_wider_than_console_stay_on_one_line(scripted):
    s = scripted()
    triangle.render_shape(s.terminal, TriangleShape.RIGHT, 120)
    rows = _rows_after(s.lines, "Right Triangle:", 120)
    assert [len(row) for row in rows] == list(range(1, 121))
    assert len(s.lines) == 121
