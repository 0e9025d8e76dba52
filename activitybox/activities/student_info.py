"""Virtual Student Info: prints a fixed student card."""

from __future__ import annotations

from activitybox import ui
from activitybox.config import AppConfig
from activitybox.ui import Terminal

NAME = "student_info"
TITLE = "Virtual Student Info"
DESCRIPTION = "Show the student's personal and academic details"


def run(terminal: Terminal, config: AppConfig) -> None:
    ui.header(terminal, TITLE)
    for label, value in config.student.fields:
        ui.message(terminal, f"{label}: {value}")
    ui.pause(terminal)
