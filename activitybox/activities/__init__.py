"""Activity registry for activitybox.

Each activity is a module in this package defining:
    NAME         — registry key (e.g. 'currency')
    TITLE        — menu label
    DESCRIPTION  — one-line summary for `activitybox list`
    run(terminal, config) — the activity itself

The set and order of activities is fixed; there is no plugin discovery.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Callable, Optional

from activitybox.config import AppConfig
from activitybox.ui import Terminal

# Menu order. Displayed indices are positions in this tuple, 1-based.
ACTIVITY_ORDER: tuple[str, ...] = (
    "student_info",
    "grade_evaluator",
    "triangle",
    "currency",
)


@dataclass(frozen=True)
class ActivityInfo:
    """Metadata and entry point of one activity."""

    name: str
    title: str
    description: str
    run: Callable[[Terminal, AppConfig], None]


def load_activity(name: str) -> Optional[ActivityInfo]:
    """Load a single activity by name.

    Args:
        name: Module name under activitybox/activities/ (e.g., 'triangle').

    Returns:
        ActivityInfo for a known activity, None for any other name.
    """
    if name not in ACTIVITY_ORDER:
        return None

    mod = importlib.import_module(f"activitybox.activities.{name}")
    return ActivityInfo(
        name=getattr(mod, "NAME", name),
        title=getattr(mod, "TITLE", name),
        description=getattr(mod, "DESCRIPTION", ""),
        run=mod.run,
    )


def list_activities() -> list[ActivityInfo]:
    """All activities in menu order."""
    activities = []
    for name in ACTIVITY_ORDER:
        info = load_activity(name)
        if info:
            activities.append(info)
    return activities
