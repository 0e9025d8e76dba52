"""Student Grade Evaluator: averages four grades against a pass mark.

The average uses real division and is compared against the passing grade
without rounding; an average equal to the threshold passes.
"""

from __future__ import annotations

import logging
from typing import Sequence

from activitybox import ui
from activitybox.config import AppConfig, GradePolicy
from activitybox.models import GradeRecord, GradeReport
from activitybox.prompts import read_float_in_range
from activitybox.ui import Terminal

NAME = "grade_evaluator"
TITLE = "Student Grade Evaluator"
DESCRIPTION = "Average Prelim/Midterm/PreFinal/Final grades against a pass mark"

logger = logging.getLogger(__name__)


def evaluate_grades(records: Sequence[GradeRecord], policy: GradePolicy) -> GradeReport:
    """Average the records and compare against policy.passing_grade.

    Raises:
        ValueError: if the number of records does not match policy.labels.
    """
    if len(records) != len(policy.labels):
        raise ValueError(
            f"Expected {len(policy.labels)} grades, got {len(records)}"
        )
    average = sum(r.value for r in records) / len(records)
    report = GradeReport(
        records=tuple(records),
        average=average,
        passing_grade=policy.passing_grade,
    )
    logger.debug("Grades evaluated: average=%s verdict=%s", average, report.verdict)
    return report


def collect_grades(terminal: Terminal, policy: GradePolicy) -> list[GradeRecord]:
    """Prompt for each labeled grade in order."""
    return [
        GradeRecord(
            label,
            read_float_in_range(
                terminal, f"Enter {label} Grade: ", policy.min_grade, policy.max_grade
            ),
        )
        for label in policy.labels
    ]


def render_report(terminal: Terminal, report: GradeReport, policy: GradePolicy, rule_width: int) -> None:
    ui.line(terminal, rule_width)
    ui.message(terminal, f"Passing grade: {report.passing_grade:g}")
    ui.message(terminal, f"Your average: {report.average:.2f}")
    ui.message(terminal, "REMARKS: ")
    ui.header(terminal, policy.pass_remark if report.passed else policy.fail_remark)
    ui.line(terminal, rule_width)


def run(terminal: Terminal, config: AppConfig) -> None:
    policy = config.grades
    ui.header(terminal, TITLE)
    records = collect_grades(terminal, policy)
    report = evaluate_grades(records, policy)
    render_report(terminal, report, policy, config.rule_width)
    ui.pause(terminal)
