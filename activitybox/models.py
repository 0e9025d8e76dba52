"""Data models for activitybox.

GradeRecord, GradeReport, Currency, ExchangeQuote, TriangleShape — the
short-lived typed structures that flow between prompts, activities and
rendering. Nothing here outlives a single activity run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TriangleShape(str, Enum):
    """Shapes the triangle activity can draw."""

    RIGHT = "right"
    INVERTED = "inverted"
    BOTH = "both"


@dataclass(frozen=True)
class GradeRecord:
    """A single labeled grade (e.g. Prelim = 85.0)."""

    label: str
    value: float


@dataclass(frozen=True)
class GradeReport:
    """Result of averaging a set of grades against a passing threshold."""

    records: tuple[GradeRecord, ...]
    average: float
    passing_grade: float

    @property
    def passed(self) -> bool:
        # Inclusive: an average equal to the threshold passes.
        return self.average >= self.passing_grade

    @property
    def verdict(self) -> str:
        return "pass" if self.passed else "fail"


@dataclass(frozen=True)
class Currency:
    """A foreign currency quoted in PHP per one foreign unit."""

    code: str
    symbol: str
    php_per_unit: float

    @property
    def label(self) -> str:
        return f"{self.code} ({self.symbol})"

    @property
    def reciprocal(self) -> float:
        """Foreign units bought by 1 PHP."""
        return 1.0 / self.php_per_unit


@dataclass(frozen=True)
class Conversion:
    """Net PHP amount expressed in one foreign currency."""

    currency: Currency
    amount: float


@dataclass(frozen=True)
class ExchangeQuote:
    """Everything shown for one confirmed conversion request.

    Derived once from the gross amount and discarded after display.
    """

    amount: float
    fee_rate: float
    fee: float
    net: float
    conversions: tuple[Conversion, ...] = field(default_factory=tuple)

    def amount_in(self, code: str) -> float:
        """Converted amount for a currency code (e.g. 'USD')."""
        for conversion in self.conversions:
            if conversion.currency.code == code:
                return conversion.amount
        raise KeyError(code)
