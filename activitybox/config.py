"""Process-wide constant configuration.

All fixed values (student card, grading policy, triangle limits, exchange
rates and fees, screen texts) live in frozen dataclasses. Activities receive
an AppConfig as a parameter; DEFAULT_CONFIG is what the CLI starts from.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from activitybox.models import Currency

# Rates in PHP per 1 foreign unit.
DEFAULT_CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "$", 58.2554),
    Currency("EUR", "€", 67.6375),
    Currency("JPY", "¥", 0.3818),
    Currency("AUD", "A$", 38.3071),
)


@dataclass(frozen=True)
class StudentProfile:
    """Fields shown by the Virtual Student Info activity."""

    fields: tuple[tuple[str, str], ...] = (
        ("Name", "Alberto Jr Deniros"),
        ("Section and Course", "BSCS 1-A"),
        ("AGE", "23"),
        ("GENDER", "MALE"),
        ("CODING DEVICES", "Desktop Computer"),
    )


@dataclass(frozen=True)
class GradePolicy:
    labels: tuple[str, ...] = ("Prelim", "Midterm", "PreFinal", "Final")
    passing_grade: float = 80
    min_grade: float = 0
    max_grade: float = 100
    pass_remark: str = "PASADO KA BOI!!"
    fail_remark: str = "BAGSAK KA BOI!!"


@dataclass(frozen=True)
class TrianglePolicy:
    # Height cap is a display-size limit, not a technical one.
    min_height: int = 1
    max_height: int = 20
    marker: str = "*"


@dataclass(frozen=True)
class ExchangePolicy:
    currencies: tuple[Currency, ...] = DEFAULT_CURRENCIES
    fee_rate: float = 0.05
    min_amount: float = 100
    max_amount: float = 100_000
    home_code: str = "PHP"
    home_symbol: str = "₱"


@dataclass(frozen=True)
class AppConfig:
    """Top-level configuration bundle handed to every activity."""

    student: StudentProfile = field(default_factory=StudentProfile)
    grades: GradePolicy = field(default_factory=GradePolicy)
    triangle: TrianglePolicy = field(default_factory=TrianglePolicy)
    exchange: ExchangePolicy = field(default_factory=ExchangePolicy)
    rule_width: int = 45
    welcome_text: str = "WELCOME TO PROGRAMMING ACTIVITY SYSTEM"
    menu_title: str = "PROGRAMMING ACTIVITY MENU"


DEFAULT_CONFIG = AppConfig()
