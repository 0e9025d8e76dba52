"""Currency Exchange Calculator: PHP to four foreign currencies.

Rates are fixed (PHP per one foreign unit). A flat fee is deducted from the
gross amount first; the net amount is what gets converted:

    fee       = amount * fee_rate
    net       = amount - fee
    converted = net / rate        (per currency)
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.table import Table

from activitybox import ui
from activitybox.config import AppConfig, ExchangePolicy
from activitybox.menu import Menu, MenuOption, run_menu
from activitybox.models import Conversion, ExchangeQuote
from activitybox.prompts import read_float_in_range, read_yes_no
from activitybox.ui import Terminal

NAME = "currency"
TITLE = "Currency Exchange Calculator"
DESCRIPTION = "Convert PHP to USD/EUR/JPY/AUD at fixed rates with a 5% fee"

logger = logging.getLogger(__name__)

_LABEL_W = 18


def convert(amount: float, policy: ExchangePolicy) -> ExchangeQuote:
    """Compute the fee, net amount and every per-currency conversion.

    Raises:
        ValueError: if amount is outside [policy.min_amount, policy.max_amount].
    """
    if not policy.min_amount <= amount <= policy.max_amount:
        raise ValueError(
            f"Amount must be between {policy.min_amount:g} and {policy.max_amount:g}"
        )
    fee = amount * policy.fee_rate
    net = amount - fee
    conversions = tuple(
        Conversion(currency=c, amount=net / c.php_per_unit) for c in policy.currencies
    )
    logger.debug("Converted %s %s: fee=%s net=%s", amount, policy.home_code, fee, net)
    return ExchangeQuote(
        amount=amount,
        fee_rate=policy.fee_rate,
        fee=fee,
        net=net,
        conversions=conversions,
    )


def _fmt_percent(rate: float) -> str:
    return f"{rate * 100:.0f}%"


def _fmt_money(policy: ExchangePolicy, value: float) -> str:
    return f"{policy.home_symbol}{value:.2f}"


def fee_disclosure(policy: ExchangePolicy) -> str:
    return f"A {_fmt_percent(policy.fee_rate)} transaction fee will be charged for the exchange."


def render_rates(terminal: Terminal, policy: ExchangePolicy, rule_width: int = ui.DEFAULT_RULE_WIDTH) -> None:
    """Show 1 PHP in each currency plus the transaction policy."""
    ui.header(terminal, "Today's Exchange Rates")
    ui.line(terminal, rule_width)
    for c in policy.currencies:
        ui.message(
            terminal,
            f"{c.label:<10}: 1 {policy.home_code} = {c.reciprocal:.4f} {c.code}",
        )
    ui.line(terminal, rule_width)
    ui.message(terminal, f"Transaction Fee: {_fmt_percent(policy.fee_rate)}")
    ui.message(terminal, f"Minimum Transaction: {policy.home_symbol}{policy.min_amount:,.0f}")
    ui.message(terminal, f"Maximum Transaction: {policy.home_symbol}{policy.max_amount:,.0f}")
    ui.line(terminal, rule_width)


def render_quote(
    terminal: Terminal,
    quote: ExchangeQuote,
    policy: ExchangePolicy,
    rule_width: int = ui.DEFAULT_RULE_WIDTH,
) -> None:
    """Transaction summary followed by a Rich table of conversions."""
    ui.header(terminal, "Conversion Result")
    ui.line(terminal, rule_width)
    ui.message(terminal, f"{'Original Amount':<{_LABEL_W}}: {_fmt_money(policy, quote.amount)}")
    ui.message(terminal, f"{'Transaction Fee':<{_LABEL_W}}: {_fmt_money(policy, quote.fee)}")
    ui.message(terminal, f"{'Net Amount':<{_LABEL_W}}: {_fmt_money(policy, quote.net)}")
    ui.line(terminal, rule_width)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Currency", min_width=10)
    table.add_column(f"Rate ({policy.home_code} per unit)", justify="right")
    table.add_column("Converted", style="green", justify="right", min_width=12)
    for conversion in quote.conversions:
        c = conversion.currency
        table.add_row(c.label, f"{c.php_per_unit:.4f}", f"{conversion.amount:.2f} {c.code}")
    terminal.console.print(table)


def exchange(terminal: Terminal, policy: ExchangePolicy, rule_width: int = ui.DEFAULT_RULE_WIDTH) -> Optional[ExchangeQuote]:
    """Interactive conversion. Returns None when the user declines the fee."""
    amount = read_float_in_range(
        terminal,
        f"Enter amount in {policy.home_code} ({policy.home_symbol}): ",
        policy.min_amount,
        policy.max_amount,
    )
    ui.message(terminal, fee_disclosure(policy))
    if not read_yes_no(terminal, "Would you like to proceed?"):
        logger.debug("Conversion of %s cancelled", amount)
        ui.message(terminal, "Transaction cancelled.")
        return None

    quote = convert(amount, policy)
    render_quote(terminal, quote, policy, rule_width)
    return quote


def build_menu(terminal: Terminal, config: AppConfig) -> Menu:
    policy = config.exchange

    def _exchange() -> None:
        exchange(terminal, policy, config.rule_width)
        ui.pause(terminal)

    def _rates() -> None:
        render_rates(terminal, policy, config.rule_width)
        ui.pause(terminal)

    return Menu(
        options=(
            MenuOption("Exchange Currency", _exchange),
            MenuOption("View Rates", _rates),
        ),
        exit_label="Exit",
        title=TITLE,
        heading="Currency Exchange Options:",
        exit_messages=(
            "Exiting Currency Exchange Calculator...",
            "Successfully Navigated to Main Menu\n",
        ),
    )


def run(terminal: Terminal, config: AppConfig) -> None:
    run_menu(terminal, build_menu(terminal, config), config.rule_width)
