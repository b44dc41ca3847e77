#!/usr/bin/env python
"""
CLI commands for planshift.
"""

import json
from datetime import timedelta

import click

from planshift.billing.config import get_billing_config
from planshift.billing.exceptions import BillingError
from planshift.billing.money_models import Currency, Money, MoneyField
from planshift.billing.subscriptions import Plan, ProrationCalculator, Subscription
from planshift.billing.subscriptions.utils import past_date, utcnow
from planshift.logging import setup_logging

CURRENCY_CHOICES = [currency.value for currency in Currency]


@click.group()
@click.option("--log-level", default=None, help="Override the configured log level")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Override the configured log format",
)
def cli(log_level: str | None, log_format: str | None) -> None:
    """Plan change proration CLI."""
    setup_logging(log_level=log_level, log_format=log_format, force=True)


@cli.command()
@click.option("--days-ago", default=3, type=click.IntRange(min=0), help="Days since the subscription started")
@click.option("--verbose", is_flag=True, help="Print the example plans")
def demo(days_ago: int, verbose: bool) -> None:
    """Upgrade a 150 GBP subscription to the 300 GBP plan."""
    chip_lite = Plan.new(Money.new(0, Currency.GBP), timedelta(days=28), name="chip_lite")
    chip_ai = Plan.new(Money.new(150, Currency.GBP), timedelta(days=28), name="chip_ai")
    chip_x = Plan.new(Money.new(300, Currency.GBP), timedelta(days=28), name="chip_x")

    if verbose:
        for plan in (chip_lite, chip_ai, chip_x):
            click.echo(f"{plan.name}: {plan.describe()}")

    try:
        subscription = Subscription.new(chip_ai)
        subscription.update_start_date(past_date(days_ago))
        result = ProrationCalculator().calculate_price_diff(subscription, chip_x)
    except BillingError as exc:
        raise click.ClickException(exc.message) from exc

    click.echo(str(result))


@cli.command()
@click.option("--current-price", required=True, type=click.IntRange(min=0), help="Current plan price in minor units")
@click.option("--next-price", required=True, type=click.IntRange(min=0), help="Next plan price in minor units")
@click.option("--currency", type=click.Choice(CURRENCY_CHOICES, case_sensitive=False), default=None, help="Current plan currency")
@click.option("--next-currency", type=click.Choice(CURRENCY_CHOICES, case_sensitive=False), default=None, help="Next plan currency, defaults to --currency")
@click.option("--cycle-days", default=28, type=int, help="Current plan billing cycle in days")
@click.option("--days-ago", default=0, type=int, help="Days since the subscription started")
@click.option("--json", "as_json", is_flag=True, help="Print the breakdown as JSON")
def quote(
    current_price: int,
    next_price: int,
    currency: str | None,
    next_currency: str | None,
    cycle_days: int,
    days_ago: int,
    as_json: bool,
) -> None:
    """Preview the price difference of a plan change."""
    now = utcnow()

    try:
        config = get_billing_config()
        current_currency = Currency.parse(currency or config.currency.default_currency)
        target_currency = Currency.parse(next_currency) if next_currency else current_currency
        current_plan = Plan.new(Money.new(current_price, current_currency), cycle_days)
        next_plan = Plan.new(Money.new(next_price, target_currency), cycle_days)
        subscription = Subscription(plan=current_plan, start_at=past_date(days_ago, now=now))
        result = ProrationCalculator().preview(subscription, next_plan, now=now)
    except BillingError as exc:
        raise click.ClickException(exc.message) from exc

    if as_json:
        payload = {
            "is_downgrade": result.is_downgrade,
            "days_elapsed": result.days_elapsed,
            "fee_per_day": MoneyField.from_money(result.fee_per_day).model_dump(),
            "consumed": MoneyField.from_money(result.consumed).model_dump(),
            "amount_due": MoneyField.from_money(result.amount_due).model_dump(),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    locale = config.currency.default_locale
    click.echo(f"Days elapsed: {result.days_elapsed}")
    click.echo(f"Fee per day:  {result.fee_per_day} ({result.fee_per_day.format(locale)})")
    click.echo(f"Consumed:     {result.consumed} ({result.consumed.format(locale)})")
    click.echo(f"Amount due:   {result.amount_due} ({result.amount_due.format(locale)})")


if __name__ == "__main__":
    cli()
