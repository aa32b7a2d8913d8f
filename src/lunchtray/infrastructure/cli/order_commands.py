"""CLI commands for building an order."""

from __future__ import annotations

from decimal import Decimal

import click

from lunchtray.application.build_order import BuildOrderHandler, summarize
from lunchtray.application.dto import OrderSummaryDTO
from lunchtray.domain.exceptions import DomainException
from lunchtray.domain.model.order import Course
from lunchtray.infrastructure.bootstrap import menu_catalog, new_order
from lunchtray.infrastructure.config import get_tax_rate, parse_tax_rate


def _resolve_tax_rate(raw: str | None) -> Decimal:
    if raw is None:
        try:
            return get_tax_rate()
        except DomainException as exc:
            raise click.ClickException(str(exc))
    try:
        return parse_tax_rate(raw)
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="'--tax-rate'")


def _display_summary(dto: OrderSummaryDTO) -> None:
    """Shared formatting for the checkout summary."""
    click.echo("Order Summary")
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Entree':<16} {dto.entree or '(none)':>21}")
    click.echo(f"  {'Side':<16} {dto.side or '(none)':>21}")
    click.echo(f"  {'Accompaniment':<16} {dto.accompaniment or '(none)':>21}")
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Subtotal':<16} {dto.subtotal:>21}")
    click.echo(f"  {'Tax':<16} {dto.tax:>21}")
    click.echo(f"  {'Total':<16} {dto.total:>21}")


@click.command("checkout")
@click.option("--entree", default=None, help="Entree key (e.g. cauliflower).")
@click.option("--side", default=None, help="Side dish key (e.g. salad).")
@click.option("--accompaniment", default=None, help="Accompaniment key (e.g. bread).")
@click.option("--tax-rate", "tax_rate", default=None, help="Tax rate (e.g. 0.08).")
def order_checkout(
    entree: str | None,
    side: str | None,
    accompaniment: str | None,
    tax_rate: str | None,
) -> None:
    """Build an order from menu keys and show its total."""
    handler = BuildOrderHandler(catalog=menu_catalog(), tax_rate=_resolve_tax_rate(tax_rate))

    try:
        dto = handler.handle(entree=entree, side=side, accompaniment=accompaniment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(dto)


@click.command("start")
@click.option("--tax-rate", "tax_rate", default=None, help="Tax rate (e.g. 0.08).")
def order_start(tax_rate: str | None) -> None:
    """Walk through entree, side and accompaniment, then check out."""
    catalog = menu_catalog()
    order = new_order(_resolve_tax_rate(tax_rate), catalog=catalog)

    unsubscribe = order.formatted_subtotal.subscribe(
        lambda subtotal: click.echo(f"Subtotal: {subtotal}")
    )

    for course in Course:
        items = catalog.list_by_type(course.item_type)
        click.echo()
        click.echo(f"Choose your {course.value}:")
        for item in items:
            click.echo(f"  {item.key:<12} {item.name:<26} {item.formatted_price:>8}")
        key = click.prompt(
            course.value.capitalize(),
            type=click.Choice([item.key for item in items]),
        )
        try:
            order.select(course, key)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    unsubscribe()
    click.echo()
    _display_summary(summarize(order))

    if click.confirm("Submit order?", default=True):
        click.echo("Order submitted.")
    else:
        click.echo("Order cancelled.")
    order.reset_order()
