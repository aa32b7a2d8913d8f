import logging

import click

from lunchtray.infrastructure.cli.menu_commands import menu_list
from lunchtray.infrastructure.cli.order_commands import order_checkout, order_start
from lunchtray.infrastructure.config import get_log_level


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log order activity.")
def cli(verbose: bool) -> None:
    """Lunch Tray — build a lunch order"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def menu() -> None:
    """Browse the menu."""


@cli.group()
def order() -> None:
    """Place an order."""


# Register subcommands
menu.add_command(menu_list)
order.add_command(order_checkout)
order.add_command(order_start)
