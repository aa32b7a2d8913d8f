"""CLI commands for browsing the menu."""

from __future__ import annotations

import click

from lunchtray.application.list_menu import ListMenuHandler
from lunchtray.domain.model.order import Course
from lunchtray.infrastructure.bootstrap import menu_catalog

COURSE_NAMES = [course.value for course in Course]


@click.command("list")
@click.option(
    "--type", "course_name",
    type=click.Choice(COURSE_NAMES),
    default=None,
    help="Only show one course.",
)
def menu_list(course_name: str | None) -> None:
    """List the dishes on the menu."""
    item_type = Course(course_name).item_type if course_name else None
    items = ListMenuHandler(catalog=menu_catalog()).handle(item_type)

    if not items:
        click.echo("No menu items found.")
        return

    click.echo(f"{'Key':<12} {'Name':<26} {'Type':<14} {'Price':>8}")
    click.echo("-" * 63)
    for item in items:
        click.echo(f"{item.key:<12} {item.name:<26} {item.type:<14} {item.price:>8}")
