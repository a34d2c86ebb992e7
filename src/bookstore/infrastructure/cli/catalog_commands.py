"""CLI commands that drive the catalog."""

from __future__ import annotations

import click

from bookstore.application.dto import CatalogLineDTO
from bookstore.application.prune_inventory import PruneInventoryHandler
from bookstore.application.purchase_item import PurchaseItemHandler
from bookstore.application.show_inventory import ShowInventoryHandler
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import (
    DEFAULT_AGE_THRESHOLD,
    DEFAULT_CURRENT_YEAR,
    DEMO_ADDRESS,
    DEMO_EMAIL,
    demo_inventory,
    notification_sink,
)


def _display_inventory(lines: list[CatalogLineDTO]) -> None:
    """Shared formatting for displaying the inventory."""
    click.echo("Current Books in Inventory:")
    for line in lines:
        text = f'{line.kind}: "{line.title}" ({line.year}). Price: {line.price}'
        if line.stock is not None:
            text += f", Stock: {line.stock}"
        click.echo(text)


@click.command("demo")
@click.option("--current-year", default=DEFAULT_CURRENT_YEAR, show_default=True, type=int,
              help="Reference year for pruning.")
@click.option("--threshold", default=DEFAULT_AGE_THRESHOLD, show_default=True,
              type=click.IntRange(min=0),
              help="Maximum age in years before a book is pruned.")
@click.option("--email", default=DEMO_EMAIL, show_default=True, help="Delivery email.")
@click.option("--address", default=DEMO_ADDRESS, show_default=True, help="Shipping address.")
@click.pass_context
def catalog_demo(
    ctx: click.Context,
    current_year: int,
    threshold: int,
    email: str,
    address: str,
) -> None:
    """Run the sample bookstore session end to end."""
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    sink = notification_sink(verbose=verbose)

    click.echo("Adding books to the inventory...")
    click.echo()
    inventory = demo_inventory()

    show = ShowInventoryHandler(inventory)
    purchase = PurchaseItemHandler(inventory, sink)
    prune = PruneInventoryHandler(inventory, sink)

    _display_inventory(show.handle())

    attempts = [
        ("Buying a PhysicalBook (valid purchase):", "P001", 2),
        ("Buying a DigitalBook (valid purchase):", "E002", 1),
        ("Trying to buy a DisplayOnlyBook (should fail):", "S003", 1),
        ("Trying to buy more PhysicalBooks than stock (should fail):", "P001", 10),
    ]

    try:
        for heading, identifier, quantity in attempts:
            click.echo()
            click.echo(heading)
            purchase.handle(identifier, quantity, email, address)

        click.echo()
        _display_inventory(show.handle())

        click.echo()
        click.echo(f"Removing outdated books (older than {threshold} years)...")
        prune.handle(current_year, threshold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo()
    _display_inventory(show.handle())
