import logging

import click

from bookstore.infrastructure.cli.catalog_commands import catalog_demo


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Also log every catalog event.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Bookstore — in-memory catalog manager"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register subcommands
cli.add_command(catalog_demo)
