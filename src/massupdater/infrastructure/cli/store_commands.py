"""CLI commands for the store directory."""

from __future__ import annotations

import click

from massupdater.application.list_stores import ListStoresHandler
from massupdater.domain.exceptions import DomainException
from massupdater.infrastructure.bootstrap import product_repository, store_repository


@click.command("stores")
@click.pass_obj
def stores(obj: dict) -> None:
    """List stores and how many products each one holds."""
    try:
        handler = ListStoresHandler(
            store_repo=store_repository(obj["data_dir"]),
            product_repo=product_repository(obj["data_dir"]),
        )
        lines = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No stores found.")
        return

    click.echo(f"{'Code':<20} {'ID':>6} {'Products':>10}")
    click.echo("-" * 38)
    for line in lines:
        click.echo(f"{line.code:<20} {line.id:>6} {line.product_count:>10}")
