from __future__ import annotations

from pathlib import Path

import click

from massupdater.infrastructure.bootstrap import DEFAULT_DATA_DIR, configure_logging
from massupdater.infrastructure.cli.store_commands import stores
from massupdater.infrastructure.cli.update_commands import update

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="MASSUPDATER_DATA_DIR",
    show_default=True,
    help="Directory holding stores.json and products.json.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="MASSUPDATER_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity (written to stderr).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """Mass Updater: bulk-append text to catalog products"""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


# Register subcommands
cli.add_command(stores)
cli.add_command(update)
