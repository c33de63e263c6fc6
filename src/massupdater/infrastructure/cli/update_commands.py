"""CLI command for the interactive mass update session.

Every option may be omitted; the operator is then prompted for it in
the order store, amount, text, attribute.
"""

from __future__ import annotations

from contextlib import ExitStack

import click

from massupdater.application.dto import UpdateRequest
from massupdater.application.mass_update import MassUpdateHandler
from massupdater.application.progress import ProgressReporter
from massupdater.domain.exceptions import DomainException
from massupdater.domain.model.value_objects import ProductAttribute
from massupdater.infrastructure.bootstrap import product_repository, store_repository


class ClickProgressReporter(ProgressReporter):
    """Renders engine progress with a click progress bar."""

    def __init__(self) -> None:
        self._stack = ExitStack()
        self._bar = None

    def note(self, message: str) -> None:
        click.secho(f"[NOTE] {message}", fg="yellow")

    def start(self, total: int) -> None:
        if total > 0:
            self._bar = self._stack.enter_context(
                click.progressbar(length=total, label="Updating products")
            )

    def advance(self) -> None:
        if self._bar is not None:
            self._bar.update(1)

    def finish(self) -> None:
        self.close()

    def close(self) -> None:
        self._stack.close()
        self._bar = None


@click.command("update")
@click.option(
    "--products-amount",
    type=click.IntRange(min=0),
    default=None,
    help="Amount of products to be updated.",
)
@click.option("--append-text", default=None, help="Text to append to the product field.")
@click.option(
    "--product-attribute",
    type=click.Choice(ProductAttribute.labels(), case_sensitive=False),
    default=None,
    help="Field to have the text appended.",
)
@click.option("--store-code", default=None, help="Store whose catalog is updated.")
@click.pass_obj
def update(
    obj: dict,
    products_amount: int | None,
    append_text: str | None,
    product_attribute: str | None,
    store_code: str | None,
) -> None:
    """Append text to the name or description of many products."""
    reporter = ClickProgressReporter()

    try:
        store_repo = store_repository(obj["data_dir"])
        product_repo = product_repository(obj["data_dir"])

        if store_code is None:
            codes = store_repo.list_codes()
            if not codes:
                raise click.ClickException("No stores found.")
            store_code = click.prompt("Select store code", type=click.Choice(codes))
        store_id = store_repo.resolve_id(store_code)

        if products_amount is None:
            products_amount = click.prompt(
                f"Enter amount of products [Max: {product_repo.count(store_id)}]",
                type=click.IntRange(min=0),
            )
        if append_text is None:
            append_text = click.prompt(
                "Enter text to be appended", default="", show_default=False
            )
        if product_attribute is None:
            product_attribute = click.prompt(
                "Select attribute to amend",
                type=click.Choice(ProductAttribute.labels(), case_sensitive=False),
            )

        request = UpdateRequest(
            store_id=store_id,
            requested_amount=products_amount,
            attribute=ProductAttribute.from_label(product_attribute),
            append_text=append_text,
        )
        handler = MassUpdateHandler(product_repo=product_repo, progress=reporter)
        try:
            result = handler.handle(request)
        finally:
            reporter.close()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.success:
        raise click.ClickException(result.reason or "Update failed")

    click.secho("Operation completed", fg="green")
    click.echo(f"{result.processed} products updated.")
