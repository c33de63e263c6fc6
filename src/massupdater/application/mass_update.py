"""Application service: Mass Update use case.

Walks a store's catalog page by page and appends a fixed text to the
chosen attribute of each product, saving every record on its own.

There is no transaction around the run: if a fetch or save fails, the
records saved before it stay modified and the run stops there.
"""

from __future__ import annotations

import logging

from massupdater.application.dto import UpdateRequest, UpdateResult
from massupdater.application.progress import NullProgressReporter, ProgressReporter
from massupdater.domain.exceptions import DomainException
from massupdater.domain.model.batch_cursor import BatchCursor
from massupdater.domain.model.product import Product
from massupdater.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

BATCH_SIZE = 50


class MassUpdateHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        progress: ProgressReporter | None = None,
        batch_size: int = BATCH_SIZE,
    ) -> None:
        self._product_repo = product_repo
        self._progress = progress or NullProgressReporter()
        self._batch_size = batch_size

    def handle(self, request: UpdateRequest) -> UpdateResult:
        """Run the update and report how it ended.

        Steps:
        1. Count the store's products; an empty store is a terminal failure.
        2. Clamp the requested amount to that count (advisory, not an error).
        3. Fetch ceil(amount / page_size) pages, never touching more than
           ``amount`` records; mutate, save and report each one.
        4. Stop at the first fetch or save error.
        """
        try:
            total = self._product_repo.count(request.store_id)
        except DomainException as exc:
            logger.error("Counting products for store #%s failed: %s", request.store_id, exc)
            return UpdateResult(
                success=False,
                requested_amount=request.requested_amount,
                reason=str(exc),
            )

        if total <= 0:
            return UpdateResult(
                success=False,
                requested_amount=request.requested_amount,
                reason=f"No products in the catalog for store #{request.store_id}",
            )

        amount = request.requested_amount
        clamped = amount > total
        if clamped:
            logger.warning(
                "Requested %d products but store #%s only has %d",
                amount, request.store_id, total,
            )
            self._progress.note(
                f"Amount of products given is greater than the count in the "
                f"catalog, updating {total} products"
            )
            amount = total

        cursor = BatchCursor.for_amount(amount, self._batch_size)
        logger.info(
            "Appending %r to %s of %d products in store #%s (page size %d)",
            request.append_text, request.attribute.field_name, amount,
            request.store_id, cursor.page_size,
        )
        self._progress.start(amount)

        pages_fetched = 0
        while cursor.has_next():
            try:
                page = self._product_repo.fetch_page(
                    request.store_id, cursor.page_number, cursor.page_size
                )
            except DomainException as exc:
                logger.error("Fetching page %d failed: %s", cursor.page_number, exc)
                return self._failure(
                    request, amount, cursor, pages_fetched, clamped,
                    f"Failed to fetch page {cursor.page_number}: {exc}",
                )
            pages_fetched += 1
            logger.debug("Page %d returned %d products", cursor.page_number, len(page))

            if not page:
                # Catalog shrank since it was counted.
                logger.warning(
                    "Page %d came back empty after %d of %d products",
                    cursor.page_number, cursor.processed, amount,
                )
                break

            for product in page[: cursor.remaining]:
                try:
                    self._update_product(product, request)
                except DomainException as exc:
                    record = cursor.processed + 1
                    logger.error("Saving product #%s failed: %s", product.id, exc)
                    return self._failure(
                        request, amount, cursor, pages_fetched, clamped,
                        f"Failed on record {record} (product #{product.id}): {exc}",
                    )
                cursor.record_processed()
                self._progress.advance()

            cursor.advance()

        self._progress.finish()
        logger.info("Updated %d products in %d pages", cursor.processed, pages_fetched)
        return UpdateResult(
            success=True,
            requested_amount=request.requested_amount,
            effective_amount=amount,
            processed=cursor.processed,
            pages_fetched=pages_fetched,
            clamped=clamped,
        )

    # --- Helpers --------------------------------------------------------------

    def _update_product(self, product: Product, request: UpdateRequest) -> None:
        product.append_to(request.attribute, request.append_text)
        self._product_repo.save(product)

    @staticmethod
    def _failure(
        request: UpdateRequest,
        amount: int,
        cursor: BatchCursor,
        pages_fetched: int,
        clamped: bool,
        reason: str,
    ) -> UpdateResult:
        return UpdateResult(
            success=False,
            requested_amount=request.requested_amount,
            effective_amount=amount,
            processed=cursor.processed,
            pages_fetched=pages_fetched,
            clamped=clamped,
            reason=reason,
        )
