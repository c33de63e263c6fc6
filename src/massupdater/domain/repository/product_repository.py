"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. It covers both catalog reads (count, paging) and
persistence of a single modified record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from massupdater.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def count(self, store_id: int) -> int:
        """Return how many products are assigned to the store."""

    @abstractmethod
    def fetch_page(
        self, store_id: int, page_number: int, page_size: int
    ) -> list[Product]:
        """Return one page (1-indexed) of the store's products.

        The page holds at most *page_size* products and is shorter, or
        empty, past the end of the catalog.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a modified product.

        Raises ValidationError for an invalid record and StorageError
        when the backend is unavailable.
        """
