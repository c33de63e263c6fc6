"""Application service: List Stores use case (query)."""

from __future__ import annotations

from massupdater.application.dto import StoreLineDTO
from massupdater.domain.repository.product_repository import ProductRepository
from massupdater.domain.repository.store_repository import StoreRepository


class ListStoresHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._store_repo = store_repo
        self._product_repo = product_repo

    def handle(self) -> list[StoreLineDTO]:
        return [
            StoreLineDTO(
                code=store.code,
                id=store.id,
                product_count=self._product_repo.count(store.id),
            )
            for store in self._store_repo.list_all()
        ]
