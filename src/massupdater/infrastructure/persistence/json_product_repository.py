"""JSON-file-backed implementation of ProductRepository.

Records keep whatever extra keys they carry (sku, price, ...); only
``name`` and ``description`` are ever rewritten by this tool.
"""

from __future__ import annotations

import logging
from pathlib import Path

from massupdater.domain.exceptions import EntityNotFoundError, ValidationError
from massupdater.domain.model.product import Product
from massupdater.domain.repository.product_repository import ProductRepository
from massupdater.infrastructure.persistence.json_file import (
    ensure_file,
    load_records,
    malformed,
    persist_records,
)

logger = logging.getLogger(__name__)

_CORE_FIELDS = ("id", "name", "description", "store_ids")
_MALFORMED = (AttributeError, KeyError, TypeError, ValueError)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- ProductRepository interface ------------------------------------------

    def count(self, store_id: int) -> int:
        return len(self._for_store(store_id))

    def fetch_page(
        self, store_id: int, page_number: int, page_size: int
    ) -> list[Product]:
        if page_number < 1:
            raise ValidationError("Page number must be positive")
        if page_size < 1:
            raise ValidationError("Page size must be positive")
        offset = (page_number - 1) * page_size
        return self._for_store(store_id)[offset : offset + page_size]

    def save(self, product: Product) -> None:
        product.validate()
        records = self._load_raw()
        for i, raw in enumerate(records):
            if self._record_id(raw) == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            raise EntityNotFoundError(f"Product #{product.id} not found in catalog")
        persist_records(self._file_path, records)
        logger.debug("Saved product #%s", product.id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        raw = {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "store_ids": list(product.store_ids),
        }
        raw.update(product.attributes)
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=int(raw["id"]),
            name=raw.get("name", ""),
            description=raw.get("description") or "",
            store_ids=[int(s) for s in raw.get("store_ids", [])],
            attributes={k: v for k, v in raw.items() if k not in _CORE_FIELDS},
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return load_records(self._file_path)

    def _record_id(self, raw: dict) -> int:
        try:
            return int(raw["id"])
        except _MALFORMED as exc:
            raise malformed(self._file_path, raw, exc) from exc

    def _for_store(self, store_id: int) -> list[Product]:
        products = []
        for raw in self._load_raw():
            try:
                products.append(self._to_domain(raw))
            except _MALFORMED as exc:
                raise malformed(self._file_path, raw, exc) from exc
        return [p for p in products if p.belongs_to(store_id)]
