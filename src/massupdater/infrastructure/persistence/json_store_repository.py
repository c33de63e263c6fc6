"""JSON-file-backed implementation of StoreRepository."""

from __future__ import annotations

from pathlib import Path

from massupdater.domain.model.store import Store
from massupdater.domain.repository.store_repository import StoreRepository
from massupdater.infrastructure.persistence.json_file import (
    ensure_file,
    load_records,
    malformed,
)


class JsonStoreRepository(StoreRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    def list_all(self) -> list[Store]:
        stores = []
        for raw in load_records(self._file_path):
            try:
                stores.append(Store(id=int(raw["id"]), code=str(raw["code"])))
            except (KeyError, TypeError, ValueError) as exc:
                raise malformed(self._file_path, raw, exc) from exc
        return stores
