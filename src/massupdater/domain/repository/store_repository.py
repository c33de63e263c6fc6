"""Abstract repository for the store directory."""

from __future__ import annotations

from abc import ABC, abstractmethod

from massupdater.domain.exceptions import EntityNotFoundError
from massupdater.domain.model.store import Store


class StoreRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Store]:
        """Return every store, in the order the backend enumerates them."""

    def list_codes(self) -> list[str]:
        return [store.code for store in self.list_all()]

    def resolve_id(self, code: str) -> int:
        """Return the id of the store whose code matches *code* exactly."""
        for store in self.list_all():
            if store.code == code:
                return store.id
        raise EntityNotFoundError(f"Could not find store '{code}'")
