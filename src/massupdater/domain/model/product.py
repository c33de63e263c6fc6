"""Product aggregate.

The catalog owns products; this tool only holds a transient copy of one
page at a time, mutates a single field and hands it back on save.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from massupdater.domain.exceptions import ValidationError
from massupdater.domain.model.value_objects import ProductAttribute


@dataclass
class Product:
    """A product in the catalog.

    ``attributes`` keeps every other field of the stored record so the
    repository can write it back untouched.
    """

    id: int
    name: str
    description: str = ""
    store_ids: list[int] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)

    def append_to(self, attribute: ProductAttribute, text: str) -> None:
        """Append *text* to the selected field. The other field is untouched."""
        if attribute is ProductAttribute.NAME:
            self.name = (self.name or "") + text
        else:
            self.description = (self.description or "") + text

    def belongs_to(self, store_id: int) -> bool:
        return store_id in self.store_ids

    def validate(self) -> None:
        """Raise ValidationError if the record cannot be persisted."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError(f"Product #{self.id} has an empty name")
        if not isinstance(self.description, str):
            raise ValidationError(
                f"Product #{self.id} description must be text"
            )
