"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from massupdater.domain.exceptions import ValidationError
from massupdater.domain.model.value_objects import ProductAttribute


@dataclass(frozen=True)
class UpdateRequest:
    """Input: what the operator asked for, built once per session."""

    store_id: int
    requested_amount: int
    attribute: ProductAttribute
    append_text: str

    def __post_init__(self) -> None:
        if isinstance(self.requested_amount, bool) or not isinstance(
            self.requested_amount, int
        ):
            raise ValidationError(
                f"Amount of products must be an integer, got {self.requested_amount!r}"
            )
        if self.requested_amount < 0:
            raise ValidationError("Amount of products cannot be negative")


@dataclass(frozen=True)
class UpdateResult:
    """Output: how an update run ended."""

    success: bool
    requested_amount: int
    effective_amount: int = 0
    processed: int = 0
    pages_fetched: int = 0
    clamped: bool = False
    reason: str | None = None


@dataclass(frozen=True)
class StoreLineDTO:
    code: str
    id: int
    product_count: int
