"""Pagination state for a single update run."""

from __future__ import annotations

from dataclasses import dataclass

from massupdater.domain.exceptions import ValidationError


@dataclass
class BatchCursor:
    """Walks the catalog page by page until ``amount`` records are handled.

    Invariants:
    - ``page_number`` and ``page_size`` are always >= 1
    - ``processed`` never exceeds ``amount``
    """

    amount: int
    page_size: int
    page_number: int = 1
    processed: int = 0

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValidationError("Page size must be positive")
        if self.page_number < 1:
            raise ValidationError("Page number must be positive")
        if self.amount < 0:
            raise ValidationError("Amount cannot be negative")

    @classmethod
    def for_amount(cls, amount: int, batch_size: int) -> BatchCursor:
        return cls(amount=amount, page_size=max(1, min(batch_size, amount)))

    @property
    def remaining(self) -> int:
        return self.amount - self.processed

    @property
    def page_count(self) -> int:
        """Number of pages needed to cover ``amount`` records."""
        return -(-self.amount // self.page_size)

    def has_next(self) -> bool:
        return self.remaining > 0 and self.page_number <= self.page_count

    def record_processed(self) -> None:
        if self.remaining <= 0:
            raise ValidationError("Cursor already covered the requested amount")
        self.processed += 1

    def advance(self) -> None:
        self.page_number += 1
