"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from enum import Enum

from massupdater.domain.exceptions import ValidationError


class ProductAttribute(Enum):
    """The product fields an append mutation may target."""

    NAME = "Name"
    DESCRIPTION = "Description"

    @property
    def field_name(self) -> str:
        return self.value.lower()

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_label(cls, label: str) -> ProductAttribute:
        """Parse a label case-insensitively ("name", "NAME", "Name")."""
        for member in cls:
            if member.value.lower() == label.strip().lower():
                return member
        raise ValidationError(
            f"Attribute '{label}' not recognized. "
            f"Expected one of: {', '.join(cls.labels())}"
        )
