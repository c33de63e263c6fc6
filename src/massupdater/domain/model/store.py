"""A store: one sales channel and its slice of the catalog.

Read-only from the point of view of this tool.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Store:
    id: int
    code: str
