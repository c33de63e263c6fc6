"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from massupdater.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from massupdater.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def store_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonStoreRepository:
    return JsonStoreRepository(data_dir / "stores.json")


def product_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonProductRepository:
    return JsonProductRepository(data_dir / "products.json")
