"""File helpers shared by the JSON-backed repositories."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from massupdater.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


def load_records(file_path: Path) -> list[dict]:
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Could not read %s: %s", file_path, exc)
        raise StorageError(f"Could not read {file_path.name}: {exc}") from exc
    if not isinstance(raw, list):
        raise StorageError(f"{file_path.name} must contain a JSON list")
    return raw


def persist_records(file_path: Path, records: list[dict]) -> None:
    """Replace the file in one step so a failed write leaves it intact."""
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=file_path.parent,
            prefix=f".{file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(json.dumps(records, indent=2) + "\n")
        os.replace(tmp_name, file_path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        logger.error("Could not write %s: %s", file_path, exc)
        raise StorageError(f"Could not write {file_path.name}: {exc}") from exc


def ensure_file(file_path: Path) -> None:
    if file_path.exists():
        return
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("[]", encoding="utf-8")
    except OSError as exc:
        logger.error("Could not create %s: %s", file_path, exc)
        raise StorageError(f"Could not create {file_path}: {exc}") from exc


def malformed(file_path: Path, raw: object, exc: Exception) -> StorageError:
    logger.error("Malformed record in %s: %r (%s)", file_path, raw, exc)
    return StorageError(f"Malformed record in {file_path.name}: {raw!r}")
