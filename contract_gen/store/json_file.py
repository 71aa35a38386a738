"""JSON file storage persisting one file per table."""

import json
import logging
from pathlib import Path
from typing import Any

from contract_gen.exceptions import StorageError
from contract_gen.store.base import TABLES, Row
from contract_gen.store.memory import InMemoryStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(InMemoryStorage):
    """``InMemoryStorage`` mirrored to ``<data_dir>/<table>.json``.

    Every mutation rewrites the affected table file, so the directory is
    always a complete copy of the storage.
    """

    def __init__(self, data_dir: str | Path, pretty: bool = False) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        super().__init__(tables={table: self._load(table) for table in TABLES})

    def save_or_update(self, table: str, record: Row) -> Row:
        row = super().save_or_update(table, record)
        self._flush(table)
        return row

    def delete(self, table: str, record_id: str) -> None:
        super().delete(table, record_id)
        self._flush(table)

    def delete_where(self, table: str, **filters: Any) -> int:
        removed = super().delete_where(table, **filters)
        if removed:
            self._flush(table)
        return removed

    def _path(self, table: str) -> Path:
        return self.data_dir / f"{table}.json"

    def _load(self, table: str) -> dict[str, Row]:
        path = self._path(table)
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                rows = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Could not read {path}: {exc}") from exc
        return {row["id"]: row for row in rows}

    def _flush(self, table: str) -> None:
        path = self._path(table)
        rows = list(self.tables[table].values())
        try:
            with open(path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(rows, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(rows, f, ensure_ascii=False, default=str)
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc}") from exc
        logger.debug("Wrote %d %s rows to %s", len(rows), table, path)
