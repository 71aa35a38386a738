"""In-memory storage with unique and foreign-key constraints."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from contract_gen.exceptions import (
    RecordNotFoundError,
    StorageError,
    UniqueConstraintViolation,
)
from contract_gen.store.base import FOREIGN_KEYS, TABLES, UNIQUE_COLUMNS, Row, Storage

logger = logging.getLogger(__name__)


@dataclass
class InMemoryStorage(Storage):
    """Dict-backed tables keyed by row id.

    Unique columns are tracked in ``_unique_index`` so collisions are
    detected without scanning; foreign keys are checked on every write.
    """

    tables: dict[str, dict[str, Row]] = field(
        default_factory=lambda: {table: {} for table in TABLES}
    )

    # (table, column) -> value -> row id
    _unique_index: dict[tuple[str, str], dict[Any, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for table, columns in UNIQUE_COLUMNS.items():
            for column in columns:
                index = self._unique_index.setdefault((table, column), {})
                for row_id, row in self.tables.get(table, {}).items():
                    if row.get(column) is not None:
                        index[row[column]] = row_id

    def save_or_update(self, table: str, record: Row) -> Row:
        rows = self._table(table)
        record = dict(record)
        record_id = record.pop("id", None)
        now = datetime.now().isoformat()

        if record_id is not None and record_id in rows:
            row = {**rows[record_id], **record, "id": record_id, "updated_at": now}
        else:
            record_id = record_id or uuid.uuid4().hex
            row = {**record, "id": record_id, "created_at": now}

        self._check_foreign_key(table, row)
        self._check_unique(table, row)
        self._unindex(table, rows.get(record_id))
        rows[record_id] = row
        self._index(table, row)
        logger.debug("Saved %s row %s", table, record_id, extra={"table": table})
        return dict(row)

    def find(self, table: str, **filters: Any) -> Row | None:
        for row in self._table(table).values():
            if _matches(row, filters):
                return dict(row)
        return None

    def find_all(
        self,
        table: str,
        order_by: str | None = None,
        descending: bool = False,
        **filters: Any,
    ) -> list[Row]:
        rows = [dict(row) for row in self._table(table).values() if _matches(row, filters)]
        if order_by is None:
            return rows
        # Rows without the column always go last.
        present = [row for row in rows if row.get(order_by) is not None]
        missing = [row for row in rows if row.get(order_by) is None]
        present.sort(key=lambda row: row[order_by], reverse=descending)
        return present + missing

    def delete(self, table: str, record_id: str) -> None:
        row = self._table(table).pop(record_id, None)
        self._unindex(table, row)

    def delete_where(self, table: str, **filters: Any) -> int:
        rows = self._table(table)
        doomed = [row_id for row_id, row in rows.items() if _matches(row, filters)]
        for row_id in doomed:
            self._unindex(table, rows.pop(row_id))
        return len(doomed)

    def summary(self) -> dict[str, int]:
        """Return row counts per table."""
        return {table: len(rows) for table, rows in self.tables.items()}

    def _table(self, table: str) -> dict[str, Row]:
        if table not in self.tables:
            raise StorageError(f"Unknown table: {table}")
        return self.tables[table]

    def _check_foreign_key(self, table: str, row: Row) -> None:
        if table not in FOREIGN_KEYS:
            return
        column, parent = FOREIGN_KEYS[table]
        if row.get(column) not in self.tables[parent]:
            raise RecordNotFoundError(f"{parent} row {row.get(column)} not found")

    def _check_unique(self, table: str, row: Row) -> None:
        for column in UNIQUE_COLUMNS.get(table, ()):
            value = row.get(column)
            owner = self._unique_index[(table, column)].get(value)
            if value is not None and owner is not None and owner != row["id"]:
                raise UniqueConstraintViolation(table, column, str(value))

    def _index(self, table: str, row: Row | None) -> None:
        if row is None:
            return
        for column in UNIQUE_COLUMNS.get(table, ()):
            if row.get(column) is not None:
                self._unique_index[(table, column)][row[column]] = row["id"]

    def _unindex(self, table: str, row: Row | None) -> None:
        if row is None:
            return
        for column in UNIQUE_COLUMNS.get(table, ()):
            index = self._unique_index[(table, column)]
            if index.get(row.get(column)) == row["id"]:
                del index[row[column]]


def _matches(row: Row, filters: dict[str, Any]) -> bool:
    return all(row.get(key) == value for key, value in filters.items())
