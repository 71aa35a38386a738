"""Storage and auth collaborator interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

CUSTOMERS = "customers"
INSTALLATION_LOCATIONS = "installation_locations"
TECHNICAL_CONFIGS = "technical_configs"
FINANCIAL_TERMS = "financial_terms"
INSTALLMENTS = "installments"
POWER_OF_ATTORNEY = "power_of_attorney"

TABLES = (
    CUSTOMERS,
    INSTALLATION_LOCATIONS,
    TECHNICAL_CONFIGS,
    FINANCIAL_TERMS,
    INSTALLMENTS,
    POWER_OF_ATTORNEY,
)

# table -> columns that must be unique
UNIQUE_COLUMNS: dict[str, tuple[str, ...]] = {
    CUSTOMERS: ("tax_id",),
}

# table -> (column, referenced table)
FOREIGN_KEYS: dict[str, tuple[str, str]] = {
    INSTALLATION_LOCATIONS: ("customer_id", CUSTOMERS),
    TECHNICAL_CONFIGS: ("customer_id", CUSTOMERS),
    FINANCIAL_TERMS: ("customer_id", CUSTOMERS),
    INSTALLMENTS: ("financial_terms_id", FINANCIAL_TERMS),
}

Row = dict[str, Any]


class Storage(ABC):
    """Table-oriented record storage.

    Rows are plain dicts of JSON-compatible values keyed by snake_case
    column names. ``"id"`` is assigned by the storage on insert.
    """

    @abstractmethod
    def save_or_update(self, table: str, record: Row) -> Row:
        """Insert ``record`` or, when it carries an ``id``, update that row."""

    @abstractmethod
    def find(self, table: str, **filters: Any) -> Row | None:
        """First row matching every filter, or ``None``."""

    @abstractmethod
    def find_all(
        self,
        table: str,
        order_by: str | None = None,
        descending: bool = False,
        **filters: Any,
    ) -> list[Row]:
        """All rows matching every filter."""

    @abstractmethod
    def delete(self, table: str, record_id: str) -> None:
        """Delete a row by id; deleting a missing row is a no-op."""

    @abstractmethod
    def delete_where(self, table: str, **filters: Any) -> int:
        """Delete all matching rows and return how many were removed."""


@dataclass(frozen=True)
class Identity:
    """Authenticated operator."""

    user_id: str
    email: str | None = None


class AuthProvider(ABC):
    """Supplies the operator on whose behalf records are stored."""

    @abstractmethod
    def current_user(self) -> Identity | None:
        """Current identity, or ``None`` when signed out or expired."""
