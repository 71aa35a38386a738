"""Rebuild a wizard aggregate from stored records."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from contract_gen.exceptions import RecordNotFoundError
from contract_gen.flow.progress import completed_steps_for
from contract_gen.flow.steps import Step
from contract_gen.models import FinancialTerms, FormAggregate
from contract_gen.records.mapping import (
    parse_due_date,
    row_to_customer,
    row_to_installment,
    row_to_location,
    row_to_technical,
)
from contract_gen.store.base import (
    CUSTOMERS,
    FINANCIAL_TERMS,
    INSTALLATION_LOCATIONS,
    INSTALLMENTS,
    TECHNICAL_CONFIGS,
    Row,
    Storage,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DueDateSubstitution:
    """An installment whose stored due date could not be used."""

    index: int
    raw_value: object
    substituted: date


@dataclass(frozen=True)
class ResumeSnapshot:
    """Aggregate rebuilt from storage plus what had to be patched."""

    data: FormAggregate
    completed_steps: frozenset[Step]
    substitutions: tuple[DueDateSubstitution, ...] = ()


def merge_record(
    customer: Row,
    location: Row | None = None,
    technical: Row | None = None,
    financial: Row | None = None,
    installments: Sequence[Row] = (),
    today: date | None = None,
) -> ResumeSnapshot:
    """Combine a customer row and its optional sub-entity rows.

    Missing sub-entities are simply left out of the aggregate. Installments
    whose due date is missing or unparsable get ``today`` instead; each such
    replacement is logged and reported in ``substitutions``.
    """
    today = today or date.today()
    customer_id = customer.get("id")

    terms = None
    substitutions: list[DueDateSubstitution] = []
    if financial is not None:
        parsed = []
        for index, row in enumerate(installments):
            due_date = parse_due_date(row.get("due_date"))
            if due_date is None:
                logger.warning(
                    "Installment %d of customer %s has unusable due date %r; using %s",
                    index + 1,
                    customer_id,
                    row.get("due_date"),
                    today.isoformat(),
                    extra={"customer_id": customer_id, "entity_id": row.get("id")},
                )
                substitutions.append(DueDateSubstitution(index, row.get("due_date"), today))
                due_date = today
            parsed.append(row_to_installment(row, due_date))
        terms = FinancialTerms(installments=tuple(parsed))

    data = FormAggregate(
        customer_id=customer_id,
        customer_info=row_to_customer(customer),
        installation_location=row_to_location(location) if location else None,
        technical_config=row_to_technical(technical) if technical else None,
        financial_terms=terms,
        installation_location_id=location.get("id") if location else None,
        technical_config_id=technical.get("id") if technical else None,
        financial_terms_id=financial.get("id") if financial else None,
    )
    return ResumeSnapshot(
        data=data,
        completed_steps=completed_steps_for(data),
        substitutions=tuple(substitutions),
    )


def load_record(storage: Storage, customer_id: str, today: date | None = None) -> ResumeSnapshot:
    """Fetch a customer and everything linked to it, then merge."""
    customer = storage.find(CUSTOMERS, id=customer_id)
    if customer is None:
        raise RecordNotFoundError(f"Customer {customer_id} not found")

    location = storage.find(INSTALLATION_LOCATIONS, customer_id=customer_id)
    technical = storage.find(TECHNICAL_CONFIGS, customer_id=customer_id)
    financial = storage.find(FINANCIAL_TERMS, customer_id=customer_id)

    installments: list[Row] = []
    if financial is not None:
        installments = storage.find_all(
            INSTALLMENTS, order_by="position", financial_terms_id=financial["id"]
        )

    return merge_record(customer, location, technical, financial, installments, today=today)
