"""Wizard service: validate, persist, advance, resume and render.

``WizardService`` is the seam between a user interface and the core. Each
``save_*`` call validates the raw step input, persists it through the
storage collaborator and only then advances the flow; a failure at any
point leaves the current snapshot untouched.
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from typing import Any

from contract_gen.config import CompanyConfig, LayoutConfig
from contract_gen.documents import DocumentBlob, compose_contract, compose_power_of_attorney
from contract_gen.exceptions import (
    AuthorizationError,
    MissingPrerequisiteError,
    RecordNotFoundError,
    StorageError,
    UniqueConstraintViolation,
    UniquenessConflictError,
)
from contract_gen.flow import FlowContext, FormProgress, Step
from contract_gen.models import FinancialTerms, FlowKind
from contract_gen.records import ResumeSnapshot, load_record
from contract_gen.records.mapping import (
    customer_to_row,
    financial_terms_to_row,
    installment_to_row,
    location_to_row,
    power_of_attorney_to_row,
    row_to_power_of_attorney,
    technical_to_row,
)
from contract_gen.schemas import mask_tax_id, validate_power_of_attorney, validate_step
from contract_gen.store.base import (
    CUSTOMERS,
    FINANCIAL_TERMS,
    INSTALLATION_LOCATIONS,
    INSTALLMENTS,
    POWER_OF_ATTORNEY,
    TECHNICAL_CONFIGS,
    AuthProvider,
    Identity,
    Row,
    Storage,
)

logger = logging.getLogger(__name__)

TAX_ID_TAKEN = "CPF/CNPJ já cadastrado"


@dataclass(frozen=True)
class HistoryEntry:
    """One previously registered customer, as listed for resuming."""

    customer_id: str
    full_name: str
    tax_id: str
    created_at: str | None


@dataclass(frozen=True)
class PowerOfAttorneyEntry:
    """One stored standalone power of attorney."""

    power_of_attorney_id: str
    full_name: str
    cpf: str
    created_at: str | None


class WizardService:
    """Drive one wizard session against storage and auth collaborators.

    Parameters
    ----------
    storage : Storage
        Record storage.
    auth : AuthProvider
        Supplies the identity every write is attributed to.
    context : FlowContext | None
        Owner of the current snapshot; a fresh one is created when omitted.
    company : CompanyConfig | None
        Contracted company printed on documents.
    layout : LayoutConfig | None
        Page geometry for documents.
    today : Callable[[], date] | None
        Clock used for resume substitutions and document dates.
    """

    def __init__(
        self,
        storage: Storage,
        auth: AuthProvider,
        context: FlowContext | None = None,
        company: CompanyConfig | None = None,
        layout: LayoutConfig | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.storage = storage
        self.auth = auth
        self.context = context or FlowContext()
        self.company = company or CompanyConfig()
        self.layout = layout or LayoutConfig()
        self._today = today or date.today

    @property
    def state(self) -> FormProgress:
        return self.context.state

    # Navigation

    def start_new(self, kind: FlowKind = FlowKind.CONTRACT) -> FormProgress:
        return self.context.start_new(kind)

    def go_to(self, step: Step) -> bool:
        return self.context.go_to(step)

    # Step saves

    def check_tax_id(self, tax_id: str) -> None:
        """Raise if ``tax_id`` belongs to a customer other than the current one.

        Raises
        ------
        UniquenessConflictError
            When another customer already holds the tax id.
        """
        existing = self.storage.find(CUSTOMERS, tax_id=mask_tax_id(tax_id))
        if existing is not None and existing["id"] != self.state.data.customer_id:
            logger.warning(
                "Tax id already registered to customer %s",
                existing["id"],
                extra={"step": Step.CUSTOMER_INFO.value},
            )
            raise UniquenessConflictError(TAX_ID_TAKEN)

    def save_customer_info(self, raw: Mapping[str, Any]) -> FormProgress | None:
        """Validate and persist the customer step.

        The first save of a flow creates the customer; later saves update
        the row whose id the flow already holds.

        Raises
        ------
        FieldValidationError
            If the input is invalid.
        AuthorizationError
            If nobody is signed in.
        UniquenessConflictError
            If the tax id is registered to another customer.
        """
        info = validate_step(Step.CUSTOMER_INFO, raw)
        identity = self._require_identity()
        generation = self.context.generation
        customer_id = self.state.data.customer_id

        row: Row = {**customer_to_row(info), "user_id": identity.user_id}
        if customer_id is None:
            self.check_tax_id(info.tax_id)
        else:
            row["id"] = customer_id

        try:
            saved = self._save(CUSTOMERS, row)
        except UniqueConstraintViolation as exc:
            logger.warning("Unique constraint rejected customer save: %s", exc)
            raise UniquenessConflictError(TAX_ID_TAKEN) from exc

        logger.info(
            "Saved customer %s",
            saved["id"],
            extra={"step": Step.CUSTOMER_INFO.value, "customer_id": saved["id"]},
        )
        return self.context.advance(Step.CUSTOMER_INFO, info, saved["id"], generation)

    def save_installation_location(self, raw: Mapping[str, Any]) -> FormProgress | None:
        location = validate_step(Step.INSTALLATION_LOCATION, raw)
        return self._save_dependent(
            Step.INSTALLATION_LOCATION,
            INSTALLATION_LOCATIONS,
            location_to_row(location),
            location,
            self.state.data.installation_location_id,
        )

    def save_technical_config(self, raw: Mapping[str, Any]) -> FormProgress | None:
        config = validate_step(Step.TECHNICAL_CONFIG, raw)
        return self._save_dependent(
            Step.TECHNICAL_CONFIG,
            TECHNICAL_CONFIGS,
            technical_to_row(config),
            config,
            self.state.data.technical_config_id,
        )

    def save_financial_terms(self, raw: Mapping[str, Any]) -> FormProgress | None:
        """Persist the terms row, then replace its installments in order.

        If replacing the installments fails, the terms row and its previous
        installments are put back before the error propagates.
        """
        terms: FinancialTerms = validate_step(Step.FINANCIAL_TERMS, raw)
        identity = self._require_identity()
        customer_id = self._require_customer(Step.FINANCIAL_TERMS)
        generation = self.context.generation
        terms_id = self.state.data.financial_terms_id
        if terms_id is None:
            # A row left by an earlier attempt is updated, not duplicated.
            existing = self.storage.find(FINANCIAL_TERMS, customer_id=customer_id)
            terms_id = existing["id"] if existing is not None else None

        previous: Row | None = None
        previous_installments: list[Row] = []
        if terms_id is not None:
            previous = self.storage.find(FINANCIAL_TERMS, id=terms_id)
            previous_installments = self.storage.find_all(
                INSTALLMENTS, order_by="position", financial_terms_id=terms_id
            )

        row: Row = {
            **financial_terms_to_row(terms),
            "customer_id": customer_id,
            "user_id": identity.user_id,
        }
        if terms_id is not None:
            row["id"] = terms_id
        saved = self._save(FINANCIAL_TERMS, row)

        try:
            removed = self._delete_where(INSTALLMENTS, financial_terms_id=saved["id"])
            for position, installment in enumerate(terms.installments):
                self._save(
                    INSTALLMENTS, installment_to_row(installment, saved["id"], position)
                )
        except StorageError:
            self._restore_financial_terms(saved["id"], previous, previous_installments)
            raise
        logger.info(
            "Saved %d installment(s), replaced %d",
            len(terms.installments),
            removed,
            extra={
                "step": Step.FINANCIAL_TERMS.value,
                "customer_id": customer_id,
                "entity_id": saved["id"],
            },
        )
        return self.context.advance(Step.FINANCIAL_TERMS, terms, saved["id"], generation)

    def _save_dependent(
        self, step: Step, table: str, row: Row, model: Any, entity_id: str | None
    ) -> FormProgress | None:
        identity = self._require_identity()
        customer_id = self._require_customer(step)
        generation = self.context.generation

        row = {**row, "customer_id": customer_id, "user_id": identity.user_id}
        if entity_id is not None:
            row["id"] = entity_id
        saved = self._save(table, row)

        logger.info(
            "Saved %s %s",
            table,
            saved["id"],
            extra={"step": step.value, "customer_id": customer_id, "entity_id": saved["id"]},
        )
        return self.context.advance(step, model, saved["id"], generation)

    # Records

    def resume(self, customer_id: str) -> ResumeSnapshot:
        """Load a stored record and make it the current flow."""
        snapshot = load_record(self.storage, customer_id, today=self._today())
        self.context.resume(snapshot.data)
        return snapshot

    def history(self) -> list[HistoryEntry]:
        """Registered customers, newest first."""
        rows = self.storage.find_all(CUSTOMERS, order_by="created_at", descending=True)
        return [
            HistoryEntry(
                customer_id=row["id"],
                full_name=row.get("full_name") or "",
                tax_id=row.get("tax_id") or "",
                created_at=row.get("created_at"),
            )
            for row in rows
        ]

    def delete_record(self, customer_id: str) -> None:
        """Delete a customer and every row that depends on it.

        Raises
        ------
        RecordNotFoundError
            If the customer does not exist.
        """
        self._require_identity()
        if self.storage.find(CUSTOMERS, id=customer_id) is None:
            raise RecordNotFoundError(f"Customer {customer_id} not found")

        for financial in self.storage.find_all(FINANCIAL_TERMS, customer_id=customer_id):
            self._delete_where(INSTALLMENTS, financial_terms_id=financial["id"])
        for table in (FINANCIAL_TERMS, TECHNICAL_CONFIGS, INSTALLATION_LOCATIONS):
            self._delete_where(table, customer_id=customer_id)
        self._delete(CUSTOMERS, customer_id)
        logger.info("Deleted customer %s", customer_id, extra={"customer_id": customer_id})

        if self.state.data.customer_id == customer_id:
            self.context.start_new(self.state.kind)

    def power_of_attorney_history(self) -> list[PowerOfAttorneyEntry]:
        """Stored powers of attorney, newest first."""
        rows = self.storage.find_all(POWER_OF_ATTORNEY, order_by="created_at", descending=True)
        return [
            PowerOfAttorneyEntry(
                power_of_attorney_id=row["id"],
                full_name=row.get("full_name") or "",
                cpf=row.get("cpf") or "",
                created_at=row.get("created_at"),
            )
            for row in rows
        ]

    def delete_power_of_attorney(self, power_of_attorney_id: str) -> None:
        """Delete a stored power of attorney.

        Raises
        ------
        RecordNotFoundError
            If no power of attorney has that id.
        """
        self._require_identity()
        self._require_power_of_attorney(power_of_attorney_id)
        self._delete(POWER_OF_ATTORNEY, power_of_attorney_id)
        logger.info(
            "Deleted power of attorney %s",
            power_of_attorney_id,
            extra={"entity_id": power_of_attorney_id},
        )

    # Documents

    def save_power_of_attorney(self, raw: Mapping[str, Any]) -> DocumentBlob:
        """Validate and store standalone grantor data, then render it."""
        data = validate_power_of_attorney(raw)
        identity = self._require_identity()
        saved = self._save(
            POWER_OF_ATTORNEY, {**power_of_attorney_to_row(data), "user_id": identity.user_id}
        )
        logger.info("Saved power of attorney %s", saved["id"], extra={"entity_id": saved["id"]})
        return compose_power_of_attorney(data, self.company, self.layout, self._today())

    def generate_contract(self) -> DocumentBlob:
        return compose_contract(self.state.data, self.company, self.layout, self._today())

    def generate_power_of_attorney(self) -> DocumentBlob:
        return compose_power_of_attorney(self.state.data, self.company, self.layout, self._today())

    def generate_stored_power_of_attorney(self, power_of_attorney_id: str) -> DocumentBlob:
        """Render a power of attorney saved earlier with ``save_power_of_attorney``."""
        data = row_to_power_of_attorney(self._require_power_of_attorney(power_of_attorney_id))
        return compose_power_of_attorney(data, self.company, self.layout, self._today())

    def _restore_financial_terms(
        self, terms_id: str, previous: Row | None, installments: list[Row]
    ) -> None:
        """Undo a partial financial terms save."""
        try:
            self.storage.delete_where(INSTALLMENTS, financial_terms_id=terms_id)
            if previous is None:
                self.storage.delete(FINANCIAL_TERMS, terms_id)
            else:
                self.storage.save_or_update(FINANCIAL_TERMS, previous)
                for row in installments:
                    self.storage.save_or_update(INSTALLMENTS, row)
        except StorageError:
            logger.exception(
                "Could not restore financial terms %s",
                terms_id,
                extra={"table": FINANCIAL_TERMS, "entity_id": terms_id},
            )
        else:
            logger.info(
                "Restored financial terms %s after a failed save",
                terms_id,
                extra={"entity_id": terms_id},
            )

    @contextmanager
    def _logged_failure(self, action: str, table: str) -> Iterator[None]:
        try:
            yield
        except UniqueConstraintViolation:
            raise
        except StorageError:
            logger.exception("Failed to %s %s row", action, table, extra={"table": table})
            raise

    def _save(self, table: str, row: Row) -> Row:
        with self._logged_failure("save", table):
            return self.storage.save_or_update(table, row)

    def _delete_where(self, table: str, **filters: Any) -> int:
        with self._logged_failure("delete", table):
            return self.storage.delete_where(table, **filters)

    def _delete(self, table: str, record_id: str) -> None:
        with self._logged_failure("delete", table):
            self.storage.delete(table, record_id)

    def _require_identity(self) -> Identity:
        identity = self.auth.current_user()
        if identity is None:
            logger.warning("Refusing to persist without a signed-in user")
            raise AuthorizationError("Sessão expirada. Faça login novamente.")
        return identity

    def _require_power_of_attorney(self, power_of_attorney_id: str) -> Row:
        row = self.storage.find(POWER_OF_ATTORNEY, id=power_of_attorney_id)
        if row is None:
            raise RecordNotFoundError(f"Power of attorney {power_of_attorney_id} not found")
        return row

    def _require_customer(self, step: Step) -> str:
        customer_id = self.state.data.customer_id
        if customer_id is None:
            raise MissingPrerequisiteError(
                f"Cannot save {step.value} before the customer is saved"
            )
        return customer_id
