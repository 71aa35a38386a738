"""Aggregate of all wizard step data for one workflow."""

from dataclasses import dataclass, replace
from typing import Any

from contract_gen.models.customer import CustomerInfo
from contract_gen.models.enums import BrazilianState
from contract_gen.models.financial import FinancialTerms
from contract_gen.models.location import InstallationLocation
from contract_gen.models.technical import TechnicalConfig


@dataclass(frozen=True)
class FormAggregate:
    """Immutable snapshot of the data captured so far.

    A sub-object being present means its step was captured at least once.
    Merging never drops a field: ``merge`` only overwrites the keys it is
    given.
    """

    customer_id: str | None = None
    customer_info: CustomerInfo | None = None
    installation_location: InstallationLocation | None = None
    technical_config: TechnicalConfig | None = None
    financial_terms: FinancialTerms | None = None
    installation_location_id: str | None = None
    technical_config_id: str | None = None
    financial_terms_id: str | None = None

    def merge(self, **changes: Any) -> "FormAggregate":
        """Return a copy with ``changes`` applied; ``None`` values are ignored."""
        kept = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **kept)


@dataclass(frozen=True)
class PowerOfAttorneyData:
    """Grantor identity and address for a standalone power of attorney."""

    full_name: str
    cpf: str
    rg: str
    issuing_authority: str
    street: str
    number: str
    neighborhood: str
    city: str
    state: BrazilianState
    utility_company: str = ""
    nationality: str = "Brasileiro(a)"
