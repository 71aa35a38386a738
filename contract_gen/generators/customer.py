"""Customer and power-of-attorney input generators."""

from __future__ import annotations

from typing import Any

from contract_gen.generators.base import BaseGenerator
from contract_gen.generators.tax_ids import generate_cnpj, generate_cpf
from contract_gen.models import MaritalStatus

EMAIL_DOMAINS = [
    "gmail.com",
    "hotmail.com",
    "outlook.com",
    "yahoo.com.br",
    "uol.com.br",
    "terra.com.br",
]

ISSUING_BODIES = ["SSP", "SESP", "PC", "DETRAN"]


class CustomerInputGenerator(BaseGenerator):
    """Raw customer-info step input.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    company_share : float
        Share of customers registered with a CNPJ.
    """

    MARITAL_STATUSES = list(MaritalStatus)
    MARITAL_WEIGHTS = [0.35, 0.45, 0.15, 0.05]

    def __init__(self, seed: int | None = None, company_share: float = 0.2) -> None:
        super().__init__(seed)
        self.company_share = company_share

    def generate(self) -> dict[str, Any]:
        state = self.fake.estado_sigla()
        is_company = self.rng.random() < self.company_share
        prefix = self.fake.user_name()

        data: dict[str, Any] = {
            "full_name": self.fake.company() if is_company else self.fake.name(),
            "tax_id": generate_cnpj(self.rng) if is_company else generate_cpf(self.rng),
            "rg": str(self.rng.randint(1_000_000, 99_999_999)),
            "issuing_authority": f"{self.rng.choice(ISSUING_BODIES)}/{state}",
            "profession": "Empresa" if is_company else self.fake.job(),
            "phone": f"{self.rng.randint(11, 99)}9{self.rng.randint(0, 99_999_999):08d}",
            "email": f"{prefix}@{self.rng.choice(EMAIL_DOMAINS)}",
        }
        if not is_company:
            data["marital_status"] = self.rng.choices(
                self.MARITAL_STATUSES, weights=self.MARITAL_WEIGHTS, k=1
            )[0].value
        return data


class PowerOfAttorneyInputGenerator(BaseGenerator):
    """Raw input for a standalone power of attorney."""

    def __init__(self, seed: int | None = None, utility_companies: list[str] | None = None) -> None:
        super().__init__(seed)
        self.utility_companies = utility_companies or ["Energisa", "CEMIG", "Enel", "Copel"]

    def generate(self) -> dict[str, Any]:
        state = self.fake.estado_sigla()
        return {
            "full_name": self.fake.name(),
            "cpf": generate_cpf(self.rng),
            "rg": str(self.rng.randint(1_000_000, 99_999_999)),
            "issuing_authority": f"{self.rng.choice(ISSUING_BODIES)}/{state}",
            "street": self.fake.street_name(),
            "number": self.fake.building_number(),
            "neighborhood": self.fake.bairro(),
            "city": self.fake.city(),
            "state": state,
            "utility_company": self.rng.choice(self.utility_companies),
        }
