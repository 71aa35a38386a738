"""Sample input generators for the wizard steps."""

from contract_gen.generators.base import BaseGenerator
from contract_gen.generators.customer import (
    CustomerInputGenerator,
    PowerOfAttorneyInputGenerator,
)
from contract_gen.generators.financial import FinancialInputGenerator
from contract_gen.generators.installation import LocationInputGenerator, TechnicalInputGenerator
from contract_gen.generators.tax_ids import generate_cnpj, generate_cpf

__all__ = [
    "BaseGenerator",
    "CustomerInputGenerator",
    "FinancialInputGenerator",
    "LocationInputGenerator",
    "PowerOfAttorneyInputGenerator",
    "TechnicalInputGenerator",
    "generate_cnpj",
    "generate_cpf",
]
