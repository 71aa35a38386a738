"""Domain models for the contract wizard."""

from contract_gen.models.aggregate import FormAggregate, PowerOfAttorneyData
from contract_gen.models.customer import DEFAULT_NATIONALITY, CustomerInfo
from contract_gen.models.enums import (
    BrazilianState,
    DocumentType,
    FlowKind,
    InstallationType,
    MaritalStatus,
    MountingType,
    PaymentMethod,
)
from contract_gen.models.financial import FinancialTerms, Installment
from contract_gen.models.location import InstallationLocation
from contract_gen.models.technical import InverterSpec, SolarModuleSpec, TechnicalConfig

__all__ = [
    "BrazilianState",
    "CustomerInfo",
    "DEFAULT_NATIONALITY",
    "DocumentType",
    "FinancialTerms",
    "FlowKind",
    "FormAggregate",
    "InstallationLocation",
    "InstallationType",
    "Installment",
    "InverterSpec",
    "MaritalStatus",
    "MountingType",
    "PaymentMethod",
    "PowerOfAttorneyData",
    "SolarModuleSpec",
    "TechnicalConfig",
]
