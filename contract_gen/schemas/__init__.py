"""Per-step field schemas.

``validate_step`` is the single entry point used by the service layer: it
returns the typed domain object for a step or raises
``FieldValidationError`` listing every invalid field.
"""

from collections.abc import Mapping
from typing import Any

from contract_gen.flow.steps import Step
from contract_gen.schemas.base import StepSchema, collect_errors, validate_input
from contract_gen.schemas.customer import CustomerInfoSchema
from contract_gen.schemas.financial import FinancialTermsSchema, InstallmentSchema
from contract_gen.schemas.location import InstallationLocationSchema
from contract_gen.schemas.masks import (
    detect_document_type,
    digits_only,
    format_cep,
    format_phone,
    marital_status_required,
    mask_tax_id,
)
from contract_gen.schemas.power_of_attorney import PowerOfAttorneySchema
from contract_gen.schemas.technical import TechnicalConfigSchema

STEP_SCHEMAS: dict[Step, type[StepSchema]] = {
    Step.CUSTOMER_INFO: CustomerInfoSchema,
    Step.INSTALLATION_LOCATION: InstallationLocationSchema,
    Step.TECHNICAL_CONFIG: TechnicalConfigSchema,
    Step.FINANCIAL_TERMS: FinancialTermsSchema,
}


def validate_step(step: Step, raw: Mapping[str, Any] | None) -> Any:
    """Validate raw input for ``step`` and return its domain object."""
    try:
        schema = STEP_SCHEMAS[step]
    except KeyError:
        raise ValueError(f"Step {step.value} has no input schema") from None
    return validate_input(schema, raw).to_model()


def validate_power_of_attorney(raw: Mapping[str, Any] | None) -> Any:
    return validate_input(PowerOfAttorneySchema, raw).to_model()


__all__ = [
    "CustomerInfoSchema",
    "FinancialTermsSchema",
    "InstallationLocationSchema",
    "InstallmentSchema",
    "PowerOfAttorneySchema",
    "STEP_SCHEMAS",
    "TechnicalConfigSchema",
    "collect_errors",
    "detect_document_type",
    "digits_only",
    "format_cep",
    "format_phone",
    "marital_status_required",
    "mask_tax_id",
    "validate_input",
    "validate_power_of_attorney",
    "validate_step",
]
