"""Mapping between storage rows (snake_case columns) and domain models."""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from contract_gen.exceptions import StorageError
from contract_gen.models import (
    BrazilianState,
    CustomerInfo,
    FinancialTerms,
    InstallationLocation,
    InstallationType,
    Installment,
    InverterSpec,
    MaritalStatus,
    MountingType,
    PaymentMethod,
    PowerOfAttorneyData,
    SolarModuleSpec,
    TechnicalConfig,
)
from contract_gen.models.customer import DEFAULT_NATIONALITY
from contract_gen.sinks.serialization import serialize_value
from contract_gen.store.base import Row

logger = logging.getLogger(__name__)


def customer_to_row(info: CustomerInfo) -> Row:
    return {
        "full_name": info.full_name,
        "tax_id": info.tax_id,
        "rg": info.rg,
        "issuing_authority": info.issuing_authority,
        "profession": info.profession,
        "nationality": info.nationality,
        "phone": info.phone,
        "email": info.email,
        "marital_status": serialize_value(info.marital_status),
    }


def row_to_customer(row: Row) -> CustomerInfo:
    return CustomerInfo(
        full_name=row.get("full_name") or "",
        tax_id=row.get("tax_id") or "",
        rg=row.get("rg") or "",
        issuing_authority=row.get("issuing_authority") or "",
        profession=row.get("profession") or "",
        nationality=row.get("nationality") or DEFAULT_NATIONALITY,
        phone=row.get("phone") or "",
        email=row.get("email") or "",
        marital_status=_enum_or_none(MaritalStatus, row.get("marital_status")),
    )


def location_to_row(location: InstallationLocation) -> Row:
    return {
        "street": location.street,
        "number": location.number,
        "neighborhood": location.neighborhood,
        "city": location.city,
        "state": serialize_value(location.state),
        "zip_code": location.zip_code,
        "utility_company": location.utility_company,
        "utility_code": location.utility_code,
        "installation_type": serialize_value(location.installation_type),
    }


def row_to_location(row: Row) -> InstallationLocation:
    return InstallationLocation(
        street=row.get("street") or "",
        number=row.get("number") or "",
        neighborhood=row.get("neighborhood") or "",
        city=row.get("city") or "",
        state=_enum(BrazilianState, row.get("state"), "state"),
        zip_code=row.get("zip_code") or "",
        utility_company=row.get("utility_company") or "",
        utility_code=row.get("utility_code"),
        installation_type=_enum(InstallationType, row.get("installation_type"), "installation_type"),
    )


def technical_to_row(config: TechnicalConfig) -> Row:
    """Flatten to ``inverter1_*`` / ``inverter2_*`` / ``solar_modules_*`` columns.

    All four ``inverter2_*`` columns are written as ``None`` when there is no
    secondary inverter so an update clears a previously stored one.
    """
    return {
        **_inverter_columns("inverter1", config.primary_inverter),
        **_inverter_columns("inverter2", config.secondary_inverter),
        "solar_modules_brand": config.solar_modules.brand,
        "solar_modules_power": config.solar_modules.unit_power_w,
        "solar_modules_quantity": config.solar_modules.quantity,
        "installation_type": serialize_value(config.mounting_type),
        "other_type_description": config.other_mounting_description,
        "installation_days": config.installation_days,
    }


def row_to_technical(row: Row) -> TechnicalConfig:
    secondary = None
    if row.get("inverter2_brand"):
        secondary = _row_to_inverter(row, "inverter2")
    return TechnicalConfig(
        primary_inverter=_row_to_inverter(row, "inverter1"),
        secondary_inverter=secondary,
        solar_modules=SolarModuleSpec(
            brand=row.get("solar_modules_brand") or "",
            unit_power_w=int(row.get("solar_modules_power") or 0),
            quantity=int(row.get("solar_modules_quantity") or 0),
        ),
        mounting_type=_enum(MountingType, row.get("installation_type"), "installation_type"),
        other_mounting_description=row.get("other_type_description"),
        installation_days=int(row.get("installation_days") or 0),
    )


def financial_terms_to_row(terms: FinancialTerms) -> Row:
    return {"total_amount": serialize_value(terms.total_amount)}


def installment_to_row(installment: Installment, financial_terms_id: str, position: int) -> Row:
    return {
        "financial_terms_id": financial_terms_id,
        "position": position,
        "method": serialize_value(installment.method),
        "amount": serialize_value(installment.amount),
        "due_date": serialize_value(installment.due_date),
    }


def parse_due_date(value: Any) -> date | None:
    """Parse a stored due date; ``None`` when missing or unparsable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def row_to_installment(row: Row, due_date: date) -> Installment:
    try:
        method = PaymentMethod.parse(row.get("method") or "")
    except ValueError as exc:
        raise StorageError(f"Installment {row.get('id')} has {exc}") from exc
    return Installment(method=method, amount=to_decimal(row.get("amount")), due_date=due_date)


def power_of_attorney_to_row(data: PowerOfAttorneyData) -> Row:
    return {
        "full_name": data.full_name,
        "cpf": data.cpf,
        "rg": data.rg,
        "issuing_authority": data.issuing_authority,
        "street": data.street,
        "number": data.number,
        "neighborhood": data.neighborhood,
        "city": data.city,
        "state": serialize_value(data.state),
        "utility_company": data.utility_company,
    }


def row_to_power_of_attorney(row: Row) -> PowerOfAttorneyData:
    return PowerOfAttorneyData(
        full_name=row.get("full_name") or "",
        cpf=row.get("cpf") or "",
        rg=row.get("rg") or "",
        issuing_authority=row.get("issuing_authority") or "",
        street=row.get("street") or "",
        number=row.get("number") or "",
        neighborhood=row.get("neighborhood") or "",
        city=row.get("city") or "",
        state=_enum(BrazilianState, row.get("state"), "state"),
        utility_company=row.get("utility_company") or "",
    )


def to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise StorageError(f"Invalid amount: {value!r}") from exc


def _inverter_columns(prefix: str, inverter: InverterSpec | None) -> Row:
    return {
        f"{prefix}_brand": inverter.brand if inverter else None,
        f"{prefix}_power": serialize_value(inverter.power_kw) if inverter else None,
        f"{prefix}_quantity": inverter.quantity if inverter else None,
        f"{prefix}_warranty_period": inverter.warranty_years if inverter else None,
    }


def _row_to_inverter(row: Row, prefix: str) -> InverterSpec:
    return InverterSpec(
        brand=row.get(f"{prefix}_brand") or "",
        power_kw=to_decimal(row.get(f"{prefix}_power")),
        quantity=int(row.get(f"{prefix}_quantity") or 0),
        warranty_years=int(row.get(f"{prefix}_warranty_period") or 0),
    )


def _enum(enum_type: Any, value: Any, column: str) -> Any:
    try:
        return enum_type(value)
    except ValueError as exc:
        raise StorageError(f"Invalid {column}: {value!r}") from exc


def _enum_or_none(enum_type: Any, value: Any) -> Any:
    if value in (None, ""):
        return None
    return _enum(enum_type, value, enum_type.__name__)
