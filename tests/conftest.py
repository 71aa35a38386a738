"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal
from typing import Any

import pytest

from contract_gen.flow import FlowContext
from contract_gen.models import (
    BrazilianState,
    CustomerInfo,
    FinancialTerms,
    FormAggregate,
    InstallationLocation,
    InstallationType,
    Installment,
    InverterSpec,
    MaritalStatus,
    MountingType,
    PaymentMethod,
    SolarModuleSpec,
    TechnicalConfig,
)
from contract_gen.service import WizardService
from contract_gen.store import Identity, InMemoryStorage, StaticAuthProvider

TODAY = date(2025, 3, 15)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed clock for document dates and resume substitutions."""
    return TODAY


@pytest.fixture
def customer_input() -> dict[str, Any]:
    """Raw customer step input as typed by an operator."""
    return {
        "full_name": "Maria Oliveira Santos",
        "tax_id": "52998224725",
        "rg": "1234567",
        "issuing_authority": "SSP/MS",
        "profession": "Engenheira",
        "phone": "67991234567",
        "email": "maria.santos@gmail.com",
        "marital_status": "Married",
    }


@pytest.fixture
def location_input() -> dict[str, Any]:
    """Raw installation location step input."""
    return {
        "street": "Rua das Flores",
        "number": "120",
        "neighborhood": "Centro",
        "city": "Campo Grande",
        "state": "ms",
        "zip_code": "79002000",
        "utility_company": "Energisa",
        "utility_code": "",
        "installation_type": "Residential",
    }


@pytest.fixture
def technical_input() -> dict[str, Any]:
    """Raw technical config step input with a single inverter."""
    return {
        "primary_inverter": {
            "brand": "Growatt",
            "power_kw": "5",
            "quantity": 1,
            "warranty_years": 10,
        },
        "has_secondary_inverter": False,
        "solar_modules": {"brand": "Jinko", "unit_power_w": 550, "quantity": 10},
        "mounting_type": "Roof",
        "installation_days": 7,
    }


@pytest.fixture
def financial_input() -> dict[str, Any]:
    """Raw financial terms step input with two installments."""
    return {
        "installments": [
            {"method": "Pix", "amount": "10000.00", "due_date": "2025-04-10"},
            {"method": "BankSlip", "amount": "12500.50", "due_date": "2025-05-10"},
        ]
    }


@pytest.fixture
def customer_info() -> CustomerInfo:
    """Validated customer info."""
    return CustomerInfo(
        full_name="Maria Oliveira Santos",
        tax_id="529.982.247-25",
        rg="1234567",
        issuing_authority="SSP/MS",
        profession="Engenheira",
        phone="(67) 99123-4567",
        email="maria.santos@gmail.com",
        marital_status=MaritalStatus.MARRIED,
    )


@pytest.fixture
def installation_location() -> InstallationLocation:
    """Validated installation location."""
    return InstallationLocation(
        street="Rua das Flores",
        number="120",
        neighborhood="Centro",
        city="Campo Grande",
        state=BrazilianState.MS,
        zip_code="79002-000",
        utility_company="Energisa",
        installation_type=InstallationType.RESIDENTIAL,
    )


@pytest.fixture
def technical_config() -> TechnicalConfig:
    """Validated technical config: 10 x 550 W modules on a roof."""
    return TechnicalConfig(
        primary_inverter=InverterSpec("Growatt", Decimal("5"), 1, 10),
        solar_modules=SolarModuleSpec("Jinko", 550, 10),
        mounting_type=MountingType.ROOF,
        installation_days=7,
    )


@pytest.fixture
def financial_terms() -> FinancialTerms:
    """Single Pix payment of R$ 1.000,00."""
    return FinancialTerms(
        installments=(Installment(PaymentMethod.PIX, Decimal("1000.00"), date(2025, 1, 10)),)
    )


@pytest.fixture
def aggregate(
    customer_info: CustomerInfo,
    installation_location: InstallationLocation,
    technical_config: TechnicalConfig,
    financial_terms: FinancialTerms,
) -> FormAggregate:
    """Complete aggregate with every step captured."""
    return FormAggregate(
        customer_id="cust-test-001",
        customer_info=customer_info,
        installation_location=installation_location,
        technical_config=technical_config,
        financial_terms=financial_terms,
        installation_location_id="loc-test-001",
        technical_config_id="tech-test-001",
        financial_terms_id="fin-test-001",
    )


@pytest.fixture
def storage() -> InMemoryStorage:
    """Empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def auth() -> StaticAuthProvider:
    """Auth provider with a signed-in operator."""
    return StaticAuthProvider(Identity(user_id="user-test-001", email="operador@gmail.com"))


@pytest.fixture
def service(storage: InMemoryStorage, auth: StaticAuthProvider, today: date) -> WizardService:
    """Wizard service with a fresh contract flow started."""
    wizard = WizardService(storage, auth, FlowContext(), today=lambda: today)
    wizard.start_new()
    return wizard
