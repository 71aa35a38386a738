"""Tests for row mapping and record resume."""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from contract_gen.exceptions import RecordNotFoundError, StorageError
from contract_gen.flow import Step
from contract_gen.models import (
    BrazilianState,
    CustomerInfo,
    FinancialTerms,
    InstallationLocation,
    InverterSpec,
    MountingType,
    PaymentMethod,
    PowerOfAttorneyData,
    TechnicalConfig,
)
from contract_gen.records import load_record, merge_record
from contract_gen.records.mapping import (
    customer_to_row,
    installment_to_row,
    location_to_row,
    parse_due_date,
    power_of_attorney_to_row,
    row_to_customer,
    row_to_installment,
    row_to_location,
    row_to_power_of_attorney,
    row_to_technical,
    technical_to_row,
)
from contract_gen.store import InMemoryStorage
from contract_gen.store.base import (
    CUSTOMERS,
    FINANCIAL_TERMS,
    INSTALLATION_LOCATIONS,
    INSTALLMENTS,
    TECHNICAL_CONFIGS,
)


class TestCustomerMapping:
    """Customer rows keep every populated field."""

    def test_round_trip(self, customer_info: CustomerInfo) -> None:
        assert row_to_customer(customer_to_row(customer_info)) == customer_info

    def test_round_trip_through_storage(
        self, customer_info: CustomerInfo, storage: InMemoryStorage
    ) -> None:
        saved = storage.save_or_update(CUSTOMERS, customer_to_row(customer_info))

        assert row_to_customer(storage.find(CUSTOMERS, id=saved["id"])) == customer_info

    def test_company_round_trip(self, customer_info: CustomerInfo) -> None:
        company = replace(customer_info, tax_id="11.222.333/0001-81", marital_status=None)

        row = customer_to_row(company)

        assert row["marital_status"] is None
        assert row_to_customer(row) == company

    def test_snake_case_columns(self, customer_info: CustomerInfo) -> None:
        row = customer_to_row(customer_info)

        assert row["full_name"] == "Maria Oliveira Santos"
        assert row["issuing_authority"] == "SSP/MS"
        assert row["marital_status"] == "Married"

    def test_missing_nationality_defaults(self, customer_info: CustomerInfo) -> None:
        row = customer_to_row(customer_info)
        row["nationality"] = None

        assert row_to_customer(row).nationality == "Brasileiro(a)"

    def test_invalid_marital_status(self, customer_info: CustomerInfo) -> None:
        row = customer_to_row(customer_info)
        row["marital_status"] = "Engaged"

        with pytest.raises(StorageError):
            row_to_customer(row)


class TestSubEntityMapping:
    """Location, technical and installment rows."""

    def test_location_round_trip(self, installation_location: InstallationLocation) -> None:
        row = location_to_row(installation_location)

        assert row["state"] == "MS"
        assert row_to_location(row) == installation_location

    def test_technical_round_trip(self, technical_config: TechnicalConfig) -> None:
        assert row_to_technical(technical_to_row(technical_config)) == technical_config

    def test_secondary_inverter_columns_cleared(self, technical_config: TechnicalConfig) -> None:
        row = technical_to_row(technical_config)

        assert row["inverter2_brand"] is None
        assert row["inverter2_power"] is None
        assert row["inverter2_quantity"] is None
        assert row["inverter2_warranty_period"] is None

    def test_secondary_inverter_round_trip(self, technical_config: TechnicalConfig) -> None:
        config = replace(
            technical_config,
            secondary_inverter=InverterSpec("SMA", Decimal("3.5"), 2, 5),
            mounting_type=MountingType.OTHER,
            other_mounting_description="Carport",
        )

        row = technical_to_row(config)

        assert row["inverter2_power"] == "3.5"
        assert row["installation_type"] == "Other"
        assert row_to_technical(row) == config

    def test_installment_row(self, financial_terms: FinancialTerms) -> None:
        row = installment_to_row(financial_terms.installments[0], "fin-1", 0)

        assert row == {
            "financial_terms_id": "fin-1",
            "position": 0,
            "method": "Pix",
            "amount": "1000.00",
            "due_date": "2025-01-10",
        }
        assert row_to_installment(row, date(2025, 1, 10)) == financial_terms.installments[0]

    def test_installment_unknown_method(self) -> None:
        with pytest.raises(StorageError):
            row_to_installment({"method": "Cheque", "amount": "1"}, date(2025, 1, 1))

    def test_power_of_attorney_round_trip(self) -> None:
        data = PowerOfAttorneyData(
            full_name="João Pereira",
            cpf="529.982.247-25",
            rg="7654321",
            issuing_authority="SSP/MS",
            street="Avenida Afonso Pena",
            number="900",
            neighborhood="Centro",
            city="Campo Grande",
            state=BrazilianState.MS,
            utility_company="Energisa",
        )

        assert row_to_power_of_attorney(power_of_attorney_to_row(data)) == data


class TestParseDueDate:
    """Due dates are parsed tolerantly."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2025-01-10", date(2025, 1, 10)),
            ("2025-01-10T00:00:00", date(2025, 1, 10)),
            (date(2025, 1, 10), date(2025, 1, 10)),
        ],
    )
    def test_parsable(self, value: object, expected: date) -> None:
        assert parse_due_date(value) == expected

    @pytest.mark.parametrize("value", [None, "", "10/01/2025", "not a date", 20250110])
    def test_unusable(self, value: object) -> None:
        assert parse_due_date(value) is None


class TestMergeRecord:
    """Tests for merge_record."""

    def _customer_row(self, customer_info: CustomerInfo) -> dict:
        return {**customer_to_row(customer_info), "id": "cust-1"}

    def test_customer_only(self, customer_info: CustomerInfo) -> None:
        snapshot = merge_record(self._customer_row(customer_info))

        assert snapshot.data.customer_id == "cust-1"
        assert snapshot.data.customer_info == customer_info
        assert snapshot.data.installation_location is None
        assert snapshot.completed_steps == {Step.CUSTOMER_INFO}

    def test_customer_and_financial_only(self, customer_info: CustomerInfo) -> None:
        installments = [
            {"id": "i-1", "method": "Pix", "amount": "1000.00", "due_date": "2025-01-10"}
        ]

        snapshot = merge_record(
            self._customer_row(customer_info),
            financial={"id": "fin-1", "total_amount": "1000.00"},
            installments=installments,
        )

        assert snapshot.completed_steps == {Step.CUSTOMER_INFO, Step.FINANCIAL_TERMS}
        assert snapshot.data.financial_terms_id == "fin-1"
        assert snapshot.data.financial_terms.total_amount == Decimal("1000.00")
        assert snapshot.substitutions == ()

    def test_all_sub_entities(
        self,
        customer_info: CustomerInfo,
        installation_location: InstallationLocation,
        technical_config: TechnicalConfig,
    ) -> None:
        snapshot = merge_record(
            self._customer_row(customer_info),
            location={**location_to_row(installation_location), "id": "loc-1"},
            technical={**technical_to_row(technical_config), "id": "tech-1"},
            financial={"id": "fin-1"},
        )

        assert snapshot.data.installation_location == installation_location
        assert snapshot.data.technical_config == technical_config
        assert snapshot.data.installation_location_id == "loc-1"
        assert snapshot.data.technical_config_id == "tech-1"
        assert snapshot.data.financial_terms == FinancialTerms()
        assert len(snapshot.completed_steps) == 4

    def test_bad_due_date_substituted_and_reported(
        self, customer_info: CustomerInfo, caplog: pytest.LogCaptureFixture
    ) -> None:
        installments = [
            {"id": "i-1", "method": "Pix", "amount": "500", "due_date": "2025-02-01"},
            {"id": "i-2", "method": "BankSlip", "amount": "500", "due_date": "garbage"},
            {"id": "i-3", "method": "BankSlip", "amount": "500"},
        ]

        with caplog.at_level(logging.WARNING, logger="contract_gen.records.resume"):
            snapshot = merge_record(
                self._customer_row(customer_info),
                financial={"id": "fin-1"},
                installments=installments,
                today=date(2025, 3, 15),
            )

        dates = [inst.due_date for inst in snapshot.data.financial_terms.installments]
        assert dates == [date(2025, 2, 1), date(2025, 3, 15), date(2025, 3, 15)]
        assert [sub.index for sub in snapshot.substitutions] == [1, 2]
        assert snapshot.substitutions[0].raw_value == "garbage"
        assert snapshot.substitutions[1].raw_value is None
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2

    def test_installments_without_terms_ignored(self, customer_info: CustomerInfo) -> None:
        snapshot = merge_record(
            self._customer_row(customer_info),
            installments=[{"method": "Pix", "amount": "1", "due_date": "2025-01-01"}],
        )

        assert snapshot.data.financial_terms is None


class TestLoadRecord:
    """Tests for load_record against storage."""

    def test_missing_customer(self, storage: InMemoryStorage) -> None:
        with pytest.raises(RecordNotFoundError):
            load_record(storage, "nope")

    def test_loads_linked_rows(
        self,
        storage: InMemoryStorage,
        customer_info: CustomerInfo,
        installation_location: InstallationLocation,
        financial_terms: FinancialTerms,
    ) -> None:
        customer = storage.save_or_update(CUSTOMERS, customer_to_row(customer_info))
        storage.save_or_update(
            INSTALLATION_LOCATIONS,
            {**location_to_row(installation_location), "customer_id": customer["id"]},
        )
        terms = storage.save_or_update(
            FINANCIAL_TERMS, {"total_amount": "3000.00", "customer_id": customer["id"]}
        )
        for position in (2, 0, 1):
            storage.save_or_update(
                INSTALLMENTS,
                {
                    "financial_terms_id": terms["id"],
                    "position": position,
                    "method": "Pix",
                    "amount": str(1000 + position),
                    "due_date": f"2025-0{position + 1}-10",
                },
            )

        snapshot = load_record(storage, customer["id"])

        assert snapshot.completed_steps == {
            Step.CUSTOMER_INFO,
            Step.INSTALLATION_LOCATION,
            Step.FINANCIAL_TERMS,
        }
        amounts = [inst.amount for inst in snapshot.data.financial_terms.installments]
        assert amounts == [Decimal("1000"), Decimal("1001"), Decimal("1002")]
        assert all(
            inst.method == PaymentMethod.PIX
            for inst in snapshot.data.financial_terms.installments
        )
        assert snapshot.data.technical_config is None

    def test_technical_rows_belong_to_customer(
        self,
        storage: InMemoryStorage,
        customer_info: CustomerInfo,
        technical_config: TechnicalConfig,
    ) -> None:
        first = storage.save_or_update(CUSTOMERS, customer_to_row(customer_info))
        other = storage.save_or_update(
            CUSTOMERS, customer_to_row(replace(customer_info, tax_id="111.444.777-35"))
        )
        storage.save_or_update(
            TECHNICAL_CONFIGS, {**technical_to_row(technical_config), "customer_id": other["id"]}
        )

        assert load_record(storage, first["id"]).data.technical_config is None
        assert load_record(storage, other["id"]).data.technical_config == technical_config
