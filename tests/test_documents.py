"""Tests for the contract and power-of-attorney composers."""

import io
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest
from pypdf import PdfReader

from contract_gen.config import CompanyConfig, LayoutConfig
from contract_gen.documents import (
    DocumentBlob,
    build_contract_sections,
    compose_contract,
    compose_power_of_attorney,
    format_brl,
    format_date_br,
    format_long_date_pt,
    payment_narrative,
    system_power_kwp,
)
from contract_gen.documents.contract import client_qualification, equipment_lines
from contract_gen.documents.layout import PageWriter, wrap_text
from contract_gen.documents.power_of_attorney import (
    document_label,
    grantor_fields,
    power_of_attorney_paragraphs,
)
from contract_gen.exceptions import ComposerError
from contract_gen.models import (
    BrazilianState,
    FinancialTerms,
    FormAggregate,
    Installment,
    InverterSpec,
    MountingType,
    PaymentMethod,
    PowerOfAttorneyData,
    TechnicalConfig,
)


def _text(blob: DocumentBlob) -> str:
    reader = PdfReader(io.BytesIO(blob.content))
    return "\n".join(page.extract_text() for page in reader.pages)


class TestFormatting:
    """Tests for pt-BR display formatting."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Decimal("1000"), "1.000,00"),
            (Decimal("1234567.891"), "1.234.567,89"),
            (Decimal("0.005"), "0,01"),
            (Decimal("99.9"), "99,90"),
            (0, "0,00"),
        ],
    )
    def test_format_brl(self, amount: Decimal, expected: str) -> None:
        assert format_brl(amount) == expected

    def test_format_brl_none(self) -> None:
        assert format_brl(None) == ""

    def test_format_dates(self) -> None:
        assert format_date_br(date(2025, 1, 10)) == "10/01/2025"
        assert format_date_br(None) == ""
        assert format_long_date_pt(date(2025, 3, 5)) == "05 de março de 2025"


class TestDerivedFigures:
    """Tests for system power and payment narrative."""

    def test_system_power(self, technical_config: TechnicalConfig) -> None:
        assert system_power_kwp(technical_config) == Decimal("5.5")
        assert system_power_kwp(None) == Decimal("0")

    def test_single_payment_sentence(self) -> None:
        installments = [Installment(PaymentMethod.PIX, Decimal("1000.00"), date(2025, 1, 10))]

        narrative = payment_narrative(installments)

        assert narrative == (
            "Pagamento único no valor de R$ 1.000,00 a ser pago via Pix "
            "com vencimento em 10/01/2025."
        )

    def test_installment_list(self) -> None:
        installments = [
            Installment(PaymentMethod.TRANSFER, Decimal("2500"), date(2025, 1, 10)),
            Installment(PaymentMethod.BANK_SLIP, Decimal("2500.5"), date(2025, 2, 10)),
        ]

        lines = payment_narrative(installments).split("\n")

        assert lines == [
            "Parcela 1: R$ 2.500,00 via Transferência com vencimento em 10/01/2025",
            "Parcela 2: R$ 2.500,50 via Boleto com vencimento em 10/02/2025",
        ]

    def test_no_installments(self) -> None:
        assert payment_narrative([]) == ""

    def test_total_is_exact_sum(self) -> None:
        terms = FinancialTerms()
        assert terms.total_amount == Decimal("0")

        for amount in ("0.10", "0.20", "1000.33"):
            terms = terms.add_installment(
                Installment(PaymentMethod.PIX, Decimal(amount), date(2025, 1, 1))
            )

        assert terms.total_amount == Decimal("1000.63")
        assert terms.remove_installment(0).total_amount == Decimal("1000.53")


class TestContractSections:
    """Tests for the planned contract text."""

    def test_section_order(self, aggregate: FormAggregate) -> None:
        titles = [section.title for section in build_contract_sections(aggregate)]

        assert titles[0] == "1 - DO OBJETO DO PRESENTE CONTRATO"
        assert titles[1] == "2 - PREÇO E FORMA DE PAGAMENTO"
        assert titles[2].startswith("3 - ")
        assert titles[-1] == "9 - DO FORO"

    def test_object_section(self, aggregate: FormAggregate) -> None:
        body = build_contract_sections(aggregate)[0].body

        assert "potência 5.50kWp" in body
        assert "- 1 Inversor(es) Growatt de 5kW de Potência de Saída" in body
        assert "- 10 Módulos Solares Jinko 550W de Potência" in body
        assert "instalados em Telhado" in body
        assert "7 dia(s)" in body

    def test_price_section(self, aggregate: FormAggregate) -> None:
        body = build_contract_sections(aggregate)[1].body

        assert "a quantia de R$ 1.000,00" in body
        assert "Pagamento único no valor de R$ 1.000,00 a ser pago via Pix" in body
        assert "10/01/2025" in body
        assert "artigo 397 do Código Civil" in body

    def test_secondary_inverter_and_other_mounting(self, technical_config: TechnicalConfig) -> None:
        config = replace(
            technical_config,
            secondary_inverter=InverterSpec("SMA", Decimal("3.5"), 2, 5),
            mounting_type=MountingType.OTHER,
            other_mounting_description="Carport",
        )

        lines = equipment_lines(config)

        assert lines[1].startswith("- 2 Inversor(es) SMA de 3.5kW")
        assert lines[-1].endswith("instalados em Carport")

    def test_ground_mounting(self, technical_config: TechnicalConfig) -> None:
        config = replace(technical_config, mounting_type=MountingType.GROUND)

        assert equipment_lines(config)[-1].endswith("instalados em Solo")

    def test_missing_technical_config_renders_placeholders(
        self, aggregate: FormAggregate
    ) -> None:
        partial = replace(aggregate, technical_config=None)

        body = build_contract_sections(partial)[0].body

        assert "0.00kWp" in body
        assert "Inversor(es)" in body
        assert "Módulos Solares" in body

    def test_empty_aggregate(self) -> None:
        sections = build_contract_sections(FormAggregate())

        assert "a quantia de R$ ," in sections[1].body

    def test_client_paragraph(self, aggregate: FormAggregate) -> None:
        text = client_qualification(aggregate.customer_info, aggregate.installation_location)

        assert text.startswith("CONTRATANTE: Maria Oliveira Santos, portador(a) do CPF")
        assert "529.982.247-25" in text
        assert "Casado(a)" in text
        assert "Grande/MS" in text
        assert "maria.santos@gmail.com" in text

    def test_client_paragraph_company(self, aggregate: FormAggregate) -> None:
        company = replace(
            aggregate.customer_info, tax_id="11.222.333/0001-81", marital_status=None
        )

        text = client_qualification(company, None)

        assert "portador(a) do CNPJ 11.222.333/0001-81" in text
        assert "Casado(a)" not in text


class TestComposeContract:
    """Tests for the rendered contract PDF."""

    def test_renders_pdf(self, aggregate: FormAggregate, today: date) -> None:
        blob = compose_contract(aggregate, today=today)

        assert blob.mime_type == "application/pdf"
        assert blob.content.startswith(b"%PDF")
        assert len(PdfReader(io.BytesIO(blob.content)).pages) == blob.page_count

    def test_text_content(self, aggregate: FormAggregate, today: date) -> None:
        text = _text(compose_contract(aggregate, today=today))

        assert "CONTRATO DE PRESTA" in text
        assert "Maria Oliveira Santos" in text
        assert "ECOENERGI SOLAR" in text
        assert "TESTEMUNHAS:" in text
        assert "Campo Grande, 15 de mar" in text

    def test_every_page_has_footer(self, aggregate: FormAggregate, today: date) -> None:
        blob = compose_contract(aggregate, today=today)
        reader = PdfReader(io.BytesIO(blob.content))

        assert blob.page_count > 1
        for number, page in enumerate(reader.pages, start=1):
            assert f"gina {number}" in page.extract_text()

    def test_footer_can_be_disabled(self, aggregate: FormAggregate, today: date) -> None:
        blob = compose_contract(aggregate, layout=LayoutConfig(footer=False), today=today)

        assert "gina 1" not in _text(blob)

    def test_custom_company(self, aggregate: FormAggregate, today: date) -> None:
        company = CompanyConfig(name="SOL NASCENTE ENERGIA", cnpj="11.222.333/0001-81")

        text = _text(compose_contract(aggregate, company=company, today=today))

        assert "SOL NASCENTE ENERGIA" in text
        assert "11.222.333/0001-81" in text

    def test_missing_technical_config_does_not_raise(
        self, aggregate: FormAggregate, today: date
    ) -> None:
        blob = compose_contract(replace(aggregate, technical_config=None), today=today)

        assert blob.page_count >= 1

    def test_empty_aggregate_does_not_raise(self, today: date) -> None:
        assert compose_contract(FormAggregate(), today=today).filename == "contrato.pdf"

    def test_many_installments_add_pages(self, aggregate: FormAggregate, today: date) -> None:
        many = FinancialTerms(
            installments=tuple(
                Installment(PaymentMethod.BANK_SLIP, Decimal("100"), date(2025, 1, 10))
                for _ in range(120)
            )
        )
        short = compose_contract(aggregate, today=today)

        long = compose_contract(replace(aggregate, financial_terms=many), today=today)

        assert long.page_count > short.page_count
        assert "Parcela 120" in _text(long)

    def test_missing_aggregate_is_fatal(self) -> None:
        with pytest.raises(ComposerError):
            compose_contract(None)


class TestComposePowerOfAttorney:
    """Tests for the power-of-attorney PDF."""

    def _data(self) -> PowerOfAttorneyData:
        return PowerOfAttorneyData(
            full_name="Joao Pereira",
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

    def test_from_standalone_data(self, today: date) -> None:
        blob = compose_power_of_attorney(self._data(), today=today)
        text = _text(blob)

        assert blob.filename == "procuracao-joao-pereira.pdf"
        assert "Joao Pereira" in text
        assert "Energisa" in text
        assert "Grande/MS" in text

    def test_from_aggregate(self, aggregate: FormAggregate, today: date) -> None:
        fields = grantor_fields(aggregate)

        assert fields["full_name"] == "Maria Oliveira Santos"
        assert fields["cpf"] == "529.982.247-25"
        assert fields["state"] == "MS"
        assert fields["utility_company"] == "Energisa"
        assert compose_power_of_attorney(aggregate, today=today).page_count == 1

    def test_company_grantor_labelled_cnpj(self, aggregate: FormAggregate) -> None:
        customer = replace(
            aggregate.customer_info, tax_id="11.222.333/0001-81", marital_status=None
        )
        company = replace(aggregate, customer_info=customer)

        grantor = power_of_attorney_paragraphs(company, CompanyConfig())[0]

        assert document_label(company) == "CNPJ"
        assert "inscrito(a) no CNPJ sob o n° 11.222.333/0001-81" in grantor
        assert "CPF" not in grantor

    def test_person_grantor_labelled_cpf(self, aggregate: FormAggregate) -> None:
        grantor = power_of_attorney_paragraphs(aggregate, CompanyConfig())[0]

        assert "inscrito(a) no CPF sob o n° 529.982.247-25" in grantor
        assert document_label(self._data()) == "CPF"
        assert document_label(FormAggregate()) == "CPF"

    def test_partial_aggregate_renders_blanks(self, today: date) -> None:
        fields = grantor_fields(FormAggregate())

        assert set(fields.values()) == {""}
        assert compose_power_of_attorney(FormAggregate(), today=today).filename == (
            "procuracao.pdf"
        )

    def test_missing_source_is_fatal(self) -> None:
        with pytest.raises(ComposerError):
            compose_power_of_attorney(None)


class TestPageWriter:
    """Tests for the layout primitives."""

    def test_wrap_respects_width(self) -> None:
        text = "palavra " * 60

        lines = wrap_text(text, 200)

        assert len(lines) > 1
        assert all(line for line in lines)

    def test_wrap_keeps_paragraph_breaks(self) -> None:
        assert wrap_text("um\n\ndois", 500) == ["um", "", "dois"]

    def test_section_past_threshold_starts_new_page(self) -> None:
        writer = PageWriter(LayoutConfig())
        writer.y = 251

        writer.section("TITULO", "corpo")

        assert writer.page_num == 2

    def test_section_below_threshold_stays(self) -> None:
        writer = PageWriter(LayoutConfig())
        writer.y = 249

        writer.section("TITULO", "corpo")

        assert writer.page_num == 1
        assert writer.y > 249

    def test_long_paragraph_flows_to_next_page(self) -> None:
        writer = PageWriter(LayoutConfig())

        writer.paragraph("linha\n" * 60)

        assert writer.page_num == 2
        assert writer.finish().startswith(b"%PDF")
