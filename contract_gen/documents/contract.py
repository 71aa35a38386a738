"""Services contract composition.

The text of the contract is planned first by ``build_contract_sections``,
which is pure and works on a possibly incomplete ``FormAggregate``. Any
missing sub-object renders as blanks. ``compose_contract`` then lays the
plan out on A4 pages with ``PageWriter``.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from contract_gen.config import CompanyConfig, LayoutConfig
from contract_gen.documents import templates
from contract_gen.documents.formatting import (
    format_brl,
    format_date_br,
    format_kwp,
    format_long_date_pt,
    format_plain,
)
from contract_gen.documents.layout import FONT_BOLD, PageWriter
from contract_gen.documents.output import DocumentBlob
from contract_gen.exceptions import ComposerError
from contract_gen.models import (
    CustomerInfo,
    FormAggregate,
    Installment,
    InstallationLocation,
    MountingType,
    TechnicalConfig,
)

logger = logging.getLogger(__name__)

_MOUNTING_LABELS = {
    MountingType.ROOF: "Telhado",
    MountingType.GROUND: "Solo",
}


@dataclass(frozen=True)
class Section:
    """Numbered clause: bold title plus body text with explicit line breaks."""

    title: str
    body: str


def system_power_kwp(technical: TechnicalConfig | None) -> Decimal:
    """Total module power in kWp, zero when nothing was configured."""
    if technical is None:
        return Decimal("0")
    return technical.system_power_kwp


def mounting_label(technical: TechnicalConfig | None) -> str:
    if technical is None:
        return ""
    if technical.mounting_type is MountingType.OTHER:
        return technical.other_mounting_description or ""
    return _MOUNTING_LABELS[technical.mounting_type]


def payment_narrative(installments: Sequence[Installment]) -> str:
    """Describe how the total is paid.

    A single installment yields one sentence; otherwise each installment
    gets its own numbered line. An empty sequence yields an empty string.
    """
    if len(installments) == 1:
        inst = installments[0]
        return (
            f"Pagamento único no valor de R$ {format_brl(inst.amount)} a ser pago via "
            f"{inst.method.label} com vencimento em {format_date_br(inst.due_date)}."
        )
    return "\n".join(
        f"Parcela {position}: R$ {format_brl(inst.amount)} via {inst.method.label} "
        f"com vencimento em {format_date_br(inst.due_date)}"
        for position, inst in enumerate(installments, start=1)
    )


def client_qualification(
    customer: CustomerInfo | None, location: InstallationLocation | None
) -> str:
    """Contracting party paragraph, blanks where data is missing."""
    c = customer
    loc = location
    document_label = c.document_type.value if c is not None else "CPF"
    marital = f", {c.marital_status.label}" if c is not None and c.marital_status else ""
    return (
        f"CONTRATANTE: {c.full_name if c else ''}, portador(a) do {document_label} "
        f"{c.tax_id if c else ''} e RG {c.rg if c else ''} {c.issuing_authority if c else ''}, "
        f"{c.nationality if c else ''}{marital}, {c.profession if c else ''}, residente e "
        f"domiciliado(a) em {loc.street if loc else ''}, {loc.number if loc else ''}, "
        f"{loc.neighborhood if loc else ''}, {loc.city if loc else ''}/"
        f"{loc.state.value if loc else ''}, CEP {loc.zip_code if loc else ''}, telefone "
        f"{c.phone if c else ''}, email {c.email if c else ''}."
    )


def equipment_lines(technical: TechnicalConfig | None) -> list[str]:
    """Bulleted materials list for the object clause."""
    t = technical
    if t is None:
        return [
            "-  Inversor(es)  de kW de Potência de Saída",
            "-  Módulos Solares  W de Potência",
            "- Estrutura para fixação dos módulos instalados em ",
        ]
    lines = [
        f"- {inv.quantity} Inversor(es) {inv.brand} de {format_plain(inv.power_kw)}kW de "
        f"Potência de Saída, com garantia de {inv.warranty_years} ano(s)"
        for inv in t.inverters
    ]
    modules = t.solar_modules
    lines.append(
        f"- {modules.quantity} Módulos Solares {modules.brand} {modules.unit_power_w}W "
        "de Potência"
    )
    lines.append(f"- Estrutura para fixação dos módulos instalados em {mounting_label(t)}")
    return lines


def object_section(technical: TechnicalConfig | None) -> Section:
    days = technical.installation_days if technical is not None else ""
    body = (
        "1.1 A CONTRATADA compromete-se a prestar os serviços de instalação do sistema "
        "fotovoltaico, bem como tratativas com a concessionária de distribuição de energia "
        "elétrica. O sistema presente tem como potência "
        f"{format_kwp(system_power_kwp(technical))}kWp (Quilo Watts Pico).\n"
        "\n"
        "Dentre os principais materiais estão inclusos:\n"
        + "\n".join(equipment_lines(technical))
        + "\n\n"
        f"1.2 O prazo estimado para a execução da instalação é de {days} dia(s)."
    )
    return Section(templates.OBJECT_TITLE, body)


def price_section(aggregate: FormAggregate) -> Section:
    terms = aggregate.financial_terms
    total = format_brl(terms.total_amount) if terms is not None else ""
    installments = terms.installments if terms is not None else ()
    body = (
        f"2.1 O CONTRATANTE pagará à CONTRATADA, pelos serviços descritos na cláusula "
        f"primeira deste compromisso, a quantia de R$ {total}, referentes aos materiais, "
        "mão de obra, engenharia, serviços de projetos e aprovações.\n"
        "\n"
        "2.2 Fica acordado o pagamento nas seguintes condições:\n"
        f"{payment_narrative(installments)}\n"
        "\n"
        f"{templates.LATE_PAYMENT_CLAUSE}\n"
        "\n"
        f"{templates.FEES_CLAUSE}"
    )
    return Section(templates.PRICE_TITLE, body)


def build_contract_sections(aggregate: FormAggregate) -> list[Section]:
    """Ordered clauses of the contract body, after the parties block."""
    sections = [object_section(aggregate.technical_config), price_section(aggregate)]
    sections.extend(Section(title, body) for title, body in templates.BOILERPLATE_CLAUSES)
    return sections


def date_line(location: InstallationLocation | None, today: date) -> str:
    city = location.city if location is not None else ""
    return f"{city}, {format_long_date_pt(today)}"


def contract_filename(aggregate: FormAggregate) -> str:
    customer = aggregate.customer_info
    if customer is None or not customer.full_name.strip():
        return "contrato.pdf"
    slug = re.sub(r"[^a-z0-9]+", "-", customer.full_name.lower()).strip("-")
    return f"contrato-{slug}.pdf"


def compose_contract(
    aggregate: FormAggregate | None,
    company: CompanyConfig | None = None,
    layout: LayoutConfig | None = None,
    today: date | None = None,
) -> DocumentBlob:
    """Render the services contract for ``aggregate`` as a PDF.

    Parameters
    ----------
    aggregate : FormAggregate | None
        Wizard data; incomplete aggregates render with blank fields.
    company : CompanyConfig | None
        Contracted company identity, defaults to ``CompanyConfig()``.
    layout : LayoutConfig | None
        Page geometry and break thresholds.
    today : date | None
        Date printed above the signatures, defaults to the current date.

    Returns
    -------
    DocumentBlob
        The PDF bytes with page count and a suggested filename.

    Raises
    ------
    ComposerError
        If ``aggregate`` is None.
    """
    if aggregate is None:
        raise ComposerError("Cannot compose a contract without form data")

    company = company or CompanyConfig()
    layout = layout or LayoutConfig()
    today = today or date.today()
    customer = aggregate.customer_info
    location = aggregate.installation_location
    center = layout.page_width / 2

    writer = PageWriter(layout, title=templates.CONTRACT_TITLE, author=company.name)

    writer.text(
        templates.CONTRACT_TITLE, center, font=FONT_BOLD, size=layout.title_font_size,
        align="center",
    )
    writer.skip(15)
    writer.text(templates.PARTIES_TITLE, center, font=FONT_BOLD, size=12, align="center")
    writer.skip(15)
    writer.paragraph(company.qualification)
    writer.skip(4)
    writer.paragraph(client_qualification(customer, location))
    writer.skip(6)

    for section in build_contract_sections(aggregate):
        writer.section(section.title, section.body)

    _signature_block(writer, company, customer, location, today)

    content = writer.finish()
    logger.info(
        "Composed contract with %d page(s)",
        writer.page_num,
        extra={
            "document_kind": "contract",
            "pages": writer.page_num,
            "customer_id": aggregate.customer_id,
        },
    )
    return DocumentBlob(
        content=content, filename=contract_filename(aggregate), page_count=writer.page_num
    )


def _signature_block(
    writer: PageWriter,
    company: CompanyConfig,
    customer: CustomerInfo | None,
    location: InstallationLocation | None,
    today: date,
) -> None:
    layout = writer.layout
    left, right = layout.margin_left, layout.page_width - layout.margin_left
    middle = layout.page_width / 2

    # The date, both signatures and the witnesses stay on one page.
    if writer.y > layout.signature_break_at:
        writer.new_page()
    else:
        writer.skip(10)

    writer.text(date_line(location, today), middle, align="center")
    writer.skip(20)

    writer.hline(left, middle - 15)
    writer.hline(middle + 10, right)
    writer.skip(5)
    writer.text(company.name, left)
    writer.text(customer.full_name if customer else "", middle + 10)
    writer.skip(5)
    writer.text(f"CNPJ: {company.cnpj}", left)
    document_label = customer.document_type.value if customer else "CPF"
    writer.text(f"{document_label}: {customer.tax_id if customer else ''}", middle + 10)
    writer.skip(30)

    writer.text("TESTEMUNHAS:", left, font=FONT_BOLD)
    writer.skip(15)
    writer.hline(left, middle - 15)
    writer.hline(middle + 10, right)
    writer.skip(5)
    writer.text("Nome:", left)
    writer.text("Nome:", middle + 10)
    writer.skip(5)
    writer.text("CPF:", left)
    writer.text("CPF:", middle + 10)
