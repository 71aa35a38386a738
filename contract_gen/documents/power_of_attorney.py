"""Power of attorney granting the company representation before the utility."""

import logging
import re
from datetime import date

from contract_gen.config import CompanyConfig, LayoutConfig
from contract_gen.documents import templates
from contract_gen.documents.formatting import format_long_date_pt
from contract_gen.documents.layout import FONT_BOLD, PageWriter
from contract_gen.documents.output import DocumentBlob
from contract_gen.exceptions import ComposerError
from contract_gen.models import DocumentType, FormAggregate, PowerOfAttorneyData

logger = logging.getLogger(__name__)

GRANTOR_FIELDS = (
    "full_name",
    "nationality",
    "cpf",
    "rg",
    "issuing_authority",
    "street",
    "number",
    "neighborhood",
    "city",
    "state",
    "utility_company",
)


def grantor_fields(source: FormAggregate | PowerOfAttorneyData) -> dict[str, str]:
    """Flatten the grantor identity and address into template fields.

    A ``FormAggregate`` contributes its customer and installation location;
    anything it lacks comes out as an empty string.
    """
    if isinstance(source, PowerOfAttorneyData):
        fields = {name: getattr(source, name) for name in GRANTOR_FIELDS}
    else:
        customer = source.customer_info
        location = source.installation_location
        fields = dict.fromkeys(GRANTOR_FIELDS, "")
        if customer is not None:
            fields.update(
                full_name=customer.full_name,
                nationality=customer.nationality,
                cpf=customer.tax_id,
                rg=customer.rg,
                issuing_authority=customer.issuing_authority,
            )
        if location is not None:
            fields.update(
                street=location.street,
                number=location.number,
                neighborhood=location.neighborhood,
                city=location.city,
                state=location.state,
                utility_company=location.utility_company,
            )
    state = fields["state"]
    fields["state"] = getattr(state, "value", state)
    return {name: str(value) for name, value in fields.items()}


def document_label(source: FormAggregate | PowerOfAttorneyData) -> str:
    """``CNPJ`` when the aggregate's customer is a company, ``CPF`` otherwise."""
    if isinstance(source, FormAggregate) and source.customer_info is not None:
        return source.customer_info.document_type.value
    return DocumentType.CPF.value


def power_of_attorney_paragraphs(
    source: FormAggregate | PowerOfAttorneyData, company: CompanyConfig
) -> list[str]:
    """Body paragraphs in print order."""
    fields = grantor_fields(source)
    return [
        templates.POWER_OF_ATTORNEY_GRANTOR.format(**fields, document_label=document_label(source)),
        templates.POWER_OF_ATTORNEY_GRANTEE.format(
            company_name=company.name,
            company_cnpj=company.cnpj,
            representative=company.representative,
            representative_cpf=company.representative_cpf,
        ),
        templates.POWER_OF_ATTORNEY_POWERS.format(**fields),
        templates.POWER_OF_ATTORNEY_VALIDITY,
    ]


def compose_power_of_attorney(
    source: FormAggregate | PowerOfAttorneyData | None,
    company: CompanyConfig | None = None,
    layout: LayoutConfig | None = None,
    today: date | None = None,
) -> DocumentBlob:
    """Render the power of attorney as a PDF.

    Raises
    ------
    ComposerError
        If ``source`` is None.
    """
    if source is None:
        raise ComposerError("Cannot compose a power of attorney without grantor data")

    company = company or CompanyConfig()
    layout = layout or LayoutConfig()
    today = today or date.today()
    fields = grantor_fields(source)
    center = layout.page_width / 2

    writer = PageWriter(layout, title=templates.POWER_OF_ATTORNEY_TITLE, author=company.name)
    writer.text(
        templates.POWER_OF_ATTORNEY_TITLE, center, font=FONT_BOLD,
        size=layout.title_font_size, align="center",
    )
    writer.skip(20)

    for paragraph in power_of_attorney_paragraphs(source, company):
        if writer.y > layout.section_break_at:
            writer.new_page()
        writer.paragraph(paragraph)
        writer.skip(6)

    if writer.y > layout.signature_break_at:
        writer.new_page()
    else:
        writer.skip(10)
    writer.text(f"{fields['city']}, {format_long_date_pt(today)}", center, align="center")
    writer.skip(25)
    writer.hline(center - 45, center + 45)
    writer.skip(5)
    writer.text(fields["full_name"], center, align="center")
    writer.skip(5)
    writer.text(f"{document_label(source)}: {fields['cpf']}", center, align="center")

    content = writer.finish()
    logger.info(
        "Composed power of attorney with %d page(s)",
        writer.page_num,
        extra={"document_kind": "power-of-attorney", "pages": writer.page_num},
    )
    slug = re.sub(r"[^a-z0-9]+", "-", fields["full_name"].lower()).strip("-")
    filename = f"procuracao-{slug}.pdf" if slug else "procuracao.pdf"
    return DocumentBlob(content=content, filename=filename, page_count=writer.page_num)
