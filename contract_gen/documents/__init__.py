"""PDF composition for the contract and the power of attorney."""

from contract_gen.documents.contract import (
    Section,
    build_contract_sections,
    compose_contract,
    payment_narrative,
    system_power_kwp,
)
from contract_gen.documents.formatting import format_brl, format_date_br, format_long_date_pt
from contract_gen.documents.output import PDF_MIME_TYPE, DocumentBlob
from contract_gen.documents.power_of_attorney import compose_power_of_attorney

__all__ = [
    "PDF_MIME_TYPE",
    "DocumentBlob",
    "Section",
    "build_contract_sections",
    "compose_contract",
    "compose_power_of_attorney",
    "format_brl",
    "format_date_br",
    "format_long_date_pt",
    "payment_narrative",
    "system_power_kwp",
]
