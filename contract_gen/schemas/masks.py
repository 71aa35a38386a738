"""Input masks for Brazilian document, phone and postal code fields.

Masks are applied progressively: a separator is only emitted once a digit
follows it, so partially typed values render the way an input mask would.
"""

from contract_gen.models.enums import DocumentType

CPF_MASK = "000.000.000-00"
CNPJ_MASK = "00.000.000/0000-00"
PHONE_MASK = "(00) 00000-0000"
CEP_MASK = "00000-000"

CPF_LENGTH = 11
CNPJ_LENGTH = 14


def digits_only(value: str | None) -> str:
    if not value:
        return ""
    return "".join(ch for ch in value if ch.isdigit())


def apply_mask(digits: str, mask: str) -> str:
    """Place ``digits`` into the ``0`` slots of ``mask``."""
    out: list[str] = []
    pos = 0
    for ch in mask:
        if pos >= len(digits):
            break
        if ch == "0":
            out.append(digits[pos])
            pos += 1
        else:
            out.append(ch)
    return "".join(out)


def detect_document_type(value: str | None) -> DocumentType:
    """Up to 11 digits reads as CPF, anything longer as CNPJ."""
    return DocumentType.CPF if len(digits_only(value)) <= CPF_LENGTH else DocumentType.CNPJ


def mask_tax_id(value: str | None) -> str:
    """Strip non-digits, truncate at 14 digits and re-apply the CPF/CNPJ mask."""
    digits = digits_only(value)[:CNPJ_LENGTH]
    if detect_document_type(digits) == DocumentType.CPF:
        return apply_mask(digits, CPF_MASK)
    return apply_mask(digits, CNPJ_MASK)


def marital_status_required(tax_id: str | None) -> bool:
    return detect_document_type(tax_id) == DocumentType.CPF


def format_phone(value: str | None) -> str:
    return apply_mask(digits_only(value)[:11], PHONE_MASK)


def format_cep(value: str | None) -> str:
    return apply_mask(digits_only(value)[:8], CEP_MASK)
