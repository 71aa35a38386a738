"""Customer model for the contract wizard."""

from dataclasses import dataclass

from contract_gen.models.enums import DocumentType, MaritalStatus

DEFAULT_NATIONALITY = "Brasileiro(a)"


@dataclass(frozen=True)
class CustomerInfo:
    """Contracting party (person or company)."""

    full_name: str
    tax_id: str  # masked CPF (000.000.000-00) or CNPJ (00.000.000/0000-00)
    rg: str
    issuing_authority: str
    profession: str
    phone: str  # (DD) DDDDD-DDDD
    email: str
    nationality: str = DEFAULT_NATIONALITY
    marital_status: MaritalStatus | None = None  # always None for CNPJ

    @property
    def tax_id_digits(self) -> str:
        return "".join(ch for ch in self.tax_id if ch.isdigit())

    @property
    def document_type(self) -> DocumentType:
        return DocumentType.CPF if len(self.tax_id_digits) <= 11 else DocumentType.CNPJ
