"""Customer info step schema."""

from pydantic import EmailStr, Field, ValidationInfo, field_validator

from contract_gen.models.customer import DEFAULT_NATIONALITY, CustomerInfo
from contract_gen.models.enums import DocumentType, MaritalStatus
from contract_gen.schemas.base import StepSchema, blank_to_none
from contract_gen.schemas.masks import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    detect_document_type,
    digits_only,
    format_phone,
    mask_tax_id,
)

PHONE_PATTERN = r"^\(\d{2}\) \d{5}-\d{4}$"


class CustomerInfoSchema(StepSchema):
    full_name: str = Field(min_length=3, max_length=100)
    tax_id: str
    rg: str = Field(default="", max_length=20)
    issuing_authority: str = Field(default="", max_length=50)
    profession: str = Field(default="", max_length=100)
    nationality: str = DEFAULT_NATIONALITY
    phone: str = Field(pattern=PHONE_PATTERN)
    email: EmailStr
    marital_status: MaritalStatus | None = Field(default=None, validate_default=True)

    @field_validator("tax_id")
    @classmethod
    def _normalize_tax_id(cls, value: str) -> str:
        if len(digits_only(value)) not in (CPF_LENGTH, CNPJ_LENGTH):
            raise ValueError("CPF deve ter 11 dígitos ou CNPJ deve ter 14 dígitos")
        return mask_tax_id(value)

    @field_validator("phone", mode="before")
    @classmethod
    def _normalize_phone(cls, value: object) -> object:
        if isinstance(value, str) and value.isdigit():
            return format_phone(value)
        return value

    @field_validator("nationality", mode="before")
    @classmethod
    def _default_nationality(cls, value: object) -> object:
        return blank_to_none(value) or DEFAULT_NATIONALITY

    @field_validator("marital_status", mode="before")
    @classmethod
    def _blank_marital_status(cls, value: object) -> object:
        return blank_to_none(value)

    @field_validator("marital_status")
    @classmethod
    def _marital_status_for_document(
        cls, value: MaritalStatus | None, info: ValidationInfo
    ) -> MaritalStatus | None:
        tax_id = info.data.get("tax_id")
        if tax_id is None:
            return value
        if detect_document_type(tax_id) == DocumentType.CNPJ:
            return None
        if value is None:
            raise ValueError("Estado civil é obrigatório para CPF")
        return value

    def to_model(self) -> CustomerInfo:
        return CustomerInfo(
            full_name=self.full_name,
            tax_id=self.tax_id,
            rg=self.rg,
            issuing_authority=self.issuing_authority,
            profession=self.profession,
            nationality=self.nationality,
            phone=self.phone,
            email=str(self.email),
            marital_status=self.marital_status,
        )
