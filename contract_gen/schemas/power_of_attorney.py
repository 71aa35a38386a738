"""Standalone power-of-attorney form schema."""

from pydantic import Field, field_validator

from contract_gen.models.aggregate import PowerOfAttorneyData
from contract_gen.models.enums import BrazilianState
from contract_gen.schemas.base import StepSchema
from contract_gen.schemas.masks import CPF_LENGTH, digits_only, mask_tax_id


class PowerOfAttorneySchema(StepSchema):
    full_name: str = Field(min_length=3, max_length=100)
    cpf: str
    rg: str = Field(default="", max_length=20)
    issuing_authority: str = Field(default="", max_length=50)
    utility_company: str
    street: str = Field(min_length=3, max_length=200)
    number: str = Field(max_length=20)
    neighborhood: str = Field(max_length=100)
    city: str = Field(max_length=100)
    state: BrazilianState

    @field_validator("cpf")
    @classmethod
    def _normalize_cpf(cls, value: str) -> str:
        if len(digits_only(value)) != CPF_LENGTH:
            raise ValueError("CPF inválido")
        return mask_tax_id(value)

    @field_validator("utility_company")
    @classmethod
    def _require_utility_company(cls, value: str) -> str:
        if not value:
            raise ValueError("Nome da concessionária é obrigatório")
        return value

    @field_validator("state", mode="before")
    @classmethod
    def _upper_state(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    def to_model(self) -> PowerOfAttorneyData:
        return PowerOfAttorneyData(
            full_name=self.full_name,
            cpf=self.cpf,
            rg=self.rg,
            issuing_authority=self.issuing_authority,
            street=self.street,
            number=self.number,
            neighborhood=self.neighborhood,
            city=self.city,
            state=self.state,
            utility_company=self.utility_company,
        )
