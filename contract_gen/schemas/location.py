"""Installation location step schema."""

from pydantic import Field, field_validator

from contract_gen.models.enums import BrazilianState, InstallationType
from contract_gen.models.location import InstallationLocation
from contract_gen.schemas.base import StepSchema, blank_to_none
from contract_gen.schemas.masks import format_cep

CEP_PATTERN = r"^\d{5}-\d{3}$"


class InstallationLocationSchema(StepSchema):
    street: str = Field(min_length=3, max_length=200)
    number: str = Field(max_length=20)
    neighborhood: str = Field(max_length=100)
    city: str = Field(max_length=100)
    state: BrazilianState
    zip_code: str = Field(pattern=CEP_PATTERN)
    utility_company: str
    utility_code: str | None = Field(default=None, max_length=20)
    installation_type: InstallationType

    @field_validator("state", mode="before")
    @classmethod
    def _upper_state(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("zip_code", mode="before")
    @classmethod
    def _mask_zip_code(cls, value: object) -> object:
        if isinstance(value, str) and value.strip().isdigit() and len(value.strip()) == 8:
            return format_cep(value)
        return value

    @field_validator("utility_company")
    @classmethod
    def _require_utility_company(cls, value: str) -> str:
        if not value:
            raise ValueError("Nome da concessionária é obrigatório")
        return value

    @field_validator("utility_code", mode="before")
    @classmethod
    def _blank_utility_code(cls, value: object) -> object:
        return blank_to_none(value)

    def to_model(self) -> InstallationLocation:
        return InstallationLocation(
            street=self.street,
            number=self.number,
            neighborhood=self.neighborhood,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            utility_company=self.utility_company,
            utility_code=self.utility_code,
            installation_type=self.installation_type,
        )
