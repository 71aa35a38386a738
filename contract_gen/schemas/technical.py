"""Technical configuration step schema."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from contract_gen.models.enums import MountingType
from contract_gen.models.technical import InverterSpec, SolarModuleSpec, TechnicalConfig
from contract_gen.schemas.base import StepSchema, blank_to_none


class InverterSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    brand: str
    power_kw: Decimal = Field(ge=Decimal("0.1"), le=Decimal("100"))
    quantity: int = Field(ge=1, le=99)
    warranty_years: int = Field(ge=1, le=25)

    @field_validator("brand")
    @classmethod
    def _require_brand(cls, value: str) -> str:
        if not value:
            raise ValueError("Selecione uma marca")
        return value

    def to_model(self) -> InverterSpec:
        return InverterSpec(
            brand=self.brand,
            power_kw=self.power_kw,
            quantity=self.quantity,
            warranty_years=self.warranty_years,
        )


class SolarModuleSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    brand: str
    unit_power_w: int = Field(ge=100, le=800)
    quantity: int = Field(ge=1, le=999)

    @field_validator("brand")
    @classmethod
    def _require_brand(cls, value: str) -> str:
        if not value:
            raise ValueError("Selecione uma marca")
        return value

    def to_model(self) -> SolarModuleSpec:
        return SolarModuleSpec(
            brand=self.brand,
            unit_power_w=self.unit_power_w,
            quantity=self.quantity,
        )


class TechnicalConfigSchema(StepSchema):
    """Field order matters: toggles are declared before the fields they gate."""

    primary_inverter: InverterSchema
    has_secondary_inverter: bool = False
    secondary_inverter: InverterSchema | None = Field(default=None, validate_default=True)
    solar_modules: SolarModuleSchema
    mounting_type: MountingType
    other_mounting_description: str | None = Field(default=None, validate_default=True)
    installation_days: int = Field(ge=1, le=365)

    @field_validator("secondary_inverter", mode="before")
    @classmethod
    def _gate_secondary_inverter(cls, value: Any, info: ValidationInfo) -> Any:
        if not info.data.get("has_secondary_inverter"):
            # Toggle off: whatever was typed is discarded as a whole.
            return None
        if value is None:
            raise ValueError("Preencha os dados do inversor secundário")
        return value

    @field_validator("other_mounting_description", mode="before")
    @classmethod
    def _gate_other_description(cls, value: Any, info: ValidationInfo) -> Any:
        if info.data.get("mounting_type") != MountingType.OTHER:
            return None
        value = blank_to_none(value)
        if value is None:
            raise ValueError("Descreva o tipo de instalação")
        return value

    def to_model(self) -> TechnicalConfig:
        return TechnicalConfig(
            primary_inverter=self.primary_inverter.to_model(),
            secondary_inverter=(
                self.secondary_inverter.to_model() if self.secondary_inverter else None
            ),
            solar_modules=self.solar_modules.to_model(),
            mounting_type=self.mounting_type,
            other_mounting_description=self.other_mounting_description,
            installation_days=self.installation_days,
        )
