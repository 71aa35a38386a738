"""Technical configuration models."""

from dataclasses import dataclass
from decimal import Decimal

from contract_gen.models.enums import MountingType


@dataclass(frozen=True)
class InverterSpec:
    """Inverter line item."""

    brand: str
    power_kw: Decimal
    quantity: int
    warranty_years: int


@dataclass(frozen=True)
class SolarModuleSpec:
    """Photovoltaic module line item."""

    brand: str
    unit_power_w: int
    quantity: int


@dataclass(frozen=True)
class TechnicalConfig:
    """Equipment and mounting of the system.

    ``secondary_inverter`` is either a complete ``InverterSpec`` or ``None``;
    partially filled secondary inverters are never stored.
    """

    primary_inverter: InverterSpec
    solar_modules: SolarModuleSpec
    mounting_type: MountingType
    installation_days: int
    secondary_inverter: InverterSpec | None = None
    other_mounting_description: str | None = None  # only for MountingType.OTHER

    @property
    def inverters(self) -> tuple[InverterSpec, ...]:
        if self.secondary_inverter is None:
            return (self.primary_inverter,)
        return (self.primary_inverter, self.secondary_inverter)

    @property
    def system_power_kwp(self) -> Decimal:
        """Total module power in kilowatt-peak, unrounded."""
        watts = Decimal(self.solar_modules.unit_power_w) * self.solar_modules.quantity
        return watts / Decimal(1000)
