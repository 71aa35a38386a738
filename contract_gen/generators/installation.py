"""Installation location and technical configuration input generators."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from contract_gen.generators.base import BaseGenerator
from contract_gen.models import InstallationType, MountingType

UTILITY_COMPANIES = ["Energisa", "CEMIG", "Enel", "Copel", "CPFL", "Equatorial", "Light"]

INVERTER_BRANDS = ["Growatt", "Fronius", "SMA", "Deye", "Sungrow", "WEG", "Huawei"]
MODULE_BRANDS = ["Canadian Solar", "Jinko", "Trina", "JA Solar", "Longi", "BYD"]


class LocationInputGenerator(BaseGenerator):
    """Raw installation-location step input."""

    INSTALLATION_TYPES = list(InstallationType)
    INSTALLATION_WEIGHTS = [0.70, 0.22, 0.08]

    def generate(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "street": self.fake.street_name(),
            "number": self.fake.building_number(),
            "neighborhood": self.fake.bairro(),
            "city": self.fake.city(),
            "state": self.fake.estado_sigla(),
            "zip_code": f"{self.rng.randint(1_000_000, 99_999_999):08d}",
            "utility_company": self.rng.choice(UTILITY_COMPANIES),
            "installation_type": self.rng.choices(
                self.INSTALLATION_TYPES, weights=self.INSTALLATION_WEIGHTS, k=1
            )[0].value,
        }
        if self.rng.random() < 0.6:
            data["utility_code"] = str(self.rng.randint(10_000_000, 99_999_999))
        return data


class TechnicalInputGenerator(BaseGenerator):
    """Raw technical-config step input.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    secondary_inverter_share : float
        Share of systems with a second inverter.
    """

    MOUNTING_TYPES = list(MountingType)
    MOUNTING_WEIGHTS = [0.25, 0.70, 0.05]

    def __init__(self, seed: int | None = None, secondary_inverter_share: float = 0.2) -> None:
        super().__init__(seed)
        self.secondary_inverter_share = secondary_inverter_share

    def generate(self) -> dict[str, Any]:
        mounting = self.rng.choices(self.MOUNTING_TYPES, weights=self.MOUNTING_WEIGHTS, k=1)[0]
        has_secondary = self.rng.random() < self.secondary_inverter_share

        data: dict[str, Any] = {
            "primary_inverter": self._inverter(),
            "has_secondary_inverter": has_secondary,
            "solar_modules": {
                "brand": self.rng.choice(MODULE_BRANDS),
                "unit_power_w": self.rng.randrange(400, 700, 5),
                "quantity": self.rng.randint(6, 60),
            },
            "mounting_type": mounting.value,
            "installation_days": self.rng.randint(2, 30),
        }
        if has_secondary:
            data["secondary_inverter"] = self._inverter()
        if mounting is MountingType.OTHER:
            data["other_mounting_description"] = self.rng.choice(
                ["Carport", "Laje", "Estrutura metálica elevada"]
            )
        return data

    def _inverter(self) -> dict[str, Any]:
        return {
            "brand": self.rng.choice(INVERTER_BRANDS),
            "power_kw": str(Decimal(self.rng.randrange(30, 750, 5)) / 10),
            "quantity": self.rng.randint(1, 3),
            "warranty_years": self.rng.choice([5, 7, 10, 12]),
        }
