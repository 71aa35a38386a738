"""Installation location model."""

from dataclasses import dataclass

from contract_gen.models.enums import BrazilianState, InstallationType


@dataclass(frozen=True)
class InstallationLocation:
    """Address where the photovoltaic system is installed.

    Fields mirror a Brazilian address:
    - neighborhood: bairro
    - state: two-letter UF code
    - zip_code: CEP in ``NNNNN-NNN`` form
    - utility_company / utility_code: distribution company and consumer unit
    """

    street: str
    number: str
    neighborhood: str
    city: str
    state: BrazilianState
    zip_code: str
    utility_company: str
    installation_type: InstallationType
    utility_code: str | None = None
