"""Configuration management for contract-gen."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from contract_gen.exceptions import ConfigurationError


@dataclass
class CompanyConfig:
    """Identity of the contracted company printed on every document."""

    name: str = "ECOENERGI SOLAR"
    cnpj: str = "12.276.329/0001-69"
    address: str = (
        "RUA DEPUTADO JÚLIO CÉSAR PAULINO MAIA - N°1410S - CENTRO, NA CIDADE DE "
        "SANTA RITA DO PARDO - MS, COM CEP: 79690-000"
    )
    representative: str = "DIOGO CASTRO ALVES RODRIGUES"
    representative_cpf: str = "058.281.431-21"

    @property
    def qualification(self) -> str:
        """Contractor paragraph used in the parties section."""
        return (
            f"CONTRATADA: {self.name}, PESSOA JURÍDICA DE DIREITO PRIVADO, INSCRITA NO "
            f"CNPJ SOB O N° {self.cnpj}, COM SEDE NA {self.address}, NESTE ATO "
            f"REPRESENTADA POR {self.representative}, INSCRITO NO CPF SOB O N° "
            f"{self.representative_cpf}."
        )


@dataclass
class LayoutConfig:
    """A4 page geometry in millimetres, measured from the top edge."""

    page_width: float = 210.0
    page_height: float = 297.0
    margin_left: float = 20.0
    margin_top: float = 20.0
    content_width: float = 170.0
    font_size: float = 10.0
    title_font_size: float = 16.0
    line_height_factor: float = 0.6  # mm per point of font size
    section_break_at: float = 250.0
    signature_break_at: float = 190.0
    footer: bool = True

    def __post_init__(self) -> None:
        if self.margin_left * 2 + self.content_width > self.page_width:
            raise ConfigurationError("content width does not fit inside the page margins")
        if not self.margin_top < self.signature_break_at < self.page_height:
            raise ConfigurationError("signature break threshold must lie inside the page")
        if not self.margin_top < self.section_break_at < self.page_height:
            raise ConfigurationError("section break threshold must lie inside the page")


@dataclass
class StorageConfig:
    """Storage backend selection."""

    backend: str = "memory"
    data_dir: Path = field(default_factory=lambda: Path("data"))

    def __post_init__(self) -> None:
        if self.backend not in ("memory", "json"):
            raise ConfigurationError(f"Unknown storage backend: {self.backend}")


@dataclass
class OutputConfig:
    """Output configuration."""

    pdf_output_dir: Path = field(default_factory=lambda: Path("output"))


@dataclass
class ContractGenConfig:
    """Main configuration for contract-gen."""

    company: CompanyConfig = field(default_factory=CompanyConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ContractGenConfig":
        """Create config from environment variables."""
        defaults = CompanyConfig()
        company = CompanyConfig(
            name=os.getenv("COMPANY_NAME", defaults.name),
            cnpj=os.getenv("COMPANY_CNPJ", defaults.cnpj),
            address=os.getenv("COMPANY_ADDRESS", defaults.address),
            representative=os.getenv("COMPANY_REPRESENTATIVE", defaults.representative),
            representative_cpf=os.getenv(
                "COMPANY_REPRESENTATIVE_CPF", defaults.representative_cpf
            ),
        )

        storage = StorageConfig(
            backend=os.getenv("CONTRACT_GEN_STORAGE", "memory"),
            data_dir=Path(os.getenv("CONTRACT_GEN_DATA_DIR", "data")),
        )

        output = OutputConfig(
            pdf_output_dir=Path(os.getenv("CONTRACT_GEN_OUTPUT_DIR", "output")),
        )

        seed = os.getenv("SEED")
        try:
            parsed_seed = int(seed) if seed else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from exc

        return cls(
            company=company,
            storage=storage,
            output=output,
            seed=parsed_seed,
            log_level=os.getenv("CONTRACT_GEN_LOG_LEVEL", "INFO"),
        )
