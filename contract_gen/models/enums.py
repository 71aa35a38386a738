"""Enumeration types for wizard entities."""

from enum import Enum


class FlowKind(str, Enum):
    CONTRACT = "contract"
    POWER_OF_ATTORNEY = "power-of-attorney"


class DocumentType(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"


class MaritalStatus(str, Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    DIVORCED = "Divorced"
    WIDOWED = "Widowed"

    @property
    def label(self) -> str:
        return _MARITAL_STATUS_LABELS[self]


_MARITAL_STATUS_LABELS = {
    MaritalStatus.SINGLE: "Solteiro(a)",
    MaritalStatus.MARRIED: "Casado(a)",
    MaritalStatus.DIVORCED: "Divorciado(a)",
    MaritalStatus.WIDOWED: "Viúvo(a)",
}


class InstallationType(str, Enum):
    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"


class MountingType(str, Enum):
    GROUND = "Ground"
    ROOF = "Roof"
    OTHER = "Other"


class PaymentMethod(str, Enum):
    TRANSFER = "Transfer"
    BANK_SLIP = "BankSlip"
    PIX = "Pix"
    FINANCING = "Financing"

    @property
    def label(self) -> str:
        """Portuguese label printed on documents."""
        return _PAYMENT_METHOD_LABELS[self]

    @classmethod
    def parse(cls, value: "str | PaymentMethod") -> "PaymentMethod":
        """Accept either the stored value or its Portuguese label."""
        if isinstance(value, cls):
            return value
        for method, label in _PAYMENT_METHOD_LABELS.items():
            if value in (method.value, label):
                return method
        raise ValueError(f"Unknown payment method: {value!r}")


_PAYMENT_METHOD_LABELS = {
    PaymentMethod.TRANSFER: "Transferência",
    PaymentMethod.BANK_SLIP: "Boleto",
    PaymentMethod.PIX: "Pix",
    PaymentMethod.FINANCING: "Financiamento",
}


class BrazilianState(str, Enum):
    AC = "AC"
    AL = "AL"
    AP = "AP"
    AM = "AM"
    BA = "BA"
    CE = "CE"
    DF = "DF"
    ES = "ES"
    GO = "GO"
    MA = "MA"
    MT = "MT"
    MS = "MS"
    MG = "MG"
    PA = "PA"
    PB = "PB"
    PR = "PR"
    PE = "PE"
    PI = "PI"
    RJ = "RJ"
    RN = "RN"
    RS = "RS"
    RO = "RO"
    RR = "RR"
    SC = "SC"
    SP = "SP"
    SE = "SE"
    TO = "TO"
