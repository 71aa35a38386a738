"""pt-BR display formatting; values are only rounded here, never stored rounded."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")

MONTHS_PT = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)


def format_brl(amount: Decimal | int | float | None) -> str:
    """``Decimal("1234.5")`` -> ``"1.234,50"`` (no currency symbol)."""
    if amount is None:
        return ""
    value = Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    us_style = f"{value:,.2f}"
    return us_style.replace(",", "_").replace(".", ",").replace("_", ".")


def format_date_br(value: date | None) -> str:
    if value is None:
        return ""
    return value.strftime("%d/%m/%Y")


def format_long_date_pt(value: date) -> str:
    """``date(2025, 1, 10)`` -> ``"10 de janeiro de 2025"``."""
    return f"{value.day:02d} de {MONTHS_PT[value.month - 1]} de {value.year}"


def format_kwp(value: Decimal) -> str:
    """Two decimal places with a dot, as printed in the object clause."""
    return str(value.quantize(CENTS, rounding=ROUND_HALF_UP))


def format_plain(value: Decimal | int | None) -> str:
    """Drop trailing zeros: ``Decimal("5.0")`` -> ``"5"``."""
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    return f"{value.normalize():f}"
