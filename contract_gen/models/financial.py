"""Financial terms models."""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal

from contract_gen.models.enums import PaymentMethod


@dataclass(frozen=True)
class Installment:
    """Single payment (parcela)."""

    method: PaymentMethod
    amount: Decimal
    due_date: date


@dataclass(frozen=True)
class FinancialTerms:
    """Ordered installments; the total is always derived from them."""

    installments: tuple[Installment, ...] = field(default_factory=tuple)

    @property
    def total_amount(self) -> Decimal:
        # Exact Decimal sum; rounding happens only when rendering.
        return sum((inst.amount for inst in self.installments), Decimal("0"))

    def add_installment(self, installment: Installment) -> "FinancialTerms":
        return replace(self, installments=self.installments + (installment,))

    def remove_installment(self, index: int) -> "FinancialTerms":
        if not -len(self.installments) <= index < len(self.installments):
            raise IndexError(f"installment index {index} out of range")
        items = list(self.installments)
        del items[index]
        return replace(self, installments=tuple(items))

    def update_installment(self, index: int, installment: Installment) -> "FinancialTerms":
        items = list(self.installments)
        items[index] = installment
        return replace(self, installments=tuple(items))
