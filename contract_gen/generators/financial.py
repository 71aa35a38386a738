"""Financial terms input generator."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import ROUND_DOWN, Decimal
from typing import Any

from contract_gen.generators.base import BaseGenerator
from contract_gen.models import PaymentMethod


class FinancialInputGenerator(BaseGenerator):
    """Raw financial-terms step input.

    A total is drawn first and split into installments that add up to it
    exactly; the last installment absorbs the rounding remainder.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    start_date : date | None
        Due date of the first installment (default: 10 days from today).
    """

    METHODS = list(PaymentMethod)
    METHOD_WEIGHTS = [0.20, 0.25, 0.35, 0.20]

    # Price per installed kWp, BRL
    PRICE_PER_KWP = (Decimal("3200"), Decimal("5200"))

    def __init__(self, seed: int | None = None, start_date: date | None = None) -> None:
        super().__init__(seed)
        self.start_date = start_date or date.today() + timedelta(days=10)

    def generate(self, system_power_kwp: Decimal | None = None) -> dict[str, Any]:
        kwp = system_power_kwp or Decimal(self.rng.randint(3, 30))
        low, high = self.PRICE_PER_KWP
        price = low + (high - low) * Decimal(str(round(self.rng.random(), 4)))
        total = (kwp * price).quantize(Decimal("0.01"))

        count = self.rng.choices([1, 2, 3, 4, 6], weights=[0.35, 0.25, 0.2, 0.1, 0.1], k=1)[0]
        share = (total / count).quantize(Decimal("0.01"), rounding=ROUND_DOWN)
        amounts = [share] * (count - 1) + [total - share * (count - 1)]

        return {
            "installments": [
                {
                    "method": self._method().value,
                    "amount": str(amount),
                    "due_date": (self.start_date + timedelta(days=30 * index)).isoformat(),
                }
                for index, amount in enumerate(amounts)
            ]
        }

    def _method(self) -> PaymentMethod:
        return self.rng.choices(self.METHODS, weights=self.METHOD_WEIGHTS, k=1)[0]
