"""Financial terms step schema."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from contract_gen.models.enums import PaymentMethod
from contract_gen.models.financial import FinancialTerms, Installment
from contract_gen.schemas.base import StepSchema


class InstallmentSchema(BaseModel):
    method: PaymentMethod
    amount: Decimal = Field(ge=0)
    due_date: date

    @field_validator("method", mode="before")
    @classmethod
    def _parse_method(cls, value: Any) -> Any:
        try:
            return PaymentMethod.parse(value)
        except ValueError:
            return value

    def to_model(self) -> Installment:
        return Installment(method=self.method, amount=self.amount, due_date=self.due_date)


class FinancialTermsSchema(StepSchema):
    """Installments only; a submitted ``total_amount`` is ignored."""

    installments: list[InstallmentSchema]

    @field_validator("installments")
    @classmethod
    def _at_least_one(cls, value: list[InstallmentSchema]) -> list[InstallmentSchema]:
        if not value:
            raise ValueError("Adicione pelo menos uma parcela")
        return value

    def to_model(self) -> FinancialTerms:
        return FinancialTerms(installments=tuple(item.to_model() for item in self.installments))
