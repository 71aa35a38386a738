"""Fixed step order of the contract wizard."""

from enum import Enum

from contract_gen.models.enums import FlowKind


class Step(str, Enum):
    CUSTOMER_INFO = "customer-info"
    INSTALLATION_LOCATION = "installation-location"
    TECHNICAL_CONFIG = "technical-config"
    FINANCIAL_TERMS = "financial-terms"
    REVIEW = "review"

    @property
    def label(self) -> str:
        return _STEP_LABELS[self]


_STEP_LABELS = {
    Step.CUSTOMER_INFO: "Cliente",
    Step.INSTALLATION_LOCATION: "Local",
    Step.TECHNICAL_CONFIG: "Técnico",
    Step.FINANCIAL_TERMS: "Financeiro",
    Step.REVIEW: "Revisão",
}

STEP_ORDER: tuple[Step, ...] = tuple(Step)
DATA_STEPS: tuple[Step, ...] = STEP_ORDER[:-1]


def step_index(step: Step) -> int:
    return STEP_ORDER.index(step)


def first_step(kind: FlowKind) -> Step | None:
    """Entry step for a new flow; power-of-attorney flows have no steps."""
    if kind == FlowKind.CONTRACT:
        return STEP_ORDER[0]
    return None


def next_step(step: Step) -> Step:
    """Step after ``step``; ``review`` is terminal."""
    index = step_index(step)
    return STEP_ORDER[min(index + 1, len(STEP_ORDER) - 1)]
