"""Progress state machine for the contract wizard.

Every transition is a pure function from one immutable ``FormProgress``
snapshot to the next. ``FlowContext`` (see ``flow.context``) owns the
current snapshot on behalf of the caller.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from contract_gen.flow.gate import can_navigate
from contract_gen.flow.steps import DATA_STEPS, STEP_ORDER, Step, first_step, next_step
from contract_gen.models import FlowKind, FormAggregate

logger = logging.getLogger(__name__)

# Step -> (aggregate field for the step data, aggregate field for its storage id)
STEP_DATA_KEYS: dict[Step, tuple[str, str]] = {
    Step.CUSTOMER_INFO: ("customer_info", "customer_id"),
    Step.INSTALLATION_LOCATION: ("installation_location", "installation_location_id"),
    Step.TECHNICAL_CONFIG: ("technical_config", "technical_config_id"),
    Step.FINANCIAL_TERMS: ("financial_terms", "financial_terms_id"),
}


@dataclass(frozen=True)
class FormProgress:
    """Snapshot of one wizard workflow."""

    current_step: Step | None = None
    completed_steps: frozenset[Step] = frozenset()
    data: FormAggregate = field(default_factory=FormAggregate)
    kind: FlowKind = FlowKind.CONTRACT


@dataclass(frozen=True)
class StepStatus:
    """Per-step flags for progress indicators."""

    step: Step
    completed: bool
    current: bool
    clickable: bool


def start_new(kind: FlowKind = FlowKind.CONTRACT) -> FormProgress:
    """Fresh workflow; unsaved data from any previous flow is dropped."""
    return FormProgress(current_step=first_step(kind), kind=kind)


def advance(
    state: FormProgress,
    step: Step,
    saved_data: Any,
    entity_id: str | None = None,
) -> FormProgress:
    """Record ``saved_data`` for ``step`` and move to the following step."""
    if step not in STEP_DATA_KEYS:
        raise ValueError(f"Step {step.value} does not hold data")

    data_key, id_key = STEP_DATA_KEYS[step]
    data = state.data.merge(**{data_key: saved_data, id_key: entity_id})
    return replace(
        state,
        current_step=next_step(step),
        completed_steps=state.completed_steps | {step},
        data=data,
    )


def go_to(state: FormProgress, target: Step) -> FormProgress:
    """Move to ``target`` when the gate allows it, otherwise stay put."""
    if not can_navigate(target, state.current_step, state.completed_steps):
        logger.debug("Navigation to %s refused from %s", target.value, state.current_step)
        return state
    return replace(state, current_step=target)


def completed_steps_for(data: FormAggregate) -> frozenset[Step]:
    """Steps whose sub-entity exists; the customer step is always included."""
    completed = {Step.CUSTOMER_INFO}
    for step in DATA_STEPS[1:]:
        data_key, _ = STEP_DATA_KEYS[step]
        if getattr(data, data_key) is not None:
            completed.add(step)
    return frozenset(completed)


def resume(data: FormAggregate) -> FormProgress:
    """Replace the whole workflow with a stored record."""
    return FormProgress(
        current_step=Step.CUSTOMER_INFO,
        completed_steps=completed_steps_for(data),
        data=data,
        kind=FlowKind.CONTRACT,
    )


def progress_fraction(state: FormProgress) -> float:
    """Share of the bar filled: completed steps over the steps before review."""
    return min(1.0, len(state.completed_steps) / (len(STEP_ORDER) - 1))


def step_statuses(state: FormProgress) -> list[StepStatus]:
    return [
        StepStatus(
            step=step,
            completed=step in state.completed_steps,
            current=step == state.current_step,
            clickable=can_navigate(step, state.current_step, state.completed_steps),
        )
        for step in STEP_ORDER
    ]


def ordered(steps: Iterable[Step]) -> list[Step]:
    """``steps`` sorted by wizard order."""
    return sorted(steps, key=STEP_ORDER.index)
