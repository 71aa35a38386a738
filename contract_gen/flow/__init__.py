"""Wizard navigation: step order, step gate and progress state machine."""

from contract_gen.flow.context import FlowContext
from contract_gen.flow.gate import can_navigate
from contract_gen.flow.progress import (
    FormProgress,
    StepStatus,
    advance,
    completed_steps_for,
    go_to,
    progress_fraction,
    resume,
    start_new,
    step_statuses,
)
from contract_gen.flow.steps import DATA_STEPS, STEP_ORDER, Step, first_step, next_step

__all__ = [
    "DATA_STEPS",
    "FlowContext",
    "FormProgress",
    "STEP_ORDER",
    "Step",
    "StepStatus",
    "advance",
    "can_navigate",
    "completed_steps_for",
    "first_step",
    "go_to",
    "next_step",
    "progress_fraction",
    "resume",
    "start_new",
    "step_statuses",
]
