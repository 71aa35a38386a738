"""Step gate deciding which wizard steps are reachable."""

from collections.abc import Collection

from contract_gen.flow.steps import STEP_ORDER, Step, step_index


def can_navigate(
    target: Step,
    current_step: Step | None,
    completed_steps: Collection[Step],
) -> bool:
    """Return whether ``target`` may be opened from the current position.

    Rules, first match wins:

    1. ``target`` is the current step.
    2. ``target`` was already completed.
    3. ``target`` directly follows the current step and the current step is
       completed.

    Pure function: it only drives navigation affordances and never touches
    the stored progress.
    """
    if target == current_step:
        return True
    if target in completed_steps:
        return True
    if current_step is None or current_step not in completed_steps:
        return False
    following = step_index(current_step) + 1
    return following < len(STEP_ORDER) and STEP_ORDER[following] == target
