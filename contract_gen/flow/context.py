"""Explicit owner of the current wizard snapshot."""

import logging
from collections.abc import Callable
from typing import Any

from contract_gen.flow import progress
from contract_gen.flow.progress import FormProgress
from contract_gen.flow.steps import Step
from contract_gen.models import FlowKind, FormAggregate

logger = logging.getLogger(__name__)


class FlowContext:
    """Holds one ``FormProgress`` and replaces it on every update.

    ``generation`` increases whenever a new flow starts or a record is
    resumed. Callers that start a storage round-trip capture it first and
    pass it back to ``advance``; results belonging to an older generation
    are discarded instead of being merged into the new flow.
    """

    def __init__(self, state: FormProgress | None = None) -> None:
        self._state = state or FormProgress()
        self._generation = 0

    @property
    def state(self) -> FormProgress:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def update(self, fn: Callable[[FormProgress], FormProgress]) -> FormProgress:
        self._state = fn(self._state)
        return self._state

    def start_new(self, kind: FlowKind = FlowKind.CONTRACT) -> FormProgress:
        self._generation += 1
        logger.info("Starting new %s flow", kind.value)
        return self.update(lambda _: progress.start_new(kind))

    def resume(self, data: FormAggregate) -> FormProgress:
        self._generation += 1
        state = self.update(lambda _: progress.resume(data))
        logger.info(
            "Resumed record with steps %s",
            [step.value for step in progress.ordered(state.completed_steps)],
            extra={"customer_id": data.customer_id},
        )
        return state

    def advance(
        self,
        step: Step,
        saved_data: Any,
        entity_id: str | None = None,
        generation: int | None = None,
    ) -> FormProgress | None:
        """Apply a completed save; returns ``None`` for a stale result."""
        if generation is not None and generation != self._generation:
            logger.info(
                "Discarding stale %s result from generation %d (now %d)",
                step.value,
                generation,
                self._generation,
                extra={"step": step.value, "entity_id": entity_id},
            )
            return None
        return self.update(lambda state: progress.advance(state, step, saved_data, entity_id))

    def go_to(self, target: Step) -> bool:
        """Navigate to ``target``; returns whether the gate allowed it."""
        before = self._state
        after = self.update(lambda state: progress.go_to(state, target))
        return after is not before
