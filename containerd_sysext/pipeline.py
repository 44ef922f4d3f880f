from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Protocol, Sequence

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single install step. Raising aborts the rest of the pipeline."""

    step_id: str

    def run(self, ctx: Any) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]


def run_pipeline(*, ctx: Any, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first failure."""

    ran: List[str] = []
    for step in steps:
        logger.debug("Running step %s", step.step_id)
        try:
            step.run(ctx)
        except Exception:
            logger.error("Step %s failed (completed: %s)", step.step_id, ", ".join(ran) or "none")
            raise
        ran.append(step.step_id)
    return PipelineResult(ran_steps=ran)
