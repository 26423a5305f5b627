"""Fixed-delay milestone runner shared by the placeholder engines.

A real engine should gate progress on genuine work units instead of sleeping;
the (fraction, label) contract stays the same.
"""

import asyncio
import logging
from typing import Optional, Sequence

from scribe_pipeline.domain.errors import Cancelled
from scribe_pipeline.ports.progress import ProgressCallback

logger = logging.getLogger(__name__)

Milestone = tuple[float, str]


def check_cancelled(cancel_event: Optional[asyncio.Event], stage: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise Cancelled(f"{stage} cancelled by caller", stage=stage)


async def run_milestones(
    milestones: Sequence[Milestone],
    on_progress: ProgressCallback,
    step_delay: float,
    stage: str,
    cancel_event: Optional[asyncio.Event] = None,
) -> None:
    """Report each milestone, then suspend for step_delay.

    Cancellation is checked before every milestone, so a cancelled run stops
    at a milestone boundary and never reports past it.
    """
    last: Optional[float] = None
    for fraction, label in milestones:
        if last is not None and fraction <= last:
            raise ValueError(f"Milestones for {stage} must strictly increase ({last} -> {fraction})")
        check_cancelled(cancel_event, stage)
        on_progress(fraction, label)
        last = fraction
        await asyncio.sleep(step_delay)
