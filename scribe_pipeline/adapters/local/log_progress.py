"""LogProgressAdapter: reports pipeline progress via logging."""

import logging

from scribe_pipeline.domain.models import ProgressEvent
from scribe_pipeline.ports.progress import ProgressPort

logger = logging.getLogger(__name__)


class LogProgressAdapter(ProgressPort):
    def report(self, event: ProgressEvent) -> None:
        msg = f"[{str(event.asset_id)[:8]}] {event.stage.value}"
        if event.fraction > 0:
            msg += f" {event.fraction:.0%}"
        if event.label:
            msg += f" - {event.label}"
        logger.info(msg)
