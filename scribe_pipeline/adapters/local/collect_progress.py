"""CollectingProgressAdapter: keeps every event in memory, in arrival order."""

import uuid
from typing import Optional

from scribe_pipeline.domain.models import PipelineStage, ProgressEvent
from scribe_pipeline.ports.progress import ProgressPort


class CollectingProgressAdapter(ProgressPort):
    """Records events so a presentation layer (or a test) can replay them."""

    def __init__(self):
        self.events: list[ProgressEvent] = []

    def report(self, event: ProgressEvent) -> None:
        self.events.append(event)

    def for_asset(self, asset_id: uuid.UUID, stage: Optional[PipelineStage] = None) -> list[ProgressEvent]:
        return [
            e for e in self.events
            if e.asset_id == asset_id and (stage is None or e.stage is stage)
        ]

    def latest(self, asset_id: uuid.UUID) -> Optional[ProgressEvent]:
        events = self.for_asset(asset_id)
        return events[-1] if events else None
