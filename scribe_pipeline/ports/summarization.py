"""SummarizationPort: abstract interface for summary generation engines."""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from scribe_pipeline.domain import templates
from scribe_pipeline.domain.models import Summary, SummaryTemplate, Transcript
from scribe_pipeline.ports.progress import ProgressCallback


class SummarizationPort(ABC):
    @abstractmethod
    async def summarize(
        self,
        transcript: Transcript,
        template: SummaryTemplate,
        on_progress: ProgressCallback,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Summary:
        """Build a template-structured summary owned by the transcript's asset."""

    @abstractmethod
    def engine_name(self) -> str:
        """Return the human-readable engine name."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the engine can accept work."""

    def estimate_generation_time(self, transcript: Transcript, template: SummaryTemplate) -> float:
        """User-facing estimate in seconds. Engines may override with their own model."""
        return templates.estimate_generation_time(transcript.duration, template)
