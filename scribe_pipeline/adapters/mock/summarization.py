"""MockSummarizationAdapter: deterministic placeholder summary generation."""

import asyncio
import logging
from typing import Optional

from scribe_pipeline.adapters.mock.milestones import check_cancelled, run_milestones
from scribe_pipeline.domain.errors import EngineUnavailable
from scribe_pipeline.domain.models import Summary, SummaryTemplate, Transcript
from scribe_pipeline.ports.progress import ProgressCallback
from scribe_pipeline.ports.summarization import SummarizationPort
from scribe_pipeline.post_processing import build_summary_content

logger = logging.getLogger(__name__)

DEFAULT_STEP_DELAY = 0.3

MILESTONES = [
    (0.2, "Analyzing transcript content..."),
    (0.4, "Identifying key points..."),
    (0.6, "Extracting action items..."),
    (0.8, "Formatting summary..."),
    (1.0, "Summary complete!"),
]


class MockSummarizationAdapter(SummarizationPort):
    def __init__(self, step_delay: float = DEFAULT_STEP_DELAY):
        self._step_delay = step_delay
        self._available = True

    def set_available(self, available: bool) -> None:
        self._available = available

    async def summarize(
        self,
        transcript: Transcript,
        template: SummaryTemplate,
        on_progress: ProgressCallback,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Summary:
        if not self._available:
            raise EngineUnavailable(f"{self.engine_name()} is not available", engine=self.engine_name())
        check_cancelled(cancel_event, "summarization")

        logger.info(f"Summarizing transcript {transcript.id} with template {template.value}")
        await run_milestones(
            MILESTONES, on_progress, self._step_delay,
            stage="summarization", cancel_event=cancel_event,
        )

        content = build_summary_content(transcript, template)
        summary = Summary.for_transcript(transcript, template, content)
        logger.info(f"Summary ready: {content.title!r} with {len(content.sections)} sections")
        return summary

    def engine_name(self) -> str:
        return "mock-summarizer"

    def is_available(self) -> bool:
        return self._available
