"""PipelineCoordinator: drives one asset through transcription then summarization.

Accepts all ports via dependency injection. Per run it resolves the processing
mode, moves the asset through its lifecycle status, relays engine progress to
the observer and attaches the resulting Transcript/Summary pair.
"""

import asyncio
import logging
import math
import uuid
from dataclasses import dataclass
from typing import Awaitable, Optional, TypeVar, Union

from scribe_pipeline.domain.errors import AssetBusy, InvalidDuration, PipelineError, StageTimeout
from scribe_pipeline.domain.mode_selector import ModeSelector
from scribe_pipeline.domain.models import (
    AudioAsset, PipelineStage, ProcessingMode, ProcessingStatus, ProgressEvent,
    RunState, Summary, SummaryTemplate, Transcript,
)
from scribe_pipeline.domain.templates import resolve_template
from scribe_pipeline.ports.asset_store import AssetStorePort
from scribe_pipeline.ports.progress import ProgressCallback, ProgressPort
from scribe_pipeline.ports.summarization import SummarizationPort
from scribe_pipeline.ports.transcription import TranscriptionPort

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ProcessRequest:
    """All parameters for one pipeline run."""
    asset: AudioAsset
    template: Optional[Union[SummaryTemplate, str]] = None
    mode: Optional[Union[ProcessingMode, str]] = None
    timeout: Optional[float] = None
    cancel_event: Optional[asyncio.Event] = None


@dataclass(frozen=True)
class ProcessingEstimate:
    mode: ProcessingMode
    cost: float
    processing_seconds: float


class PipelineCoordinator:
    """Runs assets through the pipeline and tracks the latest run per asset.

    Run state and failure codes are kept per asset id until forget() is
    called, so a long-lived coordinator should forget assets it no longer
    reports on.
    """

    def __init__(
        self,
        transcription: TranscriptionPort,
        summarization: SummarizationPort,
        progress: Optional[ProgressPort] = None,
        mode_selector: Optional[ModeSelector] = None,
        asset_store: Optional[AssetStorePort] = None,
        default_template: SummaryTemplate = SummaryTemplate.ONE_ON_ONE,
        default_timeout: Optional[float] = None,
    ):
        self._transcription = transcription
        self._summarization = summarization
        self._progress = progress
        self._mode_selector = mode_selector or ModeSelector()
        self._asset_store = asset_store
        self._default_template = default_template
        self._default_timeout = default_timeout
        # single-flight guard: ids of assets with a run in progress
        self._active: set[uuid.UUID] = set()
        self._states: dict[uuid.UUID, RunState] = {}
        self._errors: dict[uuid.UUID, str] = {}

    def is_running(self, asset_id: uuid.UUID) -> bool:
        return asset_id in self._active

    def run_state(self, asset_id: uuid.UUID) -> RunState:
        """State of the latest run for an asset; IDLE if it was never submitted."""
        return self._states.get(asset_id, RunState.IDLE)

    def run_error(self, asset_id: uuid.UUID) -> Optional[str]:
        """Error code of the latest failed run for an asset, or None."""
        return self._errors.get(asset_id)

    def forget(self, asset_id: uuid.UUID) -> None:
        """Drop the tracked state of an asset that is not running."""
        if asset_id in self._active:
            raise AssetBusy(f"Asset {asset_id} has a pipeline run in progress", asset_id=str(asset_id))
        self._states.pop(asset_id, None)
        self._errors.pop(asset_id, None)

    def resolve_mode(self, asset: AudioAsset, override: Optional[Union[ProcessingMode, str]] = None) -> ProcessingMode:
        if override is None:
            return self._mode_selector.recommend(asset.duration)
        if isinstance(override, ProcessingMode):
            return override
        return ProcessingMode(override.strip().lower())

    def estimate(self, asset: AudioAsset, mode: Optional[Union[ProcessingMode, str]] = None) -> ProcessingEstimate:
        resolved = self.resolve_mode(asset, mode)
        return ProcessingEstimate(
            mode=resolved,
            cost=self._mode_selector.estimate_cost(asset.duration, resolved),
            processing_seconds=self._mode_selector.estimate_processing_time(asset.duration, resolved),
        )

    async def run(
        self,
        asset: AudioAsset,
        template: Optional[Union[SummaryTemplate, str]] = None,
        mode: Optional[Union[ProcessingMode, str]] = None,
        timeout: Optional[float] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> tuple[Transcript, Summary]:
        return await self.process(ProcessRequest(
            asset=asset, template=template, mode=mode,
            timeout=timeout, cancel_event=cancel_event,
        ))

    async def process(self, req: ProcessRequest) -> tuple[Transcript, Summary]:
        """Run the full pipeline. Returns (transcript, summary).

        Validation errors (busy asset, bad duration, unknown template or mode)
        are raised before the asset is touched. Any stage failure marks the
        asset FAILED, clears its results and re-raises the original error.
        """
        asset = req.asset
        # Claimed before the first await, so a second run on the same
        # asset in this event loop always sees the claim.
        if asset.id in self._active:
            raise AssetBusy(f"Asset {asset.id} already has a pipeline run in progress", asset_id=str(asset.id))
        if not math.isfinite(asset.duration) or asset.duration <= 0:
            raise InvalidDuration(
                f"Asset {asset.id} has duration {asset.duration}; nothing to process",
                asset_id=str(asset.id), duration=asset.duration,
            )
        template = resolve_template(req.template if req.template is not None else self._default_template)
        mode = self.resolve_mode(asset, req.mode)
        timeout = req.timeout if req.timeout is not None else self._default_timeout

        self._active.add(asset.id)
        try:
            return await self._execute(asset, template, mode, timeout, req.cancel_event)
        finally:
            self._active.discard(asset.id)

    async def process_many(self, requests: list[ProcessRequest]) -> list[Union[tuple[Transcript, Summary], BaseException]]:
        """Run several requests concurrently; each slot holds a result or the raised error."""
        return await asyncio.gather(*(self.process(r) for r in requests), return_exceptions=True)

    async def _execute(
        self,
        asset: AudioAsset,
        template: SummaryTemplate,
        mode: ProcessingMode,
        timeout: Optional[float],
        cancel_event: Optional[asyncio.Event],
    ) -> tuple[Transcript, Summary]:
        asset.transition_to(ProcessingStatus.PROCESSING)
        # from here on every failure must go through _fail, or the asset stays PROCESSING
        try:
            self._errors.pop(asset.id, None)
            logger.info(
                f"Processing {asset.file_name} ({asset.formatted_duration}) "
                f"mode={mode.value} template={template.value}"
            )

            # 1. Transcription
            self._states[asset.id] = RunState.TRANSCRIBING
            transcript = await self._run_stage(
                PipelineStage.TRANSCRIPTION,
                self._transcription.transcribe(
                    asset, mode, self._relay(asset.id, PipelineStage.TRANSCRIPTION), cancel_event,
                ),
                timeout,
            )
            asset.attach_transcript(transcript)

            # 2. Summarization, only once a transcript exists
            self._states[asset.id] = RunState.SUMMARIZING
            summary = await self._run_stage(
                PipelineStage.SUMMARIZATION,
                self._summarization.summarize(
                    transcript, template, self._relay(asset.id, PipelineStage.SUMMARIZATION), cancel_event,
                ),
                timeout,
            )
            asset.attach_summary(summary)
        except asyncio.CancelledError:
            await self._fail(asset, "TASK_CANCELLED", "task cancelled")
            raise
        except Exception as e:
            code = e.error_code if isinstance(e, PipelineError) else type(e).__name__
            await self._fail(asset, code, str(e))
            raise

        asset.transition_to(ProcessingStatus.COMPLETED)
        self._states[asset.id] = RunState.COMPLETED
        logger.info(
            f"Completed {asset.file_name}: {len(transcript.segments)} segments, "
            f"{len(summary.content.sections)} summary sections"
        )
        await self._persist(asset)
        return transcript, summary

    async def _run_stage(self, stage: PipelineStage, work: Awaitable[T], timeout: Optional[float]) -> T:
        try:
            return await asyncio.wait_for(work, timeout)
        except asyncio.TimeoutError:
            raise StageTimeout(
                f"{stage.value} did not finish within {timeout}s",
                stage=stage.value, timeout=timeout,
            ) from None

    def _relay(self, asset_id: uuid.UUID, stage: PipelineStage) -> ProgressCallback:
        def on_progress(fraction: float, label: str) -> None:
            if self._progress is not None:
                self._progress.report(ProgressEvent(asset_id=asset_id, stage=stage, fraction=fraction, label=label))
        return on_progress

    async def _fail(self, asset: AudioAsset, code: str, reason: str) -> None:
        stage = self._states.get(asset.id, RunState.IDLE)
        logger.error(f"Pipeline failed for {asset.file_name} during {stage.value}: {code}: {reason}")
        asset.clear_results()
        asset.transition_to(ProcessingStatus.FAILED)
        self._states[asset.id] = RunState.FAILED
        self._errors[asset.id] = code
        await self._persist(asset)

    async def _persist(self, asset: AudioAsset) -> None:
        if self._asset_store is None:
            return
        try:
            # store adapters do blocking file I/O
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._asset_store.save, asset)
        except Exception as e:
            logger.error(f"Could not persist asset {asset.id}: {e}")
