"""MockTranscriptionAdapter: deterministic placeholder transcription.

Synthesises a transcript purely from the asset's duration and the processing
mode: one 10-second segment per full 10 seconds of audio, text drawn
cyclically from a fixed sentence pool, speaker labels only in ADVANCED mode.
The audio bytes are never read.
"""

import asyncio
import logging
from typing import Optional

from scribe_pipeline.adapters.mock.milestones import run_milestones
from scribe_pipeline.domain.errors import EngineUnavailable, InvalidAudio
from scribe_pipeline.domain.models import (
    AudioAsset, ProcessingMode, Transcript, TranscriptSegment,
)
from scribe_pipeline.ports.progress import ProgressCallback
from scribe_pipeline.ports.transcription import TranscriptionPort

logger = logging.getLogger(__name__)

SEGMENT_SECONDS = 10
SEGMENT_CONFIDENCE = 0.9
SPEAKER_ROTATION = 3
DEFAULT_STEP_DELAY = 0.5

TRANSCRIPT_CONFIDENCE = {
    ProcessingMode.BASIC: 0.85,
    ProcessingMode.ADVANCED: 0.95,
}

MILESTONES = {
    ProcessingMode.BASIC: [
        (0.2, "Loading Whisper model..."),
        (0.4, "Transcribing audio..."),
        (0.6, "Detecting speakers..."),
        (0.8, "Finalizing transcript..."),
        (1.0, "Transcription complete!"),
    ],
    ProcessingMode.ADVANCED: [
        (0.1, "Uploading audio file..."),
        (0.3, "Processing with Whisper API..."),
        (0.5, "Running speaker diarization..."),
        (0.7, "Generating enhanced transcript..."),
        (0.9, "Finalizing results..."),
        (1.0, "Transcription complete!"),
    ],
}

SENTENCE_POOL = [
    "This is a sample transcription for development purposes.",
    "The audio recording contains various topics and discussions.",
    "We can see how the transcription service works in practice.",
    "Speaker identification helps distinguish between participants.",
    "The quality of transcription depends on the processing mode.",
    "Local processing is free but may have lower accuracy.",
    "Cloud processing provides better results but costs money.",
    "Users can choose between speed and quality based on their needs.",
    "This mock data helps test the user interface and workflow.",
    "In production, this would contain actual transcribed content.",
]


def synthesize_segments(duration: float, mode: ProcessingMode) -> list[TranscriptSegment]:
    """Build floor(duration / 10) fixed-length segments; a short remainder is dropped."""
    count = int(duration // SEGMENT_SECONDS)
    segments: list[TranscriptSegment] = []
    for i in range(count):
        start = float(i * SEGMENT_SECONDS)
        speaker = None
        if mode is ProcessingMode.ADVANCED:
            speaker = f"Speaker {i % SPEAKER_ROTATION + 1}"
        segments.append(TranscriptSegment(
            start=start,
            end=start + SEGMENT_SECONDS,
            text=SENTENCE_POOL[i % len(SENTENCE_POOL)],
            speaker=speaker,
            confidence=SEGMENT_CONFIDENCE,
        ))
    return segments


class MockTranscriptionAdapter(TranscriptionPort):
    def __init__(self, step_delay: float = DEFAULT_STEP_DELAY, language: str = "en"):
        self._step_delay = step_delay
        self._language = language
        self._available = True

    def set_available(self, available: bool) -> None:
        """Simulate the backend going away (or coming back)."""
        self._available = available

    async def transcribe(
        self,
        asset: AudioAsset,
        mode: ProcessingMode,
        on_progress: ProgressCallback,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Transcript:
        if not self._available:
            raise EngineUnavailable(f"{self.engine_name()} is not available", engine=self.engine_name())
        if asset.duration <= 0:
            raise InvalidAudio(f"Asset {asset.id} has no audio to transcribe", asset_id=str(asset.id))

        logger.info(f"Transcribing {asset.file_name} ({asset.duration:.1f}s) in {mode.value} mode")
        await run_milestones(
            MILESTONES[mode], on_progress, self._step_delay,
            stage="transcription", cancel_event=cancel_event,
        )

        segments = synthesize_segments(asset.duration, mode)
        transcript = Transcript(
            asset_id=asset.id,
            mode=mode,
            segments=segments,
            confidence=TRANSCRIPT_CONFIDENCE[mode],
            language=self._language,
        )
        logger.info(
            f"Transcript ready: {len(segments)} segments, "
            f"{transcript.speaker_count} speakers, confidence {transcript.confidence:.2f}"
        )
        return transcript

    def engine_name(self) -> str:
        return "mock-whisper"

    def is_available(self) -> bool:
        return self._available
