"""TranscriptionPort: abstract interface for speech-to-text engines."""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

from scribe_pipeline.domain.models import AudioAsset, ProcessingMode, Transcript
from scribe_pipeline.ports.progress import ProgressCallback


class TranscriptionPort(ABC):
    @abstractmethod
    async def transcribe(
        self,
        asset: AudioAsset,
        mode: ProcessingMode,
        on_progress: ProgressCallback,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Transcript:
        """Transcribe an asset.

        Calls on_progress with strictly increasing fractions ending at 1.0.
        Raises EngineUnavailable, InvalidAudio or Cancelled without returning
        a partial transcript.
        """

    @abstractmethod
    def engine_name(self) -> str:
        """Return the human-readable engine name."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the engine can accept work."""
