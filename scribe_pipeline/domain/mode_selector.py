"""Processing-mode recommendation and user-facing cost/time estimates.

The thresholds are a fixed three-way policy, not a scoring function:
short recordings stay local, long ones go to the cloud-equivalent tier,
and the middle band defaults to local.
"""

import math

from scribe_pipeline.domain.errors import InvalidDuration
from scribe_pipeline.domain.models import ProcessingMode

# Below this many seconds, always recommend BASIC.
SHORT_RECORDING_SECONDS = 300
# Above this many seconds, recommend ADVANCED. Equal to it stays BASIC.
LONG_RECORDING_SECONDS = 900

# Approximate per-minute pricing of the cloud tier.
TRANSCRIPTION_COST_PER_MINUTE = 0.006
DIARIZATION_COST_PER_MINUTE = 0.015

# (seconds per audio minute, floor, ceiling) for the processing-time estimate
_TIME_ESTIMATES = {
    ProcessingMode.BASIC: (0.5, 120.0, 300.0),
    ProcessingMode.ADVANCED: (0.2, 60.0, 180.0),
}


def _check_duration(duration: float) -> None:
    if not math.isfinite(duration) or duration < 0:
        raise InvalidDuration(f"Duration must be a finite value >= 0, got {duration}", duration=duration)


def recommend(duration: float) -> ProcessingMode:
    _check_duration(duration)
    if duration < SHORT_RECORDING_SECONDS:
        return ProcessingMode.BASIC
    if duration > LONG_RECORDING_SECONDS:
        return ProcessingMode.ADVANCED
    # Medium recordings: let the user opt in to ADVANCED
    return ProcessingMode.BASIC


def estimate_cost(duration: float, mode: ProcessingMode = ProcessingMode.ADVANCED) -> float:
    """Estimated cost in dollars. BASIC runs locally and costs nothing."""
    _check_duration(duration)
    if mode is ProcessingMode.BASIC:
        return 0.0
    minutes = duration / 60
    return minutes * TRANSCRIPTION_COST_PER_MINUTE + minutes * DIARIZATION_COST_PER_MINUTE


def estimate_processing_time(duration: float, mode: ProcessingMode) -> float:
    """Estimated wall-clock seconds, independent of the engine's actual runtime."""
    _check_duration(duration)
    per_minute, floor, ceiling = _TIME_ESTIMATES[mode]
    return min(max(duration / 60 * per_minute, floor), ceiling)


class ModeSelector:
    """Stateless facade over the module functions, injectable into the coordinator."""

    def recommend(self, duration: float) -> ProcessingMode:
        return recommend(duration)

    def estimate_cost(self, duration: float, mode: ProcessingMode = ProcessingMode.ADVANCED) -> float:
        return estimate_cost(duration, mode)

    def estimate_processing_time(self, duration: float, mode: ProcessingMode) -> float:
        return estimate_processing_time(duration, mode)
