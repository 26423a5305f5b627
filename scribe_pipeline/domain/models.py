"""Framework-agnostic domain models for the scribe pipeline.

The coordinator and engines work exclusively with these types. The pydantic
records in schemas.py are the persistence DTOs, with mappers at the boundary.
"""

import math
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional

from scribe_pipeline.domain.errors import InvalidStatusTransition


class ProcessingMode(Enum):
    """Processing tier: local-equivalent or cloud-equivalent."""
    BASIC = "basic"
    ADVANCED = "advanced"

    @property
    def display_name(self) -> str:
        return "Basic (Local)" if self is ProcessingMode.BASIC else "Advanced (Cloud)"

    @property
    def cost_label(self) -> str:
        return "Free" if self is ProcessingMode.BASIC else "Paid"


class ProcessingStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class AudioFormat(Enum):
    MP3 = "mp3"
    WAV = "wav"
    M4A = "m4a"
    AAC = "aac"


class Priority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ActionStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class SummaryTemplate(Enum):
    """Closed set of summary templates. Section layouts live in domain.templates."""
    ONE_ON_ONE = "one_on_one"
    TEAM_MEETING = "team_meeting"
    INTERVIEW = "interview"
    BRAINSTORMING = "brainstorming"
    CLIENT_CALL = "client_call"
    CUSTOM = "custom"


class PipelineStage(Enum):
    TRANSCRIPTION = "transcription"
    SUMMARIZATION = "summarization"


class RunState(Enum):
    """Coordinator state machine for a single pipeline run."""
    IDLE = "idle"
    TRANSCRIBING = "transcribing"
    SUMMARIZING = "summarizing"
    COMPLETED = "completed"
    FAILED = "failed"


# Allowed status moves. Terminal states may only re-enter PROCESSING,
# which starts a fresh run that replaces the previous results.
_STATUS_TRANSITIONS = {
    ProcessingStatus.PENDING: {ProcessingStatus.PROCESSING},
    ProcessingStatus.PROCESSING: {ProcessingStatus.COMPLETED, ProcessingStatus.FAILED},
    ProcessingStatus.COMPLETED: {ProcessingStatus.PROCESSING},
    ProcessingStatus.FAILED: {ProcessingStatus.PROCESSING},
}


def _new_id() -> uuid.UUID:
    return uuid.uuid4()


def format_clock(seconds: float) -> str:
    """Format seconds as MM:SS."""
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"


@dataclass(frozen=True)
class TranscriptSegment:
    """A single transcribed speech segment with timing and optional speaker."""
    start: float
    end: float
    text: str
    speaker: Optional[str] = None
    confidence: float = 1.0
    id: uuid.UUID = field(default_factory=_new_id)

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"Segment end ({self.end}) must be after start ({self.start})")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Segment confidence out of range: {self.confidence}")

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Transcript:
    """Ordered, non-overlapping segments produced for one asset."""
    asset_id: uuid.UUID
    mode: ProcessingMode
    segments: tuple[TranscriptSegment, ...] = ()
    confidence: float = 1.0
    language: str = "en"
    id: uuid.UUID = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(self.segments))
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Transcript confidence out of range: {self.confidence}")
        for prev, seg in zip(self.segments, self.segments[1:]):
            if seg.start < prev.end:
                raise ValueError(
                    f"Segments overlap or are out of order at {prev.end:.2f}s / {seg.start:.2f}s"
                )

    @property
    def full_text(self) -> str:
        return " ".join(seg.text for seg in self.segments)

    @property
    def duration(self) -> float:
        return self.segments[-1].end if self.segments else 0.0

    @property
    def speakers(self) -> list[str]:
        """Distinct speaker labels, sorted lexically."""
        return sorted({seg.speaker for seg in self.segments if seg.speaker is not None})

    @property
    def speaker_count(self) -> int:
        return len(self.speakers)

    @property
    def formatted_duration(self) -> str:
        return format_clock(self.duration)


@dataclass(frozen=True)
class ActionItem:
    description: str
    assignee: Optional[str] = None
    due_date: Optional[date] = None
    priority: Priority = Priority.MEDIUM
    status: ActionStatus = ActionStatus.PENDING
    id: uuid.UUID = field(default_factory=_new_id)


@dataclass(frozen=True)
class SummarySection:
    title: str
    content: str
    order: int
    id: uuid.UUID = field(default_factory=_new_id)


@dataclass(frozen=True)
class SummaryContent:
    """Template-structured body of a summary. Sections are kept in display order."""
    title: str
    sections: tuple[SummarySection, ...] = ()
    key_points: tuple[str, ...] = ()
    action_items: tuple[ActionItem, ...] = ()
    participants: tuple[str, ...] = ()
    duration: float = 0.0
    date: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        orders = [s.order for s in self.sections]
        if len(orders) != len(set(orders)):
            raise ValueError(f"Duplicate section order in summary {self.title!r}: {orders}")
        # sorted() is stable, so insertion order breaks ties
        object.__setattr__(self, "sections", tuple(sorted(self.sections, key=lambda s: s.order)))
        object.__setattr__(self, "key_points", tuple(self.key_points))
        object.__setattr__(self, "action_items", tuple(self.action_items))
        object.__setattr__(self, "participants", tuple(self.participants))

    @property
    def section_titles(self) -> list[str]:
        return [s.title for s in self.sections]

    @property
    def formatted_duration(self) -> str:
        return format_clock(self.duration)


@dataclass(frozen=True)
class Summary:
    transcript_id: uuid.UUID
    asset_id: uuid.UUID
    template: SummaryTemplate
    content: SummaryContent
    mode: ProcessingMode
    id: uuid.UUID = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def for_transcript(
        cls,
        transcript: Transcript,
        template: SummaryTemplate,
        content: SummaryContent,
    ) -> "Summary":
        """Build a summary whose ownership ids match the transcript it was made from."""
        return cls(
            transcript_id=transcript.id,
            asset_id=transcript.asset_id,
            template=template,
            content=content,
            mode=transcript.mode,
        )


@dataclass
class AudioAsset:
    """A recorded or imported audio file and its derived artifacts.

    status, transcript and summary are written only by the pipeline coordinator.
    """
    file_name: str
    duration: float
    file_size: int
    audio_format: AudioFormat
    id: uuid.UUID = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)
    file_path: Optional[str] = None
    status: ProcessingStatus = ProcessingStatus.PENDING
    transcript: Optional[Transcript] = None
    summary: Optional[Summary] = None

    def __post_init__(self):
        if not math.isfinite(self.duration) or self.duration < 0:
            raise ValueError(f"Asset duration must be a finite value >= 0, got {self.duration}")
        if self.file_size < 0:
            raise ValueError(f"Asset size must be >= 0, got {self.file_size}")

    def transition_to(self, status: ProcessingStatus) -> None:
        if status not in _STATUS_TRANSITIONS[self.status]:
            raise InvalidStatusTransition(
                f"Cannot move asset {self.id} from {self.status.value} to {status.value}",
                asset_id=str(self.id),
                current=self.status.value,
                requested=status.value,
            )
        self.status = status

    def attach_transcript(self, transcript: Transcript) -> None:
        if transcript.asset_id != self.id:
            raise ValueError(f"Transcript {transcript.id} belongs to asset {transcript.asset_id}")
        self.transcript = transcript
        # a new transcript invalidates whatever summary was derived from the old one
        self.summary = None

    def attach_summary(self, summary: Summary) -> None:
        if self.transcript is None or summary.transcript_id != self.transcript.id:
            raise ValueError(f"Summary {summary.id} does not match the asset's transcript")
        if summary.asset_id != self.id:
            raise ValueError(f"Summary {summary.id} belongs to asset {summary.asset_id}")
        self.summary = summary

    def clear_results(self) -> None:
        self.transcript = None
        self.summary = None

    @property
    def formatted_duration(self) -> str:
        return format_clock(self.duration)


@dataclass(frozen=True)
class ProgressEvent:
    """One (fraction, label) milestone relayed from an engine."""
    asset_id: uuid.UUID
    stage: PipelineStage
    fraction: float
    label: str
