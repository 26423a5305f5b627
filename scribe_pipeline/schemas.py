"""Persistence records for the external asset store.

Enums serialize as their lowercase snake_case tags, ids as UUID strings and
timestamps as ISO-8601. Use ``model_dump(mode="json")`` to get the wire form.
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from scribe_pipeline.domain.models import (
    ActionStatus, AudioFormat, Priority, ProcessingMode, ProcessingStatus,
    SummaryTemplate,
)


class TranscriptSegmentRecord(BaseModel):
    """A segment of a stored transcript"""
    id: UUID
    start_time: float
    end_time: float
    text: str
    speaker: Optional[str] = None
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)


class TranscriptRecord(BaseModel):
    id: UUID
    audio_file_id: UUID
    created_at: datetime
    processing_mode: ProcessingMode
    segments: List[TranscriptSegmentRecord] = []
    confidence: float = Field(ge=0.0, le=1.0)
    language: str = "en"


class ActionItemRecord(BaseModel):
    id: UUID
    description: str
    assignee: Optional[str] = None
    due_date: Optional[date] = None
    priority: Priority = Priority.MEDIUM
    status: ActionStatus = ActionStatus.PENDING


class SummarySectionRecord(BaseModel):
    id: UUID
    title: str
    content: str
    order: int


class SummaryContentRecord(BaseModel):
    title: str
    sections: List[SummarySectionRecord] = []
    key_points: List[str] = []
    action_items: List[ActionItemRecord] = []
    participants: List[str] = []
    duration: float = 0.0
    date: datetime


class SummaryRecord(BaseModel):
    id: UUID
    transcript_id: UUID
    audio_file_id: UUID
    created_at: datetime
    template_type: SummaryTemplate
    content: SummaryContentRecord
    processing_mode: ProcessingMode


class AudioAssetRecord(BaseModel):
    """A stored audio asset with its derived artifacts"""
    id: UUID
    file_name: str
    file_path: Optional[str] = None
    duration: float = Field(ge=0.0)
    file_size: int = Field(ge=0)
    recording_date: datetime
    audio_format: AudioFormat
    processing_status: ProcessingStatus = ProcessingStatus.PENDING
    transcript: Optional[TranscriptRecord] = None
    summary: Optional[SummaryRecord] = None


class AssetStoreDocument(BaseModel):
    """Top-level layout of the JSON asset store file"""
    version: int = 1
    assets: List[AudioAssetRecord] = []
