"""Domain <-> record mappers.

Converts between the domain dataclasses and the pydantic persistence records.
The stored schema stays stable while domain types evolve.
"""

from scribe_pipeline.domain.models import (
    ActionItem, AudioAsset, Summary, SummaryContent, SummarySection,
    Transcript, TranscriptSegment,
)
from scribe_pipeline.schemas import (
    ActionItemRecord, AudioAssetRecord, SummaryContentRecord, SummaryRecord,
    SummarySectionRecord, TranscriptRecord, TranscriptSegmentRecord,
)


def segment_to_record(seg: TranscriptSegment) -> TranscriptSegmentRecord:
    return TranscriptSegmentRecord(
        id=seg.id,
        start_time=seg.start,
        end_time=seg.end,
        text=seg.text,
        speaker=seg.speaker,
        confidence=seg.confidence,
    )


def record_to_segment(rec: TranscriptSegmentRecord) -> TranscriptSegment:
    return TranscriptSegment(
        start=rec.start_time,
        end=rec.end_time,
        text=rec.text,
        speaker=rec.speaker,
        confidence=rec.confidence,
        id=rec.id,
    )


def transcript_to_record(transcript: Transcript) -> TranscriptRecord:
    return TranscriptRecord(
        id=transcript.id,
        audio_file_id=transcript.asset_id,
        created_at=transcript.created_at,
        processing_mode=transcript.mode,
        segments=[segment_to_record(s) for s in transcript.segments],
        confidence=transcript.confidence,
        language=transcript.language,
    )


def record_to_transcript(rec: TranscriptRecord) -> Transcript:
    """Rebuild a transcript; segment ordering is re-validated by the domain type."""
    return Transcript(
        asset_id=rec.audio_file_id,
        mode=rec.processing_mode,
        segments=[record_to_segment(s) for s in rec.segments],
        confidence=rec.confidence,
        language=rec.language,
        id=rec.id,
        created_at=rec.created_at,
    )


def action_item_to_record(item: ActionItem) -> ActionItemRecord:
    return ActionItemRecord(
        id=item.id,
        description=item.description,
        assignee=item.assignee,
        due_date=item.due_date,
        priority=item.priority,
        status=item.status,
    )


def record_to_action_item(rec: ActionItemRecord) -> ActionItem:
    return ActionItem(
        description=rec.description,
        assignee=rec.assignee,
        due_date=rec.due_date,
        priority=rec.priority,
        status=rec.status,
        id=rec.id,
    )


def summary_to_record(summary: Summary) -> SummaryRecord:
    content = summary.content
    return SummaryRecord(
        id=summary.id,
        transcript_id=summary.transcript_id,
        audio_file_id=summary.asset_id,
        created_at=summary.created_at,
        template_type=summary.template,
        processing_mode=summary.mode,
        content=SummaryContentRecord(
            title=content.title,
            sections=[
                SummarySectionRecord(id=s.id, title=s.title, content=s.content, order=s.order)
                for s in content.sections
            ],
            key_points=list(content.key_points),
            action_items=[action_item_to_record(a) for a in content.action_items],
            participants=list(content.participants),
            duration=content.duration,
            date=content.date,
        ),
    )


def record_to_summary(rec: SummaryRecord) -> Summary:
    content = rec.content
    return Summary(
        transcript_id=rec.transcript_id,
        asset_id=rec.audio_file_id,
        template=rec.template_type,
        mode=rec.processing_mode,
        id=rec.id,
        created_at=rec.created_at,
        content=SummaryContent(
            title=content.title,
            sections=[
                SummarySection(title=s.title, content=s.content, order=s.order, id=s.id)
                for s in content.sections
            ],
            key_points=content.key_points,
            action_items=[record_to_action_item(a) for a in content.action_items],
            participants=content.participants,
            duration=content.duration,
            date=content.date,
        ),
    )


def asset_to_record(asset: AudioAsset) -> AudioAssetRecord:
    return AudioAssetRecord(
        id=asset.id,
        file_name=asset.file_name,
        file_path=asset.file_path,
        duration=asset.duration,
        file_size=asset.file_size,
        recording_date=asset.created_at,
        audio_format=asset.audio_format,
        processing_status=asset.status,
        transcript=transcript_to_record(asset.transcript) if asset.transcript else None,
        summary=summary_to_record(asset.summary) if asset.summary else None,
    )


def record_to_asset(rec: AudioAssetRecord) -> AudioAsset:
    """Rebuild an asset as stored. Status is restored directly, not replayed."""
    return AudioAsset(
        file_name=rec.file_name,
        duration=rec.duration,
        file_size=rec.file_size,
        audio_format=rec.audio_format,
        id=rec.id,
        created_at=rec.recording_date,
        file_path=rec.file_path,
        status=rec.processing_status,
        transcript=record_to_transcript(rec.transcript) if rec.transcript else None,
        summary=record_to_summary(rec.summary) if rec.summary else None,
    )
