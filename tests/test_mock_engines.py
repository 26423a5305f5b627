"""Tests for the placeholder transcription and summarization engines."""

import asyncio
import uuid

import pytest

from scribe_pipeline.adapters.mock.milestones import run_milestones
from scribe_pipeline.adapters.mock.transcription import SENTENCE_POOL, synthesize_segments
from scribe_pipeline.domain.errors import Cancelled, EngineUnavailable, InvalidAudio
from scribe_pipeline.domain.models import ProcessingMode, SummaryTemplate, Transcript


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, fraction, label):
        self.calls.append((fraction, label))


class TestMockTranscription:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("duration,expected", [(250, 25), (1005, 100), (9.9, 0), (10, 1)])
    async def test_segment_count_drops_remainder(self, transcriber, make_asset, duration, expected):
        t = await transcriber.transcribe(make_asset(duration), ProcessingMode.BASIC, _Recorder())
        assert len(t.segments) == expected

    @pytest.mark.asyncio
    async def test_fixed_ten_second_segments(self, transcriber, make_asset):
        t = await transcriber.transcribe(make_asset(35), ProcessingMode.BASIC, _Recorder())
        assert [(s.start, s.end) for s in t.segments] == [(0, 10), (10, 20), (20, 30)]
        assert all(s.confidence == 0.9 for s in t.segments)

    @pytest.mark.asyncio
    async def test_text_cycles_through_pool(self, transcriber, make_asset):
        t = await transcriber.transcribe(make_asset(250), ProcessingMode.BASIC, _Recorder())
        for i, seg in enumerate(t.segments):
            assert seg.text == SENTENCE_POOL[i % 10]

    @pytest.mark.asyncio
    async def test_advanced_rotates_speakers(self, transcriber, make_asset):
        t = await transcriber.transcribe(make_asset(100), ProcessingMode.ADVANCED, _Recorder())
        for i, seg in enumerate(t.segments):
            assert seg.speaker == f"Speaker {i % 3 + 1}"

    @pytest.mark.asyncio
    async def test_basic_has_no_speakers(self, transcriber, make_asset):
        t = await transcriber.transcribe(make_asset(100), ProcessingMode.BASIC, _Recorder())
        assert all(seg.speaker is None for seg in t.segments)
        assert t.speaker_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("mode,confidence", [(ProcessingMode.BASIC, 0.85), (ProcessingMode.ADVANCED, 0.95)])
    @pytest.mark.parametrize("duration", [15, 600, 3600])
    async def test_confidence_depends_only_on_mode(self, transcriber, make_asset, mode, confidence, duration):
        t = await transcriber.transcribe(make_asset(duration), mode, _Recorder())
        assert t.confidence == confidence
        assert t.language == "en"
        assert t.mode is mode

    @pytest.mark.asyncio
    async def test_basic_milestones(self, transcriber, make_asset):
        rec = _Recorder()
        await transcriber.transcribe(make_asset(60), ProcessingMode.BASIC, rec)
        assert [f for f, _ in rec.calls] == [0.2, 0.4, 0.6, 0.8, 1.0]
        assert rec.calls[-1][1] == "Transcription complete!"

    @pytest.mark.asyncio
    async def test_advanced_milestones(self, transcriber, make_asset):
        rec = _Recorder()
        await transcriber.transcribe(make_asset(60), ProcessingMode.ADVANCED, rec)
        assert [f for f, _ in rec.calls] == [0.1, 0.3, 0.5, 0.7, 0.9, 1.0]
        assert rec.calls[0][1] == "Uploading audio file..."

    @pytest.mark.asyncio
    async def test_unavailable_engine(self, transcriber, make_asset):
        transcriber.set_available(False)
        rec = _Recorder()
        with pytest.raises(EngineUnavailable):
            await transcriber.transcribe(make_asset(60), ProcessingMode.BASIC, rec)
        assert rec.calls == []

    @pytest.mark.asyncio
    async def test_zero_duration_is_invalid_audio(self, transcriber, make_asset):
        with pytest.raises(InvalidAudio):
            await transcriber.transcribe(make_asset(0), ProcessingMode.BASIC, _Recorder())

    @pytest.mark.asyncio
    async def test_cancel_between_milestones(self, transcriber, make_asset):
        cancel = asyncio.Event()
        rec = _Recorder()

        def on_progress(fraction, label):
            rec(fraction, label)
            if fraction >= 0.4:
                cancel.set()

        with pytest.raises(Cancelled):
            await transcriber.transcribe(make_asset(60), ProcessingMode.BASIC, on_progress, cancel)
        assert [f for f, _ in rec.calls] == [0.2, 0.4]


class TestMockSummarization:
    @pytest.mark.asyncio
    async def test_summary_belongs_to_transcript(self, transcriber, summarizer, make_asset):
        asset = make_asset(120)
        t = await transcriber.transcribe(asset, ProcessingMode.BASIC, _Recorder())
        s = await summarizer.summarize(t, SummaryTemplate.ONE_ON_ONE, _Recorder())
        assert s.asset_id == asset.id
        assert s.transcript_id == t.id
        assert s.template is SummaryTemplate.ONE_ON_ONE
        assert s.mode is ProcessingMode.BASIC

    @pytest.mark.asyncio
    async def test_milestones(self, transcriber, summarizer, make_asset):
        t = await transcriber.transcribe(make_asset(60), ProcessingMode.BASIC, _Recorder())
        rec = _Recorder()
        await summarizer.summarize(t, SummaryTemplate.CUSTOM, rec)
        assert [f for f, _ in rec.calls] == [0.2, 0.4, 0.6, 0.8, 1.0]
        assert rec.calls[-1][1] == "Summary complete!"

    @pytest.mark.asyncio
    async def test_one_on_one_sections(self, transcriber, summarizer, make_asset):
        t = await transcriber.transcribe(make_asset(120), ProcessingMode.BASIC, _Recorder())
        s = await summarizer.summarize(t, SummaryTemplate.ONE_ON_ONE, _Recorder())
        assert s.content.section_titles == [
            "Meeting Overview", "Key Discussion Points", "Action Items", "Follow-up Required",
        ]
        assert len(s.content.key_points) == 5
        assert len(s.content.action_items) == 4

    @pytest.mark.asyncio
    async def test_already_cancelled(self, transcriber, summarizer, make_asset):
        t = await transcriber.transcribe(make_asset(60), ProcessingMode.BASIC, _Recorder())
        cancel = asyncio.Event()
        cancel.set()
        rec = _Recorder()
        with pytest.raises(Cancelled):
            await summarizer.summarize(t, SummaryTemplate.CUSTOM, rec, cancel)
        assert rec.calls == []

    def test_generation_estimate(self, summarizer):
        t = Transcript(
            asset_id=uuid.uuid4(), mode=ProcessingMode.BASIC,
            segments=synthesize_segments(120, ProcessingMode.BASIC),
        )
        assert summarizer.estimate_generation_time(t, SummaryTemplate.TEAM_MEETING) == pytest.approx(30 + 20 + 25)


class TestRunMilestones:
    @pytest.mark.asyncio
    async def test_rejects_non_increasing(self):
        with pytest.raises(ValueError):
            await run_milestones([(0.5, "a"), (0.5, "b")], _Recorder(), 0, stage="test")
