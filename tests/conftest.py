"""Shared fixtures: zero-delay engines, an event collector and an asset factory."""

import pytest

from scribe_pipeline.adapters.local.collect_progress import CollectingProgressAdapter
from scribe_pipeline.adapters.mock import MockSummarizationAdapter, MockTranscriptionAdapter
from scribe_pipeline.domain.models import AudioAsset, AudioFormat
from scribe_pipeline.use_cases.process_asset import PipelineCoordinator


@pytest.fixture
def make_asset():
    def _make(duration: float = 120.0, name: str = "meeting.m4a") -> AudioAsset:
        return AudioAsset(
            file_name=name,
            duration=duration,
            file_size=int(duration * 16_000),
            audio_format=AudioFormat.M4A,
        )
    return _make


@pytest.fixture
def transcriber():
    return MockTranscriptionAdapter(step_delay=0)


@pytest.fixture
def summarizer():
    return MockSummarizationAdapter(step_delay=0)


@pytest.fixture
def collector():
    return CollectingProgressAdapter()


@pytest.fixture
def coordinator(transcriber, summarizer, collector):
    return PipelineCoordinator(
        transcription=transcriber,
        summarization=summarizer,
        progress=collector,
    )
