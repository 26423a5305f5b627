"""Deterministic placeholder engines for transcription and summarization."""

from .summarization import MockSummarizationAdapter
from .transcription import MockTranscriptionAdapter

__all__ = ["MockTranscriptionAdapter", "MockSummarizationAdapter"]
