"""Tests for summary content derivation."""

import uuid
from datetime import datetime

from scribe_pipeline.adapters.mock.transcription import SENTENCE_POOL, synthesize_segments
from scribe_pipeline.domain.models import (
    ActionStatus, Priority, ProcessingMode, SummaryTemplate, Transcript,
)
from scribe_pipeline.post_processing import (
    build_sections, build_summary_content, build_title, extract_action_items,
    extract_key_points, extract_participants, format_medium_date,
)


def _transcript(duration: float, mode: ProcessingMode) -> Transcript:
    return Transcript(
        asset_id=uuid.uuid4(),
        mode=mode,
        segments=synthesize_segments(duration, mode),
        confidence=0.9,
    )


class TestKeyPoints:
    def test_first_five_sentences_in_order(self):
        points = extract_key_points(_transcript(120, ProcessingMode.BASIC))
        assert len(points) == 5
        assert points == [s.rstrip(".") for s in SENTENCE_POOL[:5]]

    def test_matches_literal_split(self):
        t = _transcript(30, ProcessingMode.BASIC)
        expected = [s.strip() for s in t.full_text.split(". ")][:5]
        assert extract_key_points(t) == expected

    def test_fewer_sentences_than_limit(self):
        t = _transcript(20, ProcessingMode.BASIC)
        points = extract_key_points(t)
        assert len(points) == 2
        # The final sentence keeps its period; only ". " separators are consumed
        assert points[-1] == SENTENCE_POOL[1]

    def test_text_without_delimiter(self):
        t = _transcript(10, ProcessingMode.BASIC)
        assert extract_key_points(t) == [SENTENCE_POOL[0]]


class TestActionItemsAndParticipants:
    def test_four_default_action_items(self):
        items = extract_action_items(_transcript(60, ProcessingMode.BASIC))
        assert [i.description for i in items] == [
            "Follow up on discussed topics",
            "Schedule next meeting",
            "Review action items",
            "Send meeting notes to participants",
        ]
        assert all(i.priority is Priority.MEDIUM for i in items)
        assert all(i.status is ActionStatus.PENDING for i in items)
        assert all(i.assignee is None for i in items)

    def test_basic_participants_are_placeholders(self):
        assert extract_participants(_transcript(600, ProcessingMode.BASIC)) == ["Participant 1", "Participant 2"]

    def test_advanced_participants_are_sorted_speakers(self):
        assert extract_participants(_transcript(600, ProcessingMode.ADVANCED)) == [
            "Speaker 1", "Speaker 2", "Speaker 3",
        ]

    def test_advanced_with_few_segments(self):
        assert extract_participants(_transcript(20, ProcessingMode.ADVANCED)) == ["Speaker 1", "Speaker 2"]


class TestSections:
    def test_orders_are_one_based_and_contiguous(self):
        sections = build_sections(SummaryTemplate.TEAM_MEETING, ["a", "b"], [])
        assert [s.order for s in sections] == [1, 2, 3, 4, 5]

    def test_discussion_points_use_bullets(self):
        sections = build_sections(SummaryTemplate.ONE_ON_ONE, ["a", "b", "c"], [])
        assert sections[1].content == "a\n• b\n• c"

    def test_team_action_items_have_owner_placeholder(self):
        items = extract_action_items(_transcript(10, ProcessingMode.BASIC))
        sections = build_sections(SummaryTemplate.TEAM_MEETING, [], items)
        assert sections[3].content.splitlines()[0] == "• Follow up on discussed topics - [Owner TBD]"

    def test_custom_key_points_joined_by_newline(self):
        sections = build_sections(SummaryTemplate.CUSTOM, ["a", "b"], [])
        assert sections[1].title == "Key Points"
        assert sections[1].content == "a\nb"


class TestTitle:
    def test_medium_date(self):
        assert format_medium_date(datetime(2026, 10, 8)) == "Oct 8, 2026"

    def test_title_uses_prefix_and_date(self):
        when = datetime(2026, 3, 14)
        assert build_title(SummaryTemplate.ONE_ON_ONE, when) == "1-on-1 Meeting - Mar 14, 2026"
        assert build_title(SummaryTemplate.CLIENT_CALL, when) == "Client Call Summary - Mar 14, 2026"

    def test_content_carries_transcript_duration(self):
        t = _transcript(1005, ProcessingMode.ADVANCED)
        content = build_summary_content(t, SummaryTemplate.BRAINSTORMING, now=datetime(2026, 1, 2))
        assert content.duration == 1000
        assert content.title == "Brainstorming Session - Jan 2, 2026"
        assert len(content.sections) == 5
