"""Post-processing helpers that derive summary content from a transcript.

Functions for key-point extraction, canned action items, participant
detection, per-template section bodies and summary titles.
"""

import logging
from datetime import datetime
from typing import List, Optional

from scribe_pipeline.domain import templates
from scribe_pipeline.domain.errors import UnknownTemplate
from scribe_pipeline.domain.models import (
    ActionItem, ProcessingMode, SummaryContent, SummarySection,
    SummaryTemplate, Transcript,
)

logger = logging.getLogger(__name__)

KEY_POINT_LIMIT = 5
SENTENCE_DELIMITER = ". "
BULLET = "• "

DEFAULT_ACTION_ITEMS = [
    "Follow up on discussed topics",
    "Schedule next meeting",
    "Review action items",
    "Send meeting notes to participants",
]

PLACEHOLDER_PARTICIPANTS = ["Participant 1", "Participant 2"]


def extract_key_points(transcript: Transcript, limit: int = KEY_POINT_LIMIT) -> List[str]:
    """Split the transcript into sentences and keep the first few.

    Splitting is on the literal ". " delimiter, so the trailing sentence of
    each run keeps its final period.

    Args:
        transcript: Source transcript.
        limit: Maximum number of key points.

    Returns:
        Up to ``limit`` trimmed sentences in transcript order.
    """
    sentences = transcript.full_text.split(SENTENCE_DELIMITER)
    return [s.strip() for s in sentences[:limit]]


def extract_action_items(transcript: Transcript) -> List[ActionItem]:
    """Placeholder action items; a real engine would derive them from the text."""
    return [ActionItem(description=text) for text in DEFAULT_ACTION_ITEMS]


def extract_participants(transcript: Transcript) -> List[str]:
    """Detected speakers for ADVANCED transcripts, placeholders otherwise."""
    if transcript.mode is ProcessingMode.ADVANCED:
        return transcript.speakers
    return list(PLACEHOLDER_PARTICIPANTS)


def format_discussion_points(key_points: List[str]) -> str:
    return ("\n" + BULLET).join(key_points)


def format_action_items(items: List[ActionItem], owner_placeholder: Optional[str] = None) -> str:
    lines = []
    for item in items:
        line = f"{BULLET}{item.description}"
        if owner_placeholder:
            line += f" - {owner_placeholder}"
        lines.append(line)
    return "\n".join(lines)


def section_bodies(
    template: SummaryTemplate,
    key_points: List[str],
    action_items: List[ActionItem],
) -> List[str]:
    """Section contents for a template, aligned with templates.section_titles()."""
    if template is SummaryTemplate.ONE_ON_ONE:
        return [
            "One-on-one meeting between participants",
            format_discussion_points(key_points),
            format_action_items(action_items),
            "Schedule next meeting and track action items",
        ]
    elif template is SummaryTemplate.TEAM_MEETING:
        return [
            "Team standup and project updates",
            format_discussion_points(key_points),
            "Decisions were made regarding the discussed topics. Review transcript for specific details.",
            format_action_items(action_items, owner_placeholder="[Owner TBD]"),
            "Continue with action items and prepare for next meeting",
        ]
    elif template is SummaryTemplate.INTERVIEW:
        return [
            "Interview for position",
            "Interview questions and candidate responses were discussed. Review transcript for specific details.",
            "Technical assessment and evaluation criteria were discussed during the interview.",
            "Evaluate candidate based on interview performance",
        ]
    elif template is SummaryTemplate.BRAINSTORMING:
        return [
            "Creative brainstorming session",
            "Various creative ideas and concepts were generated during the brainstorming session.",
            "Key concepts and innovative approaches were identified and prioritized.",
            "Evaluate practical implementation of ideas",
            "Develop selected ideas and create action plan",
        ]
    elif template is SummaryTemplate.CLIENT_CALL:
        return [
            "Client interaction and discussion",
            "Client requirements and specific needs were discussed and documented.",
            "Potential solutions and approaches were explored to address client needs.",
            "Follow up on discussed solutions and client requirements",
        ]
    elif template is SummaryTemplate.CUSTOM:
        return [
            "User-defined summary structure",
            "\n".join(key_points),
            "Additional notes and observations",
        ]
    raise UnknownTemplate(f"No section bodies for template {template!r}")


def build_sections(
    template: SummaryTemplate,
    key_points: List[str],
    action_items: List[ActionItem],
) -> List[SummarySection]:
    titles = templates.section_titles(template)
    bodies = section_bodies(template, key_points, action_items)
    if len(titles) != len(bodies):
        raise UnknownTemplate(
            f"Template {template.value} has {len(titles)} titles but {len(bodies)} bodies",
            template=template.value,
        )
    return [
        SummarySection(title=title, content=body, order=i + 1)
        for i, (title, body) in enumerate(zip(titles, bodies))
    ]


def format_medium_date(when: datetime) -> str:
    """Medium-style date, e.g. "Oct 18, 2026"."""
    return f"{when.strftime('%b')} {when.day}, {when.year}"


def build_title(template: SummaryTemplate, when: datetime) -> str:
    return f"{templates.title_prefix(template)} - {format_medium_date(when)}"


def build_summary_content(
    transcript: Transcript,
    template: SummaryTemplate,
    now: Optional[datetime] = None,
) -> SummaryContent:
    """Assemble the full summary body for a transcript and template."""
    now = now or datetime.now()
    key_points = extract_key_points(transcript)
    action_items = extract_action_items(transcript)
    participants = extract_participants(transcript)
    sections = build_sections(template, key_points, action_items)

    logger.debug(
        f"Built {len(sections)} sections, {len(key_points)} key points, "
        f"{len(participants)} participants for template {template.value}"
    )
    return SummaryContent(
        title=build_title(template, now),
        sections=sections,
        key_points=key_points,
        action_items=action_items,
        participants=participants,
        duration=transcript.duration,
        date=now,
    )
