"""Summary template catalogue.

Every function here dispatches over the closed SummaryTemplate set with an
explicit branch per member. Adding a template means adding a branch to each;
the trailing UnknownTemplate raise catches any member that was missed.
"""

from typing import Union

from scribe_pipeline.domain.errors import UnknownTemplate
from scribe_pipeline.domain.models import SummaryTemplate

# Base seconds for generating any summary, plus seconds per transcript minute.
BASE_GENERATION_SECONDS = 30.0
GENERATION_SECONDS_PER_MINUTE = 10.0


def resolve_template(value: Union[SummaryTemplate, str]) -> SummaryTemplate:
    """Accept a template member, its tag ("team_meeting") or its name ("TEAM_MEETING")."""
    if isinstance(value, SummaryTemplate):
        return value
    if isinstance(value, str):
        try:
            return SummaryTemplate(value.strip().lower())
        except ValueError:
            pass
        try:
            return SummaryTemplate[value.strip().upper()]
        except KeyError:
            pass
    raise UnknownTemplate(f"Unknown summary template: {value!r}", template=str(value))


def display_name(template: SummaryTemplate) -> str:
    if template is SummaryTemplate.ONE_ON_ONE:
        return "1-on-1 Meeting"
    elif template is SummaryTemplate.TEAM_MEETING:
        return "Team Meeting"
    elif template is SummaryTemplate.INTERVIEW:
        return "Interview"
    elif template is SummaryTemplate.BRAINSTORMING:
        return "Brainstorming Session"
    elif template is SummaryTemplate.CLIENT_CALL:
        return "Client Call"
    elif template is SummaryTemplate.CUSTOM:
        return "Custom Template"
    raise UnknownTemplate(f"No display name for template {template!r}")


def title_prefix(template: SummaryTemplate) -> str:
    """Prefix used in generated summary titles ("<prefix> - <date>")."""
    if template is SummaryTemplate.ONE_ON_ONE:
        return "1-on-1 Meeting"
    elif template is SummaryTemplate.TEAM_MEETING:
        return "Team Meeting"
    elif template is SummaryTemplate.INTERVIEW:
        return "Interview Summary"
    elif template is SummaryTemplate.BRAINSTORMING:
        return "Brainstorming Session"
    elif template is SummaryTemplate.CLIENT_CALL:
        return "Client Call Summary"
    elif template is SummaryTemplate.CUSTOM:
        return "Meeting Summary"
    raise UnknownTemplate(f"No title prefix for template {template!r}")


def description(template: SummaryTemplate) -> str:
    if template is SummaryTemplate.ONE_ON_ONE:
        return "Perfect for individual meetings, performance reviews, and personal discussions"
    elif template is SummaryTemplate.TEAM_MEETING:
        return "Ideal for team standups, project updates, and group discussions"
    elif template is SummaryTemplate.INTERVIEW:
        return "Great for job interviews, candidate assessments, and hiring decisions"
    elif template is SummaryTemplate.BRAINSTORMING:
        return "Best for creative sessions, idea generation, and innovation meetings"
    elif template is SummaryTemplate.CLIENT_CALL:
        return "Perfect for client meetings, sales calls, and customer interactions"
    elif template is SummaryTemplate.CUSTOM:
        return "Create your own summary structure with custom sections"
    raise UnknownTemplate(f"No description for template {template!r}")


def section_titles(template: SummaryTemplate) -> list[str]:
    """Ordered section titles; position i becomes section order i + 1."""
    if template is SummaryTemplate.ONE_ON_ONE:
        return ["Meeting Overview", "Key Discussion Points", "Action Items", "Follow-up Required"]
    elif template is SummaryTemplate.TEAM_MEETING:
        return ["Meeting Agenda", "Topics Covered", "Decisions Made", "Action Items & Owners", "Next Steps"]
    elif template is SummaryTemplate.INTERVIEW:
        return ["Candidate Background", "Key Questions & Answers", "Technical Assessment", "Recommendation"]
    elif template is SummaryTemplate.BRAINSTORMING:
        return [
            "Session Objective", "Ideas Generated", "Top Concepts",
            "Implementation Feasibility", "Next Actions",
        ]
    elif template is SummaryTemplate.CLIENT_CALL:
        return ["Call Purpose", "Client Needs", "Solutions Discussed", "Next Steps"]
    elif template is SummaryTemplate.CUSTOM:
        return ["Custom Summary", "Key Points", "Notes"]
    raise UnknownTemplate(f"No sections defined for template {template!r}")


def complexity_seconds(template: SummaryTemplate) -> float:
    if template is SummaryTemplate.ONE_ON_ONE:
        return 15.0
    elif template is SummaryTemplate.TEAM_MEETING:
        return 25.0
    elif template is SummaryTemplate.INTERVIEW:
        return 30.0
    elif template is SummaryTemplate.BRAINSTORMING:
        return 35.0
    elif template is SummaryTemplate.CLIENT_CALL:
        return 20.0
    elif template is SummaryTemplate.CUSTOM:
        return 40.0
    raise UnknownTemplate(f"No complexity defined for template {template!r}")


def estimate_generation_time(transcript_duration: float, template: SummaryTemplate) -> float:
    """Seconds to generate a summary: base + per-minute length cost + template complexity."""
    minutes = transcript_duration / 60
    return BASE_GENERATION_SECONDS + minutes * GENERATION_SECONDS_PER_MINUTE + complexity_seconds(template)
