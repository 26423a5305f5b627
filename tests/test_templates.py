"""Tests for the template catalogue and section layout."""

import pytest

from scribe_pipeline.domain import templates
from scribe_pipeline.domain.errors import UnknownTemplate
from scribe_pipeline.domain.models import SummaryTemplate

EXPECTED_SECTIONS = {
    SummaryTemplate.ONE_ON_ONE: [
        "Meeting Overview", "Key Discussion Points", "Action Items", "Follow-up Required",
    ],
    SummaryTemplate.TEAM_MEETING: [
        "Meeting Agenda", "Topics Covered", "Decisions Made", "Action Items & Owners", "Next Steps",
    ],
    SummaryTemplate.INTERVIEW: [
        "Candidate Background", "Key Questions & Answers", "Technical Assessment", "Recommendation",
    ],
    SummaryTemplate.BRAINSTORMING: [
        "Session Objective", "Ideas Generated", "Top Concepts", "Implementation Feasibility", "Next Actions",
    ],
    SummaryTemplate.CLIENT_CALL: [
        "Call Purpose", "Client Needs", "Solutions Discussed", "Next Steps",
    ],
    SummaryTemplate.CUSTOM: ["Custom Summary", "Key Points", "Notes"],
}


class TestSectionTitles:
    @pytest.mark.parametrize("template", list(SummaryTemplate))
    def test_every_template_has_a_layout(self, template):
        assert templates.section_titles(template) == EXPECTED_SECTIONS[template]

    @pytest.mark.parametrize("template", list(SummaryTemplate))
    def test_every_template_has_names(self, template):
        assert templates.display_name(template)
        assert templates.title_prefix(template)
        assert templates.description(template)


class TestResolveTemplate:
    def test_by_tag(self):
        assert templates.resolve_template("team_meeting") is SummaryTemplate.TEAM_MEETING

    def test_by_name(self):
        assert templates.resolve_template("CLIENT_CALL") is SummaryTemplate.CLIENT_CALL

    def test_member_passthrough(self):
        assert templates.resolve_template(SummaryTemplate.CUSTOM) is SummaryTemplate.CUSTOM

    @pytest.mark.parametrize("value", ["standup", "", None, 3])
    def test_unknown(self, value):
        with pytest.raises(UnknownTemplate) as exc:
            templates.resolve_template(value)
        assert exc.value.error_code == "UNKNOWN_TEMPLATE"


class TestGenerationTime:
    @pytest.mark.parametrize("template,extra", [
        (SummaryTemplate.ONE_ON_ONE, 15),
        (SummaryTemplate.TEAM_MEETING, 25),
        (SummaryTemplate.INTERVIEW, 30),
        (SummaryTemplate.BRAINSTORMING, 35),
        (SummaryTemplate.CLIENT_CALL, 20),
        (SummaryTemplate.CUSTOM, 40),
    ])
    def test_base_plus_length_plus_template(self, template, extra):
        # 6 minutes of transcript -> 60s length cost
        assert templates.estimate_generation_time(360, template) == pytest.approx(30 + 60 + extra)

    def test_empty_transcript(self):
        assert templates.estimate_generation_time(0, SummaryTemplate.ONE_ON_ONE) == pytest.approx(45)
