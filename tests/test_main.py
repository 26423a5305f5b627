"""Tests for application wiring."""

import pytest

from scribe_pipeline.config import Config, get_config
from scribe_pipeline.domain.models import ProcessingStatus, SummaryTemplate
from scribe_pipeline.main import build_coordinator, run_demo


@pytest.fixture
def fast_config(monkeypatch, tmp_path):
    monkeypatch.setenv("TRANSCRIPTION_STEP_DELAY", "0")
    monkeypatch.setenv("SUMMARY_STEP_DELAY", "0")
    monkeypatch.setenv("DEFAULT_TEMPLATE", "brainstorming")
    monkeypatch.setenv("ASSET_STORE_PATH", str(tmp_path / "assets.json"))
    monkeypatch.delenv("DEFAULT_MODE", raising=False)
    monkeypatch.delenv("ENGINE", raising=False)
    monkeypatch.delenv("INFRA", raising=False)
    monkeypatch.delenv("STAGE_TIMEOUT", raising=False)
    monkeypatch.setattr(Config, "_instance", None)
    return get_config()


class TestWiring:
    def test_build_coordinator(self, fast_config, make_asset):
        coordinator = build_coordinator(fast_config)
        assert coordinator.estimate(make_asset(120)).cost == 0.0

    @pytest.mark.asyncio
    async def test_demo_run(self, fast_config, tmp_path):
        asset = await run_demo(fast_config, 95)
        assert asset.status is ProcessingStatus.COMPLETED
        assert len(asset.transcript.segments) == 9
        assert asset.summary.template is SummaryTemplate.BRAINSTORMING
        assert (tmp_path / "assets.json").exists()
