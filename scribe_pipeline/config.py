import os
import logging
from typing import Dict, Optional, Any

from dotenv import load_dotenv

from scribe_pipeline.domain.models import ProcessingMode, SummaryTemplate
from scribe_pipeline.domain.templates import resolve_template

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_TRANSCRIPTION_STEP_DELAY = 0.5
DEFAULT_SUMMARY_STEP_DELAY = 0.3
DEFAULT_TEMPLATE = SummaryTemplate.ONE_ON_ONE.value
DEFAULT_LANGUAGE = "en"


def _optional_float(name: str) -> Optional[float]:
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


class Config:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super(Config, cls).__new__(cls)
            instance._initialize()
            cls._instance = instance
        return cls._instance

    def _initialize(self):
        self.debug = os.environ.get("DEBUG", "0") == "1"
        self.engine = os.environ.get("ENGINE", "mock").lower()
        self.infra = os.environ.get("INFRA", "local").lower()
        self.transcription_step_delay = float(
            os.environ.get("TRANSCRIPTION_STEP_DELAY", DEFAULT_TRANSCRIPTION_STEP_DELAY)
        )
        self.summary_step_delay = float(os.environ.get("SUMMARY_STEP_DELAY", DEFAULT_SUMMARY_STEP_DELAY))
        self.stage_timeout = _optional_float("STAGE_TIMEOUT")
        self.language = os.environ.get("LANGUAGE", DEFAULT_LANGUAGE)
        self.asset_store_path = os.environ.get("ASSET_STORE_PATH", "").strip() or None
        self.default_template = resolve_template(os.environ.get("DEFAULT_TEMPLATE", DEFAULT_TEMPLATE))

        # Unset means "let the mode selector recommend per asset"
        mode_env = os.environ.get("DEFAULT_MODE", "").strip().lower()
        self.default_mode = ProcessingMode(mode_env) if mode_env else None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "debug": self.debug,
            "engine": self.engine,
            "infra": self.infra,
            "transcription_step_delay": self.transcription_step_delay,
            "summary_step_delay": self.summary_step_delay,
            "stage_timeout": self.stage_timeout,
            "language": self.language,
            "default_template": self.default_template.value,
            "default_mode": self.default_mode.value if self.default_mode else None,
            "has_asset_store": self.asset_store_path is not None,
        }


def get_config() -> Config:
    return Config()


def create_engines(cfg: Config):
    """Create transcription and summarization adapters based on ENGINE env var.

    Uses lazy imports so unused engines are never loaded.
    """
    engine = cfg.engine

    if engine == "mock":
        from scribe_pipeline.adapters.mock import MockSummarizationAdapter, MockTranscriptionAdapter
        transcription = MockTranscriptionAdapter(step_delay=cfg.transcription_step_delay, language=cfg.language)
        summarization = MockSummarizationAdapter(step_delay=cfg.summary_step_delay)
    else:
        raise ValueError(f"Unknown ENGINE: {engine!r}. Valid options: mock")

    logger.info(
        f"Engines: engine={engine}, transcription={type(transcription).__name__}, "
        f"summarization={type(summarization).__name__}"
    )
    return transcription, summarization


def create_infra_adapters(cfg: Config):
    """Create infrastructure adapters based on INFRA env var."""
    from scribe_pipeline.adapters.local.json_asset_store import JsonFileAssetStore
    from scribe_pipeline.adapters.local.log_progress import LogProgressAdapter

    infra = cfg.infra

    if infra == "local":
        adapters = {
            "progress": LogProgressAdapter(),
            "asset_store": JsonFileAssetStore(cfg.asset_store_path) if cfg.asset_store_path else None,
        }
    else:
        raise ValueError(f"Unknown INFRA: {infra!r}. Valid options: local")

    names = ", ".join(type(v).__name__ for v in adapters.values() if v is not None)
    logger.info(f"Infra adapters: {infra} -> {names}")
    return adapters
