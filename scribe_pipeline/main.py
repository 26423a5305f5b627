import asyncio
import logging
import sys

from scribe_pipeline.config import Config, create_engines, create_infra_adapters, get_config
from scribe_pipeline.domain.models import AudioAsset, AudioFormat
from scribe_pipeline.use_cases.process_asset import PipelineCoordinator

logger = logging.getLogger("scribe_pipeline")


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if debug:
        logging.getLogger("scribe_pipeline").setLevel(logging.DEBUG)


def build_coordinator(cfg: Config) -> PipelineCoordinator:
    transcription, summarization = create_engines(cfg)
    infra = create_infra_adapters(cfg)
    return PipelineCoordinator(
        transcription=transcription,
        summarization=summarization,
        progress=infra["progress"],
        asset_store=infra["asset_store"],
        default_template=cfg.default_template,
        default_timeout=cfg.stage_timeout,
    )


async def run_demo(cfg: Config, duration: float) -> AudioAsset:
    """Push one synthetic recording through the pipeline."""
    coordinator = build_coordinator(cfg)
    asset = AudioAsset(
        file_name="demo-recording.m4a",
        duration=duration,
        file_size=int(duration * 16_000),
        audio_format=AudioFormat.M4A,
    )
    estimate = coordinator.estimate(asset, cfg.default_mode)
    logger.info(
        f"Estimate: mode={estimate.mode.value} cost=${estimate.cost:.3f} "
        f"time~{estimate.processing_seconds:.0f}s"
    )
    await coordinator.run(asset, mode=cfg.default_mode)
    return asset


if __name__ == "__main__":
    config = get_config()
    configure_logging(config.debug)
    seconds = float(sys.argv[1]) if len(sys.argv) > 1 else 120.0
    result = asyncio.run(run_demo(config, seconds))
    logger.info(f"Summary title: {result.summary.content.title}")
    for section in result.summary.content.sections:
        logger.info(f"  {section.order}. {section.title}")
