"""Error hierarchy for the scribe pipeline.

None of these are retried by the pipeline itself; retries are a caller policy
applied by re-submitting the asset.
"""

from typing import Any


class PipelineError(Exception):
    """Base exception for all pipeline errors.

    Attributes:
        error_code: Machine-readable error identifier.
        context: Arbitrary key-value pairs describing the failure.
    """

    def __init__(self, message: str, error_code: str = "PIPELINE_ERROR", **context: Any) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context


class InvalidDuration(PipelineError):
    """Asset duration is not usable for processing."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="INVALID_DURATION", **context)


class InvalidAudio(PipelineError):
    """The engine could not make sense of the audio."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="INVALID_AUDIO", **context)


class EngineUnavailable(PipelineError):
    """A transcription or summarization backend is unreachable."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="ENGINE_UNAVAILABLE", **context)


class Cancelled(PipelineError):
    """The caller cancelled the run."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="CANCELLED", **context)


class AssetBusy(PipelineError):
    """A pipeline run is already active for this asset."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="ASSET_BUSY", **context)


class UnknownTemplate(PipelineError):
    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="UNKNOWN_TEMPLATE", **context)


class StageTimeout(PipelineError):
    """A stage did not finish within the caller-supplied timeout."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="STAGE_TIMEOUT", **context)


class InvalidStatusTransition(PipelineError):
    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="INVALID_STATUS_TRANSITION", **context)


class AssetStoreCorrupt(PipelineError):
    """The asset store file exists but cannot be read back."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, error_code="ASSET_STORE_CORRUPT", **context)
