"""Audio asset processing pipeline: transcription followed by template summaries."""

__version__ = "0.1.0"
