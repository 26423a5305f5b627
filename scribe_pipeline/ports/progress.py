"""ProgressPort: abstract interface for observing pipeline progress."""

from abc import ABC, abstractmethod
from typing import Callable

from scribe_pipeline.domain.models import ProgressEvent

# Engines report (fraction, label) pairs; the coordinator wraps them into events.
ProgressCallback = Callable[[float, str], None]


class ProgressPort(ABC):
    @abstractmethod
    def report(self, event: ProgressEvent) -> None:
        """Receive one milestone. Events of a run arrive in non-decreasing fraction order."""
