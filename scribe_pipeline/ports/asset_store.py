"""AssetStorePort: abstract interface for persisting processed assets."""

import uuid
from abc import ABC, abstractmethod
from typing import Optional

from scribe_pipeline.domain.models import AudioAsset


class AssetStorePort(ABC):
    @abstractmethod
    def save(self, asset: AudioAsset) -> None:
        """Insert or replace the asset, including its transcript and summary.

        Must not drop other stored assets; raise instead if they cannot be read.
        """

    @abstractmethod
    def load(self, asset_id: uuid.UUID) -> Optional[AudioAsset]:
        """Return the stored asset, or None."""

    @abstractmethod
    def list_ids(self) -> list[uuid.UUID]:
        """Return ids of all stored assets."""

    @abstractmethod
    def delete(self, asset_id: uuid.UUID) -> bool:
        """Remove an asset. Returns False if it was not stored."""
