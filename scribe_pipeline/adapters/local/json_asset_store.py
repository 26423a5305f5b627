"""JsonFileAssetStore: keeps processed assets in a single JSON file."""

import json
import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from scribe_pipeline.domain.errors import AssetStoreCorrupt
from scribe_pipeline.domain.models import AudioAsset
from scribe_pipeline.mappers import asset_to_record, record_to_asset
from scribe_pipeline.ports.asset_store import AssetStorePort
from scribe_pipeline.schemas import AssetStoreDocument, AudioAssetRecord

logger = logging.getLogger(__name__)


class JsonFileAssetStore(AssetStorePort):
    """Reads degrade to empty on a bad file; writes refuse to overwrite it."""

    def __init__(self, store_file: str):
        self._store_file = Path(store_file)

    def _load(self, strict: bool = False) -> dict[str, AudioAssetRecord]:
        try:
            with open(self._store_file) as f:
                data = json.load(f)
            document = AssetStoreDocument.model_validate(data)
            return {str(rec.id): rec for rec in document.assets}
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, ValidationError) as e:
            if strict:
                raise AssetStoreCorrupt(
                    f"Refusing to overwrite unreadable asset store {self._store_file}: {e}",
                    store_file=str(self._store_file),
                ) from e
            logger.warning(f"Could not load asset store {self._store_file}: {e}")
            return {}

    def _write(self, records: dict[str, AudioAssetRecord]) -> None:
        document = AssetStoreDocument(assets=list(records.values()))
        self._store_file.parent.mkdir(parents=True, exist_ok=True)
        # write-then-rename so readers never see a half-written file
        fd, tmp_path = tempfile.mkstemp(dir=self._store_file.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(document.model_dump(mode="json"), f, indent=2)
            os.replace(tmp_path, self._store_file)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def save(self, asset: AudioAsset) -> None:
        records = self._load(strict=True)
        records[str(asset.id)] = asset_to_record(asset)
        self._write(records)
        logger.debug(f"Saved asset {asset.id} ({asset.status.value})")

    def load(self, asset_id: uuid.UUID) -> Optional[AudioAsset]:
        rec = self._load().get(str(asset_id))
        return record_to_asset(rec) if rec else None

    def list_ids(self) -> list[uuid.UUID]:
        return [uuid.UUID(key) for key in self._load()]

    def delete(self, asset_id: uuid.UUID) -> bool:
        records = self._load(strict=True)
        if records.pop(str(asset_id), None) is None:
            return False
        self._write(records)
        return True
