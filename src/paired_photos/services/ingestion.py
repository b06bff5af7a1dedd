"""Paired photo ingestion."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from paired_photos.domain.errors import (
    BlobWriteError,
    IngestError,
    StoreError,
    UnpairedInputError,
)
from paired_photos.domain.photos import PhotoRecord, UploadedBlob

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    """Storage interface for raw uploaded bytes."""

    def write(self, content: bytes, suggested_name: str) -> str:
        """Persist bytes and return a stable locator."""


class PhotoCatalog(Protocol):
    """Persistence interface for photo records."""

    def insert_photo_record(self, record: PhotoRecord) -> str:
        """Persist a photo record and return its id."""

    def list_photo_records(self) -> list[PhotoRecord]:
        """Return every stored photo record."""


@dataclass
class IngestionService:
    """Stores uploaded files two at a time and catalogs each pair."""

    blob_store: BlobStore
    catalog: PhotoCatalog

    def ingest(self, files: list[UploadedBlob]) -> list[str]:
        """Store every pair in order and return all locators.

        Pairs are processed strictly one after another. The first failure
        stops the batch and raises ``IngestError`` carrying the locators of
        the pairs committed so far. Blobs already written for the failing
        pair are left in place.
        """
        if not files or len(files) % 2:
            raise UnpairedInputError(len(files))

        committed: list[str] = []
        for index in range(0, len(files), 2):
            first, second = files[index], files[index + 1]
            try:
                primary = self.blob_store.write(first.content, first.filename)
                secondary = self.blob_store.write(second.content, second.filename)
                self.catalog.insert_photo_record(
                    PhotoRecord(
                        primary_location=primary,
                        secondary_location=secondary,
                        created_at=datetime.now(tz=UTC),
                    )
                )
            except (BlobWriteError, StoreError) as exc:
                logger.warning(
                    "Ingestion stopped at pair %d after %d committed locators",
                    index // 2,
                    len(committed),
                    extra={"committed": committed},
                )
                raise IngestError(str(exc), committed=committed) from exc
            committed.extend((primary, secondary))
        logger.info("Ingested %d photo pairs", len(files) // 2)
        return committed

    def list_all(self) -> list[PhotoRecord]:
        """Return all photo records in catalog order."""
        return self.catalog.list_photo_records()
