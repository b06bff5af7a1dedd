"""Supabase-backed photo catalog."""

from dataclasses import dataclass
from datetime import datetime

import httpx
from supabase import Client, PostgrestAPIError

from paired_photos.domain.errors import StoreError
from paired_photos.domain.photos import PhotoRecord
from paired_photos.services.ingestion import PhotoCatalog


@dataclass
class SupabasePhotoRepository(PhotoCatalog):
    """Supabase implementation for photo pair persistence."""

    client: Client
    table_name: str = "photos"

    def insert_photo_record(self, record: PhotoRecord) -> str:
        """Create a photo row and return its id."""
        try:
            response = (
                self.client.table(self.table_name)
                .insert(
                    {
                        "location": record.primary_location,
                        "location2": record.secondary_location,
                        "date": record.created_at.isoformat(),
                    }
                )
                .execute()
            )
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            raise StoreError("Failed to insert photo record") from exc
        if not response.data:
            raise StoreError("Failed to insert photo record")
        return str(response.data[0]["id"])

    def list_photo_records(self) -> list[PhotoRecord]:
        """Return all photo rows ordered by creation time."""
        try:
            response = (
                self.client.table(self.table_name)
                .select("location, location2, date")
                .order("date")
                .execute()
            )
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            raise StoreError("Failed to list photo records") from exc
        return [
            PhotoRecord(
                primary_location=row["location"],
                secondary_location=row["location2"],
                created_at=datetime.fromisoformat(row["date"]),
            )
            for row in response.data or []
        ]
