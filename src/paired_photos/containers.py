"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from paired_photos.adapters.bcrypt_hasher import BcryptSecretHasher
from paired_photos.adapters.filesystem_blob_store import FilesystemBlobStore
from paired_photos.adapters.supabase_account_repository import (
    SupabaseAccountRepository,
)
from paired_photos.adapters.supabase_photo_repository import SupabasePhotoRepository
from paired_photos.config import Settings
from paired_photos.services.identity import IdentityService
from paired_photos.services.ingestion import IngestionService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ingestion_service: IngestionService
    identity_service: IdentityService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    ingestion_service = IngestionService(
        blob_store=FilesystemBlobStore(Path(resolved_settings.upload_dir)),
        catalog=SupabasePhotoRepository(
            supabase_client, table_name=resolved_settings.photos_table
        ),
    )
    identity_service = IdentityService(
        repository=SupabaseAccountRepository(
            supabase_client, table_name=resolved_settings.accounts_table
        ),
        hasher=BcryptSecretHasher(rounds=resolved_settings.bcrypt_rounds),
    )

    async def close_resources() -> None:
        supabase_client.postgrest.session.close()
        logger.info("Application resources released")

    return AppContainer(
        settings=resolved_settings,
        ingestion_service=ingestion_service,
        identity_service=identity_service,
        close_resources=close_resources,
    )
