"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from paired_photos.adapters.bcrypt_hasher import BcryptSecretHasher
from paired_photos.adapters.filesystem_blob_store import FilesystemBlobStore
from paired_photos.config import Settings
from paired_photos.containers import AppContainer
from paired_photos.domain.accounts import Account
from paired_photos.domain.errors import BlobWriteError, StoreError
from paired_photos.domain.photos import PhotoRecord
from paired_photos.services.identity import AccountRepository, IdentityService
from paired_photos.services.ingestion import (
    BlobStore,
    IngestionService,
    PhotoCatalog,
)

TEST_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@dataclass
class InMemoryBlobStore(BlobStore):
    """In-memory blob store that can fail on a chosen write."""

    blobs: dict[str, bytes] = field(default_factory=dict)
    fail_on_write: int | None = None
    writes: int = 0

    def write(self, content: bytes, suggested_name: str) -> str:
        self.writes += 1
        if self.fail_on_write == self.writes:
            raise BlobWriteError(f"disk full writing {suggested_name}")
        locator = f"uploads/{self.writes}-{suggested_name}"
        self.blobs[locator] = content
        return locator


@dataclass
class InMemoryPhotoCatalog(PhotoCatalog):
    """In-memory photo catalog that can fail on a chosen insert."""

    records: list[PhotoRecord] = field(default_factory=list)
    fail_on_insert: int | None = None
    inserts: int = 0

    def insert_photo_record(self, record: PhotoRecord) -> str:
        self.inserts += 1
        if self.fail_on_insert == self.inserts:
            raise StoreError("catalog unavailable")
        self.records.append(record)
        return str(len(self.records))

    def list_photo_records(self) -> list[PhotoRecord]:
        return list(self.records)


@dataclass
class InMemoryAccountRepository(AccountRepository):
    """In-memory account repository for tests."""

    accounts: list[Account] = field(default_factory=list)

    def find_account(self, external_id: int) -> Account | None:
        for account in self.accounts:
            if account.external_id == external_id:
                return account
        return None

    def insert_account(self, account: Account) -> str:
        self.accounts.append(account)
        return str(len(self.accounts))


@dataclass
class BrokenAccountRepository(AccountRepository):
    """Account repository whose backend is down."""

    def find_account(self, external_id: int) -> Account | None:
        raise StoreError("catalog unavailable")

    def insert_account(self, account: Account) -> str:
        raise StoreError("catalog unavailable")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=TEST_SERVICE_KEY,
        bcrypt_rounds=4,
    )


@pytest.fixture
def hasher() -> BcryptSecretHasher:
    return BcryptSecretHasher(rounds=4)


@pytest.fixture
def photo_catalog() -> InMemoryPhotoCatalog:
    return InMemoryPhotoCatalog()


@pytest.fixture
def account_repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def container(
    settings: Settings,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    photo_catalog: InMemoryPhotoCatalog,
    account_repository: InMemoryAccountRepository,
    hasher: BcryptSecretHasher,
) -> AppContainer:
    monkeypatch.chdir(tmp_path)
    ingestion_service = IngestionService(
        blob_store=FilesystemBlobStore(Path(settings.upload_dir)),
        catalog=photo_catalog,
    )
    identity_service = IdentityService(repository=account_repository, hasher=hasher)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        ingestion_service=ingestion_service,
        identity_service=identity_service,
        close_resources=close_resources,
    )
