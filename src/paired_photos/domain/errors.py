"""Error types raised by the ingestion and identity services."""


class PairedPhotosError(Exception):
    """Base class for application errors."""


class BlobWriteError(PairedPhotosError):
    """Raised when the blob store cannot persist a file."""


class StoreError(PairedPhotosError):
    """Raised when the catalog rejects a read or write."""


class IngestError(PairedPhotosError):
    """Raised when a batch stops before every pair was committed.

    ``committed`` holds the locators of the pairs that were fully stored
    and catalogued before the failure, in upload order.
    """

    def __init__(self, message: str, committed: list[str] | None = None) -> None:
        super().__init__(message)
        self.committed = list(committed or [])


class UnpairedInputError(IngestError):
    """Raised when a batch does not contain a positive, even number of files."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Expected a positive even number of files, got {count}")
        self.count = count


class DuplicateIdError(PairedPhotosError):
    """Raised when an account with the same external id already exists."""

    def __init__(self, external_id: int) -> None:
        super().__init__(f"Account {external_id} already exists")
        self.external_id = external_id


class InvalidCredentialsError(PairedPhotosError):
    """Raised for an unknown external id or a wrong secret alike."""
