"""Domain models for paired photo uploads."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UploadedBlob:
    """Raw bytes of one uploaded file with the name the client sent."""

    filename: str
    content: bytes


@dataclass(frozen=True)
class PhotoRecord:
    """One stored pair of images."""

    primary_location: str
    secondary_location: str
    created_at: datetime
