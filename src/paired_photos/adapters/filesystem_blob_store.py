"""Filesystem-backed blob store."""

import logging
import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path, PurePath

from paired_photos.domain.errors import BlobWriteError
from paired_photos.services.ingestion import BlobStore

logger = logging.getLogger(__name__)

_MAX_NAME_ATTEMPTS = 100
_TEMP_SUFFIX = ".tmp"


@dataclass
class FilesystemBlobStore(BlobStore):
    """Writes uploads into a single directory under generated names.

    Names follow ``<epoch-millis>-<original name>``. Bytes go to a temp
    file in the same directory first and are published with a hard link,
    so a locator name only ever holds a complete file. A file is never
    overwritten: on collision a counter is inserted after the timestamp.
    """

    root: Path

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    def write(self, content: bytes, suggested_name: str) -> str:
        """Write bytes to a fresh file and return its locator."""
        base_name = _safe_name(suggested_name)
        stamp = time.time_ns() // 1_000_000
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            temp_path = self._write_temp(content)
            try:
                return self._publish(temp_path, stamp, base_name)
            finally:
                temp_path.unlink(missing_ok=True)
        except (OSError, ValueError) as exc:
            logger.exception("Failed to write upload %s", base_name)
            raise BlobWriteError(f"Could not store {base_name}") from exc

    def _write_temp(self, content: bytes) -> Path:
        fd, raw_path = tempfile.mkstemp(
            dir=self.root, prefix=".", suffix=_TEMP_SUFFIX
        )
        temp_path = Path(raw_path)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise
        return temp_path

    def _publish(self, temp_path: Path, stamp: int, base_name: str) -> str:
        for attempt in range(_MAX_NAME_ATTEMPTS):
            name = (
                f"{stamp}-{base_name}"
                if attempt == 0
                else f"{stamp}-{attempt}-{base_name}"
            )
            path = self.root / name
            try:
                os.link(temp_path, path)
            except FileExistsError:
                continue
            return path.as_posix()
        raise BlobWriteError(f"No free file name for {base_name}")


def _safe_name(name: str) -> str:
    """Drop directory components and NUL bytes from a client file name."""
    cleaned = PurePath(name.replace("\x00", "").replace("\\", "/")).name.strip()
    if cleaned in {"", ".", ".."}:
        return "upload"
    return cleaned
