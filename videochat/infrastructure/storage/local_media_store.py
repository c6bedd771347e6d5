"""Local filesystem storage for uploaded videos."""

import io
import logging
import random
import time
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from ...domain.constants import (
    ALLOWED_UPLOAD_MIME_TYPES,
    MIME_TO_EXTENSION,
    UPLOAD_CHUNK_BYTES,
    mime_type_for,
)
from ...domain.exceptions import NotFoundError, StorageError, ValidationError
from ...domain.models.media import MediaAsset
from ...domain.repositories.media_store import MediaStore

logger = logging.getLogger(__name__)


class LocalMediaStore(MediaStore):
    """
    Stores uploads as `<epoch-millis>-<random>.<ext>` in one directory.

    Concurrent uploads never share a name, so no locking is needed. Nothing
    is reclaimed automatically; callers delete explicitly.
    """

    def __init__(
        self,
        root: str | Path,
        max_bytes: int,
        allowed_mime_types: Iterable[str] = ALLOWED_UPLOAD_MIME_TYPES,
    ) -> None:
        self.root = Path(root).resolve()
        self.max_bytes = max_bytes
        self.allowed_mime_types = frozenset(allowed_mime_types)
        self.root.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    def _generate_name(self, original_name: str, mime_type: str) -> str:
        ext = Path(original_name or "").suffix.lower()
        if not ext:
            ext = MIME_TO_EXTENSION.get(mime_type, "")
        unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return f"{unique}{ext}"

    def _path(self, local_id: str) -> Path:
        # Only bare names inside root are addressable
        if not local_id or Path(local_id).name != local_id or local_id in (".", ".."):
            raise NotFoundError("Video file not found", details={"filename": local_id})
        return self.root / local_id

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def store(self, data: bytes, mime_type: str, original_name: str) -> MediaAsset:
        return self.store_stream(io.BytesIO(data), mime_type, original_name)

    def store_stream(self, stream: BinaryIO, mime_type: str, original_name: str) -> MediaAsset:
        if mime_type not in self.allowed_mime_types:
            raise ValidationError(
                "Only MP4, WebM and MOV video files are allowed",
                details={"mimetype": mime_type},
            )

        self.root.mkdir(parents=True, exist_ok=True)
        local_id = self._generate_name(original_name, mime_type)
        final_path = self.root / local_id

        size = 0
        try:
            with open(final_path, "wb") as f:
                while True:
                    chunk = stream.read(UPLOAD_CHUNK_BYTES)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise StorageError(
                            f"File too large. Max {self.max_bytes // (1024 * 1024)} MB.",
                            details={"max_bytes": self.max_bytes},
                        )
                    f.write(chunk)
        except StorageError:
            final_path.unlink(missing_ok=True)
            raise
        except OSError as e:
            final_path.unlink(missing_ok=True)
            logger.error("Failed to write upload %s: %s", local_id, e)
            raise StorageError(f"Failed to store video: {e}") from e

        if size == 0:
            final_path.unlink(missing_ok=True)
            raise ValidationError("Video file is empty")

        logger.info("Video stored: %s (%d bytes, %s)", local_id, size, mime_type)
        return MediaAsset(
            local_id=local_id,
            storage_path=str(final_path),
            byte_size=size,
            mime_type=mime_type,
        )

    def delete(self, local_id: str) -> bool:
        path = self._path(local_id)
        if not path.is_file():
            return False
        path.unlink(missing_ok=True)
        logger.info("Deleted stored video %s", local_id)
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, local_id: str) -> MediaAsset:
        path = self._path(local_id)
        if not path.is_file():
            raise NotFoundError("Video file not found", details={"filename": local_id})
        size = path.stat().st_size
        if size == 0:
            raise ValidationError("Video file is empty")
        return MediaAsset(
            local_id=local_id,
            storage_path=str(path),
            byte_size=size,
            mime_type=mime_type_for(local_id),
        )

    def locate(self, path_or_name: str) -> MediaAsset:
        candidate = Path(path_or_name or "")
        if candidate.is_absolute() or len(candidate.parts) > 1:
            resolved = self._inside_root(candidate)
            if resolved is None:
                raise NotFoundError(
                    "Video file not found or not accessible",
                    details={"path": path_or_name},
                )
            return self.get(resolved.name)
        return self.get(path_or_name)

    def resolve(self, local_id: str) -> bytes:
        path = self._path(local_id)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError("Video file not found", details={"filename": local_id}) from e

    def _inside_root(self, candidate: Path) -> Optional[Path]:
        resolved = candidate.resolve()
        if resolved.parent != self.root:
            return None
        return resolved
