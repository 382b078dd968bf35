# archive_api/core/storage.py
import logging
import os
from dataclasses import dataclass
from typing import Optional

from archive_api.core.config import FILES_DIRECTORY, FILES_URL_PREFIX
from archive_api.core.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    name: str
    size: int
    path: str
    content_type: Optional[str] = None


class FileStore:
    """
    Content area for uploaded bytes.

    Files are keyed by their original filename only: uploading a second
    file with the same name overwrites the first (last writer wins).
    """

    def __init__(self, directory: str = FILES_DIRECTORY):
        self.directory = directory

    def ensure_directory(self) -> None:
        os.makedirs(self.directory, exist_ok=True)

    def path_for(self, name: str) -> str:
        key = os.path.basename(name or "")
        if not key or key in (".", ".."):
            raise StorageError(f"Invalid file name: {name!r}")
        return os.path.join(self.directory, key)

    def locate(self, name: str) -> str:
        """
        Path of stored content for a filename; NotFoundError when absent.
        """
        try:
            file_path = self.path_for(name)
        except StorageError:
            raise NotFoundError("File not found") from None
        if not os.path.isfile(file_path):
            raise NotFoundError("File not found")
        return file_path

    @staticmethod
    def relative_src(name: str) -> str:
        return os.path.join(FILES_URL_PREFIX, os.path.basename(name))

    def save(self, name: str, content: bytes, content_type: Optional[str] = None) -> StoredFile:
        file_path = self.path_for(name)
        self.ensure_directory()
        if os.path.exists(file_path):
            logger.warning("Overwriting existing content for %s", name)
        try:
            with open(file_path, "wb") as buffer:
                buffer.write(content)
        except OSError as exc:
            raise StorageError(f"Could not store {name}") from exc
        return StoredFile(name=name, size=len(content), path=file_path, content_type=content_type)


def get_file_store() -> FileStore:
    return FileStore()
