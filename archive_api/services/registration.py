"""File registration: write uploaded bytes, then record catalog metadata.

Each file in a batch is handled on its own. A failed content write or
catalog insert is logged and reported in ``failed``, and never stops the
remaining files nor fails the request.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from archive_api.core.config import MAX_UPLOAD_FILES
from archive_api.core.exceptions import StorageError, ValidationError
from archive_api.core.storage import FileStore, StoredFile
from archive_api.models import File

logger = logging.getLogger(__name__)


@dataclass
class IncomingFile:
    filename: str
    content: bytes
    content_type: Optional[str] = None


@dataclass
class RegistrationResult:
    files: List[StoredFile] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


def register_upload(
    db: Session,
    store: FileStore,
    folder_id: Optional[int],
    files: List[IncomingFile],
    max_files: int = MAX_UPLOAD_FILES,
) -> RegistrationResult:
    """Store a batch of uploads and insert one catalog row per file.

    Args:
        db: Active session.
        store: Content area the bytes are written to.
        folder_id: Folder the files are filed under.
        files: Received payloads with their original filenames.
        max_files: Upper bound on the batch size.

    Returns:
        Descriptors for every received file plus the names that failed.

    Raises:
        ValidationError: If the batch is empty or too large. Nothing is
            written in that case.
    """
    if not files:
        raise ValidationError("No files received")
    if len(files) > max_files:
        raise ValidationError(f"At most {max_files} files can be uploaded at once")

    result = RegistrationResult()
    now = datetime.now(timezone.utc).isoformat()

    for incoming in files:
        descriptor = StoredFile(
            name=incoming.filename,
            size=len(incoming.content),
            path=incoming.filename,
            content_type=incoming.content_type,
        )
        try:
            descriptor = store.save(incoming.filename, incoming.content, incoming.content_type)
            _insert_file_record(db, incoming.filename, folder_id, now)
        except StorageError:
            logger.exception("Could not write %s to the content area", incoming.filename)
            result.failed.append(incoming.filename)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Could not add %s to the catalog", incoming.filename)
            result.failed.append(incoming.filename)
        else:
            logger.info("File %s added to the catalog", incoming.filename)
        result.files.append(descriptor)

    return result


def _insert_file_record(db: Session, name: str, folder_id: Optional[int], timestamp: str) -> File:
    record = File(
        name=name,
        src=FileStore.relative_src(name),
        folder_id=folder_id,
        created_at=timestamp,
        updated_at=timestamp,
    )
    db.add(record)
    db.commit()
    return record
