# archive_api/routers/file.py
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import FileResponse
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from archive_api.core.database import get_db
from archive_api.core.storage import FileStore, get_file_store
from archive_api.schemas.file import FileUploadResponse, StoredFileInfo
from archive_api.services.registration import IncomingFile, register_upload

router = APIRouter()

@router.post("/upload", response_model=FileUploadResponse)
async def upload_files(
    folder_id: Optional[int] = Form(None),
    files: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    store: FileStore = Depends(get_file_store),
):
    """
    Upload one or more files into a folder.

    - **folder_id**: folder the files are filed under.
    - **files**: the uploaded payloads; each is stored under its original name,
      replacing any earlier file with the same name.

    Returns every received file. Files whose write or catalog insert failed
    are also listed by name in **failed**; the request itself still succeeds.
    """
    incoming = []
    for upload in files or []:
        incoming.append(IncomingFile(
            filename=upload.filename or "",
            content=await upload.read(),
            content_type=upload.content_type,
        ))

    # Blocking disk and database work stays off the event loop
    result = await run_in_threadpool(register_upload, db, store, folder_id, incoming)

    return FileUploadResponse(
        message="Files uploaded and added to the catalog",
        files=[
            StoredFileInfo(name=f.name, size=f.size, path=f.path, content_type=f.content_type)
            for f in result.files
        ],
        failed=result.failed,
    )

# Registered after GET /files/{folder_id:int}, so numeric names list a folder instead
@router.get("/files/{filename}", response_class=FileResponse)
def download_file(filename: str, store: FileStore = Depends(get_file_store)):
    """
    Serve stored bytes by filename from the same content area uploads write to.
    """
    return FileResponse(store.locate(filename))
