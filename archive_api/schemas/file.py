# archive_api/schemas/file.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional

class FileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    src: str
    folder_id: int
    created_at: str
    updated_at: str

class StoredFileInfo(BaseModel):
    name: str
    size: int
    path: str
    content_type: Optional[str] = None

class FileUploadResponse(BaseModel):
    message: str
    files: List[StoredFileInfo]  # Every received file, stored or not
    failed: List[str] = []  # Names whose content write or catalog insert failed

class FileSearchResponse(BaseModel):
    files: List[FileOut]
