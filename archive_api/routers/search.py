# archive_api/routers/search.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from archive_api.core.database import get_db
from archive_api.core.exceptions import ValidationError
from archive_api.schemas.file import FileOut, FileSearchResponse
from archive_api.services.search import search_files

router = APIRouter()

@router.get("/find", response_model=FileSearchResponse)
def find_files(
    search: str = Query(""),
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Search file names, optionally within one category.
    Answers 404 with a ``message`` when nothing matches.
    """
    category_id = None
    if category:
        if not category.isdigit():
            raise ValidationError("Category must be a numeric id")
        category_id = int(category)
    files = search_files(db, search, category_id)
    return FileSearchResponse(files=[FileOut.model_validate(f) for f in files])
