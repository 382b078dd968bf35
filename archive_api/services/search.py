# archive_api/services/search.py
from typing import List, Optional

from sqlalchemy.orm import Session

from archive_api.core.exceptions import NotFoundError
from archive_api.models import Category, File, Folder, Subcategory


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_files(db: Session, term: Optional[str] = "", category_id: Optional[int] = None) -> List[File]:
    """
    Case-insensitive substring search on file names across the taxonomy.

    Only files reachable through folder -> subcategory -> category are
    returned. An empty term matches every file. No match is a NotFoundError,
    reported under the ``message`` key.
    """
    pattern = f"%{_escape_like(term or '')}%"

    query = (
        db.query(File)
        .join(Folder, File.folder_id == Folder.id)
        .join(Subcategory, Folder.subcategory_id == Subcategory.id)
        .join(Category, Subcategory.category_id == Category.id)
        .filter(File.name.ilike(pattern, escape="\\"))
    )
    if category_id is not None:
        query = query.filter(Category.id == category_id)

    results = query.all()
    if not results:
        raise NotFoundError("No files found.", body_key="message")
    return results
