"""Read and append operations over categories, subcategories and folders.

The taxonomy is append-only: nothing here updates or deletes a level.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from archive_api.core.exceptions import ValidationError
from archive_api.models import Category, File, Folder, Subcategory

logger = logging.getLogger(__name__)


def list_categories(db: Session) -> List[Category]:
    return db.query(Category).all()


def list_subcategories(db: Session, category_id: int) -> List[Subcategory]:
    return db.query(Subcategory).filter(Subcategory.category_id == category_id).all()


def list_folders(db: Session, subcategory_id: int) -> List[Folder]:
    return db.query(Folder).filter(Folder.subcategory_id == subcategory_id).all()


def list_files(db: Session, folder_id: int) -> List[File]:
    """List the files filed directly under a folder.

    Folders are flat: a folder never contains other folders.
    """
    return db.query(File).filter(File.folder_id == folder_id).all()


def create_category(db: Session, name: Optional[str]) -> int:
    if not name:
        raise ValidationError("Category name is required")

    category = Category(name=name)
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info("Created category %s (%s)", category.id, name)
    return category.id


def create_subcategory(db: Session, name: Optional[str], category_id: Optional[int]) -> int:
    """Append a subcategory under an existing category.

    Args:
        db: Active session.
        name: Subcategory name.
        category_id: Owning category.

    Returns:
        Id of the new subcategory.

    Raises:
        ValidationError: If a field is missing or the category does not exist.
    """
    if not name or not category_id:
        raise ValidationError("Name and category ID are required")

    if db.get(Category, category_id) is None:
        raise ValidationError(f"Category {category_id} does not exist")

    subcategory = Subcategory(name=name, category_id=category_id)
    db.add(subcategory)
    db.commit()
    db.refresh(subcategory)
    logger.info("Created subcategory %s under category %s", subcategory.id, category_id)
    return subcategory.id


def create_folder(db: Session, name: Optional[str], subcategory_id: Optional[int]) -> int:
    """Append a folder under an existing subcategory.

    Raises:
        ValidationError: If a field is missing or the subcategory does not exist.
    """
    if not name or not subcategory_id:
        raise ValidationError("Name and subcategory ID are required")

    if db.get(Subcategory, subcategory_id) is None:
        raise ValidationError(f"Subcategory {subcategory_id} does not exist")

    folder = Folder(name=name, subcategory_id=subcategory_id)
    db.add(folder)
    db.commit()
    db.refresh(folder)
    logger.info("Created folder %s under subcategory %s", folder.id, subcategory_id)
    return folder.id
