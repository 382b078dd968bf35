# archive_api/routers/taxonomy.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from archive_api.core.database import get_db
from archive_api.schemas.file import FileOut
from archive_api.schemas.taxonomy import (
    CategoryOut,
    CreatedResponse,
    FolderCreate,
    FolderOut,
    SubcategoryCreate,
    SubcategoryOut,
)
from archive_api.services import taxonomy

router = APIRouter()

@router.get("/categories", response_model=List[CategoryOut])
def get_categories(db: Session = Depends(get_db)):
    return taxonomy.list_categories(db)

@router.get("/subcategories/{category_id}", response_model=List[SubcategoryOut])
def get_subcategories(category_id: int, db: Session = Depends(get_db)):
    """
    All subcategories of a category. An unknown category gives an empty list.
    """
    return taxonomy.list_subcategories(db, category_id)

@router.get("/folders/{subcategory_id}", response_model=List[FolderOut])
def get_folders(subcategory_id: int, db: Session = Depends(get_db)):
    return taxonomy.list_folders(db, subcategory_id)

# Numeric ids only, so /files/<filename> still reaches the static mount
@router.get("/files/{folder_id:int}", response_model=List[FileOut])
def get_files(folder_id: int, db: Session = Depends(get_db)):
    return taxonomy.list_files(db, folder_id)

@router.post("/subcategories", response_model=CreatedResponse)
def create_subcategory(payload: SubcategoryCreate, db: Session = Depends(get_db)):
    new_id = taxonomy.create_subcategory(db, payload.name, payload.category_id)
    return CreatedResponse(message="Subcategory added successfully", id=new_id)

@router.post("/folders", response_model=CreatedResponse)
def create_folder(payload: FolderCreate, db: Session = Depends(get_db)):
    new_id = taxonomy.create_folder(db, payload.name, payload.subcategory_id)
    return CreatedResponse(message="Folder added successfully", id=new_id)
