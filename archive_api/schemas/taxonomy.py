# archive_api/schemas/taxonomy.py
from pydantic import BaseModel, ConfigDict
from typing import Optional

class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str

class SubcategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category_id: int

class FolderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    subcategory_id: int

# Fields are optional so that missing values reach the service and
# come back as a 400 with a readable message
class SubcategoryCreate(BaseModel):
    name: Optional[str] = None
    category_id: Optional[int] = None

class FolderCreate(BaseModel):
    name: Optional[str] = None
    subcategory_id: Optional[int] = None

class CreatedResponse(BaseModel):
    message: str
    id: int
