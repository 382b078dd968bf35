# archive_api/models/folder.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from archive_api.models.base import Base

class Folder(Base):
    __tablename__ = "folders"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id"), nullable=False, index=True)

    # Relationships
    subcategory = relationship("Subcategory", back_populates="folders")
    files = relationship("File", back_populates="folder")
