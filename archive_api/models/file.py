# archive_api/models/file.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from archive_api.models.base import Base

class File(Base):
    __tablename__ = "files"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)  # Original filename, also the storage key
    src = Column(String(512), nullable=False)  # Path relative to the service root
    folder_id = Column(Integer, ForeignKey("folders.id"), nullable=False, index=True)
    created_at = Column(String(32), nullable=False)  # ISO 8601
    updated_at = Column(String(32), nullable=False)

    # Relationships
    folder = relationship("Folder", back_populates="files")
    metrics = relationship("Metric", back_populates="file")
