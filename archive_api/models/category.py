# archive_api/models/category.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from archive_api.models.base import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    subcategories = relationship("Subcategory", back_populates="category")
