# archive_api/models/user.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from archive_api.models.base import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash, never plaintext
    role = Column(String(50))  # Free-form, e.g. "admin" or "viewer"

    # Relationships
    metrics = relationship("Metric", back_populates="user")
