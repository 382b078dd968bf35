# archive_api/models/metric.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from archive_api.models.base import Base


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class Metric(Base):
    __tablename__ = "metrics"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    file_id = Column(Integer, ForeignKey("files.id"), nullable=False, index=True)
    created_at = Column(String(32), nullable=False, default=utc_now_iso)

    # Relationships
    user = relationship("User", back_populates="metrics")
    file = relationship("File", back_populates="metrics")
