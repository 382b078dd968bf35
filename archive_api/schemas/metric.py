# archive_api/schemas/metric.py
from pydantic import BaseModel
from typing import List, Optional

class MetricCreate(BaseModel):
    email: Optional[str] = None
    file_id: Optional[int] = None

class MetricCreatedResponse(BaseModel):
    message: str
    metricId: int

class MetricRow(BaseModel):
    email: str
    name: str
    src: str
    created_at: str

class MetricListResponse(BaseModel):
    metrics: List[MetricRow]
