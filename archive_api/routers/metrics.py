# archive_api/routers/metrics.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from archive_api.core.database import get_db
from archive_api.schemas.metric import MetricCreate, MetricCreatedResponse, MetricListResponse, MetricRow
from archive_api.services import metrics as metrics_service

router = APIRouter()

@router.get("", response_model=MetricListResponse)
def get_metrics(db: Session = Depends(get_db)):
    rows = metrics_service.list_metrics(db)
    return MetricListResponse(metrics=[MetricRow(**row) for row in rows])

@router.post("", response_model=MetricCreatedResponse)
def create_metric(payload: MetricCreate, db: Session = Depends(get_db)):
    metric_id = metrics_service.record_metric(db, payload.email, payload.file_id)
    return MetricCreatedResponse(message="Metric recorded successfully", metricId=metric_id)
