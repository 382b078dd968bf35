# archive_api/services/metrics.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from archive_api.core.exceptions import NotFoundError
from archive_api.models import File, Metric, User

logger = logging.getLogger(__name__)


def record_metric(db: Session, email: Optional[str], file_id: Optional[int]) -> int:
    """
    Appends one access event for (user, file).
    Both references are checked before the insert; no transaction spans them.
    """
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise NotFoundError("User not found")

    file_record = db.query(File).filter(File.id == file_id).first()
    if not file_record:
        raise NotFoundError("File not found")

    metric = Metric(user_id=user.id, file_id=file_record.id)
    db.add(metric)
    db.commit()
    db.refresh(metric)
    logger.info("Recorded access of file %s by user %s", file_record.id, user.id)
    return metric.id


def list_metrics(db: Session) -> List[dict]:
    rows = (
        db.query(User.email, File.name, File.src, Metric.created_at)
        .select_from(Metric)
        .join(User, Metric.user_id == User.id)
        .join(File, Metric.file_id == File.id)
        .all()
    )
    if not rows:
        raise NotFoundError("No metrics found")

    return [
        {"email": email, "name": name, "src": src, "created_at": created_at}
        for email, name, src, created_at in rows
    ]
