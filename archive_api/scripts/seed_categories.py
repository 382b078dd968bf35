# archive_api/scripts/seed_categories.py

from sqlalchemy.orm import Session

from archive_api.core.database import engine, init_db
from archive_api.models import Category
from archive_api.services.taxonomy import create_category

categories = [
    "Administrative",
    "Legal",
    "Financial",
    "Human Resources",
    "Historical",
    "Photographs",
]


def seed(session: Session) -> int:
    created = 0
    for name in categories:
        exists = session.query(Category).filter_by(name=name).first()
        if not exists:
            create_category(session, name)
            created += 1
    return created


if __name__ == "__main__":
    init_db()
    with Session(engine) as session:
        created = seed(session)
    print(f"{created} root categories seeded.")
