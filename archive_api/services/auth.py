# archive_api/services/auth.py
import logging
from typing import Optional

from sqlalchemy.orm import Session

from archive_api.core.config import MIN_PASSWORD_LENGTH
from archive_api.core.exceptions import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from archive_api.core.security import hash_password, verify_password
from archive_api.models import User

logger = logging.getLogger(__name__)


def signup(db: Session, email: Optional[str], password: Optional[str], role: Optional[str]) -> int:
    """
    Registers a new user with a bcrypt-hashed password.
    Returns the new user's id.
    """
    if not email:
        raise ValidationError("Email is required")

    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise ConflictError("Email is already registered")

    user = User(email=email, password=hash_password(password), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s with role %s", user.id, role)
    return user.id


def login(db: Session, email: str, password: str) -> User:
    """
    Verifies credentials and returns the matching user.
    The caller decides which fields leave the service; the hash never should.
    """
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise NotFoundError("User not found")

    if not verify_password(password, user.password):
        raise UnauthorizedError("Incorrect password")

    logger.info("User %s logged in with role %s", user.id, user.role)
    return user
