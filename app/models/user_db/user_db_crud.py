import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.user_db.user_db import User
from app.core.config import settings
from app.core.security import hash_password

logger = logging.getLogger(__name__)


def create_user(db: Session, student_id: str, password: str | None = None):
    db_user = User(
        student_id=student_id,
        hashed_password=hash_password(password) if password else None,
        is_admin=student_id in settings.ADMIN_STUDENT_IDS,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Signed up student %s (admin=%s)", student_id, db_user.is_admin)
    return db_user


def get_or_create_user(db: Session, student_id: str, password: str | None = None):
    """Return ``(user, created)``, signing the student up on first entry."""
    user = get_user_by_student_id(db, student_id)
    if user:
        return user, False

    try:
        return create_user(db, student_id, password), True
    except IntegrityError:
        # a concurrent entry created the account first
        db.rollback()
        user = db.query(User).filter(User.student_id == student_id).first()
        if not user:
            raise
        return user, False


def get_user_by_student_id(db: Session, student_id: str):
    return db.query(User).filter(User.student_id == student_id).first()


def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def set_user_password(db: Session, user: User, password: str):
    user.hashed_password = hash_password(password)
    db.commit()
    db.refresh(user)
    return user


def make_user_admin(db: Session, student_id: str):
    user = get_user_by_student_id(db, student_id)
    if not user:
        return None
    user.is_admin = True
    db.commit()
    db.refresh(user)
    return user
