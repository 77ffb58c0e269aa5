import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ProfileAlreadyExists, SeatTaken
from app.models.profile_db.profile_db import Profile
from app.models.user_db.user_db import User
from app.schemas.profile.profile_base import ProfileCreate
from app.services.event_options import opposite_gender, Gender

logger = logging.getLogger(__name__)


def get_profile_by_user_id(db: Session, user_id: int):
    return db.query(Profile).filter(Profile.user_id == user_id).first()


def get_profile_by_id(db: Session, profile_id: UUID):
    return db.query(Profile).filter(Profile.id == profile_id).first()


def create_profile(db: Session, user: User, data: ProfileCreate):
    if get_profile_by_user_id(db, user.id):
        raise ProfileAlreadyExists()

    seat_taken = db.query(Profile).filter(
        Profile.event_day == data.event_day.value,
        Profile.event_time == data.event_time.value,
        Profile.gender == data.gender.value,
        Profile.participant_number == data.participant_number,
    ).first()
    if seat_taken:
        raise SeatTaken()

    db_profile = Profile(
        user_id=user.id,
        student_id=user.student_id,
        event_day=data.event_day.value,
        event_time=data.event_time.value,
        gender=data.gender.value,
        participant_number=data.participant_number,
        phone_number=data.phone_number,
    )
    db.add(db_profile)
    try:
        db.commit()
    except IntegrityError:
        # lost a race on the user or seat constraint
        db.rollback()
        if get_profile_by_user_id(db, user.id):
            raise ProfileAlreadyExists()
        raise SeatTaken()
    db.refresh(db_profile)
    logger.info(
        "Created profile %s for student %s (%s %s, %s #%s)",
        db_profile.id, user.student_id, db_profile.event_day, db_profile.event_time,
        db_profile.gender, db_profile.participant_number,
    )
    return db_profile


def get_vote_candidates(db: Session, profile: Profile) -> List[Profile]:
    """Opposite-gender participants sharing the profile's day and time slot."""
    return (
        db.query(Profile)
        .filter(
            Profile.event_day == profile.event_day,
            Profile.event_time == profile.event_time,
            Profile.gender == opposite_gender(Gender(profile.gender)).value,
        )
        .order_by(Profile.participant_number)
        .all()
    )


def list_profiles(db: Session, skip: int = 0, limit: int = 100) -> List[Profile]:
    return (
        db.query(Profile)
        .order_by(Profile.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
