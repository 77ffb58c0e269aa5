from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.security import get_current_user, get_current_profile
from app.models.profile_db.profile_crud import create_profile
from app.models.profile_db.profile_db import Profile
from app.models.user_db.user_db import User
from app.schemas.profile.profile_base import ProfileCreate, ProfileOut, ProfileOptions
from app.services.event_options import EventDay, EventTime, Gender

profile_router = APIRouter(prefix="/profiles", tags=["Profiles"])


@profile_router.get("/options", response_model=ProfileOptions)
def get_options():
    return ProfileOptions(
        event_days=list(EventDay),
        event_times=list(EventTime),
        genders=list(Gender),
        participant_numbers=list(range(1, settings.MAX_PARTICIPANT_NUMBER + 1)),
    )


@profile_router.post("", response_model=ProfileOut, status_code=201)
def register_profile(
    data: ProfileCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return create_profile(db, current_user, data)


@profile_router.get("/me", response_model=ProfileOut)
def get_my_profile(profile: Profile = Depends(get_current_profile)):
    return profile
