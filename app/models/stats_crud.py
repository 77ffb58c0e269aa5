from sqlalchemy.orm import Session

from app.models.profile_db.profile_db import Profile
from app.models.user_db.user_db import User
from app.models.vote_db.vote_db import Vote
from app.services.event_options import Gender


def get_stats(db: Session) -> dict:
    return {
        "total_users": db.query(User).count(),
        "total_profiles": db.query(Profile).count(),
        "total_votes": db.query(Vote).count(),
        "male_profiles": db.query(Profile).filter(Profile.gender == Gender.male.value).count(),
        "female_profiles": db.query(Profile).filter(Profile.gender == Gender.female.value).count(),
    }
