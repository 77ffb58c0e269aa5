from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import UserNotFound
from app.core.security import get_current_admin
from app.models.profile_db.profile_crud import list_profiles
from app.models.profile_db.profile_db import Profile
from app.models.stats_crud import get_stats
from app.models.time_slot_db.time_slot_crud import list_time_slots, set_voting_open, set_results_open
from app.models.user_db.user_db_crud import make_user_admin
from app.schemas.admin.admin_base import AdminProfileOut, StatsOut, TimeSlotOut, ToggleRequest
from app.schemas.auth.auth_base import UserOut
from app.schemas.common.page_response import PageResponse
from app.services.event_options import EventDay, EventTime

admin_router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(get_current_admin)])


@admin_router.get("/time-slots", response_model=List[TimeSlotOut])
def get_time_slots(db: Session = Depends(get_db)):
    return list_time_slots(db)


@admin_router.put("/time-slots/{event_day}/{event_time}/voting", response_model=TimeSlotOut)
def toggle_voting(event_day: EventDay, event_time: EventTime, data: ToggleRequest, db: Session = Depends(get_db)):
    return set_voting_open(db, event_day, event_time, data.open)


@admin_router.put("/time-slots/{event_day}/{event_time}/results", response_model=TimeSlotOut)
def toggle_results(event_day: EventDay, event_time: EventTime, data: ToggleRequest, db: Session = Depends(get_db)):
    return set_results_open(db, event_day, event_time, data.open)


@admin_router.get("/stats", response_model=StatsOut)
def stats(db: Session = Depends(get_db)):
    return get_stats(db)


@admin_router.get("/profiles", response_model=PageResponse[AdminProfileOut])
def get_profiles(
    page: int = Query(1, ge=1),
    size: int = Query(50, ge=1),
    db: Session = Depends(get_db)
):
    skip = (page - 1) * size
    total = db.query(Profile).count()
    profiles = list_profiles(db, skip=skip, limit=size)

    has_next = (page * size) < total
    has_prev = page > 1

    return PageResponse[AdminProfileOut](
        page=page,
        size=size,
        total=total,
        has_next=has_next,
        has_prev=has_prev,
        items=[AdminProfileOut.model_validate(p) for p in profiles]
    )


@admin_router.put("/users/{student_id}/admin", response_model=UserOut)
def grant_admin(student_id: str, db: Session = Depends(get_db)):
    user = make_user_admin(db, student_id)
    if not user:
        raise UserNotFound()
    return user
