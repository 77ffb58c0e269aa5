from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from app.schemas.vote.vote_base import SlotStatusOut
from app.services.event_options import EventDay, EventTime, Gender


class TimeSlotOut(SlotStatusOut):
    updated_at: Optional[datetime] = None


class ToggleRequest(BaseModel):
    open: bool


class StatsOut(BaseModel):
    total_users: int
    total_profiles: int
    total_votes: int
    male_profiles: int
    female_profiles: int


class AdminProfileOut(BaseModel):
    id: UUID
    student_id: str
    event_day: EventDay
    event_time: EventTime
    gender: Gender
    participant_number: int
    phone_number: str
    created_at: datetime

    class Config:
        from_attributes = True
