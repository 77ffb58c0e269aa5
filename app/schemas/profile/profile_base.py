from uuid import UUID
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field, field_validator

from app.core.config import settings
from app.services.event_options import EventDay, EventTime, Gender


class ProfileBase(BaseModel):
    event_day: EventDay
    event_time: EventTime
    gender: Gender
    participant_number: int = Field(..., ge=1)


class ProfileCreate(ProfileBase):
    phone_number: str = Field(..., min_length=1, max_length=32)

    @field_validator("participant_number")
    @classmethod
    def check_participant_number(cls, value: int) -> int:
        if value > settings.MAX_PARTICIPANT_NUMBER:
            raise ValueError(f"participant_number must be at most {settings.MAX_PARTICIPANT_NUMBER}")
        return value

    @field_validator("phone_number")
    @classmethod
    def strip_phone_number(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("phone_number must not be blank")
        return value


class ProfileOut(ProfileBase):
    id: UUID
    student_id: str
    phone_number: str
    created_at: datetime

    class Config:
        from_attributes = True


class ProfileOptions(BaseModel):
    event_days: List[EventDay]
    event_times: List[EventTime]
    genders: List[Gender]
    participant_numbers: List[int]
