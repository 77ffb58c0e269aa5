from uuid import UUID
from typing import List
from pydantic import BaseModel

from app.services.event_options import EventDay, EventTime, Gender


class VoteSubmission(BaseModel):
    target_ids: List[UUID]


class VoteSetOut(BaseModel):
    target_ids: List[UUID]


class CandidateOut(BaseModel):
    id: UUID
    participant_number: int
    gender: Gender

    class Config:
        from_attributes = True


class MatchedPeer(BaseModel):
    profile_id: UUID
    participant_number: int
    gender: Gender
    event_day: EventDay
    event_time: EventTime
    phone_number: str


class SlotStatusOut(BaseModel):
    event_day: EventDay
    event_time: EventTime
    voting_open: bool
    results_open: bool

    class Config:
        from_attributes = True
