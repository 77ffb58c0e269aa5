from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import VotingClosed, ResultsClosed
from app.core.security import get_current_profile
from app.models.profile_db.profile_crud import get_vote_candidates
from app.models.profile_db.profile_db import Profile
from app.models.time_slot_db.time_slot_crud import get_time_slot
from app.models.vote_db.vote_crud import get_voted_target_ids, submit_votes, resolve_matches
from app.schemas.vote.vote_base import (
    CandidateOut,
    MatchedPeer,
    SlotStatusOut,
    VoteSetOut,
    VoteSubmission,
)

vote_router = APIRouter(prefix="/votes", tags=["Votes"])


def slot_status_for(db: Session, profile: Profile) -> SlotStatusOut:
    slot = get_time_slot(db, profile.event_day, profile.event_time)
    if not slot:
        return SlotStatusOut(
            event_day=profile.event_day,
            event_time=profile.event_time,
            voting_open=False,
            results_open=False,
        )
    return SlotStatusOut.model_validate(slot)


@vote_router.get("/status", response_model=SlotStatusOut)
def get_status(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    return slot_status_for(db, profile)


@vote_router.get("/candidates", response_model=List[CandidateOut])
def list_candidates(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    return get_vote_candidates(db, profile)


@vote_router.get("", response_model=VoteSetOut)
def get_my_votes(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    return VoteSetOut(target_ids=get_voted_target_ids(db, profile))


@vote_router.put("", response_model=VoteSetOut)
def replace_my_votes(
    payload: VoteSubmission,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db)
):
    if not slot_status_for(db, profile).voting_open:
        raise VotingClosed()
    return VoteSetOut(target_ids=submit_votes(db, profile, payload.target_ids))


@vote_router.get("/matches", response_model=List[MatchedPeer])
def get_matches(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    if not profile.user.is_admin and not slot_status_for(db, profile).results_open:
        raise ResultsClosed()

    return [
        MatchedPeer(
            profile_id=peer.id,
            participant_number=peer.participant_number,
            gender=peer.gender,
            event_day=peer.event_day,
            event_time=peer.event_time,
            phone_number=peer.phone_number,
        )
        for peer in resolve_matches(db, profile)
    ]
