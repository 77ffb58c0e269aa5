import logging
from typing import Iterable, List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidVoteTarget, MatchLookupFailed, VoteSubmissionFailed
from app.models.profile_db.profile_db import Profile
from app.models.vote_db.vote_db import Vote
from app.services.event_options import opposite_gender, Gender

logger = logging.getLogger(__name__)


def get_voted_target_ids(db: Session, profile: Profile) -> List[UUID]:
    rows = (
        db.query(Vote.voted_for_profile_id)
        .filter(Vote.voter_profile_id == profile.id)
        .all()
    )
    return [row[0] for row in rows]


def _validate_targets(db: Session, profile: Profile, target_ids: List[UUID]):
    if not target_ids:
        return
    if profile.id in target_ids:
        raise InvalidVoteTarget("자기 자신에게는 투표할 수 없습니다.")

    targets = db.query(Profile).filter(Profile.id.in_(target_ids)).all()
    if len(targets) != len(target_ids):
        raise InvalidVoteTarget("존재하지 않는 참가자가 포함되어 있습니다.")

    wanted_gender = opposite_gender(Gender(profile.gender)).value
    for target in targets:
        if (
            target.gender != wanted_gender
            or target.event_day != profile.event_day
            or target.event_time != profile.event_time
        ):
            raise InvalidVoteTarget()


def submit_votes(db: Session, profile: Profile, target_ids: Iterable[UUID]) -> List[UUID]:
    """
    Replace the profile's whole outgoing vote set with ``target_ids``.

    The delete and the inserts share one transaction, so concurrent readers
    see either the old set or the new one.
    """
    unique_ids = list(dict.fromkeys(target_ids))

    try:
        _validate_targets(db, profile, unique_ids)
        db.query(Vote).filter(Vote.voter_profile_id == profile.id).delete(synchronize_session=False)
        for target_id in unique_ids:
            db.add(Vote(voter_profile_id=profile.id, voted_for_profile_id=target_id))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Vote submission failed for profile %s", profile.id)
        raise VoteSubmissionFailed()

    logger.info("Profile %s submitted %d vote(s)", profile.id, len(unique_ids))
    return unique_ids


def resolve_matches(db: Session, profile: Profile) -> List[Profile]:
    """
    Return the profiles whose interest in ``profile`` is mutual.

    1. targets the caller voted for
    2. of those, the ones who voted for the caller
    3. their profiles, by seat number

    Stops early with an empty list when a stage comes back empty.
    """
    try:
        targets = get_voted_target_ids(db, profile)
        if not targets:
            return []

        rows = (
            db.query(Vote.voter_profile_id)
            .filter(
                Vote.voted_for_profile_id == profile.id,
                Vote.voter_profile_id.in_(targets),
            )
            .all()
        )
        reciprocated = [row[0] for row in rows]
        if not reciprocated:
            return []

        return (
            db.query(Profile)
            .filter(Profile.id.in_(reciprocated))
            .order_by(Profile.participant_number)
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Match lookup failed for profile %s", profile.id)
        raise MatchLookupFailed()
