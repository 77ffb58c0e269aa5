import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import TimeSlotNotFound
from app.models.time_slot_db.time_slot_db import TimeSlotSetting
from app.services.event_options import EventDay, EventTime, all_time_slots

logger = logging.getLogger(__name__)

DAY_ORDER = {day.value: index for index, day in enumerate(EventDay)}


def seed_time_slots(db: Session) -> int:
    existing = {(s.event_day, s.event_time) for s in db.query(TimeSlotSetting).all()}
    created = 0
    for day, time in all_time_slots():
        if (day.value, time.value) in existing:
            continue
        db.add(TimeSlotSetting(event_day=day.value, event_time=time.value))
        created += 1
    db.commit()
    if created:
        logger.info("Seeded %d time slot(s)", created)
    return created


def get_time_slot(db: Session, event_day: str, event_time: str):
    return (
        db.query(TimeSlotSetting)
        .filter(
            TimeSlotSetting.event_day == event_day,
            TimeSlotSetting.event_time == event_time,
        )
        .first()
    )


def list_time_slots(db: Session) -> List[TimeSlotSetting]:
    slots = db.query(TimeSlotSetting).all()
    return sorted(slots, key=lambda s: (DAY_ORDER.get(s.event_day, len(DAY_ORDER)), s.event_time))


def set_voting_open(db: Session, day: EventDay, time: EventTime, is_open: bool) -> TimeSlotSetting:
    slot = get_time_slot(db, day.value, time.value)
    if not slot:
        raise TimeSlotNotFound()
    slot.voting_open = is_open
    slot.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(slot)
    logger.info("Voting for %s %s is now %s", day.value, time.value, "open" if is_open else "closed")
    return slot


def set_results_open(db: Session, day: EventDay, time: EventTime, is_open: bool) -> TimeSlotSetting:
    slot = get_time_slot(db, day.value, time.value)
    if not slot:
        raise TimeSlotNotFound()
    slot.results_open = is_open
    slot.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(slot)
    logger.info("Results for %s %s are now %s", day.value, time.value, "open" if is_open else "closed")
    return slot
