from sqlalchemy import Column, Integer, String, Boolean, DateTime, UniqueConstraint
from app.core.database import Base
from datetime import datetime


class TimeSlotSetting(Base):
    __tablename__ = "time_slot_settings"

    id = Column(Integer, primary_key=True, index=True)
    event_day = Column(String, nullable=False)
    event_time = Column(String, nullable=False)
    voting_open = Column(Boolean, nullable=False, default=False)
    results_open = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("event_day", "event_time", name="uq_time_slot"),
    )
