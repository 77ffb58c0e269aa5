import uuid
from sqlalchemy import Column, ForeignKey, String, Integer, DateTime, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base
from datetime import datetime


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)
    student_id = Column(String, nullable=False)

    event_day = Column(String, nullable=False)
    event_time = Column(String, nullable=False)
    gender = Column(String, nullable=False)
    participant_number = Column(Integer, nullable=False)
    phone_number = Column(String, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="profile")

    __table_args__ = (
        UniqueConstraint(
            "event_day", "event_time", "gender", "participant_number",
            name="uq_profile_seat_per_slot",
        ),
    )
