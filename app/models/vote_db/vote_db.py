from sqlalchemy import Column, ForeignKey, Integer, DateTime, Uuid, UniqueConstraint
from app.core.database import Base
from datetime import datetime


class Vote(Base):
    __tablename__ = "votes"

    id = Column(Integer, primary_key=True, index=True)
    voter_profile_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    voted_for_profile_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("voter_profile_id", "voted_for_profile_id", name="uq_vote_once_per_target"),
    )
