import enum
from sqlalchemy import Column, Integer, ForeignKey, Enum, DateTime, Text
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin


class FixtureStatus(str, enum.Enum):
    scheduled = "scheduled"
    completed = "completed"
    cancelled = "cancelled"
    postponed = "postponed"


class Fixture(Base, TimestampMixin):
    __tablename__ = "fixture"

    id = Column(Integer, primary_key=True, index=True)
    club_id = Column(Integer, ForeignKey("club.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    home_team_id = Column(Integer, ForeignKey("team.id", ondelete="CASCADE"), nullable=False)
    away_team_id = Column(Integer, ForeignKey("team.id", ondelete="CASCADE"), nullable=False)
    pitch_id = Column(Integer, ForeignKey("pitch.id", ondelete="RESTRICT"), nullable=False)
    match_date = Column(DateTime(timezone=True), nullable=False, index=True)
    status = Column(Enum(FixtureStatus), nullable=False, default=FixtureStatus.scheduled)
    notes = Column(Text, nullable=True)

    home_team = relationship("Team", foreign_keys=[home_team_id])
    away_team = relationship("Team", foreign_keys=[away_team_id])
    pitch = relationship("Pitch")
