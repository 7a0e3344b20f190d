import enum
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin


class TeamGender(str, enum.Enum):
    boys = "boys"
    girls = "girls"
    mixed = "mixed"


class OfficialRole(str, enum.Enum):
    manager = "manager"
    coach = "coach"
    assistant_manager = "assistant_manager"
    fixtures_secretary = "fixtures_secretary"
    other = "other"


DEFAULT_TEAM_COLOR = "blue"

AGE_GROUPS = [f"U{age}" for age in range(8, 19)]
DEFAULT_AGE_GROUP = "U12"


class Team(Base, TimestampMixin):
    __tablename__ = "team"

    id = Column(Integer, primary_key=True, index=True)
    club_id = Column(Integer, ForeignKey("club.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    name = Column(String, nullable=False)
    age_group = Column(String, nullable=False)
    gender = Column(Enum(TeamGender), nullable=False, default=TeamGender.boys)
    is_opponent = Column(Boolean, nullable=False, default=False)
    team_color = Column(String, nullable=False, default=DEFAULT_TEAM_COLOR)

    officials = relationship(
        "TeamOfficial",
        back_populates="team",
        cascade="all, delete-orphan",
        order_by="TeamOfficial.id",
    )


class TeamOfficial(Base, TimestampMixin):
    __tablename__ = "team_official"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("team.id", ondelete="CASCADE"), nullable=False, index=True)
    full_name = Column(String, nullable=False)
    role = Column(Enum(OfficialRole), nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)

    team = relationship("Team", back_populates="officials")
