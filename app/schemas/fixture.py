from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional
from datetime import datetime, timezone
from app.models.fixture import FixtureStatus


def _to_utc(v: Optional[datetime]) -> Optional[datetime]:
    # Naive times are taken as UTC
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc)
    return v


class FixtureTeam(BaseModel):
    id: int
    name: str
    age_group: str
    team_color: str

    model_config = ConfigDict(from_attributes=True)


class FixturePitch(BaseModel):
    id: int
    name: str
    address_line1: str
    city: str
    postal_code: str
    map_url: str

    model_config = ConfigDict(from_attributes=True)


class FixtureCreate(BaseModel):
    home_team_id: int
    away_team_id: int
    pitch_id: int
    match_date: datetime
    status: FixtureStatus = FixtureStatus.scheduled
    notes: Optional[str] = None

    @field_validator("match_date")
    @classmethod
    def to_utc(cls, v):
        return _to_utc(v)

    @model_validator(mode="after")
    def check_teams_differ(self):
        if self.home_team_id == self.away_team_id:
            raise ValueError("Home and away teams must be different")
        return self

class FixtureUpdate(BaseModel):
    home_team_id: Optional[int] = None
    away_team_id: Optional[int] = None
    pitch_id: Optional[int] = None
    match_date: Optional[datetime] = None
    status: Optional[FixtureStatus] = None
    notes: Optional[str] = None

    @field_validator("match_date")
    @classmethod
    def to_utc(cls, v):
        return _to_utc(v)

class FixtureResponse(BaseModel):
    id: int
    club_id: int
    home_team_id: int
    away_team_id: int
    pitch_id: int
    match_date: datetime
    status: FixtureStatus
    notes: Optional[str] = None
    home_team: FixtureTeam
    away_team: FixtureTeam
    pitch: FixturePitch
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FixtureEmailRequest(BaseModel):
    template_id: Optional[int] = Field(None, description="Stored template to use; the built-in match notification otherwise")


class FixtureEmailResponse(BaseModel):
    fixture_id: int
    template_id: Optional[int] = None
    subject: str
    html: str
