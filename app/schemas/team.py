from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from app.models.team import TeamGender, OfficialRole, AGE_GROUPS, DEFAULT_AGE_GROUP, DEFAULT_TEAM_COLOR


def _check_age_group(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in AGE_GROUPS:
        raise ValueError(f"Age group must be one of {', '.join(AGE_GROUPS)}")
    return v


class TeamOfficialCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=255)
    role: OfficialRole = OfficialRole.manager
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)

    @field_validator("email", "phone", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

class TeamOfficialResponse(BaseModel):
    id: int
    team_id: int
    full_name: str
    role: OfficialRole
    # Imported contacts are stored as given, so no email validation here
    email: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    age_group: str = DEFAULT_AGE_GROUP
    gender: TeamGender = TeamGender.boys
    is_opponent: bool = False
    team_color: str = Field(DEFAULT_TEAM_COLOR, max_length=50)
    officials: List[TeamOfficialCreate] = []

    @field_validator("age_group")
    @classmethod
    def validate_age_group(cls, v):
        return _check_age_group(v)

class TeamUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    age_group: Optional[str] = None
    gender: Optional[TeamGender] = None
    is_opponent: Optional[bool] = None
    team_color: Optional[str] = Field(None, max_length=50)
    # When given, replaces every official of the team
    officials: Optional[List[TeamOfficialCreate]] = None

    @field_validator("age_group")
    @classmethod
    def validate_age_group(cls, v):
        return _check_age_group(v)

class TeamResponse(BaseModel):
    id: int
    club_id: int
    created_by: Optional[int] = None
    name: str
    age_group: str
    gender: TeamGender
    is_opponent: bool
    team_color: str
    officials: List[TeamOfficialResponse] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
