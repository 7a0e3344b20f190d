from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator
from typing import Optional


class ProfileResponse(BaseModel):
    id: int
    email: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    club_id: int
    club_name: str
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, max_length=255)
    # Points at an image the client has already uploaded to storage
    avatar_url: Optional[HttpUrl] = None

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v):
        # Only runs when the field is sent; null is not a valid name
        v = (v or "").strip()
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v
