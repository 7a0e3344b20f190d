from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class ClubInviteRequest(BaseModel):
    club_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    full_name: Optional[str] = None


class ClubInviteResponse(BaseModel):
    club_id: int
    club_name: str
    user_id: int
    user_email: str
