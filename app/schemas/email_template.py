from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from app.models.email_template import DEFAULT_TEMPLATE_TYPE


class EmailTemplateCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    subject: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    template_type: str = DEFAULT_TEMPLATE_TYPE

class EmailTemplateUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    subject: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    template_type: Optional[str] = None

class EmailTemplateResponse(EmailTemplateCreate):
    id: int
    club_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TemplateField(BaseModel):
    """A placeholder available to templates, e.g. {{home_team.name}}"""
    field: str
    description: str
