from sqlalchemy import Column, Integer, String, ForeignKey, Text
from app.database import Base, TimestampMixin

DEFAULT_TEMPLATE_TYPE = "match_notification"


class EmailTemplate(Base, TimestampMixin):
    __tablename__ = "email_template"

    id = Column(Integer, primary_key=True, index=True)
    club_id = Column(Integer, ForeignKey("club.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    subject = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    template_type = Column(String, nullable=False, default=DEFAULT_TEMPLATE_TYPE)
