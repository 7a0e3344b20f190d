import enum
from sqlalchemy import Column, Integer, String, ForeignKey, Enum
from app.database import Base, TimestampMixin, JSONType


class ImportRunStatus(str, enum.Enum):
    pending = "pending"
    completed = "completed"


class TeamImport(Base, TimestampMixin):
    """
    Audit record written once per team import commit attempt.

    It is a log entry, not part of the import's transaction: it is
    committed before any team is written and is never rolled back.
    """
    __tablename__ = "team_import"

    id = Column(Integer, primary_key=True, index=True)
    club_id = Column(Integer, ForeignKey("club.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=False)
    file_name = Column(String, nullable=False)
    field_mappings = Column(JSONType, nullable=True)  # {"name": "Club", "contact_name": "Manager"}
    status = Column(Enum(ImportRunStatus), nullable=False, default=ImportRunStatus.pending)
    total_rows = Column(Integer, nullable=True)
    processed_rows = Column(Integer, nullable=True)
    failed_rows = Column(Integer, nullable=True)


class TeamImportSession(Base, TimestampMixin):
    """
    Server-side state of an in-progress import (uploaded table, mapping,
    candidates under review, bulk defaults). Deleted once the import is done.
    """
    __tablename__ = "team_import_session"

    id = Column(Integer, primary_key=True, index=True)
    club_id = Column(Integer, ForeignKey("club.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=False)
    file_name = Column(String, nullable=False)
    state = Column(String, nullable=False)
    payload = Column(JSONType, nullable=False)
