from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from app.database import Base, TimestampMixin, JSONType


class UserColumnMapping(Base, TimestampMixin):
    """
    Stores a club's default column mapping for bulk imports.

    Saved mappings are applied automatically to future uploads of the same
    entity type, before fuzzy header detection runs.
    """
    __tablename__ = "user_column_mapping"

    id = Column(Integer, primary_key=True, index=True)
    club_id = Column(Integer, ForeignKey("club.id", ondelete="CASCADE"), nullable=False)
    entity_type = Column(String, nullable=False)  # "team"
    mapping_config = Column(JSONType, nullable=False)  # {"field_identifier": "csv_header"}

    __table_args__ = (
        UniqueConstraint('club_id', 'entity_type', name='uix_club_entity_mapping'),
    )
