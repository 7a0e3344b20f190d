from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin

class Club(Base, TimestampMixin):
    __tablename__ = "club"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    users = relationship("User", back_populates="club")
