from sqlalchemy import Column, Integer, TIMESTAMP, func
from ..models import Base


class Match(Base):
    __tablename__ = "matches"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    played_at = Column(TIMESTAMP, nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.current_timestamp())
