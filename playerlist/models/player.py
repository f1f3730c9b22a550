from sqlalchemy import Column, Integer, String, TIMESTAMP, func
from ..models import Base


class Player(Base):
    __tablename__ = "players"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    created_at = Column(TIMESTAMP, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Player(id={self.id}, name={self.name})>"
