from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class PlayerRecord(BaseModel):
    id: int
    name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
