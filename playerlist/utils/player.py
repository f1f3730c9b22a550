import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import String, select, type_coerce
from sqlalchemy.orm import sessionmaker

from ..models.player import Player
from ..schemas.player import PlayerRecord

logger = logging.getLogger(__name__)

CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_created_at(value: Optional[str]) -> datetime:
    """
    Parse a stored creation timestamp ("YYYY-MM-DD HH:MM:SS", as written
    by CURRENT_TIMESTAMP). Raises ValueError for anything else.
    """
    if value is None:
        raise ValueError("timestamp is NULL")
    return datetime.strptime(value, CREATED_AT_FORMAT)


class PlayerRepository:
    """Read access to the players table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list_players(self) -> List[PlayerRecord]:
        """
        All players ordered by name (storage collation decides case handling).

        A row whose created_at does not parse is kept with created_at=None.
        Query or iteration errors propagate; nothing partial is returned.
        """
        # created_at comes back as the raw stored string, not a driver-parsed datetime
        stmt = (
            select(Player.id, Player.name, type_coerce(Player.created_at, String).label("created_at"))
            .order_by(Player.name)
        )
        with self._session_factory() as db:
            rows = db.execute(stmt).all()

        players: List[PlayerRecord] = []
        for row in rows:
            created_at = None
            try:
                created_at = parse_created_at(row.created_at)
            except (TypeError, ValueError) as e:
                logger.warning(
                    f"Could not parse timestamp '{row.created_at}' for player {row.id}: {e}"
                )
            players.append(PlayerRecord(id=row.id, name=row.name, created_at=created_at))
        return players
