import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from ..db import get_player_repository
from ..schemas.player import PlayerRecord
from ..utils.player import PlayerRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/players", tags=["Players"])


@router.get("", response_model=List[PlayerRecord])
def list_players(repo: PlayerRepository = Depends(get_player_repository)):
    try:
        return repo.list_players()
    except SQLAlchemyError as e:
        logger.error(f"Error getting players: {e}")
        raise HTTPException(status_code=500, detail="Error fetching players")
