import asyncio
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError

from ..db import get_player_repository, get_templates
from ..utils.player import PlayerRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])

LOAD_CONTENT_DELAY_SECONDS = 0.5


def kitchen_time(moment: datetime) -> str:
    """12-hour clock without a leading zero, e.g. 3:04PM."""
    return moment.strftime("%I:%M%p").lstrip("0")


@router.get("/", response_class=HTMLResponse)
def player_list_page(
    request: Request,
    repo: PlayerRepository = Depends(get_player_repository),
    templates: Jinja2Templates = Depends(get_templates),
):
    try:
        players = repo.list_players()
    except SQLAlchemyError as e:
        logger.error(f"Error getting players: {e}")
        return PlainTextResponse("Error fetching players", status_code=500)

    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": "Player List", "players": players},
    )


@router.get("/load-content", response_class=HTMLResponse)
async def load_content():
    await asyncio.sleep(LOAD_CONTENT_DELAY_SECONDS)
    return HTMLResponse(f"<p>Content loaded via HTMX at {kitchen_time(datetime.now())}</p>")
