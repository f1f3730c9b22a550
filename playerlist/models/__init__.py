from sqlalchemy.orm import declarative_base

Base = declarative_base()

from .player import Player
from .match import Match
