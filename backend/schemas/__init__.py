from .game import Game, GameCreate, GameBase
from .user_level import UserLevel
from .health import PingResponse

__all__ = [
    "Game", "GameCreate", "GameBase",
    "UserLevel",
    "PingResponse",
]
