# Expose the stored-procedure CRUD functions

from .games import (
    get_games,
    get_game_by_id,
    get_user_level_by_key,
    insert_game,
    update_game,
    delete_game,
)


__all__ = [
    # Games
    "get_games",
    "get_game_by_id",
    "get_user_level_by_key",
    "insert_game",
    "update_game",
    "delete_game",
]
