import logging
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from backend.app.exceptions import NullArgumentError
from backend.schemas import game as game_schema
from backend.schemas import user_level as user_level_schema

logger = logging.getLogger(__name__)

# Stored procedures are the whole contract with the database; names are kept as deployed.
SP_GET_GAMES = "spGetGames"
SP_GET_GAME = "spGetAGame"
SP_GET_USER_LEVEL = "spGetUserLevel"
SP_INSERT_GAME = "spInsertWidget"
SP_UPDATE_GAME = "spUpdateGame"
SP_DELETE_GAME = "spDeleteGame"

# spGetAGame returns two leading columns ahead of the game fields
GAME_BY_ID_OFFSET = 2


# NULL columns fail model validation; price may arrive as DECIMAL
def _row_to_game(row, offset: int = 0) -> game_schema.Game:
    return game_schema.Game(
        id=row[offset],
        title=row[offset + 1],
        description=row[offset + 2],
        rating=row[offset + 3],
        price=float(row[offset + 4]),
    )


# --- CRUD for Game ---
def get_games(db: Engine) -> List[game_schema.Game]:
    """Every game, in the order the procedure returns them. Never None."""
    games: List[game_schema.Game] = []
    logger.debug("Calling %s", SP_GET_GAMES)
    try:
        with db.connect() as conn:
            rows = conn.execute(text(f"CALL {SP_GET_GAMES}()")).all()
            for row in rows:
                games.append(_row_to_game(row))
    except SQLAlchemyError:
        logger.exception("%s failed", SP_GET_GAMES)
        raise
    return games


def get_game_by_id(db: Engine, game_id: int) -> Optional[game_schema.Game]:
    logger.debug("Calling %s for game %s", SP_GET_GAME, game_id)
    try:
        with db.connect() as conn:
            row = conn.execute(text(f"CALL {SP_GET_GAME}(:aid)"), {"aid": game_id}).first()
    except SQLAlchemyError:
        logger.exception("%s failed for game %s", SP_GET_GAME, game_id)
        raise
    if row is None:
        return None
    return _row_to_game(row, offset=GAME_BY_ID_OFFSET)


def get_user_level_by_key(db: Engine, key: Optional[str]) -> Optional[user_level_schema.UserLevel]:
    """Look up a user level by its key (GUID). Returns None when the key is unknown."""
    if not key:
        raise NullArgumentError("Username or Password can not be null.")

    logger.debug("Calling %s", SP_GET_USER_LEVEL)
    try:
        with db.connect() as conn:
            row = conn.execute(text(f"CALL {SP_GET_USER_LEVEL}(:aUserKey)"), {"aUserKey": key}).first()
    except SQLAlchemyError:
        logger.exception("%s failed", SP_GET_USER_LEVEL)
        raise
    if row is None:
        return None
    return user_level_schema.UserLevel(title=row[0], id=row[1])


def insert_game(db: Engine, game: Optional[game_schema.GameCreate]) -> Optional[game_schema.Game]:
    """
    Insert a game through spInsertWidget.

    The procedure reports the generated id through its OUT parameter, which is
    read back but not used: the returned game echoes the caller's fields,
    including the caller's id. Returns None when no row was affected.
    """
    if game is None:
        raise NullArgumentError("Game can not be null.")

    params = {
        "gId": game.id,
        "gTitle": game.title,
        "gDescription": game.description,
        "gRating": game.rating,
        "gPrice": game.price,
    }
    logger.debug("Calling %s for game %s", SP_INSERT_GAME, game.id)
    try:
        with db.begin() as conn:
            result = conn.execute(
                text(f"CALL {SP_INSERT_GAME}(:gId, :gTitle, :gDescription, :gRating, :gPrice, @aid)"),
                params,
            )
            count = result.rowcount
            generated_id = conn.execute(text("SELECT @aid")).scalar()
    except SQLAlchemyError:
        logger.exception("%s failed for game %s", SP_INSERT_GAME, game.id)
        raise

    logger.debug("%s affected %s row(s), generated id %s", SP_INSERT_GAME, count, generated_id)
    if count > 0:
        return game_schema.Game(
            id=game.id,
            title=game.title,
            description=game.description,
            rating=game.rating,
            price=game.price,
        )
    return None


def update_game(db: Engine, game_id: int, game: Optional[game_schema.GameBase]) -> int:
    """Returns the affected-row count; 0 means no game has that id."""
    if game is None:
        raise NullArgumentError("Game can not be null.")

    params = {
        "gid": game_id,
        "gtitle": game.title,
        "gdescription": game.description,
        "grating": game.rating,
        "gprice": game.price,
    }
    logger.debug("Calling %s for game %s", SP_UPDATE_GAME, game_id)
    try:
        with db.begin() as conn:
            result = conn.execute(
                text(f"CALL {SP_UPDATE_GAME}(:gid, :gtitle, :gdescription, :grating, :gprice)"),
                params,
            )
            return result.rowcount
    except SQLAlchemyError:
        logger.exception("%s failed for game %s", SP_UPDATE_GAME, game_id)
        raise


def delete_game(db: Engine, game_id: int) -> int:
    logger.debug("Calling %s for game %s", SP_DELETE_GAME, game_id)
    try:
        with db.begin() as conn:
            result = conn.execute(text(f"CALL {SP_DELETE_GAME}(:aid)"), {"aid": game_id})
            return result.rowcount
    except SQLAlchemyError:
        logger.exception("%s failed for game %s", SP_DELETE_GAME, game_id)
        raise
