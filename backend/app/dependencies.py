from typing import Generator
from sqlalchemy.engine import Engine
from backend.db.session import engine

# Dependency to get the DB handle. The engine uses NullPool, so each CRUD call
# opens and releases its own connection.
def get_db() -> Generator[Engine, None, None]:
    yield engine
