import os
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool
from dotenv import load_dotenv

# Load .env file if it exists (for local development outside Docker)
load_dotenv()

# Default to the local MySQL instance if DATABASE_URL env var is not set.
# Ensure this URL uses the pymysql driver
DATABASE_URL = os.getenv("DATABASE_URL", "mysql+pymysql://root:@localhost:3306/WebGame")


def build_engine(database_url: str = DATABASE_URL) -> Engine:
    # NullPool: every data-access call opens its own connection and closes it on exit
    return create_engine(database_url, poolclass=NullPool)


engine = build_engine()
