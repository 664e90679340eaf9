# playstore/db/engine.py

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from playstore.config import Settings

LIVENESS_PROBE = text("SELECT 1")


def build_engine(settings: Settings) -> Engine:
    """
    Create the pooled engine shared by every request.

    The pool holds at most DB_CONNECTION_LIMIT connections; callers block
    when all of them are checked out.
    """
    url = settings.database_url
    connect_args = {}

    if url.get_backend_name() == "mysql":
        connect_args["init_command"] = f"SET time_zone = '{settings.DB_TIMEZONE}'"
    elif url.get_backend_name() == "sqlite":
        # connections are checked out and used on different worker threads
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        pool_size=settings.DB_CONNECTION_LIMIT,
        max_overflow=0,
        connect_args=connect_args,
        future=True,
    )


def ping_database(engine: Engine) -> None:
    """Check out one connection, run the liveness probe and return it to the pool."""
    with engine.connect() as conn:
        conn.execute(LIVENESS_PROBE).scalar_one()
