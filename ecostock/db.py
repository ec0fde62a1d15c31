from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from .schemas import ConnectionConfig

DRIVER = "postgresql+psycopg2"

Base = declarative_base()

def build_database_url(config: ConnectionConfig) -> URL:
    return URL.create(
        DRIVER,
        username=config.user,
        password=config.password,
        host=config.host,
        port=config.port,
        database=config.database,
    )

def create_db_engine(config: ConnectionConfig) -> Engine:
    """Engine for a one-shot run: no pool, so closing a connection closes the socket."""
    return create_engine(
        build_database_url(config),
        poolclass=NullPool,
        connect_args={"sslmode": config.transport_security.sslmode},
        future=True,
    )

@contextmanager
def connection_scope(engine: Engine):
    """Yield one connection; close it and dispose the engine whatever happens."""
    try:
        with engine.connect() as conn:
            yield conn
    finally:
        engine.dispose()
