import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.pool import NullPool

from ecostock.schemas import ConnectionConfig, TransportSecurity

@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(
        user="postgres",
        password="160106",
        host="localhost",
        port=5432,
        database="ecostock",
        transport_security=TransportSecurity.DISABLED,
    )

@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'ecostock.db'}"

@pytest.fixture
def connection_log():
    """Counts DBAPI connections opened and closed by engines registered with ``track``."""
    class ConnectionLog:
        def __init__(self):
            self.opened = 0
            self.closed = 0

        def track(self, engine):
            @event.listens_for(engine, "connect")
            def _on_connect(dbapi_conn, record):
                self.opened += 1

            @event.listens_for(engine, "close")
            def _on_close(dbapi_conn, record):
                self.closed += 1

            return engine

    return ConnectionLog()

@pytest.fixture
def engine_factory(sqlite_url, connection_log):
    """Stands in for ``create_db_engine``: a file-backed SQLite engine, ignoring the config."""
    def factory(config):
        return connection_log.track(create_engine(sqlite_url, poolclass=NullPool, future=True))
    return factory
