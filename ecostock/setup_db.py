"""
Bootstrap the EcoStock database.

Resolves DATABASE_URL, makes sure the ``users`` table exists and seeds the
test account when it is missing. Safe to run repeatedly.
Exit code 0 = OK, 1 = configuration or database error.
"""
import logging
import sys

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable

from .config import get_settings, parse_database_url
from .db import connection_scope, create_db_engine
from .exceptions import DatabaseError, handle_setup_exceptions
from .models import User
from .schemas import ConnectionConfig, SeedUser

logger = logging.getLogger(__name__)

# Plain-text password; only usable against a server that compares plain text.
TEST_USER = SeedUser(
    email="teste@ecostock.com",
    password_hash="123456",
    name="Admin Teste",
)


def setup_logging(level: str = "INFO"):
    """Configure root logging on stdout; an unknown level falls back to INFO."""
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(
        level=resolved,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    if resolved == logging.INFO and level.upper() != "INFO":
        logger.warning(f"Unknown LOG_LEVEL '{level}', using INFO")
    return logger


def ensure_users_table(conn: Connection) -> None:
    conn.execute(CreateTable(User.__table__, if_not_exists=True))
    conn.commit()
    logger.info("[SETUP] Table 'users' verified/created.")


def seed_test_user(conn: Connection, user: SeedUser = TEST_USER) -> bool:
    """Insert ``user`` unless a row with the same email exists. Returns True if inserted."""
    existing = conn.execute(select(User.id).where(User.email == user.email)).first()
    if existing is not None:
        logger.info(f"[SETUP] User '{user.email}' already exists. Skipping insertion.")
        return False

    conn.execute(
        insert(User).values(
            email=user.email,
            password_hash=user.password_hash,
            name=user.name,
        )
    )
    conn.commit()
    logger.info(f"[SETUP] Test user '{user.email}' inserted (password: {user.password_hash}).")
    logger.warning(
        "The password was stored as plain text. Login will only work if the server "
        "compares passwords in plain text instead of checking a hash."
    )
    return True


def setup_database(config: ConnectionConfig, engine_factory=create_db_engine) -> None:
    """Connect, ensure the schema, seed the test user, then release the connection."""
    step = "connect"
    try:
        with connection_scope(engine_factory(config)) as conn:
            logger.info("[SETUP] Database connection established.")
            step = "create_users_table"
            ensure_users_table(conn)
            step = "seed_test_user"
            seed_test_user(conn)
    except SQLAlchemyError as e:
        raise DatabaseError(step, str(e)) from e

    logger.info("[SETUP] Database initialized successfully.")


@handle_setup_exceptions
def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("[SETUP] Starting database setup...")

    config = parse_database_url(settings.database_url)
    setup_database(config)
    return 0
