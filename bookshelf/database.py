import logging
from typing import Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from bookshelf.config import DATABASE_URL, DEVELOPMENT, ENV, SQLITE_PATH

logger = logging.getLogger(__name__)

# Create Base class
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def normalize_database_url(url: str) -> str:
    """Rewrite Heroku style ``postgres://`` URLs into a scheme SQLAlchemy accepts."""
    url = (url or "").strip()
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


class Database:
    """Process-wide handle on the relational store.

    Built once at startup and shared by every request through ``get_db``.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = make_url(url)
        self.engine: Engine = create_engine(url, **engine_kwargs)
        if self.url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self):
        return self.SessionLocal()

    def check_connection(self):
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_tables(self):
        # Models must be imported so their tables are registered on Base
        from bookshelf.models import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def sync(self):
        from bookshelf.models import models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()


def sqlite_database(path: str = SQLITE_PATH) -> Database:
    return Database(f"sqlite:///{path}", connect_args={"check_same_thread": False})


def remote_database(url: Optional[str] = DATABASE_URL) -> Database:
    url = normalize_database_url(url)
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    # TLS is mandatory but the server certificate is not verified
    return Database(url, connect_args={"sslmode": "require"}, pool_pre_ping=True)


def build_database(
    env: str = ENV,
    database_url: Optional[str] = DATABASE_URL,
    sqlite_path: str = SQLITE_PATH,
) -> Database:
    if env == DEVELOPMENT:
        logger.info(f"Using local SQLite store at {sqlite_path}")
        return sqlite_database(sqlite_path)
    logger.info("Using remote store from DATABASE_URL")
    return remote_database(database_url)


# Dependency
def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
