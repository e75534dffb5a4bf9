import logging
import os

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from taskflow.config import settings
from taskflow.errors import DatabaseError

logger = logging.getLogger(__name__)

# Default to a local SQLite database if no DATABASE_URL is provided
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(BASE_DIR, ".."))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "taskflow.db")


def _build_engine():
    """Create the SQLAlchemy engine, preferring the configured DATABASE_URL."""
    database_url = settings.DATABASE_URL or f"sqlite:///{DEFAULT_DB_PATH}"

    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url, pool_pre_ping=True, pool_recycle=3600)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores REFERENCES clauses unless asked; orphan rows must be rejected.
    if dbapi_connection.__class__.__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = _build_engine()

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for the ORM models
Base = declarative_base()


def get_db():
    """FastAPI dependency: one session per request, rolled back on storage errors."""
    db = SessionLocal()
    try:
        yield db
    except IntegrityError as e:
        db.rollback()
        logger.error(f"DB integrity error: {e}")
        raise DatabaseError("Integrity constraint violated", "commit")
    except OperationalError as e:
        db.rollback()
        logger.error(f"DB operational error: {e}")
        raise DatabaseError("Connection or operational error", "execute")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"SQLAlchemy error: {e}")
        raise DatabaseError("Database operation failed", "unknown")
    finally:
        db.close()


def health_check() -> bool:
    """Check database connectivity."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"DB health check failed: {e}")
        return False
