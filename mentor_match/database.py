# mentor_match/database.py
import logging
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import StaticPool
from .config import get_settings

logger = logging.getLogger(__name__)

def get_database_url():
    settings = get_settings()
    if settings.DATABASE_URL:
        return make_url(settings.DATABASE_URL)
    return URL.create(
        "postgresql+psycopg2",
        username=settings.POSTGRES_USER,
        password=settings.POSTGRES_PASSWORD,
        host=settings.POSTGRES_HOST,
        port=settings.POSTGRES_PORT,
        database=settings.POSTGRES_DB,
    )

def get_engine():
    settings = get_settings()
    database_url = get_database_url()

    if database_url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live inside one connection; share it across threads
        if database_url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_engine(database_url, **kwargs)

        @event.listens_for(sqlite_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return sqlite_engine

    return create_engine(
        database_url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )

# Create the SQLAlchemy engine globally after defining get_engine
engine = get_engine()

# Create a SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for declarative models
Base = declarative_base()

# Dependency to get a DB session
def get_db():
    """Provides a database session for a request and closes it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Helper function to create all tables
def create_db_and_tables():
    """Creates all defined database tables."""
    from . import models  # noqa: F401 - register tables on Base.metadata
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created or already exist.")

if __name__ == "__main__":
    create_db_and_tables()
