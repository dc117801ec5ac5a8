"""
Database configuration and session management for the Skill Sphere backend.

Sets up the SQLAlchemy engine, session factory, and base model. The engine
and session factory are built by the application factory and kept on
``app.state``; nothing here is created at import time.
"""

from typing import Generator
import logging

from fastapi import Request
from sqlalchemy import MetaData, create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings


# Configure logging
logger = logging.getLogger(__name__)


# SQLAlchemy metadata conventions for better constraint naming
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


# Base class for models
Base = declarative_base(metadata=metadata)


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.

    Args:
        settings: Application settings

    Returns:
        Engine: SQLAlchemy engine
    """
    url = settings.DATABASE_URL
    if settings.is_sqlite:
        if url in ("sqlite://", "sqlite:///:memory:"):
            # In-memory database shared across threads
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=settings.DEBUG,
            )
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=settings.DEBUG,
        )

    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,        # Number of connections to maintain
        max_overflow=20,     # Maximum overflow connections
        echo=settings.DEBUG, # Log SQL statements if in debug mode
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """
    Create all tables that do not exist yet.

    Args:
        engine: SQLAlchemy engine
    """
    # Import models to ensure they're registered
    from skillsphere import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def check_database_connection(engine: Engine) -> bool:
    """
    Check if database is accessible.

    Returns:
        bool: True if database is accessible, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False
