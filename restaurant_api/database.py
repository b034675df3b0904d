"""
Database connection management for the Restaurant Order API
"""

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from typing import Optional
import logging
import os

from restaurant_api.utils.error_handler import InternalError

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./restaurant.db")

Base = declarative_base()

class Database:
    """Store handle with an explicit open/close lifecycle"""

    def __init__(self, url: str):
        self.url = url
        self.engine = None
        self.SessionLocal: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> None:
        """Create the engine and make sure the tables exist"""
        if self.is_open:
            return

        # Register models on Base.metadata before create_all
        from restaurant_api.models import order  # noqa: F401

        connect_args = {"check_same_thread": False} if self.url.startswith("sqlite") else {}
        self.engine = create_engine(self.url, connect_args=connect_args, pool_pre_ping=True)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database connected and tables created/verified")

    def close(self) -> None:
        """Dispose of the engine and its pooled connections"""
        if not self.is_open:
            return
        self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        logger.info("Database connection closed")

    def session(self) -> Session:
        if self.SessionLocal is None:
            raise InternalError("Database not available", "Database connection has not been opened")
        return self.SessionLocal()

def ping(db: Session) -> None:
    """Round-trip a trivial query to check the store is reachable"""
    db.execute(text("SELECT 1"))

database = Database(DATABASE_URL)

def get_db():
    """Dependency yielding one session per request"""
    db = database.session()
    try:
        yield db
    finally:
        db.close()
