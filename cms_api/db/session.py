import logging
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from cms_api.core.config import Settings
from cms_api.db.base import Base

logger = logging.getLogger(__name__)


def _new_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, future=True, pool_pre_ping=True, connect_args=connect_args)


class Database:
    """Engine and session factory owned by one application instance."""

    def __init__(self, database_url: str) -> None:
        self.engine = _new_engine(database_url)
        self.session_factory: sessionmaker[Session] = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url)

    def session(self) -> Session:
        return self.session_factory()

    def create_schema(self) -> None:
        from cms_api import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema is ready.")

    def drop_schema(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.debug("Database engine disposed.")


def get_db(request: Request) -> Iterator[Session]:
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
