"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` and provides small helpers used by the
application and tests. Without configuration the database is a local
SQLite file at the backend root (`app.db`).
"""

from sqlmodel import SQLModel, create_engine, Session
from .config import settings

connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=not settings.is_sqlite,
    connect_args=connect_args,
)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    `create_all` only adds missing tables; existing ones are left as they
    are. Schema changes on a live database are outside this helper.
    """
    # register table models on the metadata before creating
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """Request-scoped session; closed once the endpoint returns."""
    with Session(engine) as session:
        yield session
