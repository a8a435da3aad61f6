from typing import Generator
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session
from sqlmodel.pool import StaticPool
from app.core.config import DATABASE_URL

if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is not set.")


def build_engine(url: str) -> Engine:
    """Creates the engine backing the preference store.

    SQLite connections are shared with FastAPI's threadpool, and an
    in-memory SQLite database must stay on a single connection or every
    new connection would see an empty database.

    Args:
        url (str): SQLAlchemy database URL.

    Returns:
        Engine: The configured engine.
    """
    if not url.startswith("sqlite"):
        # pool_pre_ping: checks if the connection is alive before using it
        return create_engine(url, pool_pre_ping=True, echo=False)

    kwargs = {"connect_args": {"check_same_thread": False}, "echo": False}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(DATABASE_URL)


def create_db_and_tables(bind: Engine = engine):
    """Creates the preference table if it doesn't exist."""
    SQLModel.metadata.create_all(bind)


def get_session() -> Generator[Session, None, None]:
    """Dependency for FastAPI to get a database session.

    Yields:
        Session: A SQLModel database session.
    """
    with Session(engine) as session:
        yield session
