from typing import Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from chama.core.config import DATABASE_URL, SQL_ECHO

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_store_engine(database_url: Optional[str] = None, echo: bool = SQL_ECHO) -> Engine:
    """Builds the engine backing one store instance.

    In-memory SQLite needs a single shared connection, otherwise every new
    connection would see an empty database. The shared connection also means
    concurrent requests share one transaction scope, so a commit or rollback in
    one session can reach another session's unfinished work.
    """
    url = database_url or DATABASE_URL
    if url in _IN_MEMORY_URLS:
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


def create_db_and_tables(engine: Engine):
    # import the models so they register on the metadata
    from chama.models import activity, admin, faq, group_settings, loan, member, note, personal_plan, transaction  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
