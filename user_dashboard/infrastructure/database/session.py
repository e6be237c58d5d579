# user_dashboard/infrastructure/database/session.py

from contextlib import contextmanager
from typing import Iterator

from flask import current_app
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from user_dashboard.infrastructure.database.base_model import BaseModel

EXTENSION_KEY = "database"


def _build_engine(url: str, *, echo: bool) -> Engine:
    if url.startswith("sqlite") and (":memory:" in url or url.endswith("://")):
        # banco em memória: uma única conexão compartilhada entre threads
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=echo, pool_pre_ping=True)


class Database:
    """Process-wide store client: one engine and one session factory."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.engine = _build_engine(url, echo=echo)
        self._session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

    def create_all(self) -> None:
        import user_dashboard.infrastructure.database.models.user_model  # noqa: F401

        BaseModel.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        session: Session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def get_database() -> Database:
    return current_app.extensions[EXTENSION_KEY]


@contextmanager
def db_session() -> Iterator[Session]:
    with get_database().session() as session:
        yield session
