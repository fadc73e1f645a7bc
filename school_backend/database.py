from datetime import datetime, timezone

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import DATABASE_URL, SQL_ECHO


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    # Naive UTC, microsecond precision; SQLite keeps no zone information.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite only checks foreign keys when asked to, per connection."""

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    connect_args = kwargs.pop("connect_args", {})
    if url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)
    engine = create_engine(
        url,
        connect_args=connect_args,
        echo=SQL_ECHO,
        pool_pre_ping=True,
        **kwargs,
    )
    if engine.dialect.name == "sqlite":
        _enable_sqlite_foreign_keys(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db(request: Request):
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
