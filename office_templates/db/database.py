from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from ..config import settings

DB_PATH = Path(settings.DATA_ROOT) / "filecache.sqlite"


class Base(DeclarativeBase):
    pass


def make_session_factory(db_path: Path) -> sessionmaker:
    """Engine + schema for a file-index database at `db_path`."""
    from . import models  # noqa: F401  registers tables on Base

    engine = create_engine(f"sqlite:///{db_path}", echo=False, future=True)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


SessionLocal: Optional[sessionmaker] = None


def default_session_factory() -> sessionmaker:
    global SessionLocal
    if SessionLocal is None:
        SessionLocal = make_session_factory(DB_PATH)
    return SessionLocal


@contextmanager
def session_scope(factory: Optional[sessionmaker] = None) -> Iterator[Session]:
    session = (factory or default_session_factory())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
