from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from core.config import settings


def build_engine(url: str, **kwargs) -> Engine:
    if url.startswith("sqlite"):
        # sessions are handed between the threadpool workers FastAPI runs sync code on
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=False, future=True, **kwargs)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()


# dependency
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
