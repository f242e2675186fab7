from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from app.core.config import settings

DATABASE_URL = settings.DATABASE_URL


def _engine_options(url: str) -> dict:
    # Bound every synchronous write by the configured timeout.
    if url.startswith("sqlite"):
        options = {"connect_args": {
            "check_same_thread": False,
            "timeout": settings.DB_STATEMENT_TIMEOUT_MS / 1000,
        }}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    if url.startswith("postgresql"):
        return {"connect_args": {
            "options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"
        }}
    return {}


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
