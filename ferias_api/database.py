from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ferias_api.core.config import settings
from ferias_api.models.base import Base


def _normalize_database_url(raw_url: str) -> str:
    db_url = (raw_url or "").strip()
    if db_url.startswith("postgres://"):
        return db_url.replace("postgres://", "postgresql://", 1)
    return db_url


def build_engine(database_url: str):
    """Cria o engine; SQLite precisa liberar o uso entre threads."""
    url = _normalize_database_url(database_url)
    engine_kwargs = {"connect_args": {"check_same_thread": False}} if url.startswith("sqlite") else {}
    return create_engine(url, **engine_kwargs)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    """Dependência FastAPI que entrega uma sessão por requisição."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = ["engine", "Base", "SessionLocal", "build_engine", "get_db"]
