from sqlmodel import create_engine
from studio_dash.core.config import settings

# Global engine instance
_engine = None

def get_engine():
    global _engine

    if _engine is not None:
        return _engine

    # Fallback to SQLite when no DATABASE_URL is configured
    db_url = settings.DATABASE_URL or "sqlite:///./studio.db"

    # SQLite fix for multithreading
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}

    _engine = create_engine(db_url, connect_args=connect_args)
    return _engine

engine = get_engine()
