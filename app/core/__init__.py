"""Settings, database session, security primitives and typed errors."""

from app.core.config import Settings, get_settings, settings
from app.core.database import SessionLocal, get_db

__all__ = ["Settings", "SessionLocal", "get_settings", "get_db", "settings"]
