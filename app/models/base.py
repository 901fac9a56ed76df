"""SQLAlchemy declarative Base; alembic/env.py autogenerates from its metadata."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
