"""
SQLAlchemy Base Model.

Declarative base for all database models. Identity and timestamps are
assigned by the domain layer, so models carry no column defaults for them.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass
