# File: app/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    User and Article inherit from this; app.db.init_db imports them so
    their tables get registered on Base.metadata.
    """
    pass
