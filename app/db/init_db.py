"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all runs.
"""

import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.models.base import Base
from app.models import article, user  # noqa: F401
from app.models.article import Article

logger = logging.getLogger(__name__)


SAMPLE_ARTICLES = [
    {
        "title": "Prisma Adds Support for MongoDB",
        "body": "Support for MongoDB has been one of the most requested features since the initial release of...",
        "description": "We are excited to share that today's Prisma ORM release adds stable support for MongoDB!",
        "published": False,
    },
    {
        "title": "What's new in Prisma? (Q1/22)",
        "body": "Our engineers have been working hard, issuing new releases with many improvements...",
        "description": "Learn about everything in the Prisma ecosystem and community from January to March 2022.",
        "published": True,
    },
]


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))


def seed_initial_data(db: Session) -> list[Article]:
    """
    Upsert the sample articles by title.

    Existing rows are left untouched, so running the seed twice does not
    create duplicates or overwrite edits.
    """
    seeded = []
    for data in SAMPLE_ARTICLES:
        existing = db.scalars(select(Article).where(Article.title == data["title"])).first()
        if existing is None:
            existing = Article(**data)
            db.add(existing)
            logger.info("Seeded article %r", data["title"])
        seeded.append(existing)
    db.commit()
    return seeded
