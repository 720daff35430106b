"""
Create the tables and upsert the sample articles.

Run this from the project root:

    (.venv) python seed_database.py

Uses the same environment variables as the API (DATABASE_URL,
JWT_SECRET, ROUNDS_OF_HASHING, ...).
"""

import logging

from app.core.config import get_settings
from app.db.init_db import init_db, seed_initial_data
from app.db.session import create_db_engine, create_session_factory

logger = logging.getLogger("seed_database")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="[%(levelname)s] %(message)s")

    engine = create_db_engine(settings.database_url)
    init_db(engine)

    db = create_session_factory(engine)()
    try:
        articles = seed_initial_data(db)
        for article in articles:
            logger.info("Article #%s: %s (published=%s)", article.id, article.title, article.published)
        logger.info("Done.")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
