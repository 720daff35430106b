# File: app/services/article_service.py

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.core.errors import RecordNotFound
from app.models.article import Article
from app.schemas.article import ArticleCreate, ArticleUpdate


def create_article(db: Session, payload: ArticleCreate) -> Article:
    article = Article(**payload.model_dump())
    db.add(article)
    db.commit()
    db.refresh(article)
    return article


def list_published(db: Session) -> list[Article]:
    stmt = select(Article).where(Article.published.is_(True)).order_by(Article.id)
    return list(db.scalars(stmt))


def list_drafts(db: Session) -> list[Article]:
    stmt = select(Article).where(Article.published.is_(False)).order_by(Article.id)
    return list(db.scalars(stmt))


def get_article(db: Session, article_id: int) -> Optional[Article]:
    """Fetch one article with its author loaded, or None."""
    stmt = (
        select(Article)
        .options(selectinload(Article.author))
        .where(Article.id == article_id)
    )
    return db.scalars(stmt).first()


def _get_or_raise(db: Session, article_id: int) -> Article:
    article = db.get(Article, article_id)
    if article is None:
        raise RecordNotFound(f"Article with id {article_id} does not exist")
    return article


def update_article(db: Session, article_id: int, payload: ArticleUpdate) -> Article:
    article = _get_or_raise(db, article_id)
    data = payload.model_dump(exclude_unset=True)
    # title/body/published are non-nullable columns
    for field in ("title", "body", "published"):
        if field in data and data[field] is None:
            del data[field]
    for field, value in data.items():
        setattr(article, field, value)
    db.commit()
    db.refresh(article)
    return article


def delete_article(db: Session, article_id: int) -> Article:
    article = _get_or_raise(db, article_id)
    db.delete(article)
    db.commit()
    return article
