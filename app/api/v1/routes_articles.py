# File: app/api/v1/routes_articles.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import RecordId, get_db
from app.core.errors import RecordNotFound
from app.schemas.article import ArticleCreate, ArticleDetail, ArticleRead, ArticleUpdate
from app.services import article_service

router = APIRouter()


@router.post(
    "/",
    response_model=ArticleRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create article",
)
def create_article(payload: ArticleCreate, db: Session = Depends(get_db)):
    return article_service.create_article(db, payload)


@router.get("/", response_model=list[ArticleRead], summary="List published articles")
def list_articles(db: Session = Depends(get_db)):
    return article_service.list_published(db)


@router.get("/drafts", response_model=list[ArticleRead], summary="List draft articles")
def list_drafts(db: Session = Depends(get_db)):
    return article_service.list_drafts(db)


@router.get("/{article_id}", response_model=ArticleDetail, summary="Get article")
def read_article(article_id: RecordId, db: Session = Depends(get_db)):
    """
    Return one article together with its author, if it has one.
    """
    article = article_service.get_article(db, article_id)
    if article is None:
        raise RecordNotFound(f"Article with id {article_id} does not exist")
    return article


@router.patch("/{article_id}", response_model=ArticleRead, summary="Update article")
def update_article(article_id: RecordId, payload: ArticleUpdate, db: Session = Depends(get_db)):
    return article_service.update_article(db, article_id, payload)


@router.delete("/{article_id}", response_model=ArticleRead, summary="Delete article")
def delete_article(article_id: RecordId, db: Session = Depends(get_db)):
    return article_service.delete_article(db, article_id)
