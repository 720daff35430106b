# File: app/schemas/article.py

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user import UserRead

# Matches the 32-bit users.id column
AuthorId = Annotated[int, Field(ge=1, le=2**31 - 1)]


class ArticleBase(BaseModel):
    title: str = Field(min_length=1, max_length=255, examples=["Hello, World!"])
    description: Optional[str] = Field(default=None, examples=["This is a description"])
    body: str = Field(min_length=1, examples=["This is the body of the article"])
    published: bool = False


class ArticleCreate(ArticleBase):
    author_id: Optional[AuthorId] = None


class ArticleUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    body: Optional[str] = Field(default=None, min_length=1)
    published: Optional[bool] = None
    author_id: Optional[AuthorId] = None


class ArticleRead(ArticleBase):
    id: int
    author_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ArticleDetail(ArticleRead):
    author: Optional[UserRead] = None
