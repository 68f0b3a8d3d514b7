from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from goodjob.common.schemas.base import ORMBase


class ArticleCreate(BaseModel):
    subject: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1)


class ArticleRead(ORMBase):
    id: int
    member_id: int
    subject: str
    content: str
    view_count: int
    like_count: int
    create_date: Optional[datetime] = None


class CommentCreate(BaseModel):
    content: str = Field(min_length=1)


class CommentRead(ORMBase):
    id: int
    member_id: int
    article_id: int
    content: str
    like_count: int
    create_date: Optional[datetime] = None
