from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from goodjob.common.schemas.base import ORMBase


class LikesRequest(BaseModel):
    article_id: int


class LikesRead(ORMBase):
    id: int
    member_id: int
    article_id: Optional[int] = None
    comment_id: Optional[int] = None
    create_date: Optional[datetime] = None
