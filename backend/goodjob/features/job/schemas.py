from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from goodjob.common.schemas.base import ORMBase


class JobCreate(BaseModel):
    company: str = Field(min_length=1, max_length=100)
    subject: str = Field(min_length=1, max_length=200)
    url: str = Field(min_length=1, max_length=500)
    sector: str = Field(min_length=1, max_length=50)
    career: int = Field(default=0, ge=0)
    dead_line: Optional[datetime] = None


class JobRead(ORMBase):
    id: int
    company: str
    subject: str
    url: str
    sector: str
    career: int
    create_date: Optional[datetime] = None
    dead_line: Optional[datetime] = None
