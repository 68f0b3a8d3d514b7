from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from goodjob.core.database import get_db
from goodjob.core.security.deps import get_current_member
from goodjob.models.member import Member
from . import schemas, service

router = APIRouter(prefix="/article", tags=["article"])


@router.post("", response_model=schemas.ArticleRead)
def create_article(
    payload: schemas.ArticleCreate,
    current: Member = Depends(get_current_member),
    db: Session = Depends(get_db),
):
    return service.create_article(db, current.id, payload)


@router.get("/{article_id}", response_model=schemas.ArticleRead)
def get_article(article_id: int, db: Session = Depends(get_db)):
    return service.get_article(db, article_id)


@router.post("/{article_id}/comment", response_model=schemas.CommentRead)
def add_comment(
    article_id: int,
    payload: schemas.CommentCreate,
    current: Member = Depends(get_current_member),
    db: Session = Depends(get_db),
):
    return service.add_comment(db, current.id, article_id, payload)
