from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from goodjob.core.database import get_db
from goodjob.core.security.deps import get_current_member
from goodjob.models.member import Member
from . import schemas, service

router = APIRouter(prefix="/likes", tags=["likes"])


@router.post("", response_model=schemas.LikesRead)
def like_article(
    payload: schemas.LikesRequest,
    current: Member = Depends(get_current_member),
    db: Session = Depends(get_db),
):
    return service.like_article(db, current.id, payload)
