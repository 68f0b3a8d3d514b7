from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from goodjob.common.templates import templates
from goodjob.core.database import get_db
from goodjob.features.member import service as member_service
from goodjob.features.member.schemas import MemberRead

router = APIRouter(prefix="/mentoring", tags=["mentoring"])


# 멘토 목록 :: applyMentor 후 이동하는 화면
@router.get("/list", response_class=HTMLResponse)
def mentor_list(request: Request, db: Session = Depends(get_db)):
    mentors = [MemberRead.model_validate(m) for m in member_service.find_mentors(db)]
    return templates.TemplateResponse(request, "mentoring/list.html", {"mentors": mentors})
