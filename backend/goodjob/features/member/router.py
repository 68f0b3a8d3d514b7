from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from goodjob.common.exceptions import ValidationError
from goodjob.common.schemas.responses import ApiResponse
from goodjob.common.templates import templates
from goodjob.core.config import REFRESH_TOKEN_COOKIE
from goodjob.core.database import get_db
from goodjob.core.security.deps import get_current_member
from goodjob.features.auth import service as auth_service
from goodjob.features.auth.cookies import expire_token_cookies, set_token_cookies
from goodjob.models.member import Member
from . import schemas, service

router = APIRouter(prefix="/member", tags=["member"])


# 회원가입 form
@router.get("/join", response_class=HTMLResponse)
def join_form(request: Request):
    return templates.TemplateResponse(request, "member/join.html", {"form": {}, "errors": {}})


# 회원가입
@router.post("/join")
def join(
    request: Request,
    account: str = Form(""),
    password: str = Form(""),
    confirmPassword: str = Form(""),
    username: str = Form(""),
    email: str = Form(""),
    phone: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    raw = {
        "account": account,
        "password": password,
        "confirmPassword": confirmPassword,
        "username": username,
        "email": email,
        "phone": phone,
    }
    try:
        form = service.validate_join_form(raw)
    except ValidationError as e:
        # 입력 오류 :: form 다시 보여줌 (비밀번호는 되돌려주지 않음)
        echo = {k: v for k, v in raw.items() if k not in ("password", "confirmPassword")}
        return templates.TemplateResponse(
            request, "member/join.html", {"form": echo, "errors": e.errors}
        )

    service.join(db, form)
    return RedirectResponse("/member/login", status_code=302)


# 로그인 form
@router.get("/login", response_class=HTMLResponse)
def login_form(request: Request):
    return templates.TemplateResponse(request, "member/login.html", {})


# LOGIN :: account 또는 username 필드로 아이디 받음
@router.post("/login")
def login(
    account: Optional[str] = Form(None),
    username: Optional[str] = Form(None),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    pair = auth_service.login_issue_tokens(db, account or username or "", password)

    response = RedirectResponse("/", status_code=302)
    set_token_cookies(response, pair)
    return response


# LOGOUT
@router.post("/logout")
def logout(current: Member = Depends(get_current_member)):
    auth_service.logout(current.id)

    response = RedirectResponse("/", status_code=302)
    expire_token_cookies(response)
    return response


# 토큰 재발급
@router.post("/refresh", response_model=ApiResponse)
def refresh(
    response: Response,
    refresh_token: Optional[str] = Cookie(default=None, alias=REFRESH_TOKEN_COOKIE),
    db: Session = Depends(get_db),
):
    pair = auth_service.refresh_rotate_tokens(db, refresh_token)
    set_token_cookies(response, pair)
    return ApiResponse(message="token reissued")


# 멘토 신청
@router.post("/applyMentor")
def apply_mentor(
    isMentor: bool = Form(False),
    current: Member = Depends(get_current_member),
    db: Session = Depends(get_db),
):
    service.apply_mentor(db, current, isMentor)
    return RedirectResponse("/mentoring/list", status_code=302)


# 현재 member 정보
@router.get("/me", response_model=schemas.MemberRead)
def me(current: Member = Depends(get_current_member)):
    return current
