from typing import Optional

from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.orm import Session

from goodjob.core.config import ACCESS_TOKEN_COOKIE
from goodjob.core.database import get_db
from goodjob.core.security.jwt import ACCESS_TYPE, decode_token
from goodjob.features.member import service as member_service
from goodjob.models.member import Member

# swagger / api client 는 Bearer, 브라우저는 accessToken cookie
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/member/login", auto_error=False)


# 현재 member 인증 :: 요청마다 한번 해석해서 handler 로 전달
def get_current_member(
    bearer: Optional[str] = Depends(oauth2_scheme),
    access_cookie: Optional[str] = Cookie(default=None, alias=ACCESS_TOKEN_COOKIE),
    db: Session = Depends(get_db),
) -> Member:
    cred_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid authentication credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    token = bearer or access_cookie
    if not token:
        raise cred_exc

    try:
        payload = decode_token(token)
        if payload.get("type") != ACCESS_TYPE:
            raise cred_exc
        sub = payload.get("sub")
        if not sub:
            raise cred_exc
        member_id = int(sub)
    except (JWTError, ValueError, TypeError):
        raise cred_exc

    member = member_service.find_by_id(db, member_id)
    if member is None:
        raise cred_exc
    return member
