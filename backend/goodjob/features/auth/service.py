import logging

from jose import JWTError
from sqlalchemy.orm import Session

from goodjob.common.exceptions import AuthenticationError
from goodjob.core.security.jwt import (
    REFRESH_TYPE,
    create_access_token,
    create_refresh_token,
    decode_token,
    exp_seconds_left,
)
from goodjob.core.security.password import dummy_verify, verify_password
from goodjob.features.auth import token_store
from goodjob.features.auth.schemas import TokenPair
from goodjob.features.member import service as member_service
from goodjob.models.member import Member

logger = logging.getLogger(__name__)


# 인증 :: 계정 없음 / 비밀번호 틀림 동일 에러
def authenticate_member(db: Session, account: str, password: str) -> Member:
    member = member_service.find_by_account(db, account)
    if member is None:
        dummy_verify()
        raise AuthenticationError()
    if not verify_password(password, member.password):
        raise AuthenticationError()
    return member


# access + refresh 발급 :: 매번 새 jti
def issue_token_pair(member: Member) -> TokenPair:
    access = create_access_token(subject=str(member.id), role=member.membership.value)
    refresh = create_refresh_token(subject=str(member.id))
    return TokenPair(
        access_token=access,
        refresh_token=refresh,
        access_max_age=exp_seconds_left(decode_token(access)),
        refresh_max_age=exp_seconds_left(decode_token(refresh)),
    )


def login_issue_tokens(db: Session, account: str, password: str) -> TokenPair:
    member = authenticate_member(db, account, password)
    pair = issue_token_pair(member)

    # Redis 저장 (member_id = refresh token), 이전 refresh 는 덮어써서 무효
    token_store.save_refresh_token(member.id, pair.refresh_token, pair.refresh_max_age)
    logger.info("login: member_id=%s", member.id)
    return pair


# REFRESH :: redis 값과 같을 때만 재발급 (rotate)
def refresh_rotate_tokens(db: Session, refresh_token: str | None) -> TokenPair:
    if not refresh_token:
        raise AuthenticationError("로그인이 필요합니다.")

    try:
        payload = decode_token(refresh_token)
        if payload.get("type") != REFRESH_TYPE:
            raise ValueError("not refresh token")
        member_id = int(payload["sub"])
    except (JWTError, KeyError, TypeError, ValueError):
        raise AuthenticationError("로그인이 필요합니다.")

    saved = token_store.get_refresh_token(member_id)
    if saved != refresh_token:
        # 저장된 값과 다르면 이전 토큰 재사용 가능성 :: 세션 제거
        token_store.delete_refresh_token(member_id)
        logger.warning("refresh token mismatch: member_id=%s", member_id)
        raise AuthenticationError("로그인이 필요합니다.")

    member = member_service.find_by_id(db, member_id)
    if member is None:
        token_store.delete_refresh_token(member_id)
        raise AuthenticationError("로그인이 필요합니다.")

    pair = issue_token_pair(member)
    token_store.save_refresh_token(member.id, pair.refresh_token, pair.refresh_max_age)
    logger.info("token reissued: member_id=%s", member.id)
    return pair


# LOGOUT :: refresh 삭제 (없어도 에러 아님)
def logout(member_id: int) -> None:
    token_store.delete_refresh_token(member_id)
    logger.info("logout: member_id=%s", member_id)
