from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import uuid

from jose import jwt
from jose.exceptions import JWSError

from goodjob.common.exceptions import ConfigurationError
from goodjob.core.config import (
    JWT_SECRET_KEY,
    JWT_ALGORITHM,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    REFRESH_TOKEN_EXPIRE_DAYS,
)

ACCESS_TYPE = "access"
REFRESH_TYPE = "refresh"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _encode(payload: dict[str, Any]) -> str:
    try:
        return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)
    except (JWSError, NotImplementedError) as e:
        # 잘못된 알고리즘 / key :: 요청 단위로 복구 불가
        raise ConfigurationError("JWT signing is misconfigured") from e


# ACC TOKEN
def create_access_token(subject: str, role: str, additional_claims: Optional[dict[str, Any]] = None) -> str:
    now = _now()
    exp = now + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": subject,
        "role": role,
        "type": ACCESS_TYPE,
        "jti": uuid.uuid4().hex,
        "iat": int(now.timestamp()),
        "exp": exp,
    }
    if additional_claims:
        payload.update(additional_claims)
    return _encode(payload)


# REFRESH TOKEN
def create_refresh_token(subject: str) -> str:
    now = _now()
    exp = now + timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    payload: dict[str, Any] = {
        "sub": subject,
        "type": REFRESH_TYPE,
        "jti": uuid.uuid4().hex,
        "iat": int(now.timestamp()),
        "exp": exp,
    }
    return _encode(payload)


# 서명 / 만료 검증 (실패 시 JWTError)
def decode_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])


# redis TTL, cookie max-age 계산
def exp_seconds_left(payload: dict[str, Any]) -> int:
    exp = payload.get("exp")
    now_ts = int(_now().timestamp())
    if isinstance(exp, (int, float)):
        return max(0, int(exp) - now_ts)
    if isinstance(exp, datetime):
        return max(0, int(exp.timestamp()) - now_ts)
    return 0
