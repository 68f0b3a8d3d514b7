from starlette.responses import Response

from goodjob.core.config import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE, COOKIE_SECURE
from goodjob.features.auth.schemas import TokenPair


def _set(response: Response, key: str, value: str, max_age: int) -> None:
    response.set_cookie(
        key=key,
        value=value,
        max_age=max_age,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


# 토큰별 남은 시간 = cookie max-age
def set_token_cookies(response: Response, pair: TokenPair) -> None:
    _set(response, ACCESS_TOKEN_COOKIE, pair.access_token, pair.access_max_age)
    _set(response, REFRESH_TOKEN_COOKIE, pair.refresh_token, pair.refresh_max_age)


# 로그아웃 :: 두 쿠키 모두 max-age 0
def expire_token_cookies(response: Response) -> None:
    _set(response, ACCESS_TOKEN_COOKIE, "", 0)
    _set(response, REFRESH_TOKEN_COOKIE, "", 0)
