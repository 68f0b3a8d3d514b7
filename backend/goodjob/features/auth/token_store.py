from typing import Optional

from goodjob.core.cache.redis import redis_client

# redis key :: member_id 문자열 그대로 (value = 현재 유효한 refresh token)
def session_key(member_id: int) -> str:
    return str(member_id)

# key 단위 기본 연산
def set_value(key: str, value: str, ttl_seconds: int) -> None:
    redis_client.set(key, value, ex=ttl_seconds)

def get_value(key: str) -> Optional[str]:
    return redis_client.get(key)

def has_value(key: str) -> bool:
    return redis_client.exists(key) == 1

def delete_value(key: str) -> None:
    redis_client.delete(key)

# refresh token 관리 :: 1인 1 refresh (재로그인 시 덮어쓰기)
def save_refresh_token(member_id: int, refresh_token: str, ttl_seconds: int) -> None:
    if ttl_seconds <= 0:
        delete_value(session_key(member_id))
        return
    set_value(session_key(member_id), refresh_token, ttl_seconds)

def get_refresh_token(member_id: int) -> Optional[str]:
    return get_value(session_key(member_id))

def has_refresh_token(member_id: int) -> bool:
    return has_value(session_key(member_id))

def delete_refresh_token(member_id: int) -> None:
    delete_value(session_key(member_id))
