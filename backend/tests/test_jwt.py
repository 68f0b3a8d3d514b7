import pytest
from jose import JWTError, jwt

from goodjob.common.exceptions import ConfigurationError
from goodjob.core.security import jwt as jwt_module
from goodjob.core.security.jwt import (
    create_access_token,
    create_refresh_token,
    decode_token,
    exp_seconds_left,
)
from goodjob.core.config import ACCESS_TOKEN_EXPIRE_MINUTES, REFRESH_TOKEN_EXPIRE_DAYS


def test_access_token_claims():
    payload = decode_token(create_access_token(subject="7", role="ORDINARY"))

    assert payload["sub"] == "7"
    assert payload["role"] == "ORDINARY"
    assert payload["type"] == "access"
    assert payload["jti"]


def test_refresh_token_claims():
    payload = decode_token(create_refresh_token(subject="7"))

    assert payload["sub"] == "7"
    assert payload["type"] == "refresh"
    assert "role" not in payload


def test_tokens_are_never_reused():
    assert create_refresh_token("7") != create_refresh_token("7")
    assert create_access_token("7", "ORDINARY") != create_access_token("7", "ORDINARY")


def test_exp_seconds_left_matches_configured_ttl():
    access_left = exp_seconds_left(decode_token(create_access_token("1", "ORDINARY")))
    refresh_left = exp_seconds_left(decode_token(create_refresh_token("1")))

    assert 0 < access_left <= ACCESS_TOKEN_EXPIRE_MINUTES * 60
    assert ACCESS_TOKEN_EXPIRE_MINUTES * 60 < refresh_left <= REFRESH_TOKEN_EXPIRE_DAYS * 86400


def test_exp_seconds_left_never_negative():
    assert exp_seconds_left({"exp": 0}) == 0
    assert exp_seconds_left({}) == 0


def test_token_signed_with_other_key_rejected():
    forged = jwt.encode({"sub": "1", "type": "access"}, "some-other-secret", algorithm="HS256")
    with pytest.raises(JWTError):
        decode_token(forged)


def test_bad_algorithm_is_configuration_error(monkeypatch):
    monkeypatch.setattr(jwt_module, "JWT_ALGORITHM", "NOT-AN-ALG")
    with pytest.raises(ConfigurationError):
        create_access_token("1", "ORDINARY")
