from redis.exceptions import ConnectionError as RedisConnectionError

from goodjob.features.auth import token_store
from .helpers import login


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_redis_outage_is_generic_server_error(client, test_member, monkeypatch):
    def _down(*args, **kwargs):
        raise RedisConnectionError("connection refused by 10.0.0.5:6379")

    monkeypatch.setattr(token_store.redis_client, "set", _down)

    response = login(client)

    assert response.status_code == 500
    assert "10.0.0.5" not in response.text
    assert response.headers.get_list("set-cookie") == []
