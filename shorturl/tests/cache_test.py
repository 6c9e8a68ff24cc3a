from unittest import mock

import pytest
import redis.exceptions

from shorturl.core.config import settings
from shorturl.db.Connection import database
from shorturl.services import RedisURLCache


@pytest.fixture
def redis_mock(monkeypatch):
    fake = mock.MagicMock()
    fake.get.return_value = None
    monkeypatch.setattr(database, "redis_client", fake)
    return fake


def test_cache_disabled_without_client(monkeypatch):
    monkeypatch.setattr(database, "redis_client", None)
    assert RedisURLCache.get("b") is None
    RedisURLCache.put("b", "https://example.com")


def test_create_populates_cache(client, redis_mock):
    client.post("/api/v1/shorten", json={"url": "https://example.com/cached"})
    redis_mock.setex.assert_called_with("url:b", settings.CACHE_TTL, "https://example.com/cached")


def test_redirect_served_from_cache(client, redis_mock):
    redis_mock.get.return_value = "https://example.com/from-cache"
    response = client.get("/b", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "https://example.com/from-cache"
    redis_mock.get.assert_called_with("url:b")


def test_cache_hit_still_counts_click(client, redis_mock):
    client.post("/api/v1/shorten", json={"url": "https://example.com/hot"})
    redis_mock.get.return_value = "https://example.com/hot"
    client.get("/b", follow_redirects=False)
    assert client.get("/api/v1/admin/stats/b").json()["click_count"] == 1


def test_cache_bytes_are_decoded(redis_mock):
    redis_mock.get.return_value = b"https://example.com/bytes"
    assert RedisURLCache.get("c") == "https://example.com/bytes"


def test_redis_failure_falls_back_to_database(client, redis_mock):
    redis_mock.get.side_effect = redis.exceptions.ConnectionError("down")
    redis_mock.setex.side_effect = redis.exceptions.ConnectionError("down")
    client.post("/api/v1/shorten", json={"url": "https://example.com/fallback"})

    response = client.get("/b", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "https://example.com/fallback"


def test_cache_hit_with_code_beyond_id_range(client, redis_mock):
    client.post("/api/v1/shorten", json={"url": "https://example.com/first"})
    redis_mock.get.return_value = "https://example.com/stale"
    response = client.get(f"/{'9' * 12}", follow_redirects=False)
    assert response.status_code == 302
    assert client.get("/api/v1/admin/analytics/total_clicks").json() == {"total_clicks": 0}
