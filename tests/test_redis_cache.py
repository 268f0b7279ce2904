"""
Tests for RedisCache degradation and JSON handling
"""
import json
from unittest.mock import MagicMock, patch

import redis

from translation_service.core.redis import RedisCache


def connected_cache():
    cache = RedisCache(url="redis://localhost:6379/0")
    cache._client = MagicMock()
    cache._connected = True
    return cache


def test_disabled_cache_is_noop():
    cache = RedisCache(enabled=False)
    cache.connect()
    
    assert cache.is_connected is False
    assert cache.get("languages:active") is None
    assert cache.set("languages:active", [1]) is False
    assert cache.delete("languages:active") is False
    assert cache.delete_pattern("languages:*") == 0


def test_failed_connection_disables_cache():
    client = MagicMock()
    client.ping.side_effect = redis.ConnectionError("refused")
    
    with patch("translation_service.core.redis.redis.Redis", return_value=client):
        cache = RedisCache(url="redis://localhost:6379/0")
        cache.connect()
    
    assert cache.is_connected is False
    assert cache.get("anything") is None


def test_set_serializes_json_with_ttl():
    cache = connected_cache()
    
    assert cache.set("languages:active", [{"code": "es"}], ttl=60) is True
    cache._client.setex.assert_called_once_with("languages:active", 60, json.dumps([{"code": "es"}]))


def test_get_parses_json():
    cache = connected_cache()
    cache._client.get.return_value = '[{"code": "es"}]'
    
    assert cache.get("languages:active") == [{"code": "es"}]


def test_get_returns_plain_strings():
    cache = connected_cache()
    cache._client.get.return_value = "not json"
    
    assert cache.get("key") == "not json"


def test_redis_errors_are_absorbed():
    cache = connected_cache()
    cache._client.get.side_effect = redis.TimeoutError("slow")
    cache._client.setex.side_effect = redis.TimeoutError("slow")
    
    assert cache.get("key") is None
    assert cache.set("key", "value") is False


def test_delete_pattern():
    cache = connected_cache()
    cache._client.keys.return_value = ["languages:active", "languages:es"]
    cache._client.delete.return_value = 2
    
    assert cache.delete_pattern("languages:*") == 2
    cache._client.delete.assert_called_once_with("languages:active", "languages:es")
