"""
Snapshot Storage Backend Tests
==============================

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

import json
from unittest.mock import Mock, patch

import pytest
import redis

from services.mindmap.storage import (
    JsonFileStorage,
    MemoryStorage,
    RedisStorage,
    create_storage,
)
from services.redis.redis_client import RedisConnectionError


class TestMemoryStorage:

    def test_missing_key(self):
        assert MemoryStorage().read("k") is None

    def test_write_then_read(self):
        storage = MemoryStorage()
        storage.write("k", "v")
        assert storage.read("k") == "v"


class TestJsonFileStorage:

    def test_missing_file_reads_none(self, tmp_path):
        assert JsonFileStorage(str(tmp_path / "none.json")).read("k") is None

    def test_write_creates_directories(self, tmp_path):
        path = tmp_path / "nested" / "maps.json"
        storage = JsonFileStorage(str(path))
        storage.write("k", "v")
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}

    def test_keys_are_kept_side_by_side(self, tmp_path):
        storage = JsonFileStorage(str(tmp_path / "maps.json"))
        storage.write("a", "1")
        storage.write("b", "2")
        assert (storage.read("a"), storage.read("b")) == ("1", "2")

    def test_no_temp_files_left(self, tmp_path):
        storage = JsonFileStorage(str(tmp_path / "maps.json"))
        storage.write("k", "v")
        assert [p.name for p in tmp_path.iterdir()] == ["maps.json"]

    def test_corrupt_file_reads_none(self, tmp_path):
        path = tmp_path / "maps.json"
        path.write_text("garbage", encoding="utf-8")
        assert JsonFileStorage(str(path)).read("k") is None


class TestRedisStorage:

    def test_get_and_set_use_client(self):
        client = Mock()
        client.get.return_value = "stored"
        storage = RedisStorage(client=client)

        storage.write("k", "v")
        assert storage.read("k") == "stored"
        client.set.assert_called_once_with("k", "v")
        client.get.assert_called_once_with("k")

    def test_connection_failure_propagates(self):
        client = Mock()
        client.get.side_effect = redis.ConnectionError("down")
        with patch("services.redis.redis_client.time.sleep"):
            with pytest.raises(RedisConnectionError):
                RedisStorage(client=client).read("k")


class TestCreateStorage:

    def test_memory_backend(self):
        assert isinstance(create_storage("memory"), MemoryStorage)

    def test_file_backend(self):
        assert isinstance(create_storage("file"), JsonFileStorage)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_storage("floppy")
