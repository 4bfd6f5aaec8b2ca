"""
Snapshot Storage Backends
=========================

String-keyed read/write storage for the serialized snapshot collection.
A missing key reads as None; there are no multi-key transactions.

Backends:
- MemoryStorage: process-local dict (tests, demos)
- JsonFileStorage: one JSON file holding every key, replaced atomically
- RedisStorage: plain GET/SET on a Redis server

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging
import os
import tempfile
import threading

from config.settings import config
from models.common import StorageBackend
from services.redis.redis_client import RedisOperations, get_redis, init_redis_sync

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """Durable storage collaborator."""

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the stored value or None when the key is missing."""

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""


class MemoryStorage(KeyValueStorage):
    """Keeps values in a dict for the life of the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage(KeyValueStorage):
    """
    Stores all keys in one JSON object on disk.

    Writes go to a temporary file in the same directory which then
    replaces the original, so readers never see a partial file.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def read(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._dump(data)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("[JsonFileStorage] Failed to read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("[JsonFileStorage] %s does not hold a JSON object", self.path)
            return {}
        return data

    def _dump(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


class RedisStorage(KeyValueStorage):
    """GET/SET against Redis. Connection errors propagate."""

    def __init__(self, client: Optional[Any] = None):
        self.client = client

    def read(self, key: str) -> Optional[str]:
        return RedisOperations.get(key, client=self.client)

    def write(self, key: str, value: str) -> None:
        RedisOperations.set(key, value, client=self.client)


def create_storage(backend: Optional[str] = None) -> KeyValueStorage:
    """
    Build the configured storage backend.

    Args:
        backend: memory | file | redis, defaults to STORAGE_BACKEND

    Returns:
        A ready KeyValueStorage
    """
    backend = StorageBackend(backend or config.STORAGE_BACKEND)
    if backend is StorageBackend.MEMORY:
        storage: KeyValueStorage = MemoryStorage()
    elif backend is StorageBackend.REDIS:
        if get_redis() is None:
            init_redis_sync(config.REDIS_URL)
        storage = RedisStorage()
    else:
        storage = JsonFileStorage(config.STORAGE_FILE)
    logger.info("[Storage] Using %s snapshot storage", backend.value)
    return storage
