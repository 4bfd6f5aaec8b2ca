"""Snapshot storage configuration settings.

This module provides the storage backend selection for saved mind maps.
"""
import logging
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

_VALID_BACKENDS = ('memory', 'file', 'redis')


class StorageConfigMixin:
    """Mixin class for snapshot storage properties.

    This mixin expects the class to inherit from BaseConfig or provide
    a _get_cached_value method.
    """

    if TYPE_CHECKING:
        def _get_cached_value(self, _key: str, _default: Any = None) -> Any:
            """Type stub: method provided by BaseConfig."""
            return _default

    @property
    def STORAGE_BACKEND(self) -> str:
        """Where snapshots live: memory, file or redis."""
        backend = str(self._get_cached_value('STORAGE_BACKEND', 'file')).strip().lower()
        if backend not in _VALID_BACKENDS:
            logger.warning("Invalid STORAGE_BACKEND '%s', using file", backend)
            return 'file'
        return backend

    @property
    def STORAGE_KEY(self) -> str:
        """Key under which the snapshot collection is stored."""
        return self._get_cached_value('STORAGE_KEY', 'mindmap_snapshots')

    @property
    def STORAGE_FILE(self) -> str:
        """JSON file used by the file backend."""
        return self._get_cached_value('STORAGE_FILE', 'data/mindmaps.json')

    @property
    def REDIS_URL(self) -> str:
        """Redis connection URL used by the redis backend."""
        return self._get_cached_value('REDIS_URL', 'redis://localhost:6379/0')
