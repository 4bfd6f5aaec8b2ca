"""
Id generation for nodes, edges and snapshots.

Ids are opaque tokens; callers inject a generator so tests can use
predictable sequences.
"""
from typing import Callable
import itertools
import uuid

IdGenerator = Callable[[], str]


def uuid_id_generator(prefix: str = "node") -> IdGenerator:
    """Random, globally unique ids such as node_3f2a..."""
    def generate() -> str:
        return f"{prefix}_{uuid.uuid4().hex}"
    return generate


class SequentialIdGenerator:
    """Predictable ids (node_0, node_1, ...) for tests and demos."""

    def __init__(self, prefix: str = "node", start: int = 0):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}_{next(self._counter)}"
