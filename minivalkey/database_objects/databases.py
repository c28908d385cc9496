from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Protocol


class KeyValueStore(Protocol):
    def get_value_or_none(self, key: bytes) -> bytes | None: ...

    def upsert(self, key: bytes, value: bytes) -> None: ...


@dataclass
class Database:
    """
    The process wide key/value table shared by every connection.

    Each single key read or write holds ``lock`` for its whole duration, nothing spans more
    than one key.
    """

    content: dict[bytes, bytes] = field(default_factory=dict)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @contextmanager
    def locked(self) -> Iterator[dict[bytes, bytes]]:
        with self.lock:
            yield self.content

    def get_value_or_none(self, key: bytes) -> bytes | None:
        with self.locked() as content:
            return content.get(key)

    def upsert(self, key: bytes, value: bytes) -> None:
        with self.locked() as content:
            content[key] = value

    def __contains__(self, key: bytes) -> bool:
        with self.locked() as content:
            return key in content

    def __len__(self) -> int:
        with self.locked() as content:
            return len(content)

    def clear(self) -> None:
        with self.locked() as content:
            content.clear()
