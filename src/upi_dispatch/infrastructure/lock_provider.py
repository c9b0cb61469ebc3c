from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from upi_dispatch.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


class InMemoryLockProvider(LockProvider):
    """In-memory lock provider with one lock per correlation token.

    A guard lock protects the token → lock mapping; it is held only while
    the token's lock is looked up or created. The token lock then serializes
    dispatch against result delivery for that token alone.

    Limitations:
    - Single-process only
    - Token locks are never evicted (at most 65536 of them exist)
    """

    def __init__(self) -> None:
        self._locks: dict[str, Lock] = {}
        self._guard = Lock()

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(resource_id, Lock())

        with lock:
            yield


class NoOpLockProvider(LockProvider):
    """Lock provider that performs no locking.

    For single-threaded unit tests of the use cases.
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
