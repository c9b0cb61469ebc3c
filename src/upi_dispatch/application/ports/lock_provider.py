from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port for per-correlation-token locking.

    Contract:
    - acquire() MUST serialize access to the same resource_id
    - acquire() MUST release the lock when the context exits (normal or exception)
    - acquire() MUST be blocking (waits until lock is available)
    - Different resource_ids MAY be acquired concurrently

    Dispatch and result delivery for one token run under the same lock, so a
    result that arrives while the chooser is still being launched waits for
    the handle to be saved.
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Acquire a lock for the given resource ID.

        Args:
            resource_id: Canonical string identifier for the resource,
                         e.g. str(correlation_token.value).

        Yields:
            None. The lock is held for the duration of the context.
        """
        ...
