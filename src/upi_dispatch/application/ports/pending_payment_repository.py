from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from upi_dispatch.domain.entities import PendingPayment
    from upi_dispatch.domain.value_objects import CorrelationToken


class PendingPaymentRepository(ABC):
    """Port for storing dispatched payment handles.

    Contract:
    - At most one handle per correlation token; the latest save() wins
    - get() returns None if nothing was dispatched with the token (no exception)
    - Implementations are NOT thread-safe; callers must ensure serialization

    Thread safety note:
    Results are delivered by the host on whatever thread it likes. Use cases
    acquire the token's lock via LockProvider before touching the repository.
    """

    @abstractmethod
    def get(self, correlation_token: CorrelationToken) -> PendingPayment | None:
        """Retrieve the handle stored for a correlation token.

        Args:
            correlation_token: Token used when the payment was dispatched.

        Returns:
            The PendingPayment if found, None otherwise.
            Returned entity is a copy; mutations do not affect stored state.
        """

    @abstractmethod
    def save(self, pending_payment: PendingPayment) -> None:
        """Persist a handle (upsert keyed by its correlation token).

        Args:
            pending_payment: The handle to save. Replaces any handle already
                stored for the same token.
        """
