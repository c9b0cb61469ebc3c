from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from upi_dispatch.application.ports import PendingPaymentRepository

if TYPE_CHECKING:
    from upi_dispatch.domain.entities import PendingPayment
    from upi_dispatch.domain.value_objects import CorrelationToken


class InMemoryPendingPaymentRepository(PendingPaymentRepository):
    """Process-local store of dispatched payment handles.

    Implementation notes:
    - Keyed by CorrelationToken (hashable frozen dataclass)
    - Copies on read and on write so callers cannot mutate stored state
    - NOT thread-safe; relies on external LockProvider for serialization
    """

    def __init__(self) -> None:
        self._pending: dict[CorrelationToken, PendingPayment] = {}

    def get(self, correlation_token: CorrelationToken) -> PendingPayment | None:
        pending_payment = self._pending.get(correlation_token)
        if pending_payment is None:
            return None
        return copy.deepcopy(pending_payment)

    def save(self, pending_payment: PendingPayment) -> None:
        self._pending[pending_payment.correlation_token] = copy.deepcopy(pending_payment)
