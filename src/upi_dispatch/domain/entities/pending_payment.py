"""Pending payment entity: the typed handle for a dispatched payment."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from upi_dispatch.domain.exceptions import InvalidStateTransitionError

if TYPE_CHECKING:
    from datetime import datetime

    from upi_dispatch.domain.entities.payment_result import PaymentResult
    from upi_dispatch.domain.value_objects import CorrelationToken, PaymentRequest


class PendingPaymentState(Enum):
    """Lifecycle states of a dispatched payment."""

    PENDING = "pending"
    RESOLVED = "resolved"


@dataclass(frozen=True, slots=True)
class PendingPayment:
    """Handle for a payment handed to an external app, awaiting its result.

    Created when the chooser is dispatched and resolved when (and if) the
    host delivers the payment app's response for the same correlation token.

    PendingPayment is immutable. resolve() returns a new instance.

    State machine:
        - pending → resolved (resolve)
        - resolved is terminal
    """

    correlation_token: CorrelationToken
    request: PaymentRequest
    uri: str
    dispatched_at: datetime
    state: PendingPaymentState
    result: PaymentResult | None
    resolved_at: datetime | None

    @classmethod
    def create(
        cls,
        correlation_token: CorrelationToken,
        request: PaymentRequest,
        uri: str,
        dispatched_at: datetime,
    ) -> PendingPayment:
        """Create a handle in PENDING state for a just-dispatched payment."""
        return cls(
            correlation_token=correlation_token,
            request=request,
            uri=uri,
            dispatched_at=dispatched_at,
            state=PendingPaymentState.PENDING,
            result=None,
            resolved_at=None,
        )

    @property
    def is_pending(self) -> bool:
        return self.state == PendingPaymentState.PENDING

    def resolve(self, result: PaymentResult, now: datetime) -> PendingPayment:
        """Attach the payment app's result.

        Args:
            result: Parsed response from the payment app.
            now: Current timestamp (UTC).

        Returns:
            New PendingPayment instance in RESOLVED state.

        Raises:
            InvalidStateTransitionError: If not in PENDING state.
        """
        if self.state != PendingPaymentState.PENDING:
            raise InvalidStateTransitionError(
                f"Cannot resolve payment in state {self.state.value}; "
                f"must be in {PendingPaymentState.PENDING.value} state"
            )

        return replace(
            self,
            state=PendingPaymentState.RESOLVED,
            result=result,
            resolved_at=now,
        )
