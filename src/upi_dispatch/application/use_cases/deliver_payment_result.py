from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from upi_dispatch.domain.entities import PaymentResult
from upi_dispatch.domain.exceptions import (
    PaymentAlreadyResolvedError,
    PendingPaymentNotFoundError,
)

if TYPE_CHECKING:
    from upi_dispatch.application.ports import (
        LockProvider,
        PendingPaymentRepository,
        TimeProvider,
    )
    from upi_dispatch.domain.entities import PendingPayment
    from upi_dispatch.domain.value_objects import CorrelationToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeliverPaymentResultRequest:
    """Input DTO for deliver payment result use case."""

    correlation_token: CorrelationToken
    raw_response: str | None  # None when the app returned no data


@dataclass(frozen=True, slots=True)
class DeliverPaymentResultResponse:
    """Output DTO for deliver payment result use case."""

    pending_payment: PendingPayment
    is_replay: bool  # True if the same response was already delivered


class DeliverPaymentResultUseCase:
    """Resolves a dispatched payment with the response the host handed back.

    The host calls this with the correlation token it was given at dispatch
    time and the payment app's raw response string.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        pending_payment_repository: PendingPaymentRepository,
    ) -> None:
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._pending_repo = pending_payment_repository

    def execute(self, request: DeliverPaymentResultRequest) -> DeliverPaymentResultResponse:
        """Execute the deliver payment result workflow.

        Args:
            request: Correlation token and raw app response.

        Returns:
            DeliverPaymentResultResponse with the resolved handle.

        Raises:
            PendingPaymentNotFoundError: Nothing was dispatched with this token.
            PaymentAlreadyResolvedError: Handle already holds a different result.
        """
        token = request.correlation_token
        with self._lock_provider.acquire(str(token.value)):
            now = self._time_provider.now()

            pending_payment = self._pending_repo.get(token)
            if pending_payment is None:
                raise PendingPaymentNotFoundError(
                    f"No payment dispatched with correlation token {token.value}"
                )

            if not pending_payment.is_pending:
                return self._handle_replay(pending_payment, request)

            result = PaymentResult.from_response(request.raw_response)
            resolved = pending_payment.resolve(result, now)
            self._pending_repo.save(resolved)

        logger.info(
            "Payment result for token=%s: status=%s txn_id=%s",
            token.value,
            result.status.value,
            result.transaction_id,
        )
        return DeliverPaymentResultResponse(pending_payment=resolved, is_replay=False)

    def _handle_replay(
        self,
        pending_payment: PendingPayment,
        request: DeliverPaymentResultRequest,
    ) -> DeliverPaymentResultResponse:
        """Accept an identical redelivery, reject a conflicting one."""
        assert pending_payment.result is not None

        if pending_payment.result.raw_response != request.raw_response:
            raise PaymentAlreadyResolvedError(
                f"Payment for correlation token {request.correlation_token.value} "
                f"already resolved with status={pending_payment.result.status.value}"
            )

        logger.debug("Duplicate result for token=%s ignored", request.correlation_token.value)
        return DeliverPaymentResultResponse(pending_payment=pending_payment, is_replay=True)
