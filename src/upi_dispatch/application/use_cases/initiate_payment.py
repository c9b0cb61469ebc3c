from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from upi_dispatch.domain.entities import PendingPayment
from upi_dispatch.domain.value_objects import CorrelationToken

if TYPE_CHECKING:
    from upi_dispatch.application.ports import (
        IntentResolver,
        LockProvider,
        PendingPaymentRepository,
        TimeProvider,
        UserNotifier,
    )
    from upi_dispatch.domain.value_objects import PaymentRequest

logger = logging.getLogger(__name__)

DEFAULT_CHOOSER_TITLE = "Pay Using"
DEFAULT_NO_HANDLER_MESSAGE = "No UPI app found, please install one to continue"


class DispatchOutcome(Enum):
    """What initiating a payment led to."""

    DISPATCHED = "dispatched"
    NO_HANDLER = "no_handler"


@dataclass(frozen=True, slots=True)
class InitiatePaymentRequest:
    """Input DTO for initiate payment use case."""

    payment: PaymentRequest
    correlation_token: CorrelationToken = field(default_factory=CorrelationToken.default)


@dataclass(frozen=True, slots=True)
class InitiatePaymentResponse:
    """Output DTO for initiate payment use case."""

    outcome: DispatchOutcome
    uri: str
    pending_payment: PendingPayment | None  # None when no handler was found


class InitiatePaymentUseCase:
    """Hands a UPI payment request to whichever payment app the user picks.

    Responsibilities:
    - Build the upi://pay deep link
    - Ask the host whether any app can open it
    - No handler: notify the user once, never dispatch, never raise
    - Handler present: dispatch the chooser once and register a PendingPayment

    No payment completion is implied by a DISPATCHED outcome. The result, if
    the app sends one, arrives through DeliverPaymentResultUseCase.
    """

    def __init__(
        self,
        intent_resolver: IntentResolver,
        user_notifier: UserNotifier,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        pending_payment_repository: PendingPaymentRepository,
        chooser_title: str = DEFAULT_CHOOSER_TITLE,
        no_handler_message: str = DEFAULT_NO_HANDLER_MESSAGE,
    ) -> None:
        self._intent_resolver = intent_resolver
        self._user_notifier = user_notifier
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._pending_repo = pending_payment_repository
        self._chooser_title = chooser_title
        self._no_handler_message = no_handler_message

    def execute(self, request: InitiatePaymentRequest) -> InitiatePaymentResponse:
        """Execute the initiate payment workflow.

        Args:
            request: The payment to make and the token to correlate its result.

        Returns:
            InitiatePaymentResponse with the outcome, the URI and the handle.

        Raises:
            OSError: Propagated from the intent resolver if launching fails.
        """
        uri = request.payment.to_uri()

        if not self._intent_resolver.has_handler(uri):
            logger.warning("No handler for UPI URI, notifying user: %s", uri)
            self._user_notifier.notify(self._no_handler_message)
            return InitiatePaymentResponse(
                outcome=DispatchOutcome.NO_HANDLER,
                uri=uri,
                pending_payment=None,
            )

        token = request.correlation_token
        with self._lock_provider.acquire(str(token.value)):
            now = self._time_provider.now()

            # Dispatch before saving; nothing is registered if the launch fails
            self._intent_resolver.dispatch(uri, token, self._chooser_title)

            previous = self._pending_repo.get(token)
            if previous is not None and previous.is_pending:
                logger.info(
                    "Replacing unresolved payment for token=%s dispatched at %s",
                    token.value,
                    previous.dispatched_at.isoformat(),
                )

            pending_payment = PendingPayment.create(
                correlation_token=token,
                request=request.payment,
                uri=uri,
                dispatched_at=now,
            )
            self._pending_repo.save(pending_payment)

        logger.info("Dispatched UPI payment token=%s uri=%s", token.value, uri)
        return InitiatePaymentResponse(
            outcome=DispatchOutcome.DISPATCHED,
            uri=uri,
            pending_payment=pending_payment,
        )
