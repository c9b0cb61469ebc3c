"""Tests for InMemoryPendingPaymentRepository.

Tests cover:
- PendingPaymentRepository interface implementation
- Copy-on-read and copy-on-write behavior
- Upsert keyed by correlation token
"""

from datetime import datetime

import pytest

from upi_dispatch.application.ports import PendingPaymentRepository
from upi_dispatch.domain.entities import PaymentResult, PendingPayment, PendingPaymentState
from upi_dispatch.domain.value_objects import CorrelationToken, PaymentRequest
from upi_dispatch.infrastructure.pending_payment_repository import (
    InMemoryPendingPaymentRepository,
)


@pytest.fixture
def repository() -> InMemoryPendingPaymentRepository:
    return InMemoryPendingPaymentRepository()


@pytest.fixture
def pending(
    payment: PaymentRequest, correlation_token: CorrelationToken, now: datetime
) -> PendingPayment:
    return PendingPayment.create(
        correlation_token=correlation_token,
        request=payment,
        uri=payment.to_uri(),
        dispatched_at=now,
    )


class TestInMemoryPendingPaymentRepository:
    def test_implements_repository_interface(
        self, repository: InMemoryPendingPaymentRepository
    ) -> None:
        assert isinstance(repository, PendingPaymentRepository)

    def test_get_returns_none_for_unknown_token(
        self, repository: InMemoryPendingPaymentRepository
    ) -> None:
        assert repository.get(CorrelationToken(value=5)) is None

    def test_save_then_get_returns_equal_entity(
        self,
        repository: InMemoryPendingPaymentRepository,
        pending: PendingPayment,
        correlation_token: CorrelationToken,
    ) -> None:
        repository.save(pending)

        assert repository.get(correlation_token) == pending

    def test_get_returns_copy(
        self,
        repository: InMemoryPendingPaymentRepository,
        pending: PendingPayment,
        correlation_token: CorrelationToken,
    ) -> None:
        repository.save(pending)

        first = repository.get(correlation_token)
        second = repository.get(correlation_token)

        assert first is not pending
        assert first is not second
        assert first == second

    def test_save_replaces_entity_for_same_token(
        self,
        repository: InMemoryPendingPaymentRepository,
        pending: PendingPayment,
        correlation_token: CorrelationToken,
        now: datetime,
    ) -> None:
        repository.save(pending)
        resolved = pending.resolve(PaymentResult.from_response("Status=SUCCESS"), now)

        repository.save(resolved)

        stored = repository.get(correlation_token)
        assert stored is not None
        assert stored.state == PendingPaymentState.RESOLVED

    def test_tokens_are_stored_independently(
        self,
        repository: InMemoryPendingPaymentRepository,
        pending: PendingPayment,
        payment: PaymentRequest,
        now: datetime,
    ) -> None:
        other = PendingPayment.create(
            correlation_token=CorrelationToken(value=202),
            request=payment,
            uri=payment.to_uri(),
            dispatched_at=now,
        )

        repository.save(pending)
        repository.save(other)

        assert repository.get(CorrelationToken(value=101)) == pending
        assert repository.get(CorrelationToken(value=202)) == other
