"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime

import pytest

from upi_dispatch.domain.value_objects import CorrelationToken, PaymentRequest
from upi_dispatch.infrastructure.intent_resolver import RecordingIntentResolver
from upi_dispatch.infrastructure.lock_provider import NoOpLockProvider
from upi_dispatch.infrastructure.pending_payment_repository import (
    InMemoryPendingPaymentRepository,
)
from upi_dispatch.infrastructure.time_provider import FixedTimeProvider
from upi_dispatch.infrastructure.user_notifier import RecordingUserNotifier


@pytest.fixture
def now() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(now: datetime) -> FixedTimeProvider:
    return FixedTimeProvider(now)


@pytest.fixture
def lock_provider() -> NoOpLockProvider:
    """Use NoOpLockProvider for unit tests (single-threaded)."""
    return NoOpLockProvider()


@pytest.fixture
def pending_payment_repository() -> InMemoryPendingPaymentRepository:
    return InMemoryPendingPaymentRepository()


@pytest.fixture
def intent_resolver() -> RecordingIntentResolver:
    return RecordingIntentResolver(handler_available=True)


@pytest.fixture
def user_notifier() -> RecordingUserNotifier:
    return RecordingUserNotifier()


@pytest.fixture
def payment() -> PaymentRequest:
    return PaymentRequest(
        amount="100.00",
        note="Lunch",
        payee_name="Alice",
        payee_address="alice@bank",
    )


@pytest.fixture
def correlation_token() -> CorrelationToken:
    return CorrelationToken.default()


SETTINGS_ENV_VARS = (
    "UPI_DISPATCH_REQUEST_CODE",
    "UPI_DISPATCH_CHOOSER_TITLE",
    "UPI_DISPATCH_NO_HANDLER_MESSAGE",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Unset settings variables; anything load_dotenv() adds is removed on teardown."""
    for name in SETTINGS_ENV_VARS:
        # setenv first so monkeypatch records the original state for undo
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
