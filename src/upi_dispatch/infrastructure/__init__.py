"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Host Platform: Intent resolution via xdg-utils/open, console notifications
- Storage: In-memory pending payment repository
- Time Provider: Clock abstraction for testability
- Locking: Per-correlation-token locks

Infrastructure adapters implement the ports defined in the application layer.
Recording* adapters stand in for the host in tests and headless runs.
"""

from upi_dispatch.infrastructure.intent_resolver import (
    RecordingIntentResolver,
    SystemIntentResolver,
)
from upi_dispatch.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from upi_dispatch.infrastructure.pending_payment_repository import (
    InMemoryPendingPaymentRepository,
)
from upi_dispatch.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider
from upi_dispatch.infrastructure.user_notifier import ConsoleUserNotifier, RecordingUserNotifier

__all__ = [
    "ConsoleUserNotifier",
    "FixedTimeProvider",
    "InMemoryLockProvider",
    "InMemoryPendingPaymentRepository",
    "NoOpLockProvider",
    "RecordingIntentResolver",
    "RecordingUserNotifier",
    "SystemIntentResolver",
    "SystemTimeProvider",
]
