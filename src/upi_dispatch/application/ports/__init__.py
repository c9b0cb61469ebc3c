"""Ports - Abstract interfaces for host and infrastructure dependencies.

Ports define the contracts that infrastructure adapters must implement.
This keeps the use cases testable without a real host platform.
"""

from upi_dispatch.application.ports.intent_resolver import IntentResolver
from upi_dispatch.application.ports.lock_provider import LockProvider
from upi_dispatch.application.ports.pending_payment_repository import PendingPaymentRepository
from upi_dispatch.application.ports.time_provider import TimeProvider
from upi_dispatch.application.ports.user_notifier import UserNotifier

__all__ = [
    "IntentResolver",
    "LockProvider",
    "PendingPaymentRepository",
    "TimeProvider",
    "UserNotifier",
]
