"""Domain entities - Objects with identity and lifecycle."""

from upi_dispatch.domain.entities.payment_result import PaymentResult, PaymentStatus
from upi_dispatch.domain.entities.pending_payment import PendingPayment, PendingPaymentState

__all__ = [
    "PaymentResult",
    "PaymentStatus",
    "PendingPayment",
    "PendingPaymentState",
]
