"""Value objects - Immutable objects defined by their attributes."""

from upi_dispatch.domain.value_objects.correlation_token import CorrelationToken
from upi_dispatch.domain.value_objects.payment_request import PaymentRequest

__all__ = [
    "CorrelationToken",
    "PaymentRequest",
]
