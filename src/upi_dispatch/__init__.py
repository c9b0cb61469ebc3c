"""upi-dispatch - Build UPI payment deep links and hand them to a payment app."""

from upi_dispatch.domain.value_objects import CorrelationToken, PaymentRequest

__version__ = "0.1.0"

__all__ = [
    "CorrelationToken",
    "PaymentRequest",
]
