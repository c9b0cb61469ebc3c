"""Use cases - Payment initiation and result delivery."""

from upi_dispatch.application.use_cases.deliver_payment_result import (
    DeliverPaymentResultRequest,
    DeliverPaymentResultResponse,
    DeliverPaymentResultUseCase,
)
from upi_dispatch.application.use_cases.initiate_payment import (
    DispatchOutcome,
    InitiatePaymentRequest,
    InitiatePaymentResponse,
    InitiatePaymentUseCase,
)

__all__ = [
    "DeliverPaymentResultRequest",
    "DeliverPaymentResultResponse",
    "DeliverPaymentResultUseCase",
    "DispatchOutcome",
    "InitiatePaymentRequest",
    "InitiatePaymentResponse",
    "InitiatePaymentUseCase",
]
