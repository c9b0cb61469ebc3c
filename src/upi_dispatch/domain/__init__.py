"""Domain layer - Payment requests, results and their rules.

This layer contains:
- Value Objects: Immutable objects defined by their attributes (PaymentRequest, CorrelationToken)
- Entities: Objects with a lifecycle (PendingPayment, PaymentResult)
- Domain Exceptions: Validation and state transition violations

The domain layer has NO dependencies on external frameworks or the host platform.
"""
