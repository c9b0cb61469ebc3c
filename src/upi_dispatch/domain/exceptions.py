"""Domain exceptions for upi-dispatch.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   ├── InvalidPaymentUriError
    │   └── InvalidCorrelationTokenError
    ├── State & Transition Errors
    │   ├── InvalidStateTransitionError
    │   └── PaymentAlreadyResolvedError
    └── Not Found Errors
        └── PendingPaymentNotFoundError

A missing payment app is NOT an exception. InitiatePaymentUseCase reports it
to the user through the UserNotifier port and returns DispatchOutcome.NO_HANDLER.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from adapter (OS, subprocess) errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidPaymentUriError(DomainException):
    """Raised when a URI cannot be decoded as a ``upi://pay`` request."""


class InvalidCorrelationTokenError(DomainException):
    """Raised when a correlation token is not an int in 0..0xFFFF.

    Android keeps only the lower 16 bits of an activity request code, so
    anything wider would never match on the result side.
    """


# =============================================================================
# State & Transition Errors
# =============================================================================


class InvalidStateTransitionError(DomainException):
    """Raised when a pending payment transition violates its state machine.

    Valid transitions:
        - pending → resolved

    resolved is terminal.
    """


class PaymentAlreadyResolvedError(DomainException):
    """Raised when a second, different result arrives for a resolved payment.

    Delivering the exact same raw response again is a replay and is accepted.
    A different response means the result channel is confused (two apps, or a
    stale result for an earlier dispatch) and is rejected without mutation.
    """


# =============================================================================
# Not Found Errors
# =============================================================================


class PendingPaymentNotFoundError(DomainException):
    """Raised when a result arrives for a correlation token nobody dispatched."""
