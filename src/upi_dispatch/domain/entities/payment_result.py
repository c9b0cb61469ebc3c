"""Result reported back by a UPI payment app.

UPI apps return a single query-string style response, for example::

    txnId=AXI123&responseCode=00&Status=SUCCESS&txnRef=ORD42&ApprovalRefNo=998877

Key casing differs between apps ("Status" vs "status", "txnRef" vs "TxnRef"),
so keys are matched case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import unquote


class PaymentStatus(Enum):
    """Outcome of a payment as reported by the payment app."""

    SUCCESS = "success"
    SUBMITTED = "submitted"
    FAILURE = "failure"
    CANCELLED = "cancelled"


_STATUS_ALIASES = {
    "success": PaymentStatus.SUCCESS,
    "submitted": PaymentStatus.SUBMITTED,
    "pending": PaymentStatus.SUBMITTED,
    "failure": PaymentStatus.FAILURE,
    "failed": PaymentStatus.FAILURE,
}


def _parse_fields(raw_response: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for pair in raw_response.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        fields.setdefault(unquote(key).strip().lower(), unquote(value).strip())
    return fields


@dataclass(frozen=True, slots=True)
class PaymentResult:
    """Parsed payment app response.

    A missing or blank response means the user left the payment app without
    paying and maps to CANCELLED. An unrecognised status maps to FAILURE.
    """

    status: PaymentStatus
    transaction_id: str | None
    response_code: str | None
    approval_ref: str | None
    transaction_ref: str | None
    raw_response: str | None

    @classmethod
    def from_response(cls, raw_response: str | None) -> PaymentResult:
        """Parse the raw response string handed back by the payment app.

        Args:
            raw_response: The app's response, or None if it returned nothing.

        Returns:
            A PaymentResult. Fields absent from the response are None.
        """
        if raw_response is None or not raw_response.strip():
            return cls(
                status=PaymentStatus.CANCELLED,
                transaction_id=None,
                response_code=None,
                approval_ref=None,
                transaction_ref=None,
                raw_response=raw_response,
            )

        fields = _parse_fields(raw_response)
        status = _STATUS_ALIASES.get(fields.get("status", "").lower(), PaymentStatus.FAILURE)

        return cls(
            status=status,
            transaction_id=fields.get("txnid") or None,
            response_code=fields.get("responsecode") or None,
            approval_ref=fields.get("approvalrefno") or None,
            transaction_ref=fields.get("txnref") or None,
            raw_response=raw_response,
        )

    @property
    def is_success(self) -> bool:
        return self.status == PaymentStatus.SUCCESS
