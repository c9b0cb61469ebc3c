from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import quote, unquote, urlsplit

from upi_dispatch.domain.exceptions import InvalidPaymentUriError

UPI_SCHEME = "upi"
UPI_PAY_TARGET = "pay"

# Characters left as-is besides ASCII letters, digits and "_.-~", which quote()
# never escapes. Together they are the unreserved set of Android's Uri.encode.
_URI_SAFE_CHARS = "!'()*"


def _encode(value: str) -> str:
    return quote(value, safe=_URI_SAFE_CHARS)


@dataclass(frozen=True, slots=True)
class PaymentRequest:
    """Value object describing one UPI payment to hand off to a payment app.

    No field is validated: amount format, empty strings and arbitrary text
    are passed through as given. Upstream code owns validation.

    Currency is fixed to INR and is not part of the constructor.
    """

    CURRENCY: ClassVar[str] = "INR"

    amount: str
    note: str
    payee_name: str
    payee_address: str

    def query_items(self) -> list[tuple[str, str]]:
        """Return the query parameters in construction order."""
        return [
            ("pa", self.payee_address),
            ("pn", self.payee_name),
            ("tn", self.note),
            ("am", self.amount),
            ("cu", self.CURRENCY),
        ]

    def to_uri(self) -> str:
        """Build the ``upi://pay`` deep link for this request.

        Parameter order is pa, pn, tn, am, cu. Values are UTF-8
        percent-encoded, so "alice@bank" becomes "alice%40bank" and a space
        becomes "%20".
        """
        query = "&".join(f"{key}={_encode(value)}" for key, value in self.query_items())
        return f"{UPI_SCHEME}://{UPI_PAY_TARGET}?{query}"

    @classmethod
    def from_uri(cls, uri: str) -> PaymentRequest:
        """Decode a ``upi://pay`` deep link back into a PaymentRequest.

        Args:
            uri: Deep link as produced by to_uri() or by another UPI client.

        Returns:
            A PaymentRequest. Parameters missing from the URI decode as "".
            The first occurrence wins when a parameter is repeated.

        Raises:
            InvalidPaymentUriError: Scheme is not "upi" or target is not "pay".
        """
        parts = urlsplit(uri)
        if parts.scheme.lower() != UPI_SCHEME or parts.netloc.lower() != UPI_PAY_TARGET:
            raise InvalidPaymentUriError(f"Not a UPI payment URI: {uri}")

        params: dict[str, str] = {}
        for pair in parts.query.split("&"):
            if not pair:
                continue
            key, _, value = pair.partition("=")
            # "+" stays literal; to_uri() always escapes it as %2B
            params.setdefault(unquote(key), unquote(value))

        return cls(
            amount=params.get("am", ""),
            note=params.get("tn", ""),
            payee_name=params.get("pn", ""),
            payee_address=params.get("pa", ""),
        )
