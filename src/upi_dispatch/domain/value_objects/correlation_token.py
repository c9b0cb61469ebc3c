from __future__ import annotations

from dataclasses import dataclass

from upi_dispatch.domain.exceptions import InvalidCorrelationTokenError

DEFAULT_REQUEST_CODE = 101
MAX_REQUEST_CODE = 0xFFFF


@dataclass(frozen=True, slots=True)
class CorrelationToken:
    """Value object for the request code that ties a dispatch to its result.

    The same token must be used on both ends: the dispatcher hands it to the
    host when launching the chooser, and the host hands it back alongside the
    payment app's response.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True would silently become request code 1
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidCorrelationTokenError(
                f"Correlation token must be an int, got {type(self.value).__name__}"
            )

        if not 0 <= self.value <= MAX_REQUEST_CODE:
            raise InvalidCorrelationTokenError(
                f"Correlation token must be between 0 and {MAX_REQUEST_CODE}, got {self.value}"
            )

    @classmethod
    def default(cls) -> CorrelationToken:
        """Return the token used when the caller does not pick one."""
        return cls(value=DEFAULT_REQUEST_CODE)
