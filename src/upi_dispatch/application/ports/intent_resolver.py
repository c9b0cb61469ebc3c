from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from upi_dispatch.domain.value_objects import CorrelationToken


class IntentResolver(ABC):
    """Port for the host's deep-link resolution and launch facility.

    Contract:
    - has_handler() is a pure query; it MUST NOT launch anything
    - dispatch() is fire-and-forget; it MUST NOT block on the payment app
    - dispatch() presents a chooser labelled with chooser_title when the host
      supports one, otherwise launches the default handler
    - The payment app's response, if any, comes back out of band keyed by
      correlation_token (see DeliverPaymentResultUseCase)
    """

    @abstractmethod
    def has_handler(self, uri: str) -> bool:
        """Return True if at least one installed application can open uri."""

    @abstractmethod
    def dispatch(self, uri: str, correlation_token: CorrelationToken, chooser_title: str) -> None:
        """Ask the host to let the user pick an app for uri and launch it.

        Args:
            uri: The ``upi://pay`` deep link.
            correlation_token: Request code the host echoes back with the result.
            chooser_title: Label shown on the host's app chooser.

        Raises:
            OSError: The host launch mechanism itself failed.
        """
