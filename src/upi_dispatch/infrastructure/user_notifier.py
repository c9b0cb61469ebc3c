from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from upi_dispatch.application.ports import UserNotifier

if TYPE_CHECKING:
    from typing import TextIO


class ConsoleUserNotifier(UserNotifier):
    """Prints each message as one line to a text stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(message, file=stream, flush=True)


class RecordingUserNotifier(UserNotifier):
    """Collects messages instead of showing them."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
