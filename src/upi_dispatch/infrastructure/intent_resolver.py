from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from upi_dispatch.application.ports import IntentResolver

if TYPE_CHECKING:
    from upi_dispatch.domain.value_objects import CorrelationToken

logger = logging.getLogger(__name__)


class SystemIntentResolver(IntentResolver):
    """Desktop intent resolver backed by the OS URL-scheme registry.

    Linux/BSD (freedesktop):
    - has_handler() asks ``xdg-mime query default x-scheme-handler/<scheme>``;
      a non-empty answer means an application is registered for the scheme
    - dispatch() starts ``xdg-open <uri>`` and does not wait for it

    macOS:
    - has_handler() only checks that ``open`` exists; macOS has no CLI query
      for URL-scheme handlers
    - dispatch() starts ``open <uri>``

    Desktops have no chooser and no result channel. The chooser title and
    correlation token are logged only.
    """

    def __init__(self, platform: str | None = None) -> None:
        self._platform = platform or sys.platform

    @property
    def _is_macos(self) -> bool:
        return self._platform == "darwin"

    def has_handler(self, uri: str) -> bool:
        if self._is_macos:
            return shutil.which("open") is not None

        xdg_mime = shutil.which("xdg-mime")
        if xdg_mime is None or shutil.which("xdg-open") is None:
            logger.debug("xdg-utils not installed; no handler for %s", uri)
            return False

        scheme = urlsplit(uri).scheme
        command = [xdg_mime, "query", "default", f"x-scheme-handler/{scheme}"]
        logger.debug("Running %s", command)
        completed = subprocess.run(command, capture_output=True, text=True, check=False)
        return completed.returncode == 0 and bool(completed.stdout.strip())

    def dispatch(self, uri: str, correlation_token: CorrelationToken, chooser_title: str) -> None:
        launcher_name = "open" if self._is_macos else "xdg-open"
        launcher = shutil.which(launcher_name)
        if launcher is None:
            raise FileNotFoundError(f"{launcher_name} not found on PATH")

        logger.debug(
            "Launching %s (%r, token=%s) for %s",
            launcher_name,
            chooser_title,
            correlation_token.value,
            uri,
        )
        subprocess.Popen(
            [launcher, uri],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )


@dataclass(frozen=True, slots=True)
class DispatchCall:
    """One recorded IntentResolver.dispatch() call."""

    uri: str
    correlation_token: CorrelationToken
    chooser_title: str


class RecordingIntentResolver(IntentResolver):
    """Intent resolver that launches nothing and records every call.

    Use this in tests and headless environments. has_handler() answers with
    the configured handler_available flag.
    """

    def __init__(self, handler_available: bool = True) -> None:
        self.handler_available = handler_available
        self.queried_uris: list[str] = []
        self.dispatched: list[DispatchCall] = []

    def has_handler(self, uri: str) -> bool:
        self.queried_uris.append(uri)
        return self.handler_available

    def dispatch(self, uri: str, correlation_token: CorrelationToken, chooser_title: str) -> None:
        self.dispatched.append(
            DispatchCall(uri=uri, correlation_token=correlation_token, chooser_title=chooser_title)
        )
