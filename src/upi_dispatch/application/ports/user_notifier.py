from abc import ABC, abstractmethod


class UserNotifier(ABC):
    """Port for short, transient, non-blocking user messages (a toast)."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show message to the user. No acknowledgment is awaited."""
        ...
