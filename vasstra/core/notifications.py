# vasstra/core/notifications.py
import logging
from dataclasses import dataclass
from typing import Callable, Literal

logger = logging.getLogger(__name__)

NotificationLevel = Literal["success", "info", "error"]


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str


Listener = Callable[[Notification], None]


class Notifier:
    """
    Toast-style feedback channel between stores and whatever UI is attached.

    Stores call success/info/error; the UI subscribes and renders.
    Every notification is also kept in `history` and logged, so headless
    callers (tests, scripts) can inspect what a shopper would have seen.
    """

    def __init__(self) -> None:
        self.history: list[Notification] = []
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener. Returns a callable that unsubscribes it.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self.history.append(notification)

        if level == "error":
            logger.warning(f"[toast:{level}] {message}")
        else:
            logger.info(f"[toast:{level}] {message}")

        for listener in list(self._listeners):
            listener(notification)
        return notification

    def success(self, message: str) -> Notification:
        return self.notify("success", message)

    def info(self, message: str) -> Notification:
        return self.notify("info", message)

    def error(self, message: str) -> Notification:
        return self.notify("error", message)
