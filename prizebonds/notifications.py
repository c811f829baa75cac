"""
Design (notifications.py)
- Purpose: Keep the list of live toasts and expire each one after a fixed delay.
- Inputs: A scheduler with Tk's after(ms, func) / after_cancel(handle) API.
- Outputs: Notification objects; on_change callback whenever the live list changes.
- Side effects: Schedules timers; optionally pops an OS notification through plyer.
- Thread-safety: Main (Tk) thread only.

Each toast owns one cancellable timer. Dismissing a toast cancels its timer, and a timer
that fires for a toast that is already gone does nothing.
"""

import itertools
import logging
from typing import Callable, Dict, List, Optional

from plyer import notification as system_notification

from .config import APP_TITLE, NOTIFICATION_TIMEOUT_MS
from .models import Notification, Severity

logger = logging.getLogger(__name__)


class NotificationCenter:
    """
    Design (NotificationCenter)
    - Public attributes:
        system_notify (bool): also forward every toast to the OS notification area
    - Public methods:
        notify(severity, message) -> Notification
        success()/warning()/error(): shorthands for notify()
        dismiss(id): remove early; no-op for unknown ids
        active(): live toasts, oldest first
    """

    def __init__(
        self,
        scheduler,
        on_change: Optional[Callable[[], None]] = None,
        timeout_ms: int = NOTIFICATION_TIMEOUT_MS,
        system_notify: bool = False,
    ) -> None:
        self.scheduler = scheduler
        self.on_change = on_change
        self.timeout_ms = timeout_ms
        self.system_notify = system_notify
        self._ids = itertools.count(1)
        self._live: Dict[int, Notification] = {}
        self._timers: Dict[int, object] = {}

    def notify(self, severity: Severity, message: str) -> Notification:
        n = Notification(id=next(self._ids), severity=severity, message=message)
        self._live[n.id] = n
        self._timers[n.id] = self.scheduler.after(self.timeout_ms, lambda: self._expire(n.id))
        logger.debug("Notification %d (%s): %s", n.id, severity.value, message)
        if self.system_notify:
            self._send_system(n)
        self._changed()
        return n

    def success(self, message: str) -> Notification:
        return self.notify(Severity.SUCCESS, message)

    def warning(self, message: str) -> Notification:
        return self.notify(Severity.WARNING, message)

    def error(self, message: str) -> Notification:
        return self.notify(Severity.ERROR, message)

    def dismiss(self, notification_id: int) -> None:
        handle = self._timers.pop(notification_id, None)
        if handle is not None:
            self.scheduler.after_cancel(handle)
        if self._live.pop(notification_id, None) is not None:
            self._changed()

    def active(self) -> List[Notification]:
        return list(self._live.values())

    def _expire(self, notification_id: int) -> None:
        self._timers.pop(notification_id, None)
        if self._live.pop(notification_id, None) is not None:
            self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _send_system(self, n: Notification) -> None:
        try:
            system_notification.notify(
                title=f"{APP_TITLE}: {n.severity.value.capitalize()}",
                message=n.message,
                timeout=max(1, self.timeout_ms // 1000),
            )
        except Exception as exc:  # plyer backends raise anything from NotImplementedError to OSError
            logger.warning("System notification failed: %s", exc)
