import itertools
import logging
import threading
import time
from typing import Callable, Optional

from .exceptions import ResetAlreadyPending


class ResetScheduler:
    """Holds at most one delayed reset.

    The delay runs in a background task started with `start_task` (by
    default a plain thread; the app passes `socketio.start_background_task`
    and `socketio.sleep`). A fired timer clears its own pending handle
    before running the callback, so the callback may schedule again.
    """

    def __init__(self, start_task: Optional[Callable] = None, sleep: Optional[Callable] = None, logger=None):
        self._start_task = start_task or _start_thread
        self._sleep = sleep or time.sleep
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._handles = itertools.count(1)
        self._pending: Optional[int] = None

    @property
    def pending(self) -> Optional[int]:
        """Handle of the armed timer, or None."""
        return self._pending

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> int:
        with self._lock:
            if self._pending is not None:
                raise ResetAlreadyPending(self._pending)
            handle = next(self._handles)
            self._pending = handle
        self._logger.info(f"[timer-set] handle={handle} delay={delay_ms}ms")
        self._start_task(self._worker, handle, delay_ms, callback)
        return handle

    def cancel(self) -> None:
        with self._lock:
            handle, self._pending = self._pending, None
        if handle is not None:
            self._logger.info(f"[timer-cancel] handle={handle}")

    def _worker(self, handle: int, delay_ms: int, callback: Callable[[], None]) -> None:
        self._sleep(delay_ms / 1000.0)
        with self._lock:
            if self._pending != handle:
                self._logger.info(f"[timer-abort] handle={handle} no longer pending")
                return
            self._pending = None
        self._logger.info(f"[timer-fire] handle={handle}")
        callback()


def _start_thread(target, *args):
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread
