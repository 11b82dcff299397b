"""
Cancellable periodic task used to drive inertial deceleration.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DecayTicker:
    """
    Runs a callback on a background thread at a fixed period.

    The callback fires once immediately and then once per interval until it
    returns False or stop() is called. Between ticks the thread waits on an
    event, so stopping wakes it at once instead of after a full period.
    """

    def __init__(self, interval_ms: float = 16):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.interval = interval_ms / 1000.0
        self.thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._control_lock = threading.Lock()

    @property
    def running(self) -> bool:
        thread = self.thread
        return thread is not None and thread.is_alive() and not self._stop_event.is_set()

    def start(self, callback: Callable[[], bool]):
        """Start ticking, replacing any task already running."""
        self.stop()
        with self._control_lock:
            stop_event = threading.Event()
            self._stop_event = stop_event
            self.thread = threading.Thread(
                target=self._tick_loop, args=(callback, stop_event), name="decay-ticker"
            )
            self.thread.daemon = True
            self.thread.start()

    def stop(self):
        """Stop ticking. Safe to call repeatedly and from the tick thread."""
        with self._control_lock:
            self._stop_event.set()
            thread = self.thread
            self.thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1)

    def _tick_loop(self, callback: Callable[[], bool], stop_event: threading.Event):
        """Main tick loop."""
        try:
            while not stop_event.is_set():
                if not callback():
                    break
                if stop_event.wait(self.interval):
                    break
        except Exception as e:
            logger.error(f"Error in decay ticker: {e}")
        finally:
            stop_event.set()
