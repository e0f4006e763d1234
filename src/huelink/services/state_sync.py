import logging
import threading
import time
from typing import Callable, Optional

from huelink.api.portal import User
from huelink.commands.base import as_payload
from huelink.exceptions import HueTransportError

logger = logging.getLogger(__name__)


class StateSyncThrottle:
    """Collects light state changes and sends them at most once per ``interval`` seconds.

    Meant for input that produces a stream of small changes (dragging a color
    wheel, hovering over lights). Later changes to the same light are merged into
    the pending body, so only the newest values reach the bridge. A change queued
    inside the interval is sent by a timer once the interval has passed, so the
    last value of a burst is never left behind. Call :meth:`close` when done.
    """

    def __init__(
        self,
        user: User,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        timer: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.user = user
        self.interval = interval
        self._clock = clock
        self._timer_factory = timer
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.RLock()
        self._pending: dict = {}
        self._last_sync: Optional[float] = None

    @property
    def pending(self) -> dict:
        with self._lock:
            return {light_id: dict(state) for light_id, state in self._pending.items()}

    @property
    def scheduled(self) -> bool:
        return self._timer is not None

    def due(self) -> bool:
        return self._last_sync is None or self._clock() - self._last_sync >= self.interval

    def queue(self, light_id, state) -> bool:
        """Record a change; returns True if it triggered a sync right away."""
        with self._lock:
            self._pending.setdefault(light_id, {}).update(as_payload(state))
            if self.due():
                self.flush()
                return True
            if self._timer is None:
                delay = self.interval - (self._clock() - self._last_sync)
                self._timer = self._timer_factory(delay, self._flush_scheduled)
                self._timer.daemon = True
                self._timer.start()
            return False

    def flush(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._last_sync = self._clock()
            pending, self._pending = self._pending, {}
            first_error = None

            for light_id, state in pending.items():
                try:
                    self.user.set_light_state(light_id, state)
                except HueTransportError as e:
                    logger.warning("Could not sync light %s: %s", light_id, e)
                    # newer changes queued meanwhile win over the failed body
                    self._pending[light_id] = {**state, **self._pending.get(light_id, {})}
                    first_error = first_error or e

            if first_error is not None:
                raise first_error

    def close(self) -> None:
        """Stop the timer and send whatever is still pending."""
        with self._lock:
            self._cancel_timer()
            if self._pending:
                self.flush()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _flush_scheduled(self) -> None:
        # Runs on the timer thread; failed lights stay pending for the next queue/flush/close.
        try:
            self.flush()
        except HueTransportError:
            logger.warning("Scheduled sync left %d light(s) pending", len(self._pending))
