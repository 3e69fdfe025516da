"""Periodic removal of expired response cache entries."""

import logging
from threading import Event, Thread
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class CacheSweeper:
    """Run a sweep function in a separated daemon thread with a fixed period.

    The sweep runs independently of request handling. Errors raised by the
    sweep function are logged and the loop continues with the next period.
    """

    def __init__(self, name: str, sweep: Callable[[], int], period: float) -> None:
        """Prepare the sweeper; the thread is not started yet.

        Parameters:
            name (str): Name used in logs and as the thread name.
            sweep (Callable[[], int]): Function removing expired entries and
            returning their count.
            period (float): Period between two sweeps in seconds.
        """
        self.name = name
        self.period = period
        self._sweep = sweep
        self._stop_event = Event()
        self._thread: Optional[Thread] = None

    def start(self) -> None:
        """Start the sweeper thread; starting a running sweeper is a no-op."""
        if self.running():
            return
        self._stop_event.clear()
        self._thread = Thread(
            target=self._run, name=f"cache-sweeper-{self.name}", daemon=True
        )
        self._thread.start()
        logger.info(
            "Cache sweeper '%s' started in separated thread with period set to %s seconds",
            self.name,
            self.period,
        )

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the sweeper thread to stop and wait for it."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
            logger.info("Cache sweeper '%s' stopped", self.name)

    def running(self) -> bool:
        """Check if the sweeper thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        # Event.wait returns True once stop() has been called
        while not self._stop_event.wait(self.period):
            try:
                removed = self._sweep()
                logger.debug(
                    "Cache sweeper '%s' removed %d expired entries", self.name, removed
                )
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error("Cache sweep '%s' failed: %s", self.name, e)
