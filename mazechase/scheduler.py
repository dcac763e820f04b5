"""
Fixed-interval timer used to drive ticks from a variable frame rate.
NO UI DEPENDENCIES.
"""


class IntervalTimer:
    """
    Converts elapsed frame time into whole fixed-length intervals.

    The host loop feeds it frame deltas through advance(); the timer
    answers how many intervals completed and carries the remainder over
    to the next frame. A stopped timer counts nothing and accumulates
    nothing.
    """

    def __init__(self, interval: float, start: bool = True):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._accumulated = 0.0
        self._running = start

    @property
    def running(self) -> bool:
        return self._running

    @property
    def accumulated(self) -> float:
        """Time carried towards the next interval."""
        return self._accumulated

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        """Stop counting. Time already carried is kept."""
        self._running = False

    def reset(self) -> None:
        """Drop carried time and start counting from zero."""
        self._accumulated = 0.0
        self._running = True

    def advance(self, dt: float) -> int:
        """
        Add dt seconds.
        Returns the number of intervals that completed.
        """
        if not self._running or dt <= 0:
            return 0

        self._accumulated += dt
        fired = int(self._accumulated // self.interval)
        self._accumulated -= fired * self.interval
        return fired
