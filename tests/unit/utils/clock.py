"""Clock helper for tests of time dependent code."""


class FakeClock:
    """Manually advanced clock used instead of time.monotonic."""

    def __init__(self, now: float = 1000.0) -> None:
        """Start the clock at the given reading."""
        self.now = now

    def __call__(self) -> float:
        """Return current reading."""
        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""
        self.now += seconds
