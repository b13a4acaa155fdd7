"""
Game clock owned by the board.

Measures time-to-solve in whole milliseconds. The time source is
injectable so tests can drive it by hand.
"""
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class GameClock:
    """
    Restartable stopwatch.

    Attributes:
        time_source: Returns the current time in seconds. Must be
            monotonic.
    """

    time_source: Callable[[], float] = time.monotonic
    _started_at: float = field(default=0.0, init=False, repr=False)
    _stopped_at: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.arm()

    def arm(self) -> None:
        """(Re)start timing from now."""
        self._started_at = self.time_source()
        self._stopped_at = None

    def stop(self) -> None:
        """Freeze the elapsed value. Stopping twice keeps the first mark."""
        if self._stopped_at is None:
            self._stopped_at = self.time_source()

    @property
    def is_running(self) -> bool:
        return self._stopped_at is None

    def elapsed_ms(self) -> int:
        end = self._stopped_at if self._stopped_at is not None else self.time_source()
        return max(0, int((end - self._started_at) * 1000))
