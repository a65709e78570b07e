"""TickDriver - fixed-period tick pump with an idle/running lifecycle."""

import enum
import logging
import time

from facebox.clock import Clock
from facebox.types import Tick

log = logging.getLogger(__name__)


class DriverState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class TickDriver:
    """Invokes a tick callable once per period while running.

    At most one tick is registered at a time: ``start`` while running and
    ``stop`` while idle are no-ops. The driver does not own a thread; the host
    loop feeds it elapsed time through ``advance`` or blocks in
    ``run_until_idle``.
    """

    def __init__(self, period_ms: int = 20) -> None:
        self._clock = Clock(period_ms)
        self._state = DriverState.IDLE
        self._tick: Tick | None = None
        self._accumulator = 0.0

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is DriverState.RUNNING

    def start(self, tick: Tick) -> bool:
        if self._state is DriverState.RUNNING:
            return False
        self._tick = tick
        self._accumulator = 0.0
        self._state = DriverState.RUNNING
        log.debug("driver started at tick %d", self._clock.tick_number)
        return True

    def stop(self) -> bool:
        if self._state is DriverState.IDLE:
            return False
        self._tick = None
        self._accumulator = 0.0
        self._state = DriverState.IDLE
        log.debug("driver stopped at tick %d", self._clock.tick_number)
        return True

    def step(self) -> bool:
        """Fire one tick if running. Returns whether a tick fired."""
        tick = self._tick
        if self._state is DriverState.IDLE or tick is None:
            return False
        self._clock.advance()
        tick(self._clock.context())
        return True

    def advance(self, elapsed: float) -> int:
        """Feed ``elapsed`` seconds of host time; fire the ticks now due."""
        if self._state is DriverState.IDLE:
            return 0
        self._accumulator += elapsed
        dt = self._clock.dt
        fired = 0
        while self._accumulator >= dt and self.running:
            self._accumulator -= dt
            self.step()
            fired += 1
        return fired

    def run_until_idle(self, max_ticks: int | None = None) -> int:
        """Block, pacing ticks at the clock period, until the driver stops."""
        dt = self._clock.dt
        fired = 0
        while self.running:
            if max_ticks is not None and fired >= max_ticks:
                break
            start = time.monotonic()
            self.step()
            fired += 1
            if not self.running:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
        return fired
