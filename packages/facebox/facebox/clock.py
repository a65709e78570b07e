"""Clock and TickContext for the fixed-period tick driver."""

from facebox.types import TickContext


class Clock:
    def __init__(self, period_ms: int) -> None:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self._period_ms = period_ms
        self._dt = period_ms / 1000.0
        self._tick_number = 0

    @property
    def period_ms(self) -> int:
        return self._period_ms

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
        )
