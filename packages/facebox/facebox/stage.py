"""Stage - binds a face box sequence to a tick driver and handles taps."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from facebox.driver import TickDriver
from facebox.sequence import SquareFaceBox
from facebox.types import Callback, TickContext

if TYPE_CHECKING:
    from facebox.config import FaceBoxConfig
    from facebox.surface import DrawingSurface

log = logging.getLogger(__name__)


class Stage:
    """Tap entry point and full redraw for one face box sequence.

    A tap that starts a step starts the driver and redraws once immediately.
    Every tick updates the sequence before redrawing; the tick that settles
    stops the driver first, so its redraw is the final frame of the step.
    """

    def __init__(self, config: FaceBoxConfig, driver: TickDriver | None = None) -> None:
        self._config = config
        self._controller = SquareFaceBox(config)
        self._driver = driver if driver is not None else TickDriver(config.period_ms)
        self._tick_count = 0

    @property
    def controller(self) -> SquareFaceBox:
        return self._controller

    @property
    def driver(self) -> TickDriver:
        return self._driver

    @property
    def busy(self) -> bool:
        return self._driver.running

    @property
    def tick_count(self) -> int:
        """Ticks consumed by the current or most recent step."""
        return self._tick_count

    def render(self, surface: DrawingSurface) -> None:
        surface.fill(self._config.back_color)
        self._controller.render(surface)

    def tap(self, redraw: Callback) -> bool:
        """Start the next step. Returns False if a step is already in flight."""
        if self._driver.running:
            log.debug("tap ignored, driver busy")
            return False
        if not self._controller.start_updating():
            log.debug("tap ignored, node %d still moving", self._controller.active_index)
            return False
        self._tick_count = 0
        first_tick = self._driver.clock.tick_number

        def tick(ctx: TickContext) -> None:
            self._tick_count = ctx.tick_number - first_tick
            if self._controller.update():
                self._driver.stop()
                log.debug("step settled after %d ticks", self._tick_count)
            redraw()

        self._driver.start(tick)
        redraw()
        return True
