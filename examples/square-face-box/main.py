"""Square Face Box — tap-driven icon animation.

Exercises facebox: Stage, SquareFaceBox and TickDriver.

Controls:
  Click   Tap: step the active face box
  Space   Tap
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from facebox import PRESETS, Stage

from ui.canvas import PygameSurface
from ui.constants import CAPTION, FPS, SCREEN_H, SCREEN_W

log = logging.getLogger("square_face_box")


class AppState:
    """Holds the stage and the dirty flag the redraw callback sets."""

    def __init__(self, parts: int) -> None:
        self.config = PRESETS[parts]
        self.stage = Stage(self.config)
        self.dirty = True
        self.taps = 0

    def request_redraw(self) -> None:
        self.dirty = True

    def tap(self) -> None:
        if self.stage.tap(self.request_redraw):
            self.taps += 1
            log.info("tap %d: node %d moving", self.taps, self.stage.controller.active_index)


def main() -> None:
    parser = argparse.ArgumentParser(description="Square Face Box — tap-driven icon animation")
    parser.add_argument("--parts", "-p", type=int, choices=sorted(PRESETS), default=4,
                        help="animated parts variant (5 draws cut-out eyes)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log node hand-offs and driver lifecycle")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-5s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    state = AppState(args.parts)
    canvas = PygameSurface(screen)
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.tap()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                state.tap()

        # --- Tick ---
        state.stage.driver.advance(dt)

        # --- Render ---
        if state.dirty:
            state.stage.render(canvas)
            pygame.display.flip()
            state.dirty = False

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
