"""Face box chain and the controller that walks it."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from facebox.renderer import draw_square_face_box
from facebox.state import AnimationState
from facebox.types import Callback

if TYPE_CHECKING:
    from facebox.config import FaceBoxConfig
    from facebox.surface import DrawingSurface

log = logging.getLogger(__name__)


@dataclass
class SequenceNode:
    """One face box in the chain. Neighbors are list indices, None at the ends."""

    index: int
    state: AnimationState
    prev: int | None = None
    next: int | None = None

    def draw(self, surface: DrawingSurface, config: FaceBoxConfig) -> None:
        draw_square_face_box(surface, config, self.index, self.state.progress)

    def update(self, on_settle: Callback | None = None) -> bool:
        return self.state.update(on_settle)

    def start_updating(self, on_start: Callback | None = None) -> bool:
        return self.state.start_updating(on_start)

    def neighbor(self, direction: int, on_no_neighbor: Callback) -> int:
        """Index of the neighbor in ``direction``; own index at a chain end."""
        target = self.next if direction == 1 else self.prev
        if target is None:
            on_no_neighbor()
            return self.index
        return target


def build_chain(count: int, step: float) -> list[SequenceNode]:
    """Build ``count`` linked nodes in increasing index order."""
    if count < 1:
        raise ValueError("chain needs at least one node")
    return [
        SequenceNode(
            index=i,
            state=AnimationState(step=step),
            prev=i - 1 if i > 0 else None,
            next=i + 1 if i < count - 1 else None,
        )
        for i in range(count)
    ]


class SquareFaceBox:
    """Owns the chain, the active node and the global traversal direction.

    Only the active node animates and draws. When it settles, control moves to
    its neighbor in the current direction; at either end the direction flips
    and the same node stays active for one more step.
    """

    def __init__(self, config: FaceBoxConfig) -> None:
        self._config = config
        self._nodes = build_chain(len(config.colors), config.step)
        self._active = self._nodes[0]
        self._direction = 1

    @property
    def config(self) -> FaceBoxConfig:
        return self._config

    @property
    def nodes(self) -> tuple[SequenceNode, ...]:
        return tuple(self._nodes)

    @property
    def active(self) -> SequenceNode:
        return self._active

    @property
    def active_index(self) -> int:
        return self._active.index

    @property
    def direction(self) -> int:
        return self._direction

    def __len__(self) -> int:
        return len(self._nodes)

    def render(self, surface: DrawingSurface) -> None:
        self._active.draw(surface, self._config)

    def update(self, on_settle: Callback | None = None) -> bool:
        if not self._active.update():
            return False
        settled = self._active.index
        target = self._active.neighbor(self._direction, self._reverse)
        self._active = self._nodes[target]
        log.debug("node %d settled, active node now %d", settled, target)
        if on_settle is not None:
            on_settle()
        return True

    def start_updating(self, on_start: Callback | None = None) -> bool:
        return self._active.start_updating(on_start)

    def _reverse(self) -> None:
        self._direction *= -1
        log.debug("chain end reached at node %d, direction now %+d",
                  self._active.index, self._direction)
