"""Per-node progress state."""
from __future__ import annotations

from dataclasses import dataclass

from facebox.types import Callback

# Tolerance on the settle test so the settle tick is exactly ceil(1 / step)
# regardless of float accumulation.
SETTLE_EPSILON = 1e-9


@dataclass
class AnimationState:
    """Progress of one node through a single discrete step.

    ``committed`` is the last settled value (0 or 1). ``direction`` is 0 while
    idle, +1 while moving from 0 to 1 and -1 while moving back.
    """

    step: float
    progress: float = 0.0
    direction: int = 0
    committed: float = 0.0

    @property
    def idle(self) -> bool:
        return self.direction == 0

    def update(self, on_settle: Callback | None = None) -> bool:
        """Advance by one step. Returns True on the tick that settles."""
        if self.direction == 0:
            return False
        self.progress += self.direction * self.step
        if abs(self.progress - self.committed) < 1 - SETTLE_EPSILON:
            return False
        self.progress = self.committed + self.direction
        self.direction = 0
        self.committed = self.progress
        if on_settle is not None:
            on_settle()
        return True

    def start_updating(self, on_start: Callback | None = None) -> bool:
        """Begin a step toward the opposite end. No-op while already moving."""
        if self.direction != 0:
            return False
        self.direction = int(1 - 2 * self.committed)
        if on_start is not None:
            on_start()
        return True
