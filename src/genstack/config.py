"""Growth configuration for the stack's slot buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GrowthPolicy:
    """Geometric growth applied when a push finds the buffer full.

    The next capacity is ``max(minimum, capacity * factor)``, which with the
    defaults yields 1, 2, 4, 8, ...
    """

    factor: int = 2
    minimum: int = 1

    def __post_init__(self) -> None:
        if self.factor < 2:
            raise ValueError(f"growth factor must be at least 2, got {self.factor}")
        if self.minimum < 1:
            raise ValueError(f"minimum capacity must be at least 1, got {self.minimum}")

    def next_capacity(self, capacity: int) -> int:
        return max(self.minimum, capacity * self.factor)


DEFAULT_GROWTH = GrowthPolicy()
