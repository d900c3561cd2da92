"""
Input Event - Represents a single click.

Uses a frozen dataclass so events can be created cheaply every frame.
"""
from dataclasses import dataclass

from models import Point2D


@dataclass(frozen=True)
class InputEvent:
    """Immutable click from any input source.

    Attributes:
        position: Where the click occurred (screen coordinates)
        timestamp: When it occurred (seconds, from monotonic clock)
    """
    position: Point2D
    timestamp: float

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f})")
