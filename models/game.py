"""
Game data models for Object Clicker.

Configuration is validated once at construction and frozen afterwards.
Snapshots and results are immutable views handed out by the controller.
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GameConfig(BaseModel):
    """Round configuration, supplied once and never changed.

    Attributes:
        duration_seconds: Length of one round
        relocation_interval_seconds: Seconds between automatic target moves
        image_variants: Asset identifiers the target picks from, in order

    Examples:
        >>> GameConfig(
        ...     duration_seconds=10,
        ...     relocation_interval_seconds=2.0,
        ...     image_variants=['bird.png', 'mole.png'],
        ... )
    """
    duration_seconds: int = Field(..., gt=0)
    relocation_interval_seconds: float = Field(..., gt=0)
    image_variants: Tuple[str, ...] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator('image_variants', mode='before')
    @classmethod
    def validate_variants(cls, v):
        """Accept any sequence of non-blank asset identifiers."""
        if isinstance(v, str):
            raise ValueError('image_variants must be a sequence, not a string')
        variants = tuple(v)
        for name in variants:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f'Asset identifiers must be non-empty strings, got {name!r}')
        return variants


class TargetPosition(BaseModel):
    """Top-left pixel offset of the target inside the play area."""
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class GameSnapshot(BaseModel):
    """Read-only view of the controller's state."""
    score: int = Field(..., ge=0)
    time_remaining: int = Field(..., ge=0)
    running: bool
    high_score: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class GameOutcome(str, Enum):
    """How a round ended relative to the stored record."""
    NEW_RECORD = "new_record"
    NO_NEW_RECORD = "no_new_record"


class GameResult(BaseModel):
    """Summary of a finished round.

    Attributes:
        score: Points scored this round
        high_score: High score after the round (updated if beaten)
        outcome: Whether the round set a new record
    """
    score: int = Field(..., ge=0)
    high_score: int = Field(..., ge=0)
    outcome: GameOutcome

    model_config = ConfigDict(frozen=True)

    @property
    def is_new_record(self) -> bool:
        return self.outcome is GameOutcome.NEW_RECORD
