"""
Models library for Object Clicker.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Size, Rectangle)
- Game: Configuration, target position, snapshots and round results

Usage:
    >>> from models import Point2D, GameConfig
    >>> from models.game import GameOutcome
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Size,
    Rectangle,
)

# ============================================================================
# Game models
# ============================================================================
from .game import (
    GameConfig,
    TargetPosition,
    GameSnapshot,
    GameOutcome,
    GameResult,
)

__all__ = [
    # Primitives
    "Point2D",
    "Size",
    "Rectangle",
    # Game
    "GameConfig",
    "TargetPosition",
    "GameSnapshot",
    "GameOutcome",
    "GameResult",
]
