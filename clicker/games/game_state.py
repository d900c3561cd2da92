"""Standard GameState enum for Object Clicker games.

Games report one of these states via their `state` property, whatever
internal bookkeeping they keep.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        IDLE: Waiting for the player to start a round (also after a round ends)
        RUNNING: A round is in progress
    """
    IDLE = "idle"
    RUNNING = "running"
