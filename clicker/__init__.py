"""
Object Clicker framework.

Provides:
- logging: per-module loggers configured from the environment
- scheduler: injectable periodic scheduler (FrameScheduler for the game loop and tests)
- storage: key-value stores and the persisted high score
- games: base game class, standard game state and input handling
"""

__version__ = "1.0.0"
