"""
Common input handling.

Input sources turn raw device events into InputEvent objects; the
InputManager lets a game swap sources without changing game logic.
"""
from clicker.games.input.input_event import InputEvent
from clicker.games.input.input_manager import InputManager
from clicker.games.input.sources.base import InputSource

__all__ = [
    'InputEvent',
    'InputManager',
    'InputSource',
]
