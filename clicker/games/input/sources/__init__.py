"""Input sources."""
from clicker.games.input.sources.base import InputSource
from clicker.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
