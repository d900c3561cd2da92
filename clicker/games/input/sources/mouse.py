"""
Mouse Input Source - Left clicks from the pygame event queue.
"""
import time
from typing import List

import pygame

from models import Point2D
from clicker.games.input.input_event import InputEvent
from clicker.games.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Converts pygame left mouse clicks into InputEvent objects.

    Non-mouse events are re-posted to the pygame event queue for the main loop.
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect mouse clicks."""
        for event in pygame.event.get():
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # Left mouse button only
                    pos_x, pos_y = event.pos
                    self._event_queue.append(InputEvent(
                        position=Point2D(x=float(pos_x), y=float(pos_y)),
                        timestamp=time.monotonic(),
                    ))
            elif event.type not in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
                # Re-post non-mouse events for the main loop to handle
                pygame.event.post(event)
