"""
ObjectClicker - Visual surface contract.

The controller only ever talks to a GameSurface. It never sees pygame,
fonts or images; it asks the surface to show, hide, move and relabel
things, and subscribes to the two notifications the surface emits
(target clicked, start activated).
"""
from abc import ABC, abstractmethod
from typing import Callable

from models import Size, TargetPosition

Listener = Callable[[], None]


class GameSurface(ABC):
    """Everything the controller may do to the screen."""

    # Play area

    @abstractmethod
    def area_size(self) -> Size:
        """Current pixel dimensions of the play area."""
        pass

    # Target

    @abstractmethod
    def target_size(self) -> Size:
        """Current pixel dimensions of the target element."""
        pass

    @abstractmethod
    def show_target(self) -> None:
        pass

    @abstractmethod
    def hide_target(self) -> None:
        pass

    @abstractmethod
    def is_target_visible(self) -> bool:
        pass

    @abstractmethod
    def set_target_position(self, position: TargetPosition) -> None:
        """Move the target's top-left corner to position (play-area pixels)."""
        pass

    @abstractmethod
    def set_target_image(self, asset: str) -> None:
        """Change the image the target is drawn with."""
        pass

    @abstractmethod
    def on_target_clicked(self, listener: Listener) -> None:
        """Register a callback for clicks on the target."""
        pass

    # Start control

    @abstractmethod
    def show_start(self, label: str) -> None:
        pass

    @abstractmethod
    def hide_start(self) -> None:
        pass

    @abstractmethod
    def on_start_activated(self, listener: Listener) -> None:
        """Register a callback for activation of the start control."""
        pass

    # Text regions

    @abstractmethod
    def set_score_text(self, text: str) -> None:
        pass

    @abstractmethod
    def set_countdown_text(self, text: str) -> None:
        pass

    @abstractmethod
    def show_message(self, text: str) -> None:
        """Show end-of-game text."""
        pass

    @abstractmethod
    def hide_message(self) -> None:
        pass
