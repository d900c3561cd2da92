"""
ObjectClicker - pygame implementation of the visual surface.

Keeps the state the controller sets (target position and image, labels,
message) and draws it each frame. Clicks arrive as InputEvents in screen
coordinates and are hit-tested against the start button and the target;
a hit is forwarded to the registered listeners.

Layout: a HUD strip across the top (score left, countdown right) and the
play area below it. Target positions are relative to the play area.
"""
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pygame

from clicker.games.input import InputEvent
from clicker.logging import get_logger
from games.ObjectClicker import config
from games.ObjectClicker.surface import GameSurface, Listener
from models import Point2D, Rectangle, Size, TargetPosition

log = get_logger('pygame_surface')


class PygameSurface(GameSurface):
    """GameSurface backed by a pygame window."""

    def __init__(
        self,
        screen_size: Tuple[int, int] = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT),
        target_size: int = config.TARGET_SIZE,
        assets_dir: Path = config.ASSETS_DIR,
        hud_height: int = config.HUD_HEIGHT,
    ):
        self._screen_width, self._screen_height = screen_size
        self._hud_height = hud_height
        self._target_size = Size(width=target_size, height=target_size)
        self._assets_dir = Path(assets_dir)

        # State set by the controller
        self._target_visible = False
        self._target_position = TargetPosition(x=0, y=0)
        self._target_image: Optional[str] = None
        self._start_visible = False
        self._start_label = config.START_LABEL
        self._score_text = ""
        self._countdown_text = ""
        self._message: Optional[str] = None

        self._target_listeners: List[Listener] = []
        self._start_listeners: List[Listener] = []

        self._image_cache: Dict[str, pygame.Surface] = {}

    # =========================================================================
    # GameSurface
    # =========================================================================

    def area_size(self) -> Size:
        return Size(
            width=max(0, self._screen_width),
            height=max(0, self._screen_height - self._hud_height),
        )

    def target_size(self) -> Size:
        return self._target_size

    def show_target(self) -> None:
        self._target_visible = True

    def hide_target(self) -> None:
        self._target_visible = False

    def is_target_visible(self) -> bool:
        return self._target_visible

    def set_target_position(self, position: TargetPosition) -> None:
        self._target_position = position

    def set_target_image(self, asset: str) -> None:
        self._target_image = asset

    def on_target_clicked(self, listener: Listener) -> None:
        self._target_listeners.append(listener)

    def show_start(self, label: str) -> None:
        self._start_label = label
        self._start_visible = True

    def hide_start(self) -> None:
        self._start_visible = False

    def on_start_activated(self, listener: Listener) -> None:
        self._start_listeners.append(listener)

    def set_score_text(self, text: str) -> None:
        self._score_text = text

    def set_countdown_text(self, text: str) -> None:
        self._countdown_text = text

    def show_message(self, text: str) -> None:
        self._message = text

    def hide_message(self) -> None:
        self._message = None

    # =========================================================================
    # Read-only state (HUD, tests)
    # =========================================================================

    @property
    def score_text(self) -> str:
        return self._score_text

    @property
    def countdown_text(self) -> str:
        return self._countdown_text

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def start_label(self) -> Optional[str]:
        """Label of the start button, or None while it is hidden."""
        return self._start_label if self._start_visible else None

    @property
    def target_image(self) -> Optional[str]:
        return self._target_image

    def target_rect(self) -> Rectangle:
        """Target bounds in screen coordinates."""
        return Rectangle(
            x=self._target_position.x,
            y=self._target_position.y + self._hud_height,
            width=self._target_size.width,
            height=self._target_size.height,
        )

    def start_rect(self) -> Rectangle:
        """Start button bounds in screen coordinates (centered in the play area)."""
        width, height = config.BUTTON_SIZE
        return Rectangle(
            x=(self._screen_width - width) / 2,
            y=self._hud_height + (self._screen_height - self._hud_height - height) / 2,
            width=width,
            height=height,
        )

    def resize(self, width: int, height: int) -> None:
        """Track a new window size. Takes effect at the next relocation."""
        self._screen_width = width
        self._screen_height = height

    # =========================================================================
    # Input
    # =========================================================================

    def handle_click(self, position: Point2D) -> bool:
        """Dispatch a click to the start button or target listeners.

        The start button is checked first since it sits on top.

        Returns:
            True if the click hit something
        """
        if self._start_visible and self.start_rect().contains_point(position):
            log.debug("Start activated at %s", position)
            for listener in list(self._start_listeners):
                listener()
            return True

        if self._target_visible and self.target_rect().contains_point(position):
            for listener in list(self._target_listeners):
                listener()
            return True

        return False

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process a frame's worth of clicks."""
        for event in events:
            self.handle_click(event.position)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        """Draw the whole surface."""
        width, height = screen.get_size()
        if (width, height) != (self._screen_width, self._screen_height):
            self.resize(width, height)

        screen.fill(config.BACKGROUND_COLOR)
        pygame.draw.rect(
            screen,
            config.PLAY_AREA_COLOR,
            pygame.Rect(0, self._hud_height, width, height - self._hud_height),
        )

        if self._target_visible and self._target_image:
            rect = self.target_rect()
            screen.blit(self._get_image(self._target_image), (int(rect.x), int(rect.y)))

        self._render_hud(screen)

        if self._message:
            self._render_message(screen)

        if self._start_visible:
            self._render_start(screen)

    def _render_hud(self, screen: pygame.Surface) -> None:
        font = pygame.font.Font(None, 36)

        text = font.render(self._score_text, True, config.HUD_COLOR)
        screen.blit(text, (16, (self._hud_height - text.get_height()) // 2))

        text = font.render(self._countdown_text, True, config.HUD_COLOR)
        screen.blit(text, (
            self._screen_width - text.get_width() - 16,
            (self._hud_height - text.get_height()) // 2,
        ))

    def _render_message(self, screen: pygame.Surface) -> None:
        font = pygame.font.Font(None, 48)
        text = font.render(self._message, True, config.MESSAGE_COLOR)
        button = self.start_rect()
        screen.blit(text, (
            self._screen_width // 2 - text.get_width() // 2,
            int(button.y) - text.get_height() - 24,
        ))

    def _render_start(self, screen: pygame.Surface) -> None:
        rect = self.start_rect()
        button = pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
        pygame.draw.rect(screen, config.BUTTON_COLOR, button, border_radius=8)

        font = pygame.font.Font(None, 36)
        text = font.render(self._start_label, True, config.BUTTON_TEXT_COLOR)
        screen.blit(text, text.get_rect(center=button.center))

    def _get_image(self, asset: str) -> pygame.Surface:
        """Load and scale an image variant, falling back to a placeholder."""
        if asset not in self._image_cache:
            self._image_cache[asset] = self._load_image(asset)
        return self._image_cache[asset]

    def _load_image(self, asset: str) -> pygame.Surface:
        size = (self._target_size.width, self._target_size.height)
        path = self._assets_dir / asset
        if path.exists():
            try:
                image = pygame.image.load(str(path))
                if pygame.display.get_surface() is not None:
                    image = image.convert_alpha()
                return pygame.transform.scale(image, size)
            except pygame.error as e:
                log.warning("Failed to load %s: %s", path, e)

        log.debug("No image for %s, drawing placeholder", asset)
        return self._placeholder(asset, size)

    def _placeholder(self, asset: str, size: Tuple[int, int]) -> pygame.Surface:
        """Colored disc labelled with the asset's name."""
        colors = config.PLACEHOLDER_COLORS
        color = colors[sum(asset.encode()) % len(colors)]

        surf = pygame.Surface(size, pygame.SRCALPHA)
        radius = min(size) // 2
        pygame.draw.circle(surf, color, (size[0] // 2, size[1] // 2), radius)
        pygame.draw.circle(surf, (255, 255, 255), (size[0] // 2, size[1] // 2), radius, 2)

        font = pygame.font.Font(None, 20)
        label = font.render(Path(asset).stem[:8], True, (255, 255, 255))
        surf.blit(label, label.get_rect(center=(size[0] // 2, size[1] // 2)))
        return surf
