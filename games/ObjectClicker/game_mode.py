"""
ObjectClicker Game Mode

Plugs the controller into the standard game interface: input events go
to the pygame surface, frame time drives the scheduler, and the surface
draws itself.
"""
import random
from pathlib import Path
from typing import List, Optional, Tuple

import pygame

from clicker.games import BaseGame, GameState
from clicker.games.input import InputEvent
from clicker.logging import get_logger
from clicker.scheduler import FrameScheduler
from clicker.storage import HighScoreStore, JsonFileStore, KeyValueStore, MemoryStore
from games.ObjectClicker import config, game_info
from games.ObjectClicker.controller import GameController
from games.ObjectClicker.pygame_surface import PygameSurface
from models import GameConfig, GameResult

log = get_logger('object_clicker')


class ObjectClickerMode(BaseGame):
    """Object Clicker game mode.

    One target, one countdown, one high score. Everything the player sees
    comes from the PygameSurface; everything that happens is decided by
    the GameController.
    """

    NAME = game_info.NAME
    DESCRIPTION = game_info.DESCRIPTION
    VERSION = game_info.VERSION
    AUTHOR = game_info.AUTHOR
    ARGUMENTS = game_info.ARGUMENTS

    def __init__(
        self,
        duration: Optional[int] = None,
        interval: Optional[float] = None,
        images: Optional[str] = None,
        assets_dir: Optional[str] = None,
        target_size: Optional[int] = None,
        store: Optional[str] = None,
        no_persist: bool = False,
        seed: Optional[int] = None,
        screen_size: Tuple[int, int] = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT),
        game_config: Optional[GameConfig] = None,
        key_value_store: Optional[KeyValueStore] = None,
        **kwargs,  # Accept any additional args
    ):
        """Initialize the game.

        Args:
            duration: Round length in seconds
            interval: Seconds between automatic target moves
            images: Comma-separated image variants
            assets_dir: Directory holding the target images
            target_size: Target width/height in pixels
            store: JSON file holding the high score
            no_persist: Keep the high score in memory only
            seed: Random seed for placement and image choice
            screen_size: Window size in pixels
            game_config: Complete config (overrides duration/interval/images)
            key_value_store: Store to use instead of store/no_persist
        """
        if game_config is None:
            variants = [s.strip() for s in images.split(',') if s.strip()] if images else None
            game_config = config.default_game_config(duration, interval, variants)

        if key_value_store is None:
            if no_persist or not config.PERSIST_HIGH_SCORE:
                key_value_store = MemoryStore()
            else:
                key_value_store = JsonFileStore(Path(store) if store else config.STORE_PATH)

        self._surface = PygameSurface(
            screen_size=screen_size,
            target_size=target_size or config.TARGET_SIZE,
            assets_dir=Path(assets_dir) if assets_dir else config.ASSETS_DIR,
        )
        self._scheduler = FrameScheduler()
        self._controller = GameController(
            game_config,
            self._surface,
            self._scheduler,
            HighScoreStore(key_value_store),
            rng=random.Random(seed),
        )

        # Session tracking
        self._games_played = 0
        self._controller.add_result_listener(self._on_round_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def surface(self) -> PygameSurface:
        return self._surface

    @property
    def games_played(self) -> int:
        return self._games_played

    def _get_internal_state(self) -> GameState:
        return self._controller.state

    def get_score(self) -> int:
        return self._controller.score

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process input events."""
        self._surface.handle_input(events)

    def update(self, dt: float) -> None:
        """Advance the round clock."""
        self._scheduler.advance(dt)

    def render(self, screen: pygame.Surface) -> None:
        """Render the game."""
        self._surface.render(screen)

    def _on_round_over(self, result: GameResult) -> None:
        self._games_played += 1
        log.debug("Rounds played this session: %d", self._games_played)
