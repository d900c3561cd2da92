"""
ObjectClicker - Game controller.

Owns the round state (score, time remaining, running flag) and the two
periodic schedules that drive it:

- countdown: fires every second, ends the round at zero
- relocation: fires every relocation interval, moves the target

A successful click restarts the relocation schedule from scratch (cancel,
move now, reschedule with the full interval) rather than letting the old
schedule keep running, so the player always gets a full interval after a
hit.

The controller never touches pygame. It drives a GameSurface, a Scheduler
and a HighScoreStore, all injected.
"""
import math
import random
from typing import Callable, List, Optional

from clicker.games.game_state import GameState
from clicker.logging import get_logger
from clicker.scheduler import ScheduleHandle, Scheduler
from clicker.storage import HighScoreStore
from games.ObjectClicker import config
from games.ObjectClicker.surface import GameSurface
from models import GameConfig, GameOutcome, GameResult, GameSnapshot, TargetPosition

log = get_logger('controller')

COUNTDOWN_INTERVAL = 1.0  # seconds per countdown tick


class GameController:
    """Click-the-target game rules.

    Two states: idle and running. start() moves idle -> running; the
    countdown reaching zero calls end(), which moves running -> idle.
    Clicks and ticks do nothing while idle.
    """

    def __init__(
        self,
        game_config: GameConfig,
        surface: GameSurface,
        scheduler: Scheduler,
        high_scores: HighScoreStore,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the controller and bind it to the surface.

        Args:
            game_config: Round duration, relocation interval and image variants
            surface: Visual surface to drive and listen to
            scheduler: Source of the countdown and relocation schedules
            high_scores: Persistent best score (read once here)
            rng: Random source for placement and image choice
        """
        self._config = game_config
        self._surface = surface
        self._scheduler = scheduler
        self._high_scores = high_scores
        self._rng = rng or random.Random()

        self._score = 0
        self._time_remaining = game_config.duration_seconds
        self._running = False
        self._high_score = high_scores.load()

        self._countdown: Optional[ScheduleHandle] = None
        self._relocation: Optional[ScheduleHandle] = None
        self._result_listeners: List[Callable[[GameResult], None]] = []

        surface.on_target_clicked(self.on_target_clicked)
        surface.on_start_activated(self.on_start_activated)

        surface.hide_target()
        surface.hide_message()
        surface.show_start(config.START_LABEL)
        self._update_score()
        self._update_countdown()

        log.info("Loaded high score %d", self._high_score)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def score(self) -> int:
        return self._score

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def running(self) -> bool:
        return self._running

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def state(self) -> GameState:
        return GameState.RUNNING if self._running else GameState.IDLE

    def snapshot(self) -> GameSnapshot:
        """Immutable copy of the current state."""
        return GameSnapshot(
            score=self._score,
            time_remaining=self._time_remaining,
            running=self._running,
            high_score=self._high_score,
        )

    def add_result_listener(self, listener: Callable[[GameResult], None]) -> None:
        """Call listener with the GameResult at the end of every round."""
        self._result_listeners.append(listener)

    # =========================================================================
    # Operations
    # =========================================================================

    def on_start_activated(self) -> None:
        """Start control pressed: clear the old message and begin a round."""
        self._surface.hide_message()
        self._surface.hide_start()
        self.start()

    def start(self) -> None:
        """Begin a new round."""
        if self._running:
            log.warning("start() ignored: round already running")
            return

        self._score = 0
        self._time_remaining = self._config.duration_seconds
        self._running = True
        self._update_score()
        self._update_countdown()

        self._countdown = self._scheduler.schedule_periodic(COUNTDOWN_INTERVAL, self.on_tick)
        self._restart_relocation()

        log.info("Round started: %ds, target moves every %.2fs",
                 self._config.duration_seconds, self._config.relocation_interval_seconds)

    def on_target_clicked(self) -> None:
        """Score a hit if the target is showing."""
        if not self._running or not self._surface.is_target_visible():
            return

        self._score += 1
        self._surface.hide_target()
        self._update_score()
        log.debug("Hit! score=%d", self._score)

        self._restart_relocation()

    def on_tick(self) -> None:
        """Countdown step: one second has passed."""
        if not self._running:
            return

        self._time_remaining = max(0, self._time_remaining - 1)
        if self._time_remaining == 0:
            self.end()
        else:
            self._update_countdown()

    def end(self) -> Optional[GameResult]:
        """Finish the round and settle the high score.

        Returns:
            GameResult describing the round, or None if no round was running
        """
        if not self._running:
            return None

        self._scheduler.cancel(self._countdown)
        self._scheduler.cancel(self._relocation)
        self._countdown = None
        self._relocation = None

        self._surface.hide_target()
        self._running = False

        if self._score > self._high_score:
            self._high_scores.save(self._score)
            self._high_score = self._score
            outcome = GameOutcome.NEW_RECORD
            self._surface.show_message(config.NEW_RECORD_TEXT)
        else:
            outcome = GameOutcome.NO_NEW_RECORD
            self._surface.show_message(config.NO_NEW_RECORD_TEXT)

        self._surface.show_start(config.RESTART_LABEL)

        result = GameResult(score=self._score, high_score=self._high_score, outcome=outcome)
        log.info("Round over: score=%d high=%d (%s)", result.score, result.high_score, outcome.value)

        for listener in self._result_listeners:
            listener(result)
        return result

    def relocate_target(self) -> None:
        """Show the target at a random position with a random image."""
        if not self._running:
            return

        position = self._random_position()
        asset = self._rng.choice(self._config.image_variants)

        self._surface.set_target_position(position)
        self._surface.set_target_image(asset)
        self._surface.show_target()
        log.debug("Target at (%d, %d) as %s", position.x, position.y, asset)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _random_position(self) -> TargetPosition:
        """Uniform position keeping the whole target inside the play area.

        When the area is smaller than the target the bound clamps to 0.
        """
        area = self._surface.area_size()
        target = self._surface.target_size()
        max_x = max(0, area.width - target.width)
        max_y = max(0, area.height - target.height)
        return TargetPosition(
            x=math.floor(self._rng.random() * max_x),
            y=math.floor(self._rng.random() * max_y),
        )

    def _restart_relocation(self) -> None:
        self._scheduler.cancel(self._relocation)
        self.relocate_target()
        self._relocation = self._scheduler.schedule_periodic(
            self._config.relocation_interval_seconds,
            self.relocate_target,
        )

    def _update_score(self) -> None:
        self._surface.set_score_text(config.SCORE_TEXT.format(score=self._score))

    def _update_countdown(self) -> None:
        self._surface.set_countdown_text(config.COUNTDOWN_TEXT.format(seconds=self._time_remaining))
