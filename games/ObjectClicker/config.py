"""
ObjectClicker - Configuration loader.

Loads settings from .env file with sensible defaults.
"""
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from models import GameConfig

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_list(key: str, default: List[str]) -> List[str]:
    """Get comma-separated list from environment."""
    val = os.getenv(key)
    if val is None:
        return list(default)
    return [item.strip() for item in val.split(',') if item.strip()]


# Display
SCREEN_WIDTH = _get_int('CLICKER_SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('CLICKER_SCREEN_HEIGHT', 600)
FPS = _get_int('CLICKER_FPS', 60)
HUD_HEIGHT = 48  # status bar above the play area

# Round
DURATION_SECONDS = _get_int('CLICKER_DURATION', 10)
RELOCATION_INTERVAL = _get_float('CLICKER_INTERVAL', 2.0)  # seconds between moves
IMAGE_VARIANTS = _get_list('CLICKER_IMAGES', [
    'bird.png',
    'cockroach.png',
    'mice.png',
    'mole.png',
])

# Target
TARGET_SIZE = _get_int('CLICKER_TARGET_SIZE', 80)  # square, pixels

# Files
ASSETS_DIR = Path(os.getenv('CLICKER_ASSETS_DIR', str(Path(__file__).parent / 'assets')))
STORE_PATH = Path(os.getenv(
    'CLICKER_STORE_PATH',
    str(Path.home() / '.local' / 'share' / 'object_clicker' / 'store.json'),
)).expanduser()
PERSIST_HIGH_SCORE = _get_bool('CLICKER_PERSIST', True)  # False = memory only

# Text
SCORE_TEXT = "Score: {score}"
COUNTDOWN_TEXT = "Time left: {seconds} sec"
NEW_RECORD_TEXT = "You set a new record!"
NO_NEW_RECORD_TEXT = "Previous record not beaten"
START_LABEL = "Start"
RESTART_LABEL = "Try again"

# Visual
BACKGROUND_COLOR = (20, 20, 25)
PLAY_AREA_COLOR = (35, 40, 48)
HUD_COLOR = (235, 235, 235)
MESSAGE_COLOR = (255, 235, 90)
BUTTON_COLOR = (70, 130, 200)
BUTTON_TEXT_COLOR = (255, 255, 255)
BUTTON_SIZE = (220, 56)
PLACEHOLDER_COLORS = [
    (230, 90, 90),
    (90, 200, 120),
    (90, 140, 230),
    (230, 190, 80),
    (190, 110, 220),
]


def default_game_config(
    duration: Optional[int] = None,
    interval: Optional[float] = None,
    images: Optional[List[str]] = None,
) -> GameConfig:
    """Build a validated GameConfig from environment defaults.

    Explicit arguments (usually from the CLI) override the environment.

    Raises:
        pydantic.ValidationError: If any value is out of range
    """
    return GameConfig(
        duration_seconds=duration if duration is not None else DURATION_SECONDS,
        relocation_interval_seconds=interval if interval is not None else RELOCATION_INTERVAL,
        image_variants=images if images else IMAGE_VARIANTS,
    )
