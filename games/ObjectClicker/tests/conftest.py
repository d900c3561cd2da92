"""Pytest fixtures for ObjectClicker tests."""
import os
import random

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from clicker.scheduler import FrameScheduler
from clicker.storage import HighScoreStore, MemoryStore
from games.ObjectClicker.controller import GameController
from games.ObjectClicker.tests.fakes import RecordingSurface
from models import GameConfig


@pytest.fixture
def game_config():
    return GameConfig(
        duration_seconds=10,
        relocation_interval_seconds=2.0,
        image_variants=['bird.png', 'cockroach.png', 'mice.png', 'mole.png'],
    )


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_controller(game_config, surface, scheduler, store):
    """Factory building a controller over the shared fixtures."""
    def _make(**overrides):
        return GameController(
            overrides.get('game_config', game_config),
            overrides.get('surface', surface),
            overrides.get('scheduler', scheduler),
            HighScoreStore(overrides.get('store', store)),
            rng=overrides.get('rng', random.Random(1234)),
        )
    return _make


@pytest.fixture
def controller(make_controller):
    return make_controller()


@pytest.fixture
def pygame_init():
    """Initialize pygame headless for a test, quit after."""
    pygame.init()
    yield
    pygame.quit()
