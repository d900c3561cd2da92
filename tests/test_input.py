"""
Tests for input handling and the BaseGame metadata helpers.

Tests cover:
- InputEvent validation
- InputManager source switching and polling
- BaseGame argument merging and info
"""

from typing import List

import pytest

from clicker.games import BaseGame, GameState
from clicker.games.input import InputEvent, InputManager, InputSource
from models import Point2D


class MockInputSource(InputSource):
    """Mock implementation of InputSource for testing."""

    def __init__(self):
        self.events: List[InputEvent] = []
        self.last_dt = None

    def poll_events(self) -> List[InputEvent]:
        events = self.events.copy()
        self.events.clear()
        return events

    def update(self, dt: float) -> None:
        self.last_dt = dt


class DummyGame(BaseGame):
    """Minimal concrete game for metadata tests."""
    NAME = "Dummy"
    ARGUMENTS = [
        {'name': '--speed', 'type': int, 'default': 1, 'help': 'Speed'},
        {'name': '--log-level', 'type': str, 'default': 'DEBUG', 'help': 'Overridden'},
    ]

    def _get_internal_state(self) -> GameState:
        return GameState.IDLE

    def get_score(self) -> int:
        return 0

    def handle_input(self, events) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def render(self, screen) -> None:
        pass


class TestInputEvent:
    """Test InputEvent construction."""

    def test_valid_event(self):
        event = InputEvent(position=Point2D(x=1.0, y=2.0), timestamp=0.5)
        assert event.position.x == 1.0
        assert "t=0.500" in str(event)

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValueError):
            InputEvent(position=Point2D(x=1.0, y=2.0), timestamp=-0.1)


class TestInputManager:
    """Test InputManager."""

    def test_no_source_yields_nothing(self):
        manager = InputManager()
        manager.update(0.016)
        assert not manager.has_source()
        assert manager.get_events() == []

    def test_polls_active_source(self):
        source = MockInputSource()
        manager = InputManager(source)
        event = InputEvent(position=Point2D(x=3.0, y=4.0), timestamp=1.0)
        source.events.append(event)

        manager.update(0.02)

        assert source.last_dt == 0.02
        assert manager.get_events() == [event]
        assert manager.get_events() == []

    def test_switch_source(self):
        manager = InputManager(MockInputSource())
        replacement = MockInputSource()
        manager.set_source(replacement)
        assert manager.get_source() is replacement


class TestBaseGameMetadata:
    """Test argument merging and info."""

    def test_game_arguments_take_precedence(self):
        args = DummyGame.get_arguments()
        names = [a['name'] for a in args]

        assert names == ['--speed', '--log-level']
        assert args[1]['default'] == 'DEBUG'

    def test_info(self):
        info = DummyGame.get_info()
        assert info['name'] == "Dummy"
        assert info['version'] == "1.0.0"

    def test_state_comes_from_internal_state(self):
        assert DummyGame().state is GameState.IDLE
