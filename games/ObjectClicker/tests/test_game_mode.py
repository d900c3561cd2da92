"""
Tests for ObjectClickerMode and the standalone CLI.

Tests cover:
- Construction from CLI-style arguments
- Clicks through the pygame surface driving the controller
- Frame time driving the round clock
- High score persistence through the JSON store
- Argument parsing and resolution handling
"""

import json

import pygame
import pytest
from pydantic import ValidationError

from clicker.games import GameState
from clicker.games.input import InputEvent
from clicker.storage import MemoryStore
from games.ObjectClicker import config, game_info
from games.ObjectClicker.game_mode import ObjectClickerMode
from games.ObjectClicker.main import build_parser, main, parse_resolution
from models import Point2D


def click(rect, t=0.0):
    """InputEvent at the center of rect."""
    return InputEvent(
        position=Point2D(x=rect.x + rect.width / 2, y=rect.y + rect.height / 2),
        timestamp=t,
    )


class TestConstruction:
    """Test building the game mode."""

    def test_defaults(self):
        game = ObjectClickerMode(no_persist=True)

        assert game.state is GameState.IDLE
        assert game.get_score() == 0
        assert game.controller.config.duration_seconds == config.DURATION_SECONDS
        assert game.controller.config.image_variants == tuple(config.IMAGE_VARIANTS)

    def test_cli_style_overrides(self):
        game = ObjectClickerMode(
            duration=30, interval=1.5, images="a.png, b.png", no_persist=True)

        cfg = game.controller.config
        assert cfg.duration_seconds == 30
        assert cfg.relocation_interval_seconds == 1.5
        assert cfg.image_variants == ('a.png', 'b.png')

    def test_invalid_duration_rejected(self):
        with pytest.raises(ValidationError):
            ObjectClickerMode(duration=0, no_persist=True)

    def test_metadata(self):
        info = ObjectClickerMode.get_info()
        names = [a['name'] for a in info['arguments']]

        assert info['name'] == "Object Clicker"
        assert '--duration' in names
        assert '--log-level' in names

    def test_reads_existing_record(self, tmp_path):
        path = tmp_path / 'store.json'
        path.write_text(json.dumps({'record': '9'}), encoding='utf-8')

        game = ObjectClickerMode(store=str(path))

        assert game.controller.high_score == 9

    def test_factory_builds_game_mode(self):
        game = game_info.get_game_mode(duration=12, seed=5, no_persist=True,
                                       screen_size=(640, 480))

        assert isinstance(game, ObjectClickerMode)
        assert game.controller.config.duration_seconds == 12
        assert game.surface.area_size().width == 640


class TestPlay:
    """Test a round driven through the surface."""

    def test_round_through_clicks_and_frames(self):
        store = MemoryStore()
        game = ObjectClickerMode(duration=5, interval=2.0, seed=7, key_value_store=store)
        surface = game.surface

        game.handle_input([click(surface.start_rect())])
        assert game.state is GameState.RUNNING

        for _ in range(3):
            game.handle_input([click(surface.target_rect())])
        assert game.get_score() == 3

        for _ in range(5 * 60):
            game.update(1 / 60)
        game.update(0.1)

        assert game.state is GameState.IDLE
        assert game.games_played == 1
        assert store.get('record') == '3'
        assert surface.message == config.NEW_RECORD_TEXT
        assert surface.start_label == config.RESTART_LABEL

    def test_click_outside_target_does_not_score(self):
        game = ObjectClickerMode(no_persist=True, seed=3)
        game.handle_input([click(game.surface.start_rect())])

        game.handle_input([InputEvent(position=Point2D(x=-5.0, y=-5.0), timestamp=0.0)])

        assert game.get_score() == 0

    def test_record_written_to_file(self, tmp_path):
        path = tmp_path / 'scores' / 'store.json'
        game = ObjectClickerMode(duration=2, store=str(path), seed=1)

        game.handle_input([click(game.surface.start_rect())])
        game.handle_input([click(game.surface.target_rect())])
        game.update(2.0)

        assert json.loads(path.read_text(encoding='utf-8')) == {'record': '1'}

    def test_render_smoke(self, pygame_init):
        game = ObjectClickerMode(no_persist=True, screen_size=(640, 480))
        screen = pygame.Surface((640, 480))

        game.render(screen)
        game.handle_input([click(game.surface.start_rect())])
        game.update(0.5)
        game.render(screen)

        assert game.state is GameState.RUNNING

    def test_extra_end_does_not_count_a_round(self):
        game = ObjectClickerMode(duration=2, no_persist=True, seed=2)
        game.handle_input([click(game.surface.start_rect())])
        game.update(2.0)

        game.controller.end()

        assert game.games_played == 1


class TestCli:
    """Test argument parsing."""

    def test_parser_accepts_game_arguments(self):
        args = build_parser().parse_args([
            '--duration', '15', '--interval', '0.5', '--no-persist', '--seed', '3',
        ])

        assert args.duration == 15
        assert args.interval == 0.5
        assert args.no_persist is True
        assert args.seed == 3
        assert args.resolution == f'{config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT}'

    def test_parse_resolution(self):
        assert parse_resolution('1280x720') == (1280, 720)
        assert parse_resolution('640X480') == (640, 480)

    @pytest.mark.parametrize('value', ['wide', '10x', '0x100', '1x2x3'])
    def test_bad_resolution(self, value):
        with pytest.raises(ValueError):
            parse_resolution(value)

    def test_main_rejects_bad_resolution(self, capsys):
        assert main(['--resolution', 'huge', '--no-persist']) == 1
        assert "Invalid resolution" in capsys.readouterr().out

    def test_main_rejects_bad_config(self, capsys):
        assert main(['--duration', '0', '--no-persist']) == 1
        assert "Invalid game configuration" in capsys.readouterr().out
