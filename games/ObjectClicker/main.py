#!/usr/bin/env python3
"""ObjectClicker - Standalone entry point.

Usage:
    object-clicker
    object-clicker --duration 30 --interval 1.5
    object-clicker --images bird.png,mole.png --assets-dir ./img
    object-clicker --resolution 1280x720 --no-persist
"""

import argparse
import sys
import os

import pygame
from pydantic import ValidationError

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from clicker.games.input import InputManager
from clicker.games.input.sources import MouseInputSource
from clicker.logging import configure_logging
from games.ObjectClicker import config, game_info
from games.ObjectClicker.game_mode import ObjectClickerMode


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI from the game's ARGUMENTS list."""
    parser = argparse.ArgumentParser(
        description=ObjectClickerMode.DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--resolution', '-r',
        type=str,
        default=f'{config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT}',
        help='Window resolution as WIDTHxHEIGHT'
    )

    for arg_def in ObjectClickerMode.get_arguments():
        kwargs = {}
        if 'type' in arg_def:
            kwargs['type'] = arg_def['type']
        if 'default' in arg_def:
            kwargs['default'] = arg_def['default']
        if 'help' in arg_def:
            kwargs['help'] = arg_def['help']
        if 'action' in arg_def:
            kwargs['action'] = arg_def['action']
            kwargs.pop('type', None)  # action and type are mutually exclusive
        if 'choices' in arg_def:
            kwargs['choices'] = arg_def['choices']
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def parse_resolution(value: str) -> tuple:
    """Parse WIDTHxHEIGHT.

    Raises:
        ValueError: If value is malformed or not positive
    """
    width, height = value.lower().split('x')
    width, height = int(width), int(height)
    if width <= 0 or height <= 0:
        raise ValueError(f"Resolution must be positive, got {value}")
    return width, height


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        screen_size = parse_resolution(args.resolution)
    except ValueError:
        print(f"Invalid resolution format: {args.resolution}")
        print("Expected format: WIDTHxHEIGHT (e.g., 1280x720)")
        return 1

    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in ('resolution', 'log_level') and v is not None
    }

    try:
        game = game_info.get_game_mode(screen_size=screen_size, **game_kwargs)
    except ValidationError as e:
        print(f"Invalid game configuration:\n{e}")
        return 1

    pygame.init()
    screen = pygame.display.set_mode(screen_size)
    pygame.display.set_caption(ObjectClickerMode.NAME)

    input_manager = InputManager(MouseInputSource())
    clock = pygame.time.Clock()

    running = True
    while running:
        dt = clock.tick(config.FPS) / 1000.0
        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        game.handle_input(input_manager.get_events())
        game.update(dt)
        game.render(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
