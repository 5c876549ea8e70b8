#!/usr/bin/env python3
"""
Cannon Coins - Main Entry Point

Balls fall from the sky. Move the cannon with the mouse and click to shoot
them down. Every hit is worth a coin; every ball that reaches the ground
costs a life. The balls get faster the longer you last.

Usage:
    python -m cannon_coins.main

Controls:
    Mouse: Aim the cannon
    Left click: Fire
    Pause button / P: Pause or resume
    Escape: Quit

Settings come from CANNON_* environment variables or a .env file
(see cannon_coins/config.py).
"""
import logging
import random

import pygame

from cannon_coins.config import get_settings
from cannon_coins.gameplay.game import Game, GameOverEvent, HighScoreEvent
from cannon_coins.gameplay.highscore import HighScoreStore
from cannon_coins.ui.input_handler import InputHandler
from cannon_coins.ui.renderer import Renderer

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Cannon Coins - Starting...")

    pygame.init()

    renderer = Renderer(settings.play_width, settings.play_height)
    renderer.init_display(settings.window_title)

    highscores = HighScoreStore(settings.highscore_file)
    logger.info(f"High score to beat: {highscores.load()}")

    game = Game(
        view=renderer,
        highscores=highscores,
        play_width=settings.play_width,
        play_height=settings.play_height,
        rng=random.Random(settings.seed),
    )

    input_handler = InputHandler(renderer)
    input_handler.on_pointer_move(game.move_cannon)
    input_handler.on_fire_click(game.fire)
    input_handler.on_pause_toggle(game.toggle_pause)

    clock = pygame.time.Clock()
    game.start()

    should_quit = False
    while not should_quit:
        dt_ms = min(clock.tick(settings.fps), settings.max_frame_ms)

        for event in pygame.event.get():
            if input_handler.handle_event(event):
                should_quit = True

        for event in game.update(dt_ms):
            if isinstance(event, GameOverEvent):
                logger.info(f"Session restarted after scoring {event.final_coins}")
            elif isinstance(event, HighScoreEvent):
                logger.debug(f"High score event: {event.score}")

        renderer.draw()
        pygame.display.flip()

    pygame.quit()
    logger.info("Cannon Coins stopped.")


if __name__ == "__main__":
    main()
