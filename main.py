#!/usr/bin/env python3
"""
Maze Chase - Main Entry Point

Guide the player through the maze, eat every pickup, and stay away
from the four pursuers.

Usage:
    python main.py

Controls:
    Arrow keys: Steer (a turn is taken as soon as the corridor allows)
    R: Restart at any time
    Space/Enter: Play again after winning or losing
    Escape: Quit

Environment:
    MAZECHASE_TICK_INTERVAL_MS, MAZECHASE_ANIMATION_INTERVAL_MS,
    MAZECHASE_LOG_LEVEL, MAZECHASE_SCREEN_WIDTH, MAZECHASE_SCREEN_HEIGHT
"""
import logging

import pyunicodegame

from mazechase.config import get_settings
from mazechase.game import Game, PhaseChangedEvent
from mazechase_ui.renderer import Renderer
from mazechase_ui.input_handler import InputHandler

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Maze Chase - Starting...")

    game = Game(
        tick_interval=settings.tick_interval,
        animation_interval=settings.animation_interval,
    )

    renderer = Renderer(game, settings.screen_width, settings.screen_height)

    pyunicodegame.init(
        settings.window_title,
        width=renderer.screen_width,
        height=renderer.screen_height,
        bg=(0, 0, 0, 255)
    )
    renderer.init_windows()

    input_handler = InputHandler(game)

    def update(dt: float):
        """Update game state."""
        for event in game.update(dt):
            if isinstance(event, PhaseChangedEvent):
                logger.info(f"{event.old_state.name} -> {event.new_state.name}")

    def render():
        """Render game state."""
        renderer.render()

    def on_key(key: int):
        """Handle key press."""
        if input_handler.handle_key(key):
            logger.info("Quitting")
            pyunicodegame.quit()

    logger.info(
        f"Starting game loop (tick: {settings.tick_interval_ms}ms, "
        f"animation: {settings.animation_interval_ms}ms)"
    )
    pyunicodegame.run(update=update, render=render, on_key=on_key)


if __name__ == "__main__":
    main()
