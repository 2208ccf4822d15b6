"""Application entry harness.

Opens a window the size of the play field, routes pointer input to the
controller and advances the simulation once per frame at 60 FPS.

Environment:
    BLOCKBREAKER_CONFIG     optional JSON file with GameConfig overrides
    BLOCKBREAKER_SEED       integer seed for reproducible runs
    BLOCKBREAKER_LOG_LEVEL  DEBUG / INFO / WARN / ERROR
"""

from __future__ import annotations

import sys

import pygame

from blockbreaker.config import ConfigError, load_config
from blockbreaker.constants import TICK_RATE
from blockbreaker.controller import GameController
from blockbreaker.input_router import InputRouter
from blockbreaker.logger import get_logger
from blockbreaker.renderer import Renderer

log = get_logger("app")


def main() -> int:
    try:
        config = load_config()
    except ConfigError as e:
        log.error("Invalid configuration:", e)
        return 2

    pygame.init()
    pygame.display.set_caption("Block Breaker")
    screen = pygame.display.set_mode((config.field_width, config.field_height), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    controller = GameController(config)
    router = InputRouter(config.field_width, screen.get_width())
    renderer = Renderer()

    running = True
    while running:
        # --- Single central event poll ---
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.QUIT:
                running = False

        # If display mode changed (resize), pick up the current surface.
        current_surface = pygame.display.get_surface()
        if current_surface is not None and current_surface is not screen:
            screen = current_surface
        router.resize(screen.get_width())

        router.dispatch(events, controller)

        # --- Update & Render cycle ---
        controller.on_tick()
        renderer.render(controller.render_model(), screen)
        pygame.display.flip()
        clock.tick(TICK_RATE)

    log.info("Exiting with score", controller.score)
    pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
