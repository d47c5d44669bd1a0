#!/usr/bin/env python3
"""
Gorillas - Main Entry Point

Two gorillas on a city skyline lob bananas at each other.
Run parameters come from GORILLAS_* environment variables or a .env file
(see gorillas/config.py).

Usage:
    python main.py

Controls:
    P: Stop / resume the simulation
    R: Reset with a new city
    Escape: Quit
"""
import asyncio
import logging

import pygame

from gorillas.config import get_settings
from gorillas.gameplay.simulation import Simulation
from gorillas.ui.renderer import Renderer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

EVENT_POLL_SECONDS = 1 / 60


async def run() -> None:
    """Open the window and pump events while the simulation ticks."""
    settings = get_settings()

    pygame.init()
    pygame.display.set_caption("Gorillas")
    screen = pygame.display.set_mode((settings.canvas_width, settings.canvas_height))
    renderer = Renderer(screen)

    def render(snapshot):
        renderer.draw(snapshot)
        pygame.display.flip()

    simulation = Simulation(settings)
    simulation.start(render=render)

    should_quit = False
    while not should_quit:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                should_quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    should_quit = True
                elif event.key == pygame.K_p:
                    if simulation.is_running:
                        simulation.stop()
                    else:
                        simulation.resume()
                elif event.key == pygame.K_r:
                    simulation.reset()

        await asyncio.sleep(EVENT_POLL_SECONDS)

    simulation.finish()
    pygame.quit()
    logger.info("Gorillas stopped.")


def main():
    """Main entry point."""
    print(__doc__)
    asyncio.run(run())


if __name__ == "__main__":
    main()
