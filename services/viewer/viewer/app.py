import argparse
import logging
from typing import Sequence, Tuple

import pygame
from photon_core.config import SCENARIOS, get_scenario, load_constants
from photon_core.integrators import INTEGRATORS
from photon_core.world import SimulationWorld

BACKGROUND = (0, 0, 0)
HORIZON_EDGE = (255, 0, 0)
PHOTON_SPHERE = (255, 255, 0)
WHITE = (255, 255, 255)

logger = logging.getLogger(__name__)


def trail_color(index: int, length: int, color: Tuple[int, int, int] = WHITE) -> Tuple[int, int, int]:
    """Fade from black for the oldest point to ``color`` for the newest."""
    if length <= 1:
        return color
    alpha = index / (length - 1)
    return tuple(int(channel * alpha) for channel in color)


def draw_trail(surface, points: Sequence[Tuple[float, float]]):
    for i in range(len(points) - 1):
        pygame.draw.line(surface, trail_color(i + 1, len(points)), points[i], points[i + 1], 1)


def draw_world(surface, world: SimulationWorld):
    """Draw the black hole and every photon trail onto ``surface``."""
    surface.fill(BACKGROUND)
    bh = world.black_hole
    center = bh.position
    radius = bh.display_radius
    if radius >= 1:
        pygame.draw.circle(surface, BACKGROUND, center, radius)
        pygame.draw.circle(surface, HORIZON_EDGE, center, radius, max(1, int(radius) // 10))
    sphere = bh.photon_sphere_display_radius
    if sphere >= 1:
        pygame.draw.circle(surface, PHOTON_SPHERE, center, sphere, 1)

    for photon in world.photons:
        if len(photon.path) > 1:
            draw_trail(surface, photon.path)
        if not photon.absorbed:
            pygame.draw.circle(surface, WHITE, photon.position, 3)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Photon geodesics around a Schwarzschild black hole")
    parser.add_argument('--width', type=int, default=800, help='Window width in pixels (default: 800)')
    parser.add_argument('--height', type=int, default=600, help='Window height in pixels (default: 600)')
    parser.add_argument('--fps', type=int, default=60, help='Target frame rate (default: 60)')
    parser.add_argument('--scenario', choices=sorted(SCENARIOS), default='reference', help='Initial photon layout')
    parser.add_argument('--integrator', choices=sorted(INTEGRATORS), default='euler', help='Integration scheme (default: euler)')
    parser.add_argument('--log-level', default='INFO', help='Logging level (default: INFO)')
    return parser.parse_args(argv)


def run(width=800, height=600, fps=60, scenario="reference", integrator="euler"):
    constants = load_constants()
    world = SimulationWorld.initialize(width, height, get_scenario(scenario), constants, integrator)

    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Schwarzschild photon geodesics")
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            frame_seconds = clock.tick(fps) / 1000.0
            if frame_seconds > 0:
                world.step(frame_seconds * constants.time_multiplier)
            draw_world(screen, world)
            pygame.display.flip()
    finally:
        logger.info("stopped after %d ticks: %d active, %d absorbed",
                    world.ticks, world.active_photons, world.absorbed_photons)
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(levelname)s: %(message)s')
    run(args.width, args.height, args.fps, args.scenario, args.integrator)


if __name__ == "__main__":
    main()
