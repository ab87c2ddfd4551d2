import logging
from typing import Iterable, Optional, Tuple

from .config import REFERENCE_SCENARIO, Scenario
from .constants import DEFAULT_CONSTANTS, PhysicalConstants
from .errors import InvalidParameter
from .integrators import get_integrator
from .models import BlackHole, Point
from .photon import Photon, require_positive_dt

logger = logging.getLogger(__name__)


class SimulationWorld:
    """One black hole and the photons around it, advanced in lockstep."""

    def __init__(self, black_hole: BlackHole, photons: Iterable[Photon] = (), integrator: str = "euler"):
        self.black_hole = black_hole
        self.constants = black_hole.constants
        self.integrator = integrator
        self._integrate = get_integrator(integrator)
        self._photons = list(photons)
        self.ticks = 0
        self.elapsed = 0.0

    @classmethod
    def initialize(cls, screen_width: float, screen_height: float,
                   scenario: Scenario = REFERENCE_SCENARIO,
                   constants: PhysicalConstants = DEFAULT_CONSTANTS,
                   integrator: str = "euler") -> "SimulationWorld":
        if screen_width <= 0 or screen_height <= 0:
            raise InvalidParameter(f"screen size must be positive, got {screen_width}x{screen_height}")
        center = (screen_width / 2.0, screen_height / 2.0)
        world = cls(BlackHole(center, scenario.mass, constants), integrator=integrator)
        for position, direction in scenario.photon_starts(center):
            world.add_photon(position, direction)
        logger.info("initialized %s scenario on %gx%g: r_s=%.4g m, %d photon(s), %s integrator",
                    scenario.name, screen_width, screen_height,
                    world.black_hole.schwarzschild_radius, len(world._photons), integrator)
        return world

    @property
    def photons(self) -> Tuple[Photon, ...]:
        return tuple(self._photons)

    @property
    def active_photons(self) -> int:
        return sum(1 for p in self._photons if not p.absorbed)

    @property
    def absorbed_photons(self) -> int:
        return len(self._photons) - self.active_photons

    def add_photon(self, position: Point, direction: Point) -> Photon:
        photon = Photon(position, direction, constants=self.constants)
        self._photons.append(photon)
        return photon

    def step(self, dt: float) -> None:
        require_positive_dt(dt)
        rs, center = self.black_hole.schwarzschild_radius, self.black_hole.position
        for index, photon in enumerate(self._photons):
            was_absorbed = photon.absorbed
            photon.update(dt, rs, center, integrator=self._integrate)
            if photon.absorbed and not was_absorbed:
                logger.info("photon %d absorbed at tick %d (r=%.4g m, %d path points)",
                            index, self.ticks, photon.radius, len(photon.path))
        self.ticks += 1
        self.elapsed += dt

    def snapshot(self) -> dict:
        bh = self.black_hole
        return {
            "black_hole": {
                "position": list(bh.position),
                "mass": bh.mass,
                "schwarzschild_radius": bh.schwarzschild_radius,
                "display_radius": bh.display_radius,
                "photon_sphere_display_radius": bh.photon_sphere_display_radius,
            },
            "ticks": self.ticks,
            "elapsed": self.elapsed,
            "integrator": self.integrator,
            "photons": [
                {
                    "position": list(p.position),
                    "direction": list(p.direction),
                    "absorbed": p.absorbed,
                    "path": [list(point) for point in p.path],
                }
                for p in self._photons
            ],
        }


def integrate_trajectory(bh: BlackHole, position: Point, direction: Point,
                         steps: int = 1000, dt: Optional[float] = None,
                         integrator: str = "euler") -> dict:
    """Trace a single photon for up to ``steps`` ticks, stopping once it is absorbed."""
    if steps < 0:
        raise InvalidParameter(f"steps must be non-negative, got {steps}")
    if dt is None:
        dt = bh.constants.time_multiplier / 60.0
    world = SimulationWorld(bh, integrator=integrator)
    ray = world.add_photon(position, direction)
    for _ in range(steps):
        world.step(dt)
        if ray.absorbed:
            break
    return {
        "path": [list(point) for point in ray.path],
        "absorbed": ray.absorbed,
        "schwarzschild_radius": bh.schwarzschild_radius,
        "steps": world.ticks,
    }
