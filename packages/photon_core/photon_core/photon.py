import logging
import math
from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import DEFAULT_CONSTANTS, PhysicalConstants
from .errors import InvalidParameter
from .integrators import Integrator, euler_step
from .models import Point, PolarState

logger = logging.getLogger(__name__)


def require_positive_dt(dt: float) -> float:
    if not math.isfinite(dt) or dt <= 0.0:
        raise InvalidParameter(f"time step must be a positive finite number, got {dt!r}")
    return dt


def _unit(vx: float, vy: float) -> Point:
    norm = math.hypot(vx, vy)
    if not math.isfinite(norm) or norm == 0.0:
        raise InvalidParameter(f"direction ({vx!r}, {vy!r}) has no usable length")
    return vx / norm, vy / norm


@dataclass
class Photon:
    """A light ray tracked in display coordinates.

    The polar state (radius, angle) is re-derived from ``position`` at the
    start of every update; ``direction`` carries the velocity between steps.
    ``path`` is oldest-first and grows without bound while the photon is live.
    """
    position: Point
    direction: Point
    constants: PhysicalConstants = field(default=DEFAULT_CONSTANTS, repr=False)
    radius: float = 0.0  # meters
    angle: float = 0.0
    dr: float = 0.0  # m/s
    dphi: float = 0.0  # rad/s
    path: List[Tuple[float, float]] = field(default_factory=list, repr=False)
    absorbed: bool = False

    def __post_init__(self):
        self.position = (float(self.position[0]), float(self.position[1]))
        self.direction = _unit(float(self.direction[0]), float(self.direction[1]))
        if not self.path:
            self.path.append(self.position)

    def update(self, dt: float, schwarzschild_radius: float, black_hole_position: Point,
               integrator: Integrator = euler_step) -> bool:
        """Advance one tick. Returns False when the photon is frozen."""
        require_positive_dt(dt)
        vis_scale, c = self.constants.vis_scale, self.constants.c
        bx, by = black_hole_position

        dx, dy = self.position[0] - bx, self.position[1] - by
        self.radius = math.hypot(dx, dy) / vis_scale
        self.angle = math.atan2(dy, dx)

        if self.absorbed or self.radius <= 0.0 or self.radius < schwarzschild_radius:
            if not self.absorbed and self.radius <= 0.0:
                logger.debug("photon at %s sits on the singularity", self.position)
            self.absorbed = True
            return False

        cos_p, sin_p = math.cos(self.angle), math.sin(self.angle)
        ux, uy = self.direction
        self.dr = c * (ux * cos_p + uy * sin_p)
        self.dphi = c * (-ux * sin_p + uy * cos_p) / self.radius

        state = integrator(PolarState(self.radius, self.angle, self.dr, self.dphi),
                           schwarzschild_radius, dt, c=c)
        self.radius, self.angle, self.dr, self.dphi = state.r, state.phi, state.dr, state.dphi

        cos_p, sin_p = math.cos(self.angle), math.sin(self.angle)
        self.position = (bx + self.radius * cos_p * vis_scale,
                         by + self.radius * sin_p * vis_scale)

        vx = self.dr * cos_p - self.radius * self.dphi * sin_p
        vy = self.dr * sin_p + self.radius * self.dphi * cos_p
        speed = math.hypot(vx, vy)
        if speed > 0.0 and math.isfinite(speed):
            self.direction = (vx / speed, vy / speed)

        self.path.append(self.position)
        return True
