import math
from dataclasses import dataclass, field
from typing import Tuple

from .constants import DEFAULT_CONSTANTS, PhysicalConstants, schwarzschild_radius
from .errors import InvalidParameter

Point = Tuple[float, float]


@dataclass(frozen=True)
class BlackHole:
    """Non-rotating black hole; its radius is fixed by the mass at construction."""
    position: Point  # display coordinates
    mass: float  # kg
    constants: PhysicalConstants = field(default=DEFAULT_CONSTANTS, repr=False)
    schwarzschild_radius: float = field(init=False)

    def __post_init__(self):
        if not math.isfinite(self.mass) or self.mass <= 0.0:
            raise InvalidParameter(f"black hole mass must be positive, got {self.mass!r}")
        x, y = self.position
        object.__setattr__(self, "position", (float(x), float(y)))
        object.__setattr__(self, "schwarzschild_radius", schwarzschild_radius(self.mass, self.constants))

    @property
    def display_radius(self) -> float:
        return self.schwarzschild_radius * self.constants.vis_scale

    @property
    def photon_sphere_radius(self) -> float:
        return 1.5 * self.schwarzschild_radius

    @property
    def photon_sphere_display_radius(self) -> float:
        return self.photon_sphere_radius * self.constants.vis_scale


@dataclass(frozen=True)
class PolarState:
    r: float; phi: float
    dr: float; dphi: float
