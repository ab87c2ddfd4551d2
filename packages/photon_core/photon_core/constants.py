import math
from dataclasses import dataclass

from .errors import InvalidParameter

c = 299_792_458.0
G = 6.67430e-11
M_PI = math.pi
VIS_SCALE = 6.42e-9  # pixels per meter
TIME_MULTIPLIER = 100.0


@dataclass(frozen=True)
class PhysicalConstants:
    c: float = c
    G: float = G
    vis_scale: float = VIS_SCALE
    time_multiplier: float = TIME_MULTIPLIER

    def __post_init__(self):
        for name in ("c", "G", "vis_scale", "time_multiplier"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0.0:
                raise InvalidParameter(f"{name} must be a positive finite number, got {value!r}")


DEFAULT_CONSTANTS = PhysicalConstants()


def schwarzschild_radius(mass: float, constants: PhysicalConstants = DEFAULT_CONSTANTS) -> float:
    return 2.0 * constants.G * mass / (constants.c * constants.c)
