import os
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from .constants import DEFAULT_CONSTANTS, PhysicalConstants
from .errors import InvalidParameter
from .models import Point


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidParameter(f"{key}={raw!r} is not a number") from None


def load_constants(env: Optional[Mapping[str, str]] = None) -> PhysicalConstants:
    """Default constants with PHOTON_VIS_SCALE / PHOTON_TIME_MULTIPLIER overrides."""
    env = os.environ if env is None else env
    return PhysicalConstants(
        c=DEFAULT_CONSTANTS.c,
        G=DEFAULT_CONSTANTS.G,
        vis_scale=_env_float(env, "PHOTON_VIS_SCALE", DEFAULT_CONSTANTS.vis_scale),
        time_multiplier=_env_float(env, "PHOTON_TIME_MULTIPLIER", DEFAULT_CONSTANTS.time_multiplier),
    )


@dataclass(frozen=True)
class Scenario:
    """Initial layout: black hole at the screen centre, photons launched from the left edge."""
    name: str
    mass: float = 8.54e36  # kg
    offset_y: float = 285.99  # pixels below the centre for the first photon
    direction: Point = (1.0, 0.0)
    photon_count: int = 1
    spacing: float = 0.0  # pixels between successive photons

    def photon_starts(self, center: Point) -> List[Tuple[Point, Point]]:
        _, cy = center
        # horizontal offset of -center.x puts every photon on the left edge
        return [((0.0, cy + self.offset_y + i * self.spacing), self.direction)
                for i in range(self.photon_count)]


REFERENCE_SCENARIO = Scenario("reference")
PARALLEL_BEAM = Scenario("parallel_beam", offset_y=-240.0, photon_count=9, spacing=60.0)

SCENARIOS: Dict[str, Scenario] = {s.name: s for s in (REFERENCE_SCENARIO, PARALLEL_BEAM)}


def get_scenario(name: str) -> Scenario:
    try:
        return SCENARIOS[name]
    except KeyError:
        raise InvalidParameter(f"unknown scenario {name!r}; expected one of {sorted(SCENARIOS)}") from None
