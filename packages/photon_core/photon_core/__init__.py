from .constants import c, G, M_PI, VIS_SCALE, TIME_MULTIPLIER, DEFAULT_CONSTANTS, PhysicalConstants, schwarzschild_radius
from .errors import PhotonCoreError, InvalidParameter
from .models import BlackHole, PolarState
from .integrators import geodesic_rhs, euler_step, rk4_step, get_integrator
from .photon import Photon
from .config import Scenario, REFERENCE_SCENARIO, PARALLEL_BEAM, get_scenario, load_constants
from .world import SimulationWorld, integrate_trajectory
__all__ = ["c","G","M_PI","VIS_SCALE","TIME_MULTIPLIER","DEFAULT_CONSTANTS","PhysicalConstants",
           "schwarzschild_radius","PhotonCoreError","InvalidParameter","BlackHole","PolarState",
           "geodesic_rhs","euler_step","rk4_step","get_integrator","Photon","Scenario",
           "REFERENCE_SCENARIO","PARALLEL_BEAM","get_scenario","load_constants",
           "SimulationWorld","integrate_trajectory"]
