from typing import Callable, Dict

from .constants import c as C
from .errors import InvalidParameter
from .models import PolarState

Integrator = Callable[..., PolarState]


def geodesic_rhs(state: PolarState, rs: float, c: float = C):
    """Coordinate-time derivatives of a photon in the equatorial plane.

    The impact parameter L = r^2 (dphi/dt) / c is taken from the current
    velocity rather than carried as a conserved quantity.
    """
    r, dr, dphi = state.r, state.dr, state.dphi
    if r <= 0.0:
        return dr, dphi, 0.0, 0.0
    c2 = c * c
    L = r * r * dphi / c
    rhs2 = -(rs * c2) / (2.0 * r * r) + (L * L * c2) / (r ** 3) - (3.0 * rs * L * L * c2) / (2.0 * r ** 4)
    rhs3 = (-2.0 / r) * dr * dphi
    return dr, dphi, rhs2, rhs3


def euler_step(state: PolarState, rs: float, dt: float, c: float = C) -> PolarState:
    """One semi-implicit Euler step: velocities first, then positions."""
    if state.r <= 0.0:
        return state
    _, _, d2r, d2phi = geodesic_rhs(state, rs, c)
    dr = state.dr + d2r * dt
    dphi = state.dphi + d2phi * dt
    return PolarState(state.r + dr * dt, state.phi + dphi * dt, dr, dphi)


def rk4_step(state: PolarState, rs: float, dt: float, c: float = C) -> PolarState:
    if state.r <= 0.0:
        return state
    y0 = (state.r, state.phi, state.dr, state.dphi)

    def add(a, b, f): return PolarState(*(a[i] + f*b[i] for i in range(4)))
    k1 = geodesic_rhs(state, rs, c)
    k2 = geodesic_rhs(add(y0, k1, dt/2.0), rs, c)
    k3 = geodesic_rhs(add(y0, k2, dt/2.0), rs, c)
    k4 = geodesic_rhs(add(y0, k3, dt), rs, c)

    return PolarState(*(y0[i] + (dt / 6.0) * (k1[i] + 2*k2[i] + 2*k3[i] + k4[i]) for i in range(4)))


INTEGRATORS: Dict[str, Integrator] = {"euler": euler_step, "rk4": rk4_step}


def get_integrator(name: str) -> Integrator:
    try:
        return INTEGRATORS[name]
    except KeyError:
        raise InvalidParameter(f"unknown integrator {name!r}; expected one of {sorted(INTEGRATORS)}") from None
