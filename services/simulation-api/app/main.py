from typing import Tuple

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from photon_core.config import get_scenario, load_constants
from photon_core.errors import InvalidParameter
from photon_core.models import BlackHole
from photon_core.world import SimulationWorld, integrate_trajectory

app = FastAPI(title="Photon Geodesics API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

CONSTANTS = load_constants()

# Endpoints touching the world are async so it is only ever used from the event loop thread.
app.state.world = SimulationWorld.initialize(800, 600, constants=CONSTANTS)


@app.exception_handler(InvalidParameter)
async def invalid_parameter_handler(request: Request, exc: InvalidParameter):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


class BHReq(BaseModel):
    mass: float


class IntegrateReq(BaseModel):
    mass: float
    center: Tuple[float, float] = (400.0, 300.0)
    x: float; y: float
    dx: float = 1.0; dy: float = 0.0
    steps: int = Field(1000, ge=0, le=100_000)
    dt: float = Field(CONSTANTS.time_multiplier / 60.0, gt=0)
    integrator: str = "euler"


class ResetReq(BaseModel):
    width: float = Field(800, gt=0)
    height: float = Field(600, gt=0)
    scenario: str = "reference"
    integrator: str = "euler"


class StepReq(BaseModel):
    dt: float = Field(CONSTANTS.time_multiplier / 60.0, gt=0)
    ticks: int = Field(1, ge=1, le=10_000)


@app.post("/derived")
def derived(req: BHReq):
    bh = BlackHole((0.0, 0.0), req.mass, CONSTANTS)
    return {
        "mass": req.mass,
        "schwarzschild_radius": bh.schwarzschild_radius,
        "photon_sphere_radius": bh.photon_sphere_radius,
        "display_radius": bh.display_radius,
    }


@app.post("/integrate")
def integrate(req: IntegrateReq):
    bh = BlackHole(req.center, req.mass, CONSTANTS)
    return integrate_trajectory(bh, (req.x, req.y), (req.dx, req.dy), req.steps, req.dt, req.integrator)


@app.get("/world")
async def world_state():
    return app.state.world.snapshot()


@app.post("/world/reset")
async def world_reset(req: ResetReq):
    app.state.world = SimulationWorld.initialize(
        req.width, req.height, get_scenario(req.scenario), CONSTANTS, req.integrator)
    return app.state.world.snapshot()


@app.post("/world/step")
async def world_step(req: StepReq):
    world = app.state.world
    for _ in range(req.ticks):
        world.step(req.dt)
    return world.snapshot()
