import logging
import os
from celery import Celery
from photon_core.config import get_scenario, load_constants
from photon_core.models import BlackHole
from photon_core.world import SimulationWorld, integrate_trajectory

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
CELERY_BACKEND_URL = os.getenv("CELERY_BACKEND_URL", "redis://redis:6379/1")

celery = Celery("photons", broker=CELERY_BROKER_URL, backend=CELERY_BACKEND_URL)

logger = logging.getLogger(__name__)


@celery.task
def integrate_task(mass, x, y, dx=1.0, dy=0.0, center=(400.0, 300.0), steps=5000, dt=None, integrator="euler"):
    bh = BlackHole(tuple(center), mass, load_constants())
    return integrate_trajectory(bh, (x, y), (dx, dy), steps, dt, integrator)


@celery.task
def scenario_task(scenario="reference", width=800, height=600, ticks=600, dt=None, integrator="euler"):
    constants = load_constants()
    world = SimulationWorld.initialize(width, height, get_scenario(scenario), constants, integrator)
    dt = constants.time_multiplier / 60.0 if dt is None else dt
    for _ in range(ticks):
        world.step(dt)
    logger.info("scenario %s finished: %d tick(s), %d of %d photon(s) absorbed",
                scenario, world.ticks, world.absorbed_photons, len(world.photons))
    return world.snapshot()
