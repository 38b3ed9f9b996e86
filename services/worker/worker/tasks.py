import os
from celery import Celery
from celery.utils.log import get_task_logger
from geodesic_physics.binary import BinarySystem, InspiralClock
from geodesic_physics.geodesics import make_geodesic
from geodesic_physics.models import BlackHole, Particle
from geodesic_physics.sampling import sample_effective_potential, sample_inspiral

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
CELERY_BACKEND_URL = os.getenv("CELERY_BACKEND_URL", "redis://redis:6379/1")

celery = Celery("bh", broker=CELERY_BROKER_URL, backend=CELERY_BACKEND_URL)
logger = get_task_logger(__name__)

@celery.task
def inspiral_task(first_mass, second_mass, initial_angle=0.0, duration=20.0, timescale=0.05, steps=2000):
    system = BinarySystem(first_mass, second_mass, initial_angle)
    clock = InspiralClock(duration=duration, timescale=timescale)
    system.align_phase(clock.initial_time)
    logger.info("sampling inspiral m1=%g m2=%g over %d steps", first_mass, second_mass, steps)
    return sample_inspiral(system, clock, steps)

@celery.task
def potential_task(theory, mass, energy, angular_momentum, r_min, r_max, steps=2000):
    bh = BlackHole(mass=mass)
    particle = Particle(initial_position=(-r_max, 0.0, 0.0), energy=energy, angular_momentum=angular_momentum)
    return sample_effective_potential(make_geodesic(theory, particle, bh), r_min, r_max, steps)
