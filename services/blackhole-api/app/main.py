import logging
import os
from typing import Literal

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from geodesic_physics.errors import InvalidParameter, PhysicsError
from geodesic_physics.geodesics import make_geodesic
from geodesic_physics.models import BlackHole, Particle
from geodesic_physics.parameters import select_parameters
from geodesic_physics.sampling import sample_effective_potential

CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")

logger = logging.getLogger(__name__)

app = FastAPI(title="Black Hole API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(PhysicsError)
def physics_error(request: Request, exc: PhysicsError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc), "error": type(exc).__name__})

class BHReq(BaseModel):
    mass: float = Field(gt=0)

class SliderReq(BaseModel):
    mass: float = Field(0.2, gt=0)
    angular_momentum_magnitude: float = Field(0.5, ge=0, le=1)
    energy_magnitude: float = Field(0.25, ge=0, le=1)

class GeodesicReq(BaseModel):
    theory: Literal["schwarzschild", "newton"] = "schwarzschild"
    mass: float = Field(gt=0)
    energy: float
    angular_momentum: float
    r: float = Field(gt=0)

class PotentialReq(BaseModel):
    theory: Literal["schwarzschild", "newton"] = "schwarzschild"
    mass: float = Field(gt=0)
    energy: float
    angular_momentum: float
    r_min: float = Field(gt=0)
    r_max: float = Field(gt=0)
    steps: int = Field(200, ge=2, le=10_000)

def _geodesic_state(geodesic):
    return {
        "theory": geodesic.theory,
        "field_bit_mask": geodesic.field_bit_mask,
        "initial_velocity": geodesic.initial_velocity,
        "simulation_timescale": geodesic.simulation_timescale,
    }

@app.post("/derived")
def derived(req: BHReq):
    bh = BlackHole(mass=req.mass)
    return {"mass": bh.mass, "schwarzschild_radius": bh.schwarzschild_radius, "merge_radius": bh.merge_radius}

@app.post("/parameters")
def parameters(req: SliderReq):
    p = select_parameters(req.mass, req.angular_momentum_magnitude, req.energy_magnitude)
    return {
        "mass": p.source.mass,
        "initial_position": p.particle.initial_position,
        "energy": p.particle.energy,
        "angular_momentum": p.particle.angular_momentum,
        "saddle_angular_momentum": p.saddle_angular_momentum,
        "circular_orbit_radius": p.circular_orbit_radius,
        "circular_orbit_energy": p.circular_orbit_energy,
        "inner_orbit_radius": p.inner_orbit_radius,
        "inner_orbit_energy": p.inner_orbit_energy,
        "object_scale": p.object_scale,
        "trajectory": p.trajectory.value,
        "schwarzschild": _geodesic_state(p.schwarzschild_geodesic()),
        "newton": _geodesic_state(p.newton_geodesic()),
    }

@app.post("/geodesic")
def geodesic(req: GeodesicReq):
    bh = BlackHole(mass=req.mass)
    particle = Particle(initial_position=(-req.r, 0.0, 0.0), energy=req.energy, angular_momentum=req.angular_momentum)
    g = make_geodesic(req.theory, particle, bh)
    try:
        V = g.effective_potential(req.r)
    except InvalidParameter:
        V = None  # inside the horizon
    return {
        "theory": g.theory,
        "r": req.r,
        "radial_velocity": g.radial_velocity(req.r),
        "angular_velocity": g.angular_velocity(req.r),
        "effective_potential": V,
        "effective_radial_force": g.effective_radial_force(req.r),
        "captured": bh.has_captured(particle.initial_position),
    }

@app.post("/potential")
def potential(req: PotentialReq):
    bh = BlackHole(mass=req.mass)
    particle = Particle(initial_position=(-req.r_max, 0.0, 0.0), energy=req.energy, angular_momentum=req.angular_momentum)
    return sample_effective_potential(make_geodesic(req.theory, particle, bh), req.r_min, req.r_max, req.steps)
