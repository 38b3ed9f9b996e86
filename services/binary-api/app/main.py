import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from geodesic_physics.binary import BinarySystem, InspiralClock, tone_frequency
from geodesic_physics.errors import PhysicsError
from geodesic_physics.sampling import sample_inspiral

CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")

logger = logging.getLogger(__name__)

app = FastAPI(title="Binary API")
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

class BinaryReq(BaseModel):
    first_mass: float = Field(3.0, gt=0)
    second_mass: float = Field(1.5, gt=0)
    initial_angle: float = 0.0

class StateReq(BinaryReq):
    t: float

class SampleReq(BinaryReq):
    duration: float = Field(20.0, gt=0)
    timescale: float = Field(0.05, gt=0)
    steps: int = Field(200, ge=1, le=10_000)
    align_phase: bool = True

def _black_hole(bh):
    return {"mass": bh.mass, "position": bh.position}

@app.post("/state")
def state(req: StateReq):
    system = BinarySystem(req.first_mass, req.second_mass, req.initial_angle)
    return {
        "t": req.t,
        "total_mass": system.total_mass,
        "chirp_mass": system.chirp_mass,
        "radiation_frequency": system.radiation_frequency(req.t),
        "tone_frequency": tone_frequency(system, req.t),
        "distance": system.distance(req.t),
        "rotation_angle": system.rotation_angle(req.t),
        "first": _black_hole(system.first_black_hole(req.t)),
        "second": _black_hole(system.second_black_hole(req.t)),
        "first_velocity": system.first_velocity(req.t),
        "second_velocity": system.second_velocity(req.t),
    }

@app.post("/final")
def final(req: BinaryReq):
    system = BinarySystem(req.first_mass, req.second_mass, req.initial_angle)
    return {"radiated_energy": system.final_radiated_energy, **_black_hole(system.final_black_hole)}

@app.post("/sample")
def sample(req: SampleReq):
    system = BinarySystem(req.first_mass, req.second_mass, req.initial_angle)
    clock = InspiralClock(duration=req.duration, timescale=req.timescale)
    if req.align_phase:
        system.align_phase(clock.initial_time)
    return sample_inspiral(system, clock, req.steps)
