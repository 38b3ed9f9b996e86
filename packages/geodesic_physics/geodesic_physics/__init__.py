from .constants import M_PI, NEWTON_CATEGORY, SCHWARZSCHILD_CATEGORY, schwarzschild_radius
from .errors import PhysicsError, InvalidParameter, NoStableOrbit, TemporalSingularity
from .models import BlackHole, Particle
from .geodesics import Geodesic, SchwarzschildGeodesic, NewtonGeodesic, make_geodesic
from .parameters import OrbitParameters, Trajectory, clamp_unit, circular_orbit_radii, select_parameters
from .binary import BinarySystem, InspiralClock, chirp_mass, tone_frequency
from .sampling import sample_inspiral, sample_effective_potential
__all__ = ["M_PI","NEWTON_CATEGORY","SCHWARZSCHILD_CATEGORY","schwarzschild_radius",
           "PhysicsError","InvalidParameter","NoStableOrbit","TemporalSingularity",
           "BlackHole","Particle","Geodesic","SchwarzschildGeodesic","NewtonGeodesic","make_geodesic",
           "OrbitParameters","Trajectory","clamp_unit","circular_orbit_radii","select_parameters",
           "BinarySystem","InspiralClock","chirp_mass","tone_frequency",
           "sample_inspiral","sample_effective_potential"]
