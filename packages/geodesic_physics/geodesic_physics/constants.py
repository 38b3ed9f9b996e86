import math

from .errors import InvalidParameter

# Geometrized units throughout: G = c = 1, masses and radii share a unit.
M_PI = math.pi

SCHWARZSCHILD_CATEGORY = 0x1 << 1
NEWTON_CATEGORY = 0x1 << 2

# Parameter selection from two unit sliders
SADDLE_ANGULAR_MOMENTUM_FACTOR = math.sqrt(12)
ANGULAR_MOMENTUM_SPAN = 6.0  # in units of the source mass
INNER_ORBIT_ENERGY_MAGNITUDE = 0.8
ENERGY_EASING_EXPONENT = 5
ESCAPE_ENERGY = 1.0

# Particles at or below this many masses are merged into the source
MERGE_RADIUS_FACTOR = 3.0

# Binary inspiral playback
INSPIRAL_DURATION = 20.0  # wall-clock seconds until coalescence
INSPIRAL_TIMESCALE = 0.05
TONE_REFERENCE_FREQUENCY = 0.07
TONE_REFERENCE_PITCH = 200.0  # Hz


def schwarzschild_radius(mass: float) -> float:
    if not math.isfinite(mass) or mass <= 0:
        raise InvalidParameter(f"mass must be positive, got {mass!r}")
    return 2.0 * mass
