"""
Initial conditions from two unit sliders.

The angular momentum slider spans ``[L_saddle, L_saddle + 6M]`` and the energy
slider is eased so that the interesting transitions (elliptic orbit, fly-by,
near-catch, fall-in) are all reachable by touch.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import logging
import math

from .constants import (
    ANGULAR_MOMENTUM_SPAN,
    ENERGY_EASING_EXPONENT,
    ESCAPE_ENERGY,
    INNER_ORBIT_ENERGY_MAGNITUDE,
    SADDLE_ANGULAR_MOMENTUM_FACTOR,
)
from .errors import InvalidParameter, NoStableOrbit
from .geodesics import NewtonGeodesic, SchwarzschildGeodesic
from .models import BlackHole, Particle

logger = logging.getLogger(__name__)

# Rounding slack on the circular-orbit discriminant at exactly L_saddle
_DISCRIMINANT_TOLERANCE = 1e-12


class Trajectory(str, Enum):
    NEAR_CIRCULAR = "near-circular orbit"
    ELLIPTIC = "elliptic orbit"
    FLY_BY = "fly-by"
    NEAR_CATCH = "near-catch"
    FALL_IN = "fall-in"


def clamp_unit(x: float) -> float:
    return max(0.0, min(1.0, x))


def saddle_angular_momentum(mass: float) -> float:
    return SADDLE_ANGULAR_MOMENTUM_FACTOR * mass


def circular_orbit_radii(mass: float, angular_momentum: float) -> Tuple[float, float]:
    """Return the (outer stable, inner unstable) circular orbit radii."""
    L = angular_momentum
    if mass <= 0 or L <= 0:
        raise InvalidParameter(f"mass and angular momentum must be positive, got {mass!r}, {L!r}")
    discriminant = 1 - 12 * (mass / L) ** 2
    if discriminant < -_DISCRIMINANT_TOLERANCE:
        raise NoStableOrbit(
            f"angular momentum {L!r} is below the saddle value {saddle_angular_momentum(mass)!r}")
    root = math.sqrt(max(discriminant, 0.0))
    return L ** 2 / 2 / mass * (1 + root), L ** 2 / 2 / mass * (1 - root)


def orbit_energy(mass: float, angular_momentum: float, r: float) -> float:
    """Energy of a particle at rest radially at ``r`` (the relativistic effective potential)."""
    return math.sqrt((1 - 2 * mass / r) * (1 + (angular_momentum / r) ** 2))


def eased_energy(energy_magnitude: float, circular_energy: float, inner_energy: float) -> float:
    b = INNER_ORBIT_ENERGY_MAGNITUDE
    n = ENERGY_EASING_EXPONENT
    if energy_magnitude <= b:
        return circular_energy + (energy_magnitude / b) ** n * (inner_energy - circular_energy)
    return inner_energy + ((energy_magnitude - b) / (1 - b)) ** n * (inner_energy - ESCAPE_ENERGY)


def classify_trajectory(energy: float, circular_energy: float, inner_energy: float) -> Trajectory:
    if energy <= circular_energy + (ESCAPE_ENERGY - circular_energy) / 5:
        return Trajectory.NEAR_CIRCULAR
    if energy <= ESCAPE_ENERGY:
        return Trajectory.ELLIPTIC
    if energy <= inner_energy - (inner_energy - ESCAPE_ENERGY) / 6:
        return Trajectory.FLY_BY
    if energy <= inner_energy + (inner_energy - ESCAPE_ENERGY) / 6:
        return Trajectory.NEAR_CATCH
    return Trajectory.FALL_IN


@dataclass(frozen=True)
class OrbitParameters:
    source: BlackHole
    particle: Particle
    saddle_angular_momentum: float
    circular_orbit_radius: float
    circular_orbit_energy: float
    inner_orbit_radius: float
    inner_orbit_energy: float
    newtonian_circular_orbit_radius: float
    newtonian_circular_orbit_energy: float
    trajectory: Trajectory

    @property
    def initial_radius(self) -> float:
        return self.circular_orbit_radius

    @property
    def object_scale(self) -> float:
        """Display scale relative to the orbit at the saddle angular momentum."""
        return self.initial_radius / self.saddle_angular_momentum ** 2 * self.source.mass

    def schwarzschild_geodesic(self) -> SchwarzschildGeodesic:
        return SchwarzschildGeodesic(self.particle, self.source)

    def newton_geodesic(self) -> NewtonGeodesic:
        return NewtonGeodesic(self.particle, self.source)


def select_parameters(mass: float, angular_momentum_magnitude: float,
                      energy_magnitude: float) -> OrbitParameters:
    """Map angular momentum and energy magnitudes in [0, 1] to initial conditions.

    The particle starts on the outer circular orbit radius at ``(-r, 0, 0)``
    around a source at the origin.
    """
    for name, value in (("angular_momentum_magnitude", angular_momentum_magnitude),
                        ("energy_magnitude", energy_magnitude)):
        if not 0.0 <= value <= 1.0:
            raise InvalidParameter(f"{name} must lie in [0, 1], got {value!r}")
    source = BlackHole(mass=mass)
    M = source.mass

    L_saddle = saddle_angular_momentum(M)
    L = L_saddle + angular_momentum_magnitude * ANGULAR_MOMENTUM_SPAN * M

    newton_r = L ** 2 / M
    newton_E = (L / newton_r) ** 2 / 2 - M / newton_r + 1

    r_circular, r_inner = circular_orbit_radii(M, L)
    E_circular = orbit_energy(M, L, r_circular)
    E_inner = orbit_energy(M, L, r_inner)

    E = eased_energy(energy_magnitude, E_circular, E_inner)
    trajectory = classify_trajectory(E, E_circular, E_inner)
    logger.debug("M=%g L=%g r_c=%g r_in=%g E=%g -> %s",
                 M, L, r_circular, r_inner, E, trajectory.value)

    particle = Particle(initial_position=(-r_circular, 0.0, 0.0), energy=E, angular_momentum=L)
    return OrbitParameters(
        source=source,
        particle=particle,
        saddle_angular_momentum=L_saddle,
        circular_orbit_radius=r_circular,
        circular_orbit_energy=E_circular,
        inner_orbit_radius=r_inner,
        inner_orbit_energy=E_inner,
        newtonian_circular_orbit_radius=newton_r,
        newtonian_circular_orbit_energy=newton_E,
        trajectory=trajectory,
    )
