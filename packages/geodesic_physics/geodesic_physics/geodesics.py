"""
Closed-form geodesics of a test particle around a spherically symmetric source.

Two theories share one interface: ``SchwarzschildGeodesic`` (general
relativity) and ``NewtonGeodesic`` (inverse-square gravity). Both are
stateless; every quantity is evaluated from the particle's conserved energy
and angular momentum at the radius asked for. Motion is planar, z is always 0.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Sequence, Union
import functools
import math

from .constants import NEWTON_CATEGORY, SCHWARZSCHILD_CATEGORY
from .errors import InvalidParameter
from .models import BlackHole, Particle, Vector3, as_vector, magnitude, planar_polar, sub


def _check_radius(r: float) -> float:
    if not r > 0:
        raise InvalidParameter(f"radius must be positive, got {r!r}")
    return r


def radial(method):
    """Validate ``r`` and reject radii too small for a finite float result."""
    @functools.wraps(method)
    def wrapper(self, r):
        r = _check_radius(r)
        try:
            value = method(self, r)
        except (OverflowError, ZeroDivisionError):
            value = math.inf
        if not math.isfinite(value):
            raise InvalidParameter(
                f"radius {r!r} is too small to evaluate around mass {self.source.mass!r}")
        return value
    return wrapper


@dataclass(frozen=True)
class Geodesic(ABC):
    particle: Particle
    source: BlackHole

    field_bit_mask: ClassVar[int] = 0
    theory: ClassVar[str] = ""

    @radial
    def angular_velocity(self, r: float) -> float:
        return self.particle.angular_momentum / r ** 2

    @abstractmethod
    def effective_potential(self, r: float) -> float: ...

    @abstractmethod
    def radial_velocity(self, r: float) -> float:
        """Inward radial velocity at ``r``; 0 at turning points and in forbidden regions."""

    @abstractmethod
    def effective_radial_force(self, r: float) -> float:
        """Radial acceleration at ``r``, handed to an external integrator."""

    @property
    def initial_radius(self) -> float:
        r, _ = planar_polar(sub(self.particle.initial_position, self.source.position))
        return r

    @property
    def initial_velocity(self) -> Vector3:
        r, phi = planar_polar(sub(self.particle.initial_position, self.source.position))
        v_r = self.radial_velocity(r)
        v_phi = r * self.angular_velocity(r)
        # e_r = (cos phi, sin phi), e_phi = (-sin phi, cos phi)
        return (v_r * math.cos(phi) - v_phi * math.sin(phi),
                v_r * math.sin(phi) + v_phi * math.cos(phi),
                0.0)

    @property
    def simulation_timescale(self) -> float:
        """Time to cross the initial radius at the initial speed."""
        speed = magnitude(self.initial_velocity)
        if speed == 0:
            raise InvalidParameter("particle starts at rest, timescale is undefined")
        return self.initial_radius / speed

    def field_force(self, position: Sequence[float], mass: float = 1.0) -> Vector3:
        """Force on a body of ``mass`` at ``position``, directed along the radial unit vector."""
        r, phi = planar_polar(sub(as_vector(position), self.source.position))
        F = self.effective_radial_force(r)
        return (F * mass * math.cos(phi), F * mass * math.sin(phi), 0.0)


@dataclass(frozen=True)
class SchwarzschildGeodesic(Geodesic):
    """The trajectory a test particle follows around a source in general relativity."""

    field_bit_mask: ClassVar[int] = SCHWARZSCHILD_CATEGORY
    theory: ClassVar[str] = "schwarzschild"

    @radial
    def effective_potential_squared(self, r: float) -> float:
        return (1 - 2 * self.source.mass / r) * (1 + (self.particle.angular_momentum / r) ** 2)

    @radial
    def effective_potential(self, r: float) -> float:
        V_sq = self.effective_potential_squared(r)
        if V_sq < 0:
            raise InvalidParameter(f"effective potential is undefined inside the horizon (r={r!r})")
        return math.sqrt(V_sq)

    @radial
    def radial_velocity(self, r: float) -> float:
        V_sq = self.effective_potential_squared(r)
        E_sq = self.particle.energy ** 2
        if not E_sq > V_sq:
            return 0.0
        return -math.sqrt(E_sq - V_sq)

    @radial
    def effective_radial_force(self, r: float) -> float:
        F_M = -self.source.mass / r ** 2
        return F_M + 3 * F_M * (self.particle.angular_momentum / r) ** 2


@dataclass(frozen=True)
class NewtonGeodesic(Geodesic):
    """The trajectory a test particle follows around a source in Newtonian gravity."""

    field_bit_mask: ClassVar[int] = NEWTON_CATEGORY
    theory: ClassVar[str] = "newton"

    @radial
    def effective_potential(self, r: float) -> float:
        # offset by the rest energy so it compares with the relativistic energy
        return (self.particle.angular_momentum / r) ** 2 / 2 - self.source.mass / r + 1

    @radial
    def radial_velocity(self, r: float) -> float:
        E = self.particle.energy
        V = self.effective_potential(r)
        if not E > V:
            return 0.0
        return -math.sqrt(2 * E - 2 * V)

    @radial
    def effective_radial_force(self, r: float) -> float:
        return -self.source.mass / r ** 2


GEODESICS = {cls.theory: cls for cls in (SchwarzschildGeodesic, NewtonGeodesic)}


def make_geodesic(theory: Union[str, int], particle: Particle, source: BlackHole) -> Geodesic:
    """Build the geodesic for a theory name or field bit mask."""
    if isinstance(theory, int):
        for cls in GEODESICS.values():
            if cls.field_bit_mask == theory:
                return cls(particle, source)
        raise InvalidParameter(f"no force field for bit mask {theory:#x}")
    try:
        cls = GEODESICS[theory.lower()]
    except KeyError:
        raise InvalidParameter(f"unknown theory {theory!r}, expected one of {sorted(GEODESICS)}") from None
    return cls(particle, source)
