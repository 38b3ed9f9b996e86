from dataclasses import dataclass
from typing import Sequence, Tuple
import math

from .constants import MERGE_RADIUS_FACTOR, schwarzschild_radius
from .errors import InvalidParameter

Vector3 = Tuple[float, float, float]
ORIGIN: Vector3 = (0.0, 0.0, 0.0)


def as_vector(v: Sequence[float]) -> Vector3:
    if len(v) != 3:
        raise InvalidParameter(f"expected a 3-vector, got {len(v)} components")
    return (float(v[0]), float(v[1]), float(v[2]))

def add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])

def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])

def scale(v: Vector3, f: float) -> Vector3:
    return (f * v[0], f * v[1], f * v[2])

def magnitude(v: Vector3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])

def planar_polar(v: Vector3) -> Tuple[float, float]:
    """Return (r, phi) of the in-plane part of ``v``; z is ignored."""
    return math.hypot(v[0], v[1]), math.atan2(v[1], v[0])


@dataclass(frozen=True)
class BlackHole:
    """A Schwarzschild black hole; mass in geometrized units."""
    mass: float = 1.0
    position: Vector3 = ORIGIN

    def __post_init__(self):
        schwarzschild_radius(self.mass)  # validates
        object.__setattr__(self, "mass", float(self.mass))
        object.__setattr__(self, "position", as_vector(self.position))

    @property
    def schwarzschild_radius(self) -> float:
        return schwarzschild_radius(self.mass)

    @property
    def merge_radius(self) -> float:
        return MERGE_RADIUS_FACTOR * self.mass

    def has_captured(self, position: Sequence[float]) -> bool:
        r, _ = planar_polar(sub(as_vector(position), self.position))
        return r <= self.merge_radius


@dataclass(frozen=True)
class Particle:
    """Test particle initial conditions; energy and angular momentum are conserved."""
    initial_position: Vector3
    energy: float
    angular_momentum: float

    def __post_init__(self):
        object.__setattr__(self, "initial_position", as_vector(self.initial_position))
        object.__setattr__(self, "energy", float(self.energy))
        object.__setattr__(self, "angular_momentum", float(self.angular_momentum))
