"""
Late inspiral of two point masses toward coalescence.

All quantities are functions of the time to coalescence ``t``: ``t -> 0`` at
merger, larger ``t`` is earlier in the inspiral. The formulas are singular at
``t = 0`` so ``t <= 0`` raises ``TemporalSingularity``; a driver substitutes a
merge transition there and shows ``final_black_hole`` instead.
"""
from dataclasses import dataclass
import math

from .constants import (
    INSPIRAL_DURATION,
    INSPIRAL_TIMESCALE,
    M_PI,
    TONE_REFERENCE_FREQUENCY,
    TONE_REFERENCE_PITCH,
)
from .errors import InvalidParameter, TemporalSingularity
from .models import ORIGIN, BlackHole, Vector3, scale


def _positive_mass(name, value):
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameter(f"{name} must be positive, got {value!r}")
    return value


def _check_time(t: float) -> float:
    if not t > 0:
        raise TemporalSingularity(f"inspiral is singular at or after coalescence (t={t!r})")
    return t


def chirp_mass(first_mass: float, second_mass: float) -> float:
    first_mass = _positive_mass("first_mass", first_mass)
    second_mass = _positive_mass("second_mass", second_mass)
    return (first_mass * second_mass) ** (3 / 5) / (first_mass + second_mass) ** (1 / 5)


@dataclass
class BinarySystem:
    """Two black holes on a shrinking circular orbit around their barycenter.

    Masses and the phase offset may be written directly; masses are
    validated on every write.
    """
    first_mass: float = 3.0
    second_mass: float = 1.5
    initial_angle: float = 0.0

    def __setattr__(self, name, value):
        if name in ("first_mass", "second_mass"):
            value = _positive_mass(name, value)
        elif name == "initial_angle":
            value = float(value)
        super().__setattr__(name, value)

    @property
    def total_mass(self) -> float:
        return self.first_mass + self.second_mass

    @property
    def chirp_mass(self) -> float:
        return chirp_mass(self.first_mass, self.second_mass)

    def radiation_frequency(self, t: float) -> float:
        return self.chirp_mass ** (-5 / 8) * _check_time(t) ** (-3 / 8)

    def distance(self, t: float) -> float:
        return (self.chirp_mass / 4) ** (1 / 3) * (M_PI * self.radiation_frequency(t)) ** (-2 / 3)

    def rotation_angle(self, t: float) -> float:
        return M_PI * (self.radiation_frequency(t) * self.chirp_mass) ** (-5 / 3) - self.initial_angle

    def radial_unit_vector(self, t: float) -> Vector3:
        phi = self.rotation_angle(t)
        return (math.cos(phi), math.sin(phi), 0.0)

    def first_radius(self, t: float) -> float:
        return self.second_mass / self.total_mass * self.distance(t)

    def second_radius(self, t: float) -> float:
        return self.first_mass / self.total_mass * self.distance(t)

    def first_black_hole(self, t: float) -> BlackHole:
        return BlackHole(mass=self.first_mass, position=scale(self.radial_unit_vector(t), self.first_radius(t)))

    def second_black_hole(self, t: float) -> BlackHole:
        return BlackHole(mass=self.second_mass, position=scale(self.radial_unit_vector(t), -self.second_radius(t)))

    def _relative_velocity(self, t: float) -> Vector3:
        # velocity of the separation vector per unit of physical time; t counts down, so d/dt flips sign
        d = self.distance(t)
        phi = self.rotation_angle(t)
        d_rate = -d / (4 * t)
        phi_rate = -5 / 8 * (phi + self.initial_angle) / t
        return (d_rate * math.cos(phi) - d * phi_rate * math.sin(phi),
                d_rate * math.sin(phi) + d * phi_rate * math.cos(phi),
                0.0)

    def first_velocity(self, t: float) -> Vector3:
        return scale(self._relative_velocity(t), self.second_mass / self.total_mass)

    def second_velocity(self, t: float) -> Vector3:
        return scale(self._relative_velocity(t), -self.first_mass / self.total_mass)

    @property
    def final_radiated_energy(self) -> float:
        # TODO: model the energy carried away by the ringdown; the remnant keeps the total mass until then.
        return 0.0

    @property
    def final_black_hole(self) -> BlackHole:
        return BlackHole(mass=self.total_mass - self.final_radiated_energy, position=ORIGIN)

    def adjust(self, mass_ratio: float, mass_magnitude: float) -> None:
        """Split ``2 * mass_magnitude`` between the components by ``mass_ratio`` in (0, 1)."""
        if not 0.0 < mass_ratio < 1.0:
            raise InvalidParameter(f"mass_ratio must lie in (0, 1), got {mass_ratio!r}")
        self.first_mass = 2 * mass_ratio * mass_magnitude
        self.second_mass = 2 * (1 - mass_ratio) * mass_magnitude

    def align_phase(self, t: float) -> None:
        """Offset the phase so the rotation angle at ``t`` is zero."""
        _check_time(t)
        self.initial_angle = 0.0
        self.initial_angle = self.rotation_angle(t)


@dataclass(frozen=True)
class InspiralClock:
    """Maps wall-clock seconds since the start of playback to time to coalescence."""
    duration: float = INSPIRAL_DURATION
    timescale: float = INSPIRAL_TIMESCALE

    def __post_init__(self):
        if not self.duration > 0 or not self.timescale > 0:
            raise InvalidParameter("duration and timescale must be positive")

    @property
    def initial_time(self) -> float:
        return self.duration / self.timescale

    def time_to_coalescence(self, elapsed: float) -> float:
        return (self.duration - elapsed) / self.timescale

    def has_merged(self, elapsed: float) -> bool:
        return self.time_to_coalescence(elapsed) <= 0


def tone_frequency(system: BinarySystem, t: float) -> float:
    """Audible pitch in Hz for the radiation frequency at ``t``."""
    return system.radiation_frequency(t) / TONE_REFERENCE_FREQUENCY * TONE_REFERENCE_PITCH
