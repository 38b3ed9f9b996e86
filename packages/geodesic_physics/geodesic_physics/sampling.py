from typing import Optional
import logging

from .binary import BinarySystem, InspiralClock, tone_frequency
from .errors import InvalidParameter
from .geodesics import Geodesic
from .models import scale

logger = logging.getLogger(__name__)


def sample_inspiral(system: BinarySystem, clock: Optional[InspiralClock] = None, steps: int = 200):
    """Sample the inspiral at ``steps`` evenly spaced playback instants.

    Positions are normalized by the larger component radius at the start of
    playback. Sampling stops before coalescence.
    """
    if steps < 1:
        raise InvalidParameter(f"steps must be at least 1, got {steps!r}")
    clock = clock or InspiralClock()
    t0 = clock.initial_time
    norm = 1.0 / max(system.first_radius(t0), system.second_radius(t0))

    times, first_trail, second_trail, frequencies, tones = [], [], [], [], []
    for n in range(steps + 1):
        elapsed = clock.duration * n / steps
        if clock.has_merged(elapsed):
            break
        t = clock.time_to_coalescence(elapsed)
        times.append(t)
        first_trail.append(scale(system.first_black_hole(t).position, norm))
        second_trail.append(scale(system.second_black_hole(t).position, norm))
        frequencies.append(system.radiation_frequency(t))
        tones.append(tone_frequency(system, t))

    logger.debug("sampled %d inspiral points", len(times))
    return {
        "times": times,
        "first_trail": first_trail,
        "second_trail": second_trail,
        "frequencies": frequencies,
        "tone_frequencies": tones,
        "final_mass": system.final_black_hole.mass,
    }


def sample_effective_potential(geodesic: Geodesic, r_min: float, r_max: float, steps: int = 200):
    if not 0 < r_min < r_max:
        raise InvalidParameter(f"need 0 < r_min < r_max, got {r_min!r}, {r_max!r}")
    if steps < 2:
        raise InvalidParameter(f"steps must be at least 2, got {steps!r}")
    radii, potential = [], []
    dr = (r_max - r_min) / (steps - 1)
    for n in range(steps):
        r = r_min + n * dr
        try:
            V = geodesic.effective_potential(r)
        except InvalidParameter:
            continue  # inside the horizon
        radii.append(r)
        potential.append(V)
    return {"theory": geodesic.theory, "radii": radii, "potential": potential,
            "energy": geodesic.particle.energy}
