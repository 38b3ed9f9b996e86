import math

import pytest

from geodesic_physics import (
    NEWTON_CATEGORY,
    SCHWARZSCHILD_CATEGORY,
    BlackHole,
    Geodesic,
    InvalidParameter,
    NewtonGeodesic,
    Particle,
    SchwarzschildGeodesic,
    make_geodesic,
)

BH = BlackHole(mass=1.0)


def particle(energy=0.97, angular_momentum=4.0, r=10.0):
    return Particle(initial_position=(-r, 0.0, 0.0), energy=energy, angular_momentum=angular_momentum)


def test_geodesic_is_abstract():
    with pytest.raises(TypeError):
        Geodesic(particle(), BH)


def test_angular_velocity_conserves_angular_momentum():
    for cls in (SchwarzschildGeodesic, NewtonGeodesic):
        g = cls(particle(), BH)
        for r in (3.0, 7.5, 20.0):
            assert r ** 2 * g.angular_velocity(r) == pytest.approx(4.0)


def test_schwarzschild_potential_and_radial_velocity():
    g = SchwarzschildGeodesic(particle(), BH)
    assert g.effective_potential_squared(10.0) == pytest.approx(0.8 * 1.16)
    assert g.effective_potential(10.0) == pytest.approx(math.sqrt(0.928))
    assert g.radial_velocity(10.0) == pytest.approx(-math.sqrt(0.97 ** 2 - 0.928))


def test_newton_potential_and_radial_velocity():
    g = NewtonGeodesic(particle(energy=1.0), BH)
    assert g.effective_potential(10.0) == pytest.approx(0.98)
    assert g.radial_velocity(10.0) == pytest.approx(-0.2)


@pytest.mark.parametrize("cls", [SchwarzschildGeodesic, NewtonGeodesic])
def test_radial_velocity_is_zero_in_forbidden_region(cls):
    g = cls(particle(energy=0.9), BH)
    v = g.radial_velocity(10.0)
    assert v == 0.0
    assert not math.isnan(v)


def test_schwarzschild_inside_horizon_does_not_produce_nan():
    g = SchwarzschildGeodesic(particle(), BH)
    for r in (2.0, 1.0, 0.5):
        assert math.isfinite(g.radial_velocity(r))
        assert math.isfinite(g.effective_radial_force(r))
    with pytest.raises(InvalidParameter):
        g.effective_potential(1.0)


@pytest.mark.parametrize("cls", [SchwarzschildGeodesic, NewtonGeodesic])
@pytest.mark.parametrize("r", [0.0, -1.0])
def test_non_positive_radius_is_rejected(cls, r):
    g = cls(particle(), BH)
    with pytest.raises(InvalidParameter):
        g.radial_velocity(r)
    with pytest.raises(InvalidParameter):
        g.effective_radial_force(r)


def test_effective_radial_force():
    assert SchwarzschildGeodesic(particle(), BH).effective_radial_force(10.0) == pytest.approx(-0.0148)
    assert NewtonGeodesic(particle(), BH).effective_radial_force(10.0) == pytest.approx(-0.01)


def test_relativistic_force_is_stronger():
    s = SchwarzschildGeodesic(particle(), BH)
    n = NewtonGeodesic(particle(), BH)
    for r in (3.0, 6.0, 50.0):
        assert s.effective_radial_force(r) < n.effective_radial_force(r) < 0


def test_initial_velocity_decomposes_into_polar_components():
    g = SchwarzschildGeodesic(particle(), BH)
    vx, vy, vz = g.initial_velocity
    # particle sits on the negative x axis
    assert vx == pytest.approx(math.sqrt(0.97 ** 2 - 0.928))
    assert vy == pytest.approx(-0.4)
    assert vz == 0.0


@pytest.mark.parametrize("cls", [SchwarzschildGeodesic, NewtonGeodesic])
def test_initial_velocity_reproduces_angular_momentum(cls):
    source = BlackHole(mass=0.5, position=(1.0, -2.0, 0.0))
    p = Particle(initial_position=(4.0, 2.0, 0.0), energy=0.99, angular_momentum=2.5)
    g = cls(p, source)
    x = p.initial_position[0] - source.position[0]
    y = p.initial_position[1] - source.position[1]
    vx, vy, _ = g.initial_velocity
    assert x * vy - y * vx == pytest.approx(2.5)
    assert g.initial_radius == pytest.approx(5.0)


def test_simulation_timescale_is_radius_over_speed():
    g = NewtonGeodesic(particle(energy=1.0), BH)
    speed = math.hypot(0.2, 0.4)
    assert g.simulation_timescale == pytest.approx(10.0 / speed)


def test_field_force_points_along_radial_unit_vector():
    g = NewtonGeodesic(particle(), BH)
    fx, fy, fz = g.field_force((0.0, 10.0, 0.0), mass=2.0)
    assert fx == pytest.approx(0.0, abs=1e-15)
    assert fy == pytest.approx(-0.02)
    assert fz == 0.0


def test_field_bit_masks_identify_theories():
    assert SchwarzschildGeodesic.field_bit_mask == SCHWARZSCHILD_CATEGORY
    assert NewtonGeodesic.field_bit_mask == NEWTON_CATEGORY
    assert SCHWARZSCHILD_CATEGORY & NEWTON_CATEGORY == 0


def test_make_geodesic():
    p = particle()
    assert isinstance(make_geodesic("schwarzschild", p, BH), SchwarzschildGeodesic)
    assert isinstance(make_geodesic("Newton", p, BH), NewtonGeodesic)
    assert isinstance(make_geodesic(NEWTON_CATEGORY, p, BH), NewtonGeodesic)
    with pytest.raises(InvalidParameter):
        make_geodesic("kerr", p, BH)
    with pytest.raises(InvalidParameter):
        make_geodesic(0x1 << 5, p, BH)


@pytest.mark.parametrize("cls", [SchwarzschildGeodesic, NewtonGeodesic])
@pytest.mark.parametrize("r", [1e-160, 1e-200])
def test_vanishing_radius_is_a_domain_error(cls, r):
    g = cls(particle(), BH)
    for query in (g.radial_velocity, g.angular_velocity, g.effective_radial_force, g.effective_potential):
        with pytest.raises(InvalidParameter):
            query(r)


@pytest.mark.parametrize("cls", [SchwarzschildGeodesic, NewtonGeodesic])
def test_small_radius_stays_finite(cls):
    g = cls(particle(), BH)
    assert math.isfinite(g.radial_velocity(1e-3))
    assert math.isfinite(g.effective_radial_force(1e-3))
    assert math.isfinite(g.angular_velocity(1e-3))
