import math

import pytest

from deepspace.linalg import Vec3d
from deepspace.rotation import (
    EMERGENCY_OMEGA,
    EMERGENCY_RPM,
    NORMAL_OMEGA,
    NORMAL_RPM,
    RotatingFrame,
    centripetal_acceleration,
    coriolis_acceleration,
    coriolis_deflection,
    coriolis_force,
    gravity_at_radius,
    gravity_at_radius_rpm,
    rad_s_to_rpm,
    radius_from_gravity,
    rpm_from_gravity_and_radius,
    rpm_to_rad_s,
)

OMEGA = Vec3d(0.1, -0.3, 0.6)
VELOCITY = Vec3d(2.0, 1.0, -0.5)


def test_coriolis_acceleration_pinned():
    assert coriolis_acceleration(Vec3d(0, 0, 1), Vec3d(1, 0, 0)) == Vec3d(0.0, -2.0, 0.0)


def test_coriolis_acceleration_is_perpendicular():
    a = coriolis_acceleration(OMEGA, VELOCITY)
    assert a.dot(OMEGA) == pytest.approx(0.0, abs=1e-12)
    assert a.dot(VELOCITY) == pytest.approx(0.0, abs=1e-12)


def test_coriolis_force_scales_with_mass():
    omega = Vec3d(0.0, 0.0, 1.0)
    velocity = Vec3d(1.0, 0.0, 0.0)
    assert tuple(coriolis_force(omega, velocity, 3.0)) == pytest.approx((0.0, -6.0, 0.0), abs=1e-12)
    assert tuple(coriolis_force(omega, velocity)) == pytest.approx((0.0, -2.0, 0.0), abs=1e-12)


def test_coriolis_deflection_grows_quadratically():
    one = coriolis_deflection(OMEGA, VELOCITY, 1.0)
    two = coriolis_deflection(OMEGA, VELOCITY, 2.0)
    assert two.length() == pytest.approx(4.0 * one.length())
    assert one.dot(coriolis_acceleration(OMEGA, VELOCITY)) > 0.0


def test_rpm_conversion_round_trip():
    assert rad_s_to_rpm(rpm_to_rad_s(12.5)) == pytest.approx(12.5)
    assert rpm_to_rad_s(60.0) == pytest.approx(2.0 * math.pi)


def test_named_omegas_match_named_rpms():
    assert rpm_to_rad_s(NORMAL_RPM) == pytest.approx(NORMAL_OMEGA, rel=0.01)
    assert rpm_to_rad_s(EMERGENCY_RPM) == pytest.approx(EMERGENCY_OMEGA, rel=0.01)


def test_gravity_at_radius_rpm_matches_omega_form():
    assert gravity_at_radius_rpm(40.0, NORMAL_RPM) == pytest.approx(
        gravity_at_radius(40.0, rpm_to_rad_s(NORMAL_RPM))
    )


def test_radius_from_gravity_round_trip():
    r = radius_from_gravity(9.80665, NORMAL_OMEGA)
    assert gravity_at_radius(r, NORMAL_OMEGA) == pytest.approx(9.80665)


@pytest.mark.parametrize("omega", [0.0, -1.0])
def test_radius_from_gravity_needs_positive_omega(omega):
    assert radius_from_gravity(9.80665, omega) == 0.0


def test_rpm_from_gravity_round_trip():
    rpm = rpm_from_gravity_and_radius(9.80665, 40.0)
    assert gravity_at_radius_rpm(40.0, rpm) == pytest.approx(9.80665)


@pytest.mark.parametrize("radius", [0.0, -10.0])
def test_rpm_from_gravity_needs_positive_radius(radius):
    assert rpm_from_gravity_and_radius(9.80665, radius) == 0.0


def test_centripetal_points_to_axis():
    omega = Vec3d(0.0, 0.0, NORMAL_OMEGA)
    r = Vec3d(40.0, 0.0, 0.0)
    a = centripetal_acceleration(r, omega)
    assert a.dot(r) < 0.0
    assert a.length() == pytest.approx(gravity_at_radius(40.0, NORMAL_OMEGA))


def test_frame_rpm_round_trip():
    frame = RotatingFrame()
    frame.set_angular_velocity_rpm(NORMAL_RPM)
    assert frame.angular_velocity_rpm() == pytest.approx(NORMAL_RPM)
    assert frame.angular_velocity.x == 0.0 and frame.angular_velocity.y == 0.0


def test_position_round_trip():
    frame = RotatingFrame(origin=Vec3d(100.0, -50.0, 20.0), angular_velocity=OMEGA)
    p = Vec3d(130.0, -10.0, 5.0)
    back = frame.to_inertial(frame.to_rotating(p, 7.3), 7.3)
    assert tuple(back) == pytest.approx((130.0, -10.0, 5.0), abs=1e-9)


def test_velocity_round_trip():
    frame = RotatingFrame(origin=Vec3d(5.0, 5.0, 0.0), angular_velocity=OMEGA)
    p = Vec3d(30.0, -4.0, 2.0)
    v = Vec3d(1.0, 0.5, -0.25)
    t = 3.1
    rv = frame.velocity_to_rotating(v, p, t)
    rp = frame.to_rotating(p, t)
    back = frame.velocity_to_inertial(rv, rp, t)
    assert tuple(back) == pytest.approx((1.0, 0.5, -0.25), abs=1e-9)


def test_at_time_zero_frame_only_translates():
    frame = RotatingFrame(origin=Vec3d(1.0, 2.0, 3.0), angular_velocity=OMEGA)
    local = frame.to_rotating(Vec3d(4.0, 6.0, 8.0), 0.0)
    assert tuple(local) == pytest.approx((3.0, 4.0, 5.0), abs=1e-9)


def test_still_frame_only_translates():
    frame = RotatingFrame(origin=Vec3d(1.0, 2.0, 3.0))
    local = frame.to_rotating(Vec3d(-4.0, 6.0, 0.5), 5.0)
    assert tuple(local) == pytest.approx((-5.0, 4.0, -2.5), abs=1e-9)


def test_fixed_point_keeps_distance_from_origin():
    frame = RotatingFrame(origin=Vec3d(10.0, 0.0, 0.0))
    frame.set_angular_velocity_rpm(NORMAL_RPM)
    local = Vec3d(40.0, 0.0, 0.0)
    for t in (0.0, 1.0, 4.5, 10.0):
        assert (frame.to_inertial(local, t) - frame.origin).length() == pytest.approx(40.0)


def test_point_at_rest_in_rotating_frame_moves_inertially():
    frame = RotatingFrame()
    frame.set_angular_velocity_rpm(NORMAL_RPM)
    local = Vec3d(40.0, 0.0, 0.0)
    v = frame.velocity_to_inertial(Vec3d(), local, 2.0)
    assert v.length() == pytest.approx(rpm_to_rad_s(NORMAL_RPM) * 40.0)


def test_frame_artificial_gravity_magnitude():
    frame = RotatingFrame()
    frame.set_angular_velocity_rpm(NORMAL_RPM)
    g = frame.artificial_gravity(Vec3d(0.0, 40.0, 0.0))
    assert g.length() == pytest.approx(gravity_at_radius_rpm(40.0, NORMAL_RPM))
    assert g.y < 0.0