import math

import pytest

from deepspace.body import PhysicsBody
from deepspace.linalg import Vec3d


def test_defaults():
    body = PhysicsBody()
    assert body.mass == 1000.0
    assert body.inertia == 1000.0
    assert tuple(body.orientation_vector()) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_force_changes_velocity_and_position():
    body = PhysicsBody(mass=500.0)
    body.add_force(Vec3d(1000.0, -250.0, 50.0))
    body.update(0.5)
    assert tuple(body.velocity) == pytest.approx((1.0, -0.25, 0.05), abs=1e-12)
    assert tuple(body.position) == pytest.approx((0.5, -0.125, 0.025), abs=1e-12)


def test_forces_accumulate_until_update():
    body = PhysicsBody()
    body.add_force(Vec3d(10.0, 0.0, 0.0))
    body.add_force(Vec3d(5.0, 2.0, 0.0))
    body.update(1.0)
    assert tuple(body.velocity) == pytest.approx((0.015, 0.002, 0.0), abs=1e-12)


def test_update_clears_accumulators():
    body = PhysicsBody()
    body.add_force(Vec3d(100.0, 0.0, 0.0))
    body.add_torque(5.0)
    body.update(1.0)
    assert body.accumulated_force == Vec3d()
    assert body.accumulated_torque == Vec3d()
    velocity = body.velocity
    body.update(1.0)
    assert tuple(body.velocity) == pytest.approx(tuple(velocity), abs=1e-12)


@pytest.mark.parametrize("mass,dt", [(0.0, 1.0), (-5.0, 1.0), (100.0, 0.0), (100.0, -1.0)])
def test_update_skipped_for_bad_mass_or_step(mass, dt):
    body = PhysicsBody(mass=mass)
    body.add_force(Vec3d(10.0, 0.0, 0.0))
    body.update(dt)
    assert body.velocity == Vec3d()
    assert body.accumulated_force == Vec3d(10.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "direction,expected",
    [
        (Vec3d(1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
        (Vec3d(0.0, -1.0, 0.0), (0.0, -1.0, 0.0)),
        (Vec3d(-0.6, 0.8, 0.0), (-0.6, 0.8, 0.0)),
    ],
)
def test_set_orientation_round_trip(direction, expected):
    body = PhysicsBody()
    body.set_orientation(direction)
    assert tuple(body.orientation_vector()) == pytest.approx(expected, abs=1e-9)


def test_z_torque_spins_about_z_only():
    body = PhysicsBody()
    body.add_torque(200.0)
    body.update(0.1)
    assert body.angular_velocity.x == 0.0
    assert body.angular_velocity.y == 0.0
    assert body.angular_velocity_z > 0.0
    assert body.orientation.magnitude() == pytest.approx(1.0)
    assert body.orientation_vector().length() == pytest.approx(1.0)


def test_torque_3d_accumulates():
    body = PhysicsBody()
    body.add_torque_3d(Vec3d(1.0, 2.0, 3.0))
    body.add_torque(4.0)
    assert tuple(body.accumulated_torque) == pytest.approx((1.0, 2.0, 7.0), abs=1e-12)


def test_spin_rotates_orientation_in_plane():
    body = PhysicsBody()
    body.angular_velocity_z = math.pi / 2
    body.update(1.0)
    nose = body.orientation_vector()
    assert nose.z == pytest.approx(0.0, abs=1e-12)
    assert nose.length() == pytest.approx(1.0)
    assert nose.dot(Vec3d(0.0, 1.0, 0.0)) == pytest.approx(0.0, abs=1e-9)


def test_angular_velocity_z_setter():
    body = PhysicsBody(angular_velocity=Vec3d(1.0, 1.0, 1.0))
    body.angular_velocity_z = 2.5
    assert body.angular_velocity == Vec3d(0.0, 0.0, 2.5)