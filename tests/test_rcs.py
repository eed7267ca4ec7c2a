import pytest

from deepspace.body import PhysicsBody
from deepspace.linalg import Vec3d
from deepspace.rcs import RCS


def enabled_rcs(power=100.0):
    rcs = RCS(power)
    rcs.enabled = True
    return rcs


def test_disabled_rcs_does_nothing():
    rcs = RCS(100.0)
    body = PhysicsBody()
    rcs.apply_rotation(body, 1.0, 0.1)
    rcs.apply_translation(body, Vec3d(0, 1, 0), 0.1)
    assert body.accumulated_torque == Vec3d()
    assert body.accumulated_force == Vec3d()


def test_rotation_adds_z_torque():
    body = PhysicsBody()
    enabled_rcs().apply_rotation(body, 0.5, 0.1)
    assert body.accumulated_torque == Vec3d(0.0, 0.0, 50.0)


def test_rotation_ignores_small_input_and_zero_dt():
    body = PhysicsBody()
    rcs = enabled_rcs()
    rcs.apply_rotation(body, 0.005, 0.1)
    rcs.apply_rotation(body, 1.0, 0.0)
    assert body.accumulated_torque == Vec3d()


def test_forward_translation_along_nose():
    body = PhysicsBody()
    enabled_rcs().apply_translation(body, Vec3d(0, 1, 0), 0.1)
    assert body.accumulated_force == body.orientation_vector() * 100.0


def test_opposite_translations_cancel():
    body = PhysicsBody()
    rcs = enabled_rcs()
    rcs.apply_translation(body, Vec3d(1, 1, 0), 0.1)
    rcs.apply_translation(body, Vec3d(-1, -1, 0), 0.1)
    assert body.accumulated_force.length() == pytest.approx(0.0)


def test_right_translation_perpendicular_to_nose():
    body = PhysicsBody()
    enabled_rcs().apply_translation(body, Vec3d(1, 0, 0), 0.1)
    force = body.accumulated_force
    assert force.dot(body.orientation_vector()) == pytest.approx(0.0)
    assert force.length() == pytest.approx(100.0)


def test_stabilize_damps_spin():
    body = PhysicsBody()
    body.angular_velocity_z = 2.0
    enabled_rcs().stabilize(body, 0.1)
    assert body.angular_velocity_z == pytest.approx(2.0 * 0.98)


def test_stabilize_disabled_keeps_spin():
    body = PhysicsBody()
    body.angular_velocity_z = 2.0
    RCS(100.0).stabilize(body, 0.1)
    assert body.angular_velocity_z == 2.0