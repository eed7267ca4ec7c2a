import math

import pytest

from deepspace.linalg import Mat3x3, Quaternion, Vec3d

SAMPLE = Mat3x3((2.0, 1.0, 0.5, -1.0, 3.0, 0.25, 0.0, 1.5, 4.0))
IDENTITY_ELEMENTS = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


def test_length_squared_matches_length():
    v = Vec3d(1.5, -2.0, 3.25)
    assert v.length() ** 2 == pytest.approx(v.length_squared())


def test_length_pinned():
    assert Vec3d(3.0, 4.0, 12.0).length() == pytest.approx(13.0)


def test_normalized_has_unit_length():
    v = Vec3d(3.0, -7.0, 0.5)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_normalized_zero_stays_zero():
    assert Vec3d().normalized() == Vec3d()


def test_cross_of_axes():
    assert Vec3d(1, 0, 0).cross(Vec3d(0, 1, 0)) == Vec3d(0, 0, 1)


def test_cross_is_perpendicular_and_anticommutative():
    a = Vec3d(1.0, 2.0, -0.5)
    b = Vec3d(-3.0, 0.25, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)
    assert tuple(b.cross(a)) == pytest.approx(tuple(-c), abs=1e-9)


def test_vector_arithmetic_round_trip():
    a = Vec3d(1.0, -2.0, 3.0)
    b = Vec3d(0.5, 4.0, -1.0)
    assert tuple((a + b) - b) == pytest.approx((1.0, -2.0, 3.0), abs=1e-9)
    assert tuple((a * 4.0) / 4.0) == pytest.approx((1.0, -2.0, 3.0), abs=1e-9)
    assert 2.0 * a == a * 2.0


def test_identity_leaves_vector_unchanged():
    v = Vec3d(4.0, -5.0, 6.0)
    assert Mat3x3.identity() @ v == v


def test_transpose_twice_is_original():
    assert SAMPLE.transpose().transpose() == SAMPLE


def test_inverse_times_matrix_is_identity():
    assert tuple((SAMPLE @ SAMPLE.inverse()).m) == pytest.approx(IDENTITY_ELEMENTS, abs=1e-9)
    assert tuple((SAMPLE.inverse() @ SAMPLE).m) == pytest.approx(IDENTITY_ELEMENTS, abs=1e-9)


def test_singular_inverse_is_identity():
    singular = Mat3x3((1.0, 2.0, 3.0, 2.0, 4.0, 6.0, 0.0, 1.0, 1.0))
    assert singular.inverse() == Mat3x3.identity()


def test_determinant_is_multiplicative():
    other = Mat3x3.from_diagonal(1.5, -2.0, 0.5) @ Mat3x3.rotation(Vec3d(1, 1, 0), 0.7)
    product = SAMPLE @ other
    assert product.determinant() == pytest.approx(SAMPLE.determinant() * other.determinant())


def test_scalar_multiply_commutes_with_transpose():
    assert tuple((SAMPLE * 3.0).transpose().m) == pytest.approx(
        tuple((SAMPLE.transpose() * 3.0).m), abs=1e-9
    )
    assert 3.0 * SAMPLE == SAMPLE * 3.0


def test_rotation_is_orthonormal():
    r = Mat3x3.rotation(Vec3d(0.3, -1.0, 2.0), 1.1)
    assert r.determinant() == pytest.approx(1.0)
    assert tuple((r @ r.transpose()).m) == pytest.approx(IDENTITY_ELEMENTS, abs=1e-9)


def test_matrix_needs_nine_elements():
    with pytest.raises(ValueError):
        Mat3x3((1.0, 2.0, 3.0))


@pytest.mark.parametrize(
    "axis,angle",
    [(Vec3d(0, 0, 1), 0.5), (Vec3d(1, 2, 3), -1.2), (Vec3d(-1, 0.5, 0), 2.9)],
)
def test_quaternion_and_matrix_rotations_agree(axis, angle):
    v = Vec3d(0.7, -1.3, 2.2)
    rotated = Quaternion.from_axis_angle(axis, angle).rotate(v)
    expected = Mat3x3.rotation(axis, angle) @ v
    assert tuple(rotated) == pytest.approx(tuple(expected), abs=1e-9)


def test_quarter_turn_about_z_pinned():
    rotated = Quaternion.from_axis_angle(Vec3d(0, 0, 1), math.pi / 2).rotate(Vec3d(1, 0, 0))
    assert tuple(rotated) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_rotation_preserves_length():
    q = Quaternion.from_axis_angle(Vec3d(1, -1, 0.5), 0.9)
    v = Vec3d(3.0, 4.0, -12.0)
    assert q.rotate(v).length() == pytest.approx(v.length())
    assert q.magnitude() == pytest.approx(1.0)


def test_quaternion_times_vector_is_rotate():
    q = Quaternion.from_axis_angle(Vec3d(0, 1, 0), 0.4)
    v = Vec3d(1.0, 2.0, 3.0)
    assert q * v == q.rotate(v)


def test_quaternion_times_conjugate_is_identity():
    q = Quaternion.from_axis_angle(Vec3d(2, 1, -1), 1.7)
    p = q * q.conjugate()
    assert (p.w, p.x, p.y, p.z) == pytest.approx((1.0, 0.0, 0.0, 0.0), abs=1e-9)


def test_quaternion_composition():
    q1 = Quaternion.from_axis_angle(Vec3d(1, 0, 0), 0.3)
    q2 = Quaternion.from_axis_angle(Vec3d(0, 0, 1), -1.1)
    v = Vec3d(0.5, 1.5, -2.0)
    composed = (q1 * q2).rotate(v)
    stepwise = q1.rotate(q2.rotate(v))
    assert tuple(composed) == pytest.approx(tuple(stepwise), abs=1e-9)


def test_normalized_zero_quaternion_is_identity():
    assert Quaternion(0.0, 0.0, 0.0, 0.0).normalized() == Quaternion.identity()


def test_normalized_quaternion_has_unit_magnitude():
    assert Quaternion(2.0, -1.0, 0.5, 3.0).normalized().magnitude() == pytest.approx(1.0)


@pytest.mark.parametrize(
    "pitch,yaw,roll",
    [(0.1, 0.2, 0.3), (-0.5, 1.2, -2.0), (0.0, -3.0, 0.7)],
)
def test_euler_round_trip(pitch, yaw, roll):
    angles = Quaternion.from_euler(pitch, yaw, roll).to_euler_angles()
    assert tuple(angles) == pytest.approx((pitch, yaw, roll), abs=1e-9)


def test_euler_pitch_clamps_at_gimbal_lock():
    angles = Quaternion.from_euler(math.pi / 2, 0.0, 0.0).to_euler_angles()
    assert angles.x == pytest.approx(math.pi / 2)