"""Rotating reference frames, Coriolis effects and spin gravity."""

from __future__ import annotations

import math
from dataclasses import dataclass

from deepspace.linalg import Quaternion, Vec3d

NORMAL_RPM = 5.6
EMERGENCY_RPM = 68.0
NORMAL_OMEGA = 0.586
EMERGENCY_OMEGA = 7.11


def coriolis_force(angular_velocity: Vec3d, velocity: Vec3d, mass: float = 1.0) -> Vec3d:
    """Coriolis force on a mass moving with ``velocity`` in the rotating frame."""
    return angular_velocity.cross(velocity) * (-2.0 * mass)


def coriolis_acceleration(angular_velocity: Vec3d, velocity: Vec3d) -> Vec3d:
    return angular_velocity.cross(velocity) * -2.0


def coriolis_deflection(angular_velocity: Vec3d, velocity: Vec3d, dt: float) -> Vec3d:
    """Displacement caused by the Coriolis acceleration over ``dt`` seconds."""
    return coriolis_acceleration(angular_velocity, velocity) * dt * dt * 0.5


def rpm_to_rad_s(rpm: float) -> float:
    return rpm * 2.0 * math.pi / 60.0


def rad_s_to_rpm(rad_s: float) -> float:
    return rad_s * 60.0 / (2.0 * math.pi)


def gravity_at_radius(radius: float, omega: float) -> float:
    return omega * omega * radius


def gravity_at_radius_rpm(radius: float, rpm: float) -> float:
    omega = rpm_to_rad_s(rpm)
    return omega * omega * radius


def centripetal_acceleration(position: Vec3d, angular_velocity: Vec3d) -> Vec3d:
    """The term ``omega x (omega x r)`` for a point relative to the spin axis."""
    return angular_velocity.cross(angular_velocity.cross(position))


def radius_from_gravity(target_gravity: float, omega: float) -> float:
    if omega <= 0.0:
        return 0.0
    return target_gravity / (omega * omega)


def rpm_from_gravity_and_radius(target_gravity: float, radius: float) -> float:
    if radius <= 0.0:
        return 0.0
    return rad_s_to_rpm(math.sqrt(target_gravity / radius))


@dataclass
class RotatingFrame:
    """A frame spinning with ``angular_velocity`` about ``origin``."""

    NORMAL_RPM = NORMAL_RPM
    EMERGENCY_RPM = EMERGENCY_RPM
    NORMAL_OMEGA = NORMAL_OMEGA
    EMERGENCY_OMEGA = EMERGENCY_OMEGA

    origin: Vec3d = Vec3d()
    angular_velocity: Vec3d = Vec3d()
    initial_angle: float = 0.0

    def set_angular_velocity_rpm(self, rpm: float) -> None:
        """Spin about the z axis at ``rpm`` revolutions per minute."""
        self.angular_velocity = Vec3d(0.0, 0.0, rpm_to_rad_s(rpm))

    def angular_velocity_rpm(self) -> float:
        return rad_s_to_rpm(self.angular_velocity.z)

    def _rotation(self, time: float, sign: float) -> Quaternion:
        angle = self.angular_velocity.length() * time + self.initial_angle
        return Quaternion.from_axis_angle(self.angular_velocity.normalized(), sign * angle)

    def to_rotating(self, inertial_pos: Vec3d, time: float) -> Vec3d:
        return self._rotation(time, -1.0).rotate(inertial_pos - self.origin)

    def velocity_to_rotating(self, inertial_vel: Vec3d, inertial_pos: Vec3d, time: float) -> Vec3d:
        rot = self._rotation(time, -1.0)
        rel = inertial_pos - self.origin
        return rot.rotate(inertial_vel) - self.angular_velocity.cross(rot.rotate(rel))

    def to_inertial(self, rotating_pos: Vec3d, time: float) -> Vec3d:
        return self.origin + self._rotation(time, 1.0).rotate(rotating_pos)

    def velocity_to_inertial(self, rotating_vel: Vec3d, rotating_pos: Vec3d, time: float) -> Vec3d:
        rot = self._rotation(time, 1.0)
        return rot.rotate(rotating_vel) + self.angular_velocity.cross(rot.rotate(rotating_pos))

    def artificial_gravity(self, local_pos: Vec3d) -> Vec3d:
        return centripetal_acceleration(local_pos, self.angular_velocity)