"""Rigid body with linear and angular motion."""

from __future__ import annotations

import math
from dataclasses import dataclass

from deepspace.linalg import Quaternion, Vec3d

_UP = Vec3d(0.0, 1.0, 0.0)
_Z_AXIS = Vec3d(0.0, 0.0, 1.0)


@dataclass
class PhysicsBody:
    """A rigid body that accumulates forces and torques between updates."""

    position: Vec3d = Vec3d()
    velocity: Vec3d = Vec3d()
    mass: float = 1000.0
    orientation: Quaternion = Quaternion()
    angular_velocity: Vec3d = Vec3d()
    inertia: float = 1000.0
    accumulated_force: Vec3d = Vec3d()
    accumulated_torque: Vec3d = Vec3d()

    def add_force(self, force: Vec3d) -> None:
        self.accumulated_force = self.accumulated_force + force

    def add_torque(self, torque: float) -> None:
        """Add a torque about the z axis."""
        t = self.accumulated_torque
        self.accumulated_torque = Vec3d(t.x, t.y, t.z + torque)

    def add_torque_3d(self, torque: Vec3d) -> None:
        self.accumulated_torque = self.accumulated_torque + torque

    def update(self, dt: float) -> None:
        """Integrate one step and clear the accumulated force and torque."""
        if self.mass <= 0.0 or dt <= 0.0:
            return

        acceleration = self.accumulated_force / self.mass
        self.velocity = self.velocity + acceleration * dt
        self.position = self.position + self.velocity * dt

        self.angular_velocity = (
            self.angular_velocity + self.accumulated_torque * (1.0 / self.inertia) * dt
        )

        angle = self.angular_velocity.length() * dt
        if angle > 1e-10:
            dq = Quaternion.from_axis_angle(self.angular_velocity.normalized(), angle)
            self.orientation = (self.orientation * dq).normalized()

        self.accumulated_force = Vec3d()
        self.accumulated_torque = Vec3d()

    def set_orientation(self, direction: Vec3d) -> None:
        """Point the body's nose along ``direction`` in the x-y plane."""
        angle = -math.atan2(direction.x, direction.y)
        self.orientation = Quaternion.from_axis_angle(_Z_AXIS, angle)

    def orientation_vector(self) -> Vec3d:
        """The direction the body's nose points in."""
        return self.orientation.rotate(_UP)

    @property
    def angular_velocity_z(self) -> float:
        """Angular velocity about the z axis."""
        return self.angular_velocity.z

    @angular_velocity_z.setter
    def angular_velocity_z(self, omega: float) -> None:
        self.angular_velocity = Vec3d(0.0, 0.0, omega)