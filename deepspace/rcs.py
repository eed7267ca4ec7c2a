"""Reaction control thrusters."""

from __future__ import annotations

from deepspace.body import PhysicsBody
from deepspace.linalg import Vec3d

_DAMPING = 0.98


class RCS:
    """Attitude and translation thrusters of a fixed power."""

    def __init__(self, power: float):
        self.power = power
        self.enabled = False

    def apply_rotation(self, body: PhysicsBody, input_value: float, dt: float) -> None:
        """Apply a z-axis torque proportional to ``input_value``."""
        if not self.enabled or abs(input_value) < 0.01 or dt <= 0.0:
            return
        body.add_torque(input_value * self.power)

    def apply_translation(self, body: PhysicsBody, local_dir: Vec3d, dt: float) -> None:
        """Push along the body's nose (y) and right (x) axes by the sign of ``local_dir``."""
        if not self.enabled or local_dir.length() < 0.01 or dt <= 0.0:
            return

        forward = body.orientation_vector()
        right = Vec3d(-forward.y, forward.x, 0.0)
        force = Vec3d()
        if local_dir.y > 0:
            force = force + forward * self.power
        if local_dir.y < 0:
            force = force - forward * self.power
        if local_dir.x > 0:
            force = force + right * self.power
        if local_dir.x < 0:
            force = force - right * self.power
        body.add_force(force)

    def stabilize(self, body: PhysicsBody, dt: float) -> None:
        """Damp the body's spin about the z axis."""
        if not self.enabled or dt <= 0.0:
            return
        body.angular_velocity_z = body.angular_velocity_z * _DAMPING