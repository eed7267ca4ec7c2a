"""Atmospheric drag and lift on a body."""

from __future__ import annotations

import math
from typing import Protocol

from deepspace.body import PhysicsBody
from deepspace.linalg import Vec3d

_BASE_CD = 0.3
_REFERENCE_AREA = 10.7
_ATMOSPHERE_CEILING = 100_000.0


class Atmosphere(Protocol):
    """Anything that gives density and speed of sound by altitude."""

    def density(self, altitude: float) -> float: ...

    def speed_of_sound(self, altitude: float) -> float: ...


def mach_number(speed: float, speed_of_sound: float) -> float:
    if speed_of_sound <= 0.0:
        return 0.0
    return speed / speed_of_sound


def drag_coefficient(mach: float) -> float:
    """Drag coefficient with a transonic bump and supersonic decay."""
    if 0.8 < mach < 1.2:
        t = (mach - 0.8) / 0.4
        return _BASE_CD + 0.5 * math.sin(t * math.pi)
    if mach >= 1.2:
        return _BASE_CD + 0.5 * math.exp(-(mach - 1.2))
    return _BASE_CD


def apply_aerodynamics(
    body: PhysicsBody,
    atmosphere: Atmosphere,
    altitude: float,
    structural_damage: float = 0.0,
    asymmetric_torque: Vec3d = Vec3d(),
) -> None:
    """Add drag, lift and damage-induced torque to ``body``."""
    velocity = body.velocity
    speed = velocity.length()
    if speed < 0.1 or altitude > _ATMOSPHERE_CEILING:
        return

    density = atmosphere.density(altitude)
    if density <= 0.0001:
        return

    mach = mach_number(speed, atmosphere.speed_of_sound(altitude))
    cd = drag_coefficient(mach)

    drag_multiplier = 1.0 + structural_damage * 0.5
    area = _REFERENCE_AREA * (1.0 - structural_damage * 0.3)

    q = 0.5 * density * speed * speed
    drag_mag = q * cd * area * drag_multiplier

    vel_dir = velocity.normalized()
    drag_dir = -vel_dir
    drag_force = drag_dir * drag_mag

    orientation = body.orientation_vector()
    aoa = math.acos(max(-1.0, min(1.0, orientation.dot(vel_dir))))

    cl = aoa * 2.0 * math.pi if aoa < 0.35 else 0.0
    cl *= 1.0 - structural_damage * 0.4

    lift_dir = Vec3d(-drag_dir.y, drag_dir.x, 0.0)
    if orientation.x * velocity.y - orientation.y * velocity.x > 0.0:
        lift_dir = -lift_dir

    lift_force = lift_dir * (q * cl * area * 0.1)
    body.add_force(drag_force + lift_force)

    if asymmetric_torque.length() > 0.01:
        body.add_torque_3d(asymmetric_torque * structural_damage)