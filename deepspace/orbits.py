"""Two-body orbital mechanics around a planet."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from deepspace.linalg import G, Vec3d


class Planet(Protocol):
    """Anything with a mass (kg) and a radius (m)."""

    mass: float
    radius: float


@dataclass(frozen=True)
class OrbitalElements:
    """Classical elements; altitudes are measured above the planet's surface."""

    semi_major_axis: float
    eccentricity: float
    apoapsis: float
    periapsis: float
    inclination: float
    is_bound: bool


@dataclass(frozen=True)
class OrbitPrediction:
    """Highest and lowest altitudes reached during a propagated trajectory."""

    apoapsis: float
    periapsis: float
    samples: int


def _mu(planet: Planet) -> float:
    return G * planet.mass


def calculate_elements(pos: Vec3d, vel: Vec3d, planet: Planet) -> OrbitalElements:
    """Orbital elements for a state vector relative to the planet's centre."""
    mu = _mu(planet)
    r = pos.length()
    if r <= 1.0 or mu <= 0.0:
        return OrbitalElements(0.0, 0.0, 0.0, 0.0, 0.0, False)

    specific_energy = vel.length_squared() * 0.5 - mu / r
    h_vec = pos.cross(vel)
    h = h_vec.length()

    e_vec = vel.cross(h_vec) / mu - pos.normalized()
    e = e_vec.length()

    is_bound = specific_energy < 0.0 and e < 1.0
    inclination = math.acos(max(-1.0, min(1.0, h_vec.z / h))) if h > 1e-9 else 0.0

    if not is_bound:
        peri_r = (h * h) / (mu * (1.0 + e)) if e > 1e-9 else r
        periapsis = max(peri_r - planet.radius, 0.0)
        return OrbitalElements(math.inf, e, math.inf, periapsis, inclination, False)

    a = -mu / (2.0 * specific_energy)
    apoapsis = max(a * (1.0 + e) - planet.radius, 0.0)
    periapsis = max(a * (1.0 - e) - planet.radius, 0.0)
    return OrbitalElements(a, e, apoapsis, periapsis, inclination, True)


def predict_vacuum_extrema(
    start_pos: Vec3d,
    start_vel: Vec3d,
    planet: Planet,
    duration: float,
    dt: float,
) -> OrbitPrediction:
    """Propagate a drag-free trajectory and report its altitude extremes."""
    if duration <= 0.0 or dt <= 0.0:
        return OrbitPrediction(0.0, 0.0, 0)

    mu = _mu(planet)
    pos, vel = start_pos, start_vel
    min_r = max_r = pos.length()
    samples = 0

    for _ in range(max(1, int(duration / dt))):
        r = pos.length()
        if r <= 1.0:
            break
        accel = pos.normalized() * -(mu / (r * r))
        vel = vel + accel * dt
        pos = pos + vel * dt

        new_r = pos.length()
        min_r = min(min_r, new_r)
        max_r = max(max_r, new_r)
        samples += 1

        if new_r <= planet.radius:
            break

    max_alt = max(max_r - planet.radius, 0.0)
    min_alt = max(min_r - planet.radius, 0.0)
    return OrbitPrediction(max_alt, min_alt, samples)


def circular_orbit_velocity(altitude: float, planet: Planet) -> float:
    r = planet.radius + altitude
    if r <= 0.0:
        return 0.0
    return math.sqrt(_mu(planet) / r)


def _periapsis_speed(mu: float, r_p: float, r_a: float) -> float:
    return math.sqrt(mu * (2.0 / r_p - 1.0 / ((r_a + r_p) / 2.0)))


def delta_v_to_raise_apoapsis(
    current_apoapsis: float, target_apoapsis: float, periapsis: float, planet: Planet
) -> float:
    """Periapsis burn needed to lift the apoapsis to ``target_apoapsis``."""
    mu = _mu(planet)
    r_p = planet.radius + periapsis
    r_a = planet.radius + current_apoapsis
    r_a_target = planet.radius + target_apoapsis
    if r_p <= 0.0 or r_a <= 0.0 or r_a_target <= r_a:
        return 0.0
    return _periapsis_speed(mu, r_p, r_a_target) - _periapsis_speed(mu, r_p, r_a)


def time_to_apoapsis(pos: Vec3d, vel: Vec3d, planet: Planet) -> float:
    """Estimated seconds until apoapsis; zero for unbound or degenerate states."""
    mu = _mu(planet)
    r = pos.length()
    if r <= planet.radius:
        return 0.0

    specific_energy = vel.length_squared() * 0.5 - mu / r
    if specific_energy >= 0.0:
        return 0.0

    h = pos.cross(vel).length()
    if h <= 1e-9:
        return 0.0

    a = -mu / (2.0 * specific_energy)
    period = 2.0 * math.pi * math.sqrt(a * a * a / mu)

    r_hat = pos.normalized()
    v_hat = vel.normalized()
    cos_nu = r_hat.dot(v_hat)
    cross = r_hat.cross(v_hat)
    sin_nu = cross.length() * (1.0 if cross.z >= 0 else -1.0)
    nu = math.atan2(sin_nu, cos_nu)
    if nu < 0.0:
        nu += 2.0 * math.pi

    if nu > math.pi:
        return (2.0 * math.pi - nu) / (2.0 * math.pi) * period
    return nu / (2.0 * math.pi) * period


def is_escape_orbit(pos: Vec3d, vel: Vec3d, planet: Planet) -> bool:
    mu = _mu(planet)
    r = pos.length()
    if r <= 1.0 or mu <= 0.0:
        return True
    return vel.length_squared() >= 2.0 * mu / r


def escape_velocity(planet: Planet, altitude: float) -> float:
    r = planet.radius + altitude
    if r <= 0.0:
        return 0.0
    return math.sqrt(2.0 * _mu(planet) / r)


def estimate_circularization_dv(
    current_periapsis: float, target_periapsis: float, planet: Planet
) -> float:
    """Difference between circular speeds at the two altitudes."""
    r1 = planet.radius + current_periapsis
    r2 = planet.radius + target_periapsis
    if r1 <= 0.0 or r2 <= 0.0:
        return 0.0
    mu = _mu(planet)
    return abs(math.sqrt(mu / r2) - math.sqrt(mu / r1))


def estimate_moi_dv(
    current_apoapsis: float, current_periapsis: float, target_apoapsis: float, planet: Planet
) -> float:
    """Magnitude of the periapsis burn that raises the apoapsis to the target."""
    mu = _mu(planet)
    rp = planet.radius + current_periapsis
    ra = planet.radius + current_apoapsis
    ra_target = planet.radius + target_apoapsis
    if rp <= 0.0 or ra <= 0.0 or ra_target <= ra:
        return 0.0
    return abs(_periapsis_speed(mu, rp, ra_target) - _periapsis_speed(mu, rp, ra))