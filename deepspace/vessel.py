"""A staged vessel built from parts, with engines, tanks and damage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from deepspace.body import PhysicsBody
from deepspace.linalg import Vec3d
from deepspace.parts import EnginePart, FuelTankPart, Part, PropellantType
from deepspace.rcs import RCS


@dataclass
class EngineStatus:
    """Aggregate engine output for one update step."""

    active_engines: int = 0
    total_thrust: float = 0.0
    max_throttle: float = 0.0
    total_mass_flow: float = 0.0
    total_fuel_flow: float = 0.0
    total_oxidizer_flow: float = 0.0


class Vessel:
    """A vessel whose stages are fired in ascending stage number."""

    def __init__(self, name: str):
        self.name = name
        self.body = PhysicsBody()
        self.rcs = RCS(100.0)
        self.parts: list[Part] = []
        self.current_stage = -1
        self.highest_stage = -1

        self.tps_damage = 0.0
        self.structural_damage = 0.0
        self.propulsion_damage = 0.0
        self.life_support_damage = 0.0
        self.cabin_temperature = 293.15
        self.cabin_pressure = 101.325
        self.oxygen_level = 0.209
        self.co2_level = 0.0

    def __repr__(self) -> str:
        return f"Vessel({self.name!r}, parts={len(self.parts)})"

    @property
    def mass(self) -> float:
        return self.body.mass

    def total_damage(self) -> float:
        """Mean of the four damage levels, each in [0, 1]."""
        return (self.tps_damage + self.structural_damage
                + self.propulsion_damage + self.life_support_damage) / 4.0

    def apply_damage(self, amount: float, location: Vec3d = Vec3d()) -> None:
        """Spread ``amount`` of damage over the subsystems, capped at 1."""
        self.tps_damage = min(1.0, self.tps_damage + amount * 0.3)
        self.structural_damage = min(1.0, self.structural_damage + amount * 0.3)
        self.propulsion_damage = min(1.0, self.propulsion_damage + amount * 0.2)
        self.life_support_damage = min(1.0, self.life_support_damage + amount * 0.2)

    def update_with_damage(self, dt: float, ambient_pressure: float) -> None:
        """Apply the ongoing effects of damage: mass loss and cabin degradation."""
        self.body.mass = self.body.mass - self.structural_damage * 0.5 * dt

        if self.life_support_damage > 0.0:
            self.oxygen_level = max(0.0, self.oxygen_level - self.life_support_damage * 0.001 * dt)
            self.cabin_temperature += self.life_support_damage * 0.5 * dt
            self.cabin_pressure = max(0.0, self.cabin_pressure - self.life_support_damage * 0.01 * dt)

    def add_part(self, part: Part) -> None:
        self.parts.append(part)

    def _stage_parts(self, stage: int) -> Iterator[Part]:
        return (p for p in self.parts if p.stage == stage and not p.decoupled)

    def activate_next_stage(self) -> None:
        """Drop the current stage and ignite the next one."""
        if self.highest_stage < 0:
            self.highest_stage = self.find_highest_stage()
            self.current_stage = -1

        if self.current_stage >= 0:
            for part in list(self._stage_parts(self.current_stage)):
                part.decoupled = True

        self.current_stage += 1
        if self.current_stage <= self.highest_stage:
            for part in self._stage_parts(self.current_stage):
                part.active = True
                if isinstance(part, EnginePart):
                    part.set_throttle(1.0)

    def find_highest_stage(self) -> int:
        return max((p.stage for p in self.parts), default=-1)

    def set_stage_throttle(self, stage: int, throttle: float) -> None:
        """Throttle every active engine of ``stage``."""
        for part in self.parts:
            if part.stage == stage and part.is_active() and isinstance(part, EnginePart):
                part.set_throttle(throttle)

    def _running_engines(self) -> Iterator[EnginePart]:
        return (
            p for p in self.parts
            if p.is_active() and isinstance(p, EnginePart) and p.throttle > 0.0
        )

    def _stage_tanks(self, stage: int) -> Iterator[FuelTankPart]:
        return (p for p in self._stage_parts(stage) if isinstance(p, FuelTankPart))

    def _burn_propellant(self, engine: EnginePart, dt: float) -> None:
        mdot = engine.current_mass_flow_rate()
        fuel = mdot * engine.fuel_mass_fraction() * dt
        oxidizer = mdot * engine.oxidizer_mass_fraction() * dt

        starved = False
        for tank in self._stage_tanks(engine.stage):
            if tank.propellant_type is engine.fuel_type and fuel > 0:
                if not tank.consume_fuel(fuel):
                    starved = True
            if tank.propellant_type is engine.oxidizer_type and oxidizer > 0:
                if not tank.consume_fuel(oxidizer):
                    starved = True
        if starved:
            engine.active = False

    def update(self, dt: float, ambient_pressure: float) -> EngineStatus:
        """Burn propellant, apply thrust and refresh the body's mass."""
        status = EngineStatus()
        if dt <= 0.0:
            return status

        for engine in list(self._running_engines()):
            self._burn_propellant(engine, dt)

        total_mass = sum(p.mass() for p in self.parts if not p.decoupled)

        total_force = Vec3d()
        for engine in self._running_engines():
            thrust = engine.thrust(ambient_pressure)
            total_force = total_force + self.body.orientation_vector() * thrust
            status.total_thrust += thrust
            status.active_engines += 1
            status.max_throttle = max(status.max_throttle, engine.throttle)

            mdot = engine.current_mass_flow_rate()
            status.total_mass_flow += mdot
            status.total_fuel_flow += mdot * engine.fuel_mass_fraction()
            status.total_oxidizer_flow += mdot * engine.oxidizer_mass_fraction()

        self.body.add_force(total_force)
        self.body.mass = total_mass
        return status

    def propellant_remaining(self, stage: int, propellant: PropellantType) -> float:
        """Propellant of one type left in the attached tanks of ``stage``."""
        return sum(
            tank.current_fuel for tank in self._stage_tanks(stage)
            if tank.propellant_type is propellant
        )

    def recalculate_mass(self) -> None:
        self.body.mass = sum(p.mass() for p in self.parts if not p.decoupled)