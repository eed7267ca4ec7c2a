"""Vessel parts: engines, fuel tanks and decouplers."""

from __future__ import annotations

import enum

from deepspace.linalg import G0

SEA_LEVEL_PRESSURE = 101325.0


class PropellantType(enum.Enum):
    NONE = "none"
    RP1 = "rp1"
    LH2 = "lh2"
    LOX = "lox"
    MMH = "mmh"
    NTO = "nto"
    SOLID = "solid"


class Part:
    """A part with a dry mass that can be staged, activated and decoupled."""

    def __init__(self, name: str, dry_mass: float):
        self.name = name
        self.dry_mass = dry_mass
        self.active = False
        self.stage = -1
        self.decoupled = False
        self.persistent = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, stage={self.stage})"

    def update(self, dt: float) -> None:
        """Advance the part's own state; plain parts have none."""

    def mass(self) -> float:
        return 0.0 if self.decoupled else self.dry_mass

    def thrust(self, ambient_pressure: float) -> float:
        return 0.0

    def is_active(self) -> bool:
        return self.active and not self.decoupled


class DecouplerPart(Part):
    """A part whose activation separates the stages above it."""

    def activate(self) -> None:
        self.active = True


class EnginePart(Part):
    """A throttleable engine with pressure-dependent specific impulse."""

    def __init__(
        self,
        name: str,
        mass: float,
        max_thrust_sl: float,
        isp_sl: float,
        isp_vac: float,
        fuel_type: PropellantType,
        oxidizer_type: PropellantType,
        mixture_ratio: float,
    ):
        super().__init__(name, mass)
        self.max_thrust_sl = max_thrust_sl
        self.isp_sl = isp_sl
        self.isp_vac = isp_vac
        self.fuel_type = fuel_type
        self.oxidizer_type = oxidizer_type
        self.mixture_ratio = max(0.0, mixture_ratio)
        self._throttle = 0.0

    @property
    def throttle(self) -> float:
        return self._throttle

    def set_throttle(self, throttle: float) -> None:
        """Set the throttle, clamped to [0, 1]."""
        self._throttle = max(0.0, min(1.0, throttle))

    def _monopropellant(self) -> bool:
        return self.oxidizer_type is PropellantType.NONE or self.mixture_ratio <= 0.0

    def fuel_mass_fraction(self) -> float:
        if self._monopropellant():
            return 1.0
        return 1.0 / (1.0 + self.mixture_ratio)

    def oxidizer_mass_fraction(self) -> float:
        if self._monopropellant():
            return 0.0
        return self.mixture_ratio / (1.0 + self.mixture_ratio)

    def current_isp(self, ambient_pressure: float) -> float:
        t = max(0.0, min(1.0, ambient_pressure / SEA_LEVEL_PRESSURE))
        return self.isp_vac - (self.isp_vac - self.isp_sl) * t

    def max_mass_flow_rate(self) -> float:
        return self.max_thrust_sl / (self.isp_sl * G0)

    def thrust(self, ambient_pressure: float) -> float:
        if not self.active or self._throttle <= 0.0:
            return 0.0
        return self.max_mass_flow_rate() * G0 * self.current_isp(ambient_pressure) * self._throttle

    def current_mass_flow_rate(self) -> float:
        if not self.active or self._throttle <= 0.0:
            return 0.0
        return self.max_mass_flow_rate() * self._throttle


class FuelTankPart(Part):
    """A tank holding a single propellant."""

    def __init__(self, name: str, dry_mass: float, fuel_capacity: float,
                 propellant_type: PropellantType):
        super().__init__(name, dry_mass)
        self.fuel_capacity = fuel_capacity
        self.current_fuel = fuel_capacity
        self.propellant_type = propellant_type

    def mass(self) -> float:
        return 0.0 if self.decoupled else self.dry_mass + self.current_fuel

    def consume_fuel(self, amount: float) -> bool:
        """Draw ``amount`` of propellant; False when the tank cannot supply it all."""
        if self.decoupled or amount <= 0.0:
            return False
        if self.current_fuel >= amount:
            self.current_fuel -= amount
            return True
        self.current_fuel = 0.0
        return False