"""Mission phases, triggers, commands, telemetry and summary records."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from deepspace.linalg import Vec3d


class MissionPhase(enum.Enum):
    """Phase of flight; the value is the phase's display name."""

    PRE_LAUNCH = "PRE_LAUNCH"
    LAUNCH = "LAUNCH"
    ASCENT = "ASCENT"
    MAX_Q = "MAX_Q"
    STAGING = "STAGING"
    COAST = "COAST"
    CIRCULARIZATION = "CIRCULARIZATION"
    ORBIT = "ORBIT"
    TEI = "TEI"
    TRANSLUNAR = "TRANSLUNAR"
    MISSION_EVENTS = "MISSION_EVENTS"
    REENTRY = "REENTRY"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ABORT = "ABORT"

    def __str__(self) -> str:
        return self.value


class MissionOutcome(enum.Enum):
    """How a mission ended, or that it is still running."""

    IN_PROGRESS = "IN_PROGRESS"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ABORT = "ABORT"
    TIMEOUT = "TIMEOUT"

    def __str__(self) -> str:
        return self.value


class TriggerType(enum.Enum):
    TIME_ELAPSED = "time_elapsed"
    ALTITUDE_ABOVE = "altitude_above"
    ALTITUDE_BELOW = "altitude_below"
    VELOCITY_ABOVE = "velocity_above"
    VELOCITY_BELOW = "velocity_below"
    PROPELLANT_DEPLETED = "propellant_depleted"
    MAXQ_PASSED = "maxq_passed"
    APOAPSIS_ABOVE = "apoapsis_above"
    PERIAPSIS_ABOVE = "periapsis_above"
    APOAPSIS_BELOW = "apoapsis_below"
    PERIAPSIS_BELOW = "periapsis_below"
    ORBIT_CIRCULARIZED = "orbit_circularized"
    DAMAGE_EXCEEDED = "damage_exceeded"
    STAGE_ACTIVATED = "stage_activated"
    ENGINE_CUTOFF = "engine_cutoff"
    MACH_ABOVE = "mach_above"
    MACH_BELOW = "mach_below"


class CommandType(enum.Enum):
    STAGE_SEPARATION = "stage_separation"
    SET_THROTTLE = "set_throttle"
    SET_ORIENTATION = "set_orientation"
    ENABLE_RCS = "enable_rcs"
    LOG_MESSAGE = "log_message"
    CIRCULARIZATION_BURN = "circularization_burn"
    ABORT_MISSION = "abort_mission"
    TRIGGER_DAMAGE = "trigger_damage"
    WAIT = "wait"


@dataclass
class TriggerCondition:
    """One condition that must hold for an event to fire."""

    type: TriggerType
    value: float = 0.0
    stage: int = -1
    once: bool = False
    triggered: bool = False


@dataclass
class Command:
    """An action carried out when an event fires."""

    type: CommandType
    stage: int = -1
    value: float = 0.0
    message: str = ""
    orientation: str = ""


@dataclass
class MissionEvent:
    """A named event with the conditions that fire it and the commands it runs."""

    time: float = 0.0
    name: str = ""
    description: str = ""
    phase: MissionPhase = MissionPhase.PRE_LAUNCH
    triggered: bool = False
    triggers: list[TriggerCondition] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)


@dataclass
class OrbitalState:
    """Orbit shape; altitudes in metres above the surface."""

    apoapsis_m: float = 0.0
    periapsis_m: float = 0.0
    inclination_deg: float = 0.0
    period_s: float = 0.0
    is_bound: bool = False


@dataclass
class TelemetryData:
    """One snapshot of the vehicle's state during a mission."""

    mission_time: float = 0.0
    timestamp: float = 0.0

    phase: MissionPhase = MissionPhase.PRE_LAUNCH

    altitude_m: float = 0.0
    velocity_mps: float = 0.0
    mach: float = 0.0
    dynamic_pressure_pa: float = 0.0
    ambient_pressure_pa: float = 0.0

    position: Vec3d = Vec3d()
    velocity: Vec3d = Vec3d()
    acceleration: Vec3d = Vec3d()

    total_mass_kg: float = 0.0
    thrust_n: float = 0.0
    throttle_pct: float = 0.0
    mass_flow_kg_s: float = 0.0
    fuel_flow_kg_s: float = 0.0
    oxidizer_flow_kg_s: float = 0.0

    s1_lh2_kg: float = 0.0
    s1_lox_kg: float = 0.0
    s0_mmh_kg: float = 0.0
    s0_nto_kg: float = 0.0

    max_q_pa: float = 0.0
    max_q_altitude_m: float = 0.0
    max_q_time_s: float = 0.0

    damage_total: float = 0.0
    damage_tps: float = 0.0
    damage_structural: float = 0.0
    damage_propulsion: float = 0.0
    damage_life_support: float = 0.0
    survival_probability: float = 1.0
    vessel_health: float = 1.0

    orbit: OrbitalState = field(default_factory=OrbitalState)

    active_engines: int = 0
    current_stage: int = 0

    recent_events: list[MissionEvent] = field(default_factory=list)


@dataclass
class MissionSummary:
    """What happened over a whole mission."""

    mission_name: str = ""
    start_time: str = ""
    end_time: str = ""
    duration_s: float = 0.0
    outcome: MissionOutcome = MissionOutcome.IN_PROGRESS

    max_q_pa: float = 0.0
    max_q_altitude_m: float = 0.0
    max_q_time_s: float = 0.0

    final_orbit: OrbitalState = field(default_factory=OrbitalState)
    target_orbit: OrbitalState = field(default_factory=OrbitalState)

    staging_events: list[MissionEvent] = field(default_factory=list)
    all_events: list[MissionEvent] = field(default_factory=list)

    peak_acceleration_g: float = 0.0
    peak_heat_flux_w_m2: float = 0.0
    total_heat_load_j: float = 0.0