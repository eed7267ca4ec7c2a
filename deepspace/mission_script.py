"""Mission scripts and the system that fires their events."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from deepspace.mission_data import (
    Command,
    MissionEvent,
    MissionPhase,
    TriggerCondition,
    TriggerType,
)


@dataclass
class MissionEventDef:
    """An event definition: conditions and commands under a name."""

    name: str = ""
    description: str = ""
    triggers: list[TriggerCondition] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    triggered: bool = False


@dataclass
class ExitCondition:
    name: str = ""
    type: str = ""
    threshold: float = 0.0
    stage: int = -1
    mandatory: bool = False


@dataclass
class TargetOrbit:
    apoapsis_km: float = 185.0
    periapsis_km: float = 180.0
    inclination_deg: float = 28.5


@dataclass
class MissionScript:
    """A mission: its target orbit, its events and its time limit."""

    name: str = ""
    description: str = ""
    target_orbit: TargetOrbit = field(default_factory=TargetOrbit)

    events: list[MissionEvent] = field(default_factory=list)
    success_conditions: list[ExitCondition] = field(default_factory=list)
    failure_conditions: list[ExitCondition] = field(default_factory=list)
    abort_conditions: list[ExitCondition] = field(default_factory=list)

    max_duration_s: float = 7200.0
    auto_mode: bool = True


_COMPARISONS = {
    TriggerType.TIME_ELAPSED: lambda s, v: s["time"] >= v,
    TriggerType.ALTITUDE_ABOVE: lambda s, v: s["altitude"] > v,
    TriggerType.ALTITUDE_BELOW: lambda s, v: s["altitude"] < v,
    TriggerType.VELOCITY_ABOVE: lambda s, v: s["velocity"] > v,
    TriggerType.VELOCITY_BELOW: lambda s, v: s["velocity"] < v,
    TriggerType.MAXQ_PASSED: lambda s, v: s["max_q"] > v,
    TriggerType.DAMAGE_EXCEEDED: lambda s, v: s["damage"] >= v,
}


class EventTriggerSystem:
    """Fires each scripted event once, when all of its conditions hold.

    Conditions and commands are looked up by event name; when several
    events share a name, the first one's definition is used for all.
    """

    def __init__(self):
        self.script = MissionScript()
        self.events: list[MissionEvent] = []
        self.triggered_events: list[MissionEvent] = []

    def load_script(self, script: MissionScript) -> None:
        """Take a copy of ``script`` and set up one pending event per scripted event."""
        self.script = copy.deepcopy(script)
        self.triggered_events = []
        self.events = [
            MissionEvent(name=event.name, description="", phase=MissionPhase.PRE_LAUNCH, time=0.0)
            for event in self.script.events
        ]

    def reset(self) -> None:
        """Make every event pending again."""
        for event in self.events:
            event.triggered = False
        self.triggered_events = []

    def update(self, vessel: Any, mission_time: float, altitude: float,
               velocity: float, max_q: float, damage: float) -> None:
        self.check_triggers(vessel, mission_time, altitude, velocity, max_q, damage)

    def check_triggers(self, vessel: Any, mission_time: float, altitude: float,
                       velocity: float, max_q: float, damage: float) -> list[Command]:
        """Fire every pending event whose conditions hold; return their commands."""
        commands: list[Command] = []
        for event in self.events:
            if event.triggered:
                continue
            if all(
                self.check_condition(cond, vessel, mission_time, altitude, velocity, max_q, damage)
                for cond in self._definition(event.name, "triggers")
            ):
                event.triggered = True
                event.time = mission_time
                self.triggered_events.append(copy.copy(event))
                commands.extend(copy.copy(cmd) for cmd in self._definition(event.name, "commands"))
        return commands

    def check_condition(self, cond: TriggerCondition, vessel: Any, mission_time: float,
                        altitude: float, velocity: float, max_q: float, damage: float) -> bool:
        """Whether one condition holds; unsupported condition types never do."""
        if cond.once and cond.triggered:
            return False
        compare = _COMPARISONS.get(cond.type)
        if compare is None:
            return False
        state = {
            "time": mission_time,
            "altitude": altitude,
            "velocity": velocity,
            "max_q": max_q,
            "damage": damage,
        }
        return compare(state, cond.value)

    def _definition(self, name: str, attribute: str) -> list:
        for event in self.script.events:
            if event.name == name:
                return getattr(event, attribute)
        return []