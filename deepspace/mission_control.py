"""Mission control: phase tracking, scripted commands, telemetry and reports."""

from __future__ import annotations

import csv
import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

from deepspace.linalg import Vec3d
from deepspace.mission_data import (
    Command,
    CommandType,
    MissionEvent,
    MissionOutcome,
    MissionPhase,
    MissionSummary,
    TelemetryData,
)
from deepspace.mission_script import EventTriggerSystem, MissionScript
from deepspace.orbits import calculate_elements, circular_orbit_velocity
from deepspace.vessel import EngineStatus, Vessel

logger = logging.getLogger(__name__)

_SPEED_OF_SOUND = 340.0
_LOG_INTERVAL_S = 2.0
_MAX_Q_EVENT_THRESHOLD = 1000.0
_ORBIT_TOLERANCE_M = 10000.0

CSV_HEADER = [
    "time", "phase", "altitude_m", "velocity_mps", "mach", "q_pa", "apoapsis_m",
    "periapsis_m", "mass_kg", "thrust_N", "throttle_pct", "maxQ_pa", "damage_total",
    "damage_tps", "damage_struct", "damage_prop", "damage_life", "survival_pct",
]


class Atmosphere(Protocol):
    def density(self, altitude: float) -> float: ...


class Planet(Protocol):
    """A planet with a mass, a radius and an atmosphere."""

    mass: float
    radius: float
    atmosphere: Atmosphere

    def altitude(self, position: Vec3d) -> float: ...


def _num(value: float) -> str:
    return f"{value:g}"


class MissionControl:
    """Runs a mission script against a vessel flying above a planet."""

    def __init__(self, vessel: Vessel, earth: Planet):
        self.vessel = vessel
        self.earth = earth

        self.script = MissionScript()
        self.trigger_system = EventTriggerSystem()

        self.mission_time = 0.0
        self.current_phase = MissionPhase.PRE_LAUNCH
        self.outcome = MissionOutcome.IN_PROGRESS

        self.max_q = 0.0
        self.max_q_altitude = 0.0
        self.max_q_time = 0.0
        self.max_q_passed = False

        self.telemetry = TelemetryData()
        self.telemetry_log: list[TelemetryData] = []
        self.triggered_events: list[MissionEvent] = []
        self.summary = MissionSummary()
        self.last_engine_status = EngineStatus()
        self.start_time = datetime.now(timezone.utc)

        self._last_log_time = 0.0
        self._last_logged_phase = MissionPhase.PRE_LAUNCH

    def load_mission(self, script: MissionScript) -> None:
        self.script = script
        self.trigger_system.load_script(script)
        self.reset()
        logger.info("Mission loaded: %s", script.name)

    def reset(self) -> None:
        """Restart the mission clock and make every scripted event pending."""
        self.mission_time = 0.0
        self.current_phase = MissionPhase.PRE_LAUNCH
        self.outcome = MissionOutcome.IN_PROGRESS
        self.trigger_system.reset()
        self.summary.mission_name = self.script.name
        self.summary.target_orbit.apoapsis_m = self.script.target_orbit.apoapsis_km * 1000.0
        self.summary.target_orbit.periapsis_m = self.script.target_orbit.periapsis_km * 1000.0
        self.triggered_events = []
        self.start_time = datetime.now(timezone.utc)

    def update(self, dt: float, engine_status: Optional[EngineStatus] = None) -> None:
        """Advance the mission by ``dt``; without an engine status only telemetry is refreshed."""
        if engine_status is None:
            self._update_telemetry()
            return

        if self.outcome is not MissionOutcome.IN_PROGRESS:
            return

        self.mission_time += dt
        self.last_engine_status = engine_status

        self._update_phase()

        commands = self.trigger_system.check_triggers(
            self.vessel,
            self.mission_time,
            self._altitude(),
            self.vessel.body.velocity.length(),
            self.max_q,
            self.vessel.total_damage(),
        )
        self._execute_commands(commands)
        self._update_telemetry()
        self._check_exit_conditions()
        self._log_phase_change()

    def trigger_event(self, name: str, description: str) -> None:
        """Record an event at the current mission time."""
        event = MissionEvent(
            time=self.mission_time,
            name=name,
            description=description,
            phase=self.current_phase,
        )
        self.triggered_events.append(event)
        self.summary.all_events.append(event)
        logger.info("[EVENT] T=%.1fs %s: %s", self.mission_time, name, description)

    def set_phase(self, phase: MissionPhase) -> None:
        if phase is not self.current_phase:
            self.current_phase = phase
            logger.info("[PHASE] T=%.1fs -> %s", self.mission_time, phase)

    def abort_mission(self, reason: str) -> None:
        self.outcome = MissionOutcome.ABORT
        self.trigger_event("ABORT", reason)
        self._finalize_summary()
        logger.warning("[ABORT] Mission aborted: %s", reason)

    def export_csv(self, filename: Union[str, Path]) -> None:
        """Write the logged telemetry as CSV; raises OSError if the file cannot be written."""
        with open(filename, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for row in self.telemetry_log:
                numbers = [
                    row.altitude_m, row.velocity_mps, row.mach, row.dynamic_pressure_pa,
                    row.orbit.apoapsis_m, row.orbit.periapsis_m, row.total_mass_kg,
                    row.thrust_n, row.throttle_pct, row.max_q_pa, row.damage_total,
                    row.damage_tps, row.damage_structural, row.damage_propulsion,
                    row.damage_life_support, row.survival_probability * 100,
                ]
                writer.writerow(
                    [f"{row.mission_time:.2f}", str(row.phase)]
                    + [f"{value:.2f}" for value in numbers]
                )
        logger.info("Telemetry exported to: %s", filename)

    def export_summary(self, filename: Union[str, Path]) -> None:
        """Write the mission summary as JSON; raises OSError if the file cannot be written."""
        s = self.summary
        lines = [
            "{",
            f'  "mission": {json.dumps(s.mission_name)},',
            f'  "duration_s": {_num(s.duration_s)},',
            f'  "outcome": "{self.outcome}",',
            '  "final_orbit": {',
            f'    "apoapsis_km": {_num(s.final_orbit.apoapsis_m / 1000.0)},',
            f'    "periapsis_km": {_num(s.final_orbit.periapsis_m / 1000.0)}',
            "  },",
            '  "target_orbit": {',
            f'    "apoapsis_km": {_num(s.target_orbit.apoapsis_m / 1000.0)},',
            f'    "periapsis_km": {_num(s.target_orbit.periapsis_m / 1000.0)}',
            "  },",
            '  "maxQ": {',
            f'    "value_pa": {_num(s.max_q_pa)},',
            f'    "altitude_m": {_num(s.max_q_altitude_m)},',
            f'    "time_s": {_num(s.max_q_time_s)}',
            "  },",
            '  "events": [',
        ]
        events = [
            f'    {{"time":{_num(e.time)},"name":{json.dumps(e.name)},'
            f'"desc":{json.dumps(e.description)}}}'
            for e in self.triggered_events
        ]
        lines.append(",\n".join(events)) if events else None
        lines += ["  ]", "}"]
        Path(filename).write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info("Summary exported to: %s", filename)

    def _altitude(self) -> float:
        return self.earth.altitude(self.vessel.body.position)

    def _update_phase(self) -> None:
        body = self.vessel.body
        altitude = self.earth.altitude(body.position)
        velocity = body.velocity.length()
        orbital_velocity = circular_orbit_velocity(altitude, self.earth)

        phase = self.current_phase
        if phase is MissionPhase.PRE_LAUNCH and self.mission_time >= 0:
            self.set_phase(MissionPhase.LAUNCH)
        elif phase is MissionPhase.LAUNCH and altitude > 1000:
            self.set_phase(MissionPhase.ASCENT)
        elif phase is MissionPhase.ASCENT and self.max_q_passed:
            self.set_phase(MissionPhase.MAX_Q)
        elif phase is MissionPhase.MAX_Q and velocity > orbital_velocity * 0.95:
            self.set_phase(MissionPhase.ORBIT)

    def _update_telemetry(self) -> None:
        body = self.vessel.body
        pos, vel = body.position, body.velocity
        altitude = self.earth.altitude(pos)
        speed = vel.length()
        density = self.earth.atmosphere.density(altitude)
        status = self.last_engine_status

        data = TelemetryData(
            mission_time=self.mission_time,
            phase=self.current_phase,
            altitude_m=altitude,
            velocity_mps=speed,
            mach=speed / _SPEED_OF_SOUND,
            dynamic_pressure_pa=0.5 * density * speed * speed,
            total_mass_kg=body.mass,
            damage_total=self.vessel.total_damage(),
            thrust_n=status.total_thrust,
            throttle_pct=status.max_throttle * 100.0,
            mass_flow_kg_s=status.total_mass_flow,
            fuel_flow_kg_s=status.total_fuel_flow,
            oxidizer_flow_kg_s=status.total_oxidizer_flow,
        )

        if data.dynamic_pressure_pa > self.max_q:
            self.max_q = data.dynamic_pressure_pa
            self.max_q_altitude = altitude
            self.max_q_time = self.mission_time
            self.summary.max_q_pa = self.max_q
            self.summary.max_q_altitude_m = self.max_q_altitude
            self.summary.max_q_time_s = self.max_q_time

        data.max_q_pa = self.max_q

        if self.max_q > _MAX_Q_EVENT_THRESHOLD and not self.max_q_passed:
            self.max_q_passed = True
            self.trigger_event("MaxQ_Pass", "Dynamic pressure peak passed")

        orbit = calculate_elements(pos, vel, self.earth)
        data.orbit.apoapsis_m = orbit.apoapsis
        data.orbit.periapsis_m = orbit.periapsis
        data.orbit.is_bound = orbit.is_bound

        self.telemetry = data

        if self.mission_time - self._last_log_time >= _LOG_INTERVAL_S:
            self.telemetry_log.append(data)
            self._last_log_time = self.mission_time

    def _execute_commands(self, commands: Iterable[Command]) -> None:
        for cmd in commands:
            if cmd.type is CommandType.STAGE_SEPARATION:
                self.vessel.activate_next_stage()
                self.trigger_event("Stage_Separation", f"Stage {cmd.stage} separated")
                self.summary.staging_events.append(self.triggered_events[-1])
            elif cmd.type is CommandType.SET_THROTTLE:
                self.vessel.set_stage_throttle(cmd.stage, cmd.value)
            elif cmd.type is CommandType.LOG_MESSAGE:
                logger.info("[CMD] %s", cmd.message)
            elif cmd.type is CommandType.ABORT_MISSION:
                self.abort_mission(cmd.message)
            elif cmd.type is CommandType.TRIGGER_DAMAGE:
                self.trigger_event("Damage_Applied", cmd.message)

    def _check_exit_conditions(self) -> None:
        if self.mission_time > self.script.max_duration_s:
            self.outcome = MissionOutcome.TIMEOUT
            self.trigger_event("Timeout", "Mission exceeded maximum duration")
            self._finalize_summary()

        body = self.vessel.body
        if self.earth.altitude(body.position) < 0 and self.mission_time > 10:
            self.outcome = MissionOutcome.FAILURE
            self.trigger_event("Crash", "Vehicle impacted surface")
            self._finalize_summary()

        if self.current_phase is MissionPhase.ORBIT and self.mission_time > 100:
            orbit = calculate_elements(body.position, body.velocity, self.earth)
            if orbit.is_bound:
                target = self.script.target_orbit
                ap_error = abs(orbit.apoapsis - target.apoapsis_km * 1000)
                pe_error = abs(orbit.periapsis - target.periapsis_km * 1000)
                if ap_error < _ORBIT_TOLERANCE_M and pe_error < _ORBIT_TOLERANCE_M:
                    self.outcome = MissionOutcome.SUCCESS
                    self.summary.final_orbit = self.telemetry.orbit
                    self.trigger_event("Mission_Complete", "Target orbit achieved")
                    self._finalize_summary()

    def _finalize_summary(self) -> None:
        self.summary.end_time = str(int(time.time()))
        self.summary.duration_s = self.mission_time
        self.summary.outcome = self.outcome

    def _log_phase_change(self) -> None:
        if self.current_phase is not self._last_logged_phase:
            self._last_logged_phase = self.current_phase
            logger.debug("[PHASE] %s", self.current_phase)