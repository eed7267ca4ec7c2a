"""Built-in mission profiles for an SLS/Orion flight."""

from __future__ import annotations

from deepspace.mission_data import (
    Command,
    CommandType,
    MissionEvent,
    TriggerCondition,
    TriggerType,
)
from deepspace.mission_script import MissionScript, TargetOrbit


def _event(name, description, triggers, command):
    return MissionEvent(name=name, description=description,
                        triggers=list(triggers), commands=[command])


def _log(message):
    return Command(CommandType.LOG_MESSAGE, message=message)


def create_default_mission() -> MissionScript:
    """The automated launch-to-orbit profile."""
    return MissionScript(
        name="Artemis II Automated",
        description="Fully automated Artemis II mission profile",
        target_orbit=TargetOrbit(apoapsis_km=185.0, periapsis_km=180.0, inclination_deg=28.5),
        max_duration_s=7200.0,
        auto_mode=True,
        events=[
            _event("launch", "Main core engine ignition and liftoff",
                   [TriggerCondition(TriggerType.TIME_ELAPSED, 0.0)],
                   _log("T-0: Main engines at full thrust")),
            _event("maxq_throttle", "Reduce throttle at max-Q",
                   [TriggerCondition(TriggerType.ALTITUDE_ABOVE, 9500.0),
                    TriggerCondition(TriggerType.MAXQ_PASSED, 1000.0)],
                   Command(CommandType.SET_THROTTLE, stage=2, value=0.72)),
            _event("booster_separation", "Log booster separation event",
                   [TriggerCondition(TriggerType.STAGE_ACTIVATED, 1)],
                   _log("Booster separation confirmed - ICPS active")),
            _event("icps_ignition", "ICPS upper stage ignition",
                   [TriggerCondition(TriggerType.STAGE_ACTIVATED, 2)],
                   _log("Orion propulsion takeover - TLI prep")),
            _event("orbit_insertion", "Confirm orbit insertion",
                   [TriggerCondition(TriggerType.ALTITUDE_ABOVE, 100000.0)],
                   _log("Orbit insertion complete - stable orbit achieved")),
            _event("orbit_insertion", "Confirm orbit insertion",
                   [TriggerCondition(TriggerType.APOAPSIS_ABOVE, 180000.0)],
                   _log("Target orbit achieved - stable orbit confirmed")),
        ],
    )


def create_damage_scenario() -> MissionScript:
    """The default profile with two damage events added."""
    script = create_default_mission()
    script.name = "Artemis II Damage Scenario"
    script.description = "Automated mission with random damage events"
    script.events.append(_event(
        "micrometeorite_impact", "Micrometeorite impacts TPS",
        [TriggerCondition(TriggerType.TIME_ELAPSED, 30.0)],
        Command(CommandType.TRIGGER_DAMAGE, message="Micrometeorite impact at T+30s - TPS damaged"),
    ))
    script.events.append(_event(
        "structural_stress", "Max-Q structural stress event",
        [TriggerCondition(TriggerType.MAXQ_PASSED, 30000.0)],
        Command(CommandType.TRIGGER_DAMAGE, message="Severe structural stress - hull integrity reduced"),
    ))
    return script