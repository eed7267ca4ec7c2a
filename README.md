# deepspace

A small toolkit for simulating spacecraft and launch vehicles, with no
dependencies beyond the standard library. It provides vector, matrix and
quaternion maths, a rigid-body integrator, rotating reference frames,
two-body orbital mechanics, simple aerodynamics, engines, tanks and
staging, docking ports, INI-style mission configuration files, and a
scripted mission control loop that records telemetry and writes CSV and
JSON reports.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `deepspace.linalg` | `Vec3d`, `Mat3x3`, `Quaternion`; constants `G`, `R0`, `G0` |
| `deepspace.body` | `PhysicsBody`: accumulated forces and torques, integration of position and attitude |
| `deepspace.rotation` | Coriolis and spin-gravity functions, `RotatingFrame` |
| `deepspace.orbits` | `calculate_elements`, `predict_vacuum_extrema`, circular and escape speeds, delta-v estimates, `time_to_apoapsis` |
| `deepspace.aerodynamics` | `mach_number`, `drag_coefficient`, `apply_aerodynamics` |
| `deepspace.parts` | `Part`, `EnginePart`, `FuelTankPart`, `DecouplerPart`, `PropellantType` |
| `deepspace.part_library` | Factory functions for engines (Merlin 1D and 1D Vac, F-1, RL10B-2, RL10C-2, AJ10-190, RS-25, SLS SRB) and tanks (Falcon 9, ICPS, SLS core, Orion) |
| `deepspace.rcs` | `RCS` reaction control thrusters |
| `deepspace.staging` | `StagingSystem`: fires stages from the highest number down, separating stages above a decoupler |
| `deepspace.vessel` | `Vessel` and `EngineStatus`: propellant flow, thrust, mass and a damage model |
| `deepspace.docking` | `DockingPort` and `DockingState` |
| `deepspace.mission_data` | `MissionPhase`, `MissionOutcome`, `TriggerType`, `CommandType` and the event, telemetry and summary records |
| `deepspace.mission_script` | `MissionScript` and `EventTriggerSystem` |
| `deepspace.artemis` | `create_default_mission()` and `create_damage_scenario()` |
| `deepspace.config` | `MissionConfig` with `load(path)` and `loads(text)`, and `ConfigError` |
| `deepspace.mission_control` | `MissionControl`: phases, scripted commands, exit conditions, CSV and JSON export |

## Quick tour

### Vectors, matrices and quaternions

`Vec3d`, `Mat3x3` and `Quaternion` are immutable. `Mat3x3` multiplies a
matrix or a vector with `@`; `Quaternion` composes with `*` and rotates a
vector with `rotate` (or `*`).

```python
import math
from deepspace.linalg import Mat3x3, Quaternion, Vec3d

q = Quaternion.from_axis_angle(Vec3d(0, 0, 1), math.pi / 2)
print(q.rotate(Vec3d(1, 0, 0)))             # approximately Vec3d(0, 1, 0)

m = Mat3x3.rotation(Vec3d(0, 0, 1), math.pi / 2)
print(m @ Vec3d(1, 0, 0))                   # approximately Vec3d(0, 1, 0)
print(m.inverse() @ m)                      # approximately the identity
```

`Mat3x3.inverse` returns the identity for a singular matrix, and
`Quaternion.normalized` returns the identity for a zero quaternion.

### A rigid body

```python
from deepspace.body import PhysicsBody
from deepspace.linalg import Vec3d

body = PhysicsBody(mass=1000.0)
body.add_force(Vec3d(0, 1000, 0))
body.update(1.0)                            # velocity (0, 1, 0), forces cleared
print(body.orientation_vector())            # the nose direction, +y by default
```

### Spin gravity and rotating frames

```python
from deepspace.linalg import Vec3d
from deepspace.rotation import RotatingFrame, gravity_at_radius_rpm, rpm_from_gravity_and_radius

print(gravity_at_radius_rpm(40.0, 5.6))      # m/s^2 at 40 m and 5.6 rpm
print(rpm_from_gravity_and_radius(9.81, 40.0))

frame = RotatingFrame()
frame.set_angular_velocity_rpm(5.6)
print(frame.artificial_gravity(Vec3d(40, 0, 0)).length())
```

### A stage that burns

`Vessel.activate_next_stage` fires stages in ascending stage number,
decoupling the previous stage each time. (`StagingSystem` is the
alternative that fires from the highest stage number down.)

```python
from deepspace.part_library import create_rs25, create_sls_lh2_tank, create_sls_lox_tank
from deepspace.vessel import Vessel

vessel = Vessel("Core")
for part in (create_rs25(), create_sls_lh2_tank(), create_sls_lox_tank()):
    part.stage = 0
    vessel.add_part(part)

vessel.activate_next_stage()
status = vessel.update(0.1, 101325.0)
print(status.total_thrust, status.total_mass_flow)
```

An engine that cannot draw its full share of fuel or oxidizer from the
tanks of its own stage shuts down.

### Mission configuration

`MissionConfig.load(path)` reads a file and `MissionConfig.loads(text)`
reads a string. Lines are `key=value` under `[section]` headers; blank
lines and lines starting with `#` are skipped. The `[mission]`, `[rl10]`,
`[aj10]` and `[guidance]` sections with their numeric keys are required;
`[rs25]`, `[srb]`, `[core_stage]` or `[core_tanks]`,
`[second_stage_tanks]`, `[icps_tanks]`, `[orion_tanks]`, `[merlin]`,
`[merlin_vacuum]`, `[launch]`, `[launch_site]` and `[weather]` are
optional. A missing file, or a required value that is missing or not a
number, raises `ConfigError`.

```python
from deepspace.config import MissionConfig

text = """
[mission]
name=Demo
targetAp_km=185
targetPe_km=180
maxDuration_s=7200

[rl10]
thrust_N=110000
seaLevelIsp_s=200
vacuumIsp_s=465
fuelRatio=0.15
oxRatio=0.85
OF_ratio=5.5

[aj10]
thrust_N=26700
seaLevelIsp_s=319
vacuumIsp_s=319
fuelRatio=0.38
oxRatio=0.62
OF_ratio=1.65

[guidance]
pitchStartAlt_m=2000
pitchEndAlt_m=20000
orbitTolerance_m=10000
"""
config = MissionConfig.loads(text)
print(config.mission_name, config.rl10.thrust_n, config.merlin_vacuum.thrust_n)
```

### Mission control

`MissionControl` ties a `Vessel`, a planet and a `MissionScript`
together. The planet is any object with `mass`, `radius`, an
`altitude(position)` method and an `atmosphere` whose `density(altitude)`
gives air density; `deepspace.aerodynamics` also wants
`speed_of_sound(altitude)` from the atmosphere.

```python
import math
from dataclasses import dataclass, field

from deepspace.artemis import create_default_mission
from deepspace.linalg import Vec3d
from deepspace.mission_control import MissionControl
from deepspace.part_library import create_rs25, create_sls_lh2_tank, create_sls_lox_tank
from deepspace.vessel import Vessel


class SimpleAtmosphere:
    def density(self, altitude):
        return 1.225 * math.exp(-max(altitude, 0.0) / 8500.0)

    def speed_of_sound(self, altitude):
        return 340.0


@dataclass
class Earth:
    mass: float = 5.972e24
    radius: float = 6.371e6
    atmosphere: SimpleAtmosphere = field(default_factory=SimpleAtmosphere)

    def altitude(self, position):
        return position.length() - self.radius


earth = Earth()
vessel = Vessel("SLS")
for part in (create_rs25(), create_sls_lh2_tank(), create_sls_lox_tank()):
    part.stage = 0
    vessel.add_part(part)
vessel.body.position = Vec3d(0.0, earth.radius, 0.0)
vessel.activate_next_stage()

control = MissionControl(vessel, earth)
control.load_mission(create_default_mission())

dt = 0.1
for _ in range(600):
    status = vessel.update(dt, 101325.0)
    vessel.body.update(dt)
    control.update(dt, status)

control.export_csv("telemetry.csv")
control.export_summary("summary.json")
print(control.current_phase, control.outcome)
```

Each `update(dt, engine_status)` advances mission time, moves through the
phases `PRE_LAUNCH`, `LAUNCH`, `ASCENT`, `MAX_Q` and `ORBIT`, fires script
events whose conditions all hold, records telemetry (one log row every two
seconds of mission time) and checks for timeout, a crash below the
surface after ten seconds, and success when a bound orbit lies within
10 km of the target apoapsis and periapsis. Called without an engine
status, `update` only refreshes the current telemetry. Once the outcome is
no longer `IN_PROGRESS`, further updates do nothing.

Scripted commands are carried out as follows: `STAGE_SEPARATION` fires
the vessel's next stage, `SET_THROTTLE` throttles a stage's active
engines, `ABORT_MISSION` aborts, `TRIGGER_DAMAGE` records a
`Damage_Applied` event and `LOG_MESSAGE` logs through the `logging`
module. Other command types are ignored.

`export_csv` and `export_summary` raise `OSError` if the file cannot be
written.

## Limits

- Only the trigger types `TIME_ELAPSED`, `ALTITUDE_ABOVE`,
  `ALTITUDE_BELOW`, `VELOCITY_ABOVE`, `VELOCITY_BELOW`, `MAXQ_PASSED` and
  `DAMAGE_EXCEEDED` are evaluated; an event with any other trigger type
  never fires. When several script events share a name, the first one's
  conditions and commands are used for all of them.
- No planet or atmosphere model is included; you supply objects of the
  shape described above.
- `Vessel.apply_damage` does not yet reduce engine thrust, and the
  `location` argument is not used.
- There is no command-line program, no graphical or text display and no
  rendering: the package is a library to be driven from your own code.
- `MissionConfig` reads engine, tank, guidance, launch, launch-site and
  weather settings into its fields, but `vehicle` and `flight_plan` are
  never filled from a file, and nothing in the package builds a vessel
  from a configuration automatically.