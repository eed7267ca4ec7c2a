"""Mission configuration read from an INI-style text file."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ConfigError(ValueError):
    """A configuration file is missing, or a value in it cannot be read."""


@dataclass
class EngineConfig:
    thrust_n: float = 0.0
    thrust_sea_level_n: float = 0.0
    thrust_vacuum_n: float = 0.0
    engine_count: int = 1
    sea_level_isp_s: float = 0.0
    vacuum_isp_s: float = 0.0
    fuel_ratio: float = 0.0
    ox_ratio: float = 0.0
    of_ratio: float = 0.0


@dataclass
class TankConfig:
    name: str = ""
    fuel_mass_kg: float = 0.0
    dry_mass_kg: float = 0.0
    propellant: str = ""


@dataclass
class GuidanceConfig:
    pitch_start_alt_m: float = 2000.0
    pitch_end_alt_m: float = 20000.0
    orbit_tolerance_m: float = 10000.0


@dataclass
class LaunchWindowConfig:
    start: str = ""
    end: str = ""
    auto_calculate: bool = False


@dataclass
class LaunchLocationConfig:
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    altitude_m: float = 0.0
    timezone: str = ""
    pad: str = ""


@dataclass
class LaunchConfig:
    datetime: str = ""
    timezone: str = ""
    window: LaunchWindowConfig = field(default_factory=LaunchWindowConfig)


@dataclass
class WeatherConfig:
    enabled: bool = False
    real_time_data: bool = False
    temperature_c: float = 15.0
    humidity_pct: float = 50.0
    pressure_hpa: float = 1013.25
    wind_speed_ms: float = 0.0
    wind_direction_deg: float = 0.0
    cloud_cover_pct: int = 0
    variation_enabled: bool = False
    random_seed: int = 0


@dataclass
class EngineSpec:
    type: str = ""
    count: int = 1
    thrust_sl_n: float = 0.0
    thrust_vac_n: float = 0.0
    isp_sl_s: float = 0.0
    isp_vac_s: float = 0.0
    of_ratio: float = 0.0


@dataclass
class TankSpec:
    type: str = ""
    propellant: str = ""
    fuel_mass_kg: float = 0.0
    dry_mass_kg: float = 0.0


@dataclass
class StageSpec:
    id: int = 0
    name: str = ""
    engines: list[EngineSpec] = field(default_factory=list)
    tanks: list[TankSpec] = field(default_factory=list)
    separator_mass_kg: float = 0.0
    persistent: bool = False


@dataclass
class VehicleConfig:
    name: str = ""
    stages: list[StageSpec] = field(default_factory=list)


@dataclass
class PhaseSpec:
    name: str = ""
    duration_s: float = 0.0
    target_condition: str = ""
    events: list[tuple[float, str]] = field(default_factory=list)


@dataclass
class FlightPlanConfig:
    name: str = ""
    phases: list[PhaseSpec] = field(default_factory=list)


def _parse_float(section: str, key: str, text: str) -> float:
    """Read the leading number of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ConfigError(f"[{section}] {key}: not a number: {text!r}")
    value = float(match.group(1))
    if math.isinf(value) and "inf" not in match.group(1).lower():
        raise ConfigError(f"[{section}] {key}: number out of range: {text!r}")
    return value


def _parse_int(section: str, key: str, text: str) -> int:
    """Read the leading integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ConfigError(f"[{section}] {key}: not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConfigError(f"[{section}] {key}: integer out of range: {text!r}")
    return value


class _Section:
    """Typed access to the keys of one section."""

    def __init__(self, name: str, values: dict[str, str]):
        self.name = name
        self.values = values

    def __contains__(self, key: str) -> bool:
        return key in self.values

    def text(self, key: str) -> str:
        return self.values.get(key, "")

    def number(self, key: str) -> float:
        return _parse_float(self.name, key, self.values.get(key, ""))

    def integer(self, key: str) -> int:
        return _parse_int(self.name, key, self.values.get(key, ""))

    def flag(self, key: str) -> bool:
        return self.values.get(key, "") == "true"


def _parse_sections(text: str) -> dict[str, dict[str, str]]:
    sections: dict[str, dict[str, str]] = {}
    current = ""
    for raw in text.splitlines():
        line = raw.strip(" \t")
        if not line or line.startswith("#"):
            continue
        if len(line) >= 2 and line.startswith("[") and line.endswith("]"):
            current = line[1:-1]
            continue
        key, eq, value = line.partition("=")
        if eq:
            sections.setdefault(current, {})[key] = value
    return sections


def _full_engine(section: _Section) -> EngineConfig:
    engine = EngineConfig(
        thrust_sea_level_n=section.number("thrustSeaLevel_N"),
        thrust_vacuum_n=section.number("thrustVacuum_N"),
        engine_count=section.integer("engineCount"),
        sea_level_isp_s=section.number("seaLevelIsp_s"),
        vacuum_isp_s=section.number("vacuumIsp_s"),
        fuel_ratio=section.number("fuelRatio"),
        ox_ratio=section.number("oxRatio"),
        of_ratio=section.number("OF_ratio"),
    )
    engine.thrust_n = engine.thrust_sea_level_n
    return engine


def _upper_engine(section: _Section) -> EngineConfig:
    return EngineConfig(
        thrust_n=section.number("thrust_N"),
        sea_level_isp_s=section.number("seaLevelIsp_s"),
        vacuum_isp_s=section.number("vacuumIsp_s"),
        fuel_ratio=section.number("fuelRatio"),
        ox_ratio=section.number("oxRatio"),
        of_ratio=section.number("OF_ratio"),
    )


def _tank(section: _Section, name: str, prefix: str, propellant: str) -> TankConfig:
    return TankConfig(
        name=name,
        fuel_mass_kg=section.number(f"{prefix}Mass_kg"),
        dry_mass_kg=section.number(f"{prefix}Dry_kg"),
        propellant=propellant,
    )


@dataclass
class MissionConfig:
    """Vehicle, guidance, launch site and weather settings for a mission."""

    mission_name: str = ""
    target_ap_km: float = 185.0
    target_pe_km: float = 180.0
    max_duration_s: float = 7200.0

    rs25: EngineConfig = field(default_factory=EngineConfig)
    srb: EngineConfig = field(default_factory=EngineConfig)
    rl10: EngineConfig = field(default_factory=EngineConfig)
    aj10: EngineConfig = field(default_factory=EngineConfig)

    vehicle: VehicleConfig = field(default_factory=VehicleConfig)
    flight_plan: FlightPlanConfig = field(default_factory=FlightPlanConfig)

    core_lh2: TankConfig = field(default_factory=TankConfig)
    core_lox: TankConfig = field(default_factory=TankConfig)
    icps_lh2: TankConfig = field(default_factory=TankConfig)
    icps_lox: TankConfig = field(default_factory=TankConfig)
    orion_mmh: TankConfig = field(default_factory=TankConfig)
    orion_nto: TankConfig = field(default_factory=TankConfig)

    core_rp1: TankConfig = field(default_factory=TankConfig)
    core_lox_old: TankConfig = field(default_factory=TankConfig)
    second_stage_rp1: TankConfig = field(default_factory=TankConfig)
    second_stage_lox: TankConfig = field(default_factory=TankConfig)
    merlin: EngineConfig = field(default_factory=EngineConfig)
    merlin_vacuum: EngineConfig = field(default_factory=EngineConfig)

    guidance: GuidanceConfig = field(default_factory=GuidanceConfig)
    launch: LaunchConfig = field(default_factory=LaunchConfig)
    launch_location: LaunchLocationConfig = field(default_factory=LaunchLocationConfig)
    weather: WeatherConfig = field(default_factory=WeatherConfig)

    @classmethod
    def load(cls, path: Union[str, Path]) -> MissionConfig:
        """Read a configuration file; raises ConfigError if it cannot be read."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to open config: {path}") from exc
        return cls.loads(text)

    @classmethod
    def loads(cls, text: str) -> MissionConfig:
        """Build a configuration from the text of a configuration file.

        The [mission], [rl10], [aj10] and [guidance] sections and their
        numeric keys are required; the other sections are optional.
        """
        raw = _parse_sections(text)

        def section(name: str) -> Optional[_Section]:
            values = raw.get(name)
            return _Section(name, values) if values is not None else None

        def required(name: str) -> _Section:
            return _Section(name, raw.get(name, {}))

        config = cls()

        mission = required("mission")
        config.mission_name = mission.text("name")
        config.target_ap_km = mission.number("targetAp_km")
        config.target_pe_km = mission.number("targetPe_km")
        config.max_duration_s = mission.number("maxDuration_s")

        if (rs25 := section("rs25")) is not None:
            config.rs25 = _full_engine(rs25)

        if (srb := section("srb")) is not None:
            config.srb.thrust_sea_level_n = srb.number("thrustSeaLevel_N")
            config.srb.thrust_vacuum_n = srb.number("thrustVacuum_N")
            config.srb.engine_count = srb.integer("engineCount")
            if "ispSeaLevel_s" in srb:
                config.srb.sea_level_isp_s = srb.number("ispSeaLevel_s")
            if "ispVacuum_s" in srb:
                config.srb.vacuum_isp_s = srb.number("ispVacuum_s")

        config.rl10 = _upper_engine(required("rl10"))
        config.aj10 = _upper_engine(required("aj10"))

        if (core := section("core_stage")) is not None:
            config.core_lh2 = _tank(core, "SLS Core LH2 Tank", "lh2", "LH2")
            config.core_lox = _tank(core, "SLS Core LOX Tank", "lox", "LOX")
        elif (core := section("core_tanks")) is not None:
            config.core_rp1 = _tank(core, "F9 S1 RP-1 Tank", "rp1", "RP1")
            config.core_lox_old = _tank(core, "F9 S1 LOX Tank", "lox", "LOX")

        if (second := section("second_stage_tanks")) is not None:
            config.second_stage_rp1 = _tank(second, "F9 S2 RP-1 Tank", "rp1", "RP1")
            config.second_stage_lox = _tank(second, "F9 S2 LOX Tank", "lox", "LOX")

        if (icps := section("icps_tanks")) is not None:
            config.icps_lh2 = _tank(icps, "ICPS LH2 Tank", "lh2", "LH2")
            config.icps_lox = _tank(icps, "ICPS LOX Tank", "lox", "LOX")

        if (orion := section("orion_tanks")) is not None:
            config.orion_mmh = _tank(orion, "Orion MMH Tank", "mmh", "MMH")
            config.orion_nto = _tank(orion, "Orion NTO Tank", "nto", "NTO")

        if (merlin := section("merlin")) is not None:
            config.merlin = _full_engine(merlin)

        if (vac := section("merlin_vacuum")) is not None:
            config.merlin_vacuum = EngineConfig(
                thrust_n=vac.number("thrust_N"),
                vacuum_isp_s=vac.number("vacuumIsp_s"),
                fuel_ratio=vac.number("fuelRatio"),
                ox_ratio=vac.number("oxRatio"),
                of_ratio=vac.number("OF_ratio"),
            )
        else:
            config.merlin_vacuum = EngineConfig(
                thrust_n=934000.0,
                vacuum_isp_s=348.0,
                fuel_ratio=0.299,
                ox_ratio=0.701,
                of_ratio=2.35,
            )

        guidance = required("guidance")
        config.guidance = GuidanceConfig(
            pitch_start_alt_m=guidance.number("pitchStartAlt_m"),
            pitch_end_alt_m=guidance.number("pitchEndAlt_m"),
            orbit_tolerance_m=guidance.number("orbitTolerance_m"),
        )

        if (launch := section("launch")) is not None:
            if "datetime" in launch:
                config.launch.datetime = launch.text("datetime")
            if "timezone" in launch:
                config.launch.timezone = launch.text("timezone")
            if "window_start" in launch:
                config.launch.window.start = launch.text("window_start")
            if "window_end" in launch:
                config.launch.window.end = launch.text("window_end")
            if "auto_calculate_window" in launch:
                config.launch.window.auto_calculate = launch.flag("auto_calculate_window")

        if (site := section("launch_site")) is not None:
            location = config.launch_location
            if "name" in site:
                location.name = site.text("name")
            if "latitude" in site:
                location.latitude = site.number("latitude")
            if "longitude" in site:
                location.longitude = site.number("longitude")
            if "altitude_m" in site:
                location.altitude_m = site.number("altitude_m")
            if "timezone" in site:
                location.timezone = site.text("timezone")
            if "pad" in site:
                location.pad = site.text("pad")

        if (weather := section("weather")) is not None:
            w = config.weather
            if "enabled" in weather:
                w.enabled = weather.flag("enabled")
            if "real_time_data" in weather:
                w.real_time_data = weather.flag("real_time_data")
            if "temperature_C" in weather:
                w.temperature_c = weather.number("temperature_C")
            if "humidity_pct" in weather:
                w.humidity_pct = weather.number("humidity_pct")
            if "pressure_hPa" in weather:
                w.pressure_hpa = weather.number("pressure_hPa")
            if "wind_speed_ms" in weather:
                w.wind_speed_ms = weather.number("wind_speed_ms")
            if "wind_direction_deg" in weather:
                w.wind_direction_deg = weather.number("wind_direction_deg")
            if "cloud_cover_pct" in weather:
                w.cloud_cover_pct = weather.integer("cloud_cover_pct")
            if "variation_enabled" in weather:
                w.variation_enabled = weather.flag("variation_enabled")
            if "random_seed" in weather:
                w.random_seed = weather.integer("random_seed")

        return config