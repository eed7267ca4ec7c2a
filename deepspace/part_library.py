"""Factory functions for real-world engines and propellant tanks."""

from __future__ import annotations

from deepspace.parts import EnginePart, FuelTankPart, PropellantType


def create_merlin_1d(
    thrust_sl: float = 845000.0,
    isp_sl: float = 282.0,
    isp_vac: float = 311.0,
    of_ratio: float = 2.56,
) -> EnginePart:
    return EnginePart("Merlin 1D", 470.0, thrust_sl, isp_sl, isp_vac,
                      PropellantType.RP1, PropellantType.LOX, of_ratio)


def create_merlin_1d_vac(
    thrust_vacuum: float = 934000.0,
    isp_vac: float = 348.0,
    isp_sl: float = 282.0,
    of_ratio: float = 2.35,
) -> EnginePart:
    """Merlin vacuum engine rated by its vacuum thrust."""
    thrust_sl = thrust_vacuum * (isp_sl / isp_vac)
    return EnginePart("Merlin 1D Vac", 490.0, thrust_sl, isp_sl, isp_vac,
                      PropellantType.RP1, PropellantType.LOX, of_ratio)


def create_f1(
    thrust_sl: float = 7770000.0,
    isp_sl: float = 263.0,
    isp_vac: float = 304.0,
    of_ratio: float = 2.27,
) -> EnginePart:
    return EnginePart("F-1 Engine", 8400.0, thrust_sl, isp_sl, isp_vac,
                      PropellantType.RP1, PropellantType.LOX, of_ratio)


def create_rl10b2(
    thrust_sl: float = 110000.0,
    isp_sl: float = 200.0,
    isp_vac: float = 448.0,
    of_ratio: float = 5.5,
) -> EnginePart:
    return EnginePart("RL10B-2", 301.0, thrust_sl, isp_sl, isp_vac,
                      PropellantType.LH2, PropellantType.LOX, of_ratio)


def create_aj10_190(
    thrust_sl: float = 267000.0,
    isp_sl: float = 319.0,
    isp_vac: float = 319.0,
    of_ratio: float = 1.65,
) -> EnginePart:
    return EnginePart("AJ10-190", 112.0, thrust_sl, isp_sl, isp_vac,
                      PropellantType.MMH, PropellantType.NTO, of_ratio)


def create_rs25(
    thrust_sl: float = 1860000.0,
    isp_sl: float = 366.0,
    isp_vac: float = 452.0,
    of_ratio: float = 6.0,
) -> EnginePart:
    return EnginePart("RS-25", 3515.0, thrust_sl, isp_sl, isp_vac,
                      PropellantType.LH2, PropellantType.LOX, of_ratio)


def create_sls_srb(
    thrust_sl: float = 14679000.0,
    isp_sl: float = 250.0,
    isp_vac: float = 280.0,
    of_ratio: float = 0.0,
) -> EnginePart:
    """Five-segment solid booster; solid propellant ignores ``of_ratio``."""
    return EnginePart("SLS SRB", 75000.0, thrust_sl, isp_sl, isp_vac,
                      PropellantType.SOLID, PropellantType.SOLID, 0.0)


def create_rl10c2(
    thrust_sl: float = 110000.0,
    isp_sl: float = 200.0,
    isp_vac: float = 465.0,
    of_ratio: float = 5.5,
) -> EnginePart:
    return EnginePart("RL10C-2", 301.0, thrust_sl, isp_sl, isp_vac,
                      PropellantType.LH2, PropellantType.LOX, of_ratio)


def create_falcon9_s1_rp1_tank(dry_mass: float = 12000.0, fuel_mass: float = 70000.0) -> FuelTankPart:
    return FuelTankPart("F9 S1 RP-1 Tank", dry_mass, fuel_mass, PropellantType.RP1)


def create_falcon9_s1_lox_tank(dry_mass: float = 13000.0, fuel_mass: float = 70000.0) -> FuelTankPart:
    return FuelTankPart("F9 S1 LOX Tank", dry_mass, fuel_mass, PropellantType.LOX)


def create_falcon9_s2_rp1_tank(dry_mass: float = 1800.0, fuel_mass: float = 29000.0) -> FuelTankPart:
    return FuelTankPart("F9 S2 RP-1 Tank", dry_mass, fuel_mass, PropellantType.RP1)


def create_falcon9_s2_lox_tank(dry_mass: float = 2200.0, fuel_mass: float = 71000.0) -> FuelTankPart:
    return FuelTankPart("F9 S2 LOX Tank", dry_mass, fuel_mass, PropellantType.LOX)


def create_icps_lh2_tank(dry_mass: float = 3200.0, fuel_mass: float = 150000.0) -> FuelTankPart:
    return FuelTankPart("ICPS LH2 Tank", dry_mass, fuel_mass, PropellantType.LH2)


def create_icps_lox_tank(dry_mass: float = 4100.0, fuel_mass: float = 825000.0) -> FuelTankPart:
    return FuelTankPart("ICPS LOX Tank", dry_mass, fuel_mass, PropellantType.LOX)


def create_orion_mmh_tank(dry_mass: float = 850.0, fuel_mass: float = 3200.0) -> FuelTankPart:
    return FuelTankPart("Orion MMH Tank", dry_mass, fuel_mass, PropellantType.MMH)


def create_orion_nto_tank(dry_mass: float = 900.0, fuel_mass: float = 5300.0) -> FuelTankPart:
    return FuelTankPart("Orion NTO Tank", dry_mass, fuel_mass, PropellantType.NTO)


def create_sls_lh2_tank(dry_mass: float = 9500.0, fuel_mass: float = 144000.0) -> FuelTankPart:
    return FuelTankPart("SLS Core LH2 Tank", dry_mass, fuel_mass, PropellantType.LH2)


def create_sls_lox_tank(dry_mass: float = 4500.0, fuel_mass: float = 840000.0) -> FuelTankPart:
    return FuelTankPart("SLS Core LOX Tank", dry_mass, fuel_mass, PropellantType.LOX)


def create_orion_mmh_tank_real(dry_mass: float = 400.0, fuel_mass: float = 4300.0) -> FuelTankPart:
    return FuelTankPart("Orion MMH Tank", dry_mass, fuel_mass, PropellantType.MMH)


def create_orion_nto_tank_real(dry_mass: float = 400.0, fuel_mass: float = 4300.0) -> FuelTankPart:
    return FuelTankPart("Orion NTO Tank", dry_mass, fuel_mass, PropellantType.NTO)