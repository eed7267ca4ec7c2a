import pytest

from deepspace.parts import (
    SEA_LEVEL_PRESSURE,
    DecouplerPart,
    EnginePart,
    FuelTankPart,
    Part,
    PropellantType,
)


def make_engine(mixture=2.0, oxidizer=PropellantType.LOX):
    return EnginePart("Test", 500.0, 100_000.0, 280.0, 320.0,
                      PropellantType.RP1, oxidizer, mixture)


def test_part_mass_and_decoupling():
    part = Part("Plate", 150.0)
    assert part.mass() == 150.0
    assert part.thrust(SEA_LEVEL_PRESSURE) == 0.0
    part.decoupled = True
    assert part.mass() == 0.0


def test_is_active_respects_decoupling():
    part = Part("Plate", 1.0)
    assert not part.is_active()
    part.active = True
    assert part.is_active()
    part.decoupled = True
    assert not part.is_active()


def test_decoupler_activate():
    dec = DecouplerPart("Sep", 50.0)
    dec.activate()
    assert dec.is_active()


def test_throttle_clamped():
    engine = make_engine()
    engine.set_throttle(1.7)
    assert engine.throttle == 1.0
    engine.set_throttle(-0.3)
    assert engine.throttle == 0.0


def test_mass_fractions_sum_to_one():
    engine = make_engine(mixture=2.0)
    assert engine.fuel_mass_fraction() == pytest.approx(1 / 3)
    assert engine.fuel_mass_fraction() + engine.oxidizer_mass_fraction() == pytest.approx(1.0)


def test_monopropellant_fractions():
    for engine in (make_engine(oxidizer=PropellantType.NONE), make_engine(mixture=-1.0)):
        assert engine.fuel_mass_fraction() == 1.0
        assert engine.oxidizer_mass_fraction() == 0.0
    assert make_engine(mixture=-1.0).mixture_ratio == 0.0


def test_isp_interpolation():
    engine = make_engine()
    assert engine.current_isp(0.0) == 320.0
    assert engine.current_isp(SEA_LEVEL_PRESSURE) == pytest.approx(280.0)
    assert engine.current_isp(SEA_LEVEL_PRESSURE * 3) == pytest.approx(280.0)
    mid = engine.current_isp(SEA_LEVEL_PRESSURE / 2)
    assert 280.0 < mid < 320.0


def test_thrust_requires_activation_and_throttle():
    engine = make_engine()
    assert engine.thrust(0.0) == 0.0
    assert engine.current_mass_flow_rate() == 0.0
    engine.active = True
    assert engine.thrust(0.0) == 0.0
    engine.set_throttle(1.0)
    assert engine.thrust(SEA_LEVEL_PRESSURE) == pytest.approx(100_000.0)
    assert engine.thrust(0.0) / engine.thrust(SEA_LEVEL_PRESSURE) == pytest.approx(320.0 / 280.0)


def test_mass_flow_scales_with_throttle():
    engine = make_engine()
    engine.active = True
    engine.set_throttle(0.5)
    assert engine.current_mass_flow_rate() == pytest.approx(engine.max_mass_flow_rate() * 0.5)


def test_tank_consumption():
    tank = FuelTankPart("Tank", 100.0, 1000.0, PropellantType.LOX)
    assert tank.mass() == 1100.0
    assert tank.consume_fuel(400.0)
    assert tank.current_fuel == 600.0
    assert not tank.consume_fuel(1000.0)
    assert tank.current_fuel == 0.0
    assert tank.mass() == 100.0


def test_tank_rejects_invalid_draws():
    tank = FuelTankPart("Tank", 100.0, 1000.0, PropellantType.LH2)
    assert not tank.consume_fuel(0.0)
    assert not tank.consume_fuel(-5.0)
    assert tank.current_fuel == 1000.0
    tank.decoupled = True
    assert not tank.consume_fuel(10.0)
    assert tank.current_fuel == 1000.0
    assert tank.mass() == 0.0