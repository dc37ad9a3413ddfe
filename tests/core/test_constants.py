import pytest

from caliper.core import constants
from caliper.core.catalog import Unit
from caliper.core.constants import Constant


def test_identify():
    """Look up constants by symbol."""
    assert constants.identify('c') is Constant.LIGHT_VELOCITY
    assert constants.identify('NA') is Constant.AVOGADRO_CONSTANT
    assert constants.identify('nope') is None
    assert constants.definition(Constant.GRAVITY)['amount'] == 9.80665


def test_defined_constants(system):
    """Constants defined by an amount should keep that amount."""
    c = system.get_quantity(Constant.LIGHT_VELOCITY)
    assert c.amount == 299792458.0
    assert c.unit is system.get_uom(Unit.METRE_PER_SEC)
    assert c.name == 'speed of light'
    assert c.symbol == 'c'
    assert c.description == "Speed of light in a vacuum."
    na = system.get_quantity(Constant.AVOGADRO_CONSTANT)
    assert na.unit is system.get_one()


def test_cached_constants(system):
    """Repeated requests should return the same quantity."""
    first = system.get_quantity(Constant.GRAVITY)
    assert system.get_quantity(Constant.GRAVITY) is first


def test_derived_constants(system):
    """Constants defined by other constants should combine them."""
    R = system.get_quantity(Constant.GAS_CONSTANT)
    assert R.amount == pytest.approx(8.31446261815324)
    assert R.symbol == 'R'
    k = system.get_quantity(Constant.BOLTZMANN_CONSTANT)
    assert R.unit.get_conversion_factor(k.unit) == pytest.approx(1.0)
    F = system.get_quantity(Constant.FARADAY_CONSTANT)
    assert F.amount == pytest.approx(96485.33212331001)
    eps0 = system.get_quantity(Constant.ELECTRIC_PERMITTIVITY)
    assert eps0.amount == pytest.approx(8.854187817e-12)


def test_light_year(system):
    """A light year should convert to metres."""
    ly = system.get_quantity(Constant.LIGHT_YEAR)
    metres = ly.convert(system.get_uom(Unit.METRE))
    assert metres.amount == pytest.approx(9.4607304725808e15)


def test_constant_units(system):
    """Constants with composite units should convert to SI values."""
    g = system.get_quantity(Constant.GRAVITY)
    fps2 = g.convert(system.get_uom(Unit.FEET_PER_SEC_SQUARED))
    assert fps2.amount == pytest.approx(32.17404855643044)
    me = system.get_quantity(Constant.ELECTRON_MASS)
    kg = me.convert(system.get_uom(Unit.KILOGRAM))
    assert kg.amount == pytest.approx(9.1093835611e-31)
    h0 = system.get_quantity(Constant.HUBBLE_CONSTANT)
    assert h0.amount == 71.9
    assert h0.unit.base_symbol == '1/s'
