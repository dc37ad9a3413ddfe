import pytest

from caliper.core import prefixes
from caliper.core import reduction
from caliper.core.catalog import Unit
from caliper.core.dimensions import UnitType
from caliper.core.system import MeasurementSystem


def test_power_symbol():
    """Test the standard notation for exponents."""
    cases = {
        ('m', 1): 'm',
        ('m', 2): 'm²',
        ('m', 3): 'm³',
        ('s', 4): 's^4',
        ('s', -1): 's^-1',
    }
    for args, expected in cases.items():
        assert reduction.power_symbol(*args) == expected


def test_render(system):
    """Test the canonical symbol of a map of base units."""
    m = system.get_uom(Unit.METRE)
    s = system.get_uom(Unit.SECOND)
    kg = system.get_uom(Unit.KILOGRAM)
    K = system.get_uom(Unit.KELVIN)
    cases = [
        ({}, '1'),
        ({m: 1}, 'm'),
        ({s: -1}, '1/s'),
        ({m: 2, s: -1, kg: 1}, 'kg·m²/s'),
        ({m: 1, s: -2, K: -1}, 'm/(K·s²)'),
        ({kg: 1, m: 2, s: -2}, 'kg·m²/s²'),
    ]
    for terms, expected in cases:
        assert reduction.render(terms) == expected


def test_reduction_object(system):
    """A reduction should display its factor and base symbol."""
    m = system.get_uom(Unit.METRE)
    this = reduction.Reduction({m: 2}, 4.0)
    assert this.base_symbol == 'm²'
    assert str(this) == '4.0 * m²'


def test_fold_exponents(system):
    """The reducer should accumulate net exponents of base units."""
    m = system.get_uom(Unit.METRE)
    s = system.get_uom(Unit.SECOND)
    m2 = system.create_power_uom(m, 2)
    per_s2 = system.create_power_uom(s, -2)
    cases = [
        (system.create_quotient_uom(m2, m), 'm'),
        (system.create_product_uom(m, per_s2), 'm/s²'),
        (system.create_power_uom(m2, 3), 'm^6'),
        (system.create_quotient_uom(m, m), '1'),
        (system.create_product_uom(system.get_one(), m), 'm'),
    ]
    for unit, expected in cases:
        result = system.reducer.explode(unit)
        assert result.base_symbol == expected
        assert result.scaling_factor == 1.0


def test_scaling_factor(system):
    """The reducer should raise scaling factors to the path exponent."""
    m = system.get_uom(Unit.METRE)
    km = system.get_uom(prefixes.KILO, m)
    km2 = system.create_power_uom(km, 2)
    result = km2.reduce()
    assert result.terms == {m: 2}
    assert result.scaling_factor == pytest.approx(1e6)
    hr = system.get_uom(Unit.HOUR)
    km_per_hr = system.create_quotient_uom(km, hr)
    result = km_per_hr.reduce()
    assert result.base_symbol == 'm/s'
    assert result.scaling_factor == pytest.approx(1000 / 3600)


def test_invocations(system, invocations):
    """Each reduction should increment the counter of its own system."""
    m = system.get_uom(Unit.METRE)
    before = invocations()
    m.reduce()
    assert invocations() == before + 1
    other = MeasurementSystem()
    count = other.reducer.invocations
    other.get_uom(Unit.METRE).reduce()
    assert other.reducer.invocations > count
    assert invocations() == before + 1


def test_circular_reference(system):
    """A conversion that closes a loop should leave the unit unchanged."""
    a = system.create_scalar_uom(UnitType.LENGTH, 'aa')
    b = system.create_scalar_uom(UnitType.LENGTH, 'bb')
    a.set_conversion(2, b)
    with pytest.raises(reduction.CircularReferenceError):
        b.set_conversion(3, a)
    assert system.get_uom('bb') is b
    assert b.is_terminal
    assert b.scaling_factor == 1.0
    assert system.get_base_uom('bb') is b
    assert a.get_conversion_factor(b) == 2.0
    assert a.reduce().base_symbol == 'bb'


def test_circular_composition(system):
    """A composition that refers to itself should leave the unit unchanged."""
    a = system.create_scalar_uom(UnitType.LENGTH, 'aa')
    square = system.create_product_uom(a, a)
    with pytest.raises(reduction.CircularReferenceError):
        a.set_power_unit(square, 1)
    assert system.get_uom('aa') is a
    assert not a.operands
    assert a.base_symbol == 'aa'
    assert square.base_symbol == 'aa²'


def test_max_recursions():
    """A long enough conversion chain should exceed the limit."""
    system = MeasurementSystem(max_recursions=3)
    units = [
        system.create_scalar_uom(UnitType.LENGTH, symbol)
        for symbol in ('b', 'c', 'd', 'e')
    ]
    b, c, d, e = units
    d.set_conversion(1, e)
    c.set_conversion(1, d)
    with pytest.raises(reduction.CircularReferenceError) as error:
        b.set_conversion(1, c)
    assert "exceeded 3 recursions" in str(error.value)
    assert system.get_uom('b') is b
    assert b.is_terminal
