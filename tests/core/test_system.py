import pytest

from caliper.core import catalog
from caliper.core import dimensions
from caliper.core import measure
from caliper.core import prefixes
from caliper.core.catalog import Unit
from caliper.core.constants import Constant
from caliper.core.dimensions import UnitType
from caliper.core.system import MeasurementSystem


def test_defaults():
    """A new system should read its limits from the configuration."""
    system = MeasurementSystem()
    assert system.max_recursions == 100
    assert system.max_symbol_length == 16
    assert system.reducer.max_recursions == 100
    assert system.get_registered_units() == []
    custom = MeasurementSystem(max_recursions=10, max_symbol_length=8)
    assert custom.reducer.max_recursions == 10
    assert custom.max_symbol_length == 8


def test_create_scalar(system):
    """Test the factory method for scalar units."""
    this = system.create_scalar_uom(
        UnitType.LENGTH, 'league', name='league', description="Old unit.",
    )
    assert this.symbol == 'league'
    assert this.name == 'league'
    assert this.description == "Old unit."
    assert this.unit_type is UnitType.LENGTH
    assert this.is_terminal
    assert system.get_uom('league') is this
    again = system.create_scalar_uom(UnitType.TIME, 'league')
    assert again is this
    assert again.unit_type is UnitType.LENGTH


def test_invalid_symbols(system):
    """Every unit needs a non-empty symbol."""
    for symbol in ('', None):
        with pytest.raises(measure.InvalidSymbolError):
            system.create_scalar_uom(UnitType.LENGTH, symbol)
    m = system.get_uom(Unit.METRE)
    with pytest.raises(measure.InvalidSymbolError):
        system.create_power_uom(m, 2, symbol='')


def test_null_operands(system):
    """Composite units need all of their operands."""
    m = system.get_uom(Unit.METRE)
    with pytest.raises(measure.NullOperandError):
        system.create_power_uom(None, 2)
    with pytest.raises(measure.NullOperandError):
        system.create_product_uom(m, None)
    with pytest.raises(measure.NullOperandError):
        system.create_product_uom(None, m)
    with pytest.raises(measure.NullOperandError):
        system.create_quotient_uom(None, m)
    with pytest.raises(measure.NullOperandError):
        system.create_quotient_uom(m, None)


def test_create_composites(system):
    """Test the factory methods for composite units."""
    m = system.get_uom(Unit.METRE)
    s = system.get_uom(Unit.SECOND)
    mxm = system.create_product_uom(m, m, UnitType.AREA, symbol='mxm')
    assert mxm.symbol == 'mxm'
    assert mxm.unit_type is UnitType.AREA
    assert mxm.base_symbol == 'm²'
    assert system.get_base_uom('m²') is mxm
    speed = system.create_quotient_uom(m, s)
    assert speed.symbol == 'm/s'
    assert speed.unit_type is UnitType.UNCLASSIFIED
    assert system.create_quotient_uom(m, s) is speed
    sq = system.create_power_uom(s, 2)
    assert sq.symbol == 's^2'
    assert sq.base_symbol == 's²'


def test_register_unregister(system):
    """Test adding units to and removing units from the registry."""
    league = system.create_scalar_uom(UnitType.LENGTH, 'league')
    assert system.unregister_unit(league)
    assert not system.unregister_unit(league)
    assert not system.unregister_unit(None)
    assert system.get_uom('league') is None
    assert system.get_base_uom('league') is None
    system.register_unit(league)
    assert system.get_uom('league') is league
    assert system.get_base_uom('league') is league
    impostor = measure.UnitOfMeasure(system, UnitType.LENGTH, 'league')
    system.register_unit(impostor)
    assert system.get_uom('league') is league
    assert not system.unregister_unit(impostor)


def test_base_symbol_owner(system):
    """The first unit registered with a base symbol owns it."""
    newton = system.get_uom(Unit.NEWTON)
    assert system.get_base_uom('kg·m/s²') is newton
    other = system.create_product_uom(
        system.get_uom(Unit.KILOGRAM),
        system.get_uom(Unit.METRE_PER_SEC_SQUARED),
        symbol='kg·m/s²',
    )
    assert other is not newton
    assert system.get_base_uom('kg·m/s²') is newton
    assert system.unregister_unit(other)
    assert system.get_base_uom('kg·m/s²') is newton
    assert system.get_base_uom('furlongs') is None


def test_get_uom_by_symbol_and_id(system):
    """Look up units by symbol or by canonical identifier."""
    m = system.get_uom(Unit.METRE)
    assert m.symbol == 'm'
    assert m.name == 'metre'
    assert m.canonical_id is Unit.METRE
    assert system.get_uom('m') is m
    assert system.get_uom(Unit.METRE) is m
    kn = system.get_uom('kn')
    assert kn is system.get_uom(Unit.KNOT)
    assert kn.abscissa_unit is system.get_uom(Unit.FEET_PER_SEC)
    assert system.get_uom('nonsense') is None


def test_build_dependencies(system):
    """Building a catalog unit should build the units it depends on."""
    psi = system.get_uom(Unit.PSI)
    symbols = [uom.symbol for uom in system.get_registered_units()]
    for symbol in ('lbf', 'in²', 'ft²', 'lbm', 'ft', 'in', 's'):
        assert symbol in symbols
    assert psi.operands[0][0] is system.get_uom(Unit.POUND_FORCE)
    assert psi.unit_type is UnitType.PRESSURE
    assert psi.base_symbol == 'lbm/(ft·s²)'


def test_catalog_scaling(system):
    """Some composite catalog units carry their own scaling factor."""
    lbf = system.get_uom(Unit.POUND_FORCE)
    assert lbf.scaling_factor == pytest.approx(9.80665 / 0.3048)
    hp = system.get_uom(Unit.HP)
    assert hp.scaling_factor == 550.0
    ev = system.get_uom(Unit.ELECTRON_VOLT)
    assert ev.scaling_factor == pytest.approx(1.602176634e-19)


def test_prefixed_units(system):
    """Test the units created by applying a prefix."""
    m = system.get_uom(Unit.METRE)
    km = system.get_uom(prefixes.KILO, m)
    assert km.symbol == 'km'
    assert km.name == 'kilometre'
    assert km.unit_type is UnitType.LENGTH
    assert km.abscissa_unit is m
    assert km.scaling_factor == 1000.0
    assert system.get_uom(prefixes.KILO, m) is km
    assert system.get_uom('km') is km
    minute = system.get_uom(Unit.MINUTE)
    kmin = system.get_uom(prefixes.KILO, minute)
    assert kmin.abscissa_unit is system.get_second()
    assert kmin.scaling_factor == pytest.approx(6e4)
    with pytest.raises(measure.NullOperandError):
        system.get_uom(prefixes.KILO)


def test_prefixed_symbol_collisions(system):
    """A prefixed symbol that names a unit of another type should change."""
    inch = system.get_uom(Unit.INCH)
    m = system.get_uom(Unit.METRE)
    milli_inch = system.get_uom(prefixes.MILLI, inch)
    assert milli_inch.symbol == 'm(in)'
    assert milli_inch.unit_type is UnitType.LENGTH
    assert milli_inch.get_conversion_factor(m) == pytest.approx(2.54e-5)
    assert system.get_uom(prefixes.MILLI, inch) is milli_inch
    assert system.get_minute().unit_type is UnitType.TIME
    assert system.get_uom('min') is system.get_minute()
    tonne = system.get_uom(Unit.TONNE)
    femto_tonne = system.get_uom(prefixes.FEMTO, tonne)
    assert femto_tonne.symbol == 'f(t)'
    assert femto_tonne.unit_type is UnitType.MASS
    assert system.get_uom(Unit.FOOT).symbol == 'ft'
    assert system.get_uom(Unit.FOOT).unit_type is UnitType.LENGTH


def test_prefixed_catalog_unit(system):
    """A prefixed symbol that names a catalog unit of the same type is it."""
    gram = system.get_uom(Unit.GRAM)
    kg = system.get_uom(prefixes.KILO, gram)
    assert kg is system.get_uom(Unit.KILOGRAM)
    assert kg.is_terminal


def test_common_units(system):
    """Test the shortcuts to frequently used units."""
    assert system.get_one().symbol == '1'
    assert system.get_one().unit_type is UnitType.UNITY
    assert system.get_second().symbol == 's'
    assert system.get_minute().symbol == 'min'
    assert system.get_hour().symbol == 'hr'
    assert system.get_day().symbol == 'day'
    assert system.get_day().scaling_factor == 86400.0


def test_registered_units(system):
    """Registered units should come back sorted by symbol."""
    for unit in (Unit.SECOND, Unit.AMPERE, Unit.METRE, Unit.KILOGRAM):
        system.get_uom(unit)
    symbols = [uom.symbol for uom in system.get_registered_units()]
    assert symbols == ['A', 'kg', 'm', 's']


def test_units_of_measure(system):
    """Get all catalog units of one type."""
    temperatures = system.get_units_of_measure(UnitType.TEMPERATURE)
    assert sorted(uom.symbol for uom in temperatures) == [
        'K', '°C', '°F', '°R',
    ]
    currencies = system.get_units_of_measure(UnitType.CURRENCY)
    assert {uom.symbol for uom in currencies} == {'$', '€', '¥'}
    expected = len(catalog.of_type(UnitType.VOLUME))
    assert len(system.get_units_of_measure(UnitType.VOLUME)) == expected


def test_type_map(system):
    """The registry should report the same maps as the dimensions module."""
    for unit_type in UnitType:
        this = system.get_type_map(unit_type)
        assert this == dimensions.dimension_map(unit_type)
    this = system.get_type_map(UnitType.FORCE)
    this.clear()
    assert system.get_type_map(UnitType.FORCE) != {}


def test_clear_cache(system):
    """Clearing the cache should empty the registry."""
    m = system.get_uom(Unit.METRE)
    c = system.get_quantity(Constant.LIGHT_VELOCITY)
    assert system.get_registered_units()
    system.clear_cache()
    assert system.get_registered_units() == []
    assert system.get_base_uom('m') is None
    assert system.get_uom(Unit.METRE) is not m
    assert system.get_quantity(Constant.LIGHT_VELOCITY) is not c


def test_separate_registries():
    """Two systems should not share units."""
    a = MeasurementSystem()
    b = MeasurementSystem()
    assert a.get_uom(Unit.METRE) is not b.get_uom(Unit.METRE)
    a.create_scalar_uom(UnitType.LENGTH, 'league')
    assert b.get_uom('league') is None
