import pytest

from caliper.core import catalog
from caliper.core.catalog import Unit
from caliper.core.dimensions import UnitType


def test_entries():
    """Every identifier should have exactly one well-formed entry."""
    required = {'unit', 'symbol', 'name', 'type', 'description'}
    units = [entry['unit'] for entry in catalog._units]
    assert sorted(units, key=lambda u: u.value) == list(Unit)
    for entry in catalog._units:
        assert required <= set(entry)
        assert isinstance(entry['type'], UnitType)


def test_unique_symbols():
    """No two catalog units may share a symbol."""
    symbols = [entry['symbol'] for entry in catalog._units]
    assert len(symbols) == len(set(symbols))


def test_identify():
    """Look up canonical identifiers by symbol."""
    cases = {
        'm': Unit.METRE,
        'ft': Unit.FOOT,
        '°C': Unit.CELSIUS,
        'N·m': Unit.NEWTON_METRE,
        'gal(UK)': Unit.BR_GALLON,
        '€': Unit.EURO,
    }
    for symbol, expected in cases.items():
        assert catalog.identify(symbol) is expected
    assert catalog.identify('furlong') is None


def test_definition():
    """Get the catalog entry of an identifier."""
    entry = catalog.definition(Unit.MINUTE)
    assert entry['symbol'] == 'min'
    assert entry['conversion'] == (60, Unit.SECOND)
    with pytest.raises(KeyError):
        catalog.definition('minute')


def test_of_type():
    """Select catalog identifiers by type."""
    lengths = catalog.of_type(UnitType.LENGTH)
    assert Unit.METRE in lengths
    assert Unit.FOOT in lengths
    assert Unit.SECOND not in lengths
    assert catalog.of_type(UnitType.UNCLASSIFIED) == []


def test_unit_str():
    """A canonical identifier should display as its name."""
    assert str(Unit.METRE) == 'METRE'
