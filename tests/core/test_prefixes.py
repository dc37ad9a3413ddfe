import pytest

from caliper.core import prefixes
from caliper.core.prefixes import Prefix


@pytest.fixture
def named():
    """Prefix names and their expected symbols and factors."""
    return {
        'yotta': ('Y', 1e24),
        'kilo': ('k', 1e3),
        'deka': ('da', 1e1),
        'centi': ('c', 1e-2),
        'micro': ('μ', 1e-6),
        'yocto': ('y', 1e-24),
        'kibi': ('Ki', 1024.0),
        'gibi': ('Gi', 1.073741824e9),
    }


def test_from_name(named: dict):
    """Look up prefixes by name."""
    for name, (symbol, factor) in named.items():
        prefix = Prefix.from_name(name)
        assert prefix.symbol == symbol
        assert prefix.name == name
        assert prefix.factor == factor
    assert Prefix.from_name('kilobyte') is None


def test_from_factor(named: dict):
    """Look up prefixes by factor."""
    for name, (_, factor) in named.items():
        assert Prefix.from_factor(factor).name == name
    assert Prefix.from_factor(1e-3) == prefixes.MILLI
    assert Prefix.from_factor(3.0) is None


def test_defined():
    """Make sure the collection of defined prefixes is complete."""
    defined = Prefix.defined()
    assert len(defined) == 23
    assert defined[0] == prefixes.YOTTA
    assert prefixes.GIBI in defined
    assert str(prefixes.MEGA) == 'mega (M): 1000000.0'
