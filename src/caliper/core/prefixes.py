import typing

from caliper.core import iterables


_prefixes = [
    {'symbol': 'Y', 'name': 'yotta', 'factor': 1e+24},
    {'symbol': 'Z', 'name': 'zetta', 'factor': 1e+21},
    {'symbol': 'E', 'name': 'exa', 'factor': 1e+18},
    {'symbol': 'P', 'name': 'peta', 'factor': 1e+15},
    {'symbol': 'T', 'name': 'tera', 'factor': 1e+12},
    {'symbol': 'G', 'name': 'giga', 'factor': 1e+9},
    {'symbol': 'M', 'name': 'mega', 'factor': 1e+6},
    {'symbol': 'k', 'name': 'kilo', 'factor': 1e+3},
    {'symbol': 'h', 'name': 'hecto', 'factor': 1e+2},
    {'symbol': 'da', 'name': 'deka', 'factor': 1e+1},
    {'symbol': 'd', 'name': 'deci', 'factor': 1e-1},
    {'symbol': 'c', 'name': 'centi', 'factor': 1e-2},
    {'symbol': 'm', 'name': 'milli', 'factor': 1e-3},
    {'symbol': 'μ', 'name': 'micro', 'factor': 1e-6},
    {'symbol': 'n', 'name': 'nano', 'factor': 1e-9},
    {'symbol': 'p', 'name': 'pico', 'factor': 1e-12},
    {'symbol': 'f', 'name': 'femto', 'factor': 1e-15},
    {'symbol': 'a', 'name': 'atto', 'factor': 1e-18},
    {'symbol': 'z', 'name': 'zepto', 'factor': 1e-21},
    {'symbol': 'y', 'name': 'yocto', 'factor': 1e-24},
    # binary prefixes for computer-science units
    {'symbol': 'Ki', 'name': 'kibi', 'factor': 1024.0},
    {'symbol': 'Mi', 'name': 'mebi', 'factor': 1.048576e+6},
    {'symbol': 'Gi', 'name': 'gibi', 'factor': 1.073741824e+9},
]

_PREFIXES_TABLE = iterables.Table(_prefixes)


class Prefix(typing.NamedTuple):
    """Metadata for an order-of-magnitude prefix."""

    symbol: str
    name: str
    factor: float

    @classmethod
    def from_name(cls, name: str) -> typing.Optional['Prefix']:
        """Get the defined prefix with this name, if any."""
        try:
            entry = _PREFIXES_TABLE(name=name)
        except iterables.TableLookupError:
            return None
        return cls(**entry)

    @classmethod
    def from_factor(cls, factor: float) -> typing.Optional['Prefix']:
        """Get the defined prefix with this scaling factor, if any."""
        try:
            entry = _PREFIXES_TABLE(factor=float(factor))
        except iterables.TableLookupError:
            return None
        return cls(**entry)

    @classmethod
    def defined(cls) -> typing.List['Prefix']:
        """All defined prefixes, from largest to smallest decimal factor."""
        return [cls(**entry) for entry in _PREFIXES_TABLE]

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol}): {self.factor}"


YOTTA = Prefix.from_name('yotta')
ZETTA = Prefix.from_name('zetta')
EXA = Prefix.from_name('exa')
PETA = Prefix.from_name('peta')
TERA = Prefix.from_name('tera')
GIGA = Prefix.from_name('giga')
MEGA = Prefix.from_name('mega')
KILO = Prefix.from_name('kilo')
HECTO = Prefix.from_name('hecto')
DEKA = Prefix.from_name('deka')
DECI = Prefix.from_name('deci')
CENTI = Prefix.from_name('centi')
MILLI = Prefix.from_name('milli')
MICRO = Prefix.from_name('micro')
NANO = Prefix.from_name('nano')
PICO = Prefix.from_name('pico')
FEMTO = Prefix.from_name('femto')
ATTO = Prefix.from_name('atto')
ZEPTO = Prefix.from_name('zepto')
YOCTO = Prefix.from_name('yocto')
KIBI = Prefix.from_name('kibi')
MEBI = Prefix.from_name('mebi')
GIBI = Prefix.from_name('gibi')
