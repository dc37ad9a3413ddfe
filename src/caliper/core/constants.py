"""Named physical constants.

Each entry in `_constants` defines one constant by an ``'amount'`` in a
``'unit'``, by a product of powers of other constants (``'derived'``), or by
both. Units are expressions of catalog symbols, as described in
`~catalog`. `~system.MeasurementSystem.get_quantity` builds the
corresponding quantities.
"""

import enum
import math
import typing

from caliper.core import iterables


class Constant(enum.Enum):
    """Identifiers of named physical constants."""

    LIGHT_VELOCITY = enum.auto()
    LIGHT_YEAR = enum.auto()
    GRAVITY = enum.auto()
    PLANCK_CONSTANT = enum.auto()
    BOLTZMANN_CONSTANT = enum.auto()
    AVOGADRO_CONSTANT = enum.auto()
    GAS_CONSTANT = enum.auto()
    ELEMENTARY_CHARGE = enum.auto()
    ELECTRIC_PERMITTIVITY = enum.auto()
    MAGNETIC_PERMEABILITY = enum.auto()
    FARADAY_CONSTANT = enum.auto()
    ELECTRON_MASS = enum.auto()
    PROTON_MASS = enum.auto()
    STEFAN_BOLTZMANN = enum.auto()
    HUBBLE_CONSTANT = enum.auto()
    CAESIUM_FREQUENCY = enum.auto()
    LUMINOUS_EFFICACY = enum.auto()

    def __str__(self) -> str:
        return self.name


_constants = [
    {
        'constant': Constant.LIGHT_VELOCITY,
        'symbol': 'c',
        'name': 'speed of light',
        'description': "Speed of light in a vacuum.",
        'amount': 299792458,
        'unit': 'm/s',
    },
    {
        'constant': Constant.LIGHT_YEAR,
        'symbol': 'ly',
        'name': 'light year',
        'description': "Distance light travels in one Julian year.",
        'amount': 1,
        'unit': 'yr',
        'derived': ((Constant.LIGHT_VELOCITY, 1),),
    },
    {
        'constant': Constant.GRAVITY,
        'symbol': 'g',
        'name': 'gravity',
        'description': "Standard gravitational acceleration.",
        'amount': 9.80665,
        'unit': 'm/s²',
    },
    {
        'constant': Constant.PLANCK_CONSTANT,
        'symbol': 'h',
        'name': 'Planck constant',
        'description': "Quantum of action.",
        'amount': 6.62607015e-34,
        'unit': ('product', 'J', 's'),
    },
    {
        'constant': Constant.BOLTZMANN_CONSTANT,
        'symbol': 'k',
        'name': 'Boltzmann constant',
        'description': "Energy per kelvin of a particle.",
        'amount': 1.380649e-23,
        'unit': ('quotient', 'J', 'K'),
    },
    {
        'constant': Constant.AVOGADRO_CONSTANT,
        'symbol': 'NA',
        'name': 'Avogadro constant',
        'description': "Number of particles in one mole.",
        'amount': 6.02214076e+23,
        'unit': '1',
    },
    {
        'constant': Constant.GAS_CONSTANT,
        'symbol': 'R',
        'name': 'gas constant',
        'description': "Boltzmann constant times Avogadro constant.",
        'derived': (
            (Constant.BOLTZMANN_CONSTANT, 1),
            (Constant.AVOGADRO_CONSTANT, 1),
        ),
    },
    {
        'constant': Constant.ELEMENTARY_CHARGE,
        'symbol': 'e',
        'name': 'elementary charge',
        'description': "Electric charge of a proton.",
        'amount': 1.602176634e-19,
        'unit': 'C',
    },
    {
        'constant': Constant.MAGNETIC_PERMEABILITY,
        'symbol': 'μ0',
        'name': 'magnetic permeability',
        'description': "Permeability of free space.",
        'amount': 4e-07 * math.pi,
        'unit': ('quotient', 'H', 'm'),
    },
    {
        'constant': Constant.ELECTRIC_PERMITTIVITY,
        'symbol': 'ε0',
        'name': 'electric permittivity',
        'description': "Permittivity of free space.",
        'derived': (
            (Constant.MAGNETIC_PERMEABILITY, -1),
            (Constant.LIGHT_VELOCITY, -2),
        ),
    },
    {
        'constant': Constant.FARADAY_CONSTANT,
        'symbol': 'F',
        'name': 'Faraday constant',
        'description': "Electric charge of one mole of electrons.",
        'derived': (
            (Constant.ELEMENTARY_CHARGE, 1),
            (Constant.AVOGADRO_CONSTANT, 1),
        ),
    },
    {
        'constant': Constant.ELECTRON_MASS,
        'symbol': 'me',
        'name': 'electron mass',
        'description': "Rest mass of an electron.",
        'amount': 9.1093835611e-28,
        'unit': 'g',
    },
    {
        'constant': Constant.PROTON_MASS,
        'symbol': 'mp',
        'name': 'proton mass',
        'description': "Rest mass of a proton.",
        'amount': 1.67262189821e-24,
        'unit': 'g',
    },
    {
        'constant': Constant.STEFAN_BOLTZMANN,
        'symbol': 'σ',
        'name': 'Stefan-Boltzmann constant',
        'description': "Power radiated by a black body per area and K⁴.",
        'amount': 5.67036713e-08,
        'unit': ('quotient', 'W/m²', ('power', 'K', 4)),
    },
    {
        'constant': Constant.HUBBLE_CONSTANT,
        'symbol': 'H0',
        'name': 'Hubble constant',
        'description': "Expansion rate of the universe.",
        'amount': 71.9,
        'unit': ('quotient', ('kilo', 'm/s'), ('mega', 'pc')),
    },
    {
        'constant': Constant.CAESIUM_FREQUENCY,
        'symbol': 'Δν',
        'name': 'caesium frequency',
        'description': "Hyperfine transition frequency of caesium 133.",
        'amount': 9192631770,
        'unit': 'Hz',
    },
    {
        'constant': Constant.LUMINOUS_EFFICACY,
        'symbol': 'Kcd',
        'name': 'luminous efficacy',
        'description': "Luminous efficacy of 540 THz radiation.",
        'amount': 683,
        'unit': ('quotient', 'lm', 'W'),
    },
]

_CONSTANTS_TABLE = iterables.Table(_constants)

_DEFINITIONS = {entry['constant']: entry for entry in _constants}


def definition(constant: Constant) -> typing.Dict[str, typing.Any]:
    """Get the table entry for a named constant."""
    return _DEFINITIONS[constant]


def identify(symbol: str) -> typing.Optional[Constant]:
    """Get the identifier of the constant with this symbol, if any."""
    try:
        entry = _CONSTANTS_TABLE(symbol=symbol)
    except iterables.TableLookupError:
        return None
    return entry['constant']
