"""Definitions of well-known units of measure.

Each entry in `_units` describes one catalog unit. Every entry has a
canonical identifier (``'unit'``), a ``'symbol'``, a ``'name'``, a
``'type'`` and a ``'description'``. An entry may also define

- ``'conversion'``: ``(factor, abscissa)`` or ``(factor, abscissa, offset)``;
- ``'bridge'``: ``(factor, abscissa)`` linking the unit to another system;
- ``'product'`` or ``'quotient'``: a pair of unit expressions;
- ``'power'``: ``(base, exponent)``;
- ``'scaling'``: the scaling factor of a composite unit.

A unit expression is a `Unit`, a catalog symbol, a ``(prefix name,
expression)`` pair, or one of ``('product', a, b)``,
``('quotient', a, b)`` and ``('power', a, n)``. A factor is a number, a
`~constants.Constant` (its amount) or a ``(Constant, Unit)`` pair (its
amount in that unit).
`~system.MeasurementSystem` instantiates entries on demand.
"""

import enum
import math
import typing

from caliper.core import iterables
from caliper.core.constants import Constant
from caliper.core.dimensions import UnitType


class Unit(enum.Enum):
    """Canonical identifiers of catalog units."""

    # dimensionless
    ONE = enum.auto()
    PERCENT = enum.auto()

    # time
    SECOND = enum.auto()
    MINUTE = enum.auto()
    HOUR = enum.auto()
    DAY = enum.auto()
    WEEK = enum.auto()
    JULIAN_YEAR = enum.auto()
    SQUARE_SECOND = enum.auto()

    # substance amount
    MOLE = enum.auto()
    EQUIVALENT = enum.auto()
    INTERNATIONAL_UNIT = enum.auto()

    # other
    DECIBEL = enum.auto()
    RADIAN = enum.auto()
    STERADIAN = enum.auto()
    DEGREE = enum.auto()
    ARC_SECOND = enum.auto()
    BIT = enum.auto()
    BYTE = enum.auto()

    # SI
    METRE = enum.auto()
    DIOPTER = enum.auto()
    KILOGRAM = enum.auto()
    TONNE = enum.auto()
    KELVIN = enum.auto()
    AMPERE = enum.auto()
    CANDELA = enum.auto()
    MOLARITY = enum.auto()
    GRAM = enum.auto()
    CARAT = enum.auto()
    SQUARE_METRE = enum.auto()
    HECTARE = enum.auto()
    METRE_PER_SEC = enum.auto()
    METRE_PER_SEC_SQUARED = enum.auto()
    CUBIC_METRE = enum.auto()
    LITRE = enum.auto()
    CUBIC_METRE_PER_SEC = enum.auto()
    KILOGRAM_PER_SEC = enum.auto()
    KILOGRAM_PER_CU_METRE = enum.auto()
    PASCAL_SECOND = enum.auto()
    SQUARE_METRE_PER_SEC = enum.auto()
    CALORIE = enum.auto()
    NEWTON = enum.auto()
    NEWTON_METRE = enum.auto()
    JOULE = enum.auto()
    ELECTRON_VOLT = enum.auto()
    WATT_HOUR = enum.auto()
    WATT = enum.auto()
    HERTZ = enum.auto()
    RAD_PER_SEC = enum.auto()
    PASCAL = enum.auto()
    ATMOSPHERE = enum.auto()
    BAR = enum.auto()
    COULOMB = enum.auto()
    VOLT = enum.auto()
    OHM = enum.auto()
    FARAD = enum.auto()
    FARAD_PER_METRE = enum.auto()
    AMPERE_PER_METRE = enum.auto()
    WEBER = enum.auto()
    TESLA = enum.auto()
    HENRY = enum.auto()
    SIEMENS = enum.auto()
    CELSIUS = enum.auto()
    LUMEN = enum.auto()
    LUX = enum.auto()
    BECQUEREL = enum.auto()
    GRAY = enum.auto()
    SIEVERT = enum.auto()
    SIEVERTS_PER_HOUR = enum.auto()
    KATAL = enum.auto()
    UNIT = enum.auto()
    ANGSTROM = enum.auto()
    WATTS_PER_SQ_METRE = enum.auto()
    PARSEC = enum.auto()
    ASTRONOMICAL_UNIT = enum.auto()

    # customary
    RANKINE = enum.auto()
    FAHRENHEIT = enum.auto()
    POUND_MASS = enum.auto()
    OUNCE = enum.auto()
    TROY_OUNCE = enum.auto()
    SLUG = enum.auto()
    GRAIN = enum.auto()
    FOOT = enum.auto()
    INCH = enum.auto()
    MIL = enum.auto()
    POINT = enum.auto()
    YARD = enum.auto()
    MILE = enum.auto()
    NAUTICAL_MILE = enum.auto()
    FATHOM = enum.auto()
    PSI = enum.auto()
    IN_HG = enum.auto()
    SQUARE_INCH = enum.auto()
    SQUARE_FOOT = enum.auto()
    SQUARE_YARD = enum.auto()
    ACRE = enum.auto()
    CUBIC_INCH = enum.auto()
    CUBIC_FOOT = enum.auto()
    CUBIC_FEET_PER_SEC = enum.auto()
    CORD = enum.auto()
    CUBIC_YARD = enum.auto()
    FEET_PER_SEC = enum.auto()
    KNOT = enum.auto()
    FEET_PER_SEC_SQUARED = enum.auto()
    HP = enum.auto()
    BTU = enum.auto()
    FOOT_POUND_FORCE = enum.auto()
    POUND_FORCE = enum.auto()
    MILES_PER_HOUR = enum.auto()
    REV_PER_MIN = enum.auto()

    # US
    US_GALLON = enum.auto()
    US_BARREL = enum.auto()
    US_BUSHEL = enum.auto()
    US_FLUID_OUNCE = enum.auto()
    US_CUP = enum.auto()
    US_PINT = enum.auto()
    US_QUART = enum.auto()
    US_TABLESPOON = enum.auto()
    US_TEASPOON = enum.auto()
    US_TON = enum.auto()

    # British
    BR_GALLON = enum.auto()
    BR_BUSHEL = enum.auto()
    BR_FLUID_OUNCE = enum.auto()
    BR_CUP = enum.auto()
    BR_PINT = enum.auto()
    BR_QUART = enum.auto()
    BR_TABLESPOON = enum.auto()
    BR_TEASPOON = enum.auto()
    BR_TON = enum.auto()

    # financial
    US_DOLLAR = enum.auto()
    EURO = enum.auto()
    YUAN = enum.auto()

    def __str__(self) -> str:
        return self.name


_units = [
    {
        'unit': Unit.ONE,
        'symbol': '1',
        'name': 'one',
        'type': UnitType.UNITY,
        'description': "Dimensionless unity.",
    },
    {
        'unit': Unit.PERCENT,
        'symbol': '%',
        'name': 'percent',
        'type': UnitType.UNITY,
        'description': "One one-hundredth of unity.",
        'conversion': (0.01, Unit.ONE),
    },
    {
        'unit': Unit.SECOND,
        'symbol': 's',
        'name': 'second',
        'type': UnitType.TIME,
        'description': "The SI unit of time.",
    },
    {
        'unit': Unit.MINUTE,
        'symbol': 'min',
        'name': 'minute',
        'type': UnitType.TIME,
        'description': "Sixty seconds.",
        'conversion': (60, Unit.SECOND),
    },
    {
        'unit': Unit.HOUR,
        'symbol': 'hr',
        'name': 'hour',
        'type': UnitType.TIME,
        'description': "Sixty minutes.",
        'conversion': (3600, Unit.SECOND),
    },
    {
        'unit': Unit.DAY,
        'symbol': 'day',
        'name': 'day',
        'type': UnitType.TIME,
        'description': "Twenty-four hours.",
        'conversion': (86400, Unit.SECOND),
    },
    {
        'unit': Unit.WEEK,
        'symbol': 'wk',
        'name': 'week',
        'type': UnitType.TIME,
        'description': "Seven days.",
        'conversion': (604800, Unit.SECOND),
    },
    {
        'unit': Unit.JULIAN_YEAR,
        'symbol': 'yr',
        'name': 'Julian year',
        'type': UnitType.TIME,
        'description': "A year of 365.25 days.",
        'conversion': (3.1557600e+07, Unit.SECOND),
    },
    {
        'unit': Unit.SQUARE_SECOND,
        'symbol': 's²',
        'name': 'square second',
        'type': UnitType.TIME_SQUARED,
        'description': "Second squared.",
        'power': (Unit.SECOND, 2),
    },
    {
        'unit': Unit.MOLE,
        'symbol': 'mol',
        'name': 'mole',
        'type': UnitType.SUBSTANCE_AMOUNT,
        'description': "The SI unit of substance amount.",
    },
    {
        'unit': Unit.EQUIVALENT,
        'symbol': 'eq',
        'name': 'equivalent',
        'type': UnitType.SUBSTANCE_AMOUNT,
        'description': "Chemical equivalent.",
    },
    {
        'unit': Unit.INTERNATIONAL_UNIT,
        'symbol': 'IU',
        'name': 'international unit',
        'type': UnitType.SUBSTANCE_AMOUNT,
        'description': "Biological effect of a substance.",
    },
    {
        'unit': Unit.DECIBEL,
        'symbol': 'dB',
        'name': 'decibel',
        'type': UnitType.INTENSITY,
        'description': "A logarithmic ratio of intensities.",
    },
    {
        'unit': Unit.RADIAN,
        'symbol': 'rad',
        'name': 'radian',
        'type': UnitType.PLANE_ANGLE,
        'description': "The SI unit of plane angle.",
        'conversion': (1, Unit.ONE),
    },
    {
        'unit': Unit.STERADIAN,
        'symbol': 'sr',
        'name': 'steradian',
        'type': UnitType.SOLID_ANGLE,
        'description': "The SI unit of solid angle.",
        'conversion': (1, Unit.ONE),
    },
    {
        'unit': Unit.DEGREE,
        'symbol': '°',
        'name': 'degree',
        'type': UnitType.PLANE_ANGLE,
        'description': "One three-hundred-sixtieth of a circle.",
        'conversion': (math.pi / 180, Unit.RADIAN),
    },
    {
        'unit': Unit.ARC_SECOND,
        'symbol': '″',
        'name': 'arc second',
        'type': UnitType.PLANE_ANGLE,
        'description': "One three-thousand-six-hundredth of a degree.",
        'conversion': (math.pi / 648000, Unit.RADIAN),
    },
    {
        'unit': Unit.BIT,
        'symbol': 'bit',
        'name': 'bit',
        'type': UnitType.COMPUTER_SCIENCE,
        'description': "A binary digit.",
    },
    {
        'unit': Unit.BYTE,
        'symbol': 'B',
        'name': 'byte',
        'type': UnitType.COMPUTER_SCIENCE,
        'description': "Eight bits.",
        'conversion': (8, Unit.BIT),
    },
    {
        'unit': Unit.METRE,
        'symbol': 'm',
        'name': 'metre',
        'type': UnitType.LENGTH,
        'description': "The SI unit of length.",
    },
    {
        'unit': Unit.DIOPTER,
        'symbol': 'dpt',
        'name': 'diopter',
        'type': UnitType.RECIPROCAL_LENGTH,
        'description': "Optical power of a lens.",
        'quotient': (Unit.ONE, Unit.METRE),
    },
    {
        'unit': Unit.KILOGRAM,
        'symbol': 'kg',
        'name': 'kilogram',
        'type': UnitType.MASS,
        'description': "The SI unit of mass.",
    },
    {
        'unit': Unit.TONNE,
        'symbol': 't',
        'name': 'tonne',
        'type': UnitType.MASS,
        'description': "One thousand kilograms.",
        'conversion': (1e+3, Unit.KILOGRAM),
    },
    {
        'unit': Unit.KELVIN,
        'symbol': 'K',
        'name': 'kelvin',
        'type': UnitType.TEMPERATURE,
        'description': "The SI unit of thermodynamic temperature.",
    },
    {
        'unit': Unit.AMPERE,
        'symbol': 'A',
        'name': 'ampere',
        'type': UnitType.ELECTRIC_CURRENT,
        'description': "The SI unit of electric current.",
    },
    {
        'unit': Unit.CANDELA,
        'symbol': 'cd',
        'name': 'candela',
        'type': UnitType.LUMINOSITY,
        'description': "The SI unit of luminous intensity.",
    },
    {
        'unit': Unit.MOLARITY,
        'symbol': 'mol/L',
        'name': 'molarity',
        'type': UnitType.MOLAR_CONCENTRATION,
        'description': "Moles of solute per litre of solution.",
        'quotient': (Unit.MOLE, Unit.LITRE),
    },
    {
        'unit': Unit.GRAM,
        'symbol': 'g',
        'name': 'gram',
        'type': UnitType.MASS,
        'description': "One one-thousandth of a kilogram.",
        'conversion': (1e-3, Unit.KILOGRAM),
    },
    {
        'unit': Unit.CARAT,
        'symbol': 'ct',
        'name': 'carat',
        'type': UnitType.MASS,
        'description': "A unit of mass for gemstones.",
        'conversion': (0.2, Unit.GRAM),
    },
    {
        'unit': Unit.SQUARE_METRE,
        'symbol': 'm²',
        'name': 'square metre',
        'type': UnitType.AREA,
        'description': "The SI unit of area.",
        'power': (Unit.METRE, 2),
    },
    {
        'unit': Unit.HECTARE,
        'symbol': 'ha',
        'name': 'hectare',
        'type': UnitType.AREA,
        'description': "Ten thousand square metres.",
        'conversion': (10000, Unit.SQUARE_METRE),
    },
    {
        'unit': Unit.METRE_PER_SEC,
        'symbol': 'm/s',
        'name': 'metre per second',
        'type': UnitType.VELOCITY,
        'description': "The SI unit of velocity.",
        'quotient': (Unit.METRE, Unit.SECOND),
    },
    {
        'unit': Unit.METRE_PER_SEC_SQUARED,
        'symbol': 'm/s²',
        'name': 'metre per second squared',
        'type': UnitType.ACCELERATION,
        'description': "The SI unit of acceleration.",
        'quotient': (Unit.METRE, Unit.SQUARE_SECOND),
    },
    {
        'unit': Unit.CUBIC_METRE,
        'symbol': 'm³',
        'name': 'cubic metre',
        'type': UnitType.VOLUME,
        'description': "The SI unit of volume.",
        'power': (Unit.METRE, 3),
    },
    {
        'unit': Unit.LITRE,
        'symbol': 'L',
        'name': 'litre',
        'type': UnitType.VOLUME,
        'description': "One one-thousandth of a cubic metre.",
        'conversion': (1e-3, Unit.CUBIC_METRE),
    },
    {
        'unit': Unit.CUBIC_METRE_PER_SEC,
        'symbol': 'm³/s',
        'name': 'cubic metre per second',
        'type': UnitType.VOLUMETRIC_FLOW,
        'description': "The SI unit of volumetric flow.",
        'quotient': (Unit.CUBIC_METRE, Unit.SECOND),
    },
    {
        'unit': Unit.KILOGRAM_PER_SEC,
        'symbol': 'kg/s',
        'name': 'kilogram per second',
        'type': UnitType.MASS_FLOW,
        'description': "The SI unit of mass flow.",
        'quotient': (Unit.KILOGRAM, Unit.SECOND),
    },
    {
        'unit': Unit.KILOGRAM_PER_CU_METRE,
        'symbol': 'kg/m³',
        'name': 'kilogram per cubic metre',
        'type': UnitType.DENSITY,
        'description': "The SI unit of density.",
        'quotient': (Unit.KILOGRAM, Unit.CUBIC_METRE),
    },
    {
        'unit': Unit.PASCAL_SECOND,
        'symbol': 'Pa·s',
        'name': 'pascal second',
        'type': UnitType.DYNAMIC_VISCOSITY,
        'description': "The SI unit of dynamic viscosity.",
        'product': (Unit.PASCAL, Unit.SECOND),
    },
    {
        'unit': Unit.SQUARE_METRE_PER_SEC,
        'symbol': 'm²/s',
        'name': 'square metre per second',
        'type': UnitType.KINEMATIC_VISCOSITY,
        'description': "The SI unit of kinematic viscosity.",
        'quotient': (Unit.SQUARE_METRE, Unit.SECOND),
    },
    {
        'unit': Unit.CALORIE,
        'symbol': 'cal',
        'name': 'calorie',
        'type': UnitType.ENERGY,
        'description': "The thermochemical calorie.",
        'conversion': (4.184, Unit.JOULE),
    },
    {
        'unit': Unit.NEWTON,
        'symbol': 'N',
        'name': 'newton',
        'type': UnitType.FORCE,
        'description': "The SI unit of force.",
        'product': (Unit.KILOGRAM, Unit.METRE_PER_SEC_SQUARED),
    },
    {
        'unit': Unit.NEWTON_METRE,
        'symbol': 'N·m',
        'name': 'newton metre',
        'type': UnitType.ENERGY,
        'description': "The SI unit of torque.",
        'product': (Unit.NEWTON, Unit.METRE),
    },
    {
        'unit': Unit.JOULE,
        'symbol': 'J',
        'name': 'joule',
        'type': UnitType.ENERGY,
        'description': "The SI unit of energy.",
        'product': (Unit.NEWTON, Unit.METRE),
    },
    {
        'unit': Unit.ELECTRON_VOLT,
        'symbol': 'eV',
        'name': 'electron volt',
        'type': UnitType.ENERGY,
        'description': "The energy of an electron across one volt.",
        'product': (Unit.COULOMB, Unit.VOLT),
        'scaling': Constant.ELEMENTARY_CHARGE,
    },
    {
        'unit': Unit.WATT_HOUR,
        'symbol': 'Wh',
        'name': 'watt hour',
        'type': UnitType.ENERGY,
        'description': "One watt for one hour.",
        'product': (Unit.WATT, Unit.HOUR),
    },
    {
        'unit': Unit.WATT,
        'symbol': 'W',
        'name': 'watt',
        'type': UnitType.POWER,
        'description': "The SI unit of power.",
        'quotient': (Unit.JOULE, Unit.SECOND),
    },
    {
        'unit': Unit.HERTZ,
        'symbol': 'Hz',
        'name': 'hertz',
        'type': UnitType.FREQUENCY,
        'description': "The SI unit of frequency.",
        'quotient': (Unit.ONE, Unit.SECOND),
    },
    {
        'unit': Unit.RAD_PER_SEC,
        'symbol': 'rad/s',
        'name': 'radian per second',
        'type': UnitType.FREQUENCY,
        'description': "Angular frequency.",
        'quotient': (Unit.RADIAN, Unit.SECOND),
        'conversion': (1 / (2 * math.pi), Unit.HERTZ),
    },
    {
        'unit': Unit.PASCAL,
        'symbol': 'Pa',
        'name': 'pascal',
        'type': UnitType.PRESSURE,
        'description': "The SI unit of pressure.",
        'quotient': (Unit.NEWTON, Unit.SQUARE_METRE),
    },
    {
        'unit': Unit.ATMOSPHERE,
        'symbol': 'atm',
        'name': 'atmosphere',
        'type': UnitType.PRESSURE,
        'description': "Standard atmospheric pressure.",
        'conversion': (101325, Unit.PASCAL),
    },
    {
        'unit': Unit.BAR,
        'symbol': 'bar',
        'name': 'bar',
        'type': UnitType.PRESSURE,
        'description': "One hundred thousand pascals.",
        'conversion': (1e+05, Unit.PASCAL),
    },
    {
        'unit': Unit.COULOMB,
        'symbol': 'C',
        'name': 'coulomb',
        'type': UnitType.ELECTRIC_CHARGE,
        'description': "The SI unit of electric charge.",
        'product': (Unit.AMPERE, Unit.SECOND),
    },
    {
        'unit': Unit.VOLT,
        'symbol': 'V',
        'name': 'volt',
        'type': UnitType.ELECTROMOTIVE_FORCE,
        'description': "The SI unit of electric potential.",
        'quotient': (Unit.WATT, Unit.AMPERE),
    },
    {
        'unit': Unit.OHM,
        'symbol': 'Ω',
        'name': 'ohm',
        'type': UnitType.ELECTRIC_RESISTANCE,
        'description': "The SI unit of electric resistance.",
        'quotient': (Unit.VOLT, Unit.AMPERE),
    },
    {
        'unit': Unit.FARAD,
        'symbol': 'F',
        'name': 'farad',
        'type': UnitType.ELECTRIC_CAPACITANCE,
        'description': "The SI unit of capacitance.",
        'quotient': (Unit.COULOMB, Unit.VOLT),
    },
    {
        'unit': Unit.FARAD_PER_METRE,
        'symbol': 'F/m',
        'name': 'farad per metre',
        'type': UnitType.ELECTRIC_PERMITTIVITY,
        'description': "The SI unit of permittivity.",
        'quotient': (Unit.FARAD, Unit.METRE),
    },
    {
        'unit': Unit.AMPERE_PER_METRE,
        'symbol': 'A/m',
        'name': 'ampere per metre',
        'type': UnitType.ELECTRIC_FIELD_STRENGTH,
        'description': "The SI unit of magnetic field strength.",
        'quotient': (Unit.AMPERE, Unit.METRE),
    },
    {
        'unit': Unit.WEBER,
        'symbol': 'Wb',
        'name': 'weber',
        'type': UnitType.MAGNETIC_FLUX,
        'description': "The SI unit of magnetic flux.",
        'product': (Unit.VOLT, Unit.SECOND),
    },
    {
        'unit': Unit.TESLA,
        'symbol': 'T',
        'name': 'tesla',
        'type': UnitType.MAGNETIC_FLUX_DENSITY,
        'description': "The SI unit of magnetic flux density.",
        'quotient': (Unit.WEBER, Unit.SQUARE_METRE),
    },
    {
        'unit': Unit.HENRY,
        'symbol': 'H',
        'name': 'henry',
        'type': UnitType.ELECTRIC_INDUCTANCE,
        'description': "The SI unit of inductance.",
        'quotient': (Unit.WEBER, Unit.AMPERE),
    },
    {
        'unit': Unit.SIEMENS,
        'symbol': 'S',
        'name': 'siemens',
        'type': UnitType.ELECTRIC_CONDUCTANCE,
        'description': "The SI unit of conductance.",
        'quotient': (Unit.AMPERE, Unit.VOLT),
    },
    {
        'unit': Unit.CELSIUS,
        'symbol': '°C',
        'name': 'degree Celsius',
        'type': UnitType.TEMPERATURE,
        'description': "Kelvin shifted by 273.15.",
        'conversion': (1, Unit.KELVIN, 273.15),
    },
    {
        'unit': Unit.LUMEN,
        'symbol': 'lm',
        'name': 'lumen',
        'type': UnitType.LUMINOUS_FLUX,
        'description': "The SI unit of luminous flux.",
        'product': (Unit.CANDELA, Unit.STERADIAN),
    },
    {
        'unit': Unit.LUX,
        'symbol': 'lx',
        'name': 'lux',
        'type': UnitType.ILLUMINANCE,
        'description': "The SI unit of illuminance.",
        'quotient': (Unit.LUMEN, Unit.SQUARE_METRE),
    },
    {
        'unit': Unit.BECQUEREL,
        'symbol': 'Bq',
        'name': 'becquerel',
        'type': UnitType.RADIOACTIVITY,
        'description': "The SI unit of radioactivity.",
        'quotient': (Unit.ONE, Unit.SECOND),
    },
    {
        'unit': Unit.GRAY,
        'symbol': 'Gy',
        'name': 'gray',
        'type': UnitType.RADIATION_DOSE_ABSORBED,
        'description': "The SI unit of absorbed dose.",
        'quotient': (Unit.JOULE, Unit.KILOGRAM),
    },
    {
        'unit': Unit.SIEVERT,
        'symbol': 'Sv',
        'name': 'sievert',
        'type': UnitType.RADIATION_DOSE_EFFECTIVE,
        'description': "The SI unit of effective dose.",
        'quotient': (Unit.JOULE, Unit.KILOGRAM),
    },
    {
        'unit': Unit.SIEVERTS_PER_HOUR,
        'symbol': 'Sv/hr',
        'name': 'sievert per hour',
        'type': UnitType.RADIATION_DOSE_RATE,
        'description': "Effective dose rate.",
        'quotient': (Unit.SIEVERT, Unit.HOUR),
    },
    {
        'unit': Unit.KATAL,
        'symbol': 'kat',
        'name': 'katal',
        'type': UnitType.CATALYTIC_ACTIVITY,
        'description': "The SI unit of catalytic activity.",
        'quotient': (Unit.MOLE, Unit.SECOND),
    },
    {
        'unit': Unit.UNIT,
        'symbol': 'U',
        'name': 'enzyme unit',
        'type': UnitType.CATALYTIC_ACTIVITY,
        'description': "One micromole per minute.",
        'conversion': (1e-06 / 60, Unit.KATAL),
    },
    {
        'unit': Unit.ANGSTROM,
        'symbol': 'Å',
        'name': 'ångström',
        'type': UnitType.LENGTH,
        'description': "One ten-billionth of a metre.",
        'conversion': (0.1, ('nano', Unit.METRE)),
    },
    {
        'unit': Unit.WATTS_PER_SQ_METRE,
        'symbol': 'W/m²',
        'name': 'watt per square metre',
        'type': UnitType.IRRADIANCE,
        'description': "The SI unit of irradiance.",
        'quotient': (Unit.WATT, Unit.SQUARE_METRE),
    },
    {
        'unit': Unit.PARSEC,
        'symbol': 'pc',
        'name': 'parsec',
        'type': UnitType.LENGTH,
        'description': "The distance at which one astronomical unit"
                       " subtends one arc second.",
        'conversion': (3.08567758149137e+16, Unit.METRE),
    },
    {
        'unit': Unit.ASTRONOMICAL_UNIT,
        'symbol': 'au',
        'name': 'astronomical unit',
        'type': UnitType.LENGTH,
        'description': "The mean distance from Earth to the Sun.",
        'conversion': (1.49597870700e+11, Unit.METRE),
    },
    {
        'unit': Unit.RANKINE,
        'symbol': '°R',
        'name': 'degree Rankine',
        'type': UnitType.TEMPERATURE,
        'description': "The customary absolute temperature.",
        'bridge': (5 / 9, Unit.KELVIN),
    },
    {
        'unit': Unit.FAHRENHEIT,
        'symbol': '°F',
        'name': 'degree Fahrenheit',
        'type': UnitType.TEMPERATURE,
        'description': "Rankine shifted by 459.67.",
        'conversion': (1, Unit.RANKINE, 459.67),
    },
    {
        'unit': Unit.POUND_MASS,
        'symbol': 'lbm',
        'name': 'pound mass',
        'type': UnitType.MASS,
        'description': "The avoirdupois pound.",
        'bridge': (0.45359237, Unit.KILOGRAM),
    },
    {
        'unit': Unit.OUNCE,
        'symbol': 'oz',
        'name': 'ounce',
        'type': UnitType.MASS,
        'description': "One sixteenth of a pound.",
        'conversion': (0.0625, Unit.POUND_MASS),
    },
    {
        'unit': Unit.TROY_OUNCE,
        'symbol': 'oz t',
        'name': 'troy ounce',
        'type': UnitType.MASS,
        'description': "A unit of mass for precious metals.",
        'conversion': (0.06857142857, Unit.POUND_MASS),
    },
    {
        'unit': Unit.SLUG,
        'symbol': 'slug',
        'name': 'slug',
        'type': UnitType.MASS,
        'description': "The mass that one pound-force accelerates"
                       " by one foot per second squared.",
        'conversion': (
            (Constant.GRAVITY, Unit.FEET_PER_SEC_SQUARED),
            Unit.POUND_MASS,
        ),
    },
    {
        'unit': Unit.GRAIN,
        'symbol': 'gr',
        'name': 'grain',
        'type': UnitType.MASS,
        'description': "One seven-thousandth of a pound.",
        'conversion': (1 / 7000, Unit.POUND_MASS),
    },
    {
        'unit': Unit.FOOT,
        'symbol': 'ft',
        'name': 'foot',
        'type': UnitType.LENGTH,
        'description': "The international foot.",
        'bridge': (0.3048, Unit.METRE),
    },
    {
        'unit': Unit.INCH,
        'symbol': 'in',
        'name': 'inch',
        'type': UnitType.LENGTH,
        'description': "One twelfth of a foot.",
        'conversion': (1 / 12, Unit.FOOT),
    },
    {
        'unit': Unit.MIL,
        'symbol': 'mil',
        'name': 'mil',
        'type': UnitType.LENGTH,
        'description': "One one-thousandth of an inch.",
        'conversion': (1e-3, Unit.INCH),
    },
    {
        'unit': Unit.POINT,
        'symbol': 'pt',
        'name': 'point',
        'type': UnitType.LENGTH,
        'description': "The typographic point.",
        'conversion': (1 / 72, Unit.INCH),
    },
    {
        'unit': Unit.YARD,
        'symbol': 'yd',
        'name': 'yard',
        'type': UnitType.LENGTH,
        'description': "Three feet.",
        'conversion': (3, Unit.FOOT),
    },
    {
        'unit': Unit.MILE,
        'symbol': 'mi',
        'name': 'mile',
        'type': UnitType.LENGTH,
        'description': "The statute mile.",
        'conversion': (5280, Unit.FOOT),
    },
    {
        'unit': Unit.NAUTICAL_MILE,
        'symbol': 'NM',
        'name': 'nautical mile',
        'type': UnitType.LENGTH,
        'description': "The Admiralty nautical mile.",
        'conversion': (6080, Unit.FOOT),
    },
    {
        'unit': Unit.FATHOM,
        'symbol': 'fth',
        'name': 'fathom',
        'type': UnitType.LENGTH,
        'description': "Six feet.",
        'conversion': (6, Unit.FOOT),
    },
    {
        'unit': Unit.PSI,
        'symbol': 'psi',
        'name': 'pound per square inch',
        'type': UnitType.PRESSURE,
        'description': "Pound-force per square inch.",
        'quotient': (Unit.POUND_FORCE, Unit.SQUARE_INCH),
    },
    {
        'unit': Unit.IN_HG,
        'symbol': 'inHg',
        'name': 'inch of mercury',
        'type': UnitType.PRESSURE,
        'description': "The pressure of a one-inch column of mercury.",
        'conversion': (0.4911531047, Unit.PSI),
    },
    {
        'unit': Unit.SQUARE_INCH,
        'symbol': 'in²',
        'name': 'square inch',
        'type': UnitType.AREA,
        'description': "Inch squared.",
        'power': (Unit.INCH, 2),
        'conversion': (1 / 144, Unit.SQUARE_FOOT),
    },
    {
        'unit': Unit.SQUARE_FOOT,
        'symbol': 'ft²',
        'name': 'square foot',
        'type': UnitType.AREA,
        'description': "Foot squared.",
        'power': (Unit.FOOT, 2),
    },
    {
        'unit': Unit.SQUARE_YARD,
        'symbol': 'yd²',
        'name': 'square yard',
        'type': UnitType.AREA,
        'description': "Yard squared.",
        'power': (Unit.YARD, 2),
    },
    {
        'unit': Unit.ACRE,
        'symbol': 'acre',
        'name': 'acre',
        'type': UnitType.AREA,
        'description': "The international acre.",
        'conversion': (43560, Unit.SQUARE_FOOT),
    },
    {
        'unit': Unit.CUBIC_INCH,
        'symbol': 'in³',
        'name': 'cubic inch',
        'type': UnitType.VOLUME,
        'description': "Inch cubed.",
        'power': (Unit.INCH, 3),
        'conversion': (1 / 1728, Unit.CUBIC_FOOT),
    },
    {
        'unit': Unit.CUBIC_FOOT,
        'symbol': 'ft³',
        'name': 'cubic foot',
        'type': UnitType.VOLUME,
        'description': "Foot cubed.",
        'power': (Unit.FOOT, 3),
    },
    {
        'unit': Unit.CUBIC_FEET_PER_SEC,
        'symbol': 'ft³/s',
        'name': 'cubic foot per second',
        'type': UnitType.VOLUMETRIC_FLOW,
        'description': "Customary volumetric flow.",
        'quotient': (Unit.CUBIC_FOOT, Unit.SECOND),
    },
    {
        'unit': Unit.CORD,
        'symbol': 'cord',
        'name': 'cord',
        'type': UnitType.VOLUME,
        'description': "A unit of volume for firewood.",
        'conversion': (128, Unit.CUBIC_FOOT),
    },
    {
        'unit': Unit.CUBIC_YARD,
        'symbol': 'yd³',
        'name': 'cubic yard',
        'type': UnitType.VOLUME,
        'description': "Yard cubed.",
        'power': (Unit.YARD, 3),
    },
    {
        'unit': Unit.FEET_PER_SEC,
        'symbol': 'ft/s',
        'name': 'foot per second',
        'type': UnitType.VELOCITY,
        'description': "Customary velocity.",
        'quotient': (Unit.FOOT, Unit.SECOND),
    },
    {
        'unit': Unit.KNOT,
        'symbol': 'kn',
        'name': 'knot',
        'type': UnitType.VELOCITY,
        'description': "One nautical mile per hour.",
        'conversion': (6080 / 3600, Unit.FEET_PER_SEC),
    },
    {
        'unit': Unit.FEET_PER_SEC_SQUARED,
        'symbol': 'ft/s²',
        'name': 'foot per second squared',
        'type': UnitType.ACCELERATION,
        'description': "Customary acceleration.",
        'quotient': (Unit.FOOT, Unit.SQUARE_SECOND),
    },
    {
        'unit': Unit.HP,
        'symbol': 'hp',
        'name': 'horsepower',
        'type': UnitType.POWER,
        'description': "Mechanical horsepower.",
        'product': (Unit.POUND_FORCE, Unit.FEET_PER_SEC),
        'scaling': 550,
    },
    {
        'unit': Unit.BTU,
        'symbol': 'BTU',
        'name': 'British thermal unit',
        'type': UnitType.ENERGY,
        'description': "The international-table BTU.",
        'conversion': (778.1692622659652, Unit.FOOT_POUND_FORCE),
    },
    {
        'unit': Unit.FOOT_POUND_FORCE,
        'symbol': 'ft·lbf',
        'name': 'foot pound force',
        'type': UnitType.ENERGY,
        'description': "Customary unit of energy.",
        'product': (Unit.FOOT, Unit.POUND_FORCE),
    },
    {
        'unit': Unit.POUND_FORCE,
        'symbol': 'lbf',
        'name': 'pound force',
        'type': UnitType.FORCE,
        'description': "The force of gravity on one pound mass.",
        'product': (Unit.POUND_MASS, Unit.FEET_PER_SEC_SQUARED),
        'scaling': (Constant.GRAVITY, Unit.FEET_PER_SEC_SQUARED),
    },
    {
        'unit': Unit.MILES_PER_HOUR,
        'symbol': 'mph',
        'name': 'mile per hour',
        'type': UnitType.VELOCITY,
        'description': "Statute miles per hour.",
        'conversion': (5280 / 3600, Unit.FEET_PER_SEC),
    },
    {
        'unit': Unit.REV_PER_MIN,
        'symbol': 'rpm',
        'name': 'revolution per minute',
        'type': UnitType.FREQUENCY,
        'description': "Rotational frequency.",
        'quotient': (Unit.ONE, Unit.MINUTE),
    },
    {
        'unit': Unit.US_GALLON,
        'symbol': 'gal',
        'name': 'US gallon',
        'type': UnitType.VOLUME,
        'description': "The US liquid gallon.",
        'conversion': (231, Unit.CUBIC_INCH),
    },
    {
        'unit': Unit.US_BARREL,
        'symbol': 'bbl',
        'name': 'US barrel',
        'type': UnitType.VOLUME,
        'description': "The US oil barrel.",
        'conversion': (42, Unit.US_GALLON),
    },
    {
        'unit': Unit.US_BUSHEL,
        'symbol': 'bu',
        'name': 'US bushel',
        'type': UnitType.VOLUME,
        'description': "The US dry bushel.",
        'conversion': (2150.42058, Unit.CUBIC_INCH),
    },
    {
        'unit': Unit.US_FLUID_OUNCE,
        'symbol': 'fl oz',
        'name': 'US fluid ounce',
        'type': UnitType.VOLUME,
        'description': "One one-hundred-twenty-eighth of a US gallon.",
        'conversion': (0.0078125, Unit.US_GALLON),
    },
    {
        'unit': Unit.US_CUP,
        'symbol': 'cup',
        'name': 'US cup',
        'type': UnitType.VOLUME,
        'description': "Eight US fluid ounces.",
        'conversion': (8, Unit.US_FLUID_OUNCE),
    },
    {
        'unit': Unit.US_PINT,
        'symbol': 'pint',
        'name': 'US pint',
        'type': UnitType.VOLUME,
        'description': "Sixteen US fluid ounces.",
        'conversion': (16, Unit.US_FLUID_OUNCE),
    },
    {
        'unit': Unit.US_QUART,
        'symbol': 'qt',
        'name': 'US quart',
        'type': UnitType.VOLUME,
        'description': "Thirty-two US fluid ounces.",
        'conversion': (32, Unit.US_FLUID_OUNCE),
    },
    {
        'unit': Unit.US_TABLESPOON,
        'symbol': 'tbsp',
        'name': 'US tablespoon',
        'type': UnitType.VOLUME,
        'description': "Half a US fluid ounce.",
        'conversion': (0.5, Unit.US_FLUID_OUNCE),
    },
    {
        'unit': Unit.US_TEASPOON,
        'symbol': 'tsp',
        'name': 'US teaspoon',
        'type': UnitType.VOLUME,
        'description': "One sixth of a US fluid ounce.",
        'conversion': (1 / 6, Unit.US_FLUID_OUNCE),
    },
    {
        'unit': Unit.US_TON,
        'symbol': 'ton',
        'name': 'US ton',
        'type': UnitType.MASS,
        'description': "The short ton.",
        'conversion': (2000, Unit.POUND_MASS),
    },
    {
        'unit': Unit.BR_GALLON,
        'symbol': 'gal(UK)',
        'name': 'imperial gallon',
        'type': UnitType.VOLUME,
        'description': "The British imperial gallon.",
        'conversion': (277.4194327916215, Unit.CUBIC_INCH),
    },
    {
        'unit': Unit.BR_BUSHEL,
        'symbol': 'bu(UK)',
        'name': 'imperial bushel',
        'type': UnitType.VOLUME,
        'description': "Eight imperial gallons.",
        'conversion': (8, Unit.BR_GALLON),
    },
    {
        'unit': Unit.BR_FLUID_OUNCE,
        'symbol': 'fl oz(UK)',
        'name': 'imperial fluid ounce',
        'type': UnitType.VOLUME,
        'description': "One one-hundred-sixtieth of an imperial gallon.",
        'conversion': (0.00625, Unit.BR_GALLON),
    },
    {
        'unit': Unit.BR_CUP,
        'symbol': 'cup(UK)',
        'name': 'imperial cup',
        'type': UnitType.VOLUME,
        'description': "Eight imperial fluid ounces.",
        'conversion': (8, Unit.BR_FLUID_OUNCE),
    },
    {
        'unit': Unit.BR_PINT,
        'symbol': 'pint(UK)',
        'name': 'imperial pint',
        'type': UnitType.VOLUME,
        'description': "Twenty imperial fluid ounces.",
        'conversion': (20, Unit.BR_FLUID_OUNCE),
    },
    {
        'unit': Unit.BR_QUART,
        'symbol': 'qt(UK)',
        'name': 'imperial quart',
        'type': UnitType.VOLUME,
        'description': "Forty imperial fluid ounces.",
        'conversion': (40, Unit.BR_FLUID_OUNCE),
    },
    {
        'unit': Unit.BR_TABLESPOON,
        'symbol': 'tbsp(UK)',
        'name': 'imperial tablespoon',
        'type': UnitType.VOLUME,
        'description': "Five eighths of an imperial fluid ounce.",
        'conversion': (0.625, Unit.BR_FLUID_OUNCE),
    },
    {
        'unit': Unit.BR_TEASPOON,
        'symbol': 'tsp(UK)',
        'name': 'imperial teaspoon',
        'type': UnitType.VOLUME,
        'description': "Five twenty-fourths of an imperial fluid ounce.",
        'conversion': (5 / 24, Unit.BR_FLUID_OUNCE),
    },
    {
        'unit': Unit.BR_TON,
        'symbol': 'ton(UK)',
        'name': 'imperial ton',
        'type': UnitType.MASS,
        'description': "The long ton.",
        'conversion': (2240, Unit.POUND_MASS),
    },
    {
        'unit': Unit.US_DOLLAR,
        'symbol': '$',
        'name': 'US dollar',
        'type': UnitType.CURRENCY,
        'description': "The currency of the United States.",
    },
    {
        'unit': Unit.EURO,
        'symbol': '€',
        'name': 'euro',
        'type': UnitType.CURRENCY,
        'description': "The currency of the euro area.",
    },
    {
        'unit': Unit.YUAN,
        'symbol': '¥',
        'name': 'yuan',
        'type': UnitType.CURRENCY,
        'description': "The currency of China.",
    },
]

_UNITS_TABLE = iterables.Table(_units)

_DEFINITIONS = {entry['unit']: entry for entry in _units}


def definition(unit: Unit) -> typing.Dict[str, typing.Any]:
    """Get the catalog entry for a canonical unit."""
    return _DEFINITIONS[unit]


def identify(symbol: str) -> typing.Optional[Unit]:
    """Get the canonical identifier of the catalog unit with this symbol."""
    try:
        entry = _UNITS_TABLE(symbol=symbol)
    except iterables.TableLookupError:
        return None
    return entry['unit']


def of_type(unit_type: UnitType) -> typing.List[Unit]:
    """Get the canonical identifiers of all catalog units of a type."""
    return [entry['unit'] for entry in _units if entry['type'] is unit_type]
