import enum
import typing


class UnitType(enum.Enum):
    """The physical (or other) dimension of a unit of measure.

    Only units of measure with the same type, or for which at least one type
    is `UNCLASSIFIED` or `UNITY`, can be converted.
    """

    # dimensionless "1"
    UNITY = enum.auto()

    # fundamental
    LENGTH = enum.auto()
    MASS = enum.auto()
    TIME = enum.auto()
    ELECTRIC_CURRENT = enum.auto()
    TEMPERATURE = enum.auto()
    SUBSTANCE_AMOUNT = enum.auto()
    LUMINOSITY = enum.auto()

    # other physical
    AREA = enum.auto()
    VOLUME = enum.auto()
    DENSITY = enum.auto()
    VELOCITY = enum.auto()
    VOLUMETRIC_FLOW = enum.auto()
    MASS_FLOW = enum.auto()
    FREQUENCY = enum.auto()
    ACCELERATION = enum.auto()
    FORCE = enum.auto()
    PRESSURE = enum.auto()
    ENERGY = enum.auto()
    POWER = enum.auto()
    ELECTRIC_CHARGE = enum.auto()
    ELECTROMOTIVE_FORCE = enum.auto()
    ELECTRIC_RESISTANCE = enum.auto()
    ELECTRIC_CAPACITANCE = enum.auto()
    ELECTRIC_PERMITTIVITY = enum.auto()
    ELECTRIC_FIELD_STRENGTH = enum.auto()
    MAGNETIC_FLUX = enum.auto()
    MAGNETIC_FLUX_DENSITY = enum.auto()
    ELECTRIC_INDUCTANCE = enum.auto()
    ELECTRIC_CONDUCTANCE = enum.auto()
    LUMINOUS_FLUX = enum.auto()
    ILLUMINANCE = enum.auto()
    RADIATION_DOSE_ABSORBED = enum.auto()
    RADIATION_DOSE_EFFECTIVE = enum.auto()
    RADIATION_DOSE_RATE = enum.auto()
    RADIOACTIVITY = enum.auto()
    CATALYTIC_ACTIVITY = enum.auto()
    DYNAMIC_VISCOSITY = enum.auto()
    KINEMATIC_VISCOSITY = enum.auto()
    RECIPROCAL_LENGTH = enum.auto()
    PLANE_ANGLE = enum.auto()
    SOLID_ANGLE = enum.auto()
    INTENSITY = enum.auto()
    COMPUTER_SCIENCE = enum.auto()
    TIME_SQUARED = enum.auto()
    MOLAR_CONCENTRATION = enum.auto()
    IRRADIANCE = enum.auto()

    # currency
    CURRENCY = enum.auto()

    # reserved for custom units of measure
    UNCLASSIFIED = enum.auto()

    def __str__(self) -> str:
        return self.name


FUNDAMENTAL = (
    UnitType.LENGTH,
    UnitType.MASS,
    UnitType.TIME,
    UnitType.ELECTRIC_CURRENT,
    UnitType.TEMPERATURE,
    UnitType.SUBSTANCE_AMOUNT,
    UnitType.LUMINOSITY,
)
"""The unit types from which all other physical types derive."""


_L = UnitType.LENGTH
_M = UnitType.MASS
_T = UnitType.TIME
_I = UnitType.ELECTRIC_CURRENT
_N = UnitType.SUBSTANCE_AMOUNT
_J = UnitType.LUMINOSITY

_dimensions = {
    UnitType.AREA: {_L: 2},
    UnitType.VOLUME: {_L: 3},
    UnitType.DENSITY: {_M: 1, _L: -3},
    UnitType.VELOCITY: {_L: 1, _T: -1},
    UnitType.VOLUMETRIC_FLOW: {_L: 3, _T: -1},
    UnitType.MASS_FLOW: {_M: 1, _T: -1},
    UnitType.FREQUENCY: {_T: -1},
    UnitType.ACCELERATION: {_L: 1, _T: -2},
    UnitType.FORCE: {_M: 1, _L: 1, _T: -2},
    UnitType.PRESSURE: {_M: 1, _L: -1, _T: -2},
    UnitType.ENERGY: {_M: 1, _L: 2, _T: -2},
    UnitType.POWER: {_M: 1, _L: 2, _T: -3},
    UnitType.ELECTRIC_CHARGE: {_I: 1, _T: 1},
    UnitType.ELECTROMOTIVE_FORCE: {_M: 1, _L: 2, _I: -1, _T: -3},
    UnitType.ELECTRIC_RESISTANCE: {_M: 1, _L: 2, _I: -2, _T: -3},
    UnitType.ELECTRIC_CAPACITANCE: {_M: -1, _L: -2, _I: 2, _T: 4},
    UnitType.ELECTRIC_PERMITTIVITY: {_M: -1, _L: -3, _I: 2, _T: 4},
    UnitType.ELECTRIC_FIELD_STRENGTH: {_I: 1, _L: -1},
    UnitType.MAGNETIC_FLUX: {_M: 1, _L: 2, _I: -1, _T: -2},
    UnitType.MAGNETIC_FLUX_DENSITY: {_M: 1, _I: -1, _T: -2},
    UnitType.ELECTRIC_INDUCTANCE: {_M: 1, _L: 2, _I: -2, _T: -2},
    UnitType.ELECTRIC_CONDUCTANCE: {_M: -1, _L: -2, _I: 2, _T: 3},
    UnitType.LUMINOUS_FLUX: {_J: 1},
    UnitType.ILLUMINANCE: {_J: 1, _L: -2},
    UnitType.RADIATION_DOSE_ABSORBED: {_L: 2, _T: -2},
    UnitType.RADIATION_DOSE_EFFECTIVE: {_L: 2, _T: -2},
    UnitType.RADIATION_DOSE_RATE: {_L: 2, _T: -3},
    UnitType.RADIOACTIVITY: {_T: -1},
    UnitType.CATALYTIC_ACTIVITY: {_N: 1, _T: -1},
    UnitType.DYNAMIC_VISCOSITY: {_M: 1, _L: -1, _T: -1},
    UnitType.KINEMATIC_VISCOSITY: {_L: 2, _T: -1},
    UnitType.RECIPROCAL_LENGTH: {_L: -1},
    UnitType.TIME_SQUARED: {_T: 2},
    UnitType.MOLAR_CONCENTRATION: {_N: 1, _L: -3},
    UnitType.IRRADIANCE: {_M: 1, _T: -3},
}


def dimension_map(unit_type: UnitType) -> typing.Dict[UnitType, int]:
    """Get the exponents of fundamental types that make up `unit_type`.

    Fundamental types map to themselves with exponent 1. Dimensionless,
    currency and unclassified types, as well as plane angle, solid angle,
    intensity and computer-science types, have an empty map.
    """
    if unit_type in FUNDAMENTAL:
        return {unit_type: 1}
    return dict(_dimensions.get(unit_type, {}))
