from caliper.core import dimensions
from caliper.core.dimensions import UnitType


def test_fundamental_maps():
    """Each fundamental type should map to itself."""
    for unit_type in dimensions.FUNDAMENTAL:
        assert dimensions.dimension_map(unit_type) == {unit_type: 1}


def test_derived_maps():
    """Test the maps of selected derived types."""
    L = UnitType.LENGTH
    M = UnitType.MASS
    T = UnitType.TIME
    I = UnitType.ELECTRIC_CURRENT
    cases = {
        UnitType.AREA: {L: 2},
        UnitType.VELOCITY: {L: 1, T: -1},
        UnitType.FORCE: {M: 1, L: 1, T: -2},
        UnitType.ENERGY: {M: 1, L: 2, T: -2},
        UnitType.ELECTRIC_RESISTANCE: {M: 1, L: 2, I: -2, T: -3},
        UnitType.ELECTRIC_CAPACITANCE: {M: -1, L: -2, I: 2, T: 4},
        UnitType.DYNAMIC_VISCOSITY: {M: 1, L: -1, T: -1},
    }
    for unit_type, expected in cases.items():
        assert dimensions.dimension_map(unit_type) == expected


def test_empty_maps():
    """Types without a physical signature should have an empty map."""
    types = [
        UnitType.UNITY,
        UnitType.PLANE_ANGLE,
        UnitType.SOLID_ANGLE,
        UnitType.INTENSITY,
        UnitType.COMPUTER_SCIENCE,
        UnitType.CURRENCY,
        UnitType.UNCLASSIFIED,
    ]
    for unit_type in types:
        assert dimensions.dimension_map(unit_type) == {}


def test_maps_are_copies():
    """Changing a returned map should not change the definition."""
    this = dimensions.dimension_map(UnitType.AREA)
    this[UnitType.LENGTH] = 3
    assert dimensions.dimension_map(UnitType.AREA) == {UnitType.LENGTH: 2}


def test_type_str():
    """A unit type should display as its name."""
    assert str(UnitType.LENGTH) == 'LENGTH'
