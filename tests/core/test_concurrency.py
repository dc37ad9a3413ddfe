import concurrent.futures
import threading
import typing

import pytest

from caliper.core.catalog import Unit
from caliper.core.dimensions import UnitType


N_THREADS = 8


def run_together(function: typing.Callable[[int], typing.Any]) -> list:
    """Call `function` from many threads that start at the same time."""
    barrier = threading.Barrier(N_THREADS)
    def task(index: int):
        barrier.wait()
        return function(index)
    with concurrent.futures.ThreadPoolExecutor(N_THREADS) as executor:
        return list(executor.map(task, range(N_THREADS)))


@pytest.fixture
def requested():
    """Catalog units with shared dependencies."""
    return [
        Unit.METRE,
        Unit.FOOT,
        Unit.INCH,
        Unit.MILE,
        Unit.KILOGRAM,
        Unit.NEWTON,
        Unit.JOULE,
        Unit.PASCAL,
        Unit.POUND_FORCE,
        Unit.PSI,
    ]


def test_concurrent_lookups(system, requested: list):
    """Threads that request the same units should share one instance each."""
    def lookup(index: int):
        order = requested[index:] + requested[:index]
        return {unit: system.get_uom(unit) for unit in order}
    results = run_together(lookup)
    for unit in requested:
        instances = {id(result[unit]) for result in results}
        assert len(instances) == 1
        assert results[0][unit] is system.get_uom(unit)
    symbols = [uom.symbol for uom in system.get_registered_units()]
    assert len(symbols) == len(set(symbols))
    newton = system.get_uom(Unit.NEWTON)
    assert system.get_base_uom('kg·m/s²') is newton


def test_concurrent_factors(system):
    """Threads that convert between the same units should agree."""
    pairs = [
        (Unit.FOOT, Unit.METRE, 0.3048),
        (Unit.MILE, Unit.FOOT, 5280.0),
        (Unit.PSI, Unit.PASCAL, 6894.757293168361),
        (Unit.POUND_FORCE, Unit.NEWTON, 4.4482216152605),
    ]
    def convert(index: int):
        factors = []
        for u0, u1, _ in pairs:
            source = system.get_uom(u0)
            target = system.get_uom(u1)
            factors.append(source.get_conversion_factor(target))
        return factors
    results = run_together(convert)
    for factors in results:
        assert factors == results[0]
    for factor, (_, _, expected) in zip(results[0], pairs):
        assert factor == pytest.approx(expected)


def test_concurrent_creation(system):
    """Threads that create the same unit should get the same instance."""
    m = system.get_uom(Unit.METRE)
    def create(index: int):
        cubit = system.create_scalar_uom(UnitType.LENGTH, 'cubit')
        area = system.create_product_uom(m, m, symbol=f'area{index}')
        return cubit, area
    results = run_together(create)
    cubits = {id(cubit) for cubit, _ in results}
    assert len(cubits) == 1
    areas = [area for _, area in results]
    assert all(system.get_uom(area.symbol) is area for area in areas)
    owner = system.get_base_uom('m²')
    assert sum(area is owner for area in areas) == 1
