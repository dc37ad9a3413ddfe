import pytest

from caliper.core.system import MeasurementSystem


@pytest.fixture
def system():
    """A new measurement system with an empty registry."""
    return MeasurementSystem()


@pytest.fixture
def invocations(system):
    """A function that reports the number of reductions so far."""
    def count():
        return system.reducer.invocations
    return count
