import numbers
import typing

import numpy

from caliper.core import iterables
from caliper.core import measure

if typing.TYPE_CHECKING:
    from caliper.core.catalog import Unit


Amount = typing.Union[float, numpy.ndarray]


def _normalize(amount) -> Amount:
    """Convert `amount` to a float or an array of floats."""
    if isinstance(amount, numbers.Real):
        return float(amount)
    return numpy.asarray(amount, dtype=float)


class Quantity(iterables.ReprStrMixin):
    """An amount expressed in a unit of measure.

    Instances are immutable. Every arithmetic operation creates a new
    instance. The amount may be a real number or an array of real numbers;
    all operations apply element-wise to arrays.
    """

    def __init__(
        self,
        amount,
        unit: measure.UnitOfMeasure,
        name: str=None,
        symbol: str=None,
        description: str=None,
    ) -> None:
        if unit is None:
            raise measure.NullOperandError('unit')
        self._amount = _normalize(amount)
        self._unit = unit
        self._name = name
        self._symbol = symbol
        self._description = description

    @property
    def amount(self) -> Amount:
        """The numerical value of this quantity."""
        return self._amount

    @property
    def unit(self) -> measure.UnitOfMeasure:
        """The unit of measure of this quantity."""
        return self._unit

    @property
    def name(self) -> typing.Optional[str]:
        """The name of this quantity, if it is a named constant."""
        return self._name

    @property
    def symbol(self) -> typing.Optional[str]:
        """The symbol of this quantity, if it is a named constant."""
        return self._symbol

    @property
    def description(self) -> typing.Optional[str]:
        """The description of this quantity, if it is a named constant."""
        return self._description

    def convert(
        self,
        target: typing.Union[measure.UnitOfMeasure, 'Unit'],
    ) -> 'Quantity':
        """Express this quantity in another unit of measure.

        The converted amount is ``(x + b0) * f - b1``, where ``x`` is the
        current amount, ``b0`` is the offset of the current unit, ``f`` is
        the conversion factor and ``b1`` is the offset of the target unit.

        Parameters
        ----------
        target : `~measure.UnitOfMeasure` or `~catalog.Unit`
            The unit to which to convert, or the canonical identifier of a
            catalog unit.

        Returns
        -------
        `~quantity.Quantity`

        Raises
        ------
        `~measure.IncompatibleDimensionsError`
            There is no conversion from this unit to `target`.
        """
        if target is None:
            raise measure.NullOperandError('target unit')
        if not isinstance(target, measure.UnitOfMeasure):
            target = self._unit.system.get_uom(target)
        factor = self._unit.get_conversion_factor(target)
        amount = (self._amount + self._unit.offset) * factor - target.offset
        return Quantity(amount, target)

    def add(self, other: 'Quantity') -> 'Quantity':
        """Add `other`, converted to this unit."""
        converted = other.convert(self._unit)
        return Quantity(self._amount + converted.amount, self._unit)

    def subtract(self, other: 'Quantity') -> 'Quantity':
        """Subtract `other`, converted to this unit."""
        converted = other.convert(self._unit)
        return Quantity(self._amount - converted.amount, self._unit)

    def multiply(self, other: typing.Union['Quantity', Amount]) -> 'Quantity':
        """Multiply by another quantity or by a pure number."""
        if isinstance(other, Quantity):
            unit = self._unit.multiply(other.unit)
            return Quantity(self._amount * other.amount, unit)
        return Quantity(self._amount * _normalize(other), self._unit)

    def divide(self, other: typing.Union['Quantity', Amount]) -> 'Quantity':
        """Divide by another quantity or by a pure number."""
        if isinstance(other, Quantity):
            unit = self._unit.divide(other.unit)
            return Quantity(self._amount / other.amount, unit)
        return Quantity(self._amount / _normalize(other), self._unit)

    def power(self, exponent: int) -> 'Quantity':
        """Raise this quantity to an integral power."""
        unit = self._unit.system.create_power_uom(self._unit, exponent)
        return Quantity(self._amount ** exponent, unit)

    def invert(self) -> 'Quantity':
        """Create the reciprocal of this quantity."""
        return Quantity(1.0 / self._amount, self._unit.invert())

    def compare(self, other: 'Quantity') -> int:
        """Compare to `other`, converted to this unit.

        Returns
        -------
        int
            -1 if this quantity is smaller, 1 if it is larger, and 0 if the
            two are equal.
        """
        converted = other.convert(self._unit).amount
        if self._amount < converted:
            return -1
        if self._amount > converted:
            return 1
        return 0

    def convert_to_power_product(
        self,
        unit1: measure.UnitOfMeasure,
        unit2: measure.UnitOfMeasure,
    ) -> 'Quantity':
        """Convert to a product or quotient of the given units.

        The target unit has the same composition as this quantity's unit but
        has `unit1` and `unit2` as its operands.
        """
        return self.convert(self._unit.clone_power_product(unit1, unit2))

    def convert_to_power(self, base: measure.UnitOfMeasure) -> 'Quantity':
        """Convert to a power of `base` with this unit's exponent."""
        return self.convert(self._unit.clone_power(base))

    def __add__(self, other):
        """Called for self + other."""
        if isinstance(other, Quantity):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        """Called for self - other."""
        if isinstance(other, Quantity):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other):
        """Called for self * other."""
        if isinstance(other, (Quantity, numbers.Real, numpy.ndarray)):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        """Called for other * self."""
        if isinstance(other, (numbers.Real, numpy.ndarray)):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other):
        """Called for self / other."""
        if isinstance(other, (Quantity, numbers.Real, numpy.ndarray)):
            return self.divide(other)
        return NotImplemented

    def __pow__(self, exponent):
        """Called for self ** exponent."""
        if isinstance(exponent, int):
            return self.power(exponent)
        return NotImplemented

    def __eq__(self, other) -> bool:
        """True if the amounts and units are equal."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return (
            self._unit == other.unit
            and numpy.array_equal(self._amount, other.amount)
        )

    def __lt__(self, other) -> bool:
        """True if this quantity is smaller than `other`."""
        if isinstance(other, Quantity):
            return self.compare(other) < 0
        return NotImplemented

    def __str__(self) -> str:
        return f"{self._amount} {self._unit}"
