import hashlib
import logging
import threading
import typing

from caliper.core import dimensions
from caliper.core import iterables
from caliper.core import reduction

if typing.TYPE_CHECKING:
    from caliper.core.catalog import Unit
    from caliper.core.system import MeasurementSystem


logger = logging.getLogger(__name__)


class UnitError(Exception):
    """Base class for errors involving units of measure."""


class InvalidSymbolError(UnitError):
    """A unit of measure must have a non-empty symbol."""

    def __init__(self, symbol: typing.Optional[str]) -> None:
        self._symbol = symbol

    def __str__(self) -> str:
        return f"Invalid unit symbol {self._symbol!r}"


class NullOperandError(UnitError):
    """A required unit of measure is missing."""

    def __init__(self, role: str) -> None:
        self._role = role

    def __str__(self) -> str:
        return f"The {self._role} cannot be None"


class IncompatibleDimensionsError(UnitError):
    """There is no conversion between these units."""

    def __init__(
        self,
        u0: 'UnitOfMeasure',
        u1: 'UnitOfMeasure',
        reason: str=None,
    ) -> None:
        self._from = u0
        self._to = u1
        self._reason = reason

    def __str__(self) -> str:
        string = f"Can't convert {str(self._from)!r} to {str(self._to)!r}"
        if self._reason:
            return f"{string}: {self._reason}"
        return string


class InvalidSelfConversionError(UnitError):
    """A unit may only convert to itself through the identity."""

    def __init__(
        self,
        unit: 'UnitOfMeasure',
        scaling_factor: float,
        offset: float,
    ) -> None:
        self._unit = unit
        self._scaling_factor = scaling_factor
        self._offset = offset

    def __str__(self) -> str:
        return (
            f"A conversion of {str(self._unit)!r} to itself must have"
            " a scaling factor of 1 and an offset of 0, not"
            f" {self._scaling_factor!r} and {self._offset!r}"
        )


class OffsetError(UnitError):
    """Units with an offset do not support multiplication or division."""

    def __init__(self, unit: 'UnitOfMeasure') -> None:
        self._unit = unit

    def __str__(self) -> str:
        return (
            f"Can't multiply or divide {str(self._unit)!r}"
            f" because it has offset {self._unit.offset!r}"
        )


class CompositionError(UnitError):
    """The unit of measure does not have the required composition."""

    def __init__(self, unit: 'UnitOfMeasure', required: str) -> None:
        self._unit = unit
        self._required = required

    def __str__(self) -> str:
        return f"{str(self._unit)!r} is not a {self._required} unit"


Operands = typing.Tuple[typing.Tuple['UnitOfMeasure', int], ...]


class Scalar(typing.NamedTuple):
    """The composition of a unit without operands."""

    @property
    def operands(self) -> Operands:
        return ()


class Power(typing.NamedTuple):
    """The composition of a unit raised to an integral exponent."""

    base: 'UnitOfMeasure'
    exponent: int

    @property
    def operands(self) -> Operands:
        return ((self.base, self.exponent),)


class Product(typing.NamedTuple):
    """The composition of a unit multiplied by another unit."""

    multiplier: 'UnitOfMeasure'
    multiplicand: 'UnitOfMeasure'

    @property
    def operands(self) -> Operands:
        return ((self.multiplier, 1), (self.multiplicand, 1))


class Quotient(typing.NamedTuple):
    """The composition of a unit divided by another unit."""

    dividend: 'UnitOfMeasure'
    divisor: 'UnitOfMeasure'

    @property
    def operands(self) -> Operands:
        return ((self.dividend, 1), (self.divisor, -1))


Composition = typing.Union[Scalar, Power, Product, Quotient]


def _opaque_symbol(kind: str, parts: typing.Iterable[str], limit: int):
    """Create a symbol of at most `limit` characters from `parts`.

    The result depends only on `kind` and `parts`, so repeated requests for
    the same combination produce the same symbol.
    """
    content = '\x1f'.join([kind, *parts]).encode('utf-8')
    digest = hashlib.sha1(content).hexdigest()
    return f"#{digest[:max(limit - 1, 1)]}"


def _limited(symbol: str, kind: str, parts: typing.List[str], limit: int):
    """Return `symbol` if it is short enough, else an opaque substitute."""
    if limit is None or len(symbol) <= limit:
        return symbol
    return _opaque_symbol(kind, parts, limit)


def generate_product_symbol(
    multiplier: 'UnitOfMeasure',
    multiplicand: 'UnitOfMeasure',
    limit: int=None,
) -> str:
    """Create the symbol of the product of two units."""
    parts = [multiplier.symbol, multiplicand.symbol]
    symbol = reduction.MULT.join(parts)
    return _limited(symbol, 'product', parts, limit)


def generate_quotient_symbol(
    dividend: 'UnitOfMeasure',
    divisor: 'UnitOfMeasure',
    limit: int=None,
) -> str:
    """Create the symbol of the quotient of two units."""
    parts = [dividend.symbol, divisor.symbol]
    symbol = reduction.DIV.join(parts)
    return _limited(symbol, 'quotient', parts, limit)


def generate_power_symbol(
    base: 'UnitOfMeasure',
    exponent: int,
    limit: int=None,
) -> str:
    """Create the symbol of a unit raised to a power."""
    parts = [base.symbol, str(exponent)]
    symbol = f"{base.symbol}{reduction.POW}{exponent}"
    return _limited(symbol, 'power', parts, limit)


Instance = typing.TypeVar('Instance', bound='UnitOfMeasure')


class UnitOfMeasure(iterables.ReprStrMixin):
    """A unit of measure defined as a linear function of another unit.

    A unit converts to its abscissa unit according to ``y = a*x + b``, where
    ``x`` is a value in this unit, ``y`` is the equivalent value in the
    abscissa unit, ``a`` is the scaling factor and ``b`` is the offset. A
    unit that has no explicit conversion is its own abscissa unit with
    ``a = 1`` and ``b = 0``, and is called terminal.

    Instances should come from the factory methods of
    `~system.MeasurementSystem`, which guarantee that each symbol corresponds
    to exactly one instance.
    """

    def __init__(
        self,
        system: 'MeasurementSystem',
        unit_type: dimensions.UnitType=dimensions.UnitType.UNCLASSIFIED,
        symbol: str=None,
        name: str=None,
        description: str=None,
        canonical_id: 'Unit'=None,
        category: str=None,
    ) -> None:
        if not symbol:
            raise InvalidSymbolError(symbol)
        self.system = system
        """The measurement system that owns this unit."""
        self.unit_type = unit_type
        self.symbol = symbol
        self.name = name or symbol
        self.description = description or ''
        self.canonical_id = canonical_id
        self.category = category
        self.scaling_factor = 1.0
        self.offset = 0.0
        self.abscissa_unit: UnitOfMeasure = self
        self.bridge_scaling_factor: typing.Optional[float] = None
        self.bridge_offset: typing.Optional[float] = None
        self.bridge_abscissa_unit: typing.Optional[UnitOfMeasure] = None
        self.composition: Composition = Scalar()
        self._base_symbol = None
        self._conversions: typing.Dict[
            UnitOfMeasure, typing.Tuple[int, float]
        ] = {}
        self._lock = threading.Lock()

    @property
    def is_terminal(self) -> bool:
        """True if this unit is its own abscissa unit."""
        return self.abscissa_unit is self

    @property
    def is_unity(self) -> bool:
        """True if this is a terminal, dimensionless scalar unit."""
        return (
            self.unit_type is dimensions.UnitType.UNITY
            and self.is_terminal
            and not self.composition.operands
        )

    @property
    def operands(self) -> Operands:
        """The ``(unit, exponent)`` pairs that compose this unit."""
        return self.composition.operands

    def set_conversion(
        self,
        scaling_factor: float,
        abscissa_unit: 'UnitOfMeasure',
        offset: float=0.0,
    ) -> None:
        """Define this unit as a linear function of another unit.

        Parameters
        ----------
        scaling_factor : float
            The slope of the conversion.

        abscissa_unit : `~measure.UnitOfMeasure`
            The unit in which the conversion expresses values of this unit.

        offset : float, default=0.0
            The intercept of the conversion.

        Raises
        ------
        `~measure.NullOperandError`
            The abscissa unit is `None`.

        `~measure.InvalidSelfConversionError`
            The abscissa unit is this unit but the conversion is not the
            identity.
        """
        if abscissa_unit is None:
            raise NullOperandError('abscissa unit')
        if abscissa_unit is self and (scaling_factor != 1 or offset != 0):
            raise InvalidSelfConversionError(self, scaling_factor, offset)
        self._redefine(
            scaling_factor=float(scaling_factor),
            offset=float(offset),
            abscissa_unit=abscissa_unit,
        )

    def set_bridge_conversion(
        self,
        scaling_factor: float,
        abscissa_unit: 'UnitOfMeasure',
        offset: float=0.0,
    ) -> None:
        """Link this unit to its counterpart in another measurement system."""
        if abscissa_unit is None:
            raise NullOperandError('bridge abscissa unit')
        self._invalidate()
        self.bridge_scaling_factor = float(scaling_factor)
        self.bridge_offset = float(offset or 0.0)
        self.bridge_abscissa_unit = abscissa_unit

    def set_power_unit(self, base: 'UnitOfMeasure', exponent: int) -> None:
        """Define this unit as `base` raised to `exponent`."""
        if base is None:
            raise NullOperandError('base')
        self._set_composition(Power(base, int(exponent)))

    def set_product_units(
        self,
        multiplier: 'UnitOfMeasure',
        multiplicand: 'UnitOfMeasure',
    ) -> None:
        """Define this unit as the product of two units."""
        if multiplier is None:
            raise NullOperandError('multiplier')
        if multiplicand is None:
            raise NullOperandError('multiplicand')
        self._set_composition(Product(multiplier, multiplicand))

    def set_quotient_units(
        self,
        dividend: 'UnitOfMeasure',
        divisor: 'UnitOfMeasure',
    ) -> None:
        """Define this unit as the quotient of two units."""
        if dividend is None:
            raise NullOperandError('dividend')
        if divisor is None:
            raise NullOperandError('divisor')
        self._set_composition(Quotient(dividend, divisor))

    def _set_composition(self, composition: Composition) -> None:
        """Replace the composition and update registration."""
        self._redefine(composition=composition)

    def _redefine(self, **definition) -> None:
        """Replace attributes that define this unit and update registration.

        If the new definition does not reduce (for example, because it closes
        a cycle of conversions), this method restores the previous definition
        and registration before re-raising the exception.
        """
        registered = self.system.unregister_unit(self)
        previous = {name: getattr(self, name) for name in definition}
        self._update(definition)
        try:
            if registered:
                self.system.register_unit(self)
        except reduction.CircularReferenceError:
            self._update(previous)
            if registered:
                self.system.register_unit(self)
            raise

    def _update(self, definition: typing.Mapping[str, typing.Any]) -> None:
        """Set the given attributes and forget derived values."""
        self._invalidate()
        for name, value in definition.items():
            setattr(self, name, value)

    def _invalidate(self) -> None:
        """Clear values derived from this unit's definition."""
        with self._lock:
            self._base_symbol = None
            self._conversions.clear()
        self.system.redefined(self)

    def clear_cache(self) -> None:
        """Forget all computed conversion factors from this unit."""
        with self._lock:
            self._conversions.clear()

    def reduce(self) -> reduction.Reduction:
        """Explode this unit into terminal units and a scaling factor."""
        return self.system.reducer.explode(self)

    @property
    def base_symbol(self) -> str:
        """The symbol of this unit expressed in terminal units."""
        if self._base_symbol is None:
            symbol = self.reduce().base_symbol
            with self._lock:
                self._base_symbol = symbol
        return self._base_symbol

    @property
    def base_units(self) -> typing.Dict['UnitOfMeasure', int]:
        """The terminal units of this unit and their exponents."""
        return self.reduce().terms

    def get_conversion_factor(self, target: 'UnitOfMeasure') -> float:
        """Compute the factor that converts values to `target`.

        The factor does not include offsets. See
        `~quantity.Quantity.convert` for a full linear conversion.

        Parameters
        ----------
        target : `~measure.UnitOfMeasure`
            The unit to which to convert.

        Returns
        -------
        float

        Raises
        ------
        `~measure.IncompatibleDimensionsError`
            The units have different types, different sets of base units, or
            base units without a bridge between them.
        """
        if target is None:
            raise NullOperandError('target unit')
        generation = self.system.generation
        with self._lock:
            cached = self._conversions.get(target)
        if cached is not None and cached[0] == generation:
            return cached[1]
        self._check_types(target)
        source_reduction = self.reduce()
        target_reduction = target.reduce()
        source_terms = source_reduction.terms
        target_terms = dict(target_reduction.terms)
        if len(source_terms) != len(target_terms):
            raise IncompatibleDimensionsError(
                self, target,
                f"{source_reduction.base_symbol!r}"
                f" and {target_reduction.base_symbol!r}"
                " have different numbers of base units",
            )
        factor = 1.0
        for source_unit, exponent in source_terms.items():
            match = self._find_match(source_unit, exponent, target_terms)
            if match is None:
                raise IncompatibleDimensionsError(
                    self, target,
                    f"no counterpart for {source_unit.symbol!r}",
                )
            target_terms.pop(match)
            scalar = self._scalar_factor(source_unit, match)
            if scalar is None:
                raise IncompatibleDimensionsError(
                    self, target,
                    f"no bridge between {source_unit.symbol!r}"
                    f" and {match.symbol!r}",
                )
            factor *= scalar ** exponent
        factor *= (
            source_reduction.scaling_factor / target_reduction.scaling_factor
        )
        logger.debug("Factor from %r to %r is %r", self, target, factor)
        with self._lock:
            self._conversions[target] = (generation, factor)
        return factor

    def _check_types(self, target: 'UnitOfMeasure') -> None:
        """Raise an exception if the types of these units are incompatible."""
        ignored = {
            dimensions.UnitType.UNCLASSIFIED,
            dimensions.UnitType.UNITY,
        }
        types = {self.unit_type, target.unit_type}
        if types & ignored or len(types) == 1:
            return
        raise IncompatibleDimensionsError(
            self, target,
            f"type {self.unit_type} is not {target.unit_type}",
        )

    @staticmethod
    def _find_match(
        unit: 'UnitOfMeasure',
        exponent: int,
        candidates: typing.Mapping['UnitOfMeasure', int],
    ) -> typing.Optional['UnitOfMeasure']:
        """Find the first candidate with the same type and exponent."""
        for candidate, candidate_exponent in candidates.items():
            same_type = candidate.unit_type == unit.unit_type
            if same_type and candidate_exponent == exponent:
                return candidate

    @staticmethod
    def _scalar_factor(
        source: 'UnitOfMeasure',
        target: 'UnitOfMeasure',
    ) -> typing.Optional[float]:
        """Compute the factor between two single-dimension units."""
        if source.abscissa_unit is target:
            return source.scaling_factor
        source_base, source_path = source._terminal()
        target_base, target_path = target._terminal()
        bridge = 1.0
        if source_base is not target_base:
            bridge = bridge_factor(source_base, target_base)
            if bridge is None:
                return None
        return source_path * bridge / target_path

    def _terminal(self) -> typing.Tuple['UnitOfMeasure', float]:
        """Follow the abscissa chain to its end, accumulating factors."""
        limit = self.system.max_recursions
        unit = self
        factor = 1.0
        for _ in range(limit):
            if unit.is_terminal:
                return unit, factor
            factor *= unit.scaling_factor
            unit = unit.abscissa_unit
        raise reduction.CircularReferenceError(self, limit)

    def multiply(self, other: 'UnitOfMeasure') -> 'UnitOfMeasure':
        """Create the product of this unit and `other`."""
        return self._multiply_or_divide(other, invert=False)

    def divide(self, other: 'UnitOfMeasure') -> 'UnitOfMeasure':
        """Create the quotient of this unit and `other`."""
        return self._multiply_or_divide(other, invert=True)

    def _multiply_or_divide(
        self,
        other: 'UnitOfMeasure',
        invert: bool,
    ) -> 'UnitOfMeasure':
        """Combine this unit with `other` by merging base units.

        The result is not registered. If a registered unit owns the base
        symbol of the result, the result becomes a linear function of that
        unit and adopts its type.
        """
        if other is None:
            raise NullOperandError('divisor' if invert else 'multiplicand')
        for unit in (self, other):
            if unit.offset != 0.0:
                raise OffsetError(unit)
        limit = self.system.max_symbol_length
        if invert:
            symbol = generate_quotient_symbol(self, other, limit)
        else:
            symbol = generate_product_symbol(self, other, limit)
        result = UnitOfMeasure(self.system, symbol=symbol)
        if invert:
            result.composition = Quotient(self, other)
        else:
            result.composition = Product(self, other)
        this = self.reduce()
        that = other.reduce()
        sign = -1 if invert else 1
        terms = dict(this.terms)
        for unit, exponent in that.terms.items():
            total = terms.get(unit, 0) + sign * exponent
            if total == 0:
                terms.pop(unit, None)
            else:
                terms[unit] = total
        base_symbol = reduction.render(terms)
        owner = self.system.get_base_uom(base_symbol)
        if owner is not None:
            if invert:
                scaling = this.scaling_factor / that.scaling_factor
            else:
                scaling = this.scaling_factor * that.scaling_factor
            result.scaling_factor = scaling / owner.reduce().scaling_factor
            result.abscissa_unit = owner
            result.unit_type = owner.unit_type
        result._base_symbol = base_symbol
        return result

    def invert(self) -> 'UnitOfMeasure':
        """Create the reciprocal of this unit."""
        composition = self.composition
        simple = self.is_terminal and self.scaling_factor == 1.0
        if isinstance(composition, Quotient) and simple:
            return composition.divisor.divide(composition.dividend)
        return self.system.get_one().divide(self)

    def power(self, exponent: int) -> 'UnitOfMeasure':
        """Create (or get) the registered power of this unit."""
        return self.system.create_power_uom(self, exponent)

    def classify(self: Instance) -> Instance:
        """Determine the type of an unclassified unit from its base units.

        This method will set the type of this unit to the first defined type
        whose map of fundamental types matches the net exponents of this
        unit's base-unit types. It will leave this unit unchanged if it
        already has a type or if no type matches.
        """
        if self.unit_type is not dimensions.UnitType.UNCLASSIFIED:
            return self
        types = {}
        for unit, exponent in self.base_units.items():
            total = types.get(unit.unit_type, 0) + exponent
            if total == 0:
                types.pop(unit.unit_type, None)
            else:
                types[unit.unit_type] = total
        for unit_type in dimensions.UnitType:
            if unit_type is dimensions.UnitType.UNCLASSIFIED:
                continue
            if self.system.get_type_map(unit_type) == types:
                self.unit_type = unit_type
                logger.debug("Classified %r as %s", self.symbol, unit_type)
                break
        return self

    def clone_power(self, base: 'UnitOfMeasure') -> 'UnitOfMeasure':
        """Create a power unit with this unit's exponent and a new base."""
        if not isinstance(self.composition, Power):
            raise CompositionError(self, 'power')
        return self.system.create_power_uom(base, self.composition.exponent)

    def clone_power_product(
        self,
        unit1: 'UnitOfMeasure',
        unit2: 'UnitOfMeasure',
    ) -> 'UnitOfMeasure':
        """Create a product or quotient like this one with new operands."""
        if isinstance(self.composition, Product):
            return self.system.create_product_uom(unit1, unit2)
        if isinstance(self.composition, Quotient):
            return self.system.create_quotient_uom(unit1, unit2)
        raise CompositionError(self, 'product or quotient')

    def __mul__(self, other):
        """Called for self * other."""
        if isinstance(other, UnitOfMeasure):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other):
        """Called for self / other."""
        if isinstance(other, UnitOfMeasure):
            return self.divide(other)
        return NotImplemented

    def __pow__(self, exponent: int):
        """Called for self ** exponent."""
        if isinstance(exponent, int):
            return self.power(exponent)
        return NotImplemented

    def __eq__(self, other) -> bool:
        """True if the two units define the same conversion."""
        if self is other:
            return True
        if not isinstance(other, UnitOfMeasure):
            return NotImplemented
        ids = (self.canonical_id, other.canonical_id)
        if None not in ids and ids[0] != ids[1]:
            return False
        return (
            self.unit_type == other.unit_type
            and self.abscissa_unit.symbol == other.abscissa_unit.symbol
            and self.scaling_factor == other.scaling_factor
            and self.offset == other.offset
        )

    def __hash__(self) -> int:
        return hash(self.abscissa_unit.symbol)

    def __lt__(self, other) -> bool:
        """Order units by symbol."""
        if isinstance(other, UnitOfMeasure):
            return self.symbol < other.symbol
        return NotImplemented

    def __str__(self) -> str:
        return self.symbol


def bridge_factor(
    source: UnitOfMeasure,
    target: UnitOfMeasure,
) -> typing.Optional[float]:
    """Get the factor that links terminal units of different systems.

    Parameters
    ----------
    source, target : `~measure.UnitOfMeasure`
        Terminal units.

    Returns
    -------
    float or `None`
        The forward bridge factor if `source` bridges to `target`, the
        reciprocal of the reverse factor if `target` bridges to `source`, or
        `None` if neither unit bridges to the other.
    """
    if source.bridge_abscissa_unit is target:
        return source.bridge_scaling_factor
    if target.bridge_abscissa_unit is source:
        return 1.0 / target.bridge_scaling_factor
    return None
