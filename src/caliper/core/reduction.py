import logging
import math
import threading
import typing

from caliper.core import iterables

if typing.TYPE_CHECKING:
    from caliper.core.measure import UnitOfMeasure


logger = logging.getLogger(__name__)


MULT = '·'
"""The glyph that joins factors in a symbol."""

DIV = '/'
"""The glyph that separates a numerator from a denominator."""

POW = '^'
"""The glyph that introduces a general exponent."""

SQ = '²'
"""The glyph for an exponent of 2."""

CUBED = '³'
"""The glyph for an exponent of 3."""

LP = '('
RP = ')'

ONE = '1'
"""The symbol of the unity unit."""


class CircularReferenceError(RecursionError):
    """A chain of unit conversions did not terminate."""

    def __init__(self, unit: 'UnitOfMeasure', limit: int) -> None:
        self._unit = unit
        self._limit = limit

    def __str__(self) -> str:
        return (
            f"Reduction of {self._unit.symbol!r} exceeded {self._limit}"
            " recursions; check for circular references"
        )


def power_symbol(symbol: str, exponent: int) -> str:
    """Append standard exponent notation to `symbol`.

    Examples
    --------
    >>> power_symbol('m', 1)
    'm'
    >>> power_symbol('m', 2)
    'm²'
    >>> power_symbol('s', 4)
    's^4'
    """
    if exponent == 1:
        return symbol
    if exponent == 2:
        return f"{symbol}{SQ}"
    if exponent == 3:
        return f"{symbol}{CUBED}"
    return f"{symbol}{POW}{exponent}"


def render(terms: typing.Mapping['UnitOfMeasure', int]) -> str:
    """Create the canonical symbol of a map of base units.

    Terms appear in order of their symbols. Terms with positive exponents
    form the numerator and terms with negative exponents form the
    denominator. An empty numerator becomes the unity symbol and a
    denominator with more than one term is enclosed in parentheses.
    """
    numerator = []
    denominator = []
    ordered = sorted(terms.items(), key=lambda item: item[0].symbol)
    for unit, exponent in ordered:
        if exponent > 0:
            numerator.append(power_symbol(unit.symbol, exponent))
        elif exponent < 0:
            denominator.append(power_symbol(unit.symbol, -exponent))
    top = MULT.join(numerator) or ONE
    if not denominator:
        return top
    if len(denominator) == 1:
        return f"{top}{DIV}{denominator[0]}"
    return f"{top}{DIV}{LP}{MULT.join(denominator)}{RP}"


class Reduction(iterables.ReprStrMixin):
    """The base units and net scaling factor of a unit of measure."""

    def __init__(
        self,
        terms: typing.Dict['UnitOfMeasure', int],
        scaling_factor: float=1.0,
    ) -> None:
        self.terms = terms
        """The net exponent of each terminal unit."""
        self.scaling_factor = scaling_factor
        """The product of all scaling factors along the reduction."""
        self._base_symbol = None

    @property
    def base_symbol(self) -> str:
        """The canonical symbol of these terms."""
        if self._base_symbol is None:
            self._base_symbol = render(self.terms)
        return self._base_symbol

    def __str__(self) -> str:
        return f"{self.scaling_factor!r} * {self.base_symbol}"


class Reducer:
    """An algorithm that explodes a unit into its base units.

    Each call to `explode` uses fresh local state, so a single instance may
    serve any number of (possibly concurrent) reductions.
    """

    def __init__(self, max_recursions: int=100) -> None:
        self.max_recursions = max_recursions
        """The number of nested steps after which to assume a cycle."""
        self.invocations = 0
        """The number of reductions performed by this instance."""
        self._lock = threading.Lock()

    def explode(self, unit: 'UnitOfMeasure') -> Reduction:
        """Reduce `unit` to a map of terminal units and a scaling factor.

        Parameters
        ----------
        unit : `~measure.UnitOfMeasure`
            The unit of measure to reduce.

        Returns
        -------
        `~reduction.Reduction`

        Raises
        ------
        `~reduction.CircularReferenceError`
            The conversion chain or the composition of `unit` did not
            terminate within `max_recursions` nested steps.
        """
        with self._lock:
            self.invocations += 1
        terms = {}
        scaling = self._visit(unit, terms, [], 0)
        return Reduction(terms, scaling)

    def _visit(
        self,
        unit: 'UnitOfMeasure',
        terms: typing.Dict['UnitOfMeasure', int],
        path: typing.List[int],
        count: int,
    ) -> float:
        """Fold `unit` into `terms` and return its scaling contribution."""
        count += 1
        if count > self.max_recursions:
            logger.error(
                "Reducing %r exceeded %d steps", unit.symbol, self.max_recursions
            )
            raise CircularReferenceError(unit, self.max_recursions)
        exponent = math.prod(path)
        factor = unit.scaling_factor ** exponent
        abscissa = unit.abscissa_unit
        if abscissa is not unit:
            return factor * self._visit(abscissa, terms, path, count)
        if unit.composition.operands:
            for operand, operand_exponent in unit.composition.operands:
                path.append(operand_exponent)
                factor *= self._visit(operand, terms, path, count)
                path.pop()
            return factor
        if not unit.is_unity:
            total = terms.get(unit, 0) + exponent
            if total == 0:
                terms.pop(unit, None)
            else:
                terms[unit] = total
        return factor
