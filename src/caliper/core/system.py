import logging
import numbers
import threading
import typing

import caliper
from caliper.core import catalog
from caliper.core import constants
from caliper.core import dimensions
from caliper.core import measure
from caliper.core import prefixes
from caliper.core import quantity
from caliper.core import reduction


logger = logging.getLogger(__name__)


UnitLike = typing.Union[str, catalog.Unit, measure.UnitOfMeasure]


class MeasurementSystem:
    """A registry and factory of units of measure.

    Each instance maps symbols, base symbols and canonical identifiers to
    units of measure. Requests for a catalog unit that is not yet registered
    create and register that unit, along with the units on which it depends.
    All registry operations are thread safe.
    """

    def __init__(
        self,
        max_recursions: int=None,
        max_symbol_length: int=None,
    ) -> None:
        """
        Parameters
        ----------
        max_recursions : int, optional
            The number of steps after which a reduction assumes a circular
            reference. The default value comes from the ``[reduction]``
            section of ``caliper.ini``.

        max_symbol_length : int, optional
            The length of the longest generated symbol. Longer symbols become
            opaque identifiers. The default value comes from the
            ``[symbols]`` section of ``caliper.ini``.
        """
        if max_recursions is None:
            env = caliper.Environment('reduction')
            max_recursions = env.getint('max_recursions')
        if max_symbol_length is None:
            env = caliper.Environment('symbols')
            max_symbol_length = env.getint('max_symbol_length')
        self.max_recursions = max_recursions
        self.max_symbol_length = max_symbol_length
        self.reducer = reduction.Reducer(max_recursions)
        """The algorithm that reduces units to base units."""
        self._lock = threading.RLock()
        self._by_symbol: typing.Dict[str, measure.UnitOfMeasure] = {}
        self._by_base_symbol: typing.Dict[str, measure.UnitOfMeasure] = {}
        self._by_id: typing.Dict[catalog.Unit, measure.UnitOfMeasure] = {}
        self._quantities: typing.Dict[constants.Constant, quantity.Quantity] = {}
        self._type_maps = {}
        self.generation = 0
        """A counter that changes whenever any unit changes its definition."""

    def create_scalar_uom(
        self,
        unit_type: dimensions.UnitType,
        symbol: str,
        name: str=None,
        description: str=None,
        canonical_id: catalog.Unit=None,
    ) -> measure.UnitOfMeasure:
        """Create (or get) a unit of measure without operands.

        Parameters
        ----------
        unit_type : `~dimensions.UnitType`
            The dimension of the new unit.

        symbol : string
            The unique symbol of the new unit.

        name : string, optional
            The display name. Defaults to `symbol`.

        description : string, optional
            A longer description of the new unit.

        canonical_id : `~catalog.Unit`, optional
            The identifier of the corresponding catalog unit, if any.

        Returns
        -------
        `~measure.UnitOfMeasure`
            The existing unit with `symbol`, if there is one, or a new
            registered unit.

        Raises
        ------
        `~measure.InvalidSymbolError`
            The symbol is missing or empty.
        """
        return self._create(
            unit_type, symbol, name, description, canonical_id,
        )

    def create_power_uom(
        self,
        base: measure.UnitOfMeasure,
        exponent: int,
        unit_type: dimensions.UnitType=dimensions.UnitType.UNCLASSIFIED,
        symbol: str=None,
        name: str=None,
        description: str=None,
        canonical_id: catalog.Unit=None,
    ) -> measure.UnitOfMeasure:
        """Create (or get) a unit of measure raised to an integral power.

        If `symbol` is `None`, this method will generate one from the symbol
        of `base` and `exponent`. See `create_scalar_uom` for the remaining
        parameters.
        """
        if base is None:
            raise measure.NullOperandError('base')
        if symbol is None:
            symbol = measure.generate_power_symbol(
                base, exponent, self.max_symbol_length,
            )
        return self._create(
            unit_type, symbol, name, description, canonical_id,
            lambda uom: uom.set_power_unit(base, exponent),
        )

    def create_product_uom(
        self,
        multiplier: measure.UnitOfMeasure,
        multiplicand: measure.UnitOfMeasure,
        unit_type: dimensions.UnitType=dimensions.UnitType.UNCLASSIFIED,
        symbol: str=None,
        name: str=None,
        description: str=None,
        canonical_id: catalog.Unit=None,
    ) -> measure.UnitOfMeasure:
        """Create (or get) the product of two units of measure.

        If `symbol` is `None`, this method will generate one from the
        symbols of the operands.
        """
        if multiplier is None:
            raise measure.NullOperandError('multiplier')
        if multiplicand is None:
            raise measure.NullOperandError('multiplicand')
        if symbol is None:
            symbol = measure.generate_product_symbol(
                multiplier, multiplicand, self.max_symbol_length,
            )
        return self._create(
            unit_type, symbol, name, description, canonical_id,
            lambda uom: uom.set_product_units(multiplier, multiplicand),
        )

    def create_quotient_uom(
        self,
        dividend: measure.UnitOfMeasure,
        divisor: measure.UnitOfMeasure,
        unit_type: dimensions.UnitType=dimensions.UnitType.UNCLASSIFIED,
        symbol: str=None,
        name: str=None,
        description: str=None,
        canonical_id: catalog.Unit=None,
    ) -> measure.UnitOfMeasure:
        """Create (or get) the quotient of two units of measure.

        If `symbol` is `None`, this method will generate one from the
        symbols of the operands.
        """
        if dividend is None:
            raise measure.NullOperandError('dividend')
        if divisor is None:
            raise measure.NullOperandError('divisor')
        if symbol is None:
            symbol = measure.generate_quotient_symbol(
                dividend, divisor, self.max_symbol_length,
            )
        return self._create(
            unit_type, symbol, name, description, canonical_id,
            lambda uom: uom.set_quotient_units(dividend, divisor),
        )

    def _create(
        self,
        unit_type: dimensions.UnitType,
        symbol: str,
        name: typing.Optional[str],
        description: typing.Optional[str],
        canonical_id: typing.Optional[catalog.Unit],
        compose: typing.Callable[[measure.UnitOfMeasure], None]=None,
    ) -> measure.UnitOfMeasure:
        """Return the unit with `symbol` or register a new one."""
        if not symbol:
            raise measure.InvalidSymbolError(symbol)
        with self._lock:
            existing = self._by_symbol.get(symbol)
            if existing is not None:
                return existing
            uom = measure.UnitOfMeasure(
                self,
                unit_type=unit_type,
                symbol=symbol,
                name=name,
                description=description,
                canonical_id=canonical_id,
            )
            if compose is not None:
                compose(uom)
            self.register_unit(uom)
        logger.debug("Created unit %r", uom)
        return uom

    def register_unit(self, uom: measure.UnitOfMeasure) -> None:
        """Add a unit to this registry.

        This method will register `uom` by symbol, by canonical identifier
        (if any) and by base symbol. It will do nothing if a unit with the
        same symbol is already registered. A base symbol belongs to the
        first unit registered with it.
        """
        with self._lock:
            if uom.symbol in self._by_symbol:
                return
            base_symbol = uom.base_symbol
            self._by_symbol[uom.symbol] = uom
            if uom.canonical_id is not None:
                self._by_id[uom.canonical_id] = uom
            if base_symbol not in self._by_base_symbol:
                self._by_base_symbol[base_symbol] = uom
        logger.debug("Registered %r with base symbol %r", uom, base_symbol)

    def unregister_unit(self, uom: measure.UnitOfMeasure) -> bool:
        """Remove a unit from this registry.

        Returns
        -------
        bool
            True if `uom` was registered.
        """
        if uom is None:
            return False
        with self._lock:
            if self._by_symbol.get(uom.symbol) is not uom:
                return False
            del self._by_symbol[uom.symbol]
            if self._by_id.get(uom.canonical_id) is uom:
                del self._by_id[uom.canonical_id]
            base_symbol = uom.base_symbol
            if self._by_base_symbol.get(base_symbol) is uom:
                del self._by_base_symbol[base_symbol]
        logger.debug("Unregistered %r", uom)
        return True

    def get_uom(
        self,
        key: typing.Union[str, catalog.Unit, prefixes.Prefix],
        target: measure.UnitOfMeasure=None,
    ) -> typing.Optional[measure.UnitOfMeasure]:
        """Get a unit of measure by symbol, identifier or prefix.

        Parameters
        ----------
        key : string, `~catalog.Unit` or `~prefixes.Prefix`
            The symbol of a registered or catalog unit, the canonical
            identifier of a catalog unit, or a prefix to apply to `target`.

        target : `~measure.UnitOfMeasure`, optional
            The unit to which to apply a prefix. Required if `key` is a
            prefix.

        Returns
        -------
        `~measure.UnitOfMeasure` or `None`
            The requested unit, or `None` if `key` is a symbol that neither
            this registry nor the catalog defines.
        """
        if isinstance(key, prefixes.Prefix):
            return self._get_prefixed(key, target)
        if isinstance(key, catalog.Unit):
            return self._get_canonical(key)
        with self._lock:
            found = self._by_symbol.get(key)
        if found is not None:
            return found
        unit = catalog.identify(key)
        if unit is not None:
            return self._get_canonical(unit)
        return None

    def _get_prefixed(
        self,
        prefix: prefixes.Prefix,
        target: measure.UnitOfMeasure,
    ) -> measure.UnitOfMeasure:
        """Get or create the prefixed version of `target`.

        The prefixed unit has the prefix symbol followed by the symbol of
        `target`. If that symbol already names a registered or catalog unit
        of a different type (e.g., milli-inch and the minute), the prefixed
        unit instead has the prefix symbol followed by the parenthesized
        symbol of `target`.
        """
        if target is None:
            raise measure.NullOperandError('target unit')
        candidates = (
            f"{prefix.symbol}{target.symbol}",
            f"{prefix.symbol}({target.symbol})",
        )
        with self._lock:
            for symbol in candidates:
                unit_type = self._symbol_type(symbol)
                if unit_type is None:
                    return self._create_prefixed(prefix, target, symbol)
                if unit_type is target.unit_type:
                    return self.get_uom(symbol)
                logger.debug(
                    "Prefixed symbol %r already names a unit of type %s",
                    symbol, unit_type,
                )
        raise measure.InvalidSymbolError(candidates[-1])

    def _symbol_type(self, symbol: str) -> typing.Optional[dimensions.UnitType]:
        """Get the type of the registered or catalog unit with `symbol`."""
        found = self._by_symbol.get(symbol)
        if found is not None:
            return found.unit_type
        unit = catalog.identify(symbol)
        if unit is not None:
            return catalog.definition(unit)['type']

    def _create_prefixed(
        self,
        prefix: prefixes.Prefix,
        target: measure.UnitOfMeasure,
        symbol: str,
    ) -> measure.UnitOfMeasure:
        """Create a new unit that is `prefix` times `target`."""
        if target.is_terminal:
            factor = prefix.factor
            abscissa = target
        else:
            factor = prefix.factor * target.scaling_factor
            abscissa = target.abscissa_unit
        uom = self.create_scalar_uom(
            target.unit_type,
            symbol,
            name=f"{prefix.name}{target.name}",
            description=f"{prefix.name} {target.description}".strip(),
        )
        uom.set_conversion(factor, abscissa)
        return uom

    def _get_canonical(self, unit: catalog.Unit) -> measure.UnitOfMeasure:
        """Get a catalog unit, building it if necessary."""
        with self._lock:
            found = self._by_id.get(unit)
            if found is not None:
                return found
            return self._build(unit)

    def _build(self, unit: catalog.Unit) -> measure.UnitOfMeasure:
        """Create and register the catalog unit `unit`.

        This method resolves every unit on which `unit` depends before
        creating `unit`, so that dependencies own their base symbols.
        """
        entry = catalog.definition(unit)
        existing = self._by_symbol.get(entry['symbol'])
        if existing is not None:
            return existing
        meta = {
            'symbol': entry['symbol'],
            'name': entry['name'],
            'description': entry['description'],
            'canonical_id': unit,
        }
        conversion = None
        if 'conversion' in entry:
            factor, abscissa, *offset = entry['conversion']
            conversion = (
                self._resolve_amount(factor),
                self._resolve(abscissa),
                *offset,
            )
        bridge = None
        if 'bridge' in entry:
            factor, abscissa = entry['bridge']
            bridge = (self._resolve_amount(factor), self._resolve(abscissa))
        scaling = None
        if 'scaling' in entry:
            scaling = self._resolve_amount(entry['scaling'])
        if 'power' in entry:
            base, exponent = entry['power']
            uom = self.create_power_uom(
                self._resolve(base), exponent, unit_type=entry['type'], **meta
            )
        elif 'product' in entry:
            operands = [self._resolve(e) for e in entry['product']]
            uom = self.create_product_uom(
                *operands, unit_type=entry['type'], **meta
            )
        elif 'quotient' in entry:
            operands = [self._resolve(e) for e in entry['quotient']]
            uom = self.create_quotient_uom(
                *operands, unit_type=entry['type'], **meta
            )
        else:
            uom = self.create_scalar_uom(entry['type'], **meta)
        if scaling is not None:
            uom.scaling_factor = scaling
        if conversion is not None:
            uom.set_conversion(*conversion)
        if bridge is not None:
            uom.set_bridge_conversion(*bridge)
        logger.debug("Built catalog unit %s as %r", unit, uom)
        return uom

    def _resolve(self, expression) -> measure.UnitOfMeasure:
        """Create (or get) the unit of measure described by `expression`."""
        if isinstance(expression, measure.UnitOfMeasure):
            return expression
        if isinstance(expression, (str, catalog.Unit)):
            uom = self.get_uom(expression)
            if uom is None:
                raise ValueError(f"Unknown unit {expression!r}")
            return uom
        kind, *args = expression
        if kind == 'product':
            a, b = (self._resolve(arg) for arg in args)
            return self.create_product_uom(a, b)
        if kind == 'quotient':
            a, b = (self._resolve(arg) for arg in args)
            return self.create_quotient_uom(a, b)
        if kind == 'power':
            base, exponent = args
            return self.create_power_uom(self._resolve(base), exponent)
        prefix = prefixes.Prefix.from_name(kind)
        if prefix is None:
            raise ValueError(f"Unknown unit expression {expression!r}")
        return self.get_uom(prefix, self._resolve(args[0]))

    def _resolve_amount(self, expression) -> float:
        """Compute the numerical value described by `expression`."""
        if isinstance(expression, numbers.Real):
            return float(expression)
        if isinstance(expression, constants.Constant):
            return self.get_quantity(expression).amount
        constant, target = expression
        named = self.get_quantity(constant)
        return named.convert(self._resolve(target)).amount

    def redefined(self, uom: measure.UnitOfMeasure) -> None:
        """Note that `uom` changed, making computed factors stale."""
        with self._lock:
            self.generation += 1
        logger.debug("Redefined %r", uom)

    def get_base_uom(
        self,
        base_symbol: str,
    ) -> typing.Optional[measure.UnitOfMeasure]:
        """Get the unit that owns a base symbol, if any."""
        with self._lock:
            return self._by_base_symbol.get(base_symbol)

    def get_one(self) -> measure.UnitOfMeasure:
        """The dimensionless unit of unity."""
        return self.get_uom(catalog.Unit.ONE)

    def get_second(self) -> measure.UnitOfMeasure:
        return self.get_uom(catalog.Unit.SECOND)

    def get_minute(self) -> measure.UnitOfMeasure:
        return self.get_uom(catalog.Unit.MINUTE)

    def get_hour(self) -> measure.UnitOfMeasure:
        return self.get_uom(catalog.Unit.HOUR)

    def get_day(self) -> measure.UnitOfMeasure:
        return self.get_uom(catalog.Unit.DAY)

    def get_quantity(self, constant: constants.Constant) -> quantity.Quantity:
        """Get a named physical constant.

        Parameters
        ----------
        constant : `~constants.Constant`
            The identifier of the constant.

        Returns
        -------
        `~quantity.Quantity`
            The value of the constant, with its name, symbol and description.
        """
        with self._lock:
            found = self._quantities.get(constant)
            if found is not None:
                return found
            entry = constants.definition(constant)
            if 'unit' in entry:
                unit = self._resolve(entry['unit'])
            else:
                unit = self.get_one()
            result = quantity.Quantity(entry.get('amount', 1.0), unit)
            for other, exponent in entry.get('derived', ()):
                term = self.get_quantity(other)
                for _ in range(abs(exponent)):
                    if exponent > 0:
                        result = result.multiply(term)
                    else:
                        result = result.divide(term)
            named = quantity.Quantity(
                result.amount,
                result.unit,
                name=entry['name'],
                symbol=entry['symbol'],
                description=entry['description'],
            )
            self._quantities[constant] = named
        logger.debug("Created constant %s = %r", constant, named)
        return named

    def get_registered_units(self) -> typing.List[measure.UnitOfMeasure]:
        """All registered units, sorted by symbol."""
        with self._lock:
            return sorted(self._by_symbol.values())

    def get_units_of_measure(
        self,
        unit_type: dimensions.UnitType,
    ) -> typing.List[measure.UnitOfMeasure]:
        """All catalog units of the given type."""
        return [self.get_uom(unit) for unit in catalog.of_type(unit_type)]

    def get_type_map(
        self,
        unit_type: dimensions.UnitType,
    ) -> typing.Dict[dimensions.UnitType, int]:
        """Get the exponents of fundamental types that make up `unit_type`.

        See `~dimensions.dimension_map`.
        """
        with self._lock:
            if unit_type not in self._type_maps:
                self._type_maps[unit_type] = dimensions.dimension_map(
                    unit_type
                )
            return dict(self._type_maps[unit_type])

    def clear_cache(self) -> None:
        """Forget all registered units and named constants."""
        with self._lock:
            for uom in self._by_symbol.values():
                uom.clear_cache()
            self._by_symbol.clear()
            self._by_base_symbol.clear()
            self._by_id.clear()
            self._quantities.clear()
            self._type_maps.clear()
        logger.debug("Cleared registry")
