"""
The abstract ``Quantity`` type, holding a value together with its unit, and
the closed tables used to derive new quantity types from products,
quotients and powers of existing ones.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
import json
from numbers import Integral, Real
import threading
from typing import NamedTuple, Optional, Union
import warnings

from pyunitlib._opts import get_unit_options
from pyunitlib._si import SIPrefixable
from pyunitlib._units import UnitOfMeasurement, UnitTable
from pyunitlib.exceptions import (
    DivisionByZeroError, IncompatibleTypesError, InvalidExponentError,
    InvalidSIUnitError, UnitNotFoundError, UnsupportedDimensionError)

__all__ = ['Kind', 'Quantity', 'quantity_class']


# ======================================================================

class Kind(Enum):
    """
    Type tag identifying each concrete quantity type.  The dimensional
    dispatch tables are keyed on these values.
    """
    LENGTH = 'Length'
    MASS = 'Mass'
    TIME = 'Time'
    TEMPERATURE = 'Temperature'
    AREA = 'Area'
    VOLUME = 'Volume'
    FORCE = 'Force'
    ENERGY = 'Energy'
    POWER = 'Power'
    PRESSURE = 'Pressure'
    VELOCITY = 'Velocity'
    ACCELERATION = 'Acceleration'
    CURRENT = 'Current'
    VOLTAGE = 'Voltage'
    RESISTANCE = 'Resistance'
    CHARGE = 'Charge'
    CAPACITANCE = 'Capacitance'
    INDUCTANCE = 'Inductance'
    MAGNETIC_FLUX = 'MagneticFlux'
    FREQUENCY = 'Frequency'
    ANGLE = 'Angle'
    TORQUE = 'Torque'
    DENSITY = 'Density'
    LUMINOUS_INTENSITY = 'LuminousIntensity'
    AMOUNT_OF_SUBSTANCE = 'AmountOfSubstance'


_REGISTRY: dict[Kind, type[Quantity]] = {}  # Filled by __init_subclass__.
_TABLE_LOCK = threading.RLock()  # Guards lazy unit table population.

ResultType = Union[Kind, type, str, None]


# ----------------------------------------------------------------------

class Quantity(ABC):
    """
    ``Quantity`` represents a physical quantity, consisting of a value and
    the unit it was given in.  Concrete subclasses exist for each physical
    dimension (``Length``, ``Mass``, etc) and each owns a ``UnitTable``
    of the units it accepts.

    Every value is also held in the *native unit* of its type, which is
    the first unit registered in its table (e.g. 'm' for ``Length``,
    'g' for ``Mass``).  All arithmetic and comparisons are done on these
    native values, and the results are new objects; a ``Quantity`` is
    never modified after construction.

    Types mixing in ``SIPrefixable`` additionally accept any metric prefix
    on their SI base unit, e.g. ``Length(3, 'km')`` even though only 'm',
    'ft' and 'in' are registered for ``Length``.

    Examples
    --------
    >>> from pyunitlib import Length, Time
    >>> d = Length(1, 'm') + Length(50, 'cm')
    >>> d.to_unit('m')
    1.5
    >>> v = Length(100, 'm') / Time(10, 's')
    >>> type(v).__name__, v.to_unit('m/s')
    ('Velocity', 10.0)
    """
    __slots__ = ('_original_value', '_original_unit', '_native_value')

    kind: Optional[Kind] = None
    """Type tag of the concrete quantity type."""

    _unit_table: Optional[UnitTable] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._unit_table = None  # Each type populates its own table.

        kind = cls.__dict__.get('kind')
        if kind is not None:
            if kind in _REGISTRY:
                raise TypeError(f"Quantity kind {kind} already registered "
                                f"by {_REGISTRY[kind].__name__}.")
            _REGISTRY[kind] = cls

    def __init__(self, value: float, unit: Union[str, UnitOfMeasurement]):
        """
        Parameters
        ----------
        value : float
            Value of the quantity in `unit`.
        unit : str or UnitOfMeasurement
            Any registered alias of a unit of this type or, for
            ``SIPrefixable`` types, a metric-prefixed form of the SI base
            unit.  A ``UnitOfMeasurement`` is resolved using its symbol.

        Raises
        ------
        UnitNotFoundError
            If `unit` cannot be resolved.
        """
        if isinstance(value, str):
            warnings.warn(f"{type(self).__name__}() received string where "
                          f"a numeric value was expected.")

        value = float(value)
        table = self.unit_table()
        unit_name = unit.symbol if isinstance(unit, UnitOfMeasurement) else unit

        try:
            found = table.find_unit(unit_name)
            native_value = self._to_native(value, found)

        except UnitNotFoundError as e:
            if not self._si_fallback_enabled():
                raise

            native_symbol = table.native_unit.symbol
            try:
                # noinspection PyUnresolvedReferences
                native_value = self.convert_si_unit(value, unit_name,
                                                    native_symbol)
                # noinspection PyUnresolvedReferences
                factor = self.convert_si_unit(1.0, unit_name, native_symbol)
            except InvalidSIUnitError:
                raise e from None

            found = UnitOfMeasurement(unit_name, factor)

        self._original_value = value
        self._original_unit = found
        self._native_value = native_value

    # -- Unit Table ----------------------------------------------------

    @classmethod
    @abstractmethod
    def _initialise(cls, table: UnitTable):
        """
        Populate `table` with the units of this quantity type.  The first
        unit added is the native unit and must have a conversion factor
        of 1.
        """
        raise NotImplementedError

    @classmethod
    def unit_table(cls) -> UnitTable:
        """
        Returns the (finalised) unit table for this quantity type.  The
        table is populated on first use; this is done once only, even if
        called from several threads at the same time.
        """
        table = cls.__dict__.get('_unit_table')
        if table is not None:
            return table

        with _TABLE_LOCK:
            table = cls.__dict__.get('_unit_table')
            if table is None:
                table = UnitTable(cls.__name__)
                cls._initialise(table)
                table.finalise()
                if table.native_unit.conversion_factor != 1:
                    raise ValueError(f"Native unit of {cls.__name__} must "
                                     f"have a conversion factor of 1.")
                cls._unit_table = table

        return table

    @classmethod
    def _si_fallback_enabled(cls) -> bool:
        return (issubclass(cls, SIPrefixable) and
                get_unit_options().si_prefix_fallback)

    # -- Properties ----------------------------------------------------

    @property
    def native_unit(self) -> UnitOfMeasurement:
        """The first registered unit of this quantity type."""
        return self.unit_table().native_unit

    @property
    def native_value(self) -> float:
        """The value expressed in `native_unit`."""
        return self._native_value

    @property
    def original_unit(self) -> UnitOfMeasurement:
        """
        The unit given at construction.  If this was resolved using a
        metric prefix, it is a record created for that unit string alone,
        with its true factor relative to the native unit (e.g. 1000 for
        'km') rather than a placeholder factor of 1.
        """
        return self._original_unit

    @property
    def original_value(self) -> float:
        """The value given at construction."""
        return self._original_value

    # -- Conversion ----------------------------------------------------

    def _to_native(self, value: float, unit: UnitOfMeasurement) -> float:
        return value * unit.conversion_factor

    def _from_native(self, unit: UnitOfMeasurement) -> float:
        return self._native_value / unit.conversion_factor

    def convert(self, unit: Union[str, UnitOfMeasurement]) -> Quantity:
        """
        Generate a new quantity of the same type expressed in `unit`.
        """
        return type(self)(self.to_unit(unit), unit)

    def copy(self) -> Quantity:
        """
        A new quantity with the same original value and unit.  The unit is
        not resolved again, so the copy does not depend on the current
        options.
        """
        new = object.__new__(type(self))
        new._original_value = self._original_value
        new._original_unit = self._original_unit
        new._native_value = self._native_value
        return new

    def to_native_unit(self) -> Quantity:
        """A new quantity of the same type expressed in `native_unit`."""
        return type(self)(self._native_value, self.native_unit)

    def to_unit(self, unit: Union[str, UnitOfMeasurement]) -> float:
        """
        Returns the value of this quantity expressed in `unit`.

        Parameters
        ----------
        unit : str or UnitOfMeasurement
            Target unit.  Strings are resolved in the same way as for
            construction.  Compound units (e.g. 'ft/h') are only available
            if registered for this type.

        Raises
        ------
        UnitNotFoundError
            If `unit` cannot be resolved.
        """
        if isinstance(unit, UnitOfMeasurement):
            return self._from_native(unit)

        try:
            target = self.unit_table().find_unit(unit)
        except UnitNotFoundError as e:
            if not self._si_fallback_enabled():
                raise
            try:
                # noinspection PyUnresolvedReferences
                return self.convert_si_unit(self._native_value,
                                            self.native_unit.symbol, unit)
            except InvalidSIUnitError:
                raise e from None

        return self._from_native(target)

    # -- Arithmetic ----------------------------------------------------

    def add(self, other: Quantity) -> Quantity:
        """
        Add a quantity of the same type.  The result is in the native unit.

        Raises
        ------
        IncompatibleTypesError
            If `other` is not of the same type.
        """
        self._check_same_type(other, 'add')
        return type(self)(self._native_value + other.native_value,
                          self.native_unit)

    def subtract(self, other: Quantity) -> Quantity:
        """
        Subtract a quantity of the same type.  The result is in the
        native unit.

        Raises
        ------
        IncompatibleTypesError
            If `other` is not of the same type.
        """
        self._check_same_type(other, 'subtract')
        return type(self)(self._native_value - other.native_value,
                          self.native_unit)

    def scale(self, factor: float) -> Quantity:
        """
        Multiply by a plain number, giving the same type of quantity in
        the native unit.
        """
        return type(self)(self._native_value * float(factor),
                          self.native_unit)

    def multiply(self, other: Quantity,
                 result_type: ResultType = None) -> Quantity:
        """
        Multiply by another quantity giving the dimensionally correct
        derived type, e.g. ``Length * Length -> Area``.  See the
        multiplication table in the module documentation for all supported
        combinations.

        Parameters
        ----------
        other : Quantity
            Right hand side.
        result_type : Quantity subclass, Kind or str, optional
            Selects the result where a product is ambiguous.  ``Force *
            Length`` gives ``Energy`` unless ``Torque`` is requested.

        Raises
        ------
        UnsupportedDimensionError
            If the product of these types (or the requested
            `result_type`) is not supported.
        """
        _check_quantity(other, 'multiply')
        entry = _PRODUCTS.get((self.kind, other.kind))
        if entry is None:
            raise UnsupportedDimensionError(
                f"Cannot multiply {self.native_unit} by "
                f"{other.native_unit}: resulting unit "
                f"'{self.native_unit} {other.native_unit}' is not supported",
                op='multiply', left=type(self).__name__,
                right=type(other).__name__)

        kind = _select_result(entry, result_type, 'multiply', self, other)
        return _make(kind, self._native_value * other.native_value *
                     entry.scale)

    def divide(self, other: Quantity) -> Quantity:
        """
        Divide by another quantity giving the dimensionally correct
        derived type, e.g. ``Length / Time -> Velocity``.  See the division
        table in the module documentation for all supported combinations.

        Raises
        ------
        DivisionByZeroError
            If `other` has a native value of zero.
        UnsupportedDimensionError
            If the quotient of these types is not supported.
        """
        _check_quantity(other, 'divide')
        if other.native_value == 0.0:
            raise DivisionByZeroError("Cannot divide by zero")

        entry = _QUOTIENTS.get((self.kind, other.kind))
        if entry is None:
            raise UnsupportedDimensionError(
                f"Cannot divide {self.native_unit} by {other.native_unit}: "
                f"resulting unit '{self.native_unit}/{other.native_unit}' "
                f"is not supported", op='divide', left=type(self).__name__,
                right=type(other).__name__)

        kind = _select_result(entry, None, 'divide', self, other)
        return _make(kind, self._native_value / other.native_value *
                     entry.scale)

    def power(self, exponent: int) -> Quantity:
        """
        Raise this quantity to an integer power giving the dimensionally
        correct derived type, e.g. ``Length ** 2 -> Area``.  A power of one
        returns a copy.

        Raises
        ------
        InvalidExponentError
            If `exponent` is zero.
        UnsupportedDimensionError
            If the power of this type is not supported.
        DivisionByZeroError
            If a zero value is raised to a negative power.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, Integral):
            raise TypeError(f"Exponent must be an integer, got: "
                            f"{exponent!r}")
        exponent = int(exponent)

        if exponent == 0:
            raise InvalidExponentError(exponent)
        if exponent == 1:
            return self.copy()

        key = (self.kind, exponent)
        if key in _POWER_REFUSALS:
            raise UnsupportedDimensionError(
                _POWER_REFUSALS[key], op='power', left=type(self).__name__,
                exponent=exponent)

        entry = _POWERS.get(key)
        if entry is None:
            raise UnsupportedDimensionError(
                f"Cannot raise {self.native_unit} to power {exponent}: "
                f"resulting unit is not supported", op='power',
                left=type(self).__name__, exponent=exponent)

        if exponent < 0 and self._native_value == 0.0:
            raise DivisionByZeroError(f"Cannot raise zero to power "
                                      f"{exponent}")

        return _make(entry.results[0],
                     self._native_value ** exponent * entry.scale)

    # -- Comparison ----------------------------------------------------

    def compare_to(self, other: Quantity) -> int:
        """
        Returns 1 if this quantity is greater than `other`, -1 if it is
        less and 0 if the native values are identical.

        Raises
        ------
        IncompatibleTypesError
            If `other` is not of the same type.
        """
        self._check_same_type(other, 'compare')
        diff = self._native_value - other.native_value
        return (diff > 0) - (diff < 0)

    def equals(self, other: Quantity,
               epsilon: Optional[float] = None) -> bool:
        """
        Returns ``True`` if the native values differ by less than
        `epsilon` (default is the `equality_tolerance` option, normally
        1e-10).

        Raises
        ------
        IncompatibleTypesError
            If `other` is not of the same type.
        """
        self._check_same_type(other, 'compare')
        if epsilon is None:
            epsilon = get_unit_options().equality_tolerance
        return abs(self._native_value - other.native_value) < epsilon

    def greater_or_equal(self, other: Quantity) -> bool:
        return self.compare_to(other) >= 0

    def greater_than(self, other: Quantity) -> bool:
        return self.compare_to(other) > 0

    def less_or_equal(self, other: Quantity) -> bool:
        return self.compare_to(other) <= 0

    def less_than(self, other: Quantity) -> bool:
        return self.compare_to(other) < 0

    def _check_same_type(self, other, action: str):
        if type(other) is not type(self):
            raise IncompatibleTypesError(type(self).__name__,
                                         type(other).__name__, action)

    # -- Serialization -------------------------------------------------

    def to_dict(self) -> dict:
        """
        Returns a JSON-compatible ``dict`` holding both the original and
        native values and units, and the name of the quantity type.  See
        ``from_dict()`` for the reverse operation.
        """
        return {
            'value': self._original_value,
            'unit': self._original_unit.symbol,
            'nativeValue': self._native_value,
            'nativeUnit': self.native_unit.symbol,
            'class': type(self).__name__,
        }

    def to_json(self) -> str:
        """``to_dict()`` encoded as a JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    # -- Operators -----------------------------------------------------

    def __abs__(self):
        return type(self)(abs(self._native_value), self.native_unit)

    def __neg__(self):
        return self.scale(-1)

    def __add__(self, rhs):
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.add(rhs)

    def __sub__(self, rhs):
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.subtract(rhs)

    def __mul__(self, rhs):
        """
        ``Quantity * Quantity`` is ``multiply()``, ``Quantity * number``
        is ``scale()``.
        """
        if isinstance(rhs, Quantity):
            return self.multiply(rhs)
        if isinstance(rhs, Real):
            return self.scale(rhs)
        return NotImplemented

    def __rmul__(self, lhs):
        if isinstance(lhs, Real):
            return self.scale(lhs)
        return NotImplemented

    def __truediv__(self, rhs):
        """
        ``Quantity / Quantity`` is ``divide()``, ``Quantity / number``
        is ``scale(1 / number)``.
        """
        if isinstance(rhs, Quantity):
            return self.divide(rhs)
        if isinstance(rhs, Real):
            if rhs == 0:
                raise DivisionByZeroError("Cannot divide by zero")
            return self.scale(1 / rhs)
        return NotImplemented

    def __pow__(self, exponent):
        return self.power(exponent)

    def __eq__(self, rhs):
        """
        Quantities of the same type are equal if ``equals()`` holds.
        Quantities of different types are never equal.
        """
        if not isinstance(rhs, Quantity):
            return NotImplemented
        if type(rhs) is not type(self):
            return False
        return self.equals(rhs)

    __hash__ = None  # Equality is approximate.

    def __ge__(self, rhs):
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.greater_or_equal(rhs)

    def __gt__(self, rhs):
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.greater_than(rhs)

    def __le__(self, rhs):
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.less_or_equal(rhs)

    def __lt__(self, rhs):
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return self.less_than(rhs)

    # -- String Magic Methods ------------------------------------------

    def __format__(self, format_spec: str):
        return (format(self._original_value, format_spec) +
                f" {self._original_unit.symbol}")

    def __repr__(self):
        return (f"{type(self).__name__}({self._original_value!r}, "
                f"{self._original_unit.symbol!r})")

    def __str__(self):
        return self.__format__('')


# ----------------------------------------------------------------------

def quantity_class(kind: Union[Kind, str]) -> type[Quantity]:
    """
    Returns the concrete quantity type for `kind`, which can be a ``Kind``
    or the name of the type (e.g. 'Velocity').

    Raises
    ------
    KeyError
        If no such quantity type exists.
    """
    try:
        return _REGISTRY[Kind(kind)]
    except ValueError:
        raise KeyError(f"Unknown quantity type '{kind}'.") from None


def _check_quantity(other, op: str):
    if not isinstance(other, Quantity):
        raise TypeError(f"Cannot {op} by {type(other).__name__}, a "
                        f"Quantity is required.")


def _make(kind: Kind, native_value: float) -> Quantity:
    """Construct the quantity type for `kind` from a native value."""
    cls = _REGISTRY[kind]
    return cls(native_value, cls.unit_table().native_unit)


def _select_result(entry: _Derivation, result_type: ResultType, op: str,
                   lhs: Quantity, rhs: Quantity) -> Kind:
    """
    Choose the result from the candidates of a table entry.  The first
    candidate is the default.
    """
    if result_type is None:
        return entry.results[0]

    if isinstance(result_type, Kind):
        kind = result_type
    elif isinstance(result_type, str):
        try:
            kind = quantity_class(result_type).kind
        except KeyError:
            kind = None
    else:
        kind = getattr(result_type, 'kind', None)

    if kind in entry.results:
        return kind

    name = getattr(result_type, '__name__', None) or str(result_type)
    raise UnsupportedDimensionError(
        f"Cannot {op} {type(lhs).__name__} by {type(rhs).__name__} giving "
        f"{name}", op=op, left=type(lhs).__name__, right=type(rhs).__name__)


# == Dimensional Dispatch Tables =======================================

class _Derivation(NamedTuple):
    """
    Result of a table lookup: candidate result kinds (the first is the
    default) and a factor applied to the numeric result.
    """
    results: tuple[Kind, ...]
    scale: float = 1.0


_PRODUCTS: dict[tuple[Kind, Kind], _Derivation] = {}
_QUOTIENTS: dict[tuple[Kind, Kind], _Derivation] = {}
_POWERS: dict[tuple[Kind, int], _Derivation] = {}
_POWER_REFUSALS: dict[tuple[Kind, int], str] = {}


def _product(lhs: Kind, rhs: Kind, *results: Kind, scale: float = 1.0,
             commutes: bool = True):
    """Record ``lhs * rhs -> results`` and, by default, ``rhs * lhs``."""
    _PRODUCTS[lhs, rhs] = _Derivation(results, scale)
    if commutes:
        _PRODUCTS[rhs, lhs] = _Derivation(results, scale)


def _quotient(lhs: Kind, rhs: Kind, result: Kind, scale: float = 1.0):
    """Record ``lhs / rhs -> result``."""
    _QUOTIENTS[lhs, rhs] = _Derivation((result,), scale)


def _power(base: Kind, exponent: int, result: Kind):
    """Record ``base ** exponent -> result``."""
    _POWERS[base, exponent] = _Derivation((result,))


# Notes:
#   - Mass is held natively in grams, whereas Force, Density, etc are
#     based on kilograms.  The scale factors below bridge g <-> kg.
#   - Length * Length and Area * Length are the only geometric products;
#     Length * Area is the same product in the other order.

# -- Products ----------------------------------------------------------

K = Kind
_product(K.LENGTH, K.LENGTH, K.AREA)
_product(K.AREA, K.LENGTH, K.VOLUME)
_product(K.MASS, K.ACCELERATION, K.FORCE, scale=1e-3)
_product(K.FORCE, K.LENGTH, K.ENERGY, K.TORQUE)  # Energy unless hinted.
_product(K.CURRENT, K.RESISTANCE, K.VOLTAGE)
_product(K.VOLTAGE, K.TIME, K.MAGNETIC_FLUX)
_product(K.CURRENT, K.TIME, K.CHARGE)
_product(K.VELOCITY, K.TIME, K.LENGTH)
_product(K.ACCELERATION, K.TIME, K.VELOCITY)
_product(K.PRESSURE, K.AREA, K.FORCE)
_product(K.POWER, K.TIME, K.ENERGY)
_product(K.VOLTAGE, K.CURRENT, K.POWER)
_product(K.FORCE, K.VELOCITY, K.POWER)
_product(K.DENSITY, K.VOLUME, K.MASS, scale=1e3)
_product(K.CAPACITANCE, K.VOLTAGE, K.CHARGE)
_product(K.INDUCTANCE, K.CURRENT, K.MAGNETIC_FLUX)

# -- Quotients ---------------------------------------------------------

_quotient(K.LENGTH, K.TIME, K.VELOCITY)
_quotient(K.LENGTH, K.VELOCITY, K.TIME)
_quotient(K.VELOCITY, K.TIME, K.ACCELERATION)
_quotient(K.VELOCITY, K.ACCELERATION, K.TIME)
_quotient(K.ENERGY, K.TIME, K.POWER)
_quotient(K.ENERGY, K.POWER, K.TIME)
_quotient(K.ENERGY, K.FORCE, K.LENGTH)
_quotient(K.ENERGY, K.LENGTH, K.FORCE)
_quotient(K.TORQUE, K.LENGTH, K.FORCE)
_quotient(K.FORCE, K.AREA, K.PRESSURE)
_quotient(K.FORCE, K.PRESSURE, K.AREA)
_quotient(K.FORCE, K.MASS, K.ACCELERATION, scale=1e3)
_quotient(K.FORCE, K.ACCELERATION, K.MASS, scale=1e3)
_quotient(K.AREA, K.LENGTH, K.LENGTH)
_quotient(K.VOLUME, K.LENGTH, K.AREA)
_quotient(K.VOLUME, K.AREA, K.LENGTH)
_quotient(K.MASS, K.VOLUME, K.DENSITY, scale=1e-3)
_quotient(K.MASS, K.DENSITY, K.VOLUME, scale=1e-3)
_quotient(K.VOLTAGE, K.CURRENT, K.RESISTANCE)
_quotient(K.VOLTAGE, K.RESISTANCE, K.CURRENT)
_quotient(K.POWER, K.VOLTAGE, K.CURRENT)
_quotient(K.POWER, K.CURRENT, K.VOLTAGE)
_quotient(K.CHARGE, K.VOLTAGE, K.CAPACITANCE)
_quotient(K.CHARGE, K.CAPACITANCE, K.VOLTAGE)
_quotient(K.CHARGE, K.TIME, K.CURRENT)
_quotient(K.CHARGE, K.CURRENT, K.TIME)
_quotient(K.MAGNETIC_FLUX, K.CURRENT, K.INDUCTANCE)
_quotient(K.MAGNETIC_FLUX, K.INDUCTANCE, K.CURRENT)
_quotient(K.MAGNETIC_FLUX, K.TIME, K.VOLTAGE)
_quotient(K.MAGNETIC_FLUX, K.VOLTAGE, K.TIME)

# -- Powers ------------------------------------------------------------

_power(K.LENGTH, 2, K.AREA)
_power(K.LENGTH, 3, K.VOLUME)
_power(K.TIME, -1, K.FREQUENCY)
_power(K.FREQUENCY, -1, K.TIME)

_POWER_REFUSALS[K.TIME, 2] = (
    "Time² is not a directly supported unit. Use division operations to "
    "create derived units like Acceleration (Length/Time²)")

del K
