"""
Units (:mod:`pyunitlib`)
========================

.. currentmodule:: pyunitlib

Typed physical quantities with unit conversion and dimensional analysis.

Examples
--------

Each physical dimension has its own quantity type, created from a value
and any registered alias of one of its units:

>>> d = Length(10, 'km')
>>> d.to_unit('m')
10000.0
>>> Length(1, 'feet').native_value
0.3048

Types based on an SI unit also accept any metric prefix on that unit,
including squared and cubed units:

>>> Area(1, 'km²').to_unit('cm²')
10000000000.0
>>> Mass(2.5, 'kg').to_unit('g')
2500.0

Quantities of the same type can be added, subtracted and compared.  The
result is always given in the native unit of the type:

>>> Length(1, 'm') + Length(50, 'cm')
Length(1.5, 'm')
>>> Length(1, 'ft') < Length(1, 'm')
True

Multiplying, dividing or raising quantities to a power gives the
dimensionally correct type, where the combination is known:

>>> v = Length(100, 'm') / Time(10, 's')
>>> v
Velocity(10.0, 'm/s')
>>> f = Mass(10, 'kg') * Acceleration(9.80665, 'm/s²')
>>> round(f.to_unit('N'), 4)
98.0665

Force × Length is ambiguous; ``Energy`` is given unless ``Torque`` is
requested:

>>> Force(10, 'N').multiply(Length(2, 'm'), Torque)
Torque(20.0, 'N⋅m')

Combinations that are not known raise an error rather than produce a
quantity of unknown type:

>>> Time(2, 's') ** 2  # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
pyunitlib.exceptions.UnsupportedDimensionError: Time² is not a directly
supported unit.

Temperature values are converted using the proper offsets:

>>> round(Temperature(100, '°C').to_unit('°F'), 6)
212.0

Quantities can be created from text or from serialized form:

>>> round(parse('25 mph').to_unit('km/h'), 2)
40.23
>>> from_json(Length(10, 'km').to_json())
Length(10.0, 'km')

``Quantity`` objects support any format statements that can be used
directly on their original value:

>>> print(f"Span = {Length(10.25, 'm'):.2f}")
Span = 10.25 m
"""

__version__ = "0.1.0"

from ._opts import UnitOptions, get_unit_options, set_unit_options, \
    unit_options
from .exceptions import (DivisionByZeroError, IncompatibleTypesError,
                         InvalidExponentError, InvalidSIUnitError,
                         ParseError, QuantityError, UnitNotFoundError,
                         UnsupportedDimensionError)
from ._units import UnitOfMeasurement, UnitTable
from ._si import METRIC_PREFIXES, SIPrefixable, convert_si_unit
from ._quantity import Kind, Quantity, quantity_class
from ._defs import (Acceleration, AmountOfSubstance, Angle, Area,
                    Capacitance, Charge, Current, Density, Energy, Force,
                    Frequency, Inductance, Length, LuminousIntensity,
                    MagneticFlux, Mass, Power, Pressure, Resistance,
                    Temperature, Time, Torque, Velocity, Voltage, Volume)
from ._parse import from_dict, from_json, parse
