"""
Creation of quantities from free text and from serialized (``dict`` /
JSON) form.
"""
from __future__ import annotations

import json
import re
from typing import Union
import warnings

from pyunitlib._opts import get_unit_options
from pyunitlib._quantity import Kind, Quantity, quantity_class
from pyunitlib.exceptions import ParseError, UnitNotFoundError

__all__ = ['from_dict', 'from_json', 'parse']

# Quantity types tried by parse() when no type is expected, in order of
# precedence.
_CATALOGUE = (Kind.LENGTH, Kind.MASS, Kind.TIME, Kind.TEMPERATURE, Kind.AREA,
              Kind.VOLUME, Kind.FORCE, Kind.ENERGY, Kind.POWER,
              Kind.PRESSURE, Kind.VELOCITY, Kind.ACCELERATION, Kind.CURRENT,
              Kind.VOLTAGE, Kind.RESISTANCE, Kind.LUMINOUS_INTENSITY,
              Kind.AMOUNT_OF_SUBSTANCE, Kind.ANGLE, Kind.FREQUENCY,
              Kind.CHARGE, Kind.DENSITY, Kind.TORQUE, Kind.CAPACITANCE,
              Kind.INDUCTANCE, Kind.MAGNETIC_FLUX)

_QUANTITY_RE = re.compile(
    r'^([+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)\s*(.*)$')


# ======================================================================

def parse(text: str,
          expected: Union[type[Quantity], Kind, str, None] = None
          ) -> Quantity:
    """
    Create a quantity from text of the form ``'<number> <unit>'``, e.g.
    '10 km', '-3.5e2 N' or '25°C'.  Whitespace between the number and unit
    is optional, but the unit is required.

    If `expected` is given the text is interpreted as that quantity type.
    Otherwise each standard type is tried in a fixed order and the first
    that accepts the unit is used.  Where more than one type accepts the
    unit (e.g. 'g' is both gram and standard gravity) a warning is issued
    if the ``warn_ambiguous_parse`` option is set.

    Examples
    --------
    >>> parse('10 km')
    Length(10.0, 'km')
    >>> parse('10 kg', 'Mass').to_unit('g')
    10000.0

    Parameters
    ----------
    text : str
        Text to parse.
    expected : Quantity subclass, Kind or str, optional
        Required quantity type (the class itself, its ``Kind`` or its
        name).

    Returns
    -------
    result : Quantity

    Raises
    ------
    ParseError
        If the text is not of the correct form, `expected` is not a
        quantity type or no quantity type accepts the unit.
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected a string to parse, got "
                         f"{type(text).__name__}.", text=text)

    match = _QUANTITY_RE.match(text.strip())
    if match is None:
        raise ParseError(f"Could not parse quantity from '{text}'.",
                         text=text)

    value, unit = float(match.group(1)), match.group(2).strip()
    if not unit:
        raise ParseError(f"No unit given in '{text}'.", text=text)

    if expected is not None:
        cls = _resolve_class(expected, text)
        try:
            return cls(value, unit)
        except UnitNotFoundError as e:
            raise ParseError(f"Could not parse '{text}' as {cls.__name__}: "
                             f"{e}", text=text) from e

    results = []
    for kind in _CATALOGUE:
        try:
            results.append(quantity_class(kind)(value, unit))
        except UnitNotFoundError:
            continue

    if not results:
        raise ParseError(f"Unit '{unit}' in '{text}' is not recognised by "
                         f"any quantity type.", text=text)

    if len(results) > 1 and get_unit_options().warn_ambiguous_parse:
        names = ', '.join(type(q).__name__ for q in results)
        warnings.warn(f"Unit '{unit}' is ambiguous ({names}), using "
                      f"{type(results[0]).__name__}.")

    return results[0]


def from_dict(data: dict) -> Quantity:
    """
    Recreate a quantity from a ``dict`` produced by ``Quantity.to_dict()``.
    Only the 'class', 'value' and 'unit' entries are used; the native
    value is recomputed.

    Examples
    --------
    >>> from pyunitlib import Length
    >>> from_dict(Length(10, 'km').to_dict())
    Length(10.0, 'km')

    Raises
    ------
    ParseError
        If any entry is missing or invalid.
    """
    if not isinstance(data, dict):
        raise ParseError(f"Expected a dict, got {type(data).__name__}.")

    missing = [k for k in ('class', 'value', 'unit') if k not in data]
    if missing:
        raise ParseError(f"Missing required field(s): {', '.join(missing)}.")

    cls = _resolve_class(data['class'], data)

    value = data['value']
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"Field 'value' must be a number, got: {value!r}")

    try:
        return cls(value, data['unit'])
    except UnitNotFoundError as e:
        raise ParseError(f"Could not recreate {cls.__name__}: {e}") from e


def from_json(text: str) -> Quantity:
    """
    Recreate a quantity from a JSON string produced by
    ``Quantity.to_json()``.  See ``from_dict()``.
    """
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise ParseError(f"Invalid JSON: {e}") from e

    return from_dict(data)


# ----------------------------------------------------------------------

def _resolve_class(expected, source) -> type[Quantity]:
    if isinstance(expected, type):
        if issubclass(expected, Quantity) and expected.kind is not None:
            return expected
        raise ParseError(f"{expected.__name__} is not a quantity type.",
                         text=source)

    try:
        return quantity_class(expected)
    except KeyError:
        raise ParseError(f"Unknown quantity type '{expected}'.",
                         text=source) from None
