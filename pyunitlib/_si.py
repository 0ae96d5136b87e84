"""
Conversion between metric-prefixed forms of a single SI base unit, e.g.
'km' -> 'mm' or 'km²' -> 'cm²', without any per-unit tables.
"""
from __future__ import annotations

from pyunitlib.exceptions import InvalidSIUnitError

__all__ = ['METRIC_PREFIXES', 'SIPrefixable', 'convert_si_unit']


# ======================================================================

METRIC_PREFIXES = {
    '': 0,
    'k': 3,  # kilo
    'h': 2,  # hecto
    'da': 1,  # deca
    'd': -1,  # deci
    'c': -2,  # centi
    'm': -3,  # milli
    'μ': -6,  # micro (Greek mu)
    'µ': -6,  # micro (micro sign)
    'n': -9,  # nano
    'p': -12,  # pico
    'f': -15,  # femto
    'a': -18,  # atto
    'z': -21,  # zepto
    'y': -24,  # yocto
    'r': -27,  # ronto
    'q': -30,  # quecto
    'M': 6,  # mega
    'G': 9,  # giga
    'T': 12,  # tera
    'P': 15,  # peta
    'E': 18,  # exa
    'Z': 21,  # zetta
    'Y': 24,  # yotta
    'R': 27,  # ronna
    'Q': 30,  # quetta
}
"""Metric prefixes and their associated powers of ten."""

# Power markers that may end a base unit symbol, as (unicode, ascii).
_POWER_MARKERS = {2: ('²', '2'), 3: ('³', '3')}


# ----------------------------------------------------------------------

def convert_si_unit(value: float, from_unit: str, to_unit: str,
                    base_unit: str) -> float:
    """
    Convert `value` between two metric-prefixed forms of `base_unit`.

    The power of the base unit is taken from a trailing '²'/'2' or
    '³'/'3' on `base_unit` (e.g. 'm²' is an area unit) and the linear
    prefix factor is raised to this power.  Either form of the marker is
    accepted in `from_unit` and `to_unit`.  Compound base units containing
    '/' (e.g. 'm/s²') are always treated as linear, as the marker belongs
    to the denominator.  This differs from a literal reading of the
    trailing marker, which would give 'km/s²' a factor of 10⁶ instead of
    1000.

    Examples
    --------
    >>> convert_si_unit(1, 'km', 'mm', 'm')
    1000000.0
    >>> convert_si_unit(1, 'km²', 'cm2', 'm²')
    10000000000.0
    >>> convert_si_unit(5, 'kg', 'g', 'g')
    5000.0

    Parameters
    ----------
    value : float
        Value in `from_unit`.
    from_unit, to_unit : str
        Prefixed units, each ending in `base_unit` (or its alternate power
        form).
    base_unit : str
        Unprefixed symbol of the SI unit.

    Returns
    -------
    result : float
        `value` expressed in `to_unit`.

    Raises
    ------
    InvalidSIUnitError
        If either unit does not end in `base_unit`, has an unknown prefix
        or the powers of the two units differ.
    """
    base_power = _base_power(base_unit)
    from_prefix, from_power = _extract_prefix_and_power(from_unit, base_unit,
                                                        base_power)
    to_prefix, to_power = _extract_prefix_and_power(to_unit, base_unit,
                                                    base_power)

    for unit, prefix in ((from_unit, from_prefix), (to_unit, to_prefix)):
        if prefix not in METRIC_PREFIXES:
            raise InvalidSIUnitError(unit, details=f"Unknown prefix "
                                                   f"'{prefix}'.")

    if from_power != to_power:
        raise InvalidSIUnitError(to_unit, details=f"Power mismatch "
                                                  f"{from_power} != "
                                                  f"{to_power}.")

    exponent = METRIC_PREFIXES[from_prefix] - METRIC_PREFIXES[to_prefix]
    return float(value) * 10 ** (exponent * from_power)


def _base_power(base_unit: str) -> int:
    """
    Power (1, 2 or 3) indicated by a trailing marker on `base_unit`.
    """
    if '/' in base_unit:
        return 1

    for power, markers in _POWER_MARKERS.items():
        if base_unit.endswith(markers):
            return power
    return 1


def _extract_prefix_and_power(unit: str, base_unit: str,
                              base_power: int) -> tuple[str, int]:
    """
    Split `unit` into a prefix string and power, e.g. ('k', 2) for 'km²'
    with base 'm²'.  The prefix is not validated here.
    """
    if not isinstance(unit, str):
        raise InvalidSIUnitError(unit, details="Unit must be a string.")

    if unit.endswith(base_unit):
        return unit[:-len(base_unit)], base_power

    if base_power > 1:
        # Retry with the other form of the power marker, i.e. 'm2' for
        # 'm²' and vice versa.
        stem = base_unit[:-1]
        for marker in _POWER_MARKERS[base_power]:
            if unit.endswith(stem + marker):
                return unit[:-len(stem + marker)], base_power

    raise InvalidSIUnitError(unit, details=f"Does not end in base unit "
                                           f"'{base_unit}'.")


# ----------------------------------------------------------------------

class SIPrefixable:
    """
    Mixin for quantity types whose units can be given with any metric
    prefix on their SI base unit.  Quantity types without this mixin
    (e.g. ``Temperature``, ``Angle``) accept registered units only.

    The SI base unit is given by class attribute `si_base_unit`.  If this
    is ``None``, the symbol of the native unit is used.
    """
    __slots__ = ()

    si_base_unit: str | None = None

    @classmethod
    def get_si_base_unit(cls) -> str:
        """Symbol used as the base for metric prefixes."""
        if cls.si_base_unit is not None:
            return cls.si_base_unit
        # noinspection PyUnresolvedReferences
        return cls.unit_table().native_unit.symbol

    @classmethod
    def convert_si_unit(cls, value: float, from_unit: str,
                        to_unit: str) -> float:
        """
        Convert `value` between metric-prefixed forms of this type's SI
        base unit.  See module function ``convert_si_unit``.
        """
        return convert_si_unit(value, from_unit, to_unit,
                               cls.get_si_base_unit())
