from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
import math


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Dataclass that holds option flags for handling quantities.  See
    'get_unit_options' and  'set_unit_options' for full details.
    """
    equality_tolerance: float
    si_prefix_fallback: bool
    warn_ambiguous_parse: bool

    def __post_init__(self):
        """Check certain values"""
        if not (math.isfinite(self.equality_tolerance) and
                self.equality_tolerance > 0):
            raise ValueError("Require finite 'equality_tolerance' > 0.")


# Create single instance and set defaults.
_unit_options = UnitOptions(
    equality_tolerance=1e-10,
    si_prefix_fallback=True,
    warn_ambiguous_parse=True
)


# ----------------------------------------------------------------------

def get_unit_options() -> UnitOptions:
    """
    Returns
    -------
    unit_options : UnitOptions
        Returns a UnitOptions object containing the options.  For a
        full description of each option, see `set_unit_options`.
    """
    return replace(_unit_options)


# noinspection PyIncorrectDocstring
def set_unit_options(**kwargs):
    """
    Set the current unit options.

    Parameters
    ----------
    equality_tolerance : float, default = 1e-10
        Absolute tolerance applied to native values by ``equals()`` (and
        the ``==`` operator) when no explicit `epsilon` is given.

    si_prefix_fallback : bool, default = True
        If `True`, unit strings that are not registered for a quantity
        type are tried as metric-prefixed versions of that type's SI
        base unit (e.g. 'km', 'μF', 'cm²').  If `False`, only registered
        aliases are accepted.

    warn_ambiguous_parse : bool, default = True
        If `True`, ``parse()`` issues a warning when the unit of the text
        is accepted by more than one quantity type, e.g. 'g' (gram or
        standard gravity).  The first type in the catalogue is used
        either way.

    See Also
    --------
    get_unit_options, unit_options

    Examples
    --------
    >>> from pyunitlib import Length, set_unit_options
    >>> set_unit_options(si_prefix_fallback=False)
    >>> Length(1, 'km')  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    pyunitlib.exceptions.UnitNotFoundError: Unit 'km' not found in Length
    >>> set_unit_options(si_prefix_fallback=True)
    """
    global _unit_options
    _unit_options = replace(_unit_options, **kwargs)


@contextmanager
def unit_options(**kwargs):
    """
    Context manager that applies the given options (see
    `set_unit_options`) and restores the previous options on exit, even
    if an exception was raised.

    Examples
    --------
    >>> from pyunitlib import Length
    >>> with unit_options(equality_tolerance=1e-3):
    ...     Length(1, 'm') == Length(1.0001, 'm')
    True
    """
    global _unit_options
    previous = _unit_options
    set_unit_options(**kwargs)
    try:
        yield get_unit_options()
    finally:
        _unit_options = previous
