"""
Exceptions raised by unit resolution, conversion and dimensional
arithmetic.  All of these derive from ``QuantityError`` which is itself a
``ValueError``, so callers can catch the whole family at once.
"""

# ======================================================================


class QuantityError(ValueError):
    """
    Base class for all errors raised by ``pyunitlib``.  Additional
    information (optional) can be attached as keyword arguments, which
    become attributes of the exception.
    """

    def __init__(self, *args, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `ValueError`.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments, e.g. ``unit='xm'``.
        """
        super().__init__(*args)
        for k, v in kwargs.items():
            setattr(self, k, v)


class UnitNotFoundError(QuantityError):
    """
    The unit string matches no alias of the quantity's unit table and
    (where applicable) the SI-prefix fallback failed as well.
    """

    def __init__(self, unit: str, quantity: str = None):
        msg = f"Unit '{unit}' not found"
        if quantity:
            msg += f" in {quantity}"
        super().__init__(msg, unit=unit, quantity=quantity)


class InvalidSIUnitError(QuantityError):
    """
    A metric prefix could not be extracted or recognised, or the powers of
    the two units do not match.
    """

    def __init__(self, unit: str, details: str = None):
        super().__init__("Invalid metric unit provided", unit=unit,
                         details=details)


class DivisionByZeroError(QuantityError, ZeroDivisionError):
    """The divisor of a quantity division has a native value of zero."""

    def __init__(self, *args, **kwargs):
        if not args:
            args = ("Cannot divide by zero",)
        super().__init__(*args, **kwargs)


class UnsupportedDimensionError(QuantityError, TypeError):
    """
    The combination of operand types (and exponent) has no entry in the
    dimensional dispatch tables.
    """

    def __init__(self, *args, op: str = None, left: str = None,
                 right: str = None, exponent: int = None):
        super().__init__(*args, op=op, left=left, right=right,
                         exponent=exponent)


class IncompatibleTypesError(QuantityError, TypeError):
    """Two quantities of different concrete types were compared."""

    def __init__(self, left: str, right: str, action: str = 'compare'):
        super().__init__(f"Cannot {action} {left} with {right}",
                         left=left, right=right)


class InvalidExponentError(QuantityError):
    """A quantity was raised to an exponent that is never valid."""

    def __init__(self, exponent: int):
        super().__init__(f"Cannot raise to power {exponent}",
                         exponent=exponent)


class ParseError(QuantityError):
    """Free text or serialized data could not be turned into a quantity."""
