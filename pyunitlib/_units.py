"""
Unit records and the ordered unit table owned by each quantity type.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Iterator

from pyunitlib.exceptions import UnitNotFoundError


# ======================================================================

@dataclass(frozen=True)
class UnitOfMeasurement:
    """
    A single unit of a quantity type, consisting of a canonical `symbol`,
    a linear `conversion_factor` relative to the quantity's native unit
    (i.e. ``native_value = value * conversion_factor``) and the `aliases`
    that resolve to it.  The symbol is always the first alias.

    ``UnitOfMeasurement`` objects are immutable.  Aliases can only be
    supplied when the record is created, which normally happens while a
    ``UnitTable`` is populated.

    Examples
    --------
    >>> foot = UnitOfMeasurement('ft', 0.3048, ('foot', 'feet'))
    >>> foot.aliases
    ('ft', 'foot', 'feet')
    >>> foot.is_alias('feet'), foot.is_alias('Feet')
    (True, False)
    """
    symbol: str
    conversion_factor: float
    aliases: tuple[str, ...] = field(default=())

    def __post_init__(self):
        if not isinstance(self.symbol, str) or not self.symbol:
            raise ValueError(f"Unit symbol must be a non-empty string, got: "
                             f"{self.symbol!r}")

        factor = float(self.conversion_factor)
        if not math.isfinite(factor) or factor <= 0:
            raise ValueError(f"Conversion factor for '{self.symbol}' must "
                             f"be positive and finite, got: {factor}")

        # Symbol first, then remaining aliases in order without repeats.
        aliases = [self.symbol]
        for alias in self.aliases:
            if alias not in aliases:
                aliases.append(alias)

        object.__setattr__(self, 'conversion_factor', factor)
        object.__setattr__(self, 'aliases', tuple(aliases))

    def __str__(self):
        return self.symbol

    def is_alias(self, name: str) -> bool:
        """
        Returns ``True`` if `name` is exactly (case-sensitive) one of the
        aliases of this unit, including the symbol.
        """
        return name in self.aliases


# ----------------------------------------------------------------------

class UnitTable:
    """
    Ordered collection of ``UnitOfMeasurement`` records for one quantity
    type.  Insertion order matters: the first record added becomes the
    `native_unit` in which all values of the quantity are held.

    A table is populated using ``add()`` and then frozen using
    ``finalise()``, after which it is read-only.  Alias strings must be
    unique across the records of a table.

    Examples
    --------
    >>> table = UnitTable('Length')
    >>> table.add('m', 1, 'meter', 'metre').aliases
    ('m', 'meter', 'metre')
    >>> _ = table.add('ft', 0.3048, 'foot', 'feet')
    >>> table.finalise()
    >>> table.find_unit('feet').symbol
    'ft'
    >>> table.native_unit.symbol
    'm'
    """

    def __init__(self, quantity: str):
        """
        Parameters
        ----------
        quantity : str
            Name of the quantity type owning the table, used in error
            messages.
        """
        self.quantity = quantity
        self._units: list[UnitOfMeasurement] = []
        self._index: dict[str, UnitOfMeasurement] = {}
        self._final = False

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[UnitOfMeasurement]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self):
        return f"UnitTable({self.quantity!r}, [{', '.join(self.symbols())}])"

    # -- Public Methods ------------------------------------------------

    def add(self, symbol: str, conversion_factor: float,
            *aliases: str) -> UnitOfMeasurement:
        """
        Create and append a new unit record.

        Parameters
        ----------
        symbol : str
            Canonical symbol of the unit.
        conversion_factor : float
            Multiplier converting a value in this unit to the native unit.
        aliases : str
            Additional strings that resolve to this unit.

        Returns
        -------
        unit : UnitOfMeasurement
            The record that was added.

        Raises
        ------
        ValueError
            If the table is already finalised, the record is invalid or
            any alias is already used by another record in the table.
        """
        if self._final:
            raise ValueError(f"Unit table for {self.quantity} is finalised, "
                             f"cannot add '{symbol}'.")

        unit = UnitOfMeasurement(symbol, conversion_factor, aliases)
        for alias in unit.aliases:
            if alias in self._index:
                raise ValueError(
                    f"Alias '{alias}' of '{symbol}' already defined for "
                    f"'{self._index[alias].symbol}' in {self.quantity}.")

        self._units.append(unit)
        for alias in unit.aliases:
            self._index[alias] = unit

        return unit

    def finalise(self):
        """
        Freeze the table so that no further units can be added.  A table
        must contain at least one unit (the native unit).
        """
        if not self._units:
            raise ValueError(f"Unit table for {self.quantity} is empty.")
        self._final = True

    @property
    def finalised(self) -> bool:
        return self._final

    def find_unit(self, name: str) -> UnitOfMeasurement:
        """
        Return the unit having `name` as an exact (case-sensitive) alias.

        Raises
        ------
        UnitNotFoundError
            If no unit in the table has this alias.
        """
        try:
            return self._index[name]
        except (KeyError, TypeError):
            raise UnitNotFoundError(name, self.quantity) from None

    @property
    def native_unit(self) -> UnitOfMeasurement:
        """The first unit added to the table."""
        if not self._units:
            raise ValueError(f"Unit table for {self.quantity} is empty.")
        return self._units[0]

    def symbols(self) -> list[str]:
        """Symbols of all units in insertion order."""
        return [unit.symbol for unit in self._units]
