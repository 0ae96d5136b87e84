"""
Standard quantity types and their units.
"""
from __future__ import annotations

import numpy as np

from pyunitlib._quantity import Kind, Quantity
from pyunitlib._si import SIPrefixable
from pyunitlib._units import UnitOfMeasurement, UnitTable
from pyunitlib.exceptions import DivisionByZeroError, UnitNotFoundError

__all__ = ['Acceleration', 'AmountOfSubstance', 'Angle', 'Area',
           'Capacitance', 'Charge', 'Current', 'Density', 'Energy', 'Force',
           'Frequency', 'Inductance', 'Length', 'LuminousIntensity',
           'MagneticFlux', 'Mass', 'Power', 'Pressure', 'Resistance',
           'Temperature', 'Time', 'Torque', 'Velocity', 'Voltage', 'Volume']


def _require(x, cls: type, name: str):
    if not isinstance(x, cls):
        raise TypeError(f"'{name}' must be {cls.__name__}, got "
                        f"{type(x).__name__}.")


# == Base Quantities ===================================================

# -- Length ------------------------------------------------------------

class Length(SIPrefixable, Quantity):
    """Length, held natively in metres."""
    __slots__ = ()
    kind = Kind.LENGTH

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('m', 1, 'meter', 'meters', 'metre', 'metres')
        table.add('ft', 0.3048, 'foot', 'feet')  # International foot.
        table.add('in', 0.0254, 'inch', 'inches')


# -- Mass --------------------------------------------------------------

class Mass(SIPrefixable, Quantity):
    """
    Mass, held natively in grams.  Note that this differs from the SI
    base unit (kg), so products and quotients involving kilogram-based
    types (e.g. ``Force``, ``Density``) include a factor of 1000.
    """
    __slots__ = ()
    kind = Kind.MASS
    si_base_unit = 'g'

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('g', 1, 'gram', 'grams', 'gramme', 'grammes')
        table.add('t', 1e6, 'tonne', 'tonnes', 'metric ton', 'metric tons')
        table.add('oz', 28.349523125, 'ounce', 'ounces')
        table.add('lb', 453.59237, 'lbs', 'pound', 'pounds')  # Intl pound.
        table.add('st', 6350.29318, 'stone', 'stones')
        table.add('ton', 907184.74, 'short ton', 'US ton')
        table.add('long ton', 1016046.9088, 'imperial ton')


# -- Time --------------------------------------------------------------

class Time(SIPrefixable, Quantity):
    """Time, held natively in seconds."""
    __slots__ = ()
    kind = Kind.TIME

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('s', 1, 'sec', 'second', 'seconds')
        table.add('min', 60, 'minute', 'minutes')
        table.add('h', 3600, 'hr', 'hour', 'hours')
        table.add('d', 86400, 'day', 'days')
        table.add('wk', 604800, 'week', 'weeks')
        table.add('yr', 31557600, 'year', 'years')  # Julian, 365.25 days.


# -- Temperature -------------------------------------------------------

class Temperature(Quantity):
    """
    Thermodynamic temperature, held natively in Kelvin.

    Conversions between total temperatures are a special case due to the
    offset of the °C and °F scales, so the linear conversion factors of
    the unit table are not used for these.  Metric prefixes are not
    accepted.

    Examples
    --------
    >>> Temperature(0, '°C').to_unit('K')
    273.15
    >>> round(Temperature(212, '°F').to_unit('°C'), 10)
    100.0
    """
    __slots__ = ()
    kind = Kind.TEMPERATURE

    @classmethod
    def _initialise(cls, table: UnitTable):
        # Factors give the size of a degree only; see _to_kelvin().
        table.add('K', 1, 'kelvin', 'Kelvin')
        table.add('°C', 1, 'C', 'celsius', 'Celsius')
        table.add('°F', 5 / 9, 'F', 'fahrenheit', 'Fahrenheit')
        table.add('°R', 5 / 9, 'R', 'rankine', 'Rankine')

    def _to_native(self, value: float, unit: UnitOfMeasurement) -> float:
        return _to_kelvin(value, unit.symbol)

    def _from_native(self, unit: UnitOfMeasurement) -> float:
        return _from_kelvin(self.native_value, unit.symbol)


def _to_kelvin(x: float, from_unit: str) -> float:
    """Convert a total temperature in `from_unit` to Kelvin."""
    if from_unit == 'K':
        return x
    elif from_unit == '°C':
        return x + 273.15
    elif from_unit == '°F':
        return (x - 32) * 5 / 9 + 273.15
    elif from_unit == '°R':
        return x * 5 / 9
    else:
        raise UnitNotFoundError(from_unit, 'Temperature')


def _from_kelvin(x: float, to_unit: str) -> float:
    """Convert a total temperature in Kelvin to `to_unit`."""
    if to_unit == 'K':
        return x
    elif to_unit == '°C':
        return x - 273.15
    elif to_unit == '°F':
        return (x - 273.15) * 9 / 5 + 32
    elif to_unit == '°R':
        return x * 9 / 5
    else:
        raise UnitNotFoundError(to_unit, 'Temperature')


# -- Electric Current --------------------------------------------------

class Current(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.CURRENT

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('A', 1, 'ampere', 'amperes', 'amp', 'amps')


# -- Luminous Intensity ------------------------------------------------

class LuminousIntensity(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.LUMINOUS_INTENSITY

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('cd', 1, 'candela', 'candelas')


# -- Amount of Substance -----------------------------------------------

class AmountOfSubstance(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.AMOUNT_OF_SUBSTANCE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('mol', 1, 'mole', 'moles')


# -- Plane Angle -------------------------------------------------------

class Angle(Quantity):
    """
    Plane angle, held natively in radians.  Metric prefixes are not
    accepted.
    """
    __slots__ = ()
    kind = Kind.ANGLE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('rad', 1, 'radian', 'radians')
        table.add('°', np.pi / 180, 'deg', 'degree', 'degrees')
        table.add("'", np.pi / 10800, 'arcmin', 'arcminute', 'arcminutes')
        table.add('"', np.pi / 648000, 'arcsec', 'arcsecond', 'arcseconds')

    def complement(self) -> Angle:
        """The complementary angle (90° - angle)."""
        return Angle(np.pi / 2, 'rad') - self

    def normalize(self) -> Angle:
        """The same direction as an angle in [0, 2π) radians."""
        return Angle(float(np.mod(self.native_value, 2 * np.pi)), 'rad')

    def normalize_degrees(self) -> Angle:
        """The same direction as an angle in [0, 360) degrees."""
        return Angle(float(np.mod(self.to_unit('°'), 360)), '°')

    def supplement(self) -> Angle:
        """The supplementary angle (180° - angle)."""
        return Angle(np.pi, 'rad') - self


# == Derived Quantities ================================================

# -- Area --------------------------------------------------------------

class Area(SIPrefixable, Quantity):
    """Area, held natively in square metres.  Accepts e.g. 'km²', 'cm2'."""
    __slots__ = ()
    kind = Kind.AREA

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('m²', 1, 'm2', 'square meter', 'square meters',
                  'square metre', 'square metres')
        table.add('a', 100, 'are', 'ares')
        table.add('ha', 10000, 'hectare', 'hectares')
        table.add('in²', 0.00064516, 'in2', 'square inch', 'square inches')
        table.add('ft²', 0.09290304, 'ft2', 'square foot', 'square feet')
        table.add('yd²', 0.83612736, 'yd2', 'square yard', 'square yards')
        table.add('ac', 4046.8564224, 'acre', 'acres')
        table.add('mi²', 2589988.110336, 'mi2', 'square mile',
                  'square miles')

    @classmethod
    def from_length(cls, length: Length) -> Area:
        """Area of a square with side `length`."""
        _require(length, Length, 'length')
        return length.power(2)

    @classmethod
    def from_lengths(cls, length1: Length, length2: Length) -> Area:
        """Area of a rectangle, e.g. width × height."""
        _require(length1, Length, 'length1')
        _require(length2, Length, 'length2')
        return length1.multiply(length2)


# -- Volume ------------------------------------------------------------

class Volume(SIPrefixable, Quantity):
    """Volume, held natively in cubic metres.  Accepts e.g. 'cm³', 'dm3'."""
    __slots__ = ()
    kind = Kind.VOLUME

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('m³', 1, 'm3', 'cubic meter', 'cubic meters',
                  'cubic metre', 'cubic metres')

        # Metric.
        table.add('L', 0.001, 'l', 'liter', 'liters', 'litre', 'litres')
        table.add('mL', 1e-6, 'ml', 'milliliter', 'milliliters',
                  'millilitre', 'millilitres')

        # Cubic imperial.
        table.add('in³', 0.000016387064, 'in3', 'cubic inch', 'cubic inches')
        table.add('ft³', 0.028316846592, 'ft3', 'cubic foot', 'cubic feet')
        table.add('yd³', 0.764554857984, 'yd3', 'cubic yard', 'cubic yards')

        # US liquid.
        table.add('fl oz', 0.0000295735295625, 'fluid ounce',
                  'fluid ounces')
        table.add('cup', 0.0002365882365, 'cups')
        table.add('pt', 0.000473176473, 'pint', 'pints')
        table.add('qt', 0.000946352946, 'quart', 'quarts')
        table.add('gal', 0.003785411784, 'gallon', 'gallons')  # 231 in³.

        # UK imperial.
        table.add('imp fl oz', 0.0000284130625, 'imperial fluid ounce',
                  'imperial fluid ounces')
        table.add('imp pt', 0.00056826125, 'imperial pint',
                  'imperial pints')
        table.add('imp qt', 0.0011365225, 'imperial quart',
                  'imperial quarts')
        table.add('imp gal', 0.00454609, 'imperial gallon',
                  'imperial gallons')

    @classmethod
    def from_area_and_length(cls, area: Area, length: Length) -> Volume:
        _require(area, Area, 'area')
        _require(length, Length, 'length')
        return area.multiply(length)

    @classmethod
    def from_length(cls, length: Length) -> Volume:
        """Volume of a cube with side `length`."""
        _require(length, Length, 'length')
        return length.power(3)

    @classmethod
    def from_lengths(cls, length1: Length, length2: Length,
                     length3: Length) -> Volume:
        """Volume of a box, e.g. width × height × depth."""
        _require(length3, Length, 'length3')
        return Area.from_lengths(length1, length2).multiply(length3)


# -- Velocity ----------------------------------------------------------

class Velocity(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.VELOCITY

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('m/s', 1, 'meter per second', 'meters per second',
                  'metre per second', 'metres per second', 'mps')
        table.add('km/h', 0.277777778, 'kmh', 'kph', 'kilometer per hour',
                  'kilometers per hour', 'kilometre per hour',
                  'kilometres per hour')
        table.add('mph', 0.44704, 'mi/h', 'mile per hour', 'miles per hour')
        table.add('ft/s', 0.3048, 'fps', 'foot per second', 'feet per second')
        table.add('kt', 0.514444444, 'kn', 'knot', 'knots',
                  'nautical mile per hour', 'nautical miles per hour')

    @classmethod
    def from_length_and_time(cls, length: Length, time: Time) -> Velocity:
        _require(length, Length, 'length')
        _require(time, Time, 'time')
        return length.divide(time)


# -- Acceleration ------------------------------------------------------

class Acceleration(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.ACCELERATION

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('m/s²', 1, 'm/s2', 'meter per second squared',
                  'meters per second squared', 'metre per second squared',
                  'metres per second squared')
        table.add('g', 9.80665, 'g₀', 'standard gravity')  # Exact standard.
        table.add('ft/s²', 0.3048, 'ft/s2', 'foot per second squared',
                  'feet per second squared')
        table.add('Gal', 0.01, 'galileo')

    @classmethod
    def from_length_and_time(cls, length: Length,
                             time: Time) -> Acceleration:
        """Acceleration as a length per time squared, a = L / t²."""
        _require(length, Length, 'length')
        _require(time, Time, 'time')
        if time.native_value == 0.0:
            raise DivisionByZeroError("Cannot divide by zero time")
        return cls(length.native_value / time.native_value ** 2, 'm/s²')

    @classmethod
    def from_velocity_and_time(cls, velocity: Velocity,
                               time: Time) -> Acceleration:
        _require(velocity, Velocity, 'velocity')
        _require(time, Time, 'time')
        return velocity.divide(time)


# -- Force -------------------------------------------------------------

class Force(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.FORCE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('N', 1, 'newton', 'newtons')
        table.add('dyn', 1e-5, 'dyne', 'dynes')  # CGS.
        table.add('kgf', 9.80665, 'kg-force', 'kilogram-force', 'kilopond')
        table.add('lbf', 4.4482216152605, 'lb-force', 'pound-force')
        table.add('pdl', 0.138254954376, 'poundal', 'poundals')

    @classmethod
    def from_mass_and_acceleration(cls, mass: Mass,
                                   acceleration: Acceleration) -> Force:
        """Newton's second law, F = m.a."""
        _require(mass, Mass, 'mass')
        _require(acceleration, Acceleration, 'acceleration')
        return mass.multiply(acceleration)


# -- Energy ------------------------------------------------------------

class Energy(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.ENERGY

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('J', 1, 'joule', 'joules')
        table.add('Wh', 3600, 'watt-hour', 'watt-hours')
        table.add('kWh', 3.6e6, 'kilowatt-hour', 'kilowatt-hours')
        table.add('cal', 4.184, 'calorie', 'calories')  # Thermochemical.
        table.add('kcal', 4184, 'Cal', 'kilocalorie', 'kilocalories',
                  'Calorie', 'Calories')
        table.add('BTU', 1055.05585262, 'btu', 'British thermal unit')
        table.add('eV', 1.602176634e-19, 'electronvolt', 'electron volt')
        table.add('erg', 1e-7, 'ergs')
        table.add('ft·lbf', 1.3558179483314004, 'ft-lb', 'foot-pound',
                  'foot-pounds')

    @classmethod
    def from_force_and_length(cls, force: Force, length: Length) -> Energy:
        """Work done by a force over a distance."""
        _require(force, Force, 'force')
        _require(length, Length, 'length')
        return force.multiply(length)


# -- Power -------------------------------------------------------------

class Power(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.POWER

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('W', 1, 'watt', 'watts')
        table.add('hp', 745.69987158227022, 'HP', 'horsepower',
                  'mechanical horsepower')
        table.add('PS', 735.49875, 'ps', 'metric horsepower',
                  'pferdestärke')
        table.add('hp(E)', 746, 'electric horsepower')
        table.add('BTU/h', 0.29307107017, 'BTU per hour')
        table.add('cal/s', 4.184, 'calorie per second')
        table.add('ft·lbf/s', 1.3558179483314004, 'ft-lb/s',
                  'foot-pound per second')

    @classmethod
    def from_energy_and_time(cls, energy: Energy, time: Time) -> Power:
        _require(energy, Energy, 'energy')
        _require(time, Time, 'time')
        return energy.divide(time)


# -- Pressure ----------------------------------------------------------

class Pressure(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.PRESSURE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('Pa', 1, 'pascal', 'pascals')
        table.add('bar', 1e5, 'bars')
        table.add('mbar', 100, 'millibar', 'millibars')
        table.add('atm', 101325, 'atmosphere', 'atmospheres')
        table.add('Torr', 133.322368421, 'torr')
        table.add('mmHg', 133.322368421, 'millimeter of mercury',
                  'millimeters of mercury')
        table.add('psi', 6894.757293168, 'PSI', 'pound per square inch',
                  'pounds per square inch', 'lbf/in²')
        table.add('psf', 47.880258980336, 'PSF', 'pound per square foot',
                  'pounds per square foot', 'lbf/ft²')
        table.add('inHg', 3386.389, 'inch of mercury', 'inches of mercury')
        table.add('at', 98066.5, 'technical atmosphere')

    @classmethod
    def from_force_and_area(cls, force: Force, area: Area) -> Pressure:
        _require(force, Force, 'force')
        _require(area, Area, 'area')
        return force.divide(area)


# -- Electrical --------------------------------------------------------

class Voltage(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.VOLTAGE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('V', 1, 'volt', 'volts')


class Resistance(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.RESISTANCE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('Ω', 1, 'ohm', 'ohms')

    @classmethod
    def from_voltage_and_current(cls, voltage: Voltage,
                                 current: Current) -> Resistance:
        """Ohm's law, R = V / I."""
        _require(voltage, Voltage, 'voltage')
        _require(current, Current, 'current')
        return voltage.divide(current)


class Charge(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.CHARGE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('C', 1, 'coulomb', 'coulombs')
        table.add('e', 1.602176634e-19, 'elementary charge')
        table.add('Ah', 3600, 'A⋅h', 'ampere-hour', 'amp-hour')
        table.add('mAh', 3.6, 'milliampere-hour')  # Battery capacity.

    @classmethod
    def from_current_and_time(cls, current: Current, time: Time) -> Charge:
        """Q = I.t"""
        _require(current, Current, 'current')
        _require(time, Time, 'time')
        return current.multiply(time)


class Capacitance(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.CAPACITANCE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('F', 1, 'farad', 'farads')

    @classmethod
    def from_charge_and_voltage(cls, charge: Charge,
                                voltage: Voltage) -> Capacitance:
        """C = Q / V"""
        _require(charge, Charge, 'charge')
        _require(voltage, Voltage, 'voltage')
        return charge.divide(voltage)


class Inductance(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.INDUCTANCE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('H', 1, 'henry', 'henries', 'henrys')


class MagneticFlux(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.MAGNETIC_FLUX

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('Wb', 1, 'weber', 'webers')
        table.add('Mx', 1e-8, 'maxwell', 'maxwells')  # CGS.

    @classmethod
    def from_voltage_and_time(cls, voltage: Voltage,
                              time: Time) -> MagneticFlux:
        """Φ = V.t"""
        _require(voltage, Voltage, 'voltage')
        _require(time, Time, 'time')
        return voltage.multiply(time)


# -- Frequency ---------------------------------------------------------

class Frequency(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.FREQUENCY

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('Hz', 1, 'hertz', 'hz')
        table.add('RPM', 1 / 60, 'rpm', 'revolutions per minute', 'rev/min')
        table.add('BPM', 1 / 60, 'bpm', 'beats per minute')
        table.add('rad/s', 1 / (2 * np.pi), 'radians per second')

    @classmethod
    def from_time_period(cls, period: Time) -> Frequency:
        """f = 1 / T"""
        _require(period, Time, 'period')
        return period.power(-1)


# -- Torque ------------------------------------------------------------

class Torque(SIPrefixable, Quantity):
    """
    Torque, held natively in newton metres.  Dimensionally the same as
    ``Energy``; ``Force * Length`` gives ``Energy`` unless ``Torque`` is
    requested, see ``from_force_and_length``.
    """
    __slots__ = ()
    kind = Kind.TORQUE

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('N⋅m', 1, 'Nm', 'N·m', 'newton-meter', 'newton-metre')
        table.add('lbf⋅ft', 1.3558179483314, 'lb-ft', 'lbf-ft',
                  'pound-force foot')
        table.add('lbf⋅in', 0.1129848290276, 'lb-in', 'lbf-in',
                  'pound-force inch')
        table.add('dyn⋅cm', 1e-7, 'dyne-centimeter')

    @classmethod
    def from_force_and_length(cls, force: Force, length: Length) -> Torque:
        """τ = F × r"""
        _require(force, Force, 'force')
        _require(length, Length, 'length')
        return force.multiply(length, cls)


# -- Density -----------------------------------------------------------

class Density(SIPrefixable, Quantity):
    __slots__ = ()
    kind = Kind.DENSITY

    @classmethod
    def _initialise(cls, table: UnitTable):
        table.add('kg/m³', 1, 'kg/m3', 'kilogram per cubic meter',
                  'kilogram per cubic metre')
        table.add('g/cm³', 1000, 'g/cm3', 'gram per cubic centimeter')
        table.add('g/L', 1, 'gram per liter', 'gram per litre')
        table.add('lb/ft³', 16.0185, 'lb/ft3', 'pound per cubic foot')
        table.add('lb/gal', 119.826, 'pound per gallon', 'ppg')

    @classmethod
    def from_mass_and_volume(cls, mass: Mass, volume: Volume) -> Density:
        """ρ = m / V"""
        _require(mass, Mass, 'mass')
        _require(volume, Volume, 'volume')
        return mass.divide(volume)
