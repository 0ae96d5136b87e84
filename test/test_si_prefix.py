from unittest import TestCase


class TestConvertSIUnit(TestCase):
    def test_linear(self):
        from pyunitlib import convert_si_unit

        self.assertEqual(convert_si_unit(1, 'km', 'mm', 'm'), 1e6)
        self.assertEqual(convert_si_unit(5, 'kg', 'g', 'g'), 5000.0)
        self.assertEqual(convert_si_unit(3, 'm', 'm', 'm'), 3.0)
        self.assertAlmostEqual(convert_si_unit(1, 'μF', 'nF', 'F'), 1000.0)
        self.assertAlmostEqual(convert_si_unit(1, 'µF', 'nF', 'F'), 1000.0)
        self.assertAlmostEqual(convert_si_unit(2, 'dam', 'm', 'm'), 20.0)
        self.assertAlmostEqual(convert_si_unit(1, 'GHz', 'MHz', 'Hz'),
                               1000.0)

    def test_powers(self):
        from pyunitlib import convert_si_unit

        self.assertEqual(convert_si_unit(1, 'km²', 'cm²', 'm²'), 1e10)
        self.assertEqual(convert_si_unit(1, 'km2', 'cm²', 'm²'), 1e10)
        self.assertEqual(convert_si_unit(1, 'km²', 'cm2', 'm²'), 1e10)
        self.assertAlmostEqual(convert_si_unit(1, 'm³', 'cm³', 'm³'), 1e6)
        self.assertAlmostEqual(convert_si_unit(1, 'dm3', 'm³', 'm³'), 1e-3)

        # Compound base units are linear.
        self.assertAlmostEqual(convert_si_unit(1, 'km/s²', 'm/s²', 'm/s²'),
                               1000.0)

    def test_errors(self):
        from pyunitlib import convert_si_unit, InvalidSIUnitError

        with self.assertRaises(InvalidSIUnitError):
            convert_si_unit(1, 'xm', 'm', 'm')  # Unknown prefix.
        with self.assertRaises(InvalidSIUnitError):
            convert_si_unit(1, 'kg', 'm', 'm')  # Wrong base.
        with self.assertRaises(InvalidSIUnitError):
            convert_si_unit(1, 'km', 'kg', 'm')
        with self.assertRaises(InvalidSIUnitError) as cm:
            convert_si_unit(1, 5, 'm', 'm')
        self.assertEqual(str(cm.exception), "Invalid metric unit provided")

    def test_prefixes(self):
        from pyunitlib import METRIC_PREFIXES

        self.assertEqual(METRIC_PREFIXES[''], 0)
        self.assertEqual(METRIC_PREFIXES['k'], 3)
        self.assertEqual(METRIC_PREFIXES['da'], 1)
        self.assertEqual(METRIC_PREFIXES['μ'], -6)
        self.assertEqual(METRIC_PREFIXES['Q'], 30)
        self.assertEqual(METRIC_PREFIXES['q'], -30)


class TestSIPrefixable(TestCase):
    def test_base_unit(self):
        from pyunitlib import Length, Mass, Area, SIPrefixable, Temperature

        self.assertEqual(Length.get_si_base_unit(), 'm')
        self.assertEqual(Mass.get_si_base_unit(), 'g')
        self.assertEqual(Area.get_si_base_unit(), 'm²')
        self.assertAlmostEqual(Length.convert_si_unit(1, 'km', 'cm'), 1e5)
        self.assertFalse(issubclass(Temperature, SIPrefixable))

    def test_fallback(self):
        from pyunitlib import (Length, Area, Capacitance, Temperature,
                               UnitNotFoundError)

        x = Length(3, 'km')
        self.assertEqual(x.native_value, 3000.0)
        self.assertEqual(x.original_unit.symbol, 'km')
        self.assertEqual(x.original_unit.conversion_factor, 1000.0)
        self.assertEqual(Area(1, 'km²').to_unit('cm²'), 1e10)
        self.assertAlmostEqual(Capacitance(47, 'μF').to_unit('F'), 47e-6)
        self.assertAlmostEqual(Length(1, 'm').to_unit('mm'), 1000.0)

        # Failed fallback reports the original unit.
        with self.assertRaises(UnitNotFoundError) as cm:
            Length(1, 'xm')
        self.assertEqual(cm.exception.unit, 'xm')
        with self.assertRaises(UnitNotFoundError):
            Length(1, 'm').to_unit('parsec')

        # Types without metric prefixes.
        with self.assertRaises(UnitNotFoundError):
            Temperature(1, 'mK')
