from unittest import TestCase


class TestUnitOptions(TestCase):
    def tearDown(self):
        from pyunitlib import set_unit_options
        set_unit_options(equality_tolerance=1e-10, si_prefix_fallback=True,
                         warn_ambiguous_parse=True)

    def test_defaults(self):
        from pyunitlib import get_unit_options

        opts = get_unit_options()
        self.assertEqual(opts.equality_tolerance, 1e-10)
        self.assertTrue(opts.si_prefix_fallback)
        self.assertTrue(opts.warn_ambiguous_parse)

    def test_set(self):
        from dataclasses import FrozenInstanceError
        from pyunitlib import (get_unit_options, set_unit_options, Length,
                               UnitNotFoundError)

        set_unit_options(si_prefix_fallback=False)
        self.assertFalse(get_unit_options().si_prefix_fallback)
        with self.assertRaises(UnitNotFoundError):
            Length(1, 'km')
        self.assertEqual(Length(1, 'ft').native_value, 0.3048)

        with self.assertRaises(ValueError):
            set_unit_options(equality_tolerance=0.0)
        with self.assertRaises(ValueError):
            set_unit_options(equality_tolerance=float('nan'))
        with self.assertRaises(TypeError):
            set_unit_options(no_such_option=True)

        with self.assertRaises(FrozenInstanceError):
            get_unit_options().equality_tolerance = 1.0

    def test_context(self):
        from pyunitlib import get_unit_options, unit_options, Length

        with unit_options(equality_tolerance=1e-3) as opts:
            self.assertEqual(opts.equality_tolerance, 1e-3)
            self.assertTrue(Length(1, 'm') == Length(1.0001, 'm'))
        self.assertEqual(get_unit_options().equality_tolerance, 1e-10)
        self.assertFalse(Length(1, 'm') == Length(1.0001, 'm'))

        # Restored after an exception.
        with self.assertRaises(RuntimeError):
            with unit_options(si_prefix_fallback=False):
                raise RuntimeError
        self.assertTrue(get_unit_options().si_prefix_fallback)
