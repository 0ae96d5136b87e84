from unittest import TestCase


# noinspection PyUnusedLocal
class TestComparison(TestCase):
    def test_compare_to(self):
        from pyunitlib import Length

        self.assertEqual(Length(1, 'km').compare_to(Length(999, 'm')), 1)
        self.assertEqual(Length(1, 'ft').compare_to(Length(1, 'm')), -1)
        self.assertEqual(Length(1, 'km').compare_to(Length(1000, 'm')), 0)

    def test_ordering(self):
        from pyunitlib import Length, Mass

        a, b = Length(1, 'ft'), Length(1, 'm')
        self.assertTrue(a.less_than(b))
        self.assertTrue(a.less_or_equal(b))
        self.assertFalse(a.greater_than(b))
        self.assertTrue(b.greater_or_equal(a))
        self.assertTrue(a < b)
        self.assertTrue(a <= b)
        self.assertTrue(b > a)
        self.assertTrue(b >= a)
        self.assertTrue(Length(1, 'm') >= Length(100, 'cm'))
        self.assertEqual(max(a, b), b)
        self.assertEqual(sorted([Mass(1, 'kg'), Mass(1, 'lb'),
                                 Mass(1, 'oz')])[0].original_unit.symbol,
                         'oz')

    def test_equals(self):
        from pyunitlib import Length

        self.assertTrue(Length(1, 'km').equals(Length(1000, 'm')))
        self.assertTrue(Length(1, 'ft').equals(Length(12, 'in')))
        self.assertFalse(Length(1, 'm').equals(Length(1.001, 'm')))
        self.assertTrue(Length(1, 'm').equals(Length(1.001, 'm'),
                                              epsilon=0.01))
        self.assertTrue(Length(1, 'km') == Length(1000, 'm'))
        self.assertTrue(Length(1, 'm') != Length(2, 'm'))

    def test_incompatible(self):
        from pyunitlib import Length, Time, IncompatibleTypesError

        x, t = Length(1, 'm'), Time(1, 's')
        with self.assertRaises(IncompatibleTypesError) as cm:
            x.compare_to(t)
        self.assertEqual(str(cm.exception), "Cannot compare Length with Time")
        self.assertEqual(cm.exception.left, 'Length')
        self.assertEqual(cm.exception.right, 'Time')

        with self.assertRaises(IncompatibleTypesError):
            x.equals(t)
        with self.assertRaises(IncompatibleTypesError):
            y = x < t
        with self.assertRaises(TypeError):
            y = x < 1

        # Equality operator never raises.
        self.assertFalse(x == t)
        self.assertFalse(x == 1)
        self.assertTrue(x != t)

    def test_unhashable(self):
        from pyunitlib import Length

        with self.assertRaises(TypeError):
            hash(Length(1, 'm'))
