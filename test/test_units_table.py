from unittest import TestCase


class TestUnitOfMeasurement(TestCase):
    def test___init__(self):
        from pyunitlib import UnitOfMeasurement

        u = UnitOfMeasurement('ft', 0.3048, ('foot', 'feet', 'foot'))
        self.assertEqual(u.symbol, 'ft')
        self.assertEqual(u.conversion_factor, 0.3048)
        self.assertEqual(u.aliases, ('ft', 'foot', 'feet'))  # Symbol first.
        self.assertIsInstance(UnitOfMeasurement('m', 1).conversion_factor,
                              float)

        # Check invalid records.
        for factor in (0, -1, float('inf'), float('nan')):
            with self.assertRaises(ValueError):
                UnitOfMeasurement('x', factor)
        with self.assertRaises(ValueError):
            UnitOfMeasurement('', 1)

    def test_is_alias(self):
        from pyunitlib import UnitOfMeasurement

        u = UnitOfMeasurement('m', 1, ('meter', 'metre'))
        self.assertTrue(u.is_alias('m'))
        self.assertTrue(u.is_alias('metre'))
        self.assertFalse(u.is_alias('Meter'))  # Case sensitive.
        self.assertFalse(u.is_alias('meters'))

    def test_frozen(self):
        from dataclasses import FrozenInstanceError
        from pyunitlib import UnitOfMeasurement

        u = UnitOfMeasurement('m', 1)
        with self.assertRaises(FrozenInstanceError):
            u.symbol = 'ft'
        self.assertEqual(str(u), 'm')


class TestUnitTable(TestCase):
    def test_add_find(self):
        from pyunitlib import UnitTable, UnitNotFoundError

        table = UnitTable('Length')
        table.add('m', 1, 'meter')
        table.add('ft', 0.3048, 'foot', 'feet')
        table.finalise()

        self.assertTrue(table.finalised)
        self.assertEqual(len(table), 2)
        self.assertEqual(table.symbols(), ['m', 'ft'])
        self.assertEqual(table.native_unit.symbol, 'm')
        self.assertIs(table.find_unit('feet'), table.find_unit('ft'))
        self.assertIn('foot', table)
        self.assertNotIn('Foot', table)
        self.assertEqual([u.symbol for u in table], ['m', 'ft'])

        with self.assertRaises(UnitNotFoundError) as cm:
            table.find_unit('xyz')
        self.assertEqual(cm.exception.unit, 'xyz')
        self.assertEqual(cm.exception.quantity, 'Length')
        self.assertEqual(str(cm.exception), "Unit 'xyz' not found in Length")

        with self.assertRaises(UnitNotFoundError):
            table.find_unit(None)

    def test_finalised(self):
        from pyunitlib import UnitTable

        table = UnitTable('Length')
        with self.assertRaises(ValueError):
            table.finalise()  # Empty table.

        table.add('m', 1)
        table.finalise()
        with self.assertRaises(ValueError):
            table.add('ft', 0.3048)

    def test_duplicate_alias(self):
        from pyunitlib import UnitTable

        table = UnitTable('Mass')
        table.add('g', 1, 'gram')
        with self.assertRaises(ValueError):
            table.add('gr', 0.06479891, 'gram')
        self.assertEqual(len(table), 1)

    def test_quantity_tables(self):
        from pyunitlib import Kind, quantity_class

        # Every standard type has a finalised table with a native unit
        # factor of exactly one and unique aliases.
        for kind in Kind:
            table = quantity_class(kind).unit_table()
            self.assertTrue(table.finalised)
            self.assertEqual(table.native_unit.conversion_factor, 1.0)
            aliases = [a for u in table for a in u.aliases]
            self.assertEqual(len(aliases), len(set(aliases)))

    def test_concurrent_population(self):
        from concurrent.futures import ThreadPoolExecutor
        from pyunitlib import Volume

        Volume._unit_table = None  # Force population on next use.
        with ThreadPoolExecutor(max_workers=16) as pool:
            tables = list(pool.map(lambda _: Volume.unit_table(), range(64)))

        self.assertEqual(len({id(t) for t in tables}), 1)
        table = tables[0]
        self.assertIs(Volume.unit_table(), table)
        self.assertTrue(table.finalised)
        self.assertEqual(len(table), 15)
        self.assertEqual(table.native_unit.symbol, 'm³')
