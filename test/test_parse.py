from unittest import TestCase


class TestParse(TestCase):
    def test_parse(self):
        from pyunitlib import parse, Length, Temperature, Pressure, Force

        x = parse('10 km')
        self.assertIsInstance(x, Length)
        self.assertEqual(x.native_value, 10000.0)
        self.assertEqual(x.original_unit.symbol, 'km')

        self.assertIsInstance(parse('25°C'), Temperature)
        self.assertEqual(parse('-3.5e2 N').original_value, -350.0)
        self.assertIsInstance(parse('+1.5 psi'), Pressure)
        self.assertIsInstance(parse('  2 lbf  '), Force)
        self.assertEqual(parse('3 square feet').original_unit.symbol, 'ft²')

    def test_expected(self):
        from pyunitlib import parse, Kind, Mass, Acceleration

        self.assertIsInstance(parse('1 g', Acceleration), Acceleration)
        self.assertIsInstance(parse('1 g', Kind.ACCELERATION), Acceleration)
        self.assertIsInstance(parse('1 g', 'Acceleration'), Acceleration)
        self.assertEqual(parse('10 kg', Mass).to_unit('g'), 10000.0)

    def test_ambiguous(self):
        from pyunitlib import parse, Mass, unit_options

        # 'g' is gram (Mass) and standard gravity (Acceleration).
        with self.assertWarns(UserWarning):
            x = parse('5 g')
        self.assertIsInstance(x, Mass)

        with unit_options(warn_ambiguous_parse=False):
            import warnings
            with warnings.catch_warnings():
                warnings.simplefilter('error')
                self.assertIsInstance(parse('5 g'), Mass)

    def test_errors(self):
        from pyunitlib import parse, ParseError, Length, Time, QuantityError

        for text in ('', 'km', '10', 'abc m', '1.2.3 m', '10 parsecs'):
            with self.assertRaises(ParseError, msg=text):
                parse(text)

        with self.assertRaises(ParseError):
            parse('10 s', Length)
        with self.assertRaises(ParseError):
            parse('10 m', 'Luminance')
        with self.assertRaises(ParseError):
            parse('10 m', int)
        with self.assertRaises(ParseError):
            parse(10)
        self.assertTrue(issubclass(ParseError, QuantityError))


class TestSerialization(TestCase):
    def test_to_dict(self):
        from pyunitlib import Length

        d = Length(10, 'km').to_dict()
        self.assertEqual(d, {'value': 10.0, 'unit': 'km',
                             'nativeValue': 10000.0, 'nativeUnit': 'm',
                             'class': 'Length'})

    def test_from_dict(self):
        from pyunitlib import (from_dict, Length, Temperature, Mass,
                               ParseError)

        for q in (Length(10, 'km'), Temperature(25, '°C'),
                  Mass(3, 'lb')):
            r = from_dict(q.to_dict())
            self.assertIs(type(r), type(q))
            self.assertEqual(r.original_value, q.original_value)
            self.assertEqual(r.original_unit.symbol, q.original_unit.symbol)
            self.assertAlmostEqual(r.native_value, q.native_value)

        bad = [
            {'value': 1, 'unit': 'm'},  # Missing class.
            {'class': 'Length', 'unit': 'm'},  # Missing value.
            {'class': 'Length', 'value': 1},  # Missing unit.
            {'class': 'Nope', 'value': 1, 'unit': 'm'},
            {'class': 'Length', 'value': 'one', 'unit': 'm'},
            {'class': 'Length', 'value': True, 'unit': 'm'},
            {'class': 'Length', 'value': 1, 'unit': 's'},
            ['Length', 1, 'm'],
        ]
        for data in bad:
            with self.assertRaises(ParseError, msg=str(data)):
                from_dict(data)

    def test_json(self):
        import json
        from pyunitlib import from_json, Resistance, ParseError

        q = Resistance(4.7, 'kΩ')
        text = q.to_json()
        self.assertEqual(json.loads(text)['unit'], 'kΩ')
        self.assertIn('Ω', text)  # Not escaped.

        r = from_json(text)
        self.assertIsInstance(r, Resistance)
        self.assertAlmostEqual(r.native_value, 4700.0)

        with self.assertRaises(ParseError):
            from_json('{not json')
        with self.assertRaises(ParseError):
            from_json('[1, 2]')
