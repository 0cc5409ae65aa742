import unittest

from ratfrac.utils import reduce_pair, parse_int, decimal_to_pair


class TestUtils(unittest.TestCase):

    def test_reduce_pair(self):
        assert reduce_pair(5, 10) == (1, 2)
        assert reduce_pair(5, -10) == (-1, 2)
        assert reduce_pair(-6, -4) == (3, 2)
        assert reduce_pair(0, -3) == (0, 1)
        assert reduce_pair(7, 1) == (7, 1)

    def test_parse_int(self):
        self.assertEqual(parse_int('42'), 42)
        self.assertEqual(parse_int(' -7 '), -7)
        self.assertEqual(parse_int('+3'), 3)
        for bad in ['', ' ', '12abc', 'abc', '1.5', '1_000', '--1']:
            self.assertIsNone(parse_int(bad), bad)

    def test_decimal_to_pair(self):
        self.assertEqual(decimal_to_pair(0.0), (0, 1))
        self.assertEqual(decimal_to_pair(0.4), (4, 10))
        self.assertEqual(decimal_to_pair(-0.125), (-125, 1000))
        self.assertEqual(decimal_to_pair(0.57), (56, 100))
        self.assertEqual(decimal_to_pair(6.45), (645, 100))
        self.assertEqual(decimal_to_pair(2.0), (2, 1))
        self.assertEqual(decimal_to_pair(-3.0), (-3, 1))

    def test_decimal_to_pair_exponent(self):
        self.assertEqual(decimal_to_pair(1e-05), (1, 10**5))
        self.assertEqual(decimal_to_pair(-1e-05), (-1, 10**5))
        self.assertEqual(decimal_to_pair(1e22), (10**22, 1))
