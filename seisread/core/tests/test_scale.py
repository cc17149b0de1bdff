'''
Tests for scale
'''
import unittest

from seisread.core import scale
from seisread.core.tests.test_base import LogTestCase


class TestApply(unittest.TestCase):
    def test_apply_scale(self):
        self.assertEqual(scale.apply_scale(100, 2), 200.0)
        self.assertEqual(scale.apply_scale(100, -2), 50.0)
        # Zero is used as one
        self.assertEqual(scale.apply_scale(100, 0), 100.0)
        self.assertEqual(scale.apply_scale(-12345, -100), -123.45)

    def test_apply_time_modifier(self):
        self.assertEqual(scale.apply_time_modifier(40, 10), 400.0)
        self.assertEqual(scale.apply_time_modifier(40, -10), 4.0)
        self.assertEqual(scale.apply_time_modifier(40, 0), 40.0)

    def test_apply_shotpoint_modifier(self):
        self.assertEqual(scale.apply_shotpoint_modifier(1001, 0), 1001.0)
        self.assertEqual(scale.apply_shotpoint_modifier(1001, 10), 10010.0)
        self.assertEqual(scale.apply_shotpoint_modifier(1001, -10), 100.1)

    def test_apply_exponent(self):
        self.assertAlmostEqual(scale.apply_exponent(5, -1), 0.5)
        self.assertEqual(scale.apply_exponent(12, 3), 12000.0)
        self.assertEqual(scale.apply_exponent(7, 0), 7.0)


class TestChoose(LogTestCase):
    def test_integers_unscaled(self):
        self.assertEqual(scale.choose_scale([3, -4, 0]), (1, [3, -4, 0]))

    def test_shared_divisor(self):
        self.assertEqual(scale.choose_scale([1.5, 2.25]), (-100, [150, 225]))

    def test_too_big_for_field(self):
        self.assertEqual(scale.choose_scale([3.0e9]), (10, [300000000]))
        self.assertEqual(scale.choose_scale([40000], bits=16),
                         (10, [4000]))

    def test_inexact(self):
        s, raws = scale.choose_scale([1.23456789])
        self.assertEqual(s, -10000)
        self.assertEqual(raws, [12346])

    def test_does_not_fit(self):
        with self.assertRaises(ValueError):
            scale.choose_scale([1.0e20])

    def test_choose_exponent(self):
        self.assertEqual(scale.choose_exponent(0), (0, 0))
        self.assertEqual(scale.choose_exponent(0.5), (5, -1))
        self.assertEqual(scale.choose_exponent(42), (42, 0))
        self.assertEqual(scale.choose_exponent(3.0e12), (300000000, 4))

    def test_choose_exponent_round_trip(self):
        for v in (0.001, -2.75, 123456.0, 6.02e15):
            m, e = scale.choose_exponent(v)
            self.assertAlmostEqual(scale.apply_exponent(m, e) / v, 1.0)


if __name__ == "__main__":
    unittest.main()
