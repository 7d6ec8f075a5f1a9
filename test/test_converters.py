"""
Token converter tests.

Scope
- Integer, float and boolean parsing (locale-neutral, strict).
- Range expansion and key=value splitting.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import math
import unittest
from unittest import TestCase

from optionary.converters import INT_MIN, INT_MAX, to_int, to_float, to_bool, is_range, expand_range, split_pair


class TestToInt(TestCase):

    def testAccepted(self):
        for token, expected in (("0", 0), ("123", 123), ("-42", -42), ("+8", 8), ("007", 7)):
            with self.subTest(token=token):
                self.assertEqual(to_int(token), expected)

    def testRejected(self):
        for token in ("", "-", "123x", " 1", "1 ", "1_000", "1.5", "0x10", "١٢"):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    to_int(token)

    def testNonString(self):
        with self.assertRaises(TypeError):
            to_int(12)

    def testSixtyFourBitBounds(self):
        self.assertEqual(to_int(str(INT_MAX)), INT_MAX)
        self.assertEqual(to_int(str(INT_MIN)), INT_MIN)
        for token in (str(INT_MAX + 1), str(INT_MIN - 1), "99999999999999999999"):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    to_int(token)


class TestToFloat(TestCase):

    def testAccepted(self):
        for token, expected in (("123.123", 123.123), ("1", 1.0), ("-.5", -0.5), ("1.", 1.0), ("2e3", 2000.0)):
            with self.subTest(token=token):
                self.assertEqual(to_float(token), expected)

    def testSpecialValues(self):
        self.assertEqual(to_float("inf"), math.inf)
        self.assertEqual(to_float("-Infinity"), -math.inf)
        self.assertTrue(math.isnan(to_float("NaN")))

    def testOverflowRejected(self):
        for token in ("1e400", "-1e400", "+9e999"):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    to_float(token)

    def testLargeFiniteAccepted(self):
        self.assertEqual(to_float("1e308"), 1e308)

    def testRejected(self):
        for token in ("", ".", "123x", " 1.0", "1_0.5", "e5", "1e"):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    to_float(token)


class TestToBool(TestCase):

    def testAccepted(self):
        for token in ("1", "t", "T", "TRUE", "true", "True"):
            with self.subTest(token=token):
                self.assertIs(to_bool(token), True)
        for token in ("0", "f", "F", "FALSE", "false", "False"):
            with self.subTest(token=token):
                self.assertIs(to_bool(token), False)

    def testRejected(self):
        for token in ("", "yes", "tRuE", "2"):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    to_bool(token)


class TestRanges(TestCase):

    def testIsRange(self):
        self.assertTrue(is_range("1..5"))
        self.assertTrue(is_range(".."))
        self.assertFalse(is_range("1.5"))

    def testExpand(self):
        self.assertEqual(expand_range("1..5"), [1, 2, 3, 4, 5])
        self.assertEqual(expand_range("-2..1"), [-2, -1, 0, 1])
        self.assertEqual(expand_range("4..4"), [4])

    def testOutOfRangeBound(self):
        with self.assertRaises(ValueError):
            expand_range("0..99999999999999999999")

    def testRejected(self):
        for token in ("5..1", "x..5", "1..x", "1..2..3", "..", "15"):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    expand_range(token)


class TestSplitPair(TestCase):

    def testSplit(self):
        self.assertEqual(split_pair("hola=mundo"), ("hola", "mundo"))
        self.assertEqual(split_pair("a=b=c"), ("a", "b=c"))
        self.assertEqual(split_pair("=v"), ("", "v"))
        self.assertEqual(split_pair("k="), ("k", ""))

    def testMissingSeparator(self):
        with self.assertRaises(ValueError):
            split_pair("hola")


if __name__ == "__main__":
    unittest.main()
