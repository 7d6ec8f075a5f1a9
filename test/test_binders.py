"""
Binder tests (cells and slots).

Scope
- Cell equality and representation.
- Slot binding validation, read-through, in-place writes and snapshots.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from optionary.binders import Cell, BoolSlot, IntSlot, FloatSlot, StringListSlot, IntListSlot, StringMapSlot


class TestCell(TestCase):

    def testEquality(self):
        self.assertEqual(Cell(1), Cell(1))
        self.assertNotEqual(Cell(1), Cell(2))
        self.assertNotEqual(Cell(1), 1)

    def testUnhashable(self):
        with self.assertRaises(TypeError):
            hash(Cell(1))

    def testRepr(self):
        self.assertEqual(repr(Cell("x")), "Cell('x')")


class TestScalarSlots(TestCase):

    def testZeroAndUnbound(self):
        slot = IntSlot()
        self.assertEqual(slot.last, 0)
        self.assertFalse(slot.bound)
        self.assertEqual(slot.read(), 0)

    def testBindMirrorsCell(self):
        cell = Cell(True)
        slot = BoolSlot()
        slot.bind(cell)
        self.assertTrue(slot.bound)
        self.assertIs(slot.last, True)

    def testWriteUpdatesBoth(self):
        cell = Cell(0)
        slot = IntSlot()
        slot.bind(cell)
        slot.write(7)
        self.assertEqual(cell.value, 7)
        self.assertEqual(slot.snapshot(), 7)

    def testReadThrough(self):
        cell = Cell(0)
        slot = IntSlot()
        slot.bind(cell)
        cell.value = 4
        self.assertEqual(slot.read(), 4)
        self.assertEqual(slot.snapshot(), 0)

    def testFloatCellAcceptsInt(self):
        cell = Cell(1)
        slot = FloatSlot()
        slot.bind(cell)
        self.assertIsInstance(slot.last, float)
        self.assertIsInstance(slot.read(), float)
        cell.value = 3
        self.assertEqual(slot.read(), 3.0)
        self.assertIsInstance(slot.read(), float)

    def testPreloadValidates(self):
        with self.assertRaises(TypeError):
            BoolSlot().preload(1)
        with self.assertRaises(TypeError):
            FloatSlot().preload(False)


class TestContainerSlots(TestCase):

    def testListWriteIsInPlace(self):
        target = ["a"]
        slot = StringListSlot()
        slot.bind(target)
        slot.write(["a", "b"])
        self.assertEqual(target, ["a", "b"])
        self.assertEqual(slot.snapshot(), ["a", "b"])

    def testReadReturnsCopy(self):
        target = [1]
        slot = IntListSlot()
        slot.bind(target)
        slot.read().append(2)
        self.assertEqual(target, [1])

    def testIntListRejectsBools(self):
        with self.assertRaises(TypeError):
            IntListSlot().bind([True])

    def testMapWriteIsInPlace(self):
        target = {"a": "1"}
        slot = StringMapSlot()
        slot.bind(target)
        slot.write({"a": "1", "b": "2"})
        self.assertEqual(target, {"a": "1", "b": "2"})
        self.assertEqual(slot.snapshot(), {"a": "1", "b": "2"})

    def testMapRejectsNonDict(self):
        with self.assertRaises(TypeError):
            StringMapSlot().bind([("a", "b")])


if __name__ == "__main__":
    unittest.main()
