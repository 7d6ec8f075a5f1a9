"""
Fault tests (codes, rendering, triggering).

Scope
- Fault codes attached to each error and their host normalization.
- rich rendering of errors and warnings.
- trigger() in library mode (raise / warn) and in shell mode (print / exit).
"""

from __future__ import annotations

import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console

from optionary import faults
from optionary.faults import (
    FaultCode,
    OptionException,
    IntConversionError,
    FloatConversionError,
    KeyValueFormatError,
    MissingRequiredOptionError,
    DuplicateAliasWarning,
    trigger,
)


def _capture():
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestFaultCodes(TestCase):

    def testCodes(self):
        self.assertIs(IntConversionError.code, FaultCode.CONVERT_TO_INT)
        self.assertIs(FloatConversionError.code, FaultCode.CONVERT_TO_FLOAT)
        self.assertIs(KeyValueFormatError.code, FaultCode.NOT_KEY_VALUE)
        self.assertIs(MissingRequiredOptionError.code, FaultCode.MISSING_REQUIRED_OPTION)
        self.assertIs(DuplicateAliasWarning.code, FaultCode.DUPLICATE_ALIAS)

    def testNormalizeDefault(self):
        self.assertEqual(FaultCode.CONVERT_TO_INT.normalize(), "21111")

    def testNormalizeHostLabels(self):
        labels = {FaultCode.CONVERT_TO_INT: "E-INT"}
        with mock.patch.object(sys.modules["__main__"], "__codes__", labels, create=True):
            self.assertEqual(FaultCode.CONVERT_TO_INT.normalize(), "E-INT")

    def testHierarchy(self):
        self.assertTrue(issubclass(IntConversionError, OptionException))
        self.assertTrue(issubclass(DuplicateAliasWarning, Warning))


class TestRendering(TestCase):

    def testErrorRender(self):
        console = _capture()
        console.print(MissingRequiredOptionError("Missing required option 'help'!", "help", hint="pass --help"))
        output = console.file.getvalue()
        self.assertIn("21131", output)
        self.assertIn("Missing required option 'help'!", output)
        self.assertIn("pass --help", output)

    def testWarningRender(self):
        console = _capture()
        console.print(DuplicateAliasWarning("duplicated", "help", "h"))
        self.assertIn("duplicated", console.file.getvalue())

    def testStrIsMessageOnly(self):
        error = KeyValueFormatError("bad pair", "x", hint="write key=value")
        self.assertEqual(str(error), "bad pair")
        self.assertEqual(error.token, "x")


class TestTrigger(TestCase):

    def testRaisesOutsideShell(self):
        with self.assertRaises(IntConversionError):
            trigger(IntConversionError("boom", "n", "x"))

    def testWarnsOutsideShell(self):
        with self.assertWarns(DuplicateAliasWarning):
            trigger(DuplicateAliasWarning("twice", "help", "h"))

    def testShellPrintsAndExits(self):
        console = _capture()
        with mock.patch.object(faults, "console", console):
            with self.assertRaises(SystemExit) as context:
                trigger(IntConversionError("boom", "n", "x"), shell=True, prog="tool")
        self.assertEqual(context.exception.code, 1)
        output = console.file.getvalue()
        self.assertIn("tool", output)
        self.assertIn("boom", output)

    def testShellSoftDoesNotExit(self):
        console = _capture()
        with mock.patch.object(faults, "console", console):
            trigger(FloatConversionError("boom", "f", "x"), shell=True, soft=True, fancy=True)
        self.assertIn("boom", console.file.getvalue())

    def testShellWarningPrints(self):
        console = _capture()
        with mock.patch.object(faults, "console", console):
            trigger(DuplicateAliasWarning("twice", "help", "h"), shell=True)
        self.assertIn("twice", console.file.getvalue())

    def testRejectsNonTriggerable(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("plain"))


if __name__ == "__main__":
    unittest.main()
