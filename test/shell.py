"""
Shell runner tests (exit codes, output streams, argv handling).

Scope
- Validate getargs() end to end: values on success, help on stdout with exit 0,
  help and fault on stderr with exit 1, configuration errors raised.
- Validate program name stripping.

Conventions
- Test method names follow CamelCase per project convention.
- Output streams are captured with contextlib redirection; rich consoles
  resolve sys.stdout/sys.stderr when printing, so redirection applies.
"""

from __future__ import annotations

import io
import sys
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import TestCase, mock

from getargs import getargs, strip_program, render, Values, ConfigurationWarning, MissingMaxError

CONFIG = {
    "width": {"short": "w", "max": 1, "desc": "Set the new width of the image."},
    "debug": {"short": "d", "max": 0, "desc": "Switch to debug mode."},
}


class TestStripProgram(TestCase):

    def testDropsProgramName(self):
        self.assertEqual(strip_program(["convert", "-d"]), ["-d"])

    def testKeepsLeadingOption(self):
        self.assertEqual(strip_program(["-d", "-w", "3"]), ["-d", "-w", "3"])

    def testKeepsEmptyFirstArgument(self):
        self.assertEqual(strip_program(["", "-d"]), ["", "-d"])

    def testEmpty(self):
        self.assertEqual(strip_program([]), [])


class TestGetargs(TestCase):
    """End-to-end tests for the shell runner."""

    def testSuccessReturnsValues(self):
        values = getargs(CONFIG, ["convert", "-w", "10", "-d"])
        self.assertIsInstance(values, Values)
        self.assertEqual(values.getvalue("w"), "10")
        self.assertTrue(values.isdefined("debug"))

    def testReadsSysArgv(self):
        with mock.patch.object(sys, "argv", ["/usr/bin/convert", "--debug"]):
            self.assertIs(getargs(CONFIG).getvalue("debug"), True)

    def testHelpExitsZero(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit) as context:
            getargs(CONFIG, ["/usr/bin/convert", "--help"])
        self.assertEqual(context.exception.code, 0)
        self.assertEqual(stdout.getvalue(), render(CONFIG, program="convert"))

    def testHelpUsesCustomHeaderAndFooter(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit):
            getargs(CONFIG, ["convert", "-h"], header="Image converter\n", footer="Bye.\n")
        self.assertTrue(stdout.getvalue().startswith("Image converter\n-w --width=<value>"))
        self.assertTrue(stdout.getvalue().endswith("Bye.\n"))

    def testUserErrorExitsOne(self):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr), self.assertRaises(SystemExit) as context:
            getargs(CONFIG, ["convert", "-w"], colorful=False)
        self.assertEqual(context.exception.code, 1)
        self.assertEqual(stdout.getvalue(), "")
        output = stderr.getvalue()
        self.assertTrue(output.startswith("Usage: convert [options]\n"))
        self.assertIn("argument 'width' expects one value", output)
        self.assertIn("Missing Value", output)

    def testConfigurationErrorRaised(self):
        with self.assertWarns(ConfigurationWarning), self.assertRaises(MissingMaxError):
            getargs({"width": {"short": "w"}}, ["convert"])


if __name__ == "__main__":
    unittest.main()
