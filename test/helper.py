"""
Help renderer tests (layout, arity markers, wrapping, header/footer).

Scope
- Validate the two-column layout and the column alignment.
- Validate arity markers for every (min, max) shape.
- Validate description wrapping and continuation indentation.
- Validate header/footer handling and the program name lookup.

Conventions
- Test method names follow CamelCase per project convention.
- Expected output is spelled out in full; whitespace matters here.
"""

from __future__ import annotations

import sys
import unittest
from unittest import TestCase, mock

from getargs import render, Registry, MissingMaxError
from getargs.helper import rows

CONFIG = {
    "debug": {"short": "d", "max": 0, "desc": "Switch to debug mode."},
    "width": {"short": "w", "max": 1, "default": 10, "desc": "Set the width."},
}


class TestLayout(TestCase):
    """Behavioral tests for render() output."""

    def testTwoColumns(self):
        self.assertEqual(
            render(CONFIG, program="convert"),
            "Usage: convert [options]\n"
            "\n"
            "-d --debug          Switch to debug mode.\n"
            "-w --width=<value>  Set the width. (10)\n",
        )

    def testLongOnlyOption(self):
        text = render({"formats": {"max": 3, "min": 1, "desc": "Formats."}}, "")
        self.assertEqual(text, "--formats values(1-3)  Formats.\n")

    def testShortAliasesNotShown(self):
        text = render({"files|images": {"short": "f|local", "max": 1}}, "")
        self.assertEqual(text, "-f --files=<value>\n")

    def testListDefaultJoined(self):
        config = {"formats": {"max": 3, "min": 1, "default": ["jpegbig", "jpegsmall"], "desc": "Set the format."}}
        self.assertEqual(render(config, ""), "--formats values(1-3)  Set the format. (jpegbig, jpegsmall)\n")

    def testDefaultWithoutDescription(self):
        self.assertEqual(render({"log": {"max": 1, "default": "out.log"}}, ""), "--log=<value>  (out.log)\n")

    def testWrapping(self):
        config = {
            "files": {
                "short": "f",
                "max": 2,
                "desc": "Set the source and destination image files for the conversion.",
            },
        }
        indent = " " * 22
        self.assertEqual(
            render(config, "", width=40),
            "-f --files values(2)  Set the source and\n"
            + indent + "destination image\n"
            + indent + "files for the\n"
            + indent + "conversion.\n",
        )

    def testLongWordsAreNotBroken(self):
        config = {"path": {"max": 1, "desc": "/a/really/long/path/that/does/not/fit"}}
        text = render(config, "", width=20)
        self.assertEqual(text, "--path=<value>  /a/really/long/path/that/does/not/fit\n")

    def testFooterAppended(self):
        text = render(CONFIG, "", "argument 'x' expects one value\n")
        self.assertTrue(text.endswith("(10)\nargument 'x' expects one value\n"))

    def testHeaderReplacesUsage(self):
        text = render(CONFIG, "convert - image converter\n")
        self.assertTrue(text.startswith("convert - image converter\n-d --debug"))
        self.assertNotIn("Usage:", text)

    def testProgramFromMain(self):
        with mock.patch.object(sys.modules["__main__"], "__prog__", "imgtool", create=True):
            self.assertTrue(render(CONFIG).startswith("Usage: imgtool [options]\n\n"))

    def testEmptyConfiguration(self):
        self.assertEqual(render({}, program="x"), "Usage: x [options]\n\n")

    def testRegistryAccepted(self):
        self.assertEqual(render(Registry(CONFIG), program="convert"), render(CONFIG, program="convert"))

    def testBadConfigurationRaises(self):
        with self.assertRaises(MissingMaxError):
            render({"width": {"short": "w"}})


class TestArityMarkers(TestCase):
    """Tests for the marker following the option names."""

    def marker(self, **definition):
        (names, _), = rows({"opt": definition})
        return names[len("--opt"):]

    def testMarkers(self):
        cases = [
            ({"max": 0}, ""),
            ({"max": 1}, "=<value>"),
            ({"max": 1, "min": 0, "default": 1}, " (optional)value"),
            ({"max": 2}, " values(2)"),
            ({"max": 3, "min": 1}, " values(1-3)"),
            ({"max": 3, "min": 0, "default": 1}, " values(optional)"),
            ({"max": -1, "min": 2}, " values(2-...)"),
            ({"max": -1, "min": 0}, " (optional)values"),
        ]
        for definition, expected in cases:
            with self.subTest(definition=definition):
                self.assertEqual(self.marker(**definition), expected)

    def testRowsPairNamesWithDescriptions(self):
        self.assertEqual(list(rows(CONFIG)), [
            ("-d --debug", "Switch to debug mode."),
            ("-w --width=<value>", "Set the width. (10)"),
        ])


if __name__ == "__main__":
    unittest.main()
