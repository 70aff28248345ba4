"""
Utility tests (Unset sentinel, coalesce, mirror, pluralize, split, program).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import copy
import pickle
import sys
import unittest
from unittest import TestCase, mock

from getargs.utils import Unset, UnsetType, coalesce, mirror, pluralize, program, split


class TestUnset(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFalseyAndPrintable(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testNotSubclassable(self):
        with self.assertRaises(TypeError):
            class Other(UnsetType):
                pass

    def testUnionWithTypes(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertNotIsInstance(3, str | Unset)


class TestHelpers(TestCase):

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 5), 0)

    def testPluralize(self):
        self.assertEqual(pluralize("value", 1), "value")
        self.assertEqual(pluralize("value", 0), "values")
        self.assertEqual(pluralize("value", 3), "values")
        self.assertEqual(pluralize("alias", 2), "aliases")
        with self.assertRaises(TypeError):
            pluralize(None, 2)

    def testSplit(self):
        self.assertEqual(split("verbose|v|loud"), ("verbose", "v", "loud"))
        self.assertEqual(split(" width | w "), ("width", "w"))
        self.assertEqual(split("width|"), ("width", ""))
        with self.assertRaises(TypeError):
            split(["width"])

    def testMirror(self):
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = ["a", {"b": ["c"]}]

        holder = Holder()
        items = holder.items
        items.append("x")
        items[1]["b"].append("y")
        self.assertEqual(holder.items, ["a", {"b": ["c"]}])
        with self.assertRaises(AttributeError):
            holder.items = []
        with self.assertRaises(TypeError):
            mirror(1)

    def testProgram(self):
        main = sys.modules["__main__"]
        with mock.patch.object(main, "__prog__", "imgtool", create=True):
            self.assertEqual(program(), "imgtool")
        if not hasattr(main, "__prog__"):
            with mock.patch.object(sys, "argv", ["/usr/local/bin/convert", "-d"]):
                self.assertEqual(program(), "convert")
            with mock.patch.object(sys, "argv", []):
                self.assertEqual(program(), "getargs")


if __name__ == "__main__":
    unittest.main()
