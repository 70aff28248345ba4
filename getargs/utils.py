"""
Getargs utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the registry, the parser and the renderer.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/""/[].

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr); containers
    are handed out as fresh copies so callers cannot mutate a spec through it.

- pluralize(word, count)
  • Pick "value"/"values" style labels for messages.

- split(names)
  • Break a pipe-separated name list ("file|input") into its trimmed parts.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> split("verbose|v|loud")
    ('verbose', 'v', 'loud')
    >>> pluralize("value", 2)
    'values'
"""
import functools
import os.path
import sys
from collections.abc import Sequence, Mapping
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Option defaults may legitimately be falsey ("" or 0), so the package needs
    a marker for “nothing was given” that no configuration value can equal.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    def __or__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0, "" or [] are preserved as-is; only Unset is
    replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def _detach(object):
    # Fresh containers all the way down; scalars pass through.
    if isinstance(object, Sequence) and not isinstance(object, str):
        return type(object)(map(_detach, object)) if isinstance(object, tuple) else list(map(_detach, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_detach, object.values())))
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The property reads "_{name}" on the instance. Lists and mappings are
    returned as copies to discourage mutation through the public API.

    Example
    - Given self._aliases, declare aliases = mirror("aliases").
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return _detach(getattr(self, "_" + name))

    getter.__name__ = getter.__qualname__ = name
    return property(getter)


def pluralize(word, count, /):
    """
    Return `word` or its plural depending on `count`.

    Only the regular English forms used in parser messages are covered
    ("value" -> "values", "alias" -> "aliases").
    """
    if not isinstance(word, str):
        raise TypeError("pluralize() first argument must be a string")
    if count == 1 or not word:
        return word
    if word.endswith(("s", "sh", "ch", "x", "z")):
        return word + "es"
    return word + "s"


def program():
    """
    Name of the running program, for usage lines and fault headers.

    The host application can set __prog__ in __main__; otherwise the basename
    of sys.argv[0] is used.
    """
    try:
        return __import__("__main__").__prog__
    except AttributeError:
        return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "getargs"


def split(names, /):
    """
    Split a pipe-separated list of option names.

    Whitespace around each part is dropped; empty parts are kept so the caller
    can reject them with a proper configuration fault.
    """
    if not isinstance(names, str):
        raise TypeError("split() argument must be a string")
    return tuple(part.strip() for part in names.split("|"))


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a valid user value but the API still needs
to tell “no input” apart from “explicitly passed None”.
"""


__all__ = (
    # Functions
    "coalesce",
    "mirror",
    "pluralize",
    "program",
    "split",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
