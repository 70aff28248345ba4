"""
Getargs parsing engine: walk the argument vector once and collect option values.

What this module provides
- parse(config, args): the entry point. Takes the option configuration (or a
  ready Registry) and the argument vector *without* the program name, returns
  an outcome (Parsed, HelpRequested or Failed). Nothing is read from sys.argv.
- Values: the value store handed back inside Parsed. Every query accepts the
  long name, any long alias, or any short name.
- match(names, token): pure longest-prefix name lookup used for both long and
  short tokens.
- isvalue(token): tells values apart from option-looking tokens.

Token rules (single left-to-right pass)
- '--' stops scanning; everything after it is ignored.
- '-h' / '--help' anywhere before '--' requests help, whatever else is on the line.
- '--name', '--name=value', '--namevalue' are long options.
- '-n', '-n=value', '-nvalue' are short options (short names may be longer than one char).
- anything else is an unknown argument: bare values must follow an option.

Arity rules (per option, from its min/max)
- inline value (after '=' or glued to the name): only for min == 1 options.
- min == max == 1: exactly one following value.
- max == 0: a switch; stores True and never consumes a value.
- max >= 1, min == 0: default-if-set; one following value, else the default.
- otherwise: greedy run of following values, checked against min and max.

A value given twice turns into a list: ['first', 'second', ...].
"""
import shlex
from collections.abc import Iterable, Mapping

from .faults import *
from .options import Registry
from .outcomes import *
from .utils import *


def isvalue(token, /):
    """
    True unless the token looks like an option ('-x' or '--xyz').

    A lone '-' is a value (conventionally standard input).
    """
    return not (len(token) > 1 and token.startswith("-"))


def match(names, token, /):
    """
    Find the longest known name that prefixes `token`.

    The token is scanned one character at a time; every prefix found in
    `names` becomes the current match, and scanning stops right after an '='.

    Returns
    - (name, value): `value` is whatever follows the name, with one leading '='
      dropped ('' when nothing follows).
    - ("", prefix) when nothing matched; `prefix` is the scanned text, for messages.
    """
    found = ""
    prefix = ""
    for char in token:
        prefix += char
        if prefix in names:
            found = prefix
        if char == "=":
            break

    if not found:
        return "", prefix

    value = token[len(found):]
    if value.startswith("="):
        value = value[1:]
    return found, value


class Values(Mapping):
    """
    Option values collected by one parse.

    Values are stored under canonical long names; lookups resolve short names
    and aliases first. An undefined option has no entry: getvalue() returns
    None (or the given default) for it and never raises.
    """

    def __init__(self, registry, /):
        self._registry = registry
        self._values = {}

    def resolve(self, name, /):
        """Canonical long name for `name`, or `name` itself when unknown."""
        return self._registry.resolve(name)

    def isdefined(self, name, /):
        return self.resolve(name) in self._values

    def getvalue(self, name, default=None, /):
        return self._values.get(self.resolve(name), default)

    def asdict(self):
        return {name: list(value) if isinstance(value, list) else value for name, value in self._values.items()}

    def _update(self, name, value):
        # scalar first, list from the second value on
        try:
            previous = self._values[name]
        except KeyError:
            self._values[name] = value
            return
        if isinstance(previous, list):
            previous.append(value)
        else:
            self._values[name] = [previous, value]

    def __getitem__(self, name, /):
        return self._values[self.resolve(name)]

    def __contains__(self, name, /):
        return isinstance(name, str) and self.isdefined(name)

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __eq__(self, other):
        if isinstance(other, Values):
            return self._values == other._values
        return super().__eq__(other)

    __hash__ = None

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._values)


class Parser:
    """
    One-shot state machine over an argument vector.

    The cursor (`_pos`) always points at the token being handled; value
    consumption moves it forward so the main loop skips consumed tokens.
    Faults are raised and turned into outcomes by parse().
    """

    def __init__(self, registry, args, /):
        self._registry = registry
        self._args = tuple(args)
        self._values = Values(registry)
        self._pos = 0

    def run(self):
        while self._pos < len(self._args):
            token = self._args[self._pos]

            if token == "--":
                break
            if token.startswith("--") and len(token) > 2:
                self._option(token[2:], "--", self._registry.longs)
            elif token.startswith("-") and len(token) > 1:
                self._option(token[1:], "-", self._registry.shorts)
            else:
                raise UnknownArgumentError(
                    "unknown argument %r" % token,
                    title="unknown argument",
                    code=FaultCode.UNKNOWN_ARGUMENT,
                    input=token,
                    hint="values must follow the option they belong to; try --help to see all options",
                )
            self._pos += 1

        self._finalize()
        return self._values

    def _peek(self):
        # next token when it is a value, else None
        try:
            token = self._args[self._pos + 1]
        except IndexError:
            return None
        return token if isvalue(token) else None

    def _take(self):
        self._pos += 1
        return self._args[self._pos]

    def _option(self, token, dashes, names):
        name, value = match(names, token)
        if not name:
            raise UnknownArgumentError(
                "unknown argument %r" % (dashes + value),
                title="unknown argument",
                code=FaultCode.UNKNOWN_ARGUMENT,
                input=dashes + value,
                hint="try --help to see all options",
            )
        self._assign(names[name], value)

    def _assign(self, name, value):
        spec = self._registry.options[name]

        if value:
            # attached value, like --width=10 or -w10
            if spec.min == 1 and spec.max > 0:
                return self._values._update(name, value)
            if spec.switch:
                raise UnexpectedValueError(
                    "argument %r does not take any value" % name,
                    title="unexpected value",
                    code=FaultCode.UNEXPECTED_VALUE,
                    input=name,
                    hint="remove everything from the name on (for example: --%s)" % name,
                )
            raise InlineValuesError(
                "argument %r expects more than one value" % name,
                title="inline value not allowed",
                code=FaultCode.INLINE_VALUES,
                input=name,
                hint="pass the values after a space (for example: --%s <value> ...)" % name,
            )

        if spec.single:
            if self._peek() is None:
                raise MissingValueError(
                    "argument %r expects one value" % name,
                    title="missing value",
                    code=FaultCode.MISSING_VALUE,
                    input=name,
                    hint="add a value (for example: --%s=<value>)" % name,
                )
            return self._values._update(name, self._take())

        if spec.switch:
            if self._peek() is not None:
                raise UnexpectedValueError(
                    "argument %r does not take any value" % name,
                    title="unexpected value",
                    code=FaultCode.UNEXPECTED_VALUE,
                    input=name,
                    hint="switches are given alone; remove %r" % self._peek(),
                )
            return self._values._update(name, True)

        if spec.max >= 1 and spec.min == 0:
            if not spec.defaulted:
                raise MissingDefaultError(
                    "no default value defined for %r" % name,
                    title="missing default",
                    code=FaultCode.MISSING_DEFAULT,
                    input=name,
                    hint="options with min 0 need a 'default' to fall back to",
                )
            if isinstance(spec.default, list):
                raise NonScalarDefaultError(
                    "default value for %r must be scalar" % name,
                    title="non-scalar default",
                    code=FaultCode.NON_SCALAR_DEFAULT,
                    input=name,
                    hint="use a single default value for options with min 0",
                )
            if self._peek() is not None:
                return self._values._update(name, self._take())
            return self._values._update(name, spec.default)

        added = 0
        while self._peek() is not None:
            self._values._update(name, self._take())
            added += 1

        if added < spec.min:
            raise NotEnoughValuesError(
                "argument %r expects at least %d %s" % (name, spec.min, pluralize("value", spec.min)),
                title="not enough values",
                code=FaultCode.NOT_ENOUGH_VALUES,
                input=name,
                hint="got %d; values cannot start with '-'" % added,
            )
        if spec.max != -1 and added > spec.max:
            raise TooManyValuesError(
                "argument %r expects maximum %d %s" % (name, spec.max, pluralize("value", spec.max)),
                title="too many values",
                code=FaultCode.TOO_MANY_VALUES,
                input=name,
                hint="got %d; end the values with '--' if the rest is not meant for this option" % added,
            )

    def _finalize(self):
        for name, spec in self._registry.options.items():
            if name in self._values._values or not spec.defaulted or spec.optional:
                continue
            # mirror() already hands out a fresh copy of list defaults
            self._values._values[name] = spec.default


def _tokens(args):
    if isinstance(args, str):
        return shlex.split(args)
    if not isinstance(args, Iterable):
        raise TypeError("parse() second argument must be a string or an iterable of strings")
    tokens = list(args)
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError("parse() second argument must be a string or an iterable of strings")
    return tokens


def _misconfigured(fault):
    # warning-level trigger first, then the fault travels back inside Failed
    trigger(ConfigurationWarning(fault), stacklevel=5)
    return Failed(fault)


def parse(config, args, /):
    """
    Parse an argument vector against an option configuration.

    Parameters
    - config: Mapping | Registry
      the option configuration (see getargs.options) or a Registry built from it.
    - args: Iterable[str] | str
      the arguments without the program name; a single string is split the
      way a POSIX shell would (shlex.split).

    Returns
    - Parsed(values) on success, HelpRequested() when '-h'/'--help' appears
      before any '--', Failed(fault) otherwise. Only the first fault is reported.

    Configuration errors additionally emit a ConfigurationWarning.

    Raises
    - TypeError: when args is not a string or an iterable of strings.
    """
    tokens = _tokens(args)

    try:
        registry = config if isinstance(config, Registry) else Registry(config)
    except ConfigurationError as fault:
        return _misconfigured(fault)

    for token in tokens:
        if token == "--":
            break
        if token in ("--help", "-h"):
            return HelpRequested()

    try:
        values = Parser(registry, tokens).run()
    except ConfigurationError as fault:
        return _misconfigured(fault)
    except UserError as fault:
        return Failed(fault)
    return Parsed(values)


__all__ = (
    "Values",
    "Parser",
    "isvalue",
    "match",
    "parse",
)
