"""
Getargs option specifications and the option registry.

Overview
- OptionSpec: one accepted option, identified by its canonical long name.
  • aliases: further long spellings (the "name|alias" key form).
  • shorts: short spellings, primary first (the "short|alias" field form).
  • max/min: arity. max == -1 is unbounded, max == 0 is a switch, min defaults to max.
  • default/desc: optional default value (scalar or list) and description.

- Registry: the option set normalized into lookup tables.
  • options: canonical long name → OptionSpec
  • aliases: long alias → canonical long name
  • shorts:  short name (or short alias) → canonical long name
  Built once from a configuration mapping and read-only afterwards.

Configuration format
    {
        "width|breadth": {"short": "w", "max": 1, "desc": "Set the new width."},
        "debug":         {"short": "d", "max": 0},
        "verbose":       {"short": "v|loud", "max": 1, "min": 0, "default": 3},
    }

Validation (raises ConfigurationError subclasses)
- every long name and long alias is unique across the whole set; same for shorts.
- names are non-empty, do not start with '-' and contain neither '=' nor spaces.
- max is a required integer >= -1; min, when given, is an integer in 0..max.
"""
from collections.abc import Mapping
from types import MappingProxyType

from .faults import *
from .utils import *


def _checkname(name, key, /):
    if not name or name.startswith("-") or "=" in name or any(char.isspace() for char in name):
        raise MalformedNameError(
            "bad option name %r in %r" % (name, key),
            title="malformed option name",
            code=FaultCode.MALFORMED_NAME,
            input=name,
            hint="names are written without dashes and cannot be empty or contain '=' or spaces",
        )
    return name


class OptionSpec:
    """
    Declarative description of a single option.

    The canonical long name is the identity of the spec: values are stored
    under it and every alias or short name resolves to it.
    """

    name = mirror("name")
    aliases = mirror("aliases")
    shorts = mirror("shorts")
    max = mirror("max")
    min = mirror("min")
    default = mirror("default")
    desc = mirror("desc")

    def __init__(self, name, /, *, aliases=(), shorts=(), max=Unset, min=Unset, default=Unset, desc=Unset):
        if not isinstance(name, str):
            raise TypeError("OptionSpec() name must be a string")
        self._name = _checkname(name, name)
        self._aliases = tuple(_checkname(alias, name) for alias in aliases)
        self._shorts = tuple(_checkname(short, name) for short in shorts)

        if isinstance(max, bool) or not isinstance(max, int):
            raise MissingMaxError(
                "no max parameter set for %r" % name,
                title="missing max",
                code=FaultCode.MISSING_MAX,
                input=name,
                hint="give every option an integer 'max' (-1 for unbounded, 0 for a switch)",
            )
        if max < -1:
            raise InvalidArityError(
                "max parameter of %r must be -1 or greater, got %d" % (name, max),
                title="invalid arity",
                code=FaultCode.INVALID_ARITY,
                input=name,
                hint="use -1 for an unbounded number of values",
            )

        if min is Unset:
            min = max
        elif isinstance(min, bool) or not isinstance(min, int) or min < 0:
            raise InvalidArityError(
                "min parameter of %r must be a non-negative integer" % name,
                title="invalid arity",
                code=FaultCode.INVALID_ARITY,
                input=name,
                hint="leave 'min' out to make it equal to 'max'",
            )
        elif max > 0 and min > max:
            raise InvalidArityError(
                "min parameter of %r (%d) is greater than its max (%d)" % (name, min, max),
                title="invalid arity",
                code=FaultCode.INVALID_ARITY,
                input=name,
                hint="lower 'min' or raise 'max'",
            )
        self._max = max
        self._min = min

        if isinstance(default, (list, tuple)):
            default = list(default)
        self._default = default
        self._desc = desc

    @classmethod
    def fromconfig(cls, key, definition, /):
        """
        Build a spec from one configuration entry.

        `key` is the "long|alias..." string and `definition` the mapping with
        the short/max/min/default/desc fields. Unknown fields are ignored and
        a field set to None counts as not given.
        """
        if not isinstance(key, str):
            raise TypeError("option key must be a string, not %s" % type(key).__name__)
        if not isinstance(definition, Mapping):
            raise TypeError("definition of option %r must be a mapping" % key)

        def field(name):
            value = definition.get(name)
            return Unset if value is None else value

        name, *aliases = split(key)
        short = definition.get("short")
        return cls(
            name,
            aliases=aliases,
            shorts=split(short) if short else (),
            max=field("max"),
            min=field("min"),
            default=field("default"),
            desc=field("desc"),
        )

    @property
    def names(self):
        """Every spelling of this option: long names first, then short names."""
        return (self._name, *self._aliases, *self._shorts)

    @property
    def switch(self):
        return self._max == 0

    @property
    def single(self):
        return self._min == 1 and self._max == 1

    @property
    def optional(self):
        """True for options whose values may be left out (min == 0, not a switch)."""
        return self._min == 0 and self._max != 0

    @property
    def defaulted(self):
        return self._default is not Unset

    def __repr__(self):
        fields = ["%s=%r" % (field, getattr(self, field)) for field in ("aliases", "shorts", "max", "min", "default", "desc")]
        return "%s(%r, %s)" % (type(self).__name__, self._name, ", ".join(fields))


class Registry:
    """
    Lookup tables for an option set.

    Construct it from a configuration mapping; ConfigurationError subclasses
    are raised when the configuration itself is invalid. The original mapping
    stays available as `config` for help rendering.
    """

    def __init__(self, config, /):
        if not isinstance(config, Mapping):
            raise TypeError("Registry() argument must be a mapping")

        self._config = MappingProxyType(dict(config))
        self._options = {}
        self._aliases = {}
        self._shorts = {}

        for key, definition in self._config.items():
            spec = OptionSpec.fromconfig(key, definition)

            for name in (spec.name, *spec.aliases):
                if name in self._options or name in self._aliases:
                    raise DuplicateAliasError(
                        "duplicate alias for long option %r" % name,
                        title="duplicate alias",
                        code=FaultCode.DUPLICATE_ALIAS,
                        input=name,
                        hint="long names and their aliases must be unique across all options",
                    )
                if name == spec.name:
                    self._options[name] = spec
                else:
                    self._aliases[name] = spec.name

            for short in spec.shorts:
                if short in self._shorts:
                    raise DuplicateAliasError(
                        "duplicate alias for short option %r" % short,
                        title="duplicate alias",
                        code=FaultCode.DUPLICATE_ALIAS,
                        input=short,
                        hint="short names and their aliases must be unique across all options",
                    )
                self._shorts[short] = spec.name

        self._longs = {name: name for name in self._options} | self._aliases

    @property
    def config(self):
        return self._config

    @property
    def options(self):
        return MappingProxyType(self._options)

    @property
    def aliases(self):
        return MappingProxyType(self._aliases)

    @property
    def shorts(self):
        return MappingProxyType(self._shorts)

    @property
    def longs(self):
        """Every long spelling (canonical names and aliases) → canonical name."""
        return MappingProxyType(self._longs)

    def resolve(self, name, /):
        """
        Map a short name or alias to its canonical long name.

        Unknown names are returned unchanged; this does not imply the option exists.
        """
        try:
            return self._shorts[name]
        except KeyError:
            return self._aliases.get(name, name)

    def __getitem__(self, name, /):
        return self._options[self.resolve(name)]

    def __contains__(self, name, /):
        return self.resolve(name) in self._options

    def __iter__(self):
        return iter(self._options)

    def __len__(self):
        return len(self._options)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self._options)))


__all__ = (
    "OptionSpec",
    "Registry",
)
