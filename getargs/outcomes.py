"""
Parse outcomes.

parse() never raises for a bad configuration or a bad command line; it hands
back one of these variants instead so that callers can tell the four cases
apart without inspecting exception types:

- Parsed(values)   → the command line was valid; `values` is the value store.
- HelpRequested()  → '-h' or '--help' was seen; render help and exit 0.
- Failed(fault)    → `fault` is a UserError (kind USER_ERROR) or a
                     ConfigurationError (kind CONFIG_ERROR).

Every variant supports structural pattern matching:

    match parse(config, args):
        case Parsed(values):
            ...
        case HelpRequested():
            print(render(config))
        case Failed(fault):
            print(fault.message)
"""
from enum import Enum

from .faults import *


class OutcomeKind(Enum):
    PARSED = "parsed"
    HELP = "help"
    USER_ERROR = "user-error"
    CONFIG_ERROR = "config-error"


class Outcome:
    """Base of the parse outcome variants."""
    __slots__ = ()
    __match_args__ = ()

    kind = None

    @property
    def ok(self):
        return self.kind is OutcomeKind.PARSED

    def unwrap(self):
        """
        Return the value store, or raise what stands in its way.

        - Parsed: returns its values.
        - HelpRequested: raises HelpRequestedError.
        - Failed: raises the carried fault.
        """
        raise NotImplementedError

    def __init_subclass__(cls, **options):
        if cls.__module__ != __name__:
            raise TypeError("type 'Outcome' is not an acceptable base type")
        super().__init_subclass__(**options)


class Parsed(Outcome):
    __slots__ = ("values",)
    __match_args__ = ("values",)

    kind = OutcomeKind.PARSED

    def __init__(self, values, /):
        self.values = values

    def unwrap(self):
        return self.values

    def __repr__(self):
        return "Parsed(%r)" % (self.values,)


class HelpRequested(Outcome):
    __slots__ = ()

    kind = OutcomeKind.HELP

    def unwrap(self):
        raise HelpRequestedError(
            "help was requested on the command line",
            title="help requested",
            code=FaultCode.HELP_REQUESTED,
        )

    def __eq__(self, other):
        return isinstance(other, HelpRequested)

    def __hash__(self):
        return hash(HelpRequested)

    def __repr__(self):
        return "HelpRequested()"


class Failed(Outcome):
    __slots__ = ("fault",)
    __match_args__ = ("fault",)

    def __init__(self, fault, /):
        if not isinstance(fault, (UserError, ConfigurationError)):
            raise TypeError("Failed() argument must be a user or configuration error")
        self.fault = fault

    @property
    def kind(self):
        return OutcomeKind.CONFIG_ERROR if isinstance(self.fault, ConfigurationError) else OutcomeKind.USER_ERROR

    def unwrap(self):
        raise self.fault

    def __repr__(self):
        return "Failed(%s(%r))" % (type(self.fault).__name__, self.fault.message)


__all__ = (
    "OutcomeKind",
    "Outcome",
    "Parsed",
    "HelpRequested",
    "Failed",
)
