"""
Getargs faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every issue the package
  reports. Codes are grouped by domain (configuration, command line, control).
- GetargsError and its two families:
  • ConfigurationError: the option definitions themselves are wrong. This is a
    programmer error in the embedding application and must surface loudly.
  • UserError: the command line does not fit a valid configuration. Expected,
    recoverable by the end user; shown with a short hint.
- ConfigurationWarning: the warning-level companion emitted when a
  configuration error is handed back by the parser instead of raised.
- trigger(): central entry point to surface a fault (shell rendering or raise/warn).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).

Integration
- The parser builds faults with title/code/hint options and returns them inside
  a Failed outcome. The shell runner calls trigger(fault, shell=True) to print
  them; library users may simply raise them.
"""
import copy
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, program

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the package (stable identifiers).

    grouping (by high-level domain)
    - configuration (211xx)
      • DUPLICATE_ALIAS, MISSING_MAX, INVALID_ARITY, MALFORMED_NAME,
        MISSING_DEFAULT, NON_SCALAR_DEFAULT
    - command line (221xx)
      • UNKNOWN_ARGUMENT, UNEXPECTED_VALUE, INLINE_VALUES, MISSING_VALUE,
        NOT_ENOUGH_VALUES, TOO_MANY_VALUES
    - control (231xx)
      • HELP_REQUESTED

    normalize() allows host remapping to custom labels while keeping the
    numeric codes stable.
    """
    # --- configuration errors (21xxx) ---
    DUPLICATE_ALIAS             = 21101
    MISSING_MAX                 = 21102
    INVALID_ARITY               = 21103
    MALFORMED_NAME              = 21104
    MISSING_DEFAULT             = 21111
    NON_SCALAR_DEFAULT          = 21112

    # --- command line errors (22xxx) ---
    UNKNOWN_ARGUMENT            = 22101
    UNEXPECTED_VALUE            = 22111
    INLINE_VALUES               = 22112
    MISSING_VALUE               = 22113
    NOT_ENOUGH_VALUES           = 22114
    TOO_MANY_VALUES             = 22115

    # --- control signals (23xxx) ---
    HELP_REQUESTED              = 23101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette, kind):
    styles = defaultdict(str, palette | getattr(__import__("__main__"), "__styles__", {}))
    colorful = fault.options.get("colorful", True)
    fancy = fault.options.get("fancy", False)

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    header = Text.assemble(
        "[ ",
        text(fault.options.get("program") or program(), styler("prog-name")),
        " — ",
        text(fault.code.normalize() if fault.code else kind, styler("code")),
        " | ",
        text(fault.title.title(), styler(kind + "-title")),
        " ]"
    )
    message = text(fault.message, styler(kind + "-message"))
    renders = [message]
    if fault.hint:
        renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(fault.hint, styler("hint"))))

    if fancy:
        return Panel(Group(*renders), title=header, title_align="left")
    return Group(header, *renders)


class GetargsError(Exception):
    """
    Base type of every fault the parser can report.

    Carries a lowercased, one-sentence message plus read-only options. The
    recognized options are
    - code: FaultCode, title: str, hint: str, input: the offending token or name;
    - shell, colorful, fancy, program: rendering controls used by __trigger__.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message if message is not Unset else "")
        self.message = message if message is not Unset else ""
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def title(self):
        return self.options.get("title", type(self).__name__)

    @property
    def hint(self):
        return self.options.get("hint")

    @property
    def input(self):
        return self.options.get("input")

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        }, "error")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})

    def __reduce__(self):
        return _rebuild, (type(self), self.message, dict(self.options))


def _rebuild(cls, message, options):
    return cls(message, **options)


class ConfigurationError(GetargsError): ...
class DuplicateAliasError(ConfigurationError): ...
class MissingMaxError(ConfigurationError): ...
class InvalidArityError(ConfigurationError): ...
class MalformedNameError(ConfigurationError): ...
class MissingDefaultError(ConfigurationError): ...
class NonScalarDefaultError(ConfigurationError): ...


class UserError(GetargsError): ...
class UnknownArgumentError(UserError): ...
class UnexpectedValueError(UserError): ...
class InlineValuesError(UserError): ...
class MissingValueError(UserError): ...
class NotEnoughValuesError(UserError): ...
class TooManyValuesError(UserError): ...


class HelpRequestedError(GetargsError):
    """
    Raised by Outcome.unwrap() when the command line asked for help.

    Not a mistake of anyone; in shell mode it exits with status 0.
    """

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        sys.exit(0)


class ConfigurationWarning(UserWarning):
    """
    Warning-level trigger for configuration errors returned by the parser.

    The wrapped error stays available as `error` so callers can raise it.
    """

    def __init__(self, error, /, **options):
        assert isinstance(error, ConfigurationError)
        super().__init__(error.message)
        self.error = error
        self.options = MappingProxyType({**error.options, **options})

    @property
    def message(self):
        return self.error.message

    @property
    def code(self):
        return self.error.code

    @property
    def title(self):
        return self.error.title

    @property
    def hint(self):
        return self.error.hint

    def __rich__(self):
        return _render(self, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "warning-title": "bold #FFC2E0",  # softer pinky title for warnings

            # body
            "warning-message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        }, "warning")

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=self.options.get("stacklevel", 2))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.error, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace() before triggering.
    - in shell mode, rendering happens via the rich console; otherwise errors are
      raised and warnings are emitted through the warnings module.

    typical options
    - shell, fancy, colorful, program, stacklevel, and any context the reporter
      may want to show (title, code, hint, input).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings. when
    not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "GetargsError",
    "ConfigurationError",
    "DuplicateAliasError",
    "MissingMaxError",
    "InvalidArityError",
    "MalformedNameError",
    "MissingDefaultError",
    "NonScalarDefaultError",
    "UserError",
    "UnknownArgumentError",
    "UnexpectedValueError",
    "InlineValuesError",
    "MissingValueError",
    "NotEnoughValuesError",
    "TooManyValuesError",
    "HelpRequestedError",
    "ConfigurationWarning",
    "trigger",
    "getdoc",
)
