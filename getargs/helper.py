"""
Plain-text help rendering.

render(config) lays the option set out as two columns:

    Usage: convert [options]

    -f --files values(2)          Set the source and destination image files.
    -w --width=<value>            Set the new width of the image.
    -d --debug                    Switch to debug mode.
    --formats values(1-3)         Set the image destination format. (jpegbig,
                                  jpegsmall)
    -v --verbose (optional)value  Set the verbose level. (3)

The left column holds the primary short and long names plus an arity marker,
the right column the description followed by the default in parentheses. The
right column is wrapped to the remaining width and continuation lines start
under it. Only the configuration is used; no parse is needed.
"""
import textwrap

from . import utils
from .options import OptionSpec, Registry
from .utils import Unset, coalesce


def _arity(spec):
    # marker shown after the names, from (min, max)
    max, min = spec.max, spec.min
    if max == 1 and min == 1:
        return "=<value>"
    if max > 1:
        if min == max:
            return " values(%d)" % max
        if min == 0:
            return " values(optional)"
        return " values(%d-%d)" % (min, max)
    if max == 1 and min == 0:
        return " (optional)value"
    if max == -1:
        if min > 0:
            return " values(%d-...)" % min
        return " (optional)values"
    return ""


def _describe(spec):
    parts = []
    if spec.desc is not Unset:
        parts.append(str(spec.desc))
    if spec.defaulted:
        default = spec.default
        if isinstance(default, list):
            default = ", ".join(map(str, default))
        parts.append("(%s)" % default)
    return " ".join(part for part in parts if part)


def rows(config, /):
    """
    Yield the (names, description) column pairs for every configured option.

    `config` is the configuration mapping or a Registry (its original
    configuration is used).
    """
    if isinstance(config, Registry):
        config = config.config
    for key, definition in config.items():
        spec = OptionSpec.fromconfig(key, definition)
        names = "--" + spec.name + _arity(spec)
        if spec.shorts:
            names = "-" + spec.shorts[0] + " " + names
        yield names, _describe(spec)


def render(config, /, header=Unset, footer="", width=78, *, program=Unset):
    """
    Return the formatted help text for an option configuration.

    Parameters
    - config: Mapping | Registry
    - header: str
      text placed before the option lines; when omitted a
      "Usage: <program> [options]" line and a blank line are used.
    - footer: str
      appended verbatim after the option lines (e.g. an error message).
    - width: int
      maximum line length the description column is wrapped to.
    - program: str
      program name for the default header (defaults to __prog__ in __main__
      or the basename of sys.argv[0]).

    Raises
    - ConfigurationError subclasses when an entry cannot be read (e.g. no max).
    """
    if header is Unset:
        header = "Usage: %s [options]\n\n" % coalesce(program, utils.program())

    table = list(rows(config))
    arglen = max((len(names) for names, _ in table), default=0)
    desclen = max(width - arglen, 1)
    padding = " " * arglen

    lines = []
    for names, descr in table:
        if len(descr) > desclen:
            descr = ("\n  " + padding).join(textwrap.wrap(
                descr,
                desclen,
                break_long_words=False,
                break_on_hyphens=False,
            ))
        lines.append((names.ljust(arglen) + "  " + descr).rstrip() + "\n")

    return header + "".join(lines) + footer


__all__ = (
    "render",
)
