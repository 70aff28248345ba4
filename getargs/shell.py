"""
Shell runner: the one-call entry point for scripts.

    from getargs import getargs

    config = {
        "width|w2": {"short": "w", "max": 1, "desc": "Set the new width of the image."},
        "debug":    {"short": "d", "max": 0, "desc": "Switch to debug mode."},
    }

    if __name__ == "__main__":
        args = getargs(config)
        print(args.getvalue("width"), args.isdefined("d"))

getargs() reads sys.argv (unless an argument vector is given), drops the
program name, parses, and deals with everything that is not a success the way
command-line tools conventionally do:
- help requested → help text on stdout, exit status 0;
- user error     → help text and the fault on stderr, exit status 1;
- configuration error → raised, it is a bug in the calling program.
"""
import os.path
import sys

from rich.console import Console

from .faults import *
from .helper import render
from .outcomes import *
from .parser import parse
from .utils import *


def strip_program(argv, /):
    """
    Drop argument 0 when it is a program name.

    Argument 0 is kept when it starts with '-' (some launchers pass options
    only) or when it is empty.
    """
    args = list(argv)
    if args and args[0] and not args[0].startswith("-"):
        del args[0]
    return args


def getargs(config, argv=Unset, /, *, header=Unset, footer="", width=78, colorful=True, fancy=False):
    """
    Parse the process arguments and return the value store.

    Parameters
    - config: Mapping | Registry
    - argv: Unset | Iterable[str]
      full argument vector including the program name; defaults to sys.argv.
    - header, footer, width: forwarded to render() when help is shown.
    - colorful, fancy: styling of the fault printed on a user error.

    Returns
    - Values on success. Every other outcome ends the process or raises.

    Raises
    - ConfigurationError: when the configuration itself is invalid.
    """
    argv = list(sys.argv if argv is Unset else argv)
    args = strip_program(argv)
    # the stripped argument 0 names the program in the usage line
    program = os.path.basename(argv[0]) if len(args) < len(argv) else Unset

    match parse(config, args):
        case Parsed(values):
            return values
        case HelpRequested():
            Console(highlight=False).out(render(config, header, footer, width, program=program), end="")
            sys.exit(0)
        case Failed(UserError() as fault):
            Console(stderr=True, highlight=False).out(render(config, header, footer, width, program=program), end="")
            trigger(fault, shell=True, colorful=colorful, fancy=fancy, program=program)
        case Failed(fault):
            raise fault


__all__ = (
    "getargs",
    "strip_program",
)
