__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'getargs'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .faults import *
from .helper import *
from .options import *
from .outcomes import *
from .parser import *
from .shell import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the option registry
__all__ += options.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser and its outcomes
__all__ += parser.__all__  # type: ignore[attr-defined]
__all__ += outcomes.__all__  # type: ignore[attr-defined]
# Load the exposed API of the help renderer and the shell runner
__all__ += helper.__all__  # type: ignore[attr-defined]
__all__ += shell.__all__  # type: ignore[attr-defined]
