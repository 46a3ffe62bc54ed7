"""
mdinclude - Markdown include-pragma expander

Merges reusable markdown fragments, code and text files into a single
document via full-line @[treatment](path) pragmas.
"""

__version__ = "1.0.0"

from .engine import Includer, lines_include
from .scanner import pragma_scan, treatment_parse
from .backtrace import backtrace_build
from .log import LOG, WARN, state_connectToLogger

__all__ = [
    "Includer",
    "lines_include",
    "pragma_scan",
    "treatment_parse",
    "backtrace_build",
    "LOG",
    "WARN",
    "state_connectToLogger",
    "__version__",
]
