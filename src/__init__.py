"""
mdinclude - Markdown include-pragma expander

Merges reusable markdown fragments, code and text files into a single
document via full-line @[treatment](path) pragmas.
"""

__version__ = "1.0.0"

from .lib import Includer, LOG, state_connectToLogger
from .config import AppSettings
from .models import (
    MarkdownIncludeError,
    UnreadableInput,
    CircularInclude,
    MissingRequiredConfiguration,
    UnrecognizedOption,
    TocHeadingsError,
)

__all__ = [
    "Includer",
    "AppSettings",
    "LOG",
    "state_connectToLogger",
    "MarkdownIncludeError",
    "UnreadableInput",
    "CircularInclude",
    "MissingRequiredConfiguration",
    "UnrecognizedOption",
    "TocHeadingsError",
    "__version__",
]
