"""
Models package for mdinclude

Contains data structures, error variants and pipeline state.
"""

from .state import ProgramState, pipeline
from .inclusion import Inclusion, InclusionStack, PragmaMatch, Treatment, TreatmentKind
from .errors import (
    MarkdownIncludeError,
    UnreadableInput,
    CircularInclude,
    MissingRequiredConfiguration,
    UnrecognizedOption,
    TocHeadingsError,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "Inclusion",
    "InclusionStack",
    "PragmaMatch",
    "Treatment",
    "TreatmentKind",
    "MarkdownIncludeError",
    "UnreadableInput",
    "CircularInclude",
    "MissingRequiredConfiguration",
    "UnrecognizedOption",
    "TocHeadingsError",
]
