"""
Inclusion data models

Type-safe structures describing a pragma occurrence, the treatment it
requests, and the chain of inclusions active during expansion.
"""

from enum import Enum
from pathlib import Path
from dataclasses import dataclass, field
from typing import List


class TreatmentKind(Enum):
    """
    Rendering modes for an included file

    MARKDOWN splices the includee in place and honors its own pragmas;
    the other kinds wrap the includee verbatim and never recurse.
    """
    MARKDOWN = "markdown"    # @[markdown](part.md)
    COMMENT = "comment"      # @[comment](notes.txt)
    PRE = "pre"              # @[pre](output.txt)
    CODE = "code"            # @[python](example.py), @[code_block](data.xyz)


@dataclass(frozen=True)
class Treatment:
    """
    A treatment requested by a pragma

    Attributes:
        kind: Rendering mode
        language: Fence tag for CODE treatments ("" for a generic block);
                  always "" for the other kinds

    Example:
        @[ruby](foo.rb)        -> Treatment(TreatmentKind.CODE, "ruby")
        @[:code_block](foo.x)  -> Treatment(TreatmentKind.CODE, "")
        @[:markdown](foo.md)   -> Treatment(TreatmentKind.MARKDOWN)
    """
    kind: TreatmentKind
    language: str = ""

    @property
    def label(self) -> str:
        """Name used in begin/end markers"""
        if self.kind is TreatmentKind.CODE:
            return self.language or "code_block"
        return self.kind.value


@dataclass(frozen=True)
class PragmaMatch:
    """
    Result of recognizing an include pragma on one line

    Attributes:
        treatment: Treatment label as written (e.g. ":markdown", "ruby")
        cited_path: Includee path as written (may be relative)
    """
    treatment: str
    cited_path: str


@dataclass(frozen=True)
class Inclusion:
    """
    One pragma occurrence being processed

    Attributes:
        description: Literal pragma text, used verbatim in backtraces
        includer_path: Path of the document holding the pragma
        includer_line: 1-based line number of the pragma in the includer
        cited_path: Includee path as written in the pragma
        resolved_path: Absolute, normalized includee path. Computed once
                       from includer_path and cited_path; never recomputed.
    """
    description: str
    includer_path: Path
    includer_line: int
    cited_path: str
    resolved_path: Path = field(init=False)

    def __post_init__(self) -> None:
        from ..lib.paths import path_resolve
        object.__setattr__(self, "includer_path", Path(self.includer_path))
        object.__setattr__(self, "resolved_path", path_resolve(self.includer_path, self.cited_path))


# Chain of markdown inclusions currently being expanded, innermost last
InclusionStack = List[Inclusion]
