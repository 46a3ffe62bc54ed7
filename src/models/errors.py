"""
Error models for mdinclude

A closed family of fatal errors. Each variant carries its structured payload
(offending path, inclusion chain, option name) and renders its fixed-format
message on demand, so callers can either print ``str(error)`` or inspect
the fields directly.

Variants:
    UnreadableInput              - template or includee cannot be read
    CircularInclude              - markdown inclusion re-enters an active file
    MissingRequiredConfiguration - operation needs settings that were not given
    UnrecognizedOption           - caller supplied an unknown setting
    TocHeadingsError             - page TOC source does not start at level 1
"""

from pathlib import Path
from typing import List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .inclusion import Inclusion


UNREADABLE_INPUT_LABEL = "Could not read input file."
MISSING_INCLUDEE_LABEL = "Could not read include file,"
CIRCULAR_LABEL = "Includes are circular:"


class MarkdownIncludeError(Exception):
    """Root of all fatal mdinclude errors"""

    def message_build(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message_build()


class UnreadableInput(MarkdownIncludeError):
    """
    A template or an includee could not be opened for reading

    Attributes:
        path: The file that could not be read
        inclusions: Chain of inclusions (outermost first, offending one last)
                    that led to the read. Empty when the template itself is
                    unreadable.
        root: Project root used to display relative paths in the backtrace
    """

    def __init__(
        self,
        path: Path,
        inclusions: Sequence["Inclusion"] = (),
        root: Optional[Path] = None,
    ) -> None:
        self.path = Path(path)
        self.inclusions: List["Inclusion"] = list(inclusions)
        self.root = root
        super().__init__(self.message_build())

    def message_build(self) -> str:
        if not self.inclusions:
            return "\n".join([UNREADABLE_INPUT_LABEL, f'"{self.path}"'])
        from ..lib.backtrace import backtrace_build
        return "\n".join([MISSING_INCLUDEE_LABEL, backtrace_build(self.inclusions, self.root)])


class CircularInclude(MarkdownIncludeError):
    """
    A markdown inclusion would re-enter a file already being expanded

    Attributes:
        inclusions: The active stack plus the cycle-closing inclusion, last
        root: Project root used to display relative paths in the backtrace
    """

    def __init__(self, inclusions: Sequence["Inclusion"], root: Optional[Path] = None) -> None:
        self.inclusions: List["Inclusion"] = list(inclusions)
        self.root = root
        super().__init__(self.message_build())

    def message_build(self) -> str:
        from ..lib.backtrace import backtrace_build
        return "\n".join([CIRCULAR_LABEL, backtrace_build(self.inclusions, self.root)])


class MissingRequiredConfiguration(MarkdownIncludeError):
    """An operation needs settings (e.g. repo_user/repo_name) that are unset"""

    def __init__(self, names: Sequence[str]) -> None:
        self.names: List[str] = list(names)
        super().__init__(self.message_build())

    def message_build(self) -> str:
        joined = " and ".join(self.names)
        return f"Settings for {joined} must be defined."


class UnrecognizedOption(MarkdownIncludeError):
    """The caller supplied a configuration key that is not a known setting"""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(self.message_build())

    def message_build(self) -> str:
        return f"Unknown option: {self.name}"


class TocHeadingsError(MarkdownIncludeError):
    """The first heading seen while building a page TOC was not level 1"""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(self.message_build())

    def message_build(self) -> str:
        return f"First heading must be level 1, not '{self.line}'"
