"""
Backtrace formatting for inclusion errors

Renders the inclusion chain that led to a fatal error, innermost first:

      Backtrace (innermost include first):
        Level 0:
          Includer:
            Location: docs/b.md:3
            Include description: @[:markdown](a.md)
          Includee:
            File path: docs/a.md
        Level 1:
          ...
"""

from pathlib import Path
from typing import List, Optional, Sequence

from ..models.inclusion import Inclusion
from .paths import path_inProject

BACKTRACE_LABEL = '  Backtrace (innermost include first):'
LEVEL_LABEL = '    Level'
LEVEL_INDENTATION = 3

# Detail lines per level, after the level line
LEVEL_LINE_COUNT = 5


def indentation(level: int) -> str:
    return '  ' * level


def inclusion_toLines(inclusion: Inclusion, root: Optional[Path] = None) -> List[str]:
    """Five detail lines describing one inclusion"""
    outer = indentation(LEVEL_INDENTATION)
    inner = indentation(LEVEL_INDENTATION + 1)
    includer = path_inProject(inclusion.includer_path, root)
    includee = path_inProject(inclusion.resolved_path, root)
    return [
        f"{outer}Includer:",
        f"{inner}Location: {includer}:{inclusion.includer_line}",
        f"{inner}Include description: {inclusion.description}",
        f"{outer}Includee:",
        f"{inner}File path: {includee}",
    ]


def backtrace_build(inclusions: Sequence[Inclusion], root: Optional[Path] = None) -> str:
    """
    Format an inclusion chain as a backtrace block.

    Args:
        inclusions: Chain of inclusions, outermost first
        root: Project root for relative display paths

    Returns:
        Multi-line backtrace, levels numbered from 0 (innermost)
    """
    lines = [BACKTRACE_LABEL]
    for index, inclusion in enumerate(reversed(inclusions)):
        lines.append(f"{LEVEL_LABEL} {index}:")
        lines.extend(inclusion_toLines(inclusion, root))
    return "\n".join(lines)
