"""
Circular include detection

Only markdown inclusions recurse, so only they are pushed onto the
inclusion stack. Before a push, the new includee is compared by canonical
path against every file currently being expanded: the template at the root
of the chain plus every stacked includee. Differently spelled paths
(including symlinks) to the same file are recognized as the same file.
"""

from pathlib import Path
from typing import List, Optional

from ..models.inclusion import Inclusion, InclusionStack
from ..models.errors import CircularInclude
from .paths import path_canonicalize
from .log import LOG


def activeFiles_list(stack: InclusionStack, inclusion: Inclusion) -> List[Path]:
    """
    Files being expanded when `inclusion` is met, outermost first.

    The template is never pushed itself; it is the includer of the
    outermost stacked inclusion, or of `inclusion` when the stack is empty.
    """
    template = stack[0].includer_path if stack else inclusion.includer_path
    return [template, *(active.resolved_path for active in stack)]


def inclusion_checkAndPush(
    stack: InclusionStack, inclusion: Inclusion, root: Optional[Path] = None
) -> None:
    """
    Push a markdown inclusion unless it would close a cycle.

    Args:
        stack: Active inclusion chain, innermost last
        inclusion: New markdown inclusion
        root: Project root for display paths in the error

    Raises:
        CircularInclude: If the includee is already being expanded. The
            error carries the stack plus the new inclusion; the stack itself
            is left unchanged.
    """
    real_path = path_canonicalize(inclusion.resolved_path)
    if real_path is not None:
        for active in activeFiles_list(stack, inclusion):
            if path_canonicalize(active) == real_path:
                raise CircularInclude([*stack, inclusion], root=root)
    stack.append(inclusion)
    LOG(f"Inclusion depth {len(stack)}: {inclusion.cited_path}", level=3)


def inclusion_pop(stack: InclusionStack) -> Inclusion:
    """Remove and return the innermost inclusion"""
    return stack.pop()
