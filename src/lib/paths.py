"""
Path resolution for includers and includees

Cited paths are relative to the directory of the document holding the
pragma. Resolution is lexical (no filesystem access); canonicalization
follows symlinks and is only possible for files that exist.
"""

import os
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def path_resolve(includer_path: PathLike, cited_path: PathLike) -> Path:
    """
    Resolve a cited path against its includer's directory.

    The target need not exist. ``.`` and ``..`` segments are collapsed
    lexically; symlinks are left alone.

    Args:
        includer_path: Path of the document holding the pragma
        cited_path: Path as written in the pragma

    Returns:
        Absolute, normalized path of the includee

    Example:
        >>> path_resolve("/docs/guide/index.md", "../shared/./intro.md")
        PosixPath('/docs/shared/intro.md')
    """
    includer_dir = Path(os.path.abspath(includer_path)).parent
    return Path(os.path.normpath(includer_dir / cited_path))


def path_canonicalize(path: PathLike) -> Optional[Path]:
    """
    Resolve symlinks in an existing path.

    Args:
        path: Path to canonicalize

    Returns:
        Canonical path, or None if the path does not exist. The caller
        reports the missing file when it actually tries to read it.
    """
    path = Path(path)
    if not path.exists():
        return None
    return path.resolve(strict=True)


def path_inProject(path: PathLike, root: Optional[PathLike]) -> str:
    """
    Express a path relative to the project root, for display.

    Args:
        path: Path to display
        root: Project root; None leaves the path unchanged

    Returns:
        Root-relative path string when path lies beneath root, else the
        path as given
    """
    if root is None:
        return str(path)
    absolute = Path(os.path.abspath(path))
    for base in (Path(os.path.abspath(root)), Path(root).resolve()):
        try:
            return str(absolute.relative_to(base))
        except ValueError:
            continue
    return str(path)
