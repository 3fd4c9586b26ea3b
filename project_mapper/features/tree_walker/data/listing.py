import os
import stat
from pathlib import Path
from typing import List

from project_mapper.core.common.errors import NotFoundError, WalkPermissionError
from ..domain.models import DirectoryEntry


def join_relative(parent: str, name: str) -> str:
    """Relative paths always use '/', whatever the host OS."""
    return f"{parent}/{name}" if parent else name


def open_root(root) -> Path:
    """
    Validates the walk root up front.
    Missing or non-directory roots raise NotFoundError, unreadable ones WalkPermissionError.
    """
    root = Path(root).absolute()
    try:
        st = root.stat()
    except FileNotFoundError as e:
        raise NotFoundError(f"Walk root not found: {root}") from e
    except PermissionError as e:
        raise WalkPermissionError(f"Walk root not readable: {root}") from e

    if not stat.S_ISDIR(st.st_mode):
        raise NotFoundError(f"Walk root is not a directory: {root}")
    if not os.access(root, os.R_OK | os.X_OK):
        raise WalkPermissionError(f"Walk root not readable: {root}")
    return root


def translate_root_error(root: Path, error: OSError) -> Exception:
    """Maps a failure to list the root itself onto the walker's fatal errors."""
    if isinstance(error, PermissionError):
        return WalkPermissionError(f"Walk root not readable: {root}")
    return NotFoundError(f"Walk root vanished: {root}")


def list_children(directory: Path, relative: str) -> List[DirectoryEntry]:
    """
    Lists immediate children, directories first, then files,
    each group ordered by name.
    Raises OSError if the directory cannot be listed.
    """
    entries: List[DirectoryEntry] = []
    with os.scandir(directory) as it:
        for item in it:
            entries.append(DirectoryEntry(
                name=item.name,
                path=directory / item.name,
                relative_path=join_relative(relative, item.name),
                is_dir=item.is_dir(),
                is_file=item.is_file(),
                is_symlink=item.is_symlink(),
            ))

    entries.sort(key=lambda e: (not e.is_dir, e.name))
    return entries
