from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator
from .models import WalkResult

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem into a flat list of files.
    """
    @abstractmethod
    def walk(self, root: Path) -> WalkResult:
        """
        Returns every non-ignored regular file below root.
        Should report unreadable files/directories as issues instead of raising.
        """
        pass

class ITreeRenderer(ABC):
    """
    Contract for rendering a directory tree as text.
    """
    @abstractmethod
    def iter_lines(self, root: Path) -> Iterator[str]:
        """
        Yields one connector-prefixed line per visible entry, lazily.
        """
        pass
