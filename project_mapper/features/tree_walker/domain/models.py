from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple
from project_mapper.core.common.enums import IssueKind

@dataclass(frozen=True)
class FileRecord:
    """
    One non-ignored regular file found by the walker.
    """
    path: Path            # absolute
    relative_path: str    # "/"-separated, relative to the walk root
    size: int             # bytes, read at visit time

    @property
    def name(self) -> str:
        return self.relative_path.rsplit("/", 1)[-1]

    @property
    def parent(self) -> str:
        """Relative directory of the file, '.' for files at the root."""
        head, sep, _ = self.relative_path.rpartition("/")
        return head if sep else "."

@dataclass(frozen=True)
class DirectoryEntry:
    """
    A child of a directory, produced transiently during traversal.
    Symlinked directories report is_dir=True but are never entered.
    """
    name: str
    path: Path
    relative_path: str
    is_dir: bool
    is_file: bool
    is_symlink: bool = False

    @property
    def can_descend(self) -> bool:
        return self.is_dir and not self.is_symlink

@dataclass(frozen=True)
class IgnorePolicy:
    """
    Immutable description of what the walker skips.
    Literal sets are checked by kind (directory vs file), patterns against
    both the bare name and the relative path.
    """
    directories: FrozenSet[str] = frozenset()
    files: FrozenSet[str] = frozenset()
    patterns: Tuple[str, ...] = ()

    @classmethod
    def from_lists(cls, directories=(), files=(), patterns=()) -> "IgnorePolicy":
        """
        Literal entries holding a '*' cannot match exactly, so they are
        promoted to patterns (e.g. '*.log' listed among files).
        """
        literal_dirs = {d for d in directories if "*" not in d}
        literal_files = {f for f in files if "*" not in f}
        globbed = [p for p in (*directories, *files) if "*" in p]

        merged: List[str] = []
        for pattern in (*patterns, *globbed):
            if pattern not in merged:
                merged.append(pattern)

        return cls(
            directories=frozenset(literal_dirs),
            files=frozenset(literal_files),
            patterns=tuple(merged),
        )

@dataclass(frozen=True)
class DescriptionTable:
    """
    Optional annotations for the rendered tree.
    directories: exact relative path -> text
    file_patterns: regular expression -> text (first match wins)
    """
    directories: Dict[str, str] = field(default_factory=dict)
    file_patterns: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class WalkIssue:
    """
    A non-fatal problem met during traversal.
    """
    kind: IssueKind
    path: str
    message: str

@dataclass
class WalkResult:
    """
    Report returned after a walk completes.
    """
    records: List[FileRecord] = field(default_factory=list)
    issues: List[WalkIssue] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        """True if at least one subtree could not be listed."""
        return any(issue.kind == IssueKind.LISTING for issue in self.issues)

    def __iter__(self):
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

@dataclass
class TreeReport:
    """
    Rendered tree text plus the problems met while rendering it.
    """
    text: str = ""
    issues: List[WalkIssue] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return any(issue.kind == IssueKind.LISTING for issue in self.issues)
