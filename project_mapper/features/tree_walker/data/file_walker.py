import logging
from pathlib import Path
from typing import List

from project_mapper.core.common.enums import IssueKind
from project_mapper.core.common.errors import StatError
from ..domain.interfaces import IFileWalker
from ..domain.models import FileRecord, IgnorePolicy, WalkIssue, WalkResult
from .ignore_rules import IgnoreRules
from .listing import list_children, open_root, translate_root_error

logger = logging.getLogger(__name__)


def check_depth(max_depth: int) -> int:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise ValueError(f"max_depth must be a non-negative integer, got {max_depth!r}")
    return max_depth


class LocalFileWalker(IFileWalker):
    """
    Depth-first recursive walk over the local filesystem.
    Produces records in directories-first, then lexicographic order.
    """

    def __init__(self, policy: IgnorePolicy, max_depth: int):
        self.rules = IgnoreRules(policy)
        self.max_depth = check_depth(max_depth)

    def walk(self, root: Path) -> WalkResult:
        root = open_root(root)
        result = WalkResult()

        for error in self.rules.errors:
            result.issues.append(WalkIssue(IssueKind.PATTERN, error.pattern, str(error)))

        result.records = self._collect(root, root, "", 0, result)

        if result.partial:
            logger.warning(f"Walk of {root} finished with unreadable subtrees; results are partial")
        logger.debug(f"Walked {root}: {len(result.records)} files, {len(result.issues)} issues")
        return result

    def _collect(self, root: Path, directory: Path, relative: str, depth: int, result: WalkResult) -> List[FileRecord]:
        if depth > self.max_depth:
            return []

        try:
            children = list_children(directory, relative)
        except OSError as e:
            # The root failing is fatal, anything below only loses its subtree
            if depth == 0:
                raise translate_root_error(root, e) from e
            logger.warning(f"Cannot list {relative}: {e}")
            result.issues.append(WalkIssue(IssueKind.LISTING, relative, str(e)))
            return []

        records: List[FileRecord] = []
        for child in children:
            if self.rules.should_ignore(child.name, child.is_dir, child.relative_path):
                continue

            if child.can_descend:
                records.extend(self._collect(root, child.path, child.relative_path, depth + 1, result))
            # A dangling symlink is neither file nor dir, stat it so the failure is reported
            elif not child.is_dir and (child.is_file or child.is_symlink):
                try:
                    size = self._read_size(child.path)
                except StatError as e:
                    logger.warning(f"Skipping {child.relative_path}: {e}")
                    result.issues.append(WalkIssue(IssueKind.STAT, child.relative_path, str(e)))
                    continue
                records.append(FileRecord(path=child.path, relative_path=child.relative_path, size=size))

        return records

    @staticmethod
    def _read_size(path: Path) -> int:
        try:
            return path.stat().st_size
        except OSError as e:
            raise StatError(f"Cannot read metadata of {path}: {e}") from e
