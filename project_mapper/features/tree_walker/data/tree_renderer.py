import logging
from pathlib import Path
from typing import Iterator, List, Optional

from project_mapper.core.common.enums import IssueKind
from ..domain.interfaces import ITreeRenderer
from ..domain.models import DescriptionTable, IgnorePolicy, WalkIssue
from .descriptions import DescriptionLookup
from .file_walker import check_depth
from .ignore_rules import IgnoreRules
from .listing import list_children, open_root, translate_root_error

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


class TreeRenderer(ITreeRenderer):
    """
    Renders the classic box-drawing tree:

        ├── src
        │   └── index.js
        └── README.md

    Filtering, ordering and the depth cutoff are the same as LocalFileWalker.
    """

    def __init__(self, policy: IgnorePolicy, max_depth: int, descriptions: Optional[DescriptionTable] = None):
        self.rules = IgnoreRules(policy)
        self.max_depth = check_depth(max_depth)
        self.descriptions = DescriptionLookup(descriptions) if descriptions is not None else None
        self.issues: List[WalkIssue] = []

        for error in self.rules.errors:
            self.issues.append(WalkIssue(IssueKind.PATTERN, error.pattern, str(error)))
        if self.descriptions:
            for error in self.descriptions.errors:
                self.issues.append(WalkIssue(IssueKind.PATTERN, error.pattern, str(error)))

    def iter_lines(self, root: Path) -> Iterator[str]:
        """
        Lazy: the root is validated when the first line is requested.
        """
        root = open_root(root)
        yield from self._render(root, root, "", 0, "")

    def render(self, root: Path) -> str:
        lines = list(self.iter_lines(root))
        return "".join(f"{line}\n" for line in lines)

    def _render(self, root: Path, directory: Path, relative: str, depth: int, prefix: str) -> Iterator[str]:
        if depth > self.max_depth:
            return

        try:
            children = list_children(directory, relative)
        except OSError as e:
            if depth == 0:
                raise translate_root_error(root, e) from e
            logger.warning(f"Cannot list {relative}: {e}")
            self.issues.append(WalkIssue(IssueKind.LISTING, relative, str(e)))
            return

        # "Last" is decided among visible siblings so connectors close properly
        visible = [
            child for child in children
            if not self.rules.should_ignore(child.name, child.is_dir, child.relative_path)
        ]

        for index, child in enumerate(visible):
            is_last = index == len(visible) - 1
            connector = LAST_BRANCH if is_last else BRANCH
            yield f"{prefix}{connector}{child.name}{self._annotation(child.relative_path, child.is_dir)}"

            if child.can_descend:
                child_prefix = prefix + (SPACE if is_last else PIPE)
                yield from self._render(root, child.path, child.relative_path, depth + 1, child_prefix)

    def _annotation(self, relative_path: str, is_dir: bool) -> str:
        if not self.descriptions:
            return ""
        text = self.descriptions.describe(relative_path, is_dir)
        return f" # {text}" if text else ""
