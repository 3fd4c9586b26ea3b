import logging
from pathlib import Path
from typing import Optional

from project_mapper.core.config.schema import MapperConfig
from ..domain.models import DescriptionTable, IgnorePolicy, TreeReport, WalkResult
from ..data.file_walker import LocalFileWalker
from ..data.tree_renderer import TreeRenderer

logger = logging.getLogger(__name__)


def walk(root_dir, ignore_policy: IgnorePolicy, max_depth: int) -> WalkResult:
    """
    Standalone API: flat, ordered list of every non-ignored regular file.

    Raises:
        NotFoundError / WalkPermissionError if root_dir itself is unusable.
    """
    walker = LocalFileWalker(ignore_policy, max_depth)
    return walker.walk(Path(root_dir))


def render_tree(root_dir, ignore_policy: IgnorePolicy, max_depth: int,
                descriptions: Optional[DescriptionTable] = None) -> str:
    """
    Standalone API: box-drawing tree of root_dir, one entry per line.
    Use render_tree_report when skipped subtrees or bad patterns matter.
    """
    return render_tree_report(root_dir, ignore_policy, max_depth, descriptions).text


def render_tree_report(root_dir, ignore_policy: IgnorePolicy, max_depth: int,
                       descriptions: Optional[DescriptionTable] = None) -> TreeReport:
    """
    Same rendering as render_tree, keeping the LISTING and PATTERN issues
    the renderer collected along the way.
    """
    renderer = TreeRenderer(ignore_policy, max_depth, descriptions)
    report = TreeReport(text=renderer.render(Path(root_dir)), issues=list(renderer.issues))
    if report.partial:
        logger.warning(f"Tree of {root_dir} is partial: some subtrees could not be listed")
    return report


def ignore_policy_for(config: MapperConfig) -> IgnorePolicy:
    return IgnorePolicy.from_lists(
        directories=config.ignore.directories,
        files=config.ignore.files,
        patterns=config.ignore.patterns,
    )


def descriptions_for(config: MapperConfig) -> Optional[DescriptionTable]:
    if not config.include_descriptions:
        return None
    return DescriptionTable(
        directories=dict(config.directory_descriptions),
        file_patterns=dict(config.file_pattern_descriptions),
    )


def walk_project(root_dir, config: MapperConfig) -> WalkResult:
    """
    The walk every generator starts from: policy and depth come from the project config.
    """
    return walk(root_dir, ignore_policy_for(config), config.max_depth)
