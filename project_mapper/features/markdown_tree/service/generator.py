import logging
from pathlib import Path

from project_mapper.core.config.schema import MapperConfig
from project_mapper.features.tree_walker.data.listing import open_root
from project_mapper.features.tree_walker.data.tree_renderer import TreeRenderer
from project_mapper.features.tree_walker.service.api import descriptions_for, ignore_policy_for

logger = logging.getLogger(__name__)


def generate_markdown_tree(root_dir, config: MapperConfig) -> str:
    """
    Builds PROJECT-STRUCTURE.md: header, directory layout, then the optional
    principles and changelog sections.
    """
    root = open_root(root_dir)
    info = config.project_info

    renderer = TreeRenderer(ignore_policy_for(config), config.max_depth, descriptions_for(config))
    tree = renderer.render(root)
    for issue in renderer.issues:
        logger.warning(f"Tree rendering issue ({issue.kind.value}) at {issue.path}: {issue.message}")

    markdown = f"# {info.title} {info.version}\n\n"
    markdown += f"{info.description}\n\n"
    markdown += f"## Project Directory Layout\n\n```bash\n{root.name}/\n"
    markdown += tree
    markdown += "```\n"

    tree_output = config.output.markdown_tree
    if tree_output.include_principles and config.principles:
        markdown += _principles_section(config)
    if tree_output.include_changelog and config.changelog:
        markdown += _changelog_section(config)

    return markdown


def _principles_section(config: MapperConfig) -> str:
    lines = ["", "## Structure Principles", ""]
    lines += [f"* **{p.title}**: {p.description}" for p in config.principles]
    return "\n".join(lines) + "\n"


def _changelog_section(config: MapperConfig) -> str:
    lines = ["", "## Change Log", ""]
    lines += [f"* {c.version} ({c.date}): {c.description}" for c in config.changelog]
    return "\n".join(lines) + "\n"
