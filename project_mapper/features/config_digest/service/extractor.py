import logging
from collections import defaultdict
from typing import Dict, List

from project_mapper.core.config.schema import MapperConfig
from project_mapper.features.tree_walker.domain.models import FileRecord
from project_mapper.features.tree_walker.service.api import walk_project
from ..data.categories import categorize, enabled_categories
from ..domain.models import ConfigCategory

logger = logging.getLogger(__name__)


def extract_config_files(root_dir, config: MapperConfig) -> str:
    """
    Builds CONFIG-FILES.md: the content of every well-known config file,
    grouped by category.
    """
    categories = enabled_categories(config.output.config_files.include_files)
    if not categories:
        return "# Config Files\n\nNo config files were selected for extraction."

    result = walk_project(root_dir, config)

    grouped: Dict[str, List[FileRecord]] = defaultdict(list)
    by_name: Dict[str, ConfigCategory] = {}
    for record in result.records:
        category = categorize(record.name.lower(), categories)
        if category:
            grouped[category.name].append(record)
            by_name[category.name] = category

    ordered = sorted(grouped, key=str.lower)

    markdown = "# Config Files\n\n"
    markdown += "This file contains the content of key configuration files in the project.\n\n"

    markdown += "## Table of Contents\n\n"
    for name in ordered:
        category = by_name[name]
        markdown += f"- [{category.title}](#{category.anchor})\n"

    for name in ordered:
        markdown += f"\n## {by_name[name].title}\n\n"
        for record in sorted(grouped[name], key=lambda r: r.relative_path):
            markdown += _file_section(record)

    return markdown


def _file_section(record: FileRecord) -> str:
    section = f"### {record.relative_path}\n\n"
    try:
        content = record.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {record.relative_path}: {e}")
        return section + f"> Error reading file: {e}\n\n"

    extension = record.path.suffix.lstrip(".")
    return section + f"```{extension}\n{content.strip()}\n```\n\n"
